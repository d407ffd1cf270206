# ============================================================================
# File:       odm/handlers/log_handler.py
# Purpose:    Pisanje logova u fajl na osnovu nivoa
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18 (putanja se čita pri svakom upisu)
# ============================================================================

import os
from datetime import datetime
from odm.config.env import EnvLoader


class LogHandler:
    @staticmethod
    def log_file_path() -> str:
        return EnvLoader.get("LOG_FILE_PATH")

    @staticmethod
    def _ensure_log_dir(path: str):
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)

    @staticmethod
    def _write(level, message):
        try:
            path = LogHandler.log_file_path()
            LogHandler._ensure_log_dir(path)
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"[{level.upper()}] {timestamp} - {message}\n")
        except OSError as e:
            print(f"❌ Neuspelo logovanje: {e}")

    @staticmethod
    def debug(message):
        LogHandler._write("DEBUG", message)

    @staticmethod
    def info(message):
        LogHandler._write("INFO", message)

    @staticmethod
    def success(message):
        LogHandler._write("SUCCESS", message)

    @staticmethod
    def warning(message):
        LogHandler._write("WARNING", message)

    @staticmethod
    def error(message):
        LogHandler._write("ERROR", message)

    @staticmethod
    def critical(message):
        LogHandler._write("CRITICAL", message)
