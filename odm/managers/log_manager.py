# ============================================================================
# File:       odm/managers/log_manager.py
# Purpose:    LogManager: klasni API sloj sa pragom nivoa (LOG_LEVEL)
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18
# ============================================================================

from odm.config.env import EnvLoader
from odm.handlers.log_handler import LogHandler
from odm.helpers.core_helper import safe_call

LEVELS = ("DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LogManager:
    _log_entries = []

    @classmethod
    def initialize(cls):
        cls._log_entries = []

    @staticmethod
    def _threshold() -> int:
        level = (EnvLoader.get("LOG_LEVEL") or "info").upper()
        return LEVELS.index(level) if level in LEVELS else LEVELS.index("INFO")

    @classmethod
    def create(cls, level: str, message: str):
        """
        Pamti unos u memoriji uvek, a u fajl ga šalje samo ako je nivo
        >= LOG_LEVEL. Nepoznat nivo ide direktno kroz _write.
        """
        level_upper = (level or "").upper()
        cls._log_entries.append((level_upper, message))

        if level_upper in LEVELS and LEVELS.index(level_upper) < cls._threshold():
            return

        method = getattr(LogHandler, level_upper.lower(), None)
        if callable(method):
            safe_call(method, message)
            return
        safe_call(LogHandler._write, level_upper, message)

    @classmethod
    def read(cls, last_only: bool = False):
        if last_only and cls._log_entries:
            return cls._log_entries[-1]
        return cls._log_entries

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._log_entries.clear()
        elif 0 <= index < len(cls._log_entries):
            cls._log_entries.pop(index)

    # === Shortcut metode ===

    @classmethod
    def debug(cls, message: str):
        cls.create("DEBUG", message)

    @classmethod
    def info(cls, message: str):
        cls.create("INFO", message)

    @classmethod
    def success(cls, message: str):
        cls.create("SUCCESS", message)

    @classmethod
    def warning(cls, message: str):
        cls.create("WARNING", message)

    @classmethod
    def error(cls, message: str):
        cls.create("ERROR", message)

    @classmethod
    def critical(cls, message: str):
        cls.create("CRITICAL", message)
