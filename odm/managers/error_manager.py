# ========================================================================
# File:       odm/managers/error_manager.py
# Purpose:    Evidencija grešaka (memorija + log + dev ispis)
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18
# ========================================================================

from odm.config.env import EnvLoader
from odm.handlers.error_handler import ErrorHandler
from odm.managers.log_manager import LogManager
from odm.helpers.core_helper import safe_call


class ErrorManager:
    _errors = []
    _dev_mode = None

    @classmethod
    def initialize(cls, dev_mode: bool = None):
        cls._errors = []
        cls._dev_mode = dev_mode

    @classmethod
    def dev_mode(cls) -> bool:
        if cls._dev_mode is None:
            return EnvLoader.get_bool("DEV_MODE")
        return cls._dev_mode

    @classmethod
    def create(cls, error: Exception):
        cls._errors.append(error)
        formatted = ErrorHandler.format_error(error)
        trace = ErrorHandler.get_traceback(error)

        if cls.dev_mode():
            print(f"[ERROR]: {formatted}\n{trace}")

        safe_call(LogManager.error, f"{formatted}\n{trace}".rstrip())

    @classmethod
    def read(cls, last_only: bool = True):
        if last_only:
            return cls._errors[-1] if cls._errors else None
        return cls._errors

    @classmethod
    def delete(cls, index: int = None):
        if index is None:
            cls._errors.clear()
        elif 0 <= index < len(cls._errors):
            cls._errors.pop(index)
