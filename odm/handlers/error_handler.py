# ========================================================================
# File:       odm/handlers/error_handler.py
# Purpose:    Formatira greške za ErrorManager
# Author:     Aleksandar Popovic
# Created:    2025-08-07
# Updated:    2025-08-18 (traceback same greške, ne poslednje obrađene)
# ========================================================================

import traceback


class ErrorHandler:
    @staticmethod
    def format_error(error: Exception) -> str:
        return f"{type(error).__name__}: {error}"

    @staticmethod
    def get_traceback(error: Exception) -> str:
        if error.__traceback__ is None:
            return ""
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
