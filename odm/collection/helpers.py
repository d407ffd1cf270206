# =============================================================================
# File:        odm/collection/helpers.py
# Purpose:     Zajednički helper-i za CollectionManager i Collection
# Author:      Aleksandar Popović
# Created:     2025-08-18
# =============================================================================
from __future__ import annotations

from odm.errors import InvalidArgumentError
from odm.helpers.core_helper import is_model_instance
from odm.managers.error_manager import ErrorManager
from odm.managers.log_manager import LogManager


def _log(level: str, msg: str):
    getattr(LogManager, level)(f"[CollectionManager] {msg}")


def _require_instance(model, operation: str):
    """Baca InvalidArgumentError ako model nije instanca (None, string, klasa)."""
    if is_model_instance(model):
        return
    error = InvalidArgumentError(f"{operation}: model must be an object instance, got {model!r}")
    ErrorManager.create(error)
    _log("warning", f"{operation} refused: {model!r} is not a model instance")
    raise error
