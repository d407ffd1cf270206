# ============================================================================
# File:       odm/validation/validator.py
# Purpose:    Bazni validator sa opcijama (pattern, message, label, ...)
# Author:     Aleksandar Popovic
# Created:    2025-08-13
# Updated:    2025-08-18
# ============================================================================

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Validator(ABC):
    """
    Validator dobija opcije u konstruktoru i proverava jedno polje:
    validate(validation, attribute) -> bool. Neuspeh se prijavljuje kroz
    validation.append_message(...), nikad bacanjem izuzetka.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self._options: Dict[str, Any] = dict(options or {})

    def get_option(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def set_option(self, key: str, value: Any):
        self._options[key] = value

    def has_option(self, key: str) -> bool:
        return key in self._options

    def prepare_message(self, default: str, attribute: str) -> str:
        """Opcija 'message' ima prednost; ':field' se menja labelom ili imenom polja."""
        template = self.get_option("message") or default
        label = self.get_option("label") or attribute
        return template.replace(":field", str(label))

    @abstractmethod
    def validate(self, validation, attribute: str) -> bool:
        """Vraća True ako je vrednost polja ispravna."""
