# ============================================================================
# File:       odm/validation/validation.py
# Purpose:    Validation: kontekst validacije (vrednosti polja + poruke)
# Author:     Aleksandar Popovic
# Created:    2025-08-13
# Updated:    2025-08-18 (validatori po polju umesto šeme)
# ============================================================================

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple

from odm.managers.log_manager import LogManager
from odm.validation.message import Message
from odm.validation.validator import Validator


class Validation:
    """
    Drži listu (polje, validator) parova i skuplja poruke.

        validation = Validation()
        validation.add("date", Regex({"pattern": r"\\d{4}-\\d{2}-\\d{2}"}))
        messages = validation.validate({"date": "2020-01-01"})
    """

    def __init__(self, validators: Optional[Iterable[Tuple[str, Validator]]] = None):
        self._validators: List[Tuple[str, Validator]] = list(validators or [])
        self._messages: List[Message] = []
        self._data: Optional[Dict[str, Any]] = None
        self._entity: Any = None

    def add(self, field: str, validator: Validator) -> "Validation":
        self._validators.append((field, validator))
        return self

    def rules(self, field: str, validators: Iterable[Validator]) -> "Validation":
        for validator in validators:
            self.add(field, validator)
        return self

    def get_validators(self) -> List[Tuple[str, Validator]]:
        return list(self._validators)

    def validate(self, data: Optional[Dict[str, Any]] = None, entity: Any = None) -> List[Message]:
        self._messages = []
        self._data = data
        self._entity = entity

        for field, validator in self._validators:
            if validator.validate(self, field):
                continue
            if validator.get_option("cancel_on_fail"):
                break

        if self._messages:
            LogManager.warning(
                f"[Validation] failed: {[(m.field, m.message) for m in self._messages]}"
            )
        return self.get_messages()

    def get_value(self, field: str) -> Any:
        """Vrednost iz data dict-a, zatim atribut entiteta, inače None."""
        if self._data is not None and field in self._data:
            return self._data[field]
        if self._entity is not None:
            reader = getattr(self._entity, "read_attribute", None)
            if callable(reader):
                return reader(field)
            return getattr(self._entity, field, None)
        return None

    def append_message(self, message: Message):
        self._messages.append(message)

    def get_messages(self) -> List[Message]:
        return list(self._messages)

    def get_entity(self) -> Any:
        return self._entity
