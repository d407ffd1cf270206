# ============================================================================
# File:       odm/validation/regex.py
# Purpose:    Regex validator: vrednost mora CELA da odgovara šablonu
# Author:     Aleksandar Popovic
# Created:    2025-08-18
# ============================================================================

from __future__ import annotations
import re
from typing import Any, Optional, Pattern

from odm.validation.message import Message
from odm.validation.validator import Validator

DEFAULT_MESSAGE = "Value of field ':field' doesn't match regular expression"


class Regex(Validator):
    """
    Opcije:
      pattern      (obavezno) string ili kompajliran re.Pattern
      message      tekst poruke; ':field' se menja imenom polja
      label        ime polja u poruci
      allow_empty  None i "" prolaze bez provere
    """

    _UNRESOLVED = object()

    def __init__(self, options=None):
        super().__init__(options)
        self._compiled_pattern = self._UNRESOLVED

    def set_option(self, key: str, value: Any):
        super().set_option(key, value)
        if key == "pattern":
            self._compiled_pattern = self._UNRESOLVED

    def validate(self, validation, attribute: str) -> bool:
        value = validation.get_value(attribute)

        if self.get_option("allow_empty") and value in (None, ""):
            return True

        if self._matches(value):
            return True

        validation.append_message(
            Message(self.prepare_message(DEFAULT_MESSAGE, attribute), attribute, "Regex")
        )
        return False

    def _compiled(self) -> Optional[Pattern]:
        """Kompajlira šablon jednom po vrednosti opcije; neuspeh daje None."""
        if self._compiled_pattern is self._UNRESOLVED:
            self._compiled_pattern = self._compile(self.get_option("pattern"))
        return self._compiled_pattern

    @staticmethod
    def _compile(pattern: Any) -> Optional[Pattern]:
        if isinstance(pattern, re.Pattern):
            return pattern
        if not isinstance(pattern, str):
            return None
        try:
            return re.compile(pattern)
        except (re.error, OverflowError, RecursionError):
            # npr. a{4294967296} ili preduboko ugnježdene grupe
            return None

    def _matches(self, value: Any) -> bool:
        # neispravan ili izostavljen šablon znači neuspeh, ne izuzetak
        compiled = self._compiled()
        if compiled is None:
            return False

        text = "" if value is None else str(value)
        if isinstance(compiled.pattern, bytes):
            text = text.encode("utf-8")

        found = compiled.search(text)
        return found is not None and found.group(0) == text
