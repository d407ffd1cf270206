# ============================================================================
# File:       odm/validation/message.py
# Purpose:    Nepromenljiva poruka validacije (tekst, polje, tip validatora)
# Author:     Aleksandar Popovic
# Created:    2025-08-18
# ============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Message:
    message: str
    field: Optional[str] = None
    type: Optional[str] = None

    def __str__(self) -> str:
        return self.message
