# =============================================================================
# File:       odm/handlers/event_handler.py
# Purpose:    Nizak sloj: registar slušalaca po tipu događaja (po instanci)
# Author:     Aleksandar Popović
# Created:    2025-08-07
# Updated:    2025-08-18 (stanje po instanci umesto klasnog globala)
# =============================================================================

from __future__ import annotations
from typing import Any, Dict, List, Optional


class EventHandler:
    def __init__(self):
        self._listeners: Dict[str, List[Any]] = {}

    def register(self, event_type: str, handler: Any):
        """Dodaje slušaoca za tip događaja (komponenta ili komponenta:događaj)."""
        self._listeners.setdefault(event_type, []).append(handler)

    def remove(self, event_type: str, handler: Any) -> bool:
        """Uklanja prvo pojavljivanje slušaoca. Vraća False ako ga nema."""
        listeners = self._listeners.get(event_type, [])
        if handler in listeners:
            listeners.remove(handler)
            if not listeners:
                self._listeners.pop(event_type, None)
            return True
        return False

    def remove_listener(self, event_type: str, index: int):
        listeners = self._listeners.get(event_type)
        if listeners is not None and 0 <= index < len(listeners):
            listeners.pop(index)

    def clear_event(self, event_type: str):
        self._listeners.pop(event_type, None)

    def clear_all(self):
        self._listeners.clear()

    def get_listeners(self, event_type: Optional[str] = None):
        """Kopija liste za jedan tip, ili ceo registar."""
        if event_type:
            return list(self._listeners.get(event_type, []))
        return self._listeners
