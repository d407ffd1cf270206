# =============================================================================
# File:       odm/managers/event_manager.py
# Purpose:    EventsManager: attach/detach/fire iznad EventHandler-a
# Author:     Aleksandar Popović
# Created:    2025-08-07
# Updated:    2025-08-18
# =============================================================================

from __future__ import annotations
from typing import Any, Optional

from odm.errors import EventsError
from odm.handlers.event_handler import EventHandler
from odm.managers.error_manager import ErrorManager


class Event:
    """Jedan okinut događaj; slušalac ga može zaustaviti ako je cancelable."""

    def __init__(self, event_type: str, source: Any, data: Any = None, cancelable: bool = True):
        self.type = event_type
        self.source = source
        self.data = data
        self.cancelable = cancelable
        self._stopped = False

    def stop(self):
        if not self.cancelable:
            raise EventsError(f"Trying to cancel a non-cancelable event '{self.type}'")
        self._stopped = True

    def is_stopped(self) -> bool:
        return self._stopped

    def __repr__(self):
        return f"Event(type={self.type!r}, cancelable={self.cancelable})"


class EventsManager:
    def __init__(self):
        self._handler = EventHandler()

    def attach(self, event_type: str, handler: Any):
        """Registruje slušaoca. event_type je 'komponenta' ili 'komponenta:događaj'."""
        self._handler.register(event_type, handler)

    def on(self, event_type: str, handler: Any):
        """Alias za attach()."""
        self.attach(event_type, handler)

    def detach(self, event_type: str, handler: Any) -> bool:
        return self._handler.remove(event_type, handler)

    def detach_all(self, event_type: Optional[str] = None):
        if event_type is None:
            self._handler.clear_all()
        else:
            self._handler.clear_event(event_type)

    def get_listeners(self, event_type: str):
        return self._handler.get_listeners(event_type)

    def has_listeners(self, event_type: str) -> bool:
        return bool(self._handler.get_listeners(event_type))

    def fire(self, event_type: str, source: Any, data: Any = None, cancelable: bool = True):
        """
        Okida događaj: prvo slušaoci komponente ("collection"), zatim slušaoci
        punog imena ("collection:beforeSave"). Vraća povratnu vrednost
        poslednjeg slušaoca ili None ako niko ne sluša.
        """
        if not isinstance(event_type, str) or ":" not in event_type:
            raise EventsError(f"Invalid event type {event_type!r}")

        component, event_name = event_type.split(":", 1)
        event = Event(event_name, source, data, cancelable)

        status = None
        for key in (component, event_type):
            for handler in self._handler.get_listeners(key):
                status = self._call(handler, event, source, data)
                if event.is_stopped():
                    return status
        return status

    @staticmethod
    def _call(handler: Any, event: Event, source: Any, data: Any):
        try:
            if callable(handler):
                return handler(event, source, data)
            method = getattr(handler, event.type, None)
            if callable(method):
                return method(event, source, data)
            return None
        except EventsError:
            raise
        except Exception as e:
            # greška jednog slušaoca ne prekida ostale
            ErrorManager.create(e)
            return None
