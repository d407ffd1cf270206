# =============================================================================
# File:        odm/collection/model.py
# Purpose:     Bazna Collection klasa (ODM model) iznad CollectionManager-a
# Author:      Aleksandar Popović
# Created:     2025-08-08
# Updated:     2025-08-18
# =============================================================================

from __future__ import annotations
from typing import Any, List, Optional

from odm.errors import CollectionError
from odm.helpers.core_helper import has_hook
from odm.validation.message import Message
from odm.validation.validation import Validation


class Collection:
    """
    Bazni model:
    - pri konstrukciji se registruje kod CollectionManager-a (initialize()
      podklase se poziva samo prvi put za tu klasu),
    - konekcija, implicitni ObjectId i custom eventi idu kroz menadžer,
    - validate(Validation) čuva poruke na instanci.

    Podklasa može da deklariše:
      source = "robots"               # ime kolekcije
      __collection_key__ = "robot"    # eksplicitan identifikator tipa
    """

    source: Optional[str] = None

    def __init__(self, dependency_injector=None, manager=None):
        if manager is None:
            if dependency_injector is None:
                raise CollectionError(
                    "A dependency injection container is required to obtain the services related to the ODM"
                )
            manager = dependency_injector.get_shared("collectionManager")

        self._dependency_injector = dependency_injector or manager.get_dependency_injector()
        self._collection_manager = manager
        self._error_messages: List[Message] = []
        manager.initialize(self)

    # ---------- Servisi ----------
    def get_di(self):
        return self._dependency_injector

    def get_collection_manager(self):
        return self._collection_manager

    def get_source(self) -> str:
        return self.source or type(self).__name__.lower()

    # ---------- Konekcija / ObjectId ----------
    def set_connection_service(self, service_name: str):
        self._collection_manager.set_connection_service(self, service_name)
        return self

    def get_connection_service(self) -> str:
        return self._collection_manager.get_connection_service(self)

    def get_connection(self):
        return self._collection_manager.get_connection(self)

    def use_implicit_object_ids(self, use_implicit: bool):
        self._collection_manager.use_implicit_object_ids(self, use_implicit)

    def is_using_implicit_object_ids(self) -> bool:
        return self._collection_manager.is_using_implicit_object_ids(self)

    # ---------- Eventi ----------
    def set_events_manager(self, events_manager):
        self._collection_manager.set_custom_events_manager(self, events_manager)

    def get_events_manager(self):
        return self._collection_manager.get_custom_events_manager(self)

    def fire_event(self, event_name: str):
        """Prvo sopstvena metoda modela istog imena (ako postoji), pa menadžer."""
        if has_hook(self, event_name):
            getattr(self, event_name)()
        return self._collection_manager.notify_event(event_name, self)

    # ---------- Atributi ----------
    def read_attribute(self, name: str) -> Any:
        return getattr(self, name, None)

    def write_attribute(self, name: str, value: Any):
        setattr(self, name, value)

    # ---------- Validacija ----------
    def validate(self, validation: Validation) -> bool:
        messages = validation.validate(entity=self)
        for message in messages:
            self.append_message(message)
        return not messages

    def validation_has_failed(self) -> bool:
        return bool(self._error_messages)

    def append_message(self, message: Message):
        self._error_messages.append(message)

    def get_messages(self) -> List[Message]:
        return list(self._error_messages)
