# =============================================================================
# File:        odm/collection/manager.py
# Purpose:     CollectionManager: stanje inicijalizacije, konekcije i eventi
#              po klasi modela (jedna instanca po zahtevu)
# Author:      Aleksandar Popović
# Created:     2025-08-18
# =============================================================================
from __future__ import annotations

from typing import Any, Dict, Optional

from odm.config.env import EnvLoader
from odm.errors import CollectionError
from odm.helpers.core_helper import class_key, has_hook, short_key
from .helpers import _log, _require_instance

AFTER_INITIALIZE = "collectionManager:afterInitialize"


class CollectionManager:
    """
    Vodi evidenciju po klasi modela (ključ je class_key: "modul.klasa", lowercase):
    - initialized:            klasa -> instanca koja je prva inicijalizovala klasu
    - connection_services:    klasa -> ime DI servisa za konekciju
    - implicit_object_ids:    klasa -> bool
    - custom_events_managers: klasa -> EventsManager
    Svaka klasa se inicijalizuje najviše jednom tokom života menadžera.
    """

    def __init__(self, dependency_injector=None, events_manager=None):
        self._dependency_injector = dependency_injector
        self._events_manager = events_manager
        self._initialized: Dict[str, Any] = {}
        self._connection_services: Dict[str, str] = {}
        self._implicit_object_ids: Dict[str, bool] = {}
        self._custom_events_managers: Dict[str, Any] = {}
        self._last_initialized: Any = None

    # ---------- DI / eventi ----------
    def set_dependency_injector(self, container):
        self._dependency_injector = container

    def get_dependency_injector(self):
        return self._dependency_injector

    def set_events_manager(self, events_manager):
        self._events_manager = events_manager

    def get_events_manager(self):
        return self._events_manager

    def set_custom_events_manager(self, model, events_manager):
        self._custom_events_managers[class_key(model)] = events_manager

    def get_custom_events_manager(self, model):
        return self._custom_events_managers.get(class_key(model))

    # ---------- Inicijalizacija ----------
    def initialize(self, model) -> None:
        key = class_key(model)
        if key in self._initialized:
            return

        if has_hook(model, "initialize"):
            model.initialize()

        if self._events_manager is not None:
            self._events_manager.fire(AFTER_INITIALIZE, self, model)

        self._initialized[key] = model
        self._last_initialized = model
        _log("debug", f"initialize -> {key}")

    def is_initialized(self, model_class) -> bool:
        """Prihvata klasu, instancu, puno ime ili samo ime klase (bez modula)."""
        key = class_key(model_class)
        if key in self._initialized:
            return True
        if isinstance(model_class, str) and "." not in key:
            return any(short_key(k) == key for k in self._initialized)
        return False

    def get_last_initialized(self):
        return self._last_initialized

    # ---------- Konekcije ----------
    def set_connection_service(self, model, service_name: str) -> None:
        _require_instance(model, "set_connection_service")
        self._connection_services[class_key(model)] = service_name

    def get_connection_service(self, model) -> str:
        service = self._connection_services.get(class_key(model))
        return service or EnvLoader.get("ODM_CONNECTION_SERVICE")

    def get_connection(self, model):
        """Razrešava servis konekcije modela kao shared servis iz DI kontejnera."""
        container = self._dependency_injector
        if container is None:
            error = CollectionError(
                "A dependency injection container is required to obtain the connection service"
            )
            _log("error", str(error))
            raise error

        service = self.get_connection_service(model)
        connection = container.get_shared(service)
        if connection is None:
            raise CollectionError(f"Invalid injected connection service '{service}'")
        return connection

    # ---------- Implicitni ObjectId ----------
    def use_implicit_object_ids(self, model, use_implicit: bool) -> None:
        _require_instance(model, "use_implicit_object_ids")
        self._implicit_object_ids[class_key(model)] = bool(use_implicit)

    def is_using_implicit_object_ids(self, model) -> bool:
        return self._implicit_object_ids.get(class_key(model), False)

    # ---------- Eventi modela ----------
    def notify_event(self, event_name: str, model) -> Optional[Any]:
        """
        Okida 'collection:<event_name>' na globalnom, pa na custom menadžeru
        klase modela. False od bilo kog prekida lanac.
        """
        event_type = f"collection:{event_name}"
        status = None

        if self._events_manager is not None:
            status = self._events_manager.fire(event_type, model)
            if status is False:
                return False

        custom = self._custom_events_managers.get(class_key(model))
        if custom is not None:
            status = custom.fire(event_type, model)
            if status is False:
                return False

        return status

    def missing_method(self, model, event_name: str, data: Any = None):
        """Prosleđuje poziv nepostojeće metode modela kao događaj."""
        if self._events_manager is None:
            return None
        return self._events_manager.fire(f"collection:{event_name}", model, data)
