# =============================================================================
# File:        odm/di/container.py
# Purpose:     DI kontejner (service locator): jedna instanca po zahtevu
# Author:      Aleksandar Popović
# Created:     2025-08-18
# =============================================================================

from __future__ import annotations
from typing import Any, Dict

from odm.errors import ContainerError
from odm.helpers.core_helper import has_hook


class Container:
    """
    Servisi se registruju po imenu:
    - definicija je klasa ili factory (poziva se sa argumentima iz get()),
      ili gotov objekat koji se vraća takav kakav je,
    - shared servisi se razrešavaju jednom i keširaju,
    - objekat koji ima set_dependency_injector() dobija ovaj kontejner.
    """

    def __init__(self):
        self._services: Dict[str, Dict[str, Any]] = {}
        self._shared_instances: Dict[str, Any] = {}

    def set(self, name: str, definition: Any, shared: bool = False):
        self._services[name] = {"definition": definition, "shared": shared}
        self._shared_instances.pop(name, None)
        return self

    def set_shared(self, name: str, definition: Any):
        return self.set(name, definition, shared=True)

    def has(self, name: str) -> bool:
        return name in self._services

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def remove(self, name: str):
        self._services.pop(name, None)
        self._shared_instances.pop(name, None)

    def get_services(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._services)

    def get(self, name: str, *args):
        """Uvek razrešava definiciju iznova (osim za shared, videti get_shared)."""
        service = self._services.get(name)
        if service is None:
            raise ContainerError(f"Service '{name}' wasn't found in the dependency injection container")

        if service["shared"] and name in self._shared_instances:
            return self._shared_instances[name]

        definition = service["definition"]
        instance = definition(*args) if callable(definition) else definition

        if has_hook(instance, "set_dependency_injector") and not isinstance(instance, type):
            instance.set_dependency_injector(self)

        if service["shared"]:
            self._shared_instances[name] = instance
        return instance

    def get_shared(self, name: str, *args):
        if name in self._shared_instances:
            return self._shared_instances[name]
        instance = self.get(name, *args)
        self._shared_instances[name] = instance
        return instance
