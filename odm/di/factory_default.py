# =============================================================================
# File:        odm/di/factory_default.py
# Purpose:     Kontejner sa unapred registrovanim ODM servisima
# Author:      Aleksandar Popović
# Created:     2025-08-18
# =============================================================================

from __future__ import annotations

from odm.di.container import Container
from odm.collection.manager import CollectionManager
from odm.managers.event_manager import EventsManager


class FactoryDefault(Container):
    """Registruje shared 'eventsManager' i 'collectionManager' (povezane)."""

    def __init__(self):
        super().__init__()
        self.set_shared("eventsManager", EventsManager)
        self.set_shared("collectionManager", self._make_collection_manager)

    def _make_collection_manager(self) -> CollectionManager:
        manager = CollectionManager()
        manager.set_events_manager(self.get_shared("eventsManager"))
        return manager
