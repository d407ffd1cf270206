import pytest

from odm.collection.manager import CollectionManager
from odm.di.container import Container
from odm.errors import ContainerError
from odm.managers.event_manager import EventsManager


class Service:
    def __init__(self, name="default"):
        self.name = name
        self.di = None

    def set_dependency_injector(self, container):
        self.di = container


def test_unknown_service_raises():
    with pytest.raises(ContainerError, match="wasn't found"):
        Container().get("mongo")


def test_non_shared_resolves_new_instance_each_time():
    container = Container()
    container.set("svc", Service)
    assert container.get("svc") is not container.get("svc")
    assert container.get("svc", "custom").name == "custom"


def test_shared_resolves_once():
    container = Container()
    container.set_shared("svc", Service)
    assert container.get("svc") is container.get("svc")
    assert container.get_shared("svc") is container.get("svc")


def test_get_shared_caches_non_shared_definition():
    container = Container()
    container.set("svc", Service)
    assert container.get_shared("svc") is container.get_shared("svc")


def test_plain_object_definition_and_injection():
    container = Container()
    instance = Service()
    container.set("svc", instance)
    assert container.get("svc") is instance
    assert instance.di is container


def test_has_remove_and_redefine():
    container = Container()
    container.set_shared("svc", Service)
    first = container.get("svc")
    assert "svc" in container

    container.set_shared("svc", Service)
    assert container.get("svc") is not first

    container.remove("svc")
    assert not container.has("svc")
    assert container.get_services() == {}


def test_factory_default_wires_collection_manager(di):
    manager = di.get_shared("collectionManager")
    assert isinstance(manager, CollectionManager)
    assert isinstance(di.get_shared("eventsManager"), EventsManager)
    assert manager.get_events_manager() is di.get_shared("eventsManager")
    assert manager.get_dependency_injector() is di
