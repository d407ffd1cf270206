import os
import sys
from pathlib import Path
import pytest

# Omogući import projekta kad se testovi pokreću iz bilo kog radnog dir-a
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from odm.config.env import EnvLoader
from odm.collection.manager import CollectionManager
from odm.collection.model import Collection
from odm.di.factory_default import FactoryDefault
from odm.managers.error_manager import ErrorManager
from odm.managers.event_manager import EventsManager
from odm.managers.log_manager import LogManager


@pytest.fixture(scope="session", autouse=True)
def ensure_env(tmp_path_factory):
    """
    - Učitaj .env (ako postoji).
    - Logovi idu u privremeni fajl, ne u storage/ projekta.
    """
    log_path = tmp_path_factory.mktemp("logs") / "odm_test.log"
    previous = os.environ.get("LOG_FILE_PATH")
    os.environ["LOG_FILE_PATH"] = str(log_path)
    EnvLoader.load()
    yield log_path
    if previous is None:
        os.environ.pop("LOG_FILE_PATH", None)
    else:
        os.environ["LOG_FILE_PATH"] = previous


@pytest.fixture(autouse=True)
def reset_journals():
    LogManager.initialize()
    ErrorManager.initialize(dev_mode=False)
    yield


@pytest.fixture
def events():
    return EventsManager()


@pytest.fixture
def manager(events):
    return CollectionManager(events_manager=events)


@pytest.fixture
def di():
    return FactoryDefault()


class UserModel(Collection):
    """Model bez initialize() hook-a, mešovitog imena klase."""


class Product(Collection):
    def __init__(self, *args, **kwargs):
        self.init_calls = 0
        super().__init__(*args, **kwargs)

    def initialize(self):
        self.init_calls += 1


@pytest.fixture
def model_classes():
    return {"UserModel": UserModel, "Product": Product}
