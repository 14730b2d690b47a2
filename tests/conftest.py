import os

# app.py builds a module-level app at import; it only needs a URI to exist.
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/banners_test")

import mongomock
import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from app import create_app
from models.banner import Banner
from storage.mongo_client import MongoConnection

TEST_URI = "mongodb://localhost:27017"


class UnreachableClient:
    """Stands in for a MongoClient whose cluster never answers."""

    def __init__(self, *args, **kwargs):
        self.closed = False

    @property
    def admin(self):
        return self

    def command(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("no servers available")

    def close(self):
        self.closed = True


class BrokenCollectionClient:
    """Connects fine but every collection operation fails."""

    def __init__(self, *args, **kwargs):
        pass

    @property
    def admin(self):
        return BrokenDatabase()

    def __getitem__(self, name):
        return BrokenDatabase()

    def get_default_database(self, default=None):
        return BrokenDatabase()

    def close(self):
        pass


class BrokenDatabase:
    name = "banners_test"

    def command(self, *args, **kwargs):
        return {"ok": 1.0}

    def __getitem__(self, name):
        return BrokenCollection()


class BrokenCollection:
    def _fail(self, *args, **kwargs):
        raise OperationFailure("operation failed")

    find = update_many = insert_one = _fail


@pytest.fixture
def connection():
    conn = MongoConnection(TEST_URI, "banners_test", client_factory=mongomock.MongoClient)
    yield conn
    conn.close()


@pytest.fixture
def collection(connection):
    return connection.connect()["banners"]


@pytest.fixture
def make_app():
    def _make(connection, **overrides):
        config = {"TESTING": True, "CRON_SECRET": ""}
        config.update(overrides)
        return create_app(config, connection=connection)
    return _make


@pytest.fixture
def client(make_app, connection):
    return make_app(connection).test_client()


@pytest.fixture
def seed(collection):
    def _seed(url, active=True):
        collection.insert_one(Banner(url=url, active=active).to_document())
    return _seed
