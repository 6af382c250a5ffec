"""Test configuration for database unit tests.

Collections and databases are backed by ``MagicMock`` stand-ins for the
pymongo objects; clients are real ``MongoClient`` instances created with
``connect=False`` so no server is needed.
"""

from __future__ import annotations

from typing import Iterator
from unittest.mock import MagicMock

import pytest

from magic_mongo.codecs import default_codec_registry
from magic_mongo.database import MagicCollection, MagicDatabase

from .documents import User


@pytest.fixture
def mock_pymongo_collection() -> MagicMock:
    """A stand-in for ``pymongo.collection.Collection``."""
    collection = MagicMock(name="Collection")
    collection.name = "users"
    return collection


@pytest.fixture
def mock_pymongo_database(mock_pymongo_collection) -> MagicMock:
    """A stand-in for ``pymongo.database.Database`` handing out the mock collection."""
    database = MagicMock(name="Database")
    database.name = "shop"
    database.get_collection.return_value = mock_pymongo_collection
    return database


@pytest.fixture
def user_collection(mock_pymongo_database) -> MagicCollection[User]:
    return MagicCollection(mock_pymongo_database, "users", User, default_codec_registry())


@pytest.fixture
def raw_collection(mock_pymongo_database) -> MagicCollection[dict]:
    return MagicCollection(mock_pymongo_database, "events", dict, default_codec_registry())


@pytest.fixture
def magic_database(mock_pymongo_database) -> MagicDatabase:
    return MagicDatabase(mock_pymongo_database, default_codec_registry())


@pytest.fixture
def close_after() -> Iterator[list]:
    """Collect MagicMongo instances created by a test and close them afterwards."""
    created: list = []
    yield created
    for mongo in created:
        mongo.close()
