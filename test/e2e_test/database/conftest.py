"""Fixtures for end-to-end tests against a MongoDB test container.

The tests are skipped unless ``TEST__DATABASE__ENABLE_MONGO_TESTS=true``,
since they need Docker to start the container.
"""

from __future__ import annotations

import pytest
from testcontainers.mongodb import MongoDbContainer

from magic_mongo.database import MultiMongo, SingleMongo
from test.settings import test_settings


@pytest.fixture(scope="session")
def mongo_container():
    """Start a MongoDB container for the test session."""
    if not test_settings.database.enable_mongo_tests:
        pytest.skip("MongoDB e2e tests are disabled; set TEST__DATABASE__ENABLE_MONGO_TESTS=true")
    container = MongoDbContainer(test_settings.database.mongo_image)
    container.start()
    yield container
    container.stop()


@pytest.fixture(scope="session")
def mongo_url(mongo_container) -> str:
    """Connection URL naming the test database; the container's root user authenticates against admin."""
    return f"{mongo_container.get_connection_url()}/{test_settings.database.database_name}?authSource=admin"


@pytest.fixture
def single_mongo(mongo_url):
    mongo = SingleMongo(mongo_url, serverSelectionTimeoutMS=10000)
    yield mongo
    mongo.database.drop()
    mongo.close()


@pytest.fixture
def multi_mongo(mongo_url):
    mongo = MultiMongo(mongo_url, serverSelectionTimeoutMS=10000)
    yield mongo
    for database in list(mongo.databases.values()):
        database.drop()
    mongo.close()
