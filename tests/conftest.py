"""Pytest configuration and fixtures."""

import os
import random

import pytest
from fastapi.testclient import TestClient

from app.domain.store import CoasterStore
from app.main import create_app

ADMIN_SECRET = "s3cret-for-tests"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Keep test output quiet."""
    os.environ.setdefault("LOG_LEVEL", "WARNING")
    yield


@pytest.fixture
def store():
    """A fresh store with a seeded RNG so random picks are reproducible."""
    return CoasterStore(rng=random.Random(1234))


@pytest.fixture
def app(store):
    return create_app(store=store, admin_password=ADMIN_SECRET)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_coaster():
    """A valid create payload."""
    return {
        "name": "Steel Vengeance",
        "manufacturer": "Rocky Mountain Construction",
        "inPark": "Cedar Point",
        "height": 205,
    }
