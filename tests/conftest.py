import asyncio

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from nexthire.database import ensure_indexes, get_db
from nexthire.main import app
from nexthire.utils.auth import create_access_token


@pytest.fixture
def mongo_db():
    db = AsyncMongoMockClient()["nextHire_test"]
    asyncio.run(ensure_indexes(db))
    return db


@pytest.fixture
def client(mongo_db):
    app.dependency_overrides[get_db] = lambda: mongo_db
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Put a signed token for ``email`` into the client's cookie jar."""
    def _login(email):
        client.cookies.set("token", create_access_token(email))
        return client
    return _login


def make_job(**overrides):
    job = {
        "title": "Build a landing page",
        "description": "Responsive React landing page",
        "category": "Web Development",
        "deadline": "2026-12-01T00:00:00.000Z",
        "min_price": 100,
        "max_price": 500,
        "buyer": {"email": "buyer@example.com", "name": "Buyer One"},
    }
    job.update(overrides)
    return job


def make_bid(**overrides):
    bid = {
        "email": "bidder@example.com",
        "jobId": "65f0c0ffee0000000000aaaa",
        "price": 250,
        "comment": "I can do this in a week",
        "buyer": {"email": "buyer@example.com"},
    }
    bid.update(overrides)
    return bid
