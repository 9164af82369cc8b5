"""Shared fixtures: a throwaway SQLite database and a fake sample source."""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from customer_hub.api.deps import get_sample_source
from customer_hub.db.engine import get_engine
from customer_hub.db.schema import customers, metadata
from customer_hub.main import app
from customer_hub.services.sample_source import SampleSourceError

SAMPLE_USERS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "phone": "1-770-736-8031 x56442",
        "company": {"name": "Romaguera-Crona"},
    },
    {
        "id": 2,
        "name": "Ervin Howell",
        "username": "Antonette",
        "email": "Shanna@melissa.tv",
        "phone": "010-692-6593 x09125",
        "company": {"name": "Deckow-Crist"},
    },
    {
        "id": 3,
        "name": "Clementine Bauch",
        "username": "Samantha",
        "email": "Nathan@yesenia.net",
        "company": {"name": "Romaguera-Jacobson"},
    },
]


class FakeSampleSource:
    """Stands in for SampleCustomerSource; returns fixed payloads or fails."""

    url = "https://sample.test/users"

    def __init__(self, payloads=None, error: str = ""):
        self.payloads = list(payloads if payloads is not None else SAMPLE_USERS)
        self.error = error
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.error:
            raise SampleSourceError(self.error)
        return self.payloads


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh SQLite file with the schema created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", future=True)
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sample_source() -> FakeSampleSource:
    return FakeSampleSource()


@pytest.fixture
def client(engine, sample_source):
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_sample_source] = lambda: sample_source
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def add_customers(engine):
    """Insert rows straight into the customers table."""

    def _add(*rows):
        with engine.begin() as conn:
            conn.execute(customers.insert(), [dict(row) for row in rows])

    return _add
