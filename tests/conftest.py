import random

import pytest
from fastapi.testclient import TestClient

from movies.database.db import MovieStore, get_store
from movies.main import app


@pytest.fixture
def store():
    """An empty store with a deterministic id source."""
    return MovieStore(rng=random.Random(1234))


@pytest.fixture
def seeded_store(store):
    store.seed()
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sample_movie():
    return {"isbn": "X", "title": "Y", "director": {"firstname": "A", "lastname": "B"}}
