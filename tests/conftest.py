import pytest
from fastapi.testclient import TestClient

from product_api.main import create_app
from product_api.services.memory import InMemoryProductStore
from product_api.services.sql import SqlProductStore


@pytest.fixture
def memory_store():
    return InMemoryProductStore()


@pytest.fixture
def sql_store(tmp_path):
    """SQLite file database, fresh per test."""
    store = SqlProductStore(f"sqlite:///{tmp_path / 'products.db'}")
    store.init()
    yield store
    store.close()


@pytest.fixture(params=["memory_store", "sql_store"])
def store(request):
    """Each store backend in turn."""
    return request.getfixturevalue(request.param)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
