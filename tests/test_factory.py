import pytest

from product_api.services.factory import StoreFactory
from product_api.services.memory import InMemoryProductStore
from product_api.services.sql import SqlProductStore


def test_memory_backend():
    assert isinstance(StoreFactory.create_store("memory"), InMemoryProductStore)


def test_sql_backend_uses_given_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'products.db'}"

    store = StoreFactory.create_store("SQL", url)
    try:
        assert isinstance(store, SqlProductStore)
        assert store.engine.url.database == str(tmp_path / "products.db")
    finally:
        store.close()


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr("product_api.services.factory.PRODUCT_STORE_BACKEND", "memory")

    assert isinstance(StoreFactory.create_store(), InMemoryProductStore)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="redis"):
        StoreFactory.create_store("redis")
