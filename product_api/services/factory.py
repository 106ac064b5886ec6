"""
Product Store Factory

Creates the configured product store backend.
"""

from typing import Optional

from product_api.config import DATABASE_URL, PRODUCT_STORE_BACKEND
from .base import ProductStore
from .memory import InMemoryProductStore
from .sql import SqlProductStore


class StoreFactory:
    """Factory for creating product store instances"""

    @staticmethod
    def create_store(
        backend: Optional[str] = None,
        database_url: Optional[str] = None,
    ) -> ProductStore:
        """
        Create a product store

        Args:
            backend: "memory" or "sql"; defaults to PRODUCT_STORE_BACKEND
            database_url: SQLAlchemy URL for the sql backend; defaults to DATABASE_URL

        Returns:
            ProductStore implementation
        """
        backend = (backend or PRODUCT_STORE_BACKEND).lower()

        if backend == "memory":
            return InMemoryProductStore()
        elif backend == "sql":
            return SqlProductStore(database_url or DATABASE_URL)
        else:
            raise ValueError(f"Unsupported product store backend: {backend}")
