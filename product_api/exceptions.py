"""
Errors raised by product stores.

Stores keep the failure kinds apart so the HTTP layer can decide how much
of the distinction to expose.
"""
from uuid import UUID


class ProductStoreError(Exception):
    """Base class for product store failures."""
    pass


class ProductNotFoundError(ProductStoreError):
    """No product with the requested id exists."""

    def __init__(self, product_id: UUID):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class InvalidProductIdError(ProductStoreError):
    """The id is reserved and can never name a product."""

    def __init__(self, product_id: UUID):
        self.product_id = product_id
        super().__init__(f"Product id {product_id} is not a valid product id")


class StoreIOError(ProductStoreError):
    """The underlying storage failed to read or write."""
    pass
