from typing import Dict, List, Optional
from uuid import UUID

from product_api.models.schemas.product import Product
from product_api.services.base import ProductStore


class InMemoryProductStore(ProductStore):
    """Products kept in a dict for the lifetime of the process.

    Records are immutable; an update swaps in a new record, so readers only
    ever see a whole record.
    """

    def __init__(self):
        super().__init__()
        self._products: Dict[UUID, Product] = {}

    def _list(self) -> List[Product]:
        with self._lock:
            return list(self._products.values())

    def _get(self, product_id: UUID) -> Optional[Product]:
        return self._products.get(product_id)

    def _exists(self, product_id: UUID) -> bool:
        return product_id in self._products

    def _insert(self, product: Product) -> None:
        self._products[product.id] = product

    def _replace(self, product_id: UUID, name: str, price: float) -> Optional[Product]:
        current = self._products.get(product_id)
        if current is None:
            return None
        product = current.model_copy(update={"name": name, "price": price})
        self._products[product_id] = product
        return product

    def _remove(self, product_id: UUID) -> bool:
        return self._products.pop(product_id, None) is not None
