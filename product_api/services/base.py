import threading
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID, uuid4

from fastapi.concurrency import run_in_threadpool

from product_api.exceptions import InvalidProductIdError, ProductNotFoundError
from product_api.models.schemas.product import NIL_UUID, Product, ProductBase
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


class ProductStore(ABC):
    """
    Authoritative collection of products.

    Every mutation runs under one lock owned by the store, so ids handed out
    by concurrent creates never collide and an update never interleaves with
    a delete of the same record. Storage work runs in the worker thread pool
    so a slow backend does not stall the event loop.

    Subclasses provide the storage primitives; the id, lookup and locking
    rules live here.
    """

    def __init__(self):
        self._lock = threading.Lock()

    def init(self) -> None:
        """Prepare the backing storage. Safe to call more than once."""

    def close(self) -> None:
        """Release any resources held by the backing storage."""

    async def list(self) -> List[Product]:
        return await run_in_threadpool(self._list)

    async def get(self, product_id: UUID) -> Product:
        product = await run_in_threadpool(self._get, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def create(self, data: ProductBase) -> Product:
        return await run_in_threadpool(self._create, data)

    async def update(self, product_id: UUID, data: ProductBase) -> Product:
        return await run_in_threadpool(self._update, product_id, data)

    async def delete(self, product_id: UUID) -> None:
        """Remove a product. Deleting an id that does not exist is not an error."""
        if product_id == NIL_UUID:
            raise InvalidProductIdError(product_id)
        await run_in_threadpool(self._delete, product_id)

    def _create(self, data: ProductBase) -> Product:
        with self._lock:
            product = Product(id=self._new_id(), name=data.name, price=data.price)
            self._insert(product)
        logger.info("Created product {}", product.id)
        return product

    def _update(self, product_id: UUID, data: ProductBase) -> Product:
        with self._lock:
            product = self._replace(product_id, data.name, data.price)
        if product is None:
            raise ProductNotFoundError(product_id)
        logger.info("Updated product {}", product_id)
        return product

    def _delete(self, product_id: UUID) -> None:
        with self._lock:
            removed = self._remove(product_id)
        if removed:
            logger.info("Deleted product {}", product_id)
        else:
            logger.debug("Delete of unknown product {} ignored", product_id)

    def _new_id(self) -> UUID:
        # caller holds the lock
        product_id = uuid4()
        while product_id == NIL_UUID or self._exists(product_id):
            product_id = uuid4()
        return product_id

    @abstractmethod
    def _list(self) -> List[Product]:
        """Snapshot of every stored product."""

    @abstractmethod
    def _get(self, product_id: UUID) -> Optional[Product]:
        pass

    @abstractmethod
    def _exists(self, product_id: UUID) -> bool:
        pass

    @abstractmethod
    def _insert(self, product: Product) -> None:
        """Store a new product. Either the whole record is stored or nothing is."""

    @abstractmethod
    def _replace(self, product_id: UUID, name: str, price: float) -> Optional[Product]:
        """Overwrite name and price, returning the stored product or None if absent."""

    @abstractmethod
    def _remove(self, product_id: UUID) -> bool:
        """Drop a product, returning whether anything was removed."""
