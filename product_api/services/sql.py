from contextlib import nullcontext
from typing import Callable, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from product_api.database.database import init_db, make_engine, make_sessionmaker
from product_api.exceptions import StoreIOError
from product_api.models.database_models import ProductRecord
from product_api.models.schemas.product import Product
from product_api.services.base import ProductStore
from product_api.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class SqlProductStore(ProductStore):
    """Products persisted in the ``product`` table of a SQL database."""

    def __init__(self, database_url: str):
        super().__init__()
        self.engine = make_engine(database_url)
        self.session_factory = make_sessionmaker(self.engine)
        # One shared connection cannot carry a read next to an open write
        if isinstance(self.engine.pool, StaticPool):
            self._read_guard = self._lock
        else:
            self._read_guard = nullcontext()

    def init(self) -> None:
        try:
            init_db(self.engine)
        except SQLAlchemyError as e:
            logger.error("Could not create product table: {}", str(e))
            raise StoreIOError("Could not create product table") from e
        logger.info("Product table ready on {}", self.engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        self.engine.dispose()

    def _handle_db_operation(self, operation: Callable[[Session], T]) -> T:
        with self.session_factory() as db:
            try:
                result = operation(db)
                db.commit()
                return result
            except IntegrityError as e:
                db.rollback()
                logger.error("Database integrity error: {}", str(e))
                raise StoreIOError("Database constraint violation") from e
            except SQLAlchemyError as e:
                db.rollback()
                logger.error("Database operation error: {}", str(e))
                raise StoreIOError("Database operation failed") from e

    def _list(self) -> List[Product]:
        def operation(db: Session) -> List[Product]:
            rows = db.scalars(select(ProductRecord)).all()
            return [Product.model_validate(row) for row in rows]

        with self._read_guard:
            return self._handle_db_operation(operation)

    def _get(self, product_id: UUID) -> Optional[Product]:
        def operation(db: Session) -> Optional[Product]:
            row = db.get(ProductRecord, str(product_id))
            return Product.model_validate(row) if row else None

        with self._read_guard:
            return self._handle_db_operation(operation)

    def _exists(self, product_id: UUID) -> bool:
        return self._handle_db_operation(
            lambda db: db.get(ProductRecord, str(product_id)) is not None
        )

    def _insert(self, product: Product) -> None:
        record = ProductRecord(id=str(product.id), name=product.name, price=product.price)
        self._handle_db_operation(lambda db: db.add(record))

    def _replace(self, product_id: UUID, name: str, price: float) -> Optional[Product]:
        def operation(db: Session) -> Optional[Product]:
            row = db.get(ProductRecord, str(product_id))
            if row is None:
                return None
            row.name = name
            row.price = price
            db.flush()
            return Product.model_validate(row)

        return self._handle_db_operation(operation)

    def _remove(self, product_id: UUID) -> bool:
        def operation(db: Session) -> bool:
            row = db.get(ProductRecord, str(product_id))
            if row is None:
                return False
            db.delete(row)
            return True

        return self._handle_db_operation(operation)
