from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from product_api import __version__
from product_api.config import GZIP_MINIMUM_SIZE
from product_api.routes import product
from product_api.services.base import ProductStore
from product_api.services.factory import StoreFactory
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the application around a single product store.

    When no store is given one is created from the environment.
    """
    if store is None:
        store = StoreFactory.create_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.init()
        logger.info("Using {}", type(store).__name__)
        yield
        store.close()

    app = FastAPI(
        title="Product API",
        version=__version__,
        docs_url="/swagger-ui",
        openapi_url="/api-doc/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(product.router)
    return app


app = create_app()
