from fastapi import Request

from product_api.services.base import ProductStore


def get_store(request: Request) -> ProductStore:
    """The store built once at startup and shared by every request."""
    return request.app.state.store
