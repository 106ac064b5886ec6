import os


def _truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Storage
PRODUCT_STORE_BACKEND = os.getenv("PRODUCT_STORE_BACKEND", "memory")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///products.db")

# Server
HOST = os.getenv("PRODUCT_API_HOST", "127.0.0.1")
PORT = int(os.getenv("PRODUCT_API_PORT", "8080"))
GZIP_MINIMUM_SIZE = int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))

# Surface NotFound / InvalidArgument as 404 / 400 instead of a generic 500
DISTINCT_ERRORS = _truthy(os.getenv("PRODUCT_API_DISTINCT_ERRORS"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "")
