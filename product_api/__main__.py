import uvicorn

from product_api.config import HOST, PORT
from product_api.utils.logging import get_logger

logger = get_logger(__name__)


def main():
    logger.info("listening on {}:{}", HOST, PORT)
    uvicorn.run("product_api.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
