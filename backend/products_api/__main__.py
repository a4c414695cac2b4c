"""Process entry point — `python -m products_api` or the `products-api` script."""

import uvicorn

from products_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "products_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
