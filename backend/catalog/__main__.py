"""Process entry point: `python -m catalog` or the `catalog-api` script."""

import uvicorn

from catalog.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
