"""
Runs the eatery API: loads the catalog from EATERIES_DIR and serves it.

Usage:
    uv run python serve.py
"""

import logging

import uvicorn

from backend.api import create_app
from backend.config import CatalogConfig


def main() -> None:
    config = CatalogConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(message)s")
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
