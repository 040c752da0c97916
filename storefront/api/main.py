"""ASGI entrypoint: `uvicorn storefront.api.main:app`."""

from __future__ import annotations

import uvicorn

from storefront.api.api_config import get_api_config
from storefront.api.app import create_app

app = create_app()


def run() -> None:
    config = get_api_config()
    uvicorn.run("storefront.api.main:app", host=config.host, port=config.port)


if __name__ == "__main__":
    run()
