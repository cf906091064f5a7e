"""Run the item drops HTTP server for local development."""

import argparse
import logging

import uvicorn

from osrs_drops.cache import DropsCache
from osrs_drops.config import get_settings
from osrs_drops.server import create_app


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve GET /item-drops for the item tracker")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Port")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )
    app = create_app(DropsCache())
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":  # pragma: no cover
    # python -m scripts.serve
    main()
