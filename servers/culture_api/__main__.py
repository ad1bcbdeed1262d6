"""
Server entry point for the Curation Life culture API.

Serves:
- /api/exhibitions: KOPIS registry listing
- /api/search: pop-up store search
- /api/culture: Seoul feed merged with pop-ups
- /: gallery page

Run with: python -m servers.culture_api
"""

import argparse

import uvicorn

from .app import create_app
from .config.settings import Settings
from .logging_setup import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Curation Life culture API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    parser.add_argument("--port", type=int, default=8000, help="Bind port")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the server."""
    args = parse_args(argv)
    settings = Settings.from_env()
    log_level = configure_logging(settings.log_level)

    app = create_app(settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
