#!/usr/bin/env python3
"""
Entry point for the URL shortener service.

Usage:
    python main.py ROOT_URL PORT [-d DB_NAME]

Every other setting (HOST, POOL_SIZE, RATE_LIMIT_REQUESTS, LOG_LEVEL, ...)
is read from the environment or a .env file, see shorturl_app/config.py.
"""

import argparse
import sys
from typing import List, Optional

import uvicorn

from shorturl_app.app_factory import create_app
from shorturl_app.config import Settings
from shorturl_app.errors import AppError
from shorturl_app.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shorturl",
        description="Url shortener server.",
    )
    parser.add_argument("root", help="The root url.")
    parser.add_argument("port", type=int, help="The port.")
    parser.add_argument(
        "-d", "--db-name",
        dest="db_name",
        default=None,
        help="The database name (default: urls.db).",
    )
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)

    overrides = {"root_url": args.root, "port": args.port}
    if args.db_name is not None:
        overrides["database_path"] = args.db_name

    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> None:
    settings = load_settings(argv)

    logger = setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.log_json,
    )
    logger.info("Configuration: %s", settings.model_dump())

    try:
        app = create_app(settings)
    except AppError as exc:
        logger.critical("Could not initialise storage: %s", exc)
        sys.exit(1)

    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,  # LoggingMiddleware logs every request
    )


if __name__ == "__main__":
    main()
