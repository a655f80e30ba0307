"""Command that loads the configuration and serves the wallet API."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from flask import Flask

from walletsvc.config import Config, ConfigError, load
from walletsvc.factory import RepoFactory
from walletsvc.ids import Generator
from walletsvc.service import WalletService
from walletsvc.sql_repo import DBConfig
from walletsvc.web import create_app

logger = logging.getLogger(__name__)


def build_app(config: Config) -> Flask:
    """Wire repository, service and HTTP layer together from ``config``."""
    db_config = DBConfig(
        host=config.database.host,
        port=config.database.port,
        user=config.database.user,
        password=config.database.password,
        dbname=config.database.dbname,
    )
    factory = RepoFactory(config.repository.segment_count, db_config)
    repository = factory.get_repository(config.repository.type)
    service = WalletService(repository, Generator())
    return create_app(service)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wallet HTTP server; return a non-zero code on failure."""
    parser = argparse.ArgumentParser(description="Serve the wallet HTTP API.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        config = load()
    except ConfigError as exc:
        logger.error("Failed to load config: %s", exc)
        return 1

    try:
        app = build_app(config)
    except (ValueError, RuntimeError) as exc:
        logger.error("Failed to create repository: %s", exc)
        return 1

    logger.info("Server starting on :%d", config.server.port)
    try:
        app.run(host="0.0.0.0", port=config.server.port)
    except OSError as exc:
        logger.error("Server stopped: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())