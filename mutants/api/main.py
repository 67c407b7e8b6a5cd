from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .config_loader import load_config
from .logging_utils import configure_logging, install_startup_log_buffer
from .server import create_app
from ..errors import StoreError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Mutant Detector API server",
        epilog="Configuration is loaded from config/mutants.json when present. "
               "Environment variables and CLI arguments override file settings.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/mutants.json",
        help="Path to JSON configuration file (default: config/mutants.json)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Override server host (default: from config)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Override server port (default: from config)",
    )
    parser.add_argument(
        "--records-path",
        type=str,
        default=None,
        help="Override the DNA record file (default: from config)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging()
    try:
        cfg = load_config(args.config if Path(args.config).exists() else None)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load configuration: %s", exc)
        sys.exit(1)

    if args.host is not None:
        cfg.server.host = args.host
    if args.port is not None:
        cfg.server.port = args.port
    if args.records_path is not None:
        cfg.storage.records_path = args.records_path

    configure_logging(cfg.logging.level)
    if cfg.logging.startup_log_dir:
        install_startup_log_buffer(
            Path(cfg.logging.startup_log_dir), capacity=cfg.logging.startup_capacity
        )

    logger.info("Server configuration: %s:%d", cfg.server.host, cfg.server.port)
    logger.info("DNA record file: %s", cfg.storage.records_path)

    try:
        app = create_app(records_path=Path(cfg.storage.records_path))
    except StoreError as exc:
        logger.error("Failed to open DNA record store: %s", exc)
        sys.exit(1)

    try:
        uvicorn.run(
            app,
            host=cfg.server.host,
            port=cfg.server.port,
            log_level=cfg.logging.level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt received during shutdown")


if __name__ == "__main__":
    main()
