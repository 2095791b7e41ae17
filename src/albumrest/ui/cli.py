from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from albumrest.app import build_app
from albumrest.config import (
    ConfigurationError,
    ServerConfig,
    configure_logging,
    get_database_config,
    get_server_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="albumrest", description="Album REST API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument(
        "--host",
        type=str,
        help="Host address to bind to (defaults to config)",
    )
    serve.add_argument(
        "--port",
        type=int,
        help="Port to listen on (defaults to config)",
    )
    serve.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to config)",
    )
    serve.add_argument(
        "--log-level",
        type=str,
        help="Logging level name, e.g. DEBUG or INFO (defaults to config)",
    )

    return parser.parse_args(list(argv))


def _resolve_server_config(args: argparse.Namespace) -> ServerConfig:
    defaults = get_server_config()
    return ServerConfig(
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        log_level=args.log_level or defaults.log_level,
    )


def serve(config: ServerConfig, *, database_uri: str) -> None:
    """Start the persistence adapter and block serving HTTP requests."""

    app = build_app(database_uri=database_uri)
    log.info("Serving album API on http://%s:%s", config.host, config.port)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        log_config=None,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        server_config = _resolve_server_config(parsed_args)
        database_uri = parsed_args.database_uri or get_database_config().uri
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    configure_logging(level=server_config.log_level_number)

    try:
        if parsed_args.command == "serve":
            serve(server_config, database_uri=database_uri)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while serving")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
