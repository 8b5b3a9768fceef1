"""CLI entrypoint for running the mouse relay server."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from mouse_relay.cli.helpers import _build_executor, _configure_logging
from mouse_relay.cli.options import LogFormat, build_arg_parser
from mouse_relay.config.envfile import load_environment_file
from mouse_relay.config.loader import Config, load_config
from mouse_relay.server.app import create_app

logger = logging.getLogger(__name__)


def _resolve_config(args: argparse.Namespace) -> Config:
    """Load config and apply CLI overrides on top of it."""
    config = load_config(args.config)
    updates: dict[str, dict[str, object]] = {"server": {}, "logging": {}}
    if args.server is not None:
        updates["server"]["host"] = args.server
    if args.port is not None:
        updates["server"]["port"] = args.port
    if args.log_level is not None:
        updates["logging"]["level"] = args.log_level
    if args.log_format is not None:
        updates["logging"]["format"] = args.log_format

    return config.model_copy(
        update={
            "server": config.server.model_copy(update=updates["server"]),
            "logging": config.logging.model_copy(update=updates["logging"]),
        }
    )


def serve(config: Config, dry_run: bool = False) -> None:
    """Build the app from config and serve it until interrupted."""
    executor = _build_executor(config, dry_run=dry_run)
    app = create_app(executor)

    host, port = config.server.host, config.server.port
    logger.info("Server running at %s:%s", host, port)
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=config.logging.level.lower(),
        log_config=None,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint function."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    # Bootstrap logger before config loading.
    _configure_logging(
        level=args.log_level or "INFO",
        log_format=args.log_format or LogFormat.READABLE.value,
    )

    try:
        load_environment_file(args.env_file)
        config = _resolve_config(args)
        _configure_logging(level=config.logging.level, log_format=config.logging.format)
        serve(config, dry_run=bool(args.dry_run))
        return 0
    except Exception as exc:
        logger.error("[BOOT] Startup failed: %s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
