"""Shared helper utilities for the CLI: logging setup and server wiring."""

from __future__ import annotations

import json
import logging

from mouse_relay.actions.backend import InputInjector, NullInputInjector, create_injector
from mouse_relay.actions.executor import MouseActionExecutor, ValidationConfig
from mouse_relay.cli.options import LogFormat
from mouse_relay.config.loader import Config

logger = logging.getLogger(__name__)


class _JSONLogFormatter(logging.Formatter):
    """Compact JSON formatter for machine-readable logs."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=True)


def _configure_logging(
    level: str = "INFO",
    log_format: str = LogFormat.READABLE.value,
    quiet_uvicorn: bool = True,
) -> None:
    """Configure process-wide logging."""
    normalized_level = level.upper()
    resolved_level = getattr(logging, normalized_level, logging.INFO)
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if not getattr(h, "_mouserelay_handler", False)]

    handler = logging.StreamHandler()
    handler._mouserelay_handler = True  # type: ignore[attr-defined]
    if log_format == LogFormat.JSON.value:
        formatter: logging.Formatter = _JSONLogFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(resolved_level)

    if quiet_uvicorn:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.error").setLevel(logging.INFO)


def _build_executor(config: Config, dry_run: bool = False) -> MouseActionExecutor:
    """Create the shared injector and the executor wrapping it.

    Raises:
        InjectorUnavailableError: If the configured injector cannot run here.
    """
    injector: InputInjector
    if dry_run:
        injector = NullInputInjector()
    else:
        injector = create_injector(config.input.backend)
    logger.info("Using %s input injector", injector.name)

    return MouseActionExecutor(
        injector=injector,
        validation_config=ValidationConfig(
            validate_bounds=config.input.validate_bounds,
            screen_width=config.input.screen_width,
            screen_height=config.input.screen_height,
        ),
    )
