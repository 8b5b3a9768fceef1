"""CLI option models and parser helpers."""

from __future__ import annotations

import argparse
import ipaddress
from enum import StrEnum


class LogFormat(StrEnum):
    """CLI log formatter mode."""

    READABLE = "readable"
    JSON = "json"


def _ipv4_address(value: str) -> str:
    """Argparse type for a dotted IPv4 bind address."""
    try:
        return str(ipaddress.IPv4Address(value))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid IPv4 address: {value!r}") from None


def _port(value: str) -> int:
    """Argparse type for a TCP port number."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range [1, 65535]: {port}")
    return port


def build_arg_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mouse-relay",
        description="Local HTTP service that turns JSON requests into mouse input",
    )
    parser.add_argument(
        "--server",
        type=_ipv4_address,
        default=None,
        help="IPv4 address to bind (default: config server.host, 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=_port,
        default=None,
        help="TCP port to bind (default: config server.port, 8080)",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--env-file", type=str, default=None, help="Path to a dotenv file")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log actions without injecting any input",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level override",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=[fmt.value for fmt in LogFormat],
        help="Terminal log format",
    )
    return parser
