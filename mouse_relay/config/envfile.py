"""Loading of MOUSERELAY_ settings from dotenv files.

A file named explicitly (``--env-file`` or ``MOUSERELAY_ENV_FILE``) must exist
and pass the ownership checks, otherwise startup fails. A ``.env`` that is
merely discovered in the working directory or the project root is skipped
with a warning when it does not.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE_VARIABLE = "MOUSERELAY_ENV_FILE"

# Only the owner may write a dotenv file; reading is unrestricted.
_UNSAFE_MODE_BITS = stat.S_IWGRP | stat.S_IWOTH


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _check_env_file(path: Path) -> None:
    """Raise if ``path`` is not a regular file this user alone can modify."""
    if not path.exists():
        raise FileNotFoundError(f"Dotenv file not found: {path}")
    if path.is_dir():
        raise ValueError(f"Dotenv path is a directory: {path}")
    if not path.is_file():
        raise ValueError(f"Dotenv path is not a regular file: {path}")

    if os.name == "nt":
        return
    info = path.stat()
    if info.st_uid != os.getuid():
        raise PermissionError(f"Dotenv file {path} is owned by another user")
    if info.st_mode & _UNSAFE_MODE_BITS:
        raise PermissionError(
            f"Dotenv file {path} is writable by group or others; "
            "restrict it with chmod go-w"
        )


def _load(path: Path, override: bool) -> Path:
    resolved = path.resolve()
    load_dotenv(dotenv_path=resolved, override=override)
    logger.debug("Loaded settings from %s", resolved)
    return resolved


def load_environment_file(
    env_file: str | Path | None = None,
    *,
    override: bool = False,
    start_dir: Path | None = None,
) -> Path | None:
    """Load MOUSERELAY_ overrides from a dotenv file.

    Args:
        env_file: Explicit dotenv path. Falls back to `MOUSERELAY_ENV_FILE`,
            then `.env` in `start_dir`, then `.env` in the project root.
        override: Whether dotenv values replace variables already set.
        start_dir: Base directory for relative paths and discovery
            (defaults to the working directory).

    Returns:
        The loaded file, or None when nothing usable was found.

    Raises:
        FileNotFoundError: An explicit file does not exist.
        ValueError: An explicit path is not a regular file.
        PermissionError: An explicit file is owned by another user or is
            writable by group or others.
    """
    base_dir = (start_dir or Path.cwd()).resolve()

    named = env_file or os.environ.get(ENV_FILE_VARIABLE)
    if named:
        path = Path(named).expanduser()
        if not path.is_absolute():
            path = base_dir / path
        _check_env_file(path)
        return _load(path, override)

    for candidate in (base_dir / ".env", _project_root() / ".env"):
        if not candidate.exists():
            continue
        try:
            _check_env_file(candidate)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring discovered dotenv file: %s", e)
            continue
        return _load(candidate, override)

    return None
