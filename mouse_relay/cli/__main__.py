"""Module execution entrypoint for `python -m mouse_relay.cli`."""

from __future__ import annotations

import sys

from mouse_relay.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
