"""Actions package for injecting mouse input.

This package provides:
- InputInjector: Interface for OS-level mouse input
- PynputInputInjector: Injector using pynput's mouse controller
- NullInputInjector: No-op injector for dry runs and testing
- MouseActionExecutor: Sequential action execution with per-action results
- ValidationConfig: Configuration for move validation
"""

from mouse_relay.actions.backend import (
    InputInjector,
    NullInputInjector,
    PynputInputInjector,
    create_injector,
)
from mouse_relay.actions.executor import MouseActionExecutor, ValidationConfig

__all__ = [
    "InputInjector",
    "MouseActionExecutor",
    "NullInputInjector",
    "PynputInputInjector",
    "ValidationConfig",
    "create_injector",
]
