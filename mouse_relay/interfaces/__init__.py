"""Interface definitions for mouse relay components.

Components depend on these types so that injectors and executors can be
swapped in tests.
"""

from mouse_relay.interfaces.actions import (
    ActionBatch,
    ActionExecutor,
    ActionResult,
    ButtonDown,
    ButtonUp,
    DecodeError,
    InjectionError,
    InjectorUnavailableError,
    MouseAction,
    MouseButton,
    MouseDownError,
    MouseMoveError,
    MouseRelayError,
    MouseUpError,
    MoveTo,
)

__all__ = [
    "ActionBatch",
    "ActionExecutor",
    "ActionResult",
    "ButtonDown",
    "ButtonUp",
    "DecodeError",
    "InjectionError",
    "InjectorUnavailableError",
    "MouseAction",
    "MouseButton",
    "MouseDownError",
    "MouseMoveError",
    "MouseRelayError",
    "MouseUpError",
    "MoveTo",
]
