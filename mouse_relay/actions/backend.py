"""Input injector interface and implementations.

This module provides:
- InputInjector: Abstract interface for OS-level mouse input
- PynputInputInjector: Implementation using pynput's mouse controller
- NullInputInjector: No-op implementation for dry runs and testing

The executor holds the sequencing and error-reporting logic and delegates
the actual input to a swappable injector.

Example:
    >>> from mouse_relay.actions.backend import PynputInputInjector
    >>> from mouse_relay.interfaces.actions import MouseButton
    >>>
    >>> injector = PynputInputInjector()
    >>> injector.mouse_move(100, 200)
    >>> injector.mouse_down(MouseButton.LEFT)
    >>> injector.mouse_up(MouseButton.LEFT)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from mouse_relay.interfaces.actions import InjectorUnavailableError, MouseButton

logger = logging.getLogger(__name__)


class InputInjector(ABC):
    """Abstract interface for producing OS-level mouse events.

    Implementations may raise any exception when the platform rejects an
    operation; the executor turns those into per-action failures.
    """

    name: str = "injector"

    @abstractmethod
    def mouse_move(self, x: int, y: int) -> None:
        """Move the cursor to absolute coordinates.

        Args:
            x: X coordinate in pixels.
            y: Y coordinate in pixels.
        """
        ...

    @abstractmethod
    def mouse_down(self, button: MouseButton) -> None:
        """Press a mouse button down.

        Args:
            button: Button to press.
        """
        ...

    @abstractmethod
    def mouse_up(self, button: MouseButton) -> None:
        """Release a mouse button.

        Args:
            button: Button to release.
        """
        ...


class NullInputInjector(InputInjector):
    """No-op injector.

    Used for ``--dry-run`` and in tests where no real input should occur.
    All methods just log at debug level.
    """

    name = "null"

    def mouse_move(self, x: int, y: int) -> None:
        """No-op mouse move."""
        logger.debug("NullInputInjector.mouse_move(%d, %d)", x, y)

    def mouse_down(self, button: MouseButton) -> None:
        """No-op mouse down."""
        logger.debug("NullInputInjector.mouse_down(%r)", button.value)

    def mouse_up(self, button: MouseButton) -> None:
        """No-op mouse up."""
        logger.debug("NullInputInjector.mouse_up(%r)", button.value)


# Scroll "buttons" emit one notch per press as (dx, dy)
_SCROLL_STEPS: dict[MouseButton, tuple[int, int]] = {
    MouseButton.SCROLL_UP: (0, 1),
    MouseButton.SCROLL_DOWN: (0, -1),
    MouseButton.SCROLL_LEFT: (-1, 0),
    MouseButton.SCROLL_RIGHT: (1, 0),
}


class PynputInputInjector(InputInjector):
    """Injector that drives the desktop mouse through pynput.

    Left, Middle and Right map to pynput buttons. Pressing a scroll button
    scrolls one notch in that direction; releasing it does nothing.

    Example:
        >>> injector = PynputInputInjector()
        >>> injector.mouse_down(MouseButton.SCROLL_DOWN)  # scrolls down once
    """

    name = "pynput"

    def __init__(self, controller: Any | None = None) -> None:
        """Initialize the pynput controller.

        Args:
            controller: Existing ``pynput.mouse.Controller``. A new one is
                created if None.

        Raises:
            InjectorUnavailableError: If pynput cannot reach an input
                backend on this host (no display, missing permissions).
        """
        try:
            from pynput import mouse

            if controller is None:
                controller = mouse.Controller()
        except Exception as e:
            raise InjectorUnavailableError(f"pynput mouse backend unavailable: {e}") from e

        self._buttons: dict[MouseButton, Any] = {
            MouseButton.LEFT: mouse.Button.left,
            MouseButton.MIDDLE: mouse.Button.middle,
            MouseButton.RIGHT: mouse.Button.right,
        }
        self._controller = controller
        logger.debug("PynputInputInjector initialized")

    def mouse_move(self, x: int, y: int) -> None:
        """Move cursor using pynput."""
        logger.debug("PynputInputInjector.mouse_move(%d, %d)", x, y)
        self._controller.position = (x, y)

    def mouse_down(self, button: MouseButton) -> None:
        """Press a button, or scroll one notch for scroll buttons."""
        logger.debug("PynputInputInjector.mouse_down(%r)", button.value)
        step = _SCROLL_STEPS.get(button)
        if step is not None:
            self._controller.scroll(*step)
            return
        self._controller.press(self._buttons[button])

    def mouse_up(self, button: MouseButton) -> None:
        """Release a button. Scroll buttons have nothing to release."""
        logger.debug("PynputInputInjector.mouse_up(%r)", button.value)
        if button in _SCROLL_STEPS:
            return
        self._controller.release(self._buttons[button])


INJECTORS: dict[str, type[InputInjector]] = {
    NullInputInjector.name: NullInputInjector,
    PynputInputInjector.name: PynputInputInjector,
}


def create_injector(name: str) -> InputInjector:
    """Create an injector by its configured name.

    Args:
        name: ``"pynput"`` or ``"null"``.

    Raises:
        ValueError: If the name is unknown.
        InjectorUnavailableError: If the injector cannot run on this host.
    """
    try:
        injector_cls = INJECTORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown input backend {name!r}; expected one of {sorted(INJECTORS)}"
        ) from None
    return injector_cls()
