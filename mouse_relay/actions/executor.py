"""Action executor implementation.

This module provides the concrete ActionExecutor that:
- Dispatches each action to the input injector
- Reports a human-readable status line per action
- Pauses between batch actions when a delay is requested
- Serializes injector access across concurrent requests

Example:
    >>> from mouse_relay.actions.executor import MouseActionExecutor
    >>> from mouse_relay.actions.backend import PynputInputInjector
    >>> from mouse_relay.interfaces.actions import ActionBatch, ButtonDown, MouseButton, MoveTo
    >>>
    >>> executor = MouseActionExecutor(PynputInputInjector())
    >>> batch = ActionBatch((MoveTo(100.7, 200.2), ButtonDown(MouseButton.LEFT)), 50)
    >>> [r.message for r in executor.execute(batch)]
    ['Mouse move to (100, 200)', 'Mouse down button: Left']
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass

from mouse_relay.actions.backend import InputInjector, NullInputInjector
from mouse_relay.interfaces.actions import (
    ActionBatch,
    ActionExecutor,
    ActionResult,
    ButtonDown,
    ButtonUp,
    InjectionError,
    MouseAction,
    MouseDownError,
    MouseMoveError,
    MouseRelayError,
    MouseUpError,
    MoveTo,
)

logger = logging.getLogger(__name__)


@dataclass
class ValidationConfig:
    """Configuration for move validation.

    Attributes:
        validate_bounds: Whether to reject moves outside the screen.
        screen_width: Screen width for bounds checking.
        screen_height: Screen height for bounds checking.
    """

    validate_bounds: bool = False
    screen_width: int = 1920
    screen_height: int = 1080


def to_pixel(value: float) -> int:
    """Convert a coordinate to the pixel grid, truncating toward zero."""
    return int(value)


def describe_action(action: MouseAction) -> str:
    """Return the status line reported for a successful action."""
    if isinstance(action, ButtonDown):
        return f"Mouse down button: {action.button.value}"
    if isinstance(action, ButtonUp):
        return f"Mouse up button: {action.button.value}"
    if isinstance(action, MoveTo):
        return f"Mouse move to ({to_pixel(action.x)}, {to_pixel(action.y)})"
    raise MouseRelayError(f"Unknown action: {action!r}")


def describe_failure(action: MouseAction, error: InjectionError) -> str:
    """Return the status line reported for a failed action."""
    if isinstance(action, ButtonDown):
        subject = f"Mouse down failed: {action.button.value}"
    elif isinstance(action, ButtonUp):
        subject = f"Mouse up failed: {action.button.value}"
    else:
        subject = f"Mouse move failed: ({to_pixel(action.x)}, {to_pixel(action.y)})"
    return f"{subject} ({error})"


class MouseActionExecutor(ActionExecutor):
    """Executes mouse actions against an input injector.

    A failing action does not stop a batch: it is recorded as a failed
    result and the remaining actions still run, so a batch of N actions
    always yields N results.

    Attributes:
        _injector: The injector performing the actual input.
        _validation_config: Configuration for move validation.
        _lock: Serializes injector calls across threads.

    Example:
        >>> executor = MouseActionExecutor()
        >>> executor.apply_one(ButtonDown(MouseButton.RIGHT)).message
        'Mouse down button: Right'
    """

    def __init__(
        self,
        injector: InputInjector | None = None,
        validation_config: ValidationConfig | None = None,
        lock: threading.Lock | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            injector: Input injector. Defaults to NullInputInjector.
            validation_config: Configuration for validation. Uses defaults if None.
            lock: Lock guarding the injector. A new one is created if None.
        """
        self._injector = injector if injector is not None else NullInputInjector()
        self._validation_config = validation_config or ValidationConfig()
        self._lock = lock or threading.Lock()

        logger.debug(
            "MouseActionExecutor initialized with %s", type(self._injector).__name__
        )

    @property
    def injector(self) -> InputInjector:
        """Get the input injector."""
        return self._injector

    def validate(self, action: MouseAction) -> tuple[bool, str | None]:
        """Validate an action before execution.

        Only moves are checked, and only when bounds validation is enabled.

        Args:
            action: The action to validate.

        Returns:
            Tuple of (is_valid, error_message).
        """
        config = self._validation_config
        if not isinstance(action, MoveTo) or not config.validate_bounds:
            return True, None

        x, y = to_pixel(action.x), to_pixel(action.y)
        if x < 0 or x >= config.screen_width:
            return False, f"X coordinate {x} out of bounds [0, {config.screen_width})"
        if y < 0 or y >= config.screen_height:
            return False, f"Y coordinate {y} out of bounds [0, {config.screen_height})"
        return True, None

    def apply_one(self, action: MouseAction) -> ActionResult:
        """Execute a single action.

        Args:
            action: The action to execute.

        Returns:
            Result with the status line, or a failure marker if the
            injector rejected the action.
        """
        start_time = time.time()
        try:
            self._inject(action)
        except InjectionError as e:
            duration_ms = (time.time() - start_time) * 1000
            message = describe_failure(action, e)
            logger.warning("%s", message)
            return ActionResult(
                success=False,
                action=action,
                message=message,
                error=str(e),
                duration_ms=duration_ms,
            )

        duration_ms = (time.time() - start_time) * 1000
        message = describe_action(action)
        logger.info("%s", message)
        return ActionResult(
            success=True,
            action=action,
            message=message,
            duration_ms=duration_ms,
        )

    def _inject(self, action: MouseAction) -> None:
        """Send an action to the injector.

        Raises:
            InjectionError: The subclass matching the failed primitive.
        """
        if isinstance(action, ButtonDown):
            with self._lock:
                try:
                    self._injector.mouse_down(action.button)
                except Exception as e:
                    raise MouseDownError(str(e) or type(e).__name__) from e

        elif isinstance(action, ButtonUp):
            with self._lock:
                try:
                    self._injector.mouse_up(action.button)
                except Exception as e:
                    raise MouseUpError(str(e) or type(e).__name__) from e

        elif isinstance(action, MoveTo):
            is_valid, error = self.validate(action)
            if not is_valid:
                raise MouseMoveError(error)
            with self._lock:
                try:
                    self._injector.mouse_move(to_pixel(action.x), to_pixel(action.y))
                except Exception as e:
                    raise MouseMoveError(str(e) or type(e).__name__) from e

        else:
            raise MouseRelayError(f"Unknown action: {action!r}")

    def execute(self, batch: ActionBatch) -> list[ActionResult]:
        """Execute a batch of actions in order.

        Sleeps ``batch.delay_between_ms`` between consecutive actions,
        never before the first or after the last.

        Args:
            batch: The batch to execute.

        Returns:
            One result per action, in order.
        """
        results: list[ActionResult] = []
        delay_s = (batch.delay_between_ms or 0) / 1000
        last_index = len(batch.actions) - 1

        logger.debug(
            "Executing batch of %d actions (delay_between=%sms)",
            len(batch.actions),
            batch.delay_between_ms,
        )
        for index, action in enumerate(batch.actions):
            results.append(self.apply_one(action))
            if delay_s > 0 and index < last_index:
                time.sleep(delay_s)

        failed = sum(1 for r in results if not r.success)
        if failed:
            logger.warning("Batch finished with %d/%d failed actions", failed, len(results))
        return results
