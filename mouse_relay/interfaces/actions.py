"""Action types and executor interface for mouse input injection."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum


class MouseButton(StrEnum):
    """Mouse buttons a client can press or release.

    Values are the exact strings used on the wire.
    """

    LEFT = "Left"
    MIDDLE = "Middle"
    RIGHT = "Right"
    SCROLL_UP = "ScrollUp"
    SCROLL_DOWN = "ScrollDown"
    SCROLL_LEFT = "ScrollLeft"
    SCROLL_RIGHT = "ScrollRight"


@dataclass(frozen=True)
class ButtonDown:
    """Press and hold a mouse button."""

    button: MouseButton


@dataclass(frozen=True)
class ButtonUp:
    """Release a mouse button."""

    button: MouseButton


@dataclass(frozen=True)
class MoveTo:
    """Move the cursor to absolute screen coordinates."""

    x: float
    y: float


MouseAction = ButtonDown | ButtonUp | MoveTo


@dataclass(frozen=True)
class ActionBatch:
    """An ordered sequence of actions submitted by one request.

    Attributes:
        actions: Actions to execute, in order.
        delay_between_ms: Pause between consecutive actions, if any.
    """

    actions: tuple[MouseAction, ...]
    delay_between_ms: int | None = None


class ActionResult:
    """Result of an executed action."""

    __slots__ = ("success", "action", "message", "error", "duration_ms")

    def __init__(
        self,
        success: bool,
        action: MouseAction,
        message: str,
        error: str | None = None,
        duration_ms: float = 0.0,
    ) -> None:
        """Initialize an action result.

        Args:
            success: Whether the action was injected.
            action: The action that was executed.
            message: Human-readable status line reported to the client.
            error: Error description if the action failed.
            duration_ms: How long the action took in milliseconds.
        """
        self.success = success
        self.action = action
        self.message = message
        self.error = error
        self.duration_ms = duration_ms

    def __repr__(self) -> str:
        return f"ActionResult(success={self.success}, message={self.message!r})"


class ActionExecutor(ABC):
    """Abstract interface for executing mouse actions."""

    @abstractmethod
    def apply_one(self, action: MouseAction) -> ActionResult:
        """Execute a single action.

        Args:
            action: The action to execute.

        Returns:
            Result describing what was done or why it failed.
        """
        ...

    @abstractmethod
    def execute(self, batch: ActionBatch) -> list[ActionResult]:
        """Execute every action of a batch in order.

        Args:
            batch: The batch to execute.

        Returns:
            One result per action, in the batch's order.
        """
        ...


class MouseRelayError(Exception):
    """Base class for mouse relay errors."""

    pass


class DecodeError(MouseRelayError):
    """Raised when a request payload does not match the expected shape.

    Attributes:
        errors: Validation error records, one per problem found.
    """

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class InjectionError(MouseRelayError):
    """Raised when the OS input primitive cannot perform an action."""

    pass


class InjectorUnavailableError(InjectionError):
    """Raised when no input injector can be created on this host."""

    pass


class MouseDownError(InjectionError):
    """Raised when pressing a button fails."""

    pass


class MouseUpError(InjectionError):
    """Raised when releasing a button fails."""

    pass


class MouseMoveError(InjectionError):
    """Raised when moving the cursor fails or the target is out of bounds."""

    pass
