"""Wire models and decoding for mouse action requests.

Actions travel as single-key JSON objects whose key names the variant:

    {"MouseDown": "Left"}
    {"MouseUp": "Right"}
    {"MouseMove": [123.0, 456.0]}

A batch request wraps them as ``{"actions": [...], "delay_between": 50}``.

Example:
    >>> batch = decode_batch(b'{"actions": [{"MouseDown": "Left"}]}')
    >>> batch.actions
    (ButtonDown(button=<MouseButton.LEFT: 'Left'>),)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, Field, FiniteFloat, ValidationError

from mouse_relay.interfaces.actions import (
    ActionBatch,
    ButtonDown,
    ButtonUp,
    DecodeError,
    MouseAction,
    MouseButton,
    MoveTo,
)

_WIRE_CONFIG = {"frozen": True, "extra": "forbid", "strict": True}


class MouseDownJSON(BaseModel):
    """Wire form of a button press."""

    MouseDown: MouseButton

    model_config = _WIRE_CONFIG

    def to_action(self) -> ButtonDown:
        return ButtonDown(self.MouseDown)


class MouseUpJSON(BaseModel):
    """Wire form of a button release."""

    MouseUp: MouseButton

    model_config = _WIRE_CONFIG

    def to_action(self) -> ButtonUp:
        return ButtonUp(self.MouseUp)


class MouseMoveJSON(BaseModel):
    """Wire form of an absolute cursor move."""

    MouseMove: tuple[FiniteFloat, FiniteFloat]

    model_config = _WIRE_CONFIG

    def to_action(self) -> MoveTo:
        x, y = self.MouseMove
        return MoveTo(x, y)


ActionJSON = MouseDownJSON | MouseUpJSON | MouseMoveJSON


class MouseActionsRequest(BaseModel):
    """Body of ``POST /mouse-actions``."""

    actions: list[ActionJSON] = Field(..., description="Actions to execute in order")
    delay_between: int | None = Field(
        default=None,
        ge=0,
        description="Milliseconds to wait between consecutive actions",
    )

    model_config = {"frozen": True, "strict": True}

    def to_batch(self) -> ActionBatch:
        return ActionBatch(
            actions=tuple(item.to_action() for item in self.actions),
            delay_between_ms=self.delay_between,
        )


class MouseActionRequest(BaseModel):
    """Body of ``POST /mouse-action``."""

    action: ActionJSON = Field(..., description="The action to execute")

    model_config = {"frozen": True, "strict": True}


class MouseActionsResponse(BaseModel):
    """Response of ``POST /mouse-actions``."""

    messages: list[str] = Field(default_factory=list)


class MouseActionResponse(BaseModel):
    """Response of ``POST /mouse-action``."""

    message: str


ModelT = TypeVar("ModelT", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    """Summarize a validation error as one line."""
    errors = exc.errors(include_url=False)
    if not errors:
        return "invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first["loc"])
    summary = f"{location}: {first['msg']}" if location else first["msg"]
    if len(errors) > 1:
        summary += f" (and {len(errors) - 1} more)"
    return summary


def _validate(model: type[ModelT], payload: bytes | str | Mapping[str, Any]) -> ModelT:
    """Validate a payload in strict JSON mode.

    Parsed mappings are re-serialized so they get the same strict JSON rules
    as raw bodies: numbers only for coordinates and delays, button value
    strings, arrays for coordinate pairs.
    """
    if not isinstance(payload, (bytes, bytearray, str)):
        try:
            payload = json.dumps(payload)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"payload is not JSON-serializable: {e}") from e
    try:
        return model.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeError(
            _describe(e),
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def decode_batch(payload: bytes | str | Mapping[str, Any]) -> ActionBatch:
    """Decode a batch request body.

    Args:
        payload: Raw JSON text or an already parsed mapping.

    Returns:
        The decoded batch.

    Raises:
        DecodeError: If the payload does not match the request shape.
    """
    return _validate(MouseActionsRequest, payload).to_batch()


def decode_action(payload: bytes | str | Mapping[str, Any]) -> MouseAction:
    """Decode a single-action request body (``{"action": ...}``).

    Raises:
        DecodeError: If the payload does not match the request shape.
    """
    return _validate(MouseActionRequest, payload).action.to_action()


def encode_action(action: MouseAction) -> dict[str, Any]:
    """Encode an action as its single-key wire object."""
    if isinstance(action, ButtonDown):
        return {"MouseDown": action.button.value}
    if isinstance(action, ButtonUp):
        return {"MouseUp": action.button.value}
    if isinstance(action, MoveTo):
        return {"MouseMove": [action.x, action.y]}
    raise TypeError(f"Unknown action: {action!r}")


def encode_batch(batch: ActionBatch) -> dict[str, Any]:
    """Encode a batch as a ``POST /mouse-actions`` body."""
    body: dict[str, Any] = {"actions": [encode_action(a) for a in batch.actions]}
    if batch.delay_between_ms is not None:
        body["delay_between"] = batch.delay_between_ms
    return body
