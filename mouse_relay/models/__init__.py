"""Wire models for the mouse relay HTTP API.

All models use Pydantic for validation and serialization.
"""

from mouse_relay.models.actions import (
    ActionJSON,
    MouseActionRequest,
    MouseActionResponse,
    MouseActionsRequest,
    MouseActionsResponse,
    decode_action,
    decode_batch,
    encode_action,
    encode_batch,
)

__all__ = [
    "ActionJSON",
    "MouseActionRequest",
    "MouseActionResponse",
    "MouseActionsRequest",
    "MouseActionsResponse",
    "decode_action",
    "decode_batch",
    "encode_action",
    "encode_batch",
]
