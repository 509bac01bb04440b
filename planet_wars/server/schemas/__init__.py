"""Message schemas for the session transport."""

from .requests import ActionMessage, MoveRequest, StartMessage, parse_message
from .responses import ErrorMessage, SessionStateResponse, StateMessage, StopMessage

__all__ = [
    "ActionMessage",
    "MoveRequest",
    "StartMessage",
    "parse_message",
    "ErrorMessage",
    "SessionStateResponse",
    "StateMessage",
    "StopMessage",
]
