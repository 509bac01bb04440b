"""Pydantic schemas for outbound session messages and REST responses."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class StateMessage(BaseModel):
    """State broadcast after start and after every round."""

    type: Literal["state"] = "state"
    turn: int
    players: list[str] = Field(description="Players still owing a move this round")
    state: dict


class ErrorMessage(BaseModel):
    """Sent instead of advancing the round when a message is rejected."""

    type: Literal["error"] = "error"
    content: str


class StopMessage(BaseModel):
    """Signals the terminal condition; the transport closes the channel."""

    type: Literal["stop"] = "stop"


class SessionStateResponse(BaseModel):
    """Response containing the current state of a session."""

    sessionId: str  # noqa: N815
    turn: int
    phase: str
    playersToMove: list[str]  # noqa: N815
    alivePlayers: list[str]  # noqa: N815
    state: dict
    combats: list[dict] = Field(default_factory=list)
    winner: Optional[str] = None
