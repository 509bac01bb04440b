"""Pydantic schemas for inbound session messages."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from ...errors import ProtocolError


def _canonical_player_id(value: Any) -> Any:
    """Accept integer player ids from clients and canonicalize them to strings."""
    if isinstance(value, bool):
        return value  # Let pydantic reject it
    if isinstance(value, int):
        return str(value)
    return value


class StartMessage(BaseModel):
    """Start directive: initializes a session with its players."""

    type: Literal["start"]
    players: list[Annotated[str, Field(min_length=1)]] = Field(
        min_length=1, description="Ids of the players taking part"
    )

    @field_validator("players", mode="before")
    @classmethod
    def canonicalize_players(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_canonical_player_id(v) for v in value]
        return value


class MoveRequest(BaseModel):
    """Single move inside an action."""

    source: int = Field(description="Source planet id")
    target: int = Field(description="Target planet id")
    ships: int = Field(description="Number of ships to send")


class ActionPayload(BaseModel):
    """All moves a player submits for one round."""

    moves: list[MoveRequest] = Field(default_factory=list)


class ActionMessage(BaseModel):
    """Order submission from one player."""

    type: Literal["action"]
    player: Annotated[str, Field(min_length=1)]
    action: ActionPayload

    @field_validator("player", mode="before")
    @classmethod
    def canonicalize_player(cls, value: Any) -> Any:
        return _canonical_player_id(value)


InboundMessage = Annotated[Union[StartMessage, ActionMessage], Field(discriminator="type")]

_inbound_adapter = TypeAdapter(InboundMessage)


def parse_message(raw: Any) -> StartMessage | ActionMessage:
    """Parse and validate a raw inbound message.

    Args:
        raw: Decoded JSON message

    Returns:
        StartMessage or ActionMessage

    Raises:
        ProtocolError: If the message is not a valid start or action message
    """
    try:
        return _inbound_adapter.validate_python(raw)
    except ValidationError as e:
        raise ProtocolError(
            "Malformed message, please check your formatting",
            context={"errors": e.error_count()},
        ) from e
