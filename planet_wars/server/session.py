"""Game session management: turn gating over a message transport."""

import json
import logging
import os
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol

from ..engine.map_generator import generate_map
from ..engine.turn_executor import TurnExecutor, TurnResult
from ..engine.validator import validate_moves
from ..engine.victory import is_game_over
from ..errors import ProtocolError
from ..models.game import Game
from ..models.order import LaunchOrder, Move
from ..utils.constants import INITIAL_SHIPS, MAP_HEIGHT, MAP_WIDTH, MAX_TURNS, PLANET_COUNT
from ..utils.serialization import state_snapshot
from .schemas.requests import ActionMessage, StartMessage, parse_message
from .schemas.responses import ErrorMessage, StateMessage, StopMessage

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    """Turn-gating state of a session."""

    CREATED = "CREATED"
    AWAITING_ORDERS = "AWAITING_ORDERS"
    PROCESSING = "PROCESSING"
    BROADCAST = "BROADCAST"
    TERMINATED = "TERMINATED"


class MessageSender(Protocol):
    """Capability to send tagged messages over a session's channel."""

    def send(self, message: dict) -> None: ...

    def close(self) -> None: ...


class OutboxSender:
    """MessageSender that queues messages until the transport drains them."""

    def __init__(self):
        self.messages: list[dict] = []
        self.closed = False

    def send(self, message: dict) -> None:
        self.messages.append(message)

    def close(self) -> None:
        self.closed = True

    def drain(self) -> list[dict]:
        """Return and forget all queued messages."""
        messages, self.messages = self.messages, []
        return messages


@dataclass
class SessionConfig:
    """Per-session game settings.

    ``order_timeout`` is the number of seconds the transport waits for the
    next message while orders are outstanding; ``None`` waits forever.
    """

    planet_count: int = PLANET_COUNT
    width: float = MAP_WIDTH
    height: float = MAP_HEIGHT
    initial_ships: int = INITIAL_SHIPS
    max_turns: int = MAX_TURNS
    seed: int | None = None
    order_timeout: float | None = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.planet_count < 1:
            raise ValueError(f"Invalid planet_count: {self.planet_count} (must be >= 1)")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid map size: {self.width}x{self.height}")
        if self.initial_ships < 0:
            raise ValueError(f"Invalid initial_ships: {self.initial_ships} (must be >= 0)")
        if self.max_turns < 1:
            raise ValueError(f"Invalid max_turns: {self.max_turns} (must be >= 1)")
        if self.order_timeout is not None and self.order_timeout <= 0:
            raise ValueError(f"Invalid order_timeout: {self.order_timeout} (must be > 0)")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SessionConfig":
        """Build a config from ``PLANET_WARS_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        def _get(name: str, cast):
            value = env.get(f"PLANET_WARS_{name}")
            return cast(value) if value not in (None, "") else None

        overrides = {
            "planet_count": _get("PLANET_COUNT", int),
            "width": _get("MAP_WIDTH", float),
            "height": _get("MAP_HEIGHT", float),
            "initial_ships": _get("INITIAL_SHIPS", int),
            "max_turns": _get("MAX_TURNS", int),
            "seed": _get("SEED", int),
            "order_timeout": _get("ORDER_TIMEOUT", float),
        }
        return cls(**{k: v for k, v in overrides.items() if v is not None})


@dataclass
class GameSession:
    """Manages one Planet Wars match.

    Receives ``start`` and ``action`` messages from the transport, validates
    orders, holds the round until every living player has moved, runs the turn
    executor and broadcasts the resulting state. Handles one message at a
    time.
    """

    id: str
    sender: MessageSender
    config: SessionConfig = field(default_factory=SessionConfig)
    executor: TurnExecutor = field(default_factory=TurnExecutor)
    game: Game | None = None
    phase: SessionPhase = SessionPhase.CREATED
    queued_orders: list[LaunchOrder] = field(default_factory=list)
    reserved: dict[int, int] = field(default_factory=dict)  # Ships committed per planet this round
    last_result: TurnResult | None = None

    # =========================================================================
    # TRANSPORT ENTRY POINTS
    # =========================================================================

    def handle_text(self, text: str) -> None:
        """Handle one raw text frame from the transport."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError:
            self._reject(ProtocolError("Message is not valid JSON"))
            return
        self.handle_message(raw)

    def handle_bytes(self, data: bytes) -> None:
        """Handle one binary frame from the transport as UTF-8 text."""
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            self._reject(ProtocolError("Message is not valid UTF-8 text"))
            return
        self.handle_text(text)

    def handle_message(self, raw: Any) -> None:
        """Handle one decoded message from the transport.

        Protocol errors are answered with an ``error`` message; the session
        keeps going and the round is not advanced.
        """
        try:
            message = parse_message(raw)
            if isinstance(message, StartMessage):
                self.start(message.players)
            else:
                self._handle_action(message)
        except ProtocolError as e:
            self._reject(e)

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def start(self, players: list[str]) -> None:
        """Initialize the map and roster and broadcast the initial state.

        Raises:
            ProtocolError: If the session already started or the players do
                           not fit the map
        """
        if self.phase is not SessionPhase.CREATED:
            raise ProtocolError("The game has already started")

        seed = self.config.seed
        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        try:
            self.game = generate_map(
                players,
                seed=seed,
                planet_count=self.config.planet_count,
                width=self.config.width,
                height=self.config.height,
                initial_ships=self.config.initial_ships,
            )
        except ValueError as e:
            raise ProtocolError(str(e)) from e

        logger.info(f"Session {self.id}: starting game with players {players}, seed={seed}")

        self.phase = SessionPhase.AWAITING_ORDERS
        self._broadcast_state()

    def submit_orders(self, player_id: str, moves: list[Move]) -> list[LaunchOrder]:
        """Queue a player's order for this round and advance if everyone moved.

        Invalid moves are dropped silently; the others are queued.

        Args:
            player_id: Submitting player
            moves: Moves in submission order

        Returns:
            The accepted launch orders

        Raises:
            ProtocolError: If the session is not accepting orders or the
                           player is not part of it
        """
        if self.phase is SessionPhase.CREATED or self.game is None:
            raise ProtocolError("The game has not started yet")
        if self.phase is not SessionPhase.AWAITING_ORDERS:
            raise ProtocolError("The game is not accepting orders")

        player = self.game.players.get(player_id)
        if player is None or player.is_neutral:
            raise ProtocolError(f"Unknown player {player_id}")

        accepted, rejected = validate_moves(self.game, player_id, moves, self.reserved)
        self.queued_orders.extend(accepted)
        if rejected:
            logger.debug(
                f"Session {self.id}: dropped {len(rejected)} of {len(moves)} moves from {player_id}"
            )

        player.moved = True
        self._advance_while_ready()

        return accepted

    def expire_round(self) -> None:
        """Close the current round for players who have not submitted.

        Players still owing an order forfeit their move for this round; they
        are not eliminated. Does nothing unless orders are awaited.
        """
        if self.phase is not SessionPhase.AWAITING_ORDERS or self.game is None:
            return

        for player_id in self.game.players_to_move():
            logger.warning(f"Session {self.id}: {player_id} missed the deadline for turn {self.game.turn + 1}")
            self.game.players[player_id].moved = True

        self._advance_while_ready()

    @property
    def players_to_move(self) -> list[str]:
        if self.game is None:
            return []
        return self.game.players_to_move()

    @property
    def winner(self) -> Optional[str]:
        """The last player alive once the session is over, otherwise None."""
        if self.phase is not SessionPhase.TERMINATED or self.game is None:
            return None
        alive = self.game.alive_players
        return alive[0].id if len(alive) == 1 else None

    def _handle_action(self, message: ActionMessage) -> None:
        moves = [Move(source=m.source, target=m.target, ships=m.ships) for m in message.action.moves]
        self.submit_orders(message.player, moves)

    def _advance_while_ready(self) -> None:
        # Loop because a round can leave nobody owing an order (players holding
        # fleets only) without ending the game.
        while self.phase is SessionPhase.AWAITING_ORDERS and not self.game.players_to_move():
            self._advance_round()

    def _advance_round(self) -> None:
        self.phase = SessionPhase.PROCESSING
        orders, self.queued_orders, self.reserved = self.queued_orders, [], {}
        self.game, self.last_result = self.executor.execute_turn(self.game, orders)

        self.phase = SessionPhase.BROADCAST
        self._broadcast_state()

        if is_game_over(self.game, self.config.max_turns):
            self.phase = SessionPhase.TERMINATED
            logger.info(
                f"Session {self.id}: game over after turn {self.game.turn}, "
                f"alive={[p.id for p in self.game.alive_players]}"
            )
            self.sender.send(StopMessage().model_dump())
            self.sender.close()
            return

        self.phase = SessionPhase.AWAITING_ORDERS

    def _broadcast_state(self) -> None:
        message = StateMessage(
            turn=self.game.turn,
            players=self.game.players_to_move(),
            state=state_snapshot(self.game),
        )
        self.sender.send(message.model_dump())

    def _reject(self, error: ProtocolError) -> None:
        logger.info(f"Session {self.id}: rejected message: {error}")
        self.sender.send(ErrorMessage(content=error.message).model_dump())


class GameSessionManager:
    """Manages all active game sessions.

    In-memory storage; sessions share no state with each other.
    """

    def __init__(self, config: SessionConfig | None = None):
        self.config = config or SessionConfig()
        self.sessions: dict[str, GameSession] = {}

    def create_session(
        self,
        sender: MessageSender,
        session_id: str | None = None,
        config: SessionConfig | None = None,
    ) -> GameSession:
        """Create a new game session bound to a transport channel.

        Args:
            sender: Channel the session sends its messages to
            session_id: Optional id chosen by the transport
            config: Optional settings, defaults to the manager's config

        Returns:
            Newly created GameSession

        Raises:
            ValueError: If a session with this id already exists
        """
        if session_id is None:
            session_id = f"session-{uuid.uuid4().hex[:8]}"
        if session_id in self.sessions:
            raise ValueError(f"Session {session_id} already exists")

        session = GameSession(id=session_id, sender=sender, config=config or self.config)
        self.sessions[session_id] = session

        logger.info(f"Created session {session_id}")

        return session

    def get(self, session_id: str) -> GameSession | None:
        """Get a game session by ID."""
        return self.sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """Delete a game session.

        Returns:
            True if deleted, False if not found
        """
        if session_id in self.sessions:
            del self.sessions[session_id]
            logger.info(f"Deleted session {session_id}")
            return True
        return False

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        self.sessions.clear()
