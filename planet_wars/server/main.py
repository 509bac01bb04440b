"""FastAPI server for Planet Wars.

Each WebSocket connection carries one game session: the client sends
``start`` and ``action`` messages, the server answers with ``state``,
``error`` and ``stop`` messages.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect

from ..utils.serialization import state_snapshot
from .schemas.responses import SessionStateResponse
from .session import GameSession, GameSessionManager, OutboxSender, SessionConfig, SessionPhase

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager(SessionConfig.from_env())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Planet Wars server starting...")
    yield
    logger.info("Planet Wars server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Planet Wars API",
    description="Turn server for multi-player Planet Wars matches",
    version="0.1.0",
    lifespan=lifespan,
)


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Planet Wars",
        "status": "operational",
        "activeSessions": len(sessions.sessions),
    }


@app.get("/api/sessions/{session_id}/state", response_model=SessionStateResponse)
async def get_session_state(session_id: str):
    """Get the current state of a session.

    Example:
        GET /api/sessions/session-abc123/state
    """
    session = sessions.get(session_id)
    if not session or session.game is None:
        raise HTTPException(status_code=404, detail="Session not found")

    return SessionStateResponse(
        sessionId=session_id,
        turn=session.game.turn,
        phase=session.phase.value,
        playersToMove=session.players_to_move,
        alivePlayers=[p.id for p in session.game.alive_players],
        state=state_snapshot(session.game),
        combats=session.game.combats_last_turn,
        winner=session.winner,
    )


@app.delete("/api/sessions/{session_id}")
async def delete_session(session_id: str):
    """Delete a game session."""
    if sessions.delete(session_id):
        return {"message": f"Session {session_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="Session not found")


# ============================================
# WEBSOCKET ENDPOINT
# ============================================


@app.websocket("/ws/sessions/{session_id}")
async def websocket_endpoint(websocket: WebSocket, session_id: str):
    """WebSocket channel for one game session.

    Messages are processed one at a time in arrival order. When the session
    reaches its terminal condition the server sends ``stop`` and closes the
    channel; the finished session stays readable over REST until deleted.
    """
    if sessions.get(session_id):
        await websocket.close(code=1008, reason="Session already exists")
        return

    await websocket.accept()

    outbox = OutboxSender()
    session = sessions.create_session(outbox, session_id=session_id)
    deadline = RoundDeadline(session.config.order_timeout)
    logger.info(f"WebSocket connected to session {session_id}")

    try:
        while True:
            frame = await _receive_frame(websocket, deadline.remaining(session))
            if frame is None:
                session.expire_round()
            elif isinstance(frame, bytes):
                session.handle_bytes(frame)
            else:
                session.handle_text(frame)

            for message in outbox.drain():
                await websocket.send_json(message)

            if outbox.closed:
                await websocket.close()
                break

    except WebSocketDisconnect:
        logger.info(f"WebSocket disconnected from session {session_id}")
    except Exception as e:
        logger.error(f"WebSocket error in session {session_id}: {e}", exc_info=True)
    finally:
        if session.phase is not SessionPhase.TERMINATED:
            sessions.delete(session_id)


class RoundDeadline:
    """Order deadline of the round a session is waiting on.

    The deadline is fixed when the session starts awaiting orders for a turn,
    so frames arriving during the round do not extend it.
    """

    def __init__(self, timeout: float | None):
        self.timeout = timeout
        self.turn: int | None = None
        self.expires_at = 0.0

    def remaining(self, session: GameSession) -> float | None:
        """Seconds left in the current round, or None when nothing is awaited."""
        if self.timeout is None or session.phase is not SessionPhase.AWAITING_ORDERS:
            return None

        now = asyncio.get_running_loop().time()
        if self.turn != session.game.turn:
            self.turn = session.game.turn
            self.expires_at = now + self.timeout
        return max(self.expires_at - now, 0.0)


async def _receive_frame(websocket: WebSocket, timeout: float | None) -> str | bytes | None:
    """Wait for the next text or binary frame.

    Returns None when ``timeout`` seconds pass first.
    """
    try:
        message = await asyncio.wait_for(websocket.receive(), timeout=timeout)
    except asyncio.TimeoutError:
        return None

    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
    if message.get("text") is not None:
        return message["text"]
    return message.get("bytes") or b""


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
