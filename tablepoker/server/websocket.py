"""
WebSocket handling for real-time game communication.

This module provides:
- ConnectionManager: Pushes every new table state to connected clients
- WebSocket endpoint: Accepts the human seat's actions
"""

from __future__ import annotations
from typing import Dict, Any, List, Set
import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from tablepoker.core.player import PlayerAction
from tablepoker.core.rules import Phase
from tablepoker.core.setup import HUMAN_PLAYER_ID
from tablepoker.core.state import GameState
from tablepoker.server.schemas import WSActionMessage, WSStateMessage
from tablepoker.server.session import TableSession


logger = logging.getLogger(__name__)


def state_message(state: GameState) -> Dict[str, Any]:
    """State update message for the human seat."""
    return WSStateMessage(**state.to_dict(for_player_id=HUMAN_PLAYER_ID)).model_dump()


class ConnectionManager:
    """
    Tracks the WebSocket clients watching one table session.

    Usage:
        manager = ConnectionManager(session)
        await manager.connect(websocket)
        response = await manager.handle_message(message)
        manager.disconnect(websocket)
    """

    def __init__(self, session: TableSession):
        self.session = session
        self.connections: List[WebSocket] = []
        self._pending: Set[asyncio.Task] = set()
        session.subscribe(self._on_state)

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a client and send it the current state."""
        await websocket.accept()
        self.connections.append(websocket)
        logger.info(f"Client connected ({len(self.connections)} total)")
        await websocket.send_json(state_message(self.session.state))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.connections:
            self.connections.remove(websocket)
            logger.info(f"Client disconnected ({len(self.connections)} left)")

    async def broadcast(self, message: Dict[str, Any]) -> None:
        """Send a message to every connected client."""
        for ws in list(self.connections):
            try:
                await ws.send_json(message)
            except Exception as e:
                logger.error(f"Error sending state: {e}")
                self.disconnect(ws)

    def _on_state(self, state: GameState) -> None:
        if self.connections:
            task = asyncio.ensure_future(self.broadcast(state_message(state)))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def handle_message(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle a message from the client.

        Args:
            message: The message dict with 'type' and optional data

        Returns:
            Response dict
        """
        msg_type = message.get("type", "")

        if msg_type == "action":
            return self._handle_action(message)
        elif msg_type == "get_state":
            return state_message(self.session.state)
        else:
            return {"type": "error", "message": f"Unknown message type: {msg_type}"}

    def _handle_action(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """Handle a game action for the human seat."""
        try:
            parsed = WSActionMessage(**message)
        except ValidationError as e:
            return {"type": "error", "message": f"Invalid action: {e.errors()[0]['msg']}"}

        state = self.session.state
        current = state.current
        if state.phase != Phase.IN_HAND or current is None or current.player_id != HUMAN_PLAYER_ID:
            return {"type": "error", "message": "Not your turn"}

        self.session.act(PlayerAction(parsed.action, parsed.amount))
        return {
            "type": "action_result",
            "success": True,
            "action": parsed.action.value,
            "amount": parsed.amount,
        }


async def websocket_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for game communication.

    Protocol:
    1. Client connects; server sends the current state
    2. Client sends actions: {"type": "action", "action": "call"}
       or {"type": "action", "action": "bet", "amount": 50}
    3. Server pushes a state message after every transition
    """
    manager: ConnectionManager = websocket.app.state.connections

    try:
        await manager.connect(websocket)
        while True:
            message = await websocket.receive_json()
            response = await manager.handle_message(message)
            await websocket.send_json(response)

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected")
    finally:
        manager.disconnect(websocket)
