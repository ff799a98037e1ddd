"""
HTTP API Routes for TablePoker.

These routes configure the table, submit the human seat's actions and
query the state. Live updates are pushed over the WebSocket.
"""

from typing import Dict, Any
from fastapi import APIRouter, HTTPException, Request

from tablepoker.core.rules import Phase
from tablepoker.core.setup import HUMAN_PLAYER_ID
from tablepoker.server.schemas import TableConfigRequest, ActionRequest, ErrorSchema
from tablepoker.server.session import TableSession

router = APIRouter()


def get_session(request: Request) -> TableSession:
    """Get the table session of this app."""
    return request.app.state.session


@router.get("/health")
async def health() -> Dict[str, Any]:
    return {"status": "ok"}


@router.get("/game/state")
async def get_game_state(request: Request) -> Dict[str, Any]:
    """Get the current state with the human seat's private information."""
    return get_session(request).state.to_dict(for_player_id=HUMAN_PLAYER_ID)


@router.post("/game/start", responses={409: {"model": ErrorSchema}})
async def start_game(req: TableConfigRequest, request: Request) -> Dict[str, Any]:
    """
    Start a game with the validated configuration.

    The first hand is dealt right after this call returns.
    """
    session = get_session(request)
    if session.state.playing:
        raise HTTPException(status_code=409, detail="Game already running")
    state = session.start_game(req.to_config())
    return {
        "success": True,
        "message": f"Game started with {state.num_players} players",
        **state.to_dict(for_player_id=HUMAN_PLAYER_ID),
    }


@router.post("/game/action", responses={409: {"model": ErrorSchema}})
async def take_action(req: ActionRequest, request: Request) -> Dict[str, Any]:
    """Submit an action for the human seat."""
    session = get_session(request)
    state = session.state
    current = state.current

    if state.phase != Phase.IN_HAND:
        raise HTTPException(status_code=409, detail="No hand in progress")
    if current is None or current.player_id != HUMAN_PLAYER_ID:
        raise HTTPException(status_code=409, detail="Not your turn")

    next_state = session.act(req.to_action())
    return {
        "success": True,
        "action_type": req.action_type.value,
        **next_state.to_dict(for_player_id=HUMAN_PLAYER_ID),
    }


@router.post("/game/next-hand", responses={409: {"model": ErrorSchema}})
async def next_hand(request: Request) -> Dict[str, Any]:
    """Deal the next hand once the previous one is over."""
    session = get_session(request)
    if not session.state.playing or session.state.phase not in (Phase.DEALING, Phase.HAND_OVER):
        raise HTTPException(status_code=409, detail="Cannot start hand")
    state = session.next_hand()
    return state.to_dict(for_player_id=HUMAN_PLAYER_ID)


@router.post("/game/end")
async def end_game(request: Request) -> Dict[str, Any]:
    """Return to the lobby."""
    state = get_session(request).end_game()
    return state.to_dict(for_player_id=HUMAN_PLAYER_ID)
