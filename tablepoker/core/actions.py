"""
Short display labels for player actions ("Check", "Raise to $40", ...).

Labels are stored on the player record as opaque strings; the engine
never reads them back.
"""

from __future__ import annotations
from typing import Optional

from tablepoker.core.player import Player, PlayerAction
from tablepoker.core.rules import ActionType
from tablepoker.core.state import GameState


def action_to_display(
    state: GameState,
    player: Player,
    action: Optional[PlayerAction],
) -> str:
    """
    Label an action against the state it is applied to.

    Args:
        state: State before the action
        player: The acting player (before the action)
        action: The action

    Returns:
        "Fold", "All In", "Check", "Call", "Bet $n" or "Raise to $n"
    """
    if action is None:
        return ""

    if action.type == ActionType.FOLD:
        return "Fold"

    if action.type == ActionType.ALL_IN:
        return "All In"

    if action.type == ActionType.CALL:
        if state.current_bet == 0:
            return "Check"
        # Big blind option: nobody raised past the blind it already posted
        if (
            player.seat == state.big_blind_seat
            and player.current_bet == state.big_blind == state.current_bet
        ):
            return "Check"
        return "Call"

    if action.type == ActionType.BET:
        amount = max(0, min(player.chips, action.amount))
        if state.current_bet == 0:
            return f"Bet ${amount}"
        return f"Raise to ${player.current_bet + amount}"

    return ""
