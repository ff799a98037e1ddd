"""
Betting Engine: applies one player action and rotates the turn.

Betting rules:

1. A seat acts at most once per betting round. A second action for a seat
   that already acted is ignored and the input state is returned as is,
   which absorbs duplicate or late dispatches.

2. A bet reopens the round: every other seat's recorded action is cleared
   and they must act again.

3. A call pays what is missing to match the table bet, capped by the
   player's stack. Paying nothing is a check.

4. The round closes when every non-folded player has acted and matched
   the table bet, or when only one player has not folded.
"""

from __future__ import annotations
from typing import List
from dataclasses import replace
from enum import IntEnum
import logging

from tablepoker.core.actions import action_to_display
from tablepoker.core.player import Player, PlayerAction
from tablepoker.core.rules import ActionType, first_active_after
from tablepoker.core.state import GameState


logger = logging.getLogger(__name__)


class RoundStatus(IntEnum):
    """Classification of the betting round after an action."""
    OPEN = 0          # Someone still has to act or match
    ONE_LEFT = 1      # Everyone else folded
    ALL_MATCHED = 2   # Every active player acted and matched


def ready_to_advance_street(state: GameState) -> RoundStatus:
    """Classify the betting round from the non-folded players."""
    active = state.active_players
    if len(active) == 1:
        return RoundStatus.ONE_LEFT

    all_acted = all(p.action is not None for p in active)
    all_matched = all(p.current_bet == state.current_bet for p in active)
    if all_acted and all_matched:
        return RoundStatus.ALL_MATCHED
    return RoundStatus.OPEN


def next_to_act(players: List[Player], position: int) -> int:
    """First non-folded seat after `position`."""
    return first_active_after([p.folded for p in players], position)


def apply_action(state: GameState, action: PlayerAction) -> GameState:
    """
    Apply `action` for the seat at `state.current_player`.

    Returns:
        The next state with the turn moved to the next non-folded seat,
        or `state` itself if that seat already acted this round
    """
    i = state.current_player
    player = state.players[i]

    if player.action is not None:
        logger.debug(f"Ignoring {action.type.value}: {player.name} already acted this round")
        return state

    players = list(state.players)
    pot = state.pot
    current_bet = state.current_bet
    label = action_to_display(state, player, action)

    if action.type == ActionType.FOLD:
        player = replace(player, folded=True, action=action, current_bet=0, total_bet=0)

    elif action.type == ActionType.CALL:
        to_call = max(0, current_bet - player.current_bet)
        paid = min(player.chips, to_call)
        pot += paid
        player = replace(
            player,
            chips=player.chips - paid,
            current_bet=player.current_bet + paid,
            total_bet=player.total_bet + paid,
            action=action,
        )

    elif action.type == ActionType.BET:
        players = [replace(p, action=None, displayed_action=None) for p in players]
        player = players[i]
        amount = max(0, min(player.chips, action.amount))
        pot += amount
        player = replace(
            player,
            chips=player.chips - amount,
            current_bet=player.current_bet + amount,
            total_bet=player.total_bet + amount,
            action=PlayerAction.bet(amount),
        )
        current_bet = max(current_bet, player.current_bet)

    # ALL_IN is reserved: callers bet the full stack instead

    players[i] = replace(player, displayed_action=label)
    logger.debug(f"{player.name}: {label or action.type.value}")

    return replace(
        state,
        players=tuple(players),
        pot=pot,
        current_bet=current_bet,
        current_player=next_to_act(players, i),
    )
