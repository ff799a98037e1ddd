"""
Table setup: the lobby state and game configuration.
"""

from __future__ import annotations
from typing import Mapping
from dataclasses import replace
import logging

from tablepoker.core.player import Player
from tablepoker.core.rules import Phase, DEFAULT_BUY_IN
from tablepoker.core.state import GameState, PregameConfig


logger = logging.getLogger(__name__)

HUMAN_PLAYER_ID = "1"
HUMAN_PLAYER_NAME = "You"


def init_game() -> GameState:
    """Lobby state: one human seat, nothing wagered, not playing."""
    human = Player.human(HUMAN_PLAYER_ID, HUMAN_PLAYER_NAME, chips=DEFAULT_BUY_IN)
    return GameState(players=(human,))


def start_game(state: GameState, config: PregameConfig) -> GameState:
    """
    Begin a game with a validated configuration.

    Seats the configured bots after the human seats, gives every seat
    `config.buy_in` chips and renumbers seats in order. Bots left over from
    an earlier game are dropped.

    Args:
        state: A lobby state
        config: Bot seats, buy-in and blinds

    Returns:
        The state, ready to deal the first hand
    """
    humans = [p for p in state.players if not p.is_bot]
    seats = humans + list(config.players)
    players = tuple(
        replace(
            p,
            chips=config.buy_in,
            seat=i,
            hand=(),
            folded=False,
            current_bet=0,
            total_bet=0,
            action=None,
            displayed_action=None,
            hand_value=None,
        )
        for i, p in enumerate(seats)
    )
    logger.info(
        f"Starting game with {len(players)} players, buy-in {config.buy_in}, "
        f"blinds {config.small_blind}/{config.big_blind}"
    )
    return replace(
        state,
        players=players,
        small_blind=config.small_blind,
        big_blind=config.big_blind,
        deck=(),
        community=(),
        pot=0,
        current_bet=0,
        dealer_button=-1,
        hand_winner=None,
        playing=True,
        phase=Phase.DEALING,
        hand_number=0,
    )


def resume_game(saved: Mapping[str, int]) -> GameState:
    """
    A fresh lobby whose seats take their chips from a saved mapping.

    Seats whose id is not in `saved` keep their default chip count.
    """
    state = init_game()
    players = tuple(
        replace(p, chips=saved.get(p.player_id, p.chips))
        for p in state.players
    )
    return replace(state, players=players)
