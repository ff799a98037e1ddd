"""
Texas Hold'em Game Engine - State Machine Implementation.

This module implements the table as a pure transition function:

    reduce_game(state, event) -> (next_state, effects)

It handles:
- Game phases (dealing, in hand, showdown, hand over)
- Street progression (preflop, flop, turn, river)
- Dealer button rotation and turn order
- Winner resolution and pot award

The reducer never waits or runs timers. Deferred work is returned as
declarative effects (`After`, `BotTurnAfter`) that a scheduler executes
and eventually feeds back as new events.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import replace
import logging
import random

from tablepoker.core.betting import apply_action, ready_to_advance_street, RoundStatus
from tablepoker.core.card import new_deck, draw, draw_many
from tablepoker.core.events import (
    GameEvent, GameEffect, After, BotTurnAfter,
    InitiateGame, StartNextHand, PlayerActionEvent, BotAction,
    AdvanceStreet, StartShowdown, EndHand, EndGame,
)
from tablepoker.core.hand import evaluate_hands, compare_hands, describe_hand_value
from tablepoker.core.rules import (
    Street, Phase, Lane, first_active_after,
    NEXT_STREET, HOLE_CARDS,
    START_HAND_DELAY_MS, ROUND_END_DELAY_MS, SHOWDOWN_DELAY_MS, SHOWDOWN_REVEAL_MS,
)
from tablepoker.core.setup import init_game, start_game
from tablepoker.core.state import GameState


logger = logging.getLogger(__name__)


class HandResolutionError(RuntimeError):
    """No player can be awarded the pot."""


def start_hand(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """
    Deal a new hand.

    Resets every player's per-hand fields, issues a freshly shuffled deck
    and deals one card to each seat in seat order, twice. The button moves
    one seat and the first seat after it acts first.
    """
    deck = new_deck(rng)
    players = [
        replace(
            p,
            current_bet=0,
            total_bet=0,
            action=None,
            displayed_action=None,
            folded=False,
            hand=(),
            hand_value=None,
        )
        for p in state.players
    ]

    for _ in range(HOLE_CARDS):
        for i, player in enumerate(players):
            card, deck = draw(deck)
            players[i] = replace(player, hand=player.hand + (card,))

    folded = [p.folded for p in players]
    dealer = first_active_after(folded, state.dealer_button)
    hand_number = state.hand_number + 1
    logger.info(f"Starting hand #{hand_number}, dealer seat {dealer}")

    return replace(
        state,
        players=tuple(players),
        deck=deck,
        community=(),
        street=Street.PREFLOP,
        phase=Phase.IN_HAND,
        pot=0,
        current_bet=0,
        dealer_button=dealer,
        current_player=first_active_after(folded, dealer),
        hand_winner=None,
        hand_number=hand_number,
    )


def advance_street(state: GameState) -> GameState:
    """
    Reveal the next street and reset the betting round.

    Nothing happens if no player has acted yet this round, or on the river.
    """
    if all(p.action is None for p in state.players):
        return state
    if state.street not in NEXT_STREET:
        return state

    street, num_cards = NEXT_STREET[state.street]
    drawn, deck = draw_many(state.deck, num_cards)
    players = tuple(
        replace(p, action=None, displayed_action=None, current_bet=0)
        for p in state.players
    )
    community = state.community + tuple(drawn)
    logger.info(f"{street.value.capitalize()}: {' '.join(str(c) for c in community)}")

    return replace(
        state,
        players=players,
        deck=deck,
        community=community,
        street=street,
        current_bet=0,
        current_player=first_active_after([p.folded for p in players], state.dealer_button),
    )


def start_showdown(state: GameState) -> GameState:
    """Evaluate every remaining hand and enter the showdown phase."""
    return replace(state, players=evaluate_hands(state), phase=Phase.SHOWDOWN)


def _resolve_winner(state: GameState) -> int:
    """
    Seat that takes the pot.

    A lone non-folded player wins without any evaluation. Otherwise the
    strictly best evaluated hand wins; the earliest seat keeps a tie.
    """
    active = [(i, p) for i, p in enumerate(state.players) if not p.folded]
    if len(active) == 1:
        return active[0][0]

    candidates = [(i, p) for i, p in active if p.hand_value is not None]
    if not candidates:
        raise HandResolutionError("No evaluated hands to award the pot to")

    best_seat, best = candidates[0]
    for seat, player in candidates[1:]:
        if compare_hands(player.hand_value, best.hand_value) > 0:
            best_seat, best = seat, player
    return best_seat


def end_hand(state: GameState) -> GameState:
    """
    Award the whole pot to the winner and end the hand.

    Raises:
        HandResolutionError: If several players remain but none was evaluated
    """
    winner = _resolve_winner(state)
    players = list(state.players)
    players[winner] = replace(players[winner], chips=players[winner].chips + state.pot)

    hand_value = players[winner].hand_value
    detail = f" with {describe_hand_value(hand_value)}" if hand_value else ""
    logger.info(f"{players[winner].name} wins {state.pot}{detail}")

    return replace(
        state,
        players=tuple(players),
        pot=0,
        current_bet=0,
        phase=Phase.HAND_OVER,
        hand_winner=winner,
    )


def _bot_turn(state: GameState) -> List[GameEffect]:
    current = state.current
    if state.phase == Phase.IN_HAND and current is not None and current.is_bot:
        return [BotTurnAfter()]
    return []


def _after_action(state: GameState) -> List[GameEffect]:
    status = ready_to_advance_street(state)
    if status == RoundStatus.ONE_LEFT:
        return [After(ROUND_END_DELAY_MS, EndHand(), Lane.HAND)]
    if status == RoundStatus.ALL_MATCHED:
        return [After(ROUND_END_DELAY_MS, AdvanceStreet(), Lane.STREET)]
    return _bot_turn(state)


def reduce_game(
    state: GameState,
    event: GameEvent,
    rng: Optional[random.Random] = None,
) -> Tuple[GameState, List[GameEffect]]:
    """
    Reducer for the table state machine.

    Takes the current state and an event and returns the next state plus a
    list of effects describing deferred work for the caller to schedule.
    Events that are not valid for the current phase return the state
    unchanged with no effects.

    Args:
        state: Current state
        event: Event to apply
        rng: Optional random source for shuffling (tests, replays)

    Returns:
        Tuple of (next state, effects)
    """
    if isinstance(event, InitiateGame):
        next_state = start_game(state, event.config)
        return next_state, [After(START_HAND_DELAY_MS, StartNextHand(), Lane.HAND)]

    if isinstance(event, StartNextHand):
        if not state.playing or state.phase not in (Phase.DEALING, Phase.HAND_OVER):
            return _ignore(state, event)
        return start_hand(state, rng), []

    if isinstance(event, (PlayerActionEvent, BotAction)):
        if state.phase != Phase.IN_HAND:
            return _ignore(state, event)
        next_state = apply_action(state, event.action)
        return next_state, _after_action(next_state)

    if isinstance(event, AdvanceStreet):
        if state.phase != Phase.IN_HAND:
            return _ignore(state, event)
        if (
            state.street == Street.RIVER
            and ready_to_advance_street(state) == RoundStatus.ALL_MATCHED
        ):
            return state, [After(SHOWDOWN_DELAY_MS, StartShowdown(), Lane.HAND)]
        next_state = advance_street(state)
        return next_state, _bot_turn(next_state)

    if isinstance(event, StartShowdown):
        if state.phase != Phase.IN_HAND:
            return _ignore(state, event)
        next_state = start_showdown(state)
        return next_state, [After(SHOWDOWN_REVEAL_MS, EndHand(), Lane.HAND)]

    if isinstance(event, EndHand):
        if state.phase not in (Phase.IN_HAND, Phase.SHOWDOWN):
            return _ignore(state, event)
        return end_hand(state), []

    if isinstance(event, EndGame):
        return init_game(), []

    return _ignore(state, event)


def _ignore(state: GameState, event: object) -> Tuple[GameState, List[GameEffect]]:
    logger.debug(f"Ignoring {type(event).__name__} in phase {state.phase.value}")
    return state, []
