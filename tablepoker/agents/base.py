"""
Shared helpers for bot strategies.

A strategy is a plain function `(state, player, rng) -> PlayerAction`
called for the bot whose turn it is. The helpers here give strategies a
rough view of the table: how much they owe, how strong their cards are
and how much to wager.

Usage:
    def my_strategy(state, player, rng):
        if amount_to_call(state, player) == 0:
            return PlayerAction.call()   # check
        return PlayerAction.fold()
"""

import random
from collections import Counter
from typing import Callable

from tablepoker.core.hand import HandCategory, evaluate_hand
from tablepoker.core.player import Player, PlayerAction
from tablepoker.core.rules import TOTAL_COMMUNITY_CARDS
from tablepoker.core.state import GameState


Strategy = Callable[[GameState, Player, random.Random], PlayerAction]


def amount_to_call(state: GameState, player: Player) -> int:
    """Chips the player must add to match the table bet."""
    return max(0, state.current_bet - player.current_bet)


def hand_strength(state: GameState, player: Player) -> float:
    """
    Rough strength of the player's cards, from 0.0 (weak) to 1.0.

    On the river the full evaluator is used. Before that, pairs and trips
    made with the hole cards count, then high cards and suitedness.
    """
    if len(player.hand) < 2:
        return 0.0

    if len(state.community) == TOTAL_COMMUNITY_CARDS:
        value = evaluate_hand(player.hand, state.community)
        if value.category >= HandCategory.STRAIGHT:
            return 0.9 + 0.1 * (value.category - HandCategory.STRAIGHT) / 4
        return 0.2 + 0.2 * value.category

    hole_ranks = [int(c.rank) for c in player.hand]
    counts = Counter(hole_ranks + [int(c.rank) for c in state.community])
    best_count = max(counts[r] for r in hole_ranks)
    high = max(hole_ranks) / 14

    if best_count >= 3:
        return 0.85
    if best_count == 2:
        pair_rank = max(r for r in hole_ranks if counts[r] == 2)
        return 0.55 + 0.25 * pair_rank / 14

    strength = 0.35 * high
    if player.hand[0].suit == player.hand[1].suit:
        strength += 0.05
    if abs(hole_ranks[0] - hole_ranks[1]) == 1:
        strength += 0.05
    return strength


def bet_amount(state: GameState, player: Player, pot_fraction: float) -> int:
    """
    Chips to put in for a wager of `pot_fraction` of the pot.

    Covers the amount owed first, bets at least the big blind on top and
    never more than the player's stack.
    """
    owed = amount_to_call(state, player)
    wager = max(state.big_blind, int(state.pot * pot_fraction))
    return min(player.chips, owed + wager)


def check_or_call() -> PlayerAction:
    return PlayerAction.call()
