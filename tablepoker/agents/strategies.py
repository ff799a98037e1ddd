"""
Bot strategy implementations, one per bot profile.

All strategies only return legal-looking actions: bets are whole chips
within the stack, and a bot with no chips left simply checks/calls.
"""

import random

from tablepoker.agents.base import amount_to_call, hand_strength, bet_amount, check_or_call
from tablepoker.core.player import Player, PlayerAction
from tablepoker.core.state import GameState


def basic_strategy(state: GameState, player: Player, rng: random.Random) -> PlayerAction:
    """
    A cautious default.

    Checks whenever possible, bets half the pot with a strong hand now
    and then, and gives up weak hands facing a large bet.
    """
    owed = amount_to_call(state, player)
    strength = hand_strength(state, player)

    if player.chips == 0:
        return check_or_call()
    if strength > 0.7 and rng.random() < 0.3:
        return PlayerAction.bet(bet_amount(state, player, 0.5))
    if owed == 0:
        return check_or_call()
    if owed > player.chips // 2 and strength < 0.4:
        return PlayerAction.fold()
    return check_or_call()


def random_strategy(state: GameState, player: Player, rng: random.Random) -> PlayerAction:
    """
    Random legal moves.

    Useful for testing and as a baseline. Never folds when checking is free.
    """
    owed = amount_to_call(state, player)
    roll = rng.random()

    if player.chips == 0:
        return check_or_call()
    if owed > 0 and roll < 0.15:
        return PlayerAction.fold()
    if roll < 0.4:
        low = min(player.chips, owed + state.big_blind)
        return PlayerAction.bet(rng.randint(low, player.chips))
    return check_or_call()


def tight_strategy(state: GameState, player: Player, rng: random.Random) -> PlayerAction:
    """Plays only strong cards; folds anything else facing a bet."""
    owed = amount_to_call(state, player)
    strength = hand_strength(state, player)

    if player.chips == 0:
        return check_or_call()
    if strength > 0.8:
        return PlayerAction.bet(bet_amount(state, player, 0.75))
    if owed > 0 and strength < 0.5:
        return PlayerAction.fold()
    return check_or_call()


def aggressive_strategy(state: GameState, player: Player, rng: random.Random) -> PlayerAction:
    """Bets and raises often, sized to the pot."""
    strength = hand_strength(state, player)

    if player.chips == 0:
        return check_or_call()
    if rng.random() < 0.4 + strength / 2:
        return PlayerAction.bet(bet_amount(state, player, 1.0))
    return check_or_call()
