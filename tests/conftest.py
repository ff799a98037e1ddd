"""
Pytest configuration and shared fixtures for TablePoker tests.
"""

import random
from dataclasses import replace

import pytest
from tablepoker.core.card import Card, Rank, Suit, create_deck, parse_cards
from tablepoker.core.game import start_hand
from tablepoker.core.player import Player, BotProfile
from tablepoker.core.rules import Street
from tablepoker.core.setup import init_game, start_game
from tablepoker.core.state import GameState, PregameConfig


def _config(num_bots: int, buy_in: int = 1000) -> PregameConfig:
    bots = tuple(
        Player.bot(f"bot-{i + 1}", f"Bot {i + 1}", BotProfile.BASIC)
        for i in range(num_bots)
    )
    return PregameConfig(players=bots, buy_in=buy_in, big_blind=10, small_blind=5)


@pytest.fixture
def rng():
    """A seeded random source for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def lobby():
    """The initial lobby state."""
    return init_game()


@pytest.fixture
def heads_up_config():
    """One bot opponent, 1000 chip buy-in, blinds 5/10."""
    return _config(1)


@pytest.fixture
def three_bot_config():
    """Three bot opponents, 1000 chip buy-in, blinds 5/10."""
    return _config(3)


@pytest.fixture
def heads_up_game(lobby, heads_up_config, rng):
    """A heads-up hand that has just been dealt."""
    return start_hand(start_game(lobby, heads_up_config), rng)


@pytest.fixture
def four_player_game(lobby, three_bot_config, rng):
    """A four-seat hand that has just been dealt."""
    return start_hand(start_game(lobby, three_bot_config), rng)


@pytest.fixture
def rig_hand():
    """
    Factory that rewrites a dealt state with chosen cards.

    Usage:
        state = rig_hand(state, ["As Ah", "Ks Kh"], board="2d 3c 4d 5c 7h")

    The remaining deck is rebuilt from the unused cards so the 52 cards
    stay unique.
    """
    def _rig(state: GameState, hands, board: str = "", street: Street = None) -> GameState:
        holes = [tuple(parse_cards(h)) for h in hands]
        community = tuple(parse_cards(board))
        used = set(community)
        for hole in holes:
            used.update(hole)
        deck = tuple(c for c in create_deck() if c not in used)
        players = tuple(
            replace(p, hand=holes[i]) if i < len(holes) else p
            for i, p in enumerate(state.players)
        )
        if street is None:
            street = {0: Street.PREFLOP, 3: Street.FLOP, 4: Street.TURN, 5: Street.RIVER}[len(community)]
        return replace(state, players=players, community=community, deck=deck, street=street)

    return _rig


@pytest.fixture
def royal_flush_cards():
    """Hole cards and board making a royal flush in spades."""
    return (
        [Card(Rank.ACE, Suit.SPADE), Card(Rank.KING, Suit.SPADE)],
        [
            Card(Rank.QUEEN, Suit.SPADE),
            Card(Rank.JACK, Suit.SPADE),
            Card(Rank.TEN, Suit.SPADE),
            Card(Rank.TWO, Suit.HEART),
            Card(Rank.THREE, Suit.CLUB),
        ],
    )


@pytest.fixture
def wheel_cards():
    """Hole cards and board making a 5-high straight (A-2-3-4-5)."""
    return parse_cards("As 2h"), parse_cards("3d 4c 5s 9h Kd")
