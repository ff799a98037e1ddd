"""
TablePoker Core - Pure Python Texas Hold'em State Machine

This module contains all game logic without any timers or network
dependencies. Every transition returns a new state.
"""

from tablepoker.core.card import Card, Rank, Suit, create_deck, shuffle_deck, draw
from tablepoker.core.player import Player, PlayerAction, PlayerKind, BotProfile
from tablepoker.core.hand import HandCategory, HandValue, evaluate_hand, compare_hands
from tablepoker.core.rules import ActionType, Lane, Phase, Street
from tablepoker.core.state import GameState, PregameConfig
from tablepoker.core.setup import init_game, start_game, resume_game
from tablepoker.core.game import reduce_game, HandResolutionError

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "draw",
    "Player",
    "PlayerAction",
    "PlayerKind",
    "BotProfile",
    "HandCategory",
    "HandValue",
    "evaluate_hand",
    "compare_hands",
    "ActionType",
    "Lane",
    "Phase",
    "Street",
    "GameState",
    "PregameConfig",
    "init_game",
    "start_game",
    "resume_game",
    "reduce_game",
    "HandResolutionError",
]
