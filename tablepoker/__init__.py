"""
TablePoker - Single-table Texas Hold'em against bots

One human seat plays against up to five automated opponents:
- Pure Python game core (a reducer returning declarative effects)
- Pluggable bot strategies
- asyncio effect scheduler, FastAPI + WebSocket server

Usage:
    from tablepoker.core import init_game, reduce_game
    from tablepoker.agents import choose_action
"""

__version__ = "0.1.0"

from tablepoker.core.card import Card
from tablepoker.core.player import Player, PlayerAction
from tablepoker.core.state import GameState, PregameConfig
from tablepoker.core.game import reduce_game
from tablepoker.core.hand import HandValue, evaluate_hand

__all__ = [
    "Card",
    "Player",
    "PlayerAction",
    "GameState",
    "PregameConfig",
    "reduce_game",
    "HandValue",
    "evaluate_hand",
    "__version__",
]
