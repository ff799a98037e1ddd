"""
TablePoker Agents - Bot Strategies

`choose_action(state)` picks an action for the bot whose turn it is,
using the strategy registered for that bot's profile.
"""

import random
from typing import Dict, Optional

from tablepoker.agents.base import Strategy
from tablepoker.agents.strategies import (
    basic_strategy, random_strategy, tight_strategy, aggressive_strategy,
)
from tablepoker.core.player import BotProfile, PlayerAction
from tablepoker.core.rules import Phase
from tablepoker.core.state import GameState


STRATEGIES: Dict[BotProfile, Strategy] = {
    BotProfile.BASIC: basic_strategy,
    BotProfile.RANDOM: random_strategy,
    BotProfile.TIGHT: tight_strategy,
    BotProfile.AGGRESSIVE: aggressive_strategy,
}


def choose_action(
    state: GameState,
    rng: Optional[random.Random] = None,
) -> Optional[PlayerAction]:
    """
    Action for the bot at `state.current_player`.

    Returns:
        The chosen action, or None if no hand is running or the current
        seat is not a bot
    """
    player = state.current
    if state.phase != Phase.IN_HAND or player is None or not player.is_bot:
        return None

    strategy = STRATEGIES.get(player.bot_profile, basic_strategy)
    return strategy(state, player, rng or random.Random())


__all__ = ["Strategy", "STRATEGIES", "choose_action"]
