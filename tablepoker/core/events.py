"""
Events consumed and effects produced by the table state machine.

Both are closed unions of frozen dataclasses. The reducer matches events
with `isinstance` checks; the scheduler does the same for effects.
"""

from __future__ import annotations
from typing import Union
from dataclasses import dataclass

from tablepoker.core.player import PlayerAction
from tablepoker.core.rules import Lane, BOT_TURN_DELAY_MS
from tablepoker.core.state import PregameConfig


# ============= Events =============

@dataclass(frozen=True)
class InitiateGame:
    """Seat the configured bots and begin playing."""
    config: PregameConfig


@dataclass(frozen=True)
class StartNextHand:
    """Deal a new hand."""


@dataclass(frozen=True)
class PlayerActionEvent:
    """The human seat acts."""
    action: PlayerAction


@dataclass(frozen=True)
class BotAction:
    """A bot seat acts."""
    action: PlayerAction


@dataclass(frozen=True)
class AdvanceStreet:
    """Close the betting round and reveal the next street."""


@dataclass(frozen=True)
class StartShowdown:
    """Reveal and evaluate the remaining hands."""


@dataclass(frozen=True)
class EndHand:
    """Award the pot."""


@dataclass(frozen=True)
class EndGame:
    """Return to the lobby."""


GameEvent = Union[
    InitiateGame,
    StartNextHand,
    PlayerActionEvent,
    BotAction,
    AdvanceStreet,
    StartShowdown,
    EndHand,
    EndGame,
]


# ============= Effects =============

@dataclass(frozen=True)
class After:
    """Dispatch `event` after `ms` milliseconds on `lane`."""
    ms: int
    event: GameEvent
    lane: Lane


@dataclass(frozen=True)
class BotTurnAfter:
    """Ask the bot strategy for an action after `ms` milliseconds."""
    ms: int = BOT_TURN_DELAY_MS
    lane: Lane = Lane.BOT


GameEffect = Union[After, BotTurnAfter]
