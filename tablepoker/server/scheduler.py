"""
Effect Scheduler: runs the reducer's declarative effects on asyncio timers.

Each lane ("bot", "hand", "street") holds at most one pending timer.
Scheduling an effect on a lane cancels whatever was pending there, so a
superseded transition can never fire late against a newer state.
"""

from __future__ import annotations
from typing import Callable, Dict, FrozenSet, Iterable, Optional
import asyncio
import logging

from tablepoker.core.events import GameEvent, GameEffect, After, BotTurnAfter, BotAction
from tablepoker.core.player import PlayerAction
from tablepoker.core.rules import Lane
from tablepoker.core.state import GameState


logger = logging.getLogger(__name__)

BotStrategy = Callable[[GameState], Optional[PlayerAction]]


class EffectScheduler:
    """
    Owns the per-lane timers of one table.

    Usage:
        scheduler = EffectScheduler(session.dispatch, lambda: session.state, choose_action)
        scheduler.run(effects)     # inside a running event loop
        scheduler.cancel_all()     # on reset
    """

    def __init__(
        self,
        dispatch: Callable[[GameEvent], object],
        get_state: Callable[[], GameState],
        bot_strategy: BotStrategy,
        time_scale: float = 1.0,
    ):
        """
        Args:
            dispatch: Feeds an event back into the table
            get_state: Returns the table's current state
            bot_strategy: Picks an action for the current bot seat
            time_scale: Multiplier for every delay (0 runs effects on the
                next loop iteration)
        """
        self._dispatch = dispatch
        self._get_state = get_state
        self._bot_strategy = bot_strategy
        self.time_scale = time_scale
        self._timers: Dict[Lane, asyncio.TimerHandle] = {}

    @property
    def pending_lanes(self) -> FrozenSet[Lane]:
        """Lanes with a timer that has not fired yet."""
        return frozenset(self._timers)

    def run(self, effects: Iterable[GameEffect]) -> None:
        """
        Schedule effects on the running event loop.

        Effects never run synchronously, even with a 0 ms delay.
        """
        effects = list(effects)
        if not effects:
            return

        loop = asyncio.get_running_loop()
        for effect in effects:
            self.cancel(effect.lane)
            delay = effect.ms / 1000 * self.time_scale

            if isinstance(effect, After):
                handle = loop.call_later(delay, self._fire_event, effect.lane, effect.event)
            elif isinstance(effect, BotTurnAfter):
                handle = loop.call_later(delay, self._fire_bot_turn, effect.lane)
            else:
                logger.warning(f"Unknown effect {effect!r}")
                continue

            self._timers[effect.lane] = handle

    def cancel(self, lane: Lane) -> None:
        """Cancel the pending timer on `lane`, if any."""
        handle = self._timers.pop(lane, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        """Cancel every pending timer."""
        for lane in list(self._timers):
            self.cancel(lane)

    def _fire_event(self, lane: Lane, event: GameEvent) -> None:
        self._timers.pop(lane, None)
        self._dispatch(event)

    def _fire_bot_turn(self, lane: Lane) -> None:
        self._timers.pop(lane, None)
        action = self._bot_strategy(self._get_state())
        if action is None:
            logger.debug("Bot turn skipped: no bot to act")
            return
        self._dispatch(BotAction(action))
