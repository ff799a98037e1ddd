"""
Table session: the single owner of one table's state.

The session reduces events one at a time on the event loop, hands the
resulting effects to its scheduler, saves chips when a hand ends and
notifies listeners (e.g. WebSocket connections) of every new state.
"""

from __future__ import annotations
from typing import Callable, List, Optional
import logging
import random

from tablepoker.agents import choose_action
from tablepoker.core.events import (
    GameEvent, InitiateGame, StartNextHand, PlayerActionEvent, EndGame, BotTurnAfter,
)
from tablepoker.core.game import reduce_game
from tablepoker.core.player import PlayerAction
from tablepoker.core.rules import Phase
from tablepoker.core.setup import init_game, resume_game
from tablepoker.core.state import GameState, PregameConfig
from tablepoker.persistence import ChipStore
from tablepoker.server.scheduler import EffectScheduler, BotStrategy


logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class TableSession:
    """
    One table: state, scheduler, persistence and listeners.

    Usage:
        session = TableSession(store=ChipStore("chips.json"))
        session.start_game(config)      # inside a running event loop
        session.act(PlayerAction.call())
    """

    def __init__(
        self,
        store: Optional[ChipStore] = None,
        bot_strategy: BotStrategy = choose_action,
        time_scale: float = 1.0,
        resume: bool = False,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            store: Where chip counts are saved when a hand ends
            bot_strategy: Picks actions for bot seats
            time_scale: Multiplier for every effect delay
            resume: Start from the chips saved in `store`
            rng: Random source for shuffling
        """
        self.store = store
        self._rng = rng
        self._listeners: List[StateListener] = []

        saved = store.load() if (store is not None and resume) else None
        self.state: GameState = resume_game(saved) if saved else init_game()
        if saved:
            logger.info(f"Resumed chips for {len(saved)} players")

        self.scheduler = EffectScheduler(
            dispatch=self.dispatch,
            get_state=lambda: self.state,
            bot_strategy=bot_strategy,
            time_scale=time_scale,
        )

    def subscribe(self, listener: StateListener) -> None:
        """Call `listener` with every new state."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, event: GameEvent) -> GameState:
        """Reduce one event, then schedule its effects."""
        if isinstance(event, (InitiateGame, EndGame)):
            self.scheduler.cancel_all()

        previous = self.state
        self.state, effects = reduce_game(previous, event, self._rng)

        if self.state is not previous:
            self._on_transition(previous)

        # The deal itself emits nothing; a bot seated first to act still has to move
        if isinstance(event, StartNextHand) and self._bot_to_act():
            effects = list(effects) + [BotTurnAfter()]

        self.scheduler.run(effects)
        return self.state

    def start_game(self, config: PregameConfig) -> GameState:
        return self.dispatch(InitiateGame(config))

    def act(self, action: PlayerAction) -> GameState:
        """Submit the human seat's action."""
        return self.dispatch(PlayerActionEvent(action))

    def next_hand(self) -> GameState:
        self.scheduler.cancel_all()
        return self.dispatch(StartNextHand())

    def end_game(self) -> GameState:
        return self.dispatch(EndGame())

    def close(self) -> None:
        """Drop every pending timer."""
        self.scheduler.cancel_all()

    def _bot_to_act(self) -> bool:
        current = self.state.current
        return self.state.phase == Phase.IN_HAND and current is not None and current.is_bot

    def _on_transition(self, previous: GameState) -> None:
        state = self.state
        if (
            self.store is not None
            and state.playing
            and state.phase == Phase.HAND_OVER
            and previous.phase != Phase.HAND_OVER
        ):
            self.store.save(state)

        for listener in list(self._listeners):
            listener(state)
