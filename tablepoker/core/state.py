"""
Table state for the Texas Hold'em state machine.

`GameState` is a frozen value: the engine never edits a state in place,
it always returns a new one. This keeps every transition replayable and
lets tests compare whole states with `==`.
"""

from __future__ import annotations
from typing import Dict, Any, Optional, Tuple
from dataclasses import dataclass

from tablepoker.core.card import Card
from tablepoker.core.player import Player
from tablepoker.core.rules import (
    Street, Phase, get_blind_positions,
    DEFAULT_BIG_BLIND, DEFAULT_SMALL_BLIND,
)


@dataclass(frozen=True)
class PregameConfig:
    """
    A validated table configuration.

    Validation happens before the configuration reaches the engine
    (see `tablepoker.server.schemas.TableConfigRequest`).
    """
    players: Tuple[Player, ...]
    buy_in: int
    big_blind: int
    small_blind: int


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one table.

    Attributes:
        players: Seats in fixed seating/turn order
        deck: Undealt cards; the last card is the top
        community: Revealed community cards
        street: Current betting round
        phase: State machine phase
        pot: Chips wagered this hand
        current_bet: Amount required to match this round
        current_player: Seat whose turn it is
        dealer_button: Dealer seat (-1 before the first hand)
        hand_winner: Seat that won the last hand, if resolved
        playing: True once a game has been configured
        hand_number: Hands dealt since the game was configured
    """
    players: Tuple[Player, ...]
    deck: Tuple[Card, ...] = ()
    community: Tuple[Card, ...] = ()
    street: Street = Street.PREFLOP
    phase: Phase = Phase.HAND_OVER
    pot: int = 0
    current_bet: int = 0
    current_player: int = 0
    dealer_button: int = -1
    small_blind: int = DEFAULT_SMALL_BLIND
    big_blind: int = DEFAULT_BIG_BLIND
    hand_winner: Optional[int] = None
    playing: bool = False
    hand_number: int = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def active_players(self) -> Tuple[Player, ...]:
        """Players still contesting the pot."""
        return tuple(p for p in self.players if not p.folded)

    @property
    def current(self) -> Optional[Player]:
        """The player whose turn it is, if any seat exists."""
        if 0 <= self.current_player < len(self.players):
            return self.players[self.current_player]
        return None

    @property
    def big_blind_seat(self) -> Optional[int]:
        """Seat that holds the big blind position this hand."""
        if self.num_players < 2 or self.dealer_button < 0:
            return None
        return get_blind_positions(self.num_players, self.dealer_button)[1]

    @property
    def total_chips(self) -> int:
        """Chips on the table, stacks plus pot."""
        return sum(p.chips for p in self.players) + self.pot

    def to_dict(self, for_player_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the state as JSON-ready dictionaries.

        Args:
            for_player_id: If specified, include private info for this player

        Returns:
            Dict with `public_info` and `private_info`
        """
        # Cards are only revealed when the hand went to a showdown
        show_all = self.phase == Phase.SHOWDOWN or (
            self.phase == Phase.HAND_OVER
            and self.hand_winner is not None
            and len(self.active_players) > 1
        )
        current = self.current if self.phase == Phase.IN_HAND else None

        public_info = {
            "phase": self.phase.value,
            "street": self.street.value,
            "playing": self.playing,
            "hand_number": self.hand_number,
            "pot": self.pot,
            "current_bet": self.current_bet,
            "board": [c.to_dict() for c in self.community],
            "dealer_position": self.dealer_button,
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
            "current_player": current.player_id if current else None,
            "hand_winner": self.hand_winner,
            "players": [
                p.to_dict(hide_cards=not (show_all and not p.folded))
                for p in self.players
            ],
        }

        private_info: Dict[str, Any] = {}
        if for_player_id:
            player = next((p for p in self.players if p.player_id == for_player_id), None)
            if player:
                private_info = {
                    "hand": [c.to_dict() for c in player.hand],
                    "seat": player.seat,
                    "is_turn": current is not None and current.player_id == for_player_id,
                    "chips_to_call": max(0, self.current_bet - player.current_bet),
                }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }
