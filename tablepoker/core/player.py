"""
Player records for Texas Hold'em.

A player is an immutable value. Every change during a hand produces a new
record with `dataclasses.replace`, so states handed out by the engine are
never modified afterwards.

Each record tracks:
- Stack (chip count)
- Hole cards
- Amount wagered this betting round and this hand
- Folded flag and the action recorded this betting round
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Tuple, TYPE_CHECKING
from dataclasses import dataclass
from enum import Enum

from tablepoker.core.card import Card
from tablepoker.core.rules import ActionType

if TYPE_CHECKING:
    from tablepoker.core.hand import HandValue


class PlayerKind(Enum):
    """Who controls a seat."""
    HUMAN = "human"
    BOT = "bot"


class BotProfile(Enum):
    """Playing style of an automated seat."""
    BASIC = "basic"
    RANDOM = "random"
    TIGHT = "tight"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class PlayerAction:
    """
    An action submitted for the seat whose turn it is.

    `amount` is only meaningful for BET (chips added this action).
    """
    type: ActionType
    amount: int = 0

    @classmethod
    def fold(cls) -> PlayerAction:
        return cls(ActionType.FOLD)

    @classmethod
    def call(cls) -> PlayerAction:
        return cls(ActionType.CALL)

    @classmethod
    def bet(cls, amount: int) -> PlayerAction:
        return cls(ActionType.BET, amount)

    @classmethod
    def all_in(cls) -> PlayerAction:
        return cls(ActionType.ALL_IN)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"type": self.type.value}
        if self.type == ActionType.BET:
            result["amount"] = self.amount
        return result


@dataclass(frozen=True)
class Player:
    """
    A seat at the table.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name
        kind: Human or bot
        bot_profile: Playing style, set only for bots
        chips: Current chip count
        hand: Hole cards (0, 1 or 2; 1 only while dealing)
        folded: Whether the player folded this hand
        current_bet: Amount wagered in the current betting round
        total_bet: Amount wagered in the current hand
        action: Action recorded this betting round, if any
        displayed_action: Short label for the recorded action
        hand_value: Evaluated hand, set only at showdown
        seat: Seat position at the table (0-indexed)
    """
    player_id: str
    name: str
    kind: PlayerKind = PlayerKind.HUMAN
    bot_profile: Optional[BotProfile] = None
    chips: int = 0
    hand: Tuple[Card, ...] = ()
    folded: bool = False
    current_bet: int = 0
    total_bet: int = 0
    action: Optional[PlayerAction] = None
    displayed_action: Optional[str] = None
    hand_value: Optional[HandValue] = None
    seat: int = 0

    @classmethod
    def human(cls, player_id: str, name: str, chips: int = 0) -> Player:
        return cls(player_id=player_id, name=name, kind=PlayerKind.HUMAN, chips=chips)

    @classmethod
    def bot(
        cls,
        player_id: str,
        name: str,
        profile: BotProfile = BotProfile.BASIC,
        chips: int = 0,
    ) -> Player:
        return cls(
            player_id=player_id,
            name=name,
            kind=PlayerKind.BOT,
            bot_profile=profile,
            chips=chips,
        )

    @property
    def is_bot(self) -> bool:
        return self.kind == PlayerKind.BOT

    @property
    def is_active(self) -> bool:
        """Check if player is still contesting the pot."""
        return not self.folded

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include hole cards
        """
        result = {
            "id": self.player_id,
            "name": self.name,
            "kind": self.kind.value,
            "bot_profile": self.bot_profile.value if self.bot_profile else None,
            "seat": self.seat,
            "chips": self.chips,
            "bet": self.current_bet,
            "total_bet": self.total_bet,
            "folded": self.folded,
            "action": self.action.to_dict() if self.action else None,
            "last_action": self.displayed_action,
        }

        if not hide_cards and self.hand:
            result["cards"] = [card.to_dict() for card in self.hand]
        if self.hand_value is not None:
            result["hand_value"] = self.hand_value.to_dict()

        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hand) if self.hand else "??"
        return f"Player {self.player_id} [{cards_str}] ${self.chips}"
