"""
Card and Deck primitives for Texas Hold'em.

Cards are immutable values. A deck is a plain tuple of cards that is
consumed from its end, so every hand can build a fresh deck without
touching the previous one.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from enum import Enum, IntEnum


class Suit(Enum):
    """Card suits."""
    HEART = "heart"
    DIAMOND = "diamond"
    CLUB = "club"
    SPADE = "spade"


class Rank(IntEnum):
    """Card ranks, valued 2 (lowest) to 14 (Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


# String mappings
SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.SPADE: "♠",
}

SUIT_CHARS = {
    Suit.HEART: "h",
    Suit.DIAMOND: "d",
    Suit.CLUB: "c",
    Suit.SPADE: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

RANK_NAMES = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}

# Reverse mappings
CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_RANK["10"] = Rank.TEN  # Also accept "10"
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """
    A playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADE)
    - String notation: Card.from_string("As"), Card.from_string("10h")
      or Card.from_string("A♠")
    """

    rank: Rank
    suit: Suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts a rank ("2".."9", "10" or "T", "J", "Q", "K", "A")
        followed by a suit char ("h", "d", "c", "s") or symbol.
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part, suit_part = s[:-1].upper(), s[-1]

        if rank_part not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(CHAR_TO_RANK[rank_part], suit)

    def __repr__(self) -> str:
        return f"Card({RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self.rank]}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEART, Suit.DIAMOND) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_NAMES[self.rank],
            "suit": self.suit.value,
            "text": str(self),
            "color": self.color,
        }


def create_deck() -> List[Card]:
    """Build an ordered 52-card deck, suit by suit."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(cards: Sequence[Card], rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
    """
    Return a uniformly shuffled copy of `cards` (Fisher-Yates).

    Scans from the end, swapping each position with a uniformly chosen
    position at or before it. Pass `rng` for a reproducible order.
    """
    rng = rng or random
    deck = list(cards)
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
    return tuple(deck)


def new_deck(rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
    """A freshly shuffled deck for one hand."""
    return shuffle_deck(create_deck(), rng)


def draw(deck: Sequence[Card]) -> Tuple[Card, Tuple[Card, ...]]:
    """
    Draw the top (last) card of the deck.

    Returns:
        Tuple of (card, remaining deck)

    Raises:
        ValueError: If the deck is empty.
    """
    if not deck:
        raise ValueError("Cannot draw from an empty deck")
    return deck[-1], tuple(deck[:-1])


def draw_many(deck: Sequence[Card], n: int) -> Tuple[List[Card], Tuple[Card, ...]]:
    """Draw `n` cards one at a time from the top of the deck."""
    if n > len(deck):
        raise ValueError(f"Cannot draw {n} cards, only {len(deck)} remain")
    drawn = []
    rest = tuple(deck)
    for _ in range(n):
        card, rest = draw(rest)
        drawn.append(card)
    return drawn, rest


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As Kh 10d".

    Returns:
        List of Card objects
    """
    return [Card.from_string(s) for s in cards_str.split()]
