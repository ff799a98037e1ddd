"""
Hand Evaluation for Texas Hold'em.

This module ranks 2 hole cards plus 5 community cards into a `HandValue`:
a category (0 = high card ... 8 = straight flush) and a list of
tiebreaker ranks, most significant first. Two values compare by category
first, then tiebreaker by tiebreaker.

Hand Rankings (best to worst):
8. Straight Flush: 5 consecutive cards of same suit
7. Four of a Kind: 4 cards of same rank
6. Full House: 3 of a kind + pair
5. Flush: 5 cards of same suit
4. Straight: 5 consecutive cards
3. Three of a Kind: 3 cards of same rank
2. Two Pair: 2 different pairs
1. One Pair: 2 cards of same rank
0. High Card: No made hand

Note: Ace can be low in A-2-3-4-5 straight (wheel), which is 5-high.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Sequence, Tuple, Any, TYPE_CHECKING
from dataclasses import dataclass, replace
from enum import IntEnum
from collections import Counter, defaultdict

from tablepoker.core.card import Card, Rank, Suit
from tablepoker.core.rules import HOLE_CARDS, TOTAL_COMMUNITY_CARDS

if TYPE_CHECKING:
    from tablepoker.core.player import Player
    from tablepoker.core.state import GameState


class HandCategory(IntEnum):
    """Hand categories from worst (0) to best (8)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


# Hand category names for display
HAND_CATEGORY_NAMES = {
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FLUSH: "Flush",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.HIGH_CARD: "High Card",
}

# Ace played low in a wheel straight
LOW_ACE = 1


@dataclass(frozen=True)
class HandValue:
    """Comparable value of a 7-card hand."""
    category: HandCategory
    tiebreakers: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": int(self.category),
            "name": hand_to_string(self),
            "tiebreakers": list(self.tiebreakers),
            "description": describe_hand_value(self),
        }


def _count_ranks(cards: Sequence[Card]) -> List[Tuple[int, int]]:
    """(rank, count) pairs, most frequent first, then highest rank first."""
    counts = Counter(int(c.rank) for c in cards)
    return sorted(counts.items(), key=lambda rc: (rc[1], rc[0]), reverse=True)


def _group_by_suit(cards: Sequence[Card]) -> Dict[Suit, List[int]]:
    groups: Dict[Suit, List[int]] = defaultdict(list)
    for c in cards:
        groups[c.suit].append(int(c.rank))
    return groups


def find_straight(ranks: Sequence[int]) -> Optional[int]:
    """
    Find the highest straight among `ranks`.

    Distinct ranks are sorted descending; an Ace also counts as 1 so that
    5-4-3-2-A is found as a 5-high straight.

    Returns:
        The high rank of the straight, or None if there is none
    """
    unique = sorted(set(ranks), reverse=True)
    if Rank.ACE in unique:
        unique.append(LOW_ACE)

    run = 1
    for i in range(len(unique) - 1):
        if unique[i] - 1 == unique[i + 1]:
            run += 1
            if run == 5:
                return unique[i - 3]
        else:
            run = 1
    return None


def evaluate_hand(hole: Sequence[Card], community: Sequence[Card]) -> HandValue:
    """
    Evaluate 2 hole cards with the 5 community cards.

    Args:
        hole: The player's 2 hole cards
        community: The 5 community cards

    Returns:
        HandValue with category and tiebreakers (highest first)

    Raises:
        ValueError: If the card counts are wrong
    """
    if len(hole) != HOLE_CARDS:
        raise ValueError(f"Need {HOLE_CARDS} hole cards, got {len(hole)}")
    if len(community) != TOTAL_COMMUNITY_CARDS:
        raise ValueError(f"Need {TOTAL_COMMUNITY_CARDS} community cards, got {len(community)}")

    cards = list(hole) + list(community)
    ranks = [int(c.rank) for c in cards]
    counts = _count_ranks(cards)
    suit_groups = _group_by_suit(cards)

    # Straight flush
    for suit_ranks in suit_groups.values():
        if len(suit_ranks) >= 5:
            high = find_straight(suit_ranks)
            if high is not None:
                return HandValue(HandCategory.STRAIGHT_FLUSH, (high,))

    top_rank, top_count = counts[0]
    second_count = counts[1][1] if len(counts) > 1 else 0

    if top_count == 4:  # Four of a kind
        kicker = max(r for r, _ in counts[1:])
        return HandValue(HandCategory.FOUR_OF_A_KIND, (top_rank, kicker))

    if top_count == 3 and second_count >= 2:  # Full house
        trips = [r for r, c in counts if c == 3]
        pairs = [r for r, c in counts if c == 2]
        pair_rank = pairs[0] if pairs else trips[1]
        return HandValue(HandCategory.FULL_HOUSE, (trips[0], pair_rank))

    for suit_ranks in suit_groups.values():
        if len(suit_ranks) >= 5:  # Flush
            top = sorted(suit_ranks, reverse=True)[:5]
            return HandValue(HandCategory.FLUSH, tuple(top))

    straight_high = find_straight(ranks)
    if straight_high is not None:
        return HandValue(HandCategory.STRAIGHT, (straight_high,))

    if top_count == 3:  # Three of a kind
        kickers = [r for r, _ in counts[1:]][:2]
        return HandValue(HandCategory.THREE_OF_A_KIND, (top_rank, *kickers))

    if top_count == 2 and second_count == 2:  # Two pair
        second_rank = counts[1][0]
        kicker = max(r for r, _ in counts[2:])
        return HandValue(HandCategory.TWO_PAIR, (top_rank, second_rank, kicker))

    if top_count == 2:  # One pair
        kickers = [r for r, _ in counts[1:]][:3]
        return HandValue(HandCategory.ONE_PAIR, (top_rank, *kickers))

    return HandValue(HandCategory.HIGH_CARD, tuple(sorted(ranks, reverse=True)[:5]))


def compare_hands(a: HandValue, b: HandValue) -> int:
    """
    Compare two hand values.

    Returns:
        Positive if `a` wins, negative if `b` wins, 0 if tie
    """
    if a.category != b.category:
        return int(a.category) - int(b.category)

    for x, y in zip(a.tiebreakers, b.tiebreakers):
        if x != y:
            return x - y

    return 0


def max_hand_value(values: Sequence[HandValue]) -> HandValue:
    """
    Best of a list of hand values (the first one wins ties).

    Raises:
        ValueError: If `values` is empty
    """
    if not values:
        raise ValueError("Cannot determine the best of an empty hand list")

    best = values[0]
    for value in values[1:]:
        if compare_hands(value, best) > 0:
            best = value
    return best


def evaluate_hands(state: GameState) -> Tuple[Player, ...]:
    """
    Evaluate every non-folded player's hand against the board.

    Returns:
        New player records with `hand_value` set for non-folded players

    Raises:
        ValueError: If a contesting player does not hold exactly 2 cards
    """
    players = []
    for p in state.players:
        if p.folded:
            players.append(p)
            continue
        if len(p.hand) != HOLE_CARDS:
            raise ValueError(f"Player {p.name}'s hand not suitable for showdown")
        players.append(replace(p, hand_value=evaluate_hand(p.hand, state.community)))
    return tuple(players)


def hand_to_string(value: HandValue) -> str:
    """Category name of a hand value."""
    return HAND_CATEGORY_NAMES.get(value.category, "Unknown Hand")


def describe_hand_value(value: HandValue) -> str:
    """Get a human-readable description of the hand."""
    base_name = hand_to_string(value)
    t = value.tiebreakers

    if value.category == HandCategory.STRAIGHT_FLUSH:
        if t[0] == Rank.ACE:
            return "Royal Flush"
        return f"Straight Flush, {_rank_name(t[0])} high"
    elif value.category == HandCategory.FOUR_OF_A_KIND:
        return f"Four of a Kind, {_plural(t[0])}"
    elif value.category == HandCategory.FULL_HOUSE:
        return f"Full House, {_plural(t[0])} full of {_plural(t[1])}"
    elif value.category == HandCategory.FLUSH:
        return f"Flush, {_rank_name(t[0])} high"
    elif value.category == HandCategory.STRAIGHT:
        if t[0] == Rank.FIVE:
            return "Straight, Five high (Wheel)"
        return f"Straight, {_rank_name(t[0])} high"
    elif value.category == HandCategory.THREE_OF_A_KIND:
        return f"Three of a Kind, {_plural(t[0])}"
    elif value.category == HandCategory.TWO_PAIR:
        return f"Two Pair, {_plural(t[0])} and {_plural(t[1])}"
    elif value.category == HandCategory.ONE_PAIR:
        return f"Pair of {_plural(t[0])}"
    return f"{base_name}, {_rank_name(t[0])}"


def _rank_name(rank: int) -> str:
    """Get the name of a rank."""
    names = {
        Rank.TWO: "Two", Rank.THREE: "Three", Rank.FOUR: "Four",
        Rank.FIVE: "Five", Rank.SIX: "Six", Rank.SEVEN: "Seven",
        Rank.EIGHT: "Eight", Rank.NINE: "Nine", Rank.TEN: "Ten",
        Rank.JACK: "Jack", Rank.QUEEN: "Queen", Rank.KING: "King",
        Rank.ACE: "Ace"
    }
    return names[Rank(rank)]


def _plural(rank: int) -> str:
    name = _rank_name(rank)
    return f"{name}es" if name == "Six" else f"{name}s"
