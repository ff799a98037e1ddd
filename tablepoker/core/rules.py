"""
Texas Hold'em Rules and Constants for a single table.

One human seat plays against up to five bots. The table keeps a single
shared pot and awards it to exactly one winner per hand.

Seat order rules used here:

1. The dealer button moves one seat clockwise at the start of every hand.

2. The first player to act in any betting round is the first seat after
   the button that has not folded.

3. Heads-up (2 players): the dealer is the small blind and the other
   seat is the big blind. Otherwise the two seats after the button are
   the small and big blinds.
"""

from enum import Enum
from typing import Sequence, Tuple


class Street(Enum):
    """Betting rounds of a hand."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"


class Phase(Enum):
    """Phases of the table state machine."""
    DEALING = "dealing"      # Game configured, first hand not dealt yet
    IN_HAND = "inHand"       # Betting in progress
    SHOWDOWN = "showdown"    # Hands revealed and evaluated
    HAND_OVER = "handOver"   # Pot awarded (also the lobby phase)


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "fold"
    CALL = "call"
    BET = "bet"
    ALL_IN = "all-in"


class Lane(Enum):
    """Scheduling channels; each holds at most one pending timer."""
    BOT = "bot"
    HAND = "hand"
    STREET = "street"


# Default game settings
DEFAULT_SMALL_BLIND = 5
DEFAULT_BIG_BLIND = 10
DEFAULT_BUY_IN = 1000
MIN_BUY_IN_BIG_BLINDS = 20
MIN_BOTS = 1
MAX_BOTS = 5

# Effect delays (milliseconds)
START_HAND_DELAY_MS = 0
ROUND_END_DELAY_MS = 1000
SHOWDOWN_DELAY_MS = 1000
SHOWDOWN_REVEAL_MS = 2000
BOT_TURN_DELAY_MS = 2000

# Cards per street
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

COMMUNITY_CARDS_BY_STREET = {
    Street.PREFLOP: 0,
    Street.FLOP: 3,
    Street.TURN: 4,
    Street.RIVER: 5,
}

# Street that follows each street, and how many cards it reveals
NEXT_STREET = {
    Street.PREFLOP: (Street.FLOP, FLOP_CARDS),
    Street.FLOP: (Street.TURN, TURN_CARDS),
    Street.TURN: (Street.RIVER, RIVER_CARDS),
}


def next_seat(position: int, num_players: int) -> int:
    """Seat clockwise of `position` (wraps around the table)."""
    return (position + 1) % num_players


def first_active_after(folded: Sequence[bool], position: int) -> int:
    """
    Get the first non-folded seat strictly after `position`.

    The search wraps around the table and visits every seat once, so it
    always terminates. If every other seat has folded the search comes
    back to `position` itself.

    Args:
        folded: Folded flag per seat, in seat order
        position: Seat to start after (may be -1 before the first hand)

    Returns:
        Seat index of the first player to act
    """
    num_players = len(folded)
    if num_players == 0:
        raise ValueError("No seats at the table")

    seat = position
    for _ in range(num_players):
        seat = next_seat(seat, num_players)
        if not folded[seat]:
            return seat
    raise ValueError("Every seat has folded")


def get_blind_positions(num_players: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind positions.

    In heads-up play, the dealer is the small blind.

    Args:
        num_players: Number of seats
        dealer_position: Position of the dealer (0-indexed)

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_players < 2:
        raise ValueError("Need at least 2 players")

    dealer_position %= num_players
    if num_players == 2:
        sb_pos = dealer_position
        bb_pos = (dealer_position + 1) % num_players
    else:
        sb_pos = (dealer_position + 1) % num_players
        bb_pos = (dealer_position + 2) % num_players

    return sb_pos, bb_pos
