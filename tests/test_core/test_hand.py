"""
Tests for hand evaluation.
"""

import pytest
from tablepoker.core.card import parse_cards
from tablepoker.core.hand import (
    evaluate_hand, compare_hands, max_hand_value, find_straight,
    HandCategory, HandValue, hand_to_string, describe_hand_value,
)


def evaluate(hole: str, board: str) -> HandValue:
    return evaluate_hand(parse_cards(hole), parse_cards(board))


class TestHandRanking:
    """Tests for hand categories and tiebreakers."""

    def test_royal_flush(self, royal_flush_cards):
        """Test royal flush recognition."""
        hole, board = royal_flush_cards
        value = evaluate_hand(hole, board)
        assert value.category == HandCategory.STRAIGHT_FLUSH
        assert value.tiebreakers == (14,)

    def test_straight_flush_wheel(self):
        """A-2-3-4-5 suited is a 5-high straight flush."""
        value = evaluate("Ah 2h", "3h 4h 5h 9c Kd")
        assert value == HandValue(HandCategory.STRAIGHT_FLUSH, (5,))

    def test_four_of_a_kind(self):
        """Test four of a kind recognition."""
        value = evaluate("As Ah", "Ad Ac Ks 2h 3c")
        assert value == HandValue(HandCategory.FOUR_OF_A_KIND, (14, 13))

    def test_full_house(self):
        """Test full house recognition."""
        value = evaluate("Ks Kh", "Kd 5s 5h 9d 2c")
        assert value == HandValue(HandCategory.FULL_HOUSE, (13, 5))

    def test_full_house_from_two_triples(self):
        """A second triple counts as the pair."""
        value = evaluate("Ks Kh", "Kd 5s 5h 5d 2c")
        assert value == HandValue(HandCategory.FULL_HOUSE, (13, 5))

    def test_full_house_uses_highest_pair(self):
        value = evaluate("Ks Kh", "Kd 5s 5h 9d 9c")
        assert value == HandValue(HandCategory.FULL_HOUSE, (13, 9))

    def test_flush(self):
        """Test flush recognition, top 5 suited ranks."""
        value = evaluate("As Ks", "9s 7s 4s 2s 3h")
        assert value == HandValue(HandCategory.FLUSH, (14, 13, 9, 7, 4))

    def test_straight(self):
        """Test straight recognition."""
        value = evaluate("9c 8d", "7h 6s 5c Kd 2h")
        assert value == HandValue(HandCategory.STRAIGHT, (9,))

    def test_wheel_straight(self, wheel_cards):
        """Test wheel straight (A-2-3-4-5) is 5-high."""
        hole, board = wheel_cards
        value = evaluate_hand(hole, board)
        assert value == HandValue(HandCategory.STRAIGHT, (5,))

    def test_longest_run_uses_highest_straight(self):
        value = evaluate("4c 5d", "6h 7s 8c 9d Kh")
        assert value == HandValue(HandCategory.STRAIGHT, (9,))

    def test_three_of_a_kind(self):
        """Test three of a kind recognition."""
        value = evaluate("7s 7h", "7d Kc 2s 9h 4d")
        assert value == HandValue(HandCategory.THREE_OF_A_KIND, (7, 13, 9))

    def test_two_pair(self):
        """Test two pair recognition."""
        value = evaluate("Ks Kh", "5d 5c 9s 2h 3d")
        assert value == HandValue(HandCategory.TWO_PAIR, (13, 5, 9))

    def test_two_pair_from_three_pairs(self):
        """With three pairs the best remaining card is the kicker."""
        value = evaluate("As Ah", "2d 2c Kd Ks Qh")
        assert value == HandValue(HandCategory.TWO_PAIR, (14, 13, 12))

    def test_one_pair(self):
        """Test one pair recognition."""
        value = evaluate("Js Jh", "9d 7c 4s 3h 2d")
        assert value == HandValue(HandCategory.ONE_PAIR, (11, 9, 7, 4))

    def test_high_card(self):
        """Test high card recognition."""
        value = evaluate("Ad Qs", "9h 7c 5d 3s 2h")
        assert value == HandValue(HandCategory.HIGH_CARD, (14, 12, 9, 7, 5))

    def test_wrong_hole_card_count(self):
        """Evaluating a malformed hand is an error."""
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As"), parse_cards("2d 3c 4d 5c 7h"))

    def test_wrong_board_size(self):
        with pytest.raises(ValueError):
            evaluate_hand(parse_cards("As Ah"), parse_cards("2d 3c 4d"))


class TestFindStraight:
    """Tests for straight detection."""

    def test_wheel(self):
        assert find_straight([14, 5, 4, 3, 2]) == 5

    def test_broadway(self):
        assert find_straight([14, 13, 12, 11, 10]) == 14

    def test_no_straight(self):
        assert find_straight([14, 13, 12, 11, 9, 2]) is None

    def test_duplicates_ignored(self):
        assert find_straight([9, 9, 8, 7, 7, 6, 5]) == 9


class TestHandComparison:
    """Tests for hand comparison."""

    def test_category_dominates(self):
        """A better category wins whatever the tiebreakers."""
        flush = HandValue(HandCategory.FLUSH, (7, 5, 4, 3, 2))
        straight = HandValue(HandCategory.STRAIGHT, (14,))
        assert compare_hands(flush, straight) > 0
        assert compare_hands(straight, flush) < 0

    def test_first_differing_tiebreaker_decides(self):
        a = HandValue(HandCategory.FULL_HOUSE, (13, 5))
        b = HandValue(HandCategory.FULL_HOUSE, (10, 9))
        assert compare_hands(a, b) > 0
        assert compare_hands(b, a) < 0

    def test_kicker_decides(self):
        a = HandValue(HandCategory.ONE_PAIR, (11, 9, 7, 5))
        b = HandValue(HandCategory.ONE_PAIR, (11, 9, 7, 4))
        assert compare_hands(a, b) > 0

    def test_identical_values_tie(self):
        a = HandValue(HandCategory.TWO_PAIR, (13, 5, 9))
        assert compare_hands(a, HandValue(HandCategory.TWO_PAIR, (13, 5, 9))) == 0

    def test_max_hand_value(self):
        values = [
            HandValue(HandCategory.ONE_PAIR, (2, 14, 13, 12)),
            HandValue(HandCategory.STRAIGHT, (6,)),
            HandValue(HandCategory.STRAIGHT, (5,)),
        ]
        assert max_hand_value(values) == HandValue(HandCategory.STRAIGHT, (6,))

    def test_max_hand_value_keeps_first_on_tie(self):
        first = HandValue(HandCategory.FLUSH, (14, 9, 8, 4, 2))
        second = HandValue(HandCategory.FLUSH, (14, 9, 8, 4, 2))
        assert max_hand_value([first, second]) is first

    def test_max_of_empty_list(self):
        with pytest.raises(ValueError):
            max_hand_value([])


class TestHandDescription:
    """Tests for hand names and descriptions."""

    def test_category_names(self):
        assert hand_to_string(HandValue(HandCategory.FULL_HOUSE, (13, 5))) == "Full House"
        assert hand_to_string(HandValue(HandCategory.HIGH_CARD, (14, 9, 7, 5, 3))) == "High Card"

    def test_descriptions(self):
        assert describe_hand_value(HandValue(HandCategory.FULL_HOUSE, (13, 5))) == "Full House, Kings full of Fives"
        assert describe_hand_value(HandValue(HandCategory.STRAIGHT_FLUSH, (14,))) == "Royal Flush"
        assert "Wheel" in describe_hand_value(HandValue(HandCategory.STRAIGHT, (5,)))
        assert describe_hand_value(HandValue(HandCategory.ONE_PAIR, (6, 14, 13, 12))) == "Pair of Sixes"
