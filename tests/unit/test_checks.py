"""Tests for the structural hand checks."""
import pytest

from draw_poker.evaluation.checks import (
    check_flush, check_straight, get_pairs, has_ace,
    is_four_of_a_kind, is_full_house, is_pair, is_three_of_a_kind, is_two_pair
)

from tests.test_helpers import sorted_hand


@pytest.mark.parametrize("hand_str,expected", [
    ("AS KS QS JS 10S", True),
    ("KD QD JD 10D 9D", False),
    ("2H AD 3C 4S 5D", True),   # Sorting puts the Ace first
])
def test_has_ace(hand_str, expected):
    """Test the Ace check on sorted hands."""
    assert has_ace(sorted_hand(hand_str)) is expected


@pytest.mark.parametrize("hand_str,check,straight_rank", [
    ("4H 5D 6H 7C 8H", True, 8),
    ("AS KS QS JS 10S", True, 14),
    ("10H JD QC KS AD", True, 14),
    ("4H 5D 6H 7C 9H", False, 0),
    ("4H 4D 5H 6C 7H", False, 0),
    ("AS 2H 3D 4C 5S", False, 0),   # Ace only ranks high
    ("KS AS 2S 3S 4S", False, 0),   # No wrap around
])
def test_check_straight(hand_str, check, straight_rank):
    """Test straight detection and its tie breaker."""
    result = check_straight(sorted_hand(hand_str))
    assert result.check is check
    assert result.straight_rank == straight_rank


@pytest.mark.parametrize("hand_str,check,flush_rank", [
    ("AH JH 9H 6H 5H", True, 14),
    ("KD QD JD 10D 9D", True, 13),
    ("AH JH 9H 6H 5D", False, 0),
    ("2C 2D 2H 2S 3C", False, 0),
])
def test_check_flush(hand_str, check, flush_rank):
    """Test flush detection and its tie breaker."""
    result = check_flush(sorted_hand(hand_str))
    assert result.check is check
    assert result.flush_rank == flush_rank


def test_check_flush_uses_given_suits():
    """Only the suits passed in are counted."""
    hand = sorted_hand("AH JH 9H 6H 5H")
    assert not check_flush(hand, suits=('C', 'D', 'S')).check


@pytest.mark.parametrize("hand_str,pairs,rank", [
    ("10H 7D 10D 10S 10C", [4, 0], 10),
    ("7D 7S 9C 9S 9H", [3, 2], 7),
    ("KH KD KC QH QD", [3, 2], 12),
    ("KH 10S KS KD 5C", [3, 0], 13),
    ("KH AS AD 8H 8C", [2, 2], 8),
    ("8H 8D 2S 3H 9C", [2, 0], 8),
    ("AS 8D 9D 3C 2S", [], 0),
])
def test_get_pairs(hand_str, pairs, rank):
    """Test grouping by face value."""
    grouping = get_pairs(sorted_hand(hand_str))
    assert grouping.pairs == pairs
    assert grouping.rank == rank


def test_get_pairs_rank_follows_last_group():
    """The stored rank is the last recorded group's, here the three twos."""
    grouping = get_pairs(sorted_hand("2H 2D 2C AH AD"))
    assert grouping.pairs == [2, 3]
    assert grouping.rank == 2


def test_get_pairs_scan_order():
    """Scanning low to high records the Queens first."""
    values = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')
    grouping = get_pairs(sorted_hand("KH KD KC QH QD"), values=values)
    assert grouping.pairs == [2, 3]
    assert grouping.rank == 13


@pytest.mark.parametrize("pairs,expected", [
    ([4, 0], "four"),
    ([3, 2], "full"),
    ([2, 3], "full"),
    ([3, 0], "three"),
    ([2, 2], "two"),
    ([2, 0], "pair"),
    ([], None),
])
def test_classifiers_are_exclusive(pairs, expected):
    """Exactly one grouping classifier matches each normalized grouping."""
    matches = {
        "four": is_four_of_a_kind(pairs),
        "full": is_full_house(pairs),
        "three": is_three_of_a_kind(pairs),
        "two": is_two_pair(pairs),
        "pair": is_pair(pairs),
    }
    assert [name for name, hit in matches.items() if hit] == ([expected] if expected else [])
