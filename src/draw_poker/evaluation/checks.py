"""
Structural checks and category classifiers for five-card hands.

Every check expects the hand already sorted by descending rank.
"""
from typing import Iterable, List

from draw_poker.core.card import Card, Rank
from draw_poker.evaluation.constants import HAND_SIZE, SUIT_ORDER, VALUE_ORDER
from draw_poker.evaluation.types import FlushCheck, PairGrouping, StraightCheck


def has_ace(hand: List[Card]) -> bool:
    """
    Check if the hand holds an Ace.

    Only the first card is inspected, since the hand is sorted.
    """
    return hand[0].rank == Rank.ACE


def check_straight(hand: List[Card]) -> StraightCheck:
    """
    Check if the hand is a sequence of card ranks.

    Ace only ranks high, so A-2-3-4-5 is not a straight.
    """
    for card, next_card in zip(hand, hand[1:]):
        if card.strength - next_card.strength != 1:
            return StraightCheck(check=False)

    return StraightCheck(check=True, straight_rank=hand[0].strength)


def check_flush(hand: List[Card], suits: Iterable[str] = SUIT_ORDER) -> FlushCheck:
    """Check if every card in the hand shares one suit."""
    for suit in suits:
        count = sum(1 for card in hand if card.suit.value == suit)
        if count == HAND_SIZE:
            return FlushCheck(check=True, flush_rank=hand[0].strength)

    return FlushCheck(check=False)


def get_pairs(hand: List[Card], values: Iterable[str] = VALUE_ORDER) -> PairGrouping:
    """
    Group the hand by matching face value.

    Values are scanned in order and each recorded group overwrites the
    grouping rank, so the rank belongs to the last group found.

    Args:
        hand: Sorted hand
        values: Face value labels in the order to scan them

    Returns:
        Grouping with a two item `pairs` list, or an empty one if no
        value repeats
    """
    grouping = PairGrouping()

    for value in values:
        matched = [card for card in hand if card.value == value]
        count = len(matched)

        if count == 4:
            # Quads leave a single kicker, nothing else to find
            grouping.pairs.append(count)
            grouping.rank = matched[0].strength
            break
        elif count == 3:
            # A pair may still follow for a full house
            grouping.pairs.append(count)
            grouping.rank = matched[0].strength
        elif count == 2:
            grouping.pairs.append(count)
            grouping.rank = matched[0].strength
            if len(grouping.pairs) == 2:
                break

    if len(grouping.pairs) == 1:
        grouping.pairs.append(0)

    return grouping


def is_four_of_a_kind(pairs: List[int]) -> bool:
    return pairs == [4, 0]


def is_full_house(pairs: List[int]) -> bool:
    return len(pairs) == 2 and sum(pairs) == 5


def is_three_of_a_kind(pairs: List[int]) -> bool:
    return pairs == [3, 0]


def is_two_pair(pairs: List[int]) -> bool:
    return pairs == [2, 2]


def is_pair(pairs: List[int]) -> bool:
    return pairs == [2, 0]
