"""Player hand implementation."""

import logging
import re
from dataclasses import dataclass, field

from .card import Card
from .exceptions import InvalidCardError, InvalidHandSizeError

logger = logging.getLogger(__name__)

HAND_SIZE = 5


def parse_hand(hand_str: str) -> list[Card]:
    """
    Create a list of cards from a string representation.

    Args:
        hand_str: Card notations separated by whitespace or commas
                  (e.g., "AS KS QS JS 10S" or "c_1#AS,c_2#KS,...")

    Returns:
        List of parsed cards, in the order given

    Raises:
        InvalidCardError: If any card in the string is invalid
    """
    card_strings = [part for part in re.split(r"[\s,]+", hand_str.strip()) if part]

    hand = []
    for i, card_str in enumerate(card_strings):
        try:
            card = Card.from_string(card_str)
        except InvalidCardError as e:
            raise InvalidCardError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")

        hand.append(card)

    logger.debug(f"Created hand from string '{hand_str}': {[str(c) for c in hand]}")
    return hand


def validate_hand_size(cards: list[Card], player_id: str | None = None) -> None:
    """
    Ensure a hand holds exactly HAND_SIZE cards.

    Raises:
        InvalidHandSizeError: If it does not
    """
    if len(cards) != HAND_SIZE:
        raise InvalidHandSizeError(len(cards), HAND_SIZE, player_id)


@dataclass
class Player:
    """
    A player taking part in an evaluation.

    Attributes:
        id: Player identifier, carried through to the result
        hand: The player's cards, in any order
    """
    id: str
    hand: list[Card] = field(default_factory=list)

    @classmethod
    def from_string(cls, player_id: str, hand_str: str) -> 'Player':
        """Create a player from a hand string such as "AS KS QS JS 10S"."""
        return cls(id=player_id, hand=parse_hand(hand_str))

    def __str__(self) -> str:
        if not self.hand:
            return f"{self.id}: Empty hand"
        return f"{self.id}: {' '.join(str(card) for card in self.hand)}"
