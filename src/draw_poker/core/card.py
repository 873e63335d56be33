"""Card related classes and utilities."""
from dataclasses import dataclass, field
from enum import Enum
import uuid

from .exceptions import InvalidCardError


class Suit(Enum):
    """Card suits."""
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks, valued by their face label."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = '10'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    @property
    def strength(self) -> int:
        """Numeric rank, 2 through 14 with Ace high."""
        return _STRENGTHS[self]

    @classmethod
    def from_label(cls, label: str) -> 'Rank':
        """
        Look up a rank by its face label.

        'T' is accepted as an alias for '10'.

        Raises:
            InvalidCardError: If the label is not a face value
        """
        label = label.upper()
        if label == 'T':
            label = '10'
        try:
            return cls(label)
        except ValueError:
            raise InvalidCardError(f"Invalid card value: {label}")

    def __str__(self) -> str:
        return self.value


_STRENGTHS = {rank: strength for strength, rank in enumerate(Rank, start=2)}


def _new_card_id() -> str:
    return f"c_{uuid.uuid4().hex[:8]}"


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit
        id: Opaque identifier used to find this exact card in a hand.
            Not part of equality; two cards are equal if rank and suit match.
    """
    rank: Rank
    suit: Suit
    id: str = field(default_factory=_new_card_id, compare=False)

    @property
    def value(self) -> str:
        """Face label, e.g. 'A' or '10'."""
        return self.rank.value

    @property
    def strength(self) -> int:
        """Numeric rank of the card."""
        return self.rank.strength

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    def notation(self) -> str:
        """Full notation including the id, e.g. 'c_87#AS'."""
        return f"{self.id}#{self}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String such as 'AS', '10h' or 'Td', optionally prefixed
                      with an id and '#', e.g. 'c_87#10S'

        Returns:
            Card instance

        Raises:
            InvalidCardError: If string format is invalid
        """
        card_id = None
        text = card_str.strip()
        if '#' in text:
            card_id, _, text = text.partition('#')
            if not card_id:
                raise InvalidCardError(f"Missing card id in: {card_str}")

        if len(text) not in (2, 3):
            raise InvalidCardError(f"Invalid card string: {card_str}")

        rank_str, suit_str = text[:-1], text[-1]
        rank = Rank.from_label(rank_str)
        try:
            suit = Suit(suit_str.upper())
        except ValueError:
            raise InvalidCardError(f"Invalid suit in: {card_str}")

        if card_id is None:
            return cls(rank=rank, suit=suit)
        return cls(rank=rank, suit=suit, id=card_id)
