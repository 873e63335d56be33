"""Deck implementation."""
from typing import Iterable, List, Optional
import logging
import random

from .card import Card, Rank, Suit
from .containers import CardSource
from .exceptions import InsufficientCardsError

logger = logging.getLogger(__name__)


class Deck(CardSource):
    """
    A standard 52-card deck.

    Attributes:
        cards: Cards remaining in the deck; dealing pops from the end
    """

    SUITS = tuple(suit.value for suit in Suit)
    VALUES = tuple(rank.value for rank in reversed(Rank))

    def __init__(self, pre_shuffle: bool = True, seed: Optional[int] = None):
        """
        Initialize a new deck.

        Args:
            pre_shuffle: Whether to shuffle the cards straight away
            seed: Seed for the deck's random generator, for repeatable deals
        """
        self._random = random.Random(seed)
        self.cards: List[Card] = []
        self._initialize_deck()
        if pre_shuffle:
            self.shuffle()
        logger.debug(f"Created deck of {self.size} cards (shuffled={pre_shuffle}, seed={seed})")

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards with sequential ids."""
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank=rank, suit=suit, id=f"c_{len(self.cards) + 1}"))

    @property
    def suits(self) -> tuple[str, ...]:
        return self.SUITS

    @property
    def values(self) -> tuple[str, ...]:
        return self.VALUES

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            self._random.shuffle(self.cards)

    def deal(self, count: int) -> List[Card]:
        """
        Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            List of exactly `count` cards

        Raises:
            ValueError: If count is negative
            InsufficientCardsError: If fewer than `count` cards remain
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > self.size:
            raise InsufficientCardsError(count, self.size)

        dealt = [self.cards.pop() for _ in range(count)]
        logger.debug(f"Dealt {[str(c) for c in dealt]}, {self.size} card(s) left")
        return dealt

    def get_cards(self) -> List[Card]:
        """Get all cards remaining in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    @staticmethod
    def parse(notations: Iterable[str]) -> List[Card]:
        """
        Build cards from their notation, e.g. ['c_87#AS', 'KS', '10h'].

        Raises:
            InvalidCardError: If any notation is invalid
        """
        return [Card.from_string(notation) for notation in notations]
