"""Interfaces for card sources used by the evaluator."""

from abc import ABC, abstractmethod

from .card import Card


class CardSource(ABC):
    """
    Capability the evaluator needs from a deck.

    The evaluator holds one of these rather than extending a deck, so any
    object providing dealing, sorting and the canonical suit/value
    enumerations can stand in.
    """

    @property
    @abstractmethod
    def suits(self) -> tuple[str, ...]:
        """The 4 suit labels in canonical order."""
        pass

    @property
    @abstractmethod
    def values(self) -> tuple[str, ...]:
        """The 13 face value labels in canonical order."""
        pass

    @abstractmethod
    def deal(self, count: int) -> list[Card]:
        """
        Remove and return `count` fresh cards.

        Raises:
            InsufficientCardsError: If fewer than `count` cards remain
        """
        pass

    def sort(self, hand: list[Card]) -> list[Card]:
        """Return a copy of the hand ordered by descending rank."""
        return sorted(hand, key=lambda card: card.strength, reverse=True)
