"""Five-card poker hand evaluation package."""

from draw_poker.core.card import Card, Rank, Suit
from draw_poker.core.containers import CardSource
from draw_poker.core.deck import Deck
from draw_poker.core.exceptions import (
    CardNotFoundError,
    ConfigError,
    InsufficientCardsError,
    InvalidCardError,
    InvalidHandSizeError,
    PokerError,
)
from draw_poker.core.hand import Player, parse_hand
from draw_poker.evaluation.evaluator import HandEvaluator, compare_results, evaluate_hands
from draw_poker.evaluation.types import RANKING, HandCategory, PlayerResult

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "CardSource",
    "Deck",
    "Player",
    "parse_hand",
    "HandEvaluator",
    "HandCategory",
    "PlayerResult",
    "RANKING",
    "compare_results",
    "evaluate_hands",
    "PokerError",
    "InsufficientCardsError",
    "InvalidHandSizeError",
    "CardNotFoundError",
    "InvalidCardError",
    "ConfigError",
]
