"""
Main poker hand evaluation interface.

Classifies five-card hands into categories, orders players from strongest
to weakest and replaces discarded cards from a deck.

Rankings: https://www.cardplayer.com/rules-of-poker/hand-rankings
Tie breakers: https://www.pokerhands.com/poker_hand_tie_rules.html
"""
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, Tuple
import logging

from draw_poker.config.loader import EvaluatorConfig
from draw_poker.core.card import Card
from draw_poker.core.containers import CardSource
from draw_poker.core.deck import Deck
from draw_poker.core.exceptions import CardNotFoundError
from draw_poker.core.hand import HAND_SIZE, Player, validate_hand_size
from draw_poker.evaluation.checks import (
    check_flush, check_straight, get_pairs, has_ace,
    is_four_of_a_kind, is_full_house, is_pair, is_three_of_a_kind, is_two_pair
)
from draw_poker.evaluation.types import (
    FlushCheck, HandCategory, PairGrouping, PlayerResult, StraightCheck
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandFeatures:
    """Check outputs for one sorted hand, fed to the classification rules."""
    straight: StraightCheck
    flush: FlushCheck
    grouping: PairGrouping
    ace_high: bool
    high_card: int

    @property
    def straight_flush(self) -> bool:
        return self.straight.check and self.flush.check


Rule = Tuple[HandCategory, Callable[[HandFeatures], bool], Callable[[HandFeatures], int]]

# Evaluated top to bottom, first match wins
CLASSIFICATION_RULES: List[Rule] = [
    (HandCategory.ROYAL_FLUSH,
     lambda f: f.straight_flush and f.ace_high,
     lambda f: 0),
    (HandCategory.STRAIGHT_FLUSH,
     lambda f: f.straight_flush,
     lambda f: f.straight.straight_rank),
    (HandCategory.FOUR_OF_A_KIND,
     lambda f: is_four_of_a_kind(f.grouping.pairs),
     lambda f: f.grouping.rank),
    (HandCategory.FULL_HOUSE,
     lambda f: is_full_house(f.grouping.pairs),
     lambda f: f.grouping.rank),
    (HandCategory.FLUSH,
     lambda f: f.flush.check,
     lambda f: f.flush.flush_rank),
    (HandCategory.STRAIGHT,
     lambda f: f.straight.check,
     lambda f: f.straight.straight_rank),
    (HandCategory.THREE_OF_A_KIND,
     lambda f: is_three_of_a_kind(f.grouping.pairs),
     lambda f: f.grouping.rank),
    (HandCategory.TWO_PAIR,
     lambda f: is_two_pair(f.grouping.pairs),
     lambda f: f.grouping.rank),
    (HandCategory.PAIR,
     lambda f: is_pair(f.grouping.pairs),
     lambda f: f.grouping.rank),
]


def compare_results(result: PlayerResult, other: PlayerResult) -> int:
    """
    Compare two classified hands.

    Returns:
        Negative if `result` ranks higher, positive if `other` does,
        0 for a tie
    """
    if result.hand_rank != other.hand_rank:
        return other.hand_rank - result.hand_rank

    if result.tie_breaker_card_rank != other.tie_breaker_card_rank:
        return other.tie_breaker_card_rank - result.tie_breaker_card_rank

    if result.hand_rank_key == HandCategory.HIGH_CARD:
        # High card tie, settle on the total of the remaining cards
        return (other.tie_breaker_total_rank or 0) - (result.tie_breaker_total_rank or 0)

    return 0


def sort_results(results: Iterable[PlayerResult]) -> List[PlayerResult]:
    """Order results strongest first; ties keep their given order."""
    return sorted(results, key=cmp_to_key(compare_results))


class HandEvaluator:
    """
    Evaluates and ranks players' hands.

    Holds a card source for sorting, suit/value enumeration, dealing and
    replacing cards.
    """

    def __init__(self, deck: Optional[CardSource] = None, config: Optional[EvaluatorConfig] = None):
        """
        Initialize evaluator.

        Args:
            deck: Card source to use; a new Deck built from `config` if omitted
            config: Evaluator configuration, defaults when omitted
        """
        self.config = config or EvaluatorConfig()
        if deck is None:
            deck = Deck(pre_shuffle=self.config.pre_shuffle, seed=self.config.seed)
        self.deck = deck

    def features(self, hand: List[Card]) -> HandFeatures:
        """Run the structural checks over a hand sorted by descending rank."""
        return HandFeatures(
            straight=check_straight(hand),
            flush=check_flush(hand, self.deck.suits),
            grouping=get_pairs(hand, self.deck.values),
            ace_high=has_ace(hand),
            high_card=hand[0].strength,
        )

    def classify(self, player: Player) -> PlayerResult:
        """
        Classify a single player's hand.

        Raises:
            InvalidHandSizeError: If the hand is not exactly five cards
        """
        validate_hand_size(player.hand, player.id)

        hand = self.deck.sort(player.hand)
        features = self.features(hand)

        for category, matches, tie_breaker in CLASSIFICATION_RULES:
            if matches(features):
                result = PlayerResult.for_category(player.id, category, tie_breaker(features))
                break
        else:
            total = sum(card.strength for card in hand) - features.high_card
            result = PlayerResult.for_category(
                player.id, HandCategory.HIGH_CARD, features.high_card, total
            )

        logger.debug(
            f"Player {player.id} holds {[str(c) for c in hand]}: "
            f"{result.name} (tie breaker {result.tie_breaker_card_rank})"
        )
        return result

    def evaluate_hands(self, players: Iterable[Player]) -> List[PlayerResult]:
        """
        Classify every player and rank them.

        Args:
            players: Players to evaluate

        Returns:
            Results ordered from the winning hand down

        Raises:
            InvalidHandSizeError: If any hand is not exactly five cards
        """
        results = sort_results(self.classify(player) for player in players)
        if results:
            logger.debug(f"Ranking: {[f'{r.id}={r.name}' for r in results]}")
        return results

    def draw_replacement(self, card: Card, hand: List[Card]) -> Tuple[List[Card], Card]:
        """
        Replace a card with a new one from the deck.

        The card is matched by id and the new card takes its position.
        The given hand is left unchanged.

        Returns:
            The new hand and the new card

        Raises:
            CardNotFoundError: If no card in the hand has the card's id;
                               nothing is dealt in that case
            InsufficientCardsError: If the deck is empty
        """
        index = next((i for i, held in enumerate(hand) if held.id == card.id), None)
        if index is None:
            raise CardNotFoundError(f"Card {card.id} ({card}) not in hand")

        [new_card] = self.deck.deal(1)
        new_hand = list(hand)
        new_hand[index] = new_card
        logger.debug(f"Replaced {card} with {new_card} at position {index}")
        return new_hand, new_card

    def deal_player_hand(self) -> List[Card]:
        """Deal a fresh hand from the deck."""
        return self.deck.deal(HAND_SIZE)

    def deal_players(self, player_ids: Iterable[str]) -> List[Player]:
        """
        Deal one hand to each player id, in order.

        Raises:
            InsufficientCardsError: If the deck runs out
        """
        players = [Player(id=player_id, hand=self.deal_player_hand()) for player_id in player_ids]
        logger.debug(f"Dealt hands to {len(players)} player(s)")
        return players


# Only read for its orderings; the module helper never deals from it
_ORDERING_DECK = Deck(pre_shuffle=False)


def evaluate_hands(players: Iterable[Player], deck: Optional[CardSource] = None) -> List[PlayerResult]:
    """Convenience wrapper ranking players with an unshuffled deck's orderings."""
    evaluator = HandEvaluator(deck=deck if deck is not None else _ORDERING_DECK)
    return evaluator.evaluate_hands(players)
