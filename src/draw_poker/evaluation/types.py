"""Common types for poker evaluation."""
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, List, Optional


class HandCategory(IntEnum):
    """Hand categories; a higher value is a stronger hand."""
    ROYAL_FLUSH = 9
    STRAIGHT_FLUSH = 8
    FOUR_OF_A_KIND = 7
    FULL_HOUSE = 6
    FLUSH = 5
    STRAIGHT = 4
    THREE_OF_A_KIND = 3
    TWO_PAIR = 2
    PAIR = 1
    HIGH_CARD = 0
    NONE = -1  # Unclassified, never returned in a result

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Four-of-a-Kind'."""
        return _LABELS[self]


_LABELS = {
    HandCategory.ROYAL_FLUSH: 'Royal Flush',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
    HandCategory.FOUR_OF_A_KIND: 'Four-of-a-Kind',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FLUSH: 'Flush',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.THREE_OF_A_KIND: 'Three-of-a-Kind',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.PAIR: 'Pair',
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.NONE: 'None',
}

# Category key -> strength, including the NONE sentinel
RANKING = MappingProxyType({category.name: category.value for category in HandCategory})


@dataclass(frozen=True)
class StraightCheck:
    """Outcome of the straight check."""
    check: bool
    straight_rank: int = 0


@dataclass(frozen=True)
class FlushCheck:
    """Outcome of the flush check."""
    check: bool
    flush_rank: int = 0


@dataclass
class PairGrouping:
    """
    Same-value groups found in a hand.

    Attributes:
        pairs: Group sizes (4, 3 or 2) in scan order, padded with a trailing 0
               when only one group was found; empty when there is none
        rank: Rank of the group recorded last
    """
    pairs: List[int] = field(default_factory=list)
    rank: int = 0


@dataclass(frozen=True)
class PlayerResult:
    """
    Classified hand of a single player.

    Attributes:
        id: Player identifier
        hand_rank: Strength of the category
        hand_rank_key: The category itself
        tie_breaker_card_rank: Primary tie-breaker within the category
        name: Human-readable category name
        tie_breaker_total_rank: Sum of the four lower cards, High Card only
    """
    id: str
    hand_rank: int
    hand_rank_key: HandCategory
    tie_breaker_card_rank: int
    name: str
    tie_breaker_total_rank: Optional[int] = None

    @classmethod
    def for_category(
        cls,
        player_id: str,
        category: HandCategory,
        tie_breaker: int,
        total: Optional[int] = None
    ) -> 'PlayerResult':
        """Build a result whose rank, key and name all come from `category`."""
        return cls(
            id=player_id,
            hand_rank=category.value,
            hand_rank_key=category,
            tie_breaker_card_rank=tie_breaker,
            name=category.label,
            tie_breaker_total_rank=total
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form using camelCase keys."""
        data: Dict[str, Any] = {
            'id': self.id,
            'handRank': self.hand_rank,
            'handRankKey': self.hand_rank_key.name,
            'tieBreakerCardRank': self.tie_breaker_card_rank,
            'name': self.name,
        }
        if self.tie_breaker_total_rank is not None:
            data['tieBreakerTotalRank'] = self.tie_breaker_total_rank
        return data
