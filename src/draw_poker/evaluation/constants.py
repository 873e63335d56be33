"""Constants for poker hand evaluation."""
from draw_poker.core.card import Rank, Suit
from draw_poker.core.hand import HAND_SIZE

# Canonical suit ordering used by the flush check
SUIT_ORDER = tuple(suit.value for suit in Suit)

# Canonical face value ordering scanned by the pair grouping, Ace down to 2.
# The grouping keeps the rank of the last group it records, so this order
# decides which group's rank a Two Pair or Full House is broken on: the
# second, lower-valued one.
VALUE_ORDER = tuple(rank.value for rank in reversed(Rank))

# Largest table a single 52-card deck can fill
MAX_PLAYERS = 52 // HAND_SIZE
