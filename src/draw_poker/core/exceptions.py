"""Errors raised by the poker evaluation library."""


class PokerError(Exception):
    """Base class for all draw_poker errors."""
    pass


class InsufficientCardsError(PokerError):
    """Raised when the deck cannot supply the requested number of cards."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {requested} card(s), only {remaining} remaining"
        )


class InvalidHandSizeError(PokerError, ValueError):
    """Raised when a hand does not hold exactly the required number of cards."""

    def __init__(self, size: int, required: int, player_id: str | None = None):
        self.size = size
        self.required = required
        self.player_id = player_id
        owner = f" for player {player_id}" if player_id is not None else ""
        super().__init__(
            f"Hand{owner} has {size} card(s), exactly {required} required"
        )


class CardNotFoundError(PokerError, LookupError):
    """Raised when a card to be replaced is not part of the hand."""
    pass


class InvalidCardError(PokerError, ValueError):
    """Raised when card notation cannot be parsed."""
    pass


class ConfigError(PokerError, ValueError):
    """Raised when configuration is missing required values or malformed."""
    pass
