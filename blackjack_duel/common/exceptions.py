"""Exceptions raised by the Blackjack duel engine."""


class DuelError(Exception):
    """Base class for engine errors."""

    pass


class EmptyDeckError(DuelError):
    """Raised when a card is requested from a deck with no cards left."""

    pass


class RoundNotOverError(DuelError):
    """Raised when the winner is requested before both participants hold."""

    pass
