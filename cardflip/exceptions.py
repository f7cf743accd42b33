from typing import Optional


class CardflipError(Exception):
    """Base exception for cardflip errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class DeckLoadError(CardflipError):
    """Raised when a deck source is absent, unreadable or malformed."""

    pass


class EmptyDeckError(CardflipError, IndexError):
    """Raised when a card is requested from a session over an empty deck."""

    pass
