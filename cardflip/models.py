"""
Card, deck and load-result models.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Side(str, Enum):
    """
    The two faces of a card.
    """

    FRONT = "front"
    BACK = "back"


class LoadStatus(str, Enum):
    """
    Outcome of a deck load.

    EMPTY is a well-formed document with no records; FAILED covers absent,
    unreadable and malformed sources.
    """

    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


class Card(BaseModel):
    """
    A statement/question pair with its emoji annotations.

    Immutable once built. `id` only identifies the instance for rendering;
    two cards with the same content compare equal.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: UUID = Field(
        default_factory=uuid.uuid4,
        description="Process-local identifier. Not used for equality.",
    )
    statement: str = Field(
        ...,
        description="Front-side text.",
    )
    statement_emojis: Tuple[str, ...] = Field(
        default=(),
        description="Emoji shown under the statement, in display order.",
    )
    question: str = Field(
        ...,
        description="Back-side text.",
    )
    question_emojis: Tuple[str, ...] = Field(
        default=(),
        description="Emoji shown under the question, in display order.",
    )

    def _content(self) -> tuple:
        return (
            self.statement,
            self.statement_emojis,
            self.question,
            self.question_emojis,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._content() == other._content()

    def __hash__(self) -> int:
        return hash(self._content())

    def text_for(self, side: Side) -> str:
        """Return the primary text printed on `side`."""
        return self.statement if side is Side.FRONT else self.question

    def emojis_for(self, side: Side) -> Tuple[str, ...]:
        """Return the emoji annotations printed on `side`."""
        if side is Side.FRONT:
            return self.statement_emojis
        return self.question_emojis


class CardRecord(BaseModel):
    """
    One record of a serialized deck document.

    Keys follow the asset format (snake_case). Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    statement: str
    statement_emojis: Tuple[str, ...]
    question: str
    question_emojis: Tuple[str, ...]

    def to_card(self) -> Card:
        return Card(
            statement=self.statement,
            statement_emojis=self.statement_emojis,
            question=self.question,
            question_emojis=self.question_emojis,
        )


Deck = Tuple[Card, ...]


class DeckLoadResult(BaseModel):
    """
    A loaded deck plus how the load went.
    """

    model_config = ConfigDict(frozen=True)

    deck: Deck = ()
    status: LoadStatus
    source_name: Optional[str] = None
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status is LoadStatus.FAILED
