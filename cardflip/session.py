"""
This module defines the CardSession class, which holds the viewer's position
in a deck and which face of the current card is showing. It dispatches
read-aloud requests to a speech service and notifies listeners after every
state change so the presentation layer can redraw.
"""

import logging
from typing import Callable, List, Optional, Sequence, Union

from .constants import SPEECH_LOCALE
from .exceptions import EmptyDeckError
from .models import Card, Deck, Side
from .speech import SpeechService

logger = logging.getLogger(__name__)

Listener = Callable[["CardSession"], None]


class CardSession:
    """
    Navigation and flip state over a deck.

    State is exactly `current_index` and `is_flipped`. Navigation is clamped
    at both ends and any successful move shows the front of the new card.
    """

    def __init__(
        self,
        deck: Sequence[Card],
        speech: SpeechService,
    ):
        self.deck: Deck = tuple(deck)
        self.speech = speech
        self.current_index = 0
        self.is_flipped = False
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self.deck)

    @property
    def is_empty(self) -> bool:
        return not self.deck

    @property
    def has_next(self) -> bool:
        return self.current_index < len(self.deck) - 1

    @property
    def has_previous(self) -> bool:
        return self.current_index > 0

    @property
    def visible_side(self) -> Side:
        return Side.BACK if self.is_flipped else Side.FRONT

    @property
    def position(self) -> str:
        """One-based position such as '2/5'; '0/0' for an empty deck."""
        if self.is_empty:
            return "0/0"
        return f"{self.current_index + 1}/{len(self.deck)}"

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after each state change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def flip(self) -> None:
        self.is_flipped = not self.is_flipped
        logger.debug(f"Flipped card {self.position} to {self.visible_side.value}")
        self._notify()

    def next(self) -> bool:
        """Move to the next card. Returns False at the last card."""
        if not self.has_next:
            return False
        self.current_index += 1
        self.is_flipped = False
        self._notify()
        return True

    def previous(self) -> bool:
        """Move to the previous card. Returns False at the first card."""
        if not self.has_previous:
            return False
        self.current_index -= 1
        self.is_flipped = False
        self._notify()
        return True

    def current_card(self) -> Card:
        """
        Return the card at the current position.

        Raises:
            EmptyDeckError: If the deck holds no cards.
        """
        if self.is_empty:
            raise EmptyDeckError("The deck is empty; there is no current card.")
        return self.deck[self.current_index]

    def read(self, which: Optional[Union[Side, str]] = None) -> str:
        """
        Send one face of the current card to the speech service.

        Parameters:
            which: "front" reads the statement, "back" the question. None reads
                the face currently showing.

        Returns:
            str: The text handed to the speech service.

        Raises:
            EmptyDeckError: If the deck holds no cards.
            ValueError: If `which` names no side.
        """
        side = self.visible_side if which is None else Side(which)
        text = self.current_card().text_for(side)
        logger.debug(f"Reading {side.value} of card {self.position}")
        self.speech.speak(text, SPEECH_LOCALE)
        return text
