"""Cardflip - A terminal flashcard viewer that reads cards aloud."""

from .models import Card, CardRecord, Deck, DeckLoadResult, LoadStatus, Side
from .constants import SPEECH_LOCALE, DEFAULT_DECK_RESOURCE
from .loader import DeckFormat, load, load_resource, load_with_status, static_deck
from .session import CardSession
from .speech import NullSpeechService, Pyttsx3SpeechService, SpeechService

__all__ = [
    "Card",
    "CardRecord",
    "Deck",
    "DeckLoadResult",
    "LoadStatus",
    "Side",
    "SPEECH_LOCALE",
    "DEFAULT_DECK_RESOURCE",
    "DeckFormat",
    "load",
    "load_resource",
    "load_with_status",
    "static_deck",
    "CardSession",
    "NullSpeechService",
    "Pyttsx3SpeechService",
    "SpeechService",
]
