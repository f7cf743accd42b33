from cardflip.cli.viewer_ui import start_view_flow
from cardflip.models import DeckLoadResult
from cardflip.session import CardSession
from cardflip.speech import NullSpeechService, Pyttsx3SpeechService


def view_logic(load_result: DeckLoadResult, mute: bool = False):
    """
    Set up a card session over a loaded deck and start the interactive viewer.

    Parameters:
        load_result (DeckLoadResult): The deck to view and how it was loaded.
        mute (bool): If True, read-aloud requests are dropped instead of
            being spoken.
    """
    if mute:
        speech = NullSpeechService()
        start_view_flow(CardSession(load_result.deck, speech), load_result)
        return

    speech = Pyttsx3SpeechService()
    try:
        start_view_flow(CardSession(load_result.deck, speech), load_result)
    finally:
        speech.close(timeout=0)
