"""
Viewer constants.

Static values only. Runtime choices such as the deck path come from the CLI.
"""

# Locale tag passed to the speech synthesizer for every utterance.
SPEECH_LOCALE: str = "it-IT"

# Bundled deck shipped inside the package data directory.
DEFAULT_DECK_RESOURCE: str = "questions.json"

# Words per minute for the pyttsx3 engine.
DEFAULT_SPEECH_RATE: int = 170
DEFAULT_SPEECH_VOLUME: float = 1.0
