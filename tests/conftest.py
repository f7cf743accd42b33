import json
import sys
from typing import List
from unittest.mock import MagicMock

import pytest

from cardflip.models import Card
from cardflip.session import CardSession
from cardflip.speech import SpeechService


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(request):
    """
    Temporarily change the process working directory to the test's tmpdir and prepend that tmpdir to sys.path.

    Parameters:
        request: The pytest `request` fixture used to obtain the per-test `tmpdir` fixture.
    """
    tmpdir = request.getfixturevalue("tmpdir")
    sys.path.insert(0, str(tmpdir))
    with tmpdir.as_cwd():
        yield


# --- Deck Fixtures ---
@pytest.fixture
def four_records() -> List[dict]:
    """
    Provide four serialized card records in asset format.

    Returns:
        List[dict]: Records whose emoji lists are deliberately unsorted so order checks are meaningful.
    """
    return [
        {
            "statement": "Il gatto dorme.",
            "statement_emojis": ["🐱", "💤"],
            "question": "Cosa fa il gatto?",
            "question_emojis": ["❓", "🐱"],
        },
        {
            "statement": "Piove a Milano.",
            "statement_emojis": ["🌧️", "🏙️", "☔"],
            "question": "Che tempo fa a Milano?",
            "question_emojis": ["🌤️"],
        },
        {
            "statement": "La pizza è calda.",
            "statement_emojis": [],
            "question": "Com'è la pizza?",
            "question_emojis": ["🍕", "🔥"],
        },
        {
            "statement": "Ciao",
            "statement_emojis": ["👋"],
            "question": "Come si saluta?",
            "question_emojis": ["🙋", "👋", "😊"],
        },
    ]


@pytest.fixture
def four_records_json(four_records: List[dict]) -> bytes:
    return json.dumps(four_records, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def three_card_deck() -> List[Card]:
    return [
        Card(statement="A", statement_emojis=["1"], question="B", question_emojis=["2"]),
        Card(statement="C", statement_emojis=["3"], question="D", question_emojis=["4"]),
        Card(statement="E", statement_emojis=["5"], question="F", question_emojis=["6"]),
    ]


@pytest.fixture
def mock_speech() -> MagicMock:
    """Provides a mock speech service that records `speak` calls."""
    return MagicMock(spec=SpeechService)


@pytest.fixture
def three_card_session(three_card_deck, mock_speech) -> CardSession:
    return CardSession(three_card_deck, mock_speech)
