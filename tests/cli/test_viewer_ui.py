"""
Unit tests for the cardflip.cli.viewer_ui module.
"""

from unittest.mock import MagicMock, patch

import pytest

from cardflip.cli.viewer_ui import start_view_flow
from cardflip.models import Card, DeckLoadResult, LoadStatus
from cardflip.session import CardSession


@pytest.fixture
def session(mock_speech: MagicMock) -> CardSession:
    deck = [
        Card(statement="Buongiorno", statement_emojis=["🌞"], question="Che ora è?", question_emojis=["⏰"]),
        Card(statement="Buonanotte", statement_emojis=["🌙"], question="Quando dormi?", question_emojis=["🛏️"]),
    ]
    return CardSession(deck, mock_speech)


def test_start_view_flow_empty_deck(mock_speech: MagicMock, capsys):
    """An empty deck prints a notice and never prompts."""
    with patch("rich.console.Console.input") as mock_input:
        start_view_flow(CardSession([], mock_speech))

    output = capsys.readouterr().out
    assert "The deck has no cards." in output
    mock_input.assert_not_called()


def test_start_view_flow_reports_failed_load(mock_speech: MagicMock, capsys):
    """A failed load is reported separately from an empty deck."""
    load_result = DeckLoadResult(
        status=LoadStatus.FAILED, source_name="questions.json", error="Deck source is absent."
    )

    start_view_flow(CardSession([], mock_speech), load_result)

    output = capsys.readouterr().out
    assert "Could not load deck" in output
    assert "Deck source is absent." in output


def test_start_view_flow_shows_first_card_and_quits(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=["q"]):
        start_view_flow(session)

    output = capsys.readouterr().out
    assert "Buongiorno" in output
    assert "🌞" in output
    assert "Card 1/2" in output
    assert "Goodbye!" in output


def test_start_view_flow_flip_and_navigate(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=["", "n", "f", "p", "q"]):
        start_view_flow(session)

    output = capsys.readouterr().out
    assert "Che ora è?" in output
    assert "Buonanotte" in output
    assert "Quando dormi?" in output
    assert session.current_index == 0
    assert session.is_flipped is False


def test_start_view_flow_boundary_messages(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=["p", "n", "n", "q"]):
        start_view_flow(session)

    output = capsys.readouterr().out
    assert "Already at the first card." in output
    assert "Already at the last card." in output
    assert session.current_index == 1


def test_start_view_flow_read_visible_side(session: CardSession, mock_speech: MagicMock, capsys):
    with patch("rich.console.Console.input", side_effect=["r", "f", "r", "q"]):
        start_view_flow(session)

    assert [c.args for c in mock_speech.speak.call_args_list] == [
        ("Buongiorno", "it-IT"),
        ("Che ora è?", "it-IT"),
    ]
    assert "Reading aloud..." in capsys.readouterr().out


def test_start_view_flow_unknown_command(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=["xyz", "q"]):
        start_view_flow(session)

    assert "Unknown command 'xyz'." in capsys.readouterr().out


def test_start_view_flow_stops_on_eof(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=EOFError):
        start_view_flow(session)

    assert "Goodbye!" in capsys.readouterr().out


def test_start_view_flow_unsubscribes_on_exit(session: CardSession, capsys):
    with patch("rich.console.Console.input", side_effect=["q"]):
        start_view_flow(session)
    capsys.readouterr()

    session.flip()

    assert capsys.readouterr().out == ""
