"""
CLI entry point for cardflip.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# Local application imports
from cardflip.constants import DEFAULT_DECK_RESOURCE
from cardflip.loader import load_resource
from cardflip.models import DeckLoadResult, LoadStatus
from cardflip.resources import PackageResourceProvider, provider_for_path
from cardflip.cli._view_logic import view_logic


console = Console()

app = typer.Typer(
    name="cardflip",
    help="Cardflip: flip through flashcards and hear them read aloud.",
    add_completion=False,
    rich_markup_mode="markdown",
)


# Common typer options reused across commands
_deck_option = typer.Option(  # noqa: B008
    None,
    "--deck",
    help="Path to a JSON or YAML deck file. "
    "Falls back to CARDFLIP_DECK env var, then to the bundled deck.",
    envvar="CARDFLIP_DECK",
)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("cardflip")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug logging."
    ),
):
    """
    Cardflip: flip through flashcards and hear them read aloud.
    """
    _configure_logging(verbose)


def _load_deck(deck: Optional[Path]) -> DeckLoadResult:
    """
    Load the deck at `deck`, or the bundled deck when no path is given.

    Never raises; a failed load comes back with status FAILED.
    """
    if deck is None:
        return load_resource(PackageResourceProvider(), DEFAULT_DECK_RESOURCE)
    provider, name = provider_for_path(deck)
    return load_resource(provider, name)


# ---------------------------------------------------------------------------
# View
# ---------------------------------------------------------------------------


@app.command()
def view(
    deck: Optional[Path] = _deck_option,
    mute: bool = typer.Option(
        False, "--mute", help="Do not speak when a card is read aloud."
    ),
):
    """
    Open the interactive card viewer.

    Parameters:
        deck: Optional path to the deck file; the bundled deck is used otherwise.
        mute: If True, read-aloud requests are silently dropped.
    """
    view_logic(_load_deck(deck), mute=mute)


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------


@app.command("list")
def list_cards(deck: Optional[Path] = _deck_option):
    """
    Print every card of the deck as a table.
    """
    load_result = _load_deck(deck)
    if load_result.failed:
        console.print(
            f"[bold red]Could not load deck:[/bold red] {load_result.error}"
        )
        raise typer.Exit(code=1)
    if not load_result.deck:
        console.print("[yellow]The deck has no cards.[/yellow]")
        return

    table = Table(title=f"Deck: {load_result.source_name}")
    table.add_column("#", style="magenta", justify="right")
    table.add_column("Statement", style="cyan")
    table.add_column("Question", style="yellow")
    for index, card in enumerate(load_result.deck, start=1):
        table.add_row(
            str(index),
            f"{card.statement}\n{' '.join(card.statement_emojis)}",
            f"{card.question}\n{' '.join(card.question_emojis)}",
        )
    console.print(table)


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------


@app.command()
def check(deck: Optional[Path] = _deck_option):
    """
    Load the deck and report whether it is usable.

    Exits with 1 if the deck could not be loaded.
    """
    load_result = _load_deck(deck)
    if load_result.status is LoadStatus.FAILED:
        console.print(
            f"[bold red]Deck '{load_result.source_name}' failed to load:"
            f"[/bold red] {load_result.error}"
        )
        raise typer.Exit(code=1)
    console.print(
        f"[green]Deck '{load_result.source_name}' is valid:[/green] "
        f"[bold]{len(load_result.deck)}[/bold] cards."
    )


if __name__ == "__main__":
    app()
