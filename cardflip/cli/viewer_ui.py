"""
Interactive terminal viewer for a card session.
"""

import logging
from typing import Optional

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from cardflip.models import DeckLoadResult, Side
from cardflip.session import CardSession

logger = logging.getLogger(__name__)
console = Console()

FRONT_STYLE = "#2C2C2E"
BACK_STYLE = "#7D5260"
ACCENT_STYLE = "#E17059"
DISABLED_STYLE = "grey50"

PROMPT = (
    "[bold](n)ext, (p)revious, (f)lip / Enter, (r)ead aloud, (q)uit: [/bold]"
)


def _card_panel(session: CardSession) -> Panel:
    """
    Build the panel for the face of the current card that is showing.

    Parameters:
        session (CardSession): Non-empty session whose current card is drawn.

    Returns:
        Panel: Card text with its emoji row underneath, titled with the side.
    """
    card = session.current_card()
    side = session.visible_side
    emojis = Text("  ".join(card.emojis_for(side)))
    body = Group(Text(card.text_for(side)), Text(""), Align.center(emojis))
    is_front = side is Side.FRONT
    return Panel(
        body,
        title="Statement" if is_front else "Question",
        subtitle=f"Card {session.position}",
        border_style=FRONT_STYLE if is_front else BACK_STYLE,
        padding=(1, 3),
    )


def _navigation_bar(session: CardSession) -> Text:
    previous_style = ACCENT_STYLE if session.has_previous else DISABLED_STYLE
    next_style = ACCENT_STYLE if session.has_next else DISABLED_STYLE
    bar = Text()
    bar.append("< Previous", style=previous_style)
    bar.append("    ")
    bar.append("Next >", style=next_style)
    return bar


def render_session(session: CardSession) -> None:
    """Draw the current card and the navigation bar."""
    console.print(_card_panel(session))
    console.print(Align.center(_navigation_bar(session)))


def _report_load(load_result: Optional[DeckLoadResult]) -> None:
    if load_result is None:
        return
    if load_result.failed:
        console.print(
            f"[bold red]Could not load deck "
            f"'{load_result.source_name}':[/bold red] {load_result.error}"
        )


def _handle_command(session: CardSession, command: str) -> bool:
    """
    Apply one user command to the session.

    Returns:
        bool: False when the user asked to quit, True otherwise.
    """
    if command in ("q", "quit"):
        return False
    if command in ("", "f", "flip"):
        session.flip()
    elif command in ("n", "next"):
        if not session.next():
            console.print("[yellow]Already at the last card.[/yellow]")
    elif command in ("p", "previous", "prev"):
        if not session.previous():
            console.print("[yellow]Already at the first card.[/yellow]")
    elif command in ("r", "read"):
        session.read()
        console.print(f"[{ACCENT_STYLE}]Reading aloud...[/{ACCENT_STYLE}]")
    else:
        console.print(
            f"[bold red]Unknown command '{command}'.[/bold red]"
        )
    return True


def start_view_flow(
    session: CardSession, load_result: Optional[DeckLoadResult] = None
) -> None:
    """
    Run the interactive viewer until the user quits.

    Args:
        session: The session to drive. Redraws follow its change notifications.
        load_result: How the deck was loaded, used to report a failed load.
    """
    _report_load(load_result)
    if session.is_empty:
        console.print("[bold yellow]The deck has no cards.[/bold yellow]")
        return

    unsubscribe = session.subscribe(render_session)
    try:
        render_session(session)
        while True:
            try:
                command = console.input(PROMPT).strip().lower()
            except (EOFError, KeyboardInterrupt):
                console.print("")
                break
            if not _handle_command(session, command):
                break
    finally:
        unsubscribe()

    console.print("[bold cyan]Goodbye![/bold cyan]")
