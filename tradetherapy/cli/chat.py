"""Chat command for Post-Trade Therapy CLI.

Runs an interactive conversation with the trading buddy.
"""

import asyncio

import click
from rich.panel import Panel

from tradetherapy.cli.common import console, get_journal, get_settings

EXIT_WORDS = {"exit", "quit", "bye"}

GREETING = (
    "Hey, I'm your trading buddy. Tell me what you're about to do "
    "or how the last trade felt."
)


@click.command()
def chat() -> None:
    """Talk to your trading buddy.

    The buddy reacts to how you describe your next trade, using your
    journal history. Type 'exit' to leave.

    \b
    Examples:
      tradetherapy chat
    """
    from tradetherapy.buddy import ConversationSession

    settings = get_settings()
    journal = get_journal()
    session = ConversationSession(
        trades=journal.snapshot,
        base_delay=settings.buddy.base_delay,
        jitter=settings.buddy.jitter,
    )

    console.print(Panel(
        GREETING,
        title="[bold magenta]Buddy[/bold magenta]",
        border_style="magenta",
    ))

    while True:
        try:
            text = click.prompt("You", default="", show_default=False, prompt_suffix="> ")
        except (EOFError, click.Abort):
            break

        if text.strip().lower() in EXIT_WORDS:
            break

        with console.status("[dim]Buddy is typing...[/dim]"):
            reply = asyncio.run(session.send(text))

        if reply is not None:
            console.print(Panel(
                reply.text,
                title="[bold magenta]Buddy[/bold magenta]",
                border_style="magenta",
            ))

    console.print("[dim]Take care. Trade your plan.[/dim]")
