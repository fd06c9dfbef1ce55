"""Journal commands for Post-Trade Therapy CLI.

Handles trade entry with the post-trade questionnaire, the trade
list, trade details and deletion.
"""

from typing import Any, Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradetherapy.cli.common import console, format_profit, get_journal, print_error
from tradetherapy.models import Question, Trade, get_questions


def _ask(question: Question) -> Any:
    """Prompt for a single questionnaire answer."""
    if question.type == "scale":
        return click.prompt(question.prompt, type=click.IntRange(1, 10))
    if question.type == "yesno":
        return click.prompt(question.prompt, type=click.Choice(["yes", "no"]))
    if question.type == "number":
        # Stored as typed, like the other free-form entries
        return str(click.prompt(question.prompt, type=click.IntRange(min=0)))
    return click.prompt(question.prompt, type=str)


@click.command()
@click.argument("symbol", required=False)
@click.option(
    "-o", "--outcome",
    type=click.Choice(["win", "loss"]),
    default=None,
    help="Trade outcome. Prompted if omitted.",
)
@click.option(
    "-p", "--profit",
    type=float,
    default=None,
    help="Profit or loss in percent (e.g. 1.5 or -0.8). Prompted if omitted.",
)
@click.option("-n", "--notes", default=None, help="Notes about the trade.")
@click.option("-t", "--thoughts", default=None, help="Post-trade thoughts.")
@click.option(
    "--no-questions",
    is_flag=True,
    default=False,
    help="Save without answering the psychology questionnaire.",
)
def log(
    symbol: Optional[str],
    outcome: Optional[str],
    profit: Optional[float],
    notes: Optional[str],
    thoughts: Optional[str],
    no_questions: bool,
) -> None:
    """Log a trade and answer the post-trade questionnaire.

    SYMBOL is the instrument traded (e.g. EURUSD, AAPL).

    \b
    Examples:
      tradetherapy log                         # Fully interactive
      tradetherapy log AAPL -o loss -p -1.2    # Prompt only for the questions
      tradetherapy log BTC -o win -p 3 --no-questions
    """
    journal = get_journal()

    draft = journal.new_draft(
        symbol=symbol or click.prompt("Symbol", default="", show_default=False),
        outcome=outcome or click.prompt("Outcome", type=click.Choice(["win", "loss"])),
        profit=profit if profit is not None else click.prompt("Profit (%)", type=float, default=0.0),
        notes=notes if notes is not None else click.prompt("Notes", default="", show_default=False),
        post_trade_thoughts=(
            thoughts if thoughts is not None
            else click.prompt("Post-trade thoughts", default="", show_default=False)
        ),
    )

    if not draft.has_symbol:
        print_error("A symbol is required to save a trade.", title="Trade Not Saved")
        raise SystemExit(1)

    answers = None
    if not no_questions:
        console.print(f"\n[bold cyan]Post-trade check-in ({draft.outcome})[/bold cyan]\n")
        answers = {question.id: _ask(question) for question in draft.questions()}

    trade = journal.save_draft(draft, answers)
    if trade is None:
        print_error("The trade could not be saved. Check the answers and try again.",
                    title="Trade Not Saved")
        raise SystemExit(1)

    console.print(f"[green]✓ Logged {trade.symbol} {trade.outcome}[/green] "
                  f"{format_profit(trade.profit)} [dim]#{trade.id}[/dim]")

    insights = journal.insights
    if insights:
        console.print(f"[yellow]{len(insights)} active pattern(s). "
                      "Run [cyan]tradetherapy patterns[/cyan] to review.[/yellow]")


def _trades_table(trades: tuple[Trade, ...]) -> Table:
    table = Table(
        title="Trade Journal",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("ID", style="dim")
    table.add_column("Date/Time", style="dim")
    table.add_column("Symbol", style="bold")
    table.add_column("Outcome", justify="center")
    table.add_column("P&L", justify="right")
    table.add_column("Check-in", justify="center")
    table.add_column("Notes", max_width=30)

    for trade in trades:
        outcome_color = "green" if trade.is_win else "red"
        notes = trade.notes
        if len(notes) > 30:
            notes = notes[:27] + "..."
        table.add_row(
            str(trade.id),
            trade.timestamp.strftime("%Y-%m-%d %H:%M"),
            trade.symbol,
            f"[{outcome_color}]{trade.outcome.upper()}[/{outcome_color}]",
            format_profit(trade.profit),
            "[green]✓[/green]" if trade.is_completed else "[dim]-[/dim]",
            notes or "-",
        )

    return table


@click.command()
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Show only the most recent N trades.",
)
def trades(limit: Optional[int]) -> None:
    """Display the trade journal.

    \b
    Examples:
      tradetherapy trades            # All trades
      tradetherapy trades --limit 10
    """
    journal = get_journal()
    view = journal.view()

    if not view.trades:
        console.print(Panel(
            "[dim]No trades logged yet[/dim]\n\n"
            "[dim]Run 'tradetherapy log' to add your first trade[/dim]",
            title="[bold]Trade Journal[/bold]",
            border_style="dim",
        ))
        return

    shown = view.trades[-limit:] if limit else view.trades
    console.print(_trades_table(shown))

    console.print(f"\n[bold]Total Trades:[/bold] {view.stats.total_trades}")
    console.print(f"[bold]Total P&L:[/bold] {format_profit(view.stats.total_pnl)}")


@click.command()
@click.argument("trade_id", type=int)
def show(trade_id: int) -> None:
    """Show a trade with its questionnaire answers.

    \b
    Examples:
      tradetherapy show 1718035200000
    """
    journal = get_journal()
    trade = journal.get(trade_id)

    if trade is None:
        print_error(f"No trade with ID {trade_id}.", title="Not Found")
        raise SystemExit(1)

    lines = [
        f"[bold]{trade.symbol}[/bold] {trade.outcome.upper()} {format_profit(trade.profit)}",
        f"[dim]{trade.timestamp.strftime('%Y-%m-%d %H:%M')}[/dim]\n",
    ]
    if trade.notes:
        lines.append(f"[bold]Notes:[/bold] {trade.notes}")
    if trade.post_trade_thoughts:
        lines.append(f"[bold]Thoughts:[/bold] {trade.post_trade_thoughts}")

    if trade.responses is not None:
        lines.append("\n[bold]Check-in:[/bold]")
        for question in get_questions(trade.outcome):
            answer = trade.responses.get(question.id)
            lines.append(f"  {question.prompt}\n    [cyan]{answer if answer is not None else '-'}[/cyan]")
    else:
        lines.append("\n[dim]No check-in answers recorded[/dim]")

    console.print(Panel(
        "\n".join(lines),
        title=f"[bold cyan]Trade #{trade.id}[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.argument("trade_id", type=int)
@click.option("-y", "--yes", is_flag=True, default=False, help="Skip confirmation.")
def delete(trade_id: int, yes: bool) -> None:
    """Delete a trade from the journal.

    \b
    Examples:
      tradetherapy delete 1718035200000
      tradetherapy delete 1718035200000 --yes
    """
    journal = get_journal()
    trade = journal.get(trade_id)

    if trade is None:
        print_error(f"No trade with ID {trade_id}.", title="Not Found")
        raise SystemExit(1)

    if not yes and not click.confirm(f"Delete {trade.symbol} {trade.outcome} #{trade.id}?"):
        console.print("[dim]Cancelled[/dim]")
        return

    journal.delete(trade_id)
    console.print(f"[green]✓ Deleted trade #{trade_id}[/green]")
