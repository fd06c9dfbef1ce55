"""Analysis commands for Post-Trade Therapy CLI.

Handles the statistics summary and the behavioral pattern report.
"""

import click
from rich.panel import Panel

from tradetherapy.cli.common import console, format_profit, get_journal


@click.command()
def stats() -> None:
    """Display journal statistics.

    Shows total trades, win rate, average and total P&L in percent.

    \b
    Examples:
      tradetherapy stats
    """
    summary = get_journal().stats

    win_color = "green" if summary.win_rate >= 50 else "yellow"
    stats_text = (
        f"Total Trades: [bold]{summary.total_trades}[/bold]\n"
        f"Win Rate:     [{win_color}]{summary.win_rate:.1f}%[/{win_color}]\n"
        f"Avg P&L:      {format_profit(summary.avg_profit)}\n"
        f"{'─' * 30}\n"
        f"[bold]Total P&L:    {format_profit(summary.total_pnl)}[/bold]"
    )

    console.print(Panel(
        stats_text,
        title="[bold cyan]Stats[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
def patterns() -> None:
    """Display behavioral patterns found in your journal.

    Patterns are drawn from the post-trade check-ins: revenge trades,
    FOMO entries, moved stops, overconfidence, plan deviations and
    impulsive entries.

    \b
    Examples:
      tradetherapy patterns
    """
    journal = get_journal()
    insights = journal.insights

    if not insights:
        completed = sum(1 for t in journal.trades if t.is_completed)
        console.print(Panel(
            "[green]No problem patterns detected.[/green]\n\n"
            f"[dim]Based on {completed} trade(s) with check-in answers.[/dim]",
            title="[bold]Patterns[/bold]",
            border_style="green",
        ))
        return

    for insight in insights:
        color = "yellow" if insight.type == "warning" else "blue"
        icon = "⚠" if insight.type == "warning" else "ℹ"
        console.print(Panel(
            f"{insight.description}",
            title=f"[bold {color}]{icon} {insight.title}[/bold {color}]",
            subtitle=f"[dim]{insight.count} trades[/dim]",
            border_style=color,
        ))
