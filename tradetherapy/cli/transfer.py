"""Import and export commands for Post-Trade Therapy CLI."""

from pathlib import Path
from typing import Optional

import click

from tradetherapy.cli.common import console, get_journal, print_error


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path), required=False)
def export(path: Optional[Path]) -> None:
    """Export the journal to a JSON file.

    PATH defaults to trading-journal-YYYY-MM-DD.json in the current
    directory.

    \b
    Examples:
      tradetherapy export
      tradetherapy export backup.json
    """
    from tradetherapy.journal import export_filename

    journal = get_journal()
    target = path or Path(export_filename())

    try:
        target.write_text(journal.export_payload(), encoding="utf-8")
    except OSError as e:
        print_error(f"Failed to write {target}:\n\n{e}", title="Export Failed")
        raise SystemExit(1)

    console.print(f"[green]✓ Exported {len(journal.trades)} trades to {target}[/green]")


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-y", "--yes", is_flag=True, default=False, help="Skip confirmation.")
def import_journal(path: Path, yes: bool) -> None:
    """Replace the journal with trades from a JSON export.

    The current journal is kept if the file is not a valid export.

    \b
    Examples:
      tradetherapy import trading-journal-2024-06-10.json
    """
    journal = get_journal()

    if journal.trades and not yes:
        if not click.confirm(f"Replace {len(journal.trades)} existing trades?"):
            console.print("[dim]Cancelled[/dim]")
            return

    try:
        payload = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to read {path}:\n\n{e}", title="Import Failed")
        raise SystemExit(1)

    if not journal.import_payload(payload):
        print_error(
            "Error importing data. Please check the file format.\n\n"
            "[dim]Your journal was not changed.[/dim]",
            title="Import Failed",
        )
        raise SystemExit(1)

    console.print(f"[green]✓ Imported {len(journal.trades)} trades from {path}[/green]")
