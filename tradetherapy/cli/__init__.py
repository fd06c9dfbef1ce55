"""CLI commands for Post-Trade Therapy.

This package provides the command-line interface: trade entry,
the journal, statistics, behavioral patterns, import/export and
the chat buddy.
"""

from tradetherapy.cli.main import cli, main

__all__ = ["cli", "main"]
