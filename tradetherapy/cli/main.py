"""Main CLI entry point for Post-Trade Therapy.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import click

from tradetherapy.logging_setup import setup_logging


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        attr = getattr(module, cmd_name, None)
        if isinstance(attr, click.Command):
            cmd = attr
        else:
            # Commands named after keywords use a different attribute name
            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if isinstance(attr, click.Command) and attr.name == cmd_name:
                    cmd = attr
                    break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    # Journal
    "log": "tradetherapy.cli.journal",
    "trades": "tradetherapy.cli.journal",
    "show": "tradetherapy.cli.journal",
    "delete": "tradetherapy.cli.journal",
    # Analysis
    "stats": "tradetherapy.cli.insights",
    "patterns": "tradetherapy.cli.insights",
    # Data files
    "export": "tradetherapy.cli.transfer",
    "import": "tradetherapy.cli.transfer",
    # Buddy
    "chat": "tradetherapy.cli.chat",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tradetherapy")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Post-Trade Therapy - a psychology-first trading journal.

    Log each trade with a short questionnaire about how you traded it,
    spot recurring behavioral patterns, and talk things through with
    the trading buddy.

    \b
    Quick Start:
      tradetherapy log          # Log a trade and answer the questions
      tradetherapy patterns     # See behavioral patterns
      tradetherapy chat         # Talk to your trading buddy
    """
    setup_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
