"""CLI commands for paretofront."""

import typer
from click import Context
from typer.core import TyperGroup

from paretofront.cli.pareto_commands import fuzzy, strict
from paretofront.cli.testing_commands import test_scoring


class OrderedCommands(TyperGroup):
    """Custom TyperGroup that preserves command order instead of sorting alphabetically."""

    def list_commands(self, ctx: Context):
        """
        Return commands in the order they were added.

        Args:
            ctx: Click context object.

        Returns:
            List of command names in their defined order.
        """
        order = ["strict", "fuzzy", "test-scoring"]
        ordered = [cmd for cmd in order if cmd in self.commands]
        additional = [cmd for cmd in self.commands if cmd not in ordered]
        return ordered + additional


app = typer.Typer(
    name="paretofront",
    help="paretofront - Pareto non-dominated set extraction CLI",
    add_completion=False,
    no_args_is_help=True,
    cls=OrderedCommands,
)

app.command()(strict)
app.command()(fuzzy)
app.command()(test_scoring)

__all__ = ["app"]
