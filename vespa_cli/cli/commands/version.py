"""
Version Command.
"""

import typer

from vespa_cli import __version__
from vespa_cli.cli.state import CliState


def version(ctx: typer.Context) -> None:
    """
    Show the version of this client.
    """
    state: CliState = ctx.obj
    state.output.line(f"vespa version {__version__}")
