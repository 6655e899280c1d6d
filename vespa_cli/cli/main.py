"""
CLI Client.

Command-line client for Vespa applications.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    vespa --help                                   # Show help

    # Documents
    vespa document song.json                       # Operation and id from the file
    vespa document put [ID] song.json              # Put, id from argument or file
    vespa document update [ID] song-update.json    # Partial update
    vespa document remove ID                       # Remove by id
    vespa document get ID                          # Fetch and pretty-print

    # Services
    vespa status [query|document|deploy]           # Check that a service is ready

    # Settings
    vespa config get [OPTION]                      # Show settings
    vespa config set OPTION VALUE                  # Persist a setting
    vespa version                                  # Show client version

Options:
    --target, -t       Target name ("local") or URL
    --application, -a  Application to manage
    --color            auto, always or never
    --verbose, -v      Enable verbose output
    --debug, -d        Enable debug mode (detailed logging)
"""

from typing import Optional

import typer

from vespa_cli.cli.commands import config_app, document_command, status_command, version_command
from vespa_cli.cli.output import ColorMode, OutputContext
from vespa_cli.cli.state import CliState
from vespa_cli.core.config import effective_target
from vespa_cli.core.exceptions import ConfigError
from vespa_cli.core.logging import setup_logging

app = typer.Typer(
    name="vespa",
    help="The command-line tool for Vespa.ai. Use it on Vespa instances running locally or remotely.",
    no_args_is_help=True,
    add_completion=False,
)

app.command("document")(document_command)
app.command("status")(status_command)
app.command("version")(version_command)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="The name or URL of the recipient of this command (default: local)",
    ),
    application: Optional[str] = typer.Option(
        None,
        "--application",
        "-a",
        help="The application to manage",
    ),
    color: ColorMode = typer.Option(
        ColorMode.AUTO,
        "--color",
        help="Whether to use colors in output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    The command-line tool for Vespa.ai.

    Use it on Vespa instances running locally or remotely.
    Prefer web service APIs to this in production.
    """
    output = OutputContext.create(color)

    try:
        if debug:
            setup_logging(level="DEBUG", format_type="console")
            output.diagnostic("Debug mode enabled")
        elif verbose:
            setup_logging(level="INFO", format_type="console")
        else:
            setup_logging()
        ctx.obj = CliState(
            output=output,
            target=effective_target(target),
            application=application,
        )
    except ConfigError as e:
        output.error(e.message)
        raise typer.Exit(1)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
