"""
Config Commands.

Read and write the persistent CLI settings in config.yaml.
"""

from typing import Optional

import typer

from vespa_cli.cli.state import CliState
from vespa_cli.core.config import (
    CONFIGURABLE_OPTIONS,
    find_config_home,
    get_cli_config,
    save_config_value,
)
from vespa_cli.core.exceptions import ConfigError

app = typer.Typer(help="Manage persistent settings")


@app.command("get")
def get_option(
    ctx: typer.Context,
    option: Optional[str] = typer.Argument(None, help="Option to show (target, application)"),
) -> None:
    """
    Show one or all configured options.

    Examples:
        vespa config get
        vespa config get target
    """
    state: CliState = ctx.obj

    try:
        if option is not None and option not in CONFIGURABLE_OPTIONS:
            raise ConfigError(
                f"Unknown option '{option}': must be one of {', '.join(CONFIGURABLE_OPTIONS)}"
            )
        values = get_cli_config().cli.model_dump()
    except ConfigError as e:
        state.output.error(e.message)
        raise typer.Exit(1)

    for name in (option,) if option else CONFIGURABLE_OPTIONS:
        value = values[name]
        state.output.line(f"{name} = {value if value is not None else '<unset>'}")


@app.command("set")
def set_option(
    ctx: typer.Context,
    option: str = typer.Argument(..., help="Option to set (target, application)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """
    Set an option and persist it in the config home.

    Examples:
        vespa config set target local
        vespa config set target http://127.0.0.1:8080
    """
    state: CliState = ctx.obj

    try:
        path = save_config_value(option, value)
    except ConfigError as e:
        state.output.error(e.message)
        raise typer.Exit(1)

    state.output.diagnostic(f"Wrote {option} to {path}")


@app.command("home")
def show_home(ctx: typer.Context) -> None:
    """
    Show the directory holding config.yaml and logging.yaml.
    """
    state: CliState = ctx.obj
    state.output.line(str(find_config_home()))
