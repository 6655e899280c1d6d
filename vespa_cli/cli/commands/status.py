"""
Status Commands.

Verify that a service of the target is ready to use.
"""

import httpx
import typer
from rich.text import Text

from vespa_cli.cli.client import ServiceClient
from vespa_cli.cli.progress import waiting
from vespa_cli.cli.state import CliState
from vespa_cli.core.config import ServiceKind
from vespa_cli.core.exceptions import ConfigError

STATUS_PATH = "/ApplicationStatus"


def status(
    ctx: typer.Context,
    service: ServiceKind = typer.Argument(
        ServiceKind.QUERY,
        help="Service to check",
    ),
) -> None:
    """
    Verify that a service is ready to use (query by default).

    Examples:
        vespa status
        vespa status document
        vespa status deploy
    """
    state: CliState = ctx.obj
    output = state.output
    description = f"{service.value.title()} API"

    try:
        target = state.target_url(service)
    except ConfigError as e:
        output.error(e.message)
        raise typer.Exit(1)

    def check() -> httpx.Response:
        with ServiceClient(target) as client:
            return client.get(STATUS_PATH)

    response: httpx.Response | None = None
    if output.interactive:
        session = waiting(output, check)
        response = session.result
    else:
        try:
            response = check()
        except httpx.RequestError as e:
            _not_ready(state, description, target, str(e))

    if response is None:
        # The spinner has already printed the cause.
        _not_ready(state, description, target, None)
    elif response.status_code != 200:
        _not_ready(
            state, description, target,
            f"Status {response.status_code} {response.reason_phrase}",
        )

    output.line(Text.assemble(description, " at ", (target, "cyan"), " is ", ("ready", "green")))


def _not_ready(state: CliState, description: str, target: str, reason: str | None) -> None:
    output = state.output
    output.err.print(Text.assemble(description, " at ", (target, "cyan"), " is ", ("not ready", "red")))
    if reason:
        output.err.print(Text(reason, style="yellow"))
    raise typer.Exit(1)
