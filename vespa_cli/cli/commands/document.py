"""
Document Commands.

Send put, update and remove operations to the document API of the
target, or fetch a single document.
"""

from collections.abc import Callable

import typer

from vespa_cli.cli.client import ServiceClient
from vespa_cli.cli.progress import spinner
from vespa_cli.cli.state import CliState
from vespa_cli.core.config import ServiceKind
from vespa_cli.core.exceptions import ApplicationError
from vespa_cli.document.dispatcher import DocumentDispatcher, Outcome, Success, TransportError
from vespa_cli.document.document_id import DocumentId
from vespa_cli.document.operations import DocumentOperation, OperationKind, resolve

GET_KEYWORD = "get"
OPERATION_KEYWORDS = {kind.value: kind for kind in OperationKind}


def document(
    ctx: typer.Context,
    args: list[str] = typer.Argument(
        ...,
        help="Optional operation (put, update, remove or get), optional document id, and the JSON file to send",
    ),
) -> None:
    """
    Issue a document operation to Vespa.

    The operation and document id are taken from the arguments when given,
    otherwise from the 'put', 'update' or 'remove' key of the JSON file.

    Examples:
        vespa document src/test/resources/A-Head-Full-of-Dreams.json
        vespa document put id:mynamespace:music::a-head-full-of-dreams song.json
        vespa document update song-update.json
        vespa document remove id:mynamespace:music::a-head-full-of-dreams
        vespa document get id:mynamespace:music::a-head-full-of-dreams
    """
    state: CliState = ctx.obj

    keyword = args[0] if args[0] in OPERATION_KEYWORDS or args[0] == GET_KEYWORD else None
    rest = args[1:] if keyword else args

    if keyword == GET_KEYWORD:
        if len(rest) != 1:
            raise typer.BadParameter("get requires exactly one document id", param_hint="ARGS")
        _get(state, rest[0])
        return

    if not 1 <= len(rest) <= 2:
        raise typer.BadParameter("expected [ID] FILE after the operation", param_hint="ARGS")

    try:
        operation = resolve(rest, OPERATION_KEYWORDS.get(keyword))
        target = state.target_url(ServiceKind.DOCUMENT)
    except ApplicationError as e:
        state.output.error(e.message)
        raise typer.Exit(1)

    _send(state, target, operation)


def _send(state: CliState, target: str, operation: DocumentOperation) -> None:
    with ServiceClient(target) as client:
        dispatcher = DocumentDispatcher(client, target)
        outcome = _run(
            state,
            f"Sending {operation.kind.value} {operation.document_id}",
            lambda: dispatcher.dispatch(operation),
        )

    if outcome is None:
        raise typer.Exit(1)
    if isinstance(outcome, Success):
        state.output.success(outcome.message)
        return
    state.output.error(outcome.message)
    raise typer.Exit(1)


def _get(state: CliState, raw_id: str) -> None:
    try:
        document_id = DocumentId.parse(raw_id)
        target = state.target_url(ServiceKind.DOCUMENT)
    except ApplicationError as e:
        state.output.error(e.message)
        raise typer.Exit(1)

    with ServiceClient(target) as client:
        dispatcher = DocumentDispatcher(client, target)
        outcome = _run(state, f"Getting {document_id}", lambda: dispatcher.get(document_id))

    if outcome is None:
        raise typer.Exit(1)
    if isinstance(outcome, Success):
        state.output.line(outcome.pretty_body())
        return
    state.output.error(outcome.message)
    raise typer.Exit(1)


def _run(state: CliState, label: str, call: Callable[[], Outcome]) -> Outcome | None:
    """
    Dispatch, behind a spinner when stderr is a terminal.

    Returns None when the spinner already reported a connection failure.
    """
    if not state.output.interactive:
        return call()

    def checked() -> Outcome:
        outcome = call()
        if isinstance(outcome, TransportError):
            raise outcome.cause
        return outcome

    session = spinner(state.output, label, checked)
    if session.error is not None:
        return None
    return session.result
