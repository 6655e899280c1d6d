"""
Document Operation Resolution.

Turns the positional arguments of `vespa document` and the JSON payload
file into exactly one operation: which kind, on which document id, with
which request body. All contradictions are reported before any request
is made.

Inputs:
    [file]              - kind and id come from the JSON payload
    [document-id, file] - id from the argument, kind from flag or payload
    [document-id]       - only for an explicit remove

Payload files may carry one of the top-level keys "put", "update" or
"remove", whose value is the document id. The file is otherwise opaque
and is sent byte for byte.
"""

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from vespa_cli.core.exceptions import ResolutionError, ResolutionReason
from vespa_cli.document.document_id import ID_PREFIX, DocumentId

NO_DOCUMENT_ID_MESSAGE = (
    "No document id given neither as argument or as a 'put' key in the json file"
)
NO_OPERATION_MESSAGE = (
    "No document operation given neither as argument or as a "
    "'put', 'update' or 'remove' key in the json file"
)


class OperationKind(str, Enum):
    """The document operations the CLI can send."""

    PUT = "put"
    UPDATE = "update"
    REMOVE = "remove"

    @property
    def http_method(self) -> str:
        return _HTTP_METHODS[self]


_HTTP_METHODS = {
    OperationKind.PUT: "POST",
    OperationKind.UPDATE: "PUT",
    OperationKind.REMOVE: "DELETE",
}


@dataclass(frozen=True)
class DocumentOperation:
    kind: OperationKind
    document_id: DocumentId
    body: bytes | None = None

    @property
    def http_method(self) -> str:
        return self.kind.http_method


def read_document_file(path: str) -> bytes:
    """Read a payload file as raw bytes."""
    return Path(path).read_bytes()


def _load_payload(path: str, reader: Callable[[str], bytes]) -> tuple[bytes, dict]:
    try:
        content = reader(path)
    except OSError as e:
        raise ResolutionError(
            ResolutionReason.UNREADABLE_FILE,
            f"Could not read document file '{path}': {e}",
        ) from e

    try:
        payload = json.loads(content)
    except ValueError as e:
        raise ResolutionError(
            ResolutionReason.INVALID_JSON,
            f"Document file '{path}' is not valid JSON: {e}",
        ) from e

    if not isinstance(payload, dict):
        raise ResolutionError(
            ResolutionReason.INVALID_JSON,
            f"Document file '{path}' is not a JSON object",
        )
    return content, payload


def _operation_in_payload(payload: dict) -> tuple[OperationKind | None, DocumentId | None]:
    """Find the operation key of a payload and parse the id it holds."""
    present = [kind for kind in OperationKind if kind.value in payload]
    if not present:
        return None, None
    if len(present) > 1:
        raise ResolutionError(
            ResolutionReason.CONFLICTING_OPERATION,
            "The JSON file specifies more than one operation: "
            + ", ".join(kind.value for kind in present),
        )

    kind = present[0]
    raw_id = payload[kind.value]
    if not isinstance(raw_id, str):
        raise ResolutionError(
            ResolutionReason.INVALID_JSON,
            f"The '{kind.value}' key in the JSON file must hold a document id string",
        )
    return kind, DocumentId.parse(raw_id)


def _split_arguments(
    args: Sequence[str],
    explicit_kind: OperationKind | None,
) -> tuple[str | None, str | None]:
    """Return (id argument, file argument)."""
    if len(args) == 2:
        return args[0], args[1]
    if len(args) == 1:
        only = args[0]
        if explicit_kind is OperationKind.REMOVE and only.startswith(ID_PREFIX):
            return only, None
        return None, only
    raise ValueError(f"Expected 1 or 2 arguments, got {len(args)}")


def resolve(
    args: Sequence[str],
    explicit_kind: OperationKind | None = None,
    reader: Callable[[str], bytes] = read_document_file,
) -> DocumentOperation:
    """
    Resolve arguments and payload into one document operation.

    Args:
        args: [file], [document-id, file], or [document-id] for remove
        explicit_kind: Operation named on the command line, if any
        reader: Reads a payload file as bytes

    Returns:
        The resolved DocumentOperation

    Raises:
        ResolutionError: On conflicting, missing or unreadable inputs
        ParseError: On a malformed document id
        ValueError: On a wrong number of arguments
    """
    raw_arg_id, path = _split_arguments(args, explicit_kind)

    content: bytes | None = None
    json_kind: OperationKind | None = None
    json_id: DocumentId | None = None
    if path is not None:
        content, payload = _load_payload(path, reader)
        json_kind, json_id = _operation_in_payload(payload)

    arg_id = DocumentId.parse(raw_arg_id) if raw_arg_id is not None else None

    if explicit_kind is not None and json_kind is not None and explicit_kind is not json_kind:
        raise ResolutionError(
            ResolutionReason.CONFLICTING_OPERATION,
            f"Wanted document operation is {explicit_kind.value} "
            f"but the JSON file specifies {json_kind.value}",
        )

    document_id = arg_id or json_id
    if document_id is None:
        raise ResolutionError(ResolutionReason.NO_DOCUMENT_ID, NO_DOCUMENT_ID_MESSAGE)

    kind = explicit_kind or json_kind
    if kind is None:
        raise ResolutionError(ResolutionReason.NO_OPERATION, NO_OPERATION_MESSAGE)

    body = None if kind is OperationKind.REMOVE else content
    return DocumentOperation(kind=kind, document_id=document_id, body=body)
