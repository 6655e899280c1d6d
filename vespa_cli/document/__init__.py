"""
Document operations: id codec, operation resolution and dispatch.
"""

from vespa_cli.document.dispatcher import (
    DocumentDispatcher,
    DocumentError,
    Outcome,
    ServerError,
    Success,
    TransportError,
)
from vespa_cli.document.document_id import DocumentId
from vespa_cli.document.operations import DocumentOperation, OperationKind, resolve

__all__ = [
    "DocumentDispatcher",
    "DocumentError",
    "DocumentId",
    "DocumentOperation",
    "OperationKind",
    "Outcome",
    "ServerError",
    "Success",
    "TransportError",
    "resolve",
]
