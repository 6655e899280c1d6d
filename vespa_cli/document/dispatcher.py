"""
Document Dispatch.

Sends a resolved document operation to the document API of a target and
classifies the response into one outcome:

    2xx                 -> Success
    4xx                 -> DocumentError  (the operation was rejected)
    5xx and the rest    -> ServerError    (the container failed)
    request failure     -> TransportError

Outcomes are returned, never raised, and never retried. Each outcome
renders the exact message the CLI prints.
"""

import json
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from vespa_cli.cli.client import ServiceClient
from vespa_cli.core.logging import get_logger, log_with_source
from vespa_cli.document.document_id import DocumentId
from vespa_cli.document.operations import DocumentOperation

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Success:
    document_id: DocumentId
    body: str = ""
    ok = True

    @property
    def message(self) -> str:
        return f"Sent {self.document_id}"

    def pretty_body(self) -> str:
        """The response body as 4-space indented JSON, or verbatim if not JSON."""
        try:
            return json.dumps(json.loads(self.body), indent=4, ensure_ascii=False)
        except ValueError:
            return self.body


@dataclass(frozen=True)
class DocumentError:
    status: int
    body: str
    ok = False

    @property
    def message(self) -> str:
        return f"Invalid document operation: Status {self.status}\n\n{self.body}"


@dataclass(frozen=True)
class ServerError:
    status: int
    body: str
    host: str
    ok = False

    @property
    def message(self) -> str:
        return f"Container (document API) at {self.host}: Status {self.status}\n\n{self.body}"


@dataclass(frozen=True)
class TransportError:
    cause: Exception
    ok = False

    @property
    def message(self) -> str:
        return str(self.cause)


Outcome = Success | DocumentError | ServerError | TransportError


class DocumentDispatcher:
    """
    Issues document API requests against one target.

    Usage:
        with ServiceClient(target) as client:
            outcome = DocumentDispatcher(client, target).dispatch(operation)
    """

    def __init__(self, client: ServiceClient, target: str) -> None:
        self.client = client
        self.target = target.rstrip("/")
        self.host = urlsplit(self.target).netloc or self.target

    def dispatch(self, operation: DocumentOperation) -> Outcome:
        """Send a put, update or remove and classify the response."""
        headers = None
        if operation.body is not None:
            headers = {"Content-Type": JSON_CONTENT_TYPE}
        return self._exchange(
            operation.http_method,
            operation.document_id,
            content=operation.body,
            headers=headers,
        )

    def get(self, document_id: DocumentId) -> Outcome:
        """Fetch one document. The Success outcome carries the response body."""
        return self._exchange("GET", document_id)

    def _exchange(
        self,
        method: str,
        document_id: DocumentId,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Outcome:
        path = "/" + document_id.to_url_path()
        try:
            response = self.client.request(method, path, content=content, headers=headers)
        except httpx.RequestError as e:
            return TransportError(cause=e)

        outcome = self._classify(document_id, response.status_code, response.text)
        log_with_source(
            logger,
            "cli",
            "info",
            "Document operation completed",
            method=method,
            document_id=str(document_id),
            status_code=response.status_code,
            outcome=type(outcome).__name__,
        )
        return outcome

    def _classify(self, document_id: DocumentId, status: int, body: str) -> Outcome:
        if 200 <= status < 300:
            return Success(document_id=document_id, body=body)
        if 400 <= status < 500:
            return DocumentError(status=status, body=body)
        return ServerError(status=status, body=body, host=self.host)
