"""
Unit Test Fixtures.

Fixtures for unit tests - all network access is mocked.
Unit tests should be fast and isolated, never touching a real Vespa.
"""

from functools import partial

import httpx
import pytest

from vespa_cli.cli.client import ServiceClient


LOCAL_TARGET = "http://127.0.0.1:8080"


# =============================================================================
# HTTP Mock Fixtures
# =============================================================================


class RecordingService:
    """
    Stand-in for a Vespa service behind httpx.MockTransport.

    Answers every request with next_status/next_body, or raises next_error,
    and records the requests it received. A gzip-encoded response whose
    body is not gzip (unreadable by the client) is sent after
    serve_corrupt_gzip().
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.next_status = 200
        self.next_body = ""
        self.next_error: Exception | None = None
        self._corrupt_gzip = False

    def serve_corrupt_gzip(self) -> None:
        self._corrupt_gzip = True

    def handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.next_error is not None:
            raise self.next_error
        if self._corrupt_gzip:
            return httpx.Response(
                self.next_status,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"notgzip"),
            )
        return httpx.Response(self.next_status, text=self.next_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self, base_url: str = LOCAL_TARGET) -> ServiceClient:
        return ServiceClient(base_url, timeout=10.0, transport=self.transport)


@pytest.fixture
def service() -> RecordingService:
    """
    Mocked Vespa service.

    Usage:
        def test_send(service: RecordingService):
            service.next_status = 401
            client = service.client()
    """
    return RecordingService()


@pytest.fixture
def patched_clients(service: RecordingService, monkeypatch: pytest.MonkeyPatch) -> RecordingService:
    """Route every ServiceClient created by the commands through the mocked service."""
    factory = partial(ServiceClient, timeout=10.0, transport=service.transport)
    monkeypatch.setattr("vespa_cli.cli.commands.document.ServiceClient", factory)
    monkeypatch.setattr("vespa_cli.cli.commands.status.ServiceClient", factory)
    return service

