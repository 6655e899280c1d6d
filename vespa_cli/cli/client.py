"""
HTTP Client for CLI.

Provides a blocking HTTP client for talking to one Vespa service
(container or config server). Every response body is read in full and
the connection released before the response is returned.
"""

from typing import Any

import httpx

from vespa_cli import __version__
from vespa_cli.core.config import effective_timeout
from vespa_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

USER_AGENT = f"vespa-cli/{__version__}"


class ServiceClient:
    """
    HTTP client for one service base URL.

    Features:
    - Base URL from the resolved target
    - Per-call timeout from configuration
    - Structured logging of requests/responses
    - Response bodies always drained and closed

    Usage:
        with ServiceClient("http://127.0.0.1:8080") as client:
            response = client.get("/ApplicationStatus")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the service client.

        Args:
            base_url: Service base URL, as resolved from the target.
            timeout: Request timeout in seconds. If None, read from configuration.
            transport: Optional httpx transport, used by tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else effective_timeout()
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "ServiceClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def request(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """
        Make an HTTP request to the service.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Path below the base URL (e.g., /document/v1/...)
            content: Raw request body
            headers: Extra request headers

        Returns:
            httpx.Response with its body already read

        Raises:
            httpx.RequestError: On connection failures, timeouts and undecodable bodies
        """
        client = self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "Service request",
            method=method,
            url=f"{self.base_url}{path}",
        )

        try:
            with client.stream(method, path, content=content, headers=headers) as response:
                response.read()

            log_with_source(
                logger,
                "cli",
                "debug",
                "Service response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.RequestError as e:
            log_with_source(
                logger,
                "cli",
                "info",
                "Service request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return self.request("GET", path, **kwargs)
