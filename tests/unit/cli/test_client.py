"""Unit tests for CLI HTTP client."""

import httpx
import pytest

from vespa_cli.cli.client import USER_AGENT, ServiceClient


class TestServiceClient:
    """Tests for ServiceClient class."""

    def test_client_initialization(self, service) -> None:
        """Test client initializes with correct base URL."""
        client = service.client("http://test:8080")
        assert client.base_url == "http://test:8080"
        assert client.timeout == 10.0

    def test_client_strips_trailing_slash(self) -> None:
        """Test client strips trailing slash from base URL."""
        client = ServiceClient("http://test:8080/", timeout=1.0)
        assert client.base_url == "http://test:8080"

    def test_timeout_defaults_to_configuration(self, config_home) -> None:
        """Test timeout is read from config.yaml when not given."""
        (config_home / "config.yaml").write_text("timeout: 3.5\n")

        client = ServiceClient("http://test:8080")

        assert client.timeout == 3.5

    def test_timeout_environment_override(self, config_home, monkeypatch) -> None:
        """Test VESPA_CLI_TIMEOUT wins over config.yaml."""
        (config_home / "config.yaml").write_text("timeout: 3.5\n")
        monkeypatch.setenv("VESPA_CLI_TIMEOUT", "20")

        client = ServiceClient("http://test:8080")

        assert client.timeout == 20.0

    def test_request_joins_base_url_and_path(self, service) -> None:
        """Test requests go to base URL plus path."""
        with service.client("http://test:8080") as client:
            client.get("/ApplicationStatus")

        assert str(service.last_request.url) == "http://test:8080/ApplicationStatus"

    def test_response_is_read_and_closed(self, service) -> None:
        """Test the body is drained and the response released."""
        service.next_body = "payload"

        with service.client() as client:
            response = client.request("POST", "/x", content=b"{}")

        assert response.is_closed
        assert response.text == "payload"

    def test_sends_body_and_headers(self, service) -> None:
        """Test content and headers are passed through."""
        with service.client() as client:
            client.request("PUT", "/x", content=b'{"a": 1}', headers={"Content-Type": "application/json"})

        request = service.last_request
        assert request.content == b'{"a": 1}'
        assert request.headers["Content-Type"] == "application/json"

    def test_client_includes_user_agent(self, service) -> None:
        """Test client identifies itself."""
        with service.client() as client:
            client.get("/")

        assert service.last_request.headers["User-Agent"] == USER_AGENT

    def test_transport_errors_propagate(self, service) -> None:
        """Test connection failures are raised to the caller."""
        service.next_error = httpx.ConnectError("Connection refused")

        with service.client() as client:
            with pytest.raises(httpx.ConnectError, match="Connection refused"):
                client.get("/")

    def test_decoding_errors_propagate(self, service) -> None:
        """Test undecodable bodies are raised to the caller."""
        service.serve_corrupt_gzip()

        with service.client() as client:
            with pytest.raises(httpx.DecodingError):
                client.get("/")

    def test_close_client(self, service) -> None:
        """Test client closes properly."""
        client = service.client()
        client._get_client()
        assert client._client is not None

        client.close()
        assert client._client is None

    def test_context_manager_closes(self, service) -> None:
        """Test leaving the with block closes the client."""
        with service.client() as client:
            client.get("/")
            assert client._client is not None

        assert client._client is None
