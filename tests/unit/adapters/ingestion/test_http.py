"""Unit tests for the HTTP metrics fetcher."""
import pytest
from unittest.mock import MagicMock, patch

from requests.exceptions import ConnectionError as RequestsConnectionError, JSONDecodeError

from metrics_forwarder.adapters.ingestion.http import HTTPMetricsFetcher
from metrics_forwarder.core.errors import DecodeError, HTTPStatusError, NetworkError

METRICS_URL = "http://localhost:8080/debug/vars"


@pytest.fixture
def mock_requests():
    """Create a mock for requests.get."""
    with patch("requests.get") as mock_get:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.reason = "OK"
        mock_response.json.return_value = {"memory": {"used": 512.5}}

        mock_get.return_value = mock_response

        yield {
            "get": mock_get,
            "response": mock_response
        }


@pytest.fixture
def fetcher():
    """Create an HTTP fetcher for testing."""
    return HTTPMetricsFetcher()


@pytest.mark.asyncio
async def test_fetch_document(fetcher, mock_requests):
    """Test fetching a JSON object."""
    # Act
    document = await fetcher.fetch(METRICS_URL)

    # Assert
    assert document == {"memory": {"used": 512.5}}
    mock_requests["get"].assert_called_once_with(METRICS_URL, timeout=None)
    mock_requests["response"].close.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_uses_configured_timeout(mock_requests):
    """Test that a configured timeout is passed to requests."""
    fetcher = HTTPMetricsFetcher(timeout=5)

    await fetcher.fetch(METRICS_URL)

    mock_requests["get"].assert_called_once_with(METRICS_URL, timeout=5)


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code, reason", [
    (201, "Created"),
    (204, "No Content"),
    (500, "Internal Server Error"),
    (503, "Service Unavailable")
])
async def test_fetch_non_200_fails(fetcher, mock_requests, status_code, reason):
    """Test that any status other than 200 is an error."""
    # Arrange
    mock_requests["response"].status_code = status_code
    mock_requests["response"].reason = reason

    # Act
    with pytest.raises(HTTPStatusError) as exc_info:
        await fetcher.fetch(METRICS_URL)

    # Assert
    assert exc_info.value.status == status_code
    assert reason in str(exc_info.value)
    mock_requests["response"].close.assert_called_once()


@pytest.mark.asyncio
async def test_fetch_invalid_json(fetcher, mock_requests):
    """Test that a malformed body is a decode error."""
    mock_requests["response"].json.side_effect = JSONDecodeError("Expecting value", "<html>oops</html>", 0)

    with pytest.raises(DecodeError):
        await fetcher.fetch(METRICS_URL)

    mock_requests["response"].close.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [[1, 2, 3], 42, "text", None])
async def test_fetch_non_object_json(fetcher, mock_requests, body):
    """Test that a top-level non-object is a decode error."""
    mock_requests["response"].json.return_value = body

    with pytest.raises(DecodeError):
        await fetcher.fetch(METRICS_URL)


@pytest.mark.asyncio
async def test_fetch_connection_error(fetcher, mock_requests):
    """Test that transport failures become network errors."""
    mock_requests["get"].side_effect = RequestsConnectionError("Connection refused")

    with pytest.raises(NetworkError) as exc_info:
        await fetcher.fetch(METRICS_URL)

    assert "Connection refused" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RequestsConnectionError)


@pytest.mark.asyncio
async def test_health_check_healthy(fetcher, mock_requests):
    """Test health check when the endpoint answers 200."""
    result = await fetcher.health_check(METRICS_URL)

    assert result["status"] == "healthy"
    assert result["details"]["url"] == METRICS_URL
    mock_requests["response"].close.assert_called_once()


@pytest.mark.asyncio
async def test_health_check_degraded(fetcher, mock_requests):
    """Test health check when the endpoint answers with an error status."""
    mock_requests["response"].status_code = 503

    result = await fetcher.health_check(METRICS_URL)

    assert result["status"] == "degraded"
    assert result["details"]["status_code"] == 503


@pytest.mark.asyncio
async def test_health_check_unhealthy(fetcher, mock_requests):
    """Test health check when the endpoint is unreachable."""
    mock_requests["get"].side_effect = RequestsConnectionError("Connection error")

    result = await fetcher.health_check(METRICS_URL)

    assert result["status"] == "unhealthy"
    assert "Connection error" in result["details"]["error"]
