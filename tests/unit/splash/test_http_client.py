from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from massbank_kit.observability import InMemoryMetricsHook, names
from massbank_kit.records import Peak
from massbank_kit.splash import DEFAULT_SPLASH_API_URL, HttpSplashClient

PEAKS = [Peak(185.1073, 1230000.0, 999.0), Peak(213.1022, 45300.5, 36.0)]


def _response(payload: object) -> Mock:
    response = Mock()
    response.json.return_value = payload
    return response


@pytest.fixture
def metrics() -> InMemoryMetricsHook:
    return InMemoryMetricsHook()


@pytest.fixture
def client(metrics: InMemoryMetricsHook) -> HttpSplashClient:
    """Client with its HTTP transport replaced by a mock."""
    splash_client = HttpSplashClient(max_retries=1, metrics_hook=metrics)
    splash_client._client = AsyncMock()
    return splash_client


class TestHttpSplashClient:
    @pytest.mark.asyncio
    async def test_calculate(
        self, client: HttpSplashClient, metrics: InMemoryMetricsHook
    ) -> None:
        client._client.post.return_value = _response({"splash": "splash10-abc"})

        result = await client.calculate(PEAKS)

        assert result == "splash10-abc"
        client._client.post.assert_awaited_once_with(
            DEFAULT_SPLASH_API_URL,
            data={"spectrum": "185.1073:1230000 213.1022:45300.5"},
        )
        assert metrics.counters[names.SPLASH_REQUESTS_TOTAL] == 1
        assert len(metrics.latencies[names.SPLASH_REQUEST_DURATION]) == 1

    @pytest.mark.asyncio
    async def test_no_peaks_skips_request(self, client: HttpSplashClient) -> None:
        assert await client.calculate([]) == ""
        client._client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_transport_error_returns_empty(
        self, client: HttpSplashClient, metrics: InMemoryMetricsHook
    ) -> None:
        client._client.post.side_effect = httpx.ConnectError("refused")

        assert await client.calculate(PEAKS) == ""
        assert metrics.counters[names.SPLASH_ERRORS_TOTAL] == 1

    @pytest.mark.asyncio
    async def test_http_status_error_is_not_retried(self) -> None:
        splash_client = HttpSplashClient(max_retries=3)
        splash_client._client = AsyncMock()
        response = Mock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "server error", request=Mock(), response=Mock()
        )
        splash_client._client.post.return_value = response

        assert await splash_client.calculate(PEAKS) == ""
        assert splash_client._client.post.await_count == 1

    @pytest.mark.asyncio
    async def test_retries_transport_errors(self) -> None:
        splash_client = HttpSplashClient(max_retries=2)
        splash_client._client = AsyncMock()
        splash_client._client.post.side_effect = [
            httpx.ReadTimeout("slow"),
            _response({"splash": "splash10-xyz"}),
        ]

        assert await splash_client.calculate(PEAKS) == "splash10-xyz"
        assert splash_client._client.post.await_count == 2

    @pytest.mark.asyncio
    async def test_invalid_json_returns_empty(self, client: HttpSplashClient) -> None:
        response = Mock()
        response.json.side_effect = ValueError("not json")
        client._client.post.return_value = response

        assert await client.calculate(PEAKS) == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"splash": ""}, ["splash10-abc"], None])
    async def test_missing_checksum_returns_empty(
        self, client: HttpSplashClient, payload: object
    ) -> None:
        client._client.post.return_value = _response(payload)

        assert await client.calculate(PEAKS) == ""

    @pytest.mark.asyncio
    async def test_close(self, client: HttpSplashClient) -> None:
        await client.close()

        client._client.aclose.assert_awaited_once()
