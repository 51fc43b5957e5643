# src/massbank_kit/splash/http_client.py

import logging
from collections.abc import Sequence
from time import monotonic

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from massbank_kit.observability import names
from massbank_kit.observability.base import MetricsHook, NoOpMetricsHook
from massbank_kit.records.models import Peak
from massbank_kit.records.numbers import format_number

from .base import SplashClient
from .config import DEFAULT_SPLASH_API_URL

logger = logging.getLogger(__name__)


class HttpSplashClient(SplashClient):
    """SPLASH client backed by the public SPLASH web service.

    Transport-only retries. Every failure, after retries, is logged and
    turned into an empty checksum.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_SPLASH_API_URL,
        timeout: float = 10.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._client = httpx.AsyncClient(timeout=timeout)
        self._api_url = api_url
        self._max_retries = max_retries
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized HttpSplashClient with api_url=%s, timeout=%s",
            api_url,
            timeout,
        )

    async def calculate(self, peaks: Sequence[Peak]) -> str:
        if not peaks:
            logger.debug("No peaks, skipping SPLASH calculation")
            return ""

        start = monotonic()
        spectrum = " ".join(
            f"{format_number(p.mz)}:{format_number(p.intensity)}" for p in peaks
        )

        try:
            response = await self._post(spectrum)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self.metrics_hook.increment(names.SPLASH_ERRORS_TOTAL)
            logger.warning("SPLASH service unavailable, skipping check: %s", exc)
            return ""

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SPLASH_REQUEST_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SPLASH_REQUESTS_TOTAL)

        splash = data.get("splash") if isinstance(data, dict) else None
        if not splash:
            logger.warning("SPLASH service returned no checksum, skipping check")
            return ""

        logger.debug("SPLASH for %d peaks: %s (%.0fms)", len(peaks), splash, elapsed_ms)
        return str(splash)

    async def close(self) -> None:
        await self._client.aclose()

    async def _post(self, spectrum: str) -> httpx.Response:
        """POST the spectrum with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = await self._client.post(
                    self._api_url, data={"spectrum": spectrum}
                )
                response.raise_for_status()
                return response
