# src/massbank_kit/splash/factory.py

from massbank_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import SplashClient
from .config import SplashConfig
from .http_client import HttpSplashClient


def create_splash_client(
    config: SplashConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SplashClient:
    """Create a SPLASH client from config.

    Example:
        >>> client = create_splash_client(SplashConfig(timeout=5.0))
        >>> splash = await client.calculate(record.pk_peak)
    """
    return HttpSplashClient(
        api_url=config.api_url,
        timeout=config.timeout,
        max_retries=config.max_retries,
        metrics_hook=metrics_hook,
    )
