# src/massbank_kit/splash/base.py

from collections.abc import Sequence
from typing import Protocol

from massbank_kit.observability.base import MetricsHook
from massbank_kit.records.models import Peak


class SplashClient(Protocol):
    """Computes the SPLASH checksum of a peak list.

    Fail-open: any transport or service problem yields ``""``, which
    callers treat as "could not verify". Never raises for service errors.
    """

    metrics_hook: MetricsHook

    async def calculate(self, peaks: Sequence[Peak]) -> str: ...

    async def close(self) -> None: ...
