# src/massbank_kit/splash/validator.py

import logging

from massbank_kit.observability import names
from massbank_kit.records.models import Record
from massbank_kit.validation.types import ErrorKind, ValidationError

from .base import SplashClient

logger = logging.getLogger(__name__)


class SplashValidator:
    """Compares a record's ``PK$SPLASH`` with the computed checksum.

    Records without a SPLASH or without peaks pass, and so does any record
    whose checksum could not be computed.
    """

    def __init__(self, client: SplashClient) -> None:
        self._client = client

    async def validate(self, record: Record) -> bool:
        return not await self.check(record, record.accession)

    async def close(self) -> None:
        await self._client.close()

    async def check(self, record: Record, source_id: str) -> list[ValidationError]:
        if not record.pk_splash or not record.pk_peak:
            return []

        calculated = await self._client.calculate(record.pk_peak)
        if not calculated:
            return []

        if calculated == record.pk_splash:
            return []

        self._client.metrics_hook.increment(names.SPLASH_MISMATCHES_TOTAL)
        logger.info(
            "SPLASH mismatch for %s: stored=%s calculated=%s",
            source_id,
            record.pk_splash,
            calculated,
        )
        return [
            ValidationError(
                source=source_id,
                message=(
                    f"PK$SPLASH {record.pk_splash} does not match "
                    f"calculated SPLASH {calculated}"
                ),
                kind=ErrorKind.VALIDATION,
            )
        ]
