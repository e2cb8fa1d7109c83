"""Client for the external photo aging service.

The service is opaque: it takes a photo (as a data URI) and a number of
elapsed years and returns one aged photo, also as a data URI.
"""

from __future__ import annotations

from typing import Optional

import httpx

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger

log = get_logger("age_progression")


class AgeProgressionError(Exception):
    """Raised when the aging service is unavailable or answers badly."""

    def __init__(self, message: str, configured: bool = True):
        super().__init__(message)
        self.configured = configured


class AgeProgressionClient:
    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url if url is not None else settings.AGE_PROGRESSION_URL
        self.timeout = timeout if timeout is not None else settings.AGE_PROGRESSION_TIMEOUT_SECONDS
        self.transport = transport

    async def age_photo(self, photo_data_uri: str, years_elapsed: int) -> str:
        if not self.url:
            raise AgeProgressionError("Age progression service is not configured", configured=False)

        payload = {"photoDataUri": photo_data_uri, "yearsElapsed": years_elapsed}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.url, json=payload)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            log.error(f"Age progression request failed: {exc!r}")
            raise AgeProgressionError(f"Age progression request failed: {exc}") from exc
        except ValueError as exc:
            log.error(f"Age progression returned invalid JSON: {exc}")
            raise AgeProgressionError("Age progression returned invalid JSON") from exc

        updated = data.get("updatedPhotoDataUri") if isinstance(data, dict) else None
        if not updated:
            raise AgeProgressionError("Age progression response has no image")
        log.info(f"Aged photo by {years_elapsed} year(s)")
        return updated
