"""INTERPOL public notices source implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger
from globalwatch.normalization.assembler import interpol_entity_id, interpol_path_id, normalize_records
from globalwatch.schemas.normalized import NormalizedPerson
from globalwatch.schemas.raw import InterpolImagesResponse, InterpolNoticesResponse
from .base import BaseSource

log = get_logger("ingestion.interpol")


class InterpolSource(BaseSource):
    """Fetches red (wanted) or yellow (missing) notices from INTERPOL."""

    name = "interpol"

    def __init__(self, notice_type: Optional[str] = None, base_url: Optional[str] = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.notice_type = notice_type or settings.INTERPOL_NOTICE_TYPE
        self.base_url = (base_url or settings.INTERPOL_API_BASE_URL).rstrip("/")

    @property
    def notices_url(self) -> str:
        return f"{self.base_url}/{self.notice_type}"

    def page_request(self, page: int, page_size: int) -> tuple[str, Dict[str, Any]]:
        return self.notices_url, {"page": page, "resultPerPage": page_size}

    def parse_page(self, payload: Any) -> tuple[List[Dict[str, Any]], Optional[int]]:
        data = InterpolNoticesResponse.model_validate(payload)
        notices = data.embedded.notices if data.embedded else []
        return notices, data.total

    def record_id(self, item: Dict[str, Any]) -> Optional[str]:
        entity_id = item.get("entity_id")
        return str(entity_id) if entity_id is not None else None

    def normalize(self, items: List[Dict[str, Any]]) -> List[NormalizedPerson]:
        return normalize_records(self.name, items, notice_type=self.notice_type)

    async def fetch_by_id(self, raw_id: str, page_size: int = 50) -> Optional[Dict[str, Any]]:
        """Direct lookup of one notice plus its full image set."""
        url = f"{self.notices_url}/{interpol_path_id(interpol_entity_id(raw_id))}"
        async with self.client() as client:
            try:
                notice = await self.get_json(client, url)
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == 404:
                    log.info(f"INTERPOL notice {raw_id!r} not found")
                else:
                    log.error(f"INTERPOL notice {raw_id!r} lookup failed: HTTP {exc.response.status_code}")
                return None
            except (httpx.HTTPError, ValueError) as exc:
                log.error(f"INTERPOL notice {raw_id!r} lookup failed: {exc!r}")
                return None

            if not isinstance(notice, dict):
                log.error(f"INTERPOL notice {raw_id!r} returned a non-object payload")
                return None

            images = await self._fetch_images(client, f"{url}/images")
            if images:
                notice = {**notice, "_embedded": {"images": images}}
        return notice

    async def _fetch_images(self, client: httpx.AsyncClient, url: str) -> List[Dict[str, Any]]:
        try:
            data = InterpolImagesResponse.model_validate(await self.get_json(client, url))
        except (httpx.HTTPError, ValueError) as exc:
            log.warning(f"INTERPOL images unavailable at {url}: {exc!r}")
            return []
        if not data.embedded:
            return []
        return [image.model_dump(by_alias=True, exclude_none=True) for image in data.embedded.images]
