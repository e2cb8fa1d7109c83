"""FBI Wanted API source implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger
from globalwatch.schemas.raw import FBIWantedResponse
from .base import BaseSource

log = get_logger("ingestion.fbi")


class FBISource(BaseSource):
    """Fetches wanted, missing and information-sought posters from the FBI.

    The v1 list API has no lookup by uid, so detail lookups use the
    page-scanning fallback inherited from ``BaseSource``.
    """

    name = "fbi"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any):
        super().__init__(**kwargs)
        self.base_url = base_url or settings.FBI_API_BASE_URL

    def page_request(self, page: int, page_size: int) -> tuple[str, Dict[str, Any]]:
        params = {
            "page": page,
            "pageSize": page_size,
            "sort_on": "publication",
            "sort_order": "desc",
        }
        return self.base_url, params

    def parse_page(self, payload: Any) -> tuple[List[Dict[str, Any]], Optional[int]]:
        data = FBIWantedResponse.model_validate(payload)
        return data.items, data.total

    def record_id(self, item: Dict[str, Any]) -> Optional[str]:
        uid = item.get("uid")
        return str(uid) if uid is not None else None
