"""Abstract source interface for ingestion."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional

import httpx
from pydantic import BaseModel, Field

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger
from globalwatch.normalization.assembler import normalize_records
from globalwatch.schemas.normalized import NormalizedPerson, SourceName

log = get_logger("ingestion.base")

FetchStatus = Literal["success", "empty", "error"]


class FetchResult(BaseModel):
    """Outcome of one page fetch. Failures are data, never exceptions."""

    source: str
    page: int = 1
    status: FetchStatus
    items: List[Any] = Field(default_factory=list)
    total: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


class BaseSource(ABC):
    """Abstract base class for paginated record sources.

    Subclasses describe how to request a page and where the records live in
    the decoded payload; this class owns the HTTP client, the fail-soft
    error handling and the bounded pagination loop.
    """

    name: SourceName

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        max_pages: Optional[int] = None,
        page_delay: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = settings.FETCH_TIMEOUT_SECONDS if timeout is None else timeout
        self.max_pages = settings.MAX_PAGES if max_pages is None else max_pages
        self.page_delay = settings.PAGE_DELAY_SECONDS if page_delay is None else page_delay
        self.transport = transport

    # -------------------------------------------------------------------------
    # Source specifics
    # -------------------------------------------------------------------------
    @abstractmethod
    def page_request(self, page: int, page_size: int) -> tuple[str, Dict[str, Any]]:
        """Return ``(url, params)`` for one page."""

    @abstractmethod
    def parse_page(self, payload: Any) -> tuple[List[Dict[str, Any]], Optional[int]]:
        """Extract ``(items, total)`` from a decoded page payload."""

    @abstractmethod
    def record_id(self, item: Dict[str, Any]) -> Optional[str]:
        """Raw identifier of a record, as used for detail lookups."""

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": settings.USER_AGENT,
            "Accept-Language": "en-US,en;q=0.9",
        }

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, headers=self.headers, transport=self.transport)

    async def get_json(self, client: httpx.AsyncClient, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET and decode JSON; raises httpx.HTTPError or ValueError on failure."""
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()

    async def fetch_page(self, page: int = 1, page_size: int = 20, client: Optional[httpx.AsyncClient] = None) -> FetchResult:
        """Fetch one page. Network errors, timeouts, non-2xx and bad JSON yield an error result."""
        url, params = self.page_request(page, page_size)
        try:
            if client is None:
                async with self.client() as own_client:
                    payload = await self.get_json(own_client, url, params)
            else:
                payload = await self.get_json(client, url, params)
            items, total = self.parse_page(payload)
        except httpx.HTTPStatusError as exc:
            log.error(f"{self.name} page={page} HTTP {exc.response.status_code} from {url}")
            return FetchResult(source=self.name, page=page, status="error", error=f"HTTP {exc.response.status_code}")
        except httpx.HTTPError as exc:
            log.error(f"{self.name} page={page} request failed: {exc!r}")
            return FetchResult(source=self.name, page=page, status="error", error=f"{type(exc).__name__}: {exc}")
        except ValueError as exc:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            log.error(f"{self.name} page={page} returned an unreadable payload: {exc}")
            return FetchResult(source=self.name, page=page, status="error", error=f"Malformed payload: {exc}")

        status: FetchStatus = "success" if items else "empty"
        log.debug(f"{self.name} page={page} fetched={len(items)} total={total}")
        return FetchResult(source=self.name, page=page, status=status, items=items, total=total)

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------
    async def fetch_all(self, page_size: int = 50) -> List[Dict[str, Any]]:
        """Walk pages until an empty page, the reported total, or the page cap."""
        records: List[Dict[str, Any]] = []
        async with self.client() as client:
            for page in range(1, self.max_pages + 1):
                if page > 1 and self.page_delay > 0:
                    await asyncio.sleep(self.page_delay)
                result = await self.fetch_page(page, page_size, client=client)
                if not result.ok:
                    return records
                records.extend(result.items)
                if result.total is not None and len(records) >= result.total:
                    return records

        log.warning(f"{self.name} pagination stopped at safety cap of {self.max_pages} pages ({len(records)} records)")
        return records

    async def fetch_by_id(self, raw_id: str, page_size: int = 50) -> Optional[Dict[str, Any]]:
        """Find one record by scanning pages.

        O(total records) and bounded by the same page cap as ``fetch_all``;
        sources with a direct-by-id endpoint override this.
        """
        async with self.client() as client:
            for page in range(1, self.max_pages + 1):
                if page > 1 and self.page_delay > 0:
                    await asyncio.sleep(self.page_delay)
                result = await self.fetch_page(page, page_size, client=client)
                if not result.ok:
                    return None
                for item in result.items:
                    if isinstance(item, dict) and self.record_id(item) == raw_id:
                        return item
                if result.total is not None and page * page_size >= result.total:
                    return None

        log.warning(f"{self.name} lookup of {raw_id!r} gave up at safety cap of {self.max_pages} pages")
        return None

    def normalize(self, items: List[Dict[str, Any]]) -> List[NormalizedPerson]:
        return normalize_records(self.name, items)
