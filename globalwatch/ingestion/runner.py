"""Orchestration logic for data ingestion."""

from __future__ import annotations

import asyncio
from typing import Dict, List

from globalwatch.core.logging import get_logger
from .base import BaseSource, FetchResult

log = get_logger("ingestion.runner")


class IngestionRunner:
    """Fetches the same page from several sources concurrently."""

    def __init__(self, sources: List[BaseSource]):
        self.sources = sources

    async def run(self, page: int = 1, page_size: int = 20) -> Dict[str, FetchResult]:
        results = await asyncio.gather(*(source.fetch_page(page, page_size) for source in self.sources))

        aggregated: Dict[str, FetchResult] = {}
        for source, result in zip(self.sources, results):
            aggregated[source.name] = result
            log.info(f"Source={source.name} page={page} status={result.status} fetched={len(result.items)}")
        return aggregated
