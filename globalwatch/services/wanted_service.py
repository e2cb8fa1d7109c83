"""Wanted Service - request-scoped fetch, normalize and classify pass."""

from __future__ import annotations

from typing import Dict, List, Optional

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger
from globalwatch.ingestion.base import BaseSource
from globalwatch.ingestion.fbi_source import FBISource
from globalwatch.ingestion.interpol_source import InterpolSource
from globalwatch.ingestion.runner import IngestionRunner
from globalwatch.schemas.normalized import Classification, NormalizedPerson, SourceName

log = get_logger("wanted_service")


def build_sources(names: Optional[List[SourceName]] = None) -> List[BaseSource]:
    """Instantiate the configured sources, in a stable order."""
    names = names or list(settings.ENABLED_SOURCES)
    sources: List[BaseSource] = []
    if "fbi" in names:
        sources.append(FBISource())
    if "interpol" in names:
        sources.append(InterpolSource())
    return sources


class WantedService:
    """Builds NormalizedPerson lists and details from the live sources.

    Nothing is cached between calls: every call fetches, normalizes and
    classifies from scratch, and a failing source only empties its share of
    the result.
    """

    def __init__(self, sources: List[BaseSource]):
        self.sources = sources

    def _source(self, name: str) -> Optional[BaseSource]:
        return next((s for s in self.sources if s.name == name), None)

    async def list_people(
        self,
        page: int = 1,
        page_size: int = 20,
        source: Optional[SourceName] = None,
        classification: Optional[Classification] = None,
    ) -> List[NormalizedPerson]:
        """Fetch one page from every (or one) source and normalize it."""
        sources = [s for s in self.sources if source is None or s.name == source]
        if not sources:
            return []

        results = await IngestionRunner(sources).run(page=page, page_size=page_size)

        people: List[NormalizedPerson] = []
        for src in sources:
            result = results[src.name]
            if result.status == "error":
                log.warning(f"No data from {src.name}: {result.error}")
                continue
            people.extend(src.normalize(result.items))

        if classification is not None:
            people = [p for p in people if p.classification is classification]
        return people

    async def list_by_category(self, page: int = 1, page_size: int = 20) -> Dict[Classification, List[NormalizedPerson]]:
        """Group one page of people by classification, in enum order."""
        people = await self.list_people(page=page, page_size=page_size)
        grouped: Dict[Classification, List[NormalizedPerson]] = {c: [] for c in Classification}
        for person in people:
            grouped[person.classification].append(person)
        return {c: members for c, members in grouped.items() if members}

    async def get_person(self, source: str, raw_id: str) -> Optional[NormalizedPerson]:
        """Detail lookup by raw identifier; ``None`` when not found."""
        src = self._source(source)
        if src is None:
            log.info(f"Detail lookup for unknown or disabled source {source!r}")
            return None

        raw = await src.fetch_by_id(raw_id)
        if raw is None:
            return None
        people = src.normalize([raw])
        return people[0] if people else None
