"""Fetch entrypoint - Standalone script for a one-off fetch/normalize/classify pass.

Usage:
    python -m globalwatch.fetch_entrypoint                  # First page of all sources
    python -m globalwatch.fetch_entrypoint fbi              # First page of one source
    python -m globalwatch.fetch_entrypoint interpol --all   # Every page, up to MAX_PAGES
"""

import asyncio
import sys
from collections import Counter
from typing import Dict, List, Optional

from globalwatch.core.config import settings
from globalwatch.core.logging import get_logger
from globalwatch.schemas.normalized import NormalizedPerson, SourceName
from globalwatch.services.wanted_service import WantedService, build_sources

logger = get_logger("fetch_entrypoint")

VALID_SOURCES = ("fbi", "interpol")


async def fetch_page(source: Optional[SourceName]) -> List[NormalizedPerson]:
    """Normalize the first page of one or all sources."""
    service = WantedService(build_sources())
    return await service.list_people(page=1, page_size=settings.DEFAULT_PAGE_SIZE, source=source)


async def fetch_everything(source: Optional[SourceName]) -> List[NormalizedPerson]:
    """Walk every page of one or all sources, bounded by the page cap."""
    sources = [s for s in build_sources() if source is None or s.name == source]
    batches = await asyncio.gather(*(s.fetch_all(page_size=settings.DEFAULT_PAGE_SIZE) for s in sources))
    people: List[NormalizedPerson] = []
    for src, items in zip(sources, batches):
        people.extend(src.normalize(items))
    return people


def summarize(people: List[NormalizedPerson]) -> Dict[str, int]:
    counts = Counter(p.classification.value for p in people)
    return dict(sorted(counts.items()))


def main():
    """Main entry point for a fetch pass."""
    args = sys.argv[1:]
    fetch_all = "--all" in args
    positional = [a for a in args if not a.startswith("--")]

    source: Optional[SourceName] = None
    if positional:
        if positional[0] not in VALID_SOURCES:
            logger.error(f"Invalid source: {positional[0]}. Must be one of: {', '.join(VALID_SOURCES)}")
            sys.exit(1)
        source = positional[0]  # type: ignore[assignment]

    logger.info(f"Fetch starting (source={source or 'all'}, all_pages={fetch_all})")
    people = asyncio.run(fetch_everything(source) if fetch_all else fetch_page(source))

    summary = summarize(people)
    logger.info(f"Fetch completed: {len(people)} people {summary}")

    # No data at all is not an error for the service, but it is for a manual run
    if not people:
        sys.exit(1)

    return summary


if __name__ == "__main__":
    main()
