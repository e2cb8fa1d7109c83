"""People routes - Exposes normalized, classified person records with request metadata."""

import time
import uuid
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from globalwatch.api.deps import get_wanted_service
from globalwatch.core.config import settings
from globalwatch.normalization.images import primary_image_url
from globalwatch.schemas.api import (
    CategoryGroup,
    CategoryResponse,
    PersonDetailResponse,
    PersonListResponse,
)
from globalwatch.schemas.normalized import Classification
from globalwatch.services.wanted_service import WantedService

router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=PersonListResponse)
async def list_people(
    page: int = Query(1, ge=1, description="Page number at the source"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Records per source page"),
    source: Optional[Literal["fbi", "interpol"]] = Query(None, description="Restrict to one source"),
    classification: Optional[Classification] = Query(None, description="Filter by case category"),
    service: WantedService = Depends(get_wanted_service),
):
    """
    Get one page of normalized wanted/missing person records.

    Sources that fail or time out contribute nothing; the request itself
    still succeeds, possibly with an empty list.
    """
    start = time.perf_counter()
    request_id = str(uuid.uuid4())

    people = await service.list_people(page=page, page_size=page_size, source=source, classification=classification)

    return PersonListResponse(
        request_id=request_id,
        api_latency_ms=int((time.perf_counter() - start) * 1000),
        page=page,
        page_size=page_size,
        count=len(people),
        data=people,
    )


@router.get("/categories", response_model=CategoryResponse)
async def list_categories(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    service: WantedService = Depends(get_wanted_service),
):
    """Get one page of people grouped by classification, in category order."""
    start = time.perf_counter()
    request_id = str(uuid.uuid4())

    grouped = await service.list_by_category(page=page, page_size=page_size)

    return CategoryResponse(
        request_id=request_id,
        api_latency_ms=int((time.perf_counter() - start) * 1000),
        categories=[
            CategoryGroup(classification=c, label=c.label, count=len(members), data=members)
            for c, members in grouped.items()
        ],
    )


@router.get("/{source}/{raw_id:path}", response_model=PersonDetailResponse)
async def get_person(
    source: Literal["fbi", "interpol"],
    raw_id: str,
    service: WantedService = Depends(get_wanted_service),
):
    """
    Get a single person by source and raw identifier.

    FBI lookups scan the paginated list (bounded by the page cap); INTERPOL
    ids may be given as ``2023/12345`` or ``2023-12345``.
    """
    person = await service.get_person(source, raw_id)

    if not person:
        raise HTTPException(status_code=404, detail=f"Person '{raw_id}' not found in {source}")

    return PersonDetailResponse(
        request_id=str(uuid.uuid4()),
        primary_image_url=primary_image_url(person),
        data=person,
    )
