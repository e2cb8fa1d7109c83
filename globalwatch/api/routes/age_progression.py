"""Age progression route - Forwards a photo to the external aging service."""

from fastapi import APIRouter, Depends, HTTPException

from globalwatch.api.deps import get_age_progression_client
from globalwatch.core.logging import get_logger
from globalwatch.schemas.api import AgeProgressionRequest, AgeProgressionResponse
from globalwatch.services.age_progression import AgeProgressionClient, AgeProgressionError

router = APIRouter(prefix="/age-progression", tags=["age-progression"])
log = get_logger("age_progression_routes")


@router.post("", response_model=AgeProgressionResponse)
async def age_progression(
    request: AgeProgressionRequest,
    client: AgeProgressionClient = Depends(get_age_progression_client),
):
    """Age a photo by ``yearsElapsed`` years."""
    try:
        updated = await client.age_photo(request.photo_data_uri, request.years_elapsed)
    except AgeProgressionError as exc:
        log.warning(f"Age progression unavailable: {exc}")
        raise HTTPException(status_code=502 if exc.configured else 503, detail=str(exc)) from exc

    return AgeProgressionResponse(updated_photo_data_uri=updated)
