from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from globalwatch.schemas.normalized import Classification, NormalizedPerson, SourceName


class ApiModel(BaseModel):
    """camelCase on the wire, matching NormalizedPerson."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonListResponse(ApiModel):
    request_id: str
    api_latency_ms: int
    page: int
    page_size: int
    count: int
    data: List[NormalizedPerson]


class CategoryGroup(ApiModel):
    classification: Classification
    label: str
    count: int
    data: List[NormalizedPerson]


class CategoryResponse(ApiModel):
    request_id: str
    api_latency_ms: int
    categories: List[CategoryGroup]


class PersonDetailResponse(ApiModel):
    request_id: str
    primary_image_url: str
    data: NormalizedPerson


class AgeProgressionRequest(ApiModel):
    photo_data_uri: str = Field(..., pattern=r"^data:[\w.+-]+/[\w.+-]+;base64,")
    years_elapsed: int = Field(..., ge=1, le=100)


class AgeProgressionResponse(ApiModel):
    updated_photo_data_uri: str


class HealthResponse(ApiModel):
    status: str
    env: str
    sources: List[SourceName]
    age_progression_configured: bool
