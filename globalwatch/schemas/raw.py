"""Raw source schemas"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RawModel(BaseModel):
    """Base for source payloads: unknown keys are ignored, wrong types fail validation."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, populate_by_name=True)


class PosterImage(RawModel):
    """One photo offered in several quality tiers (FBI poster shape, reused for INTERPOL)."""

    original: Optional[str] = None
    large: Optional[str] = None
    thumb: Optional[str] = None
    caption: Optional[str] = None


class FBIWantedItem(RawModel):
    """Schema for a single record of the FBI Wanted API"""

    uid: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    details: Optional[str] = None
    caution: Optional[str] = None
    remarks: Optional[str] = None
    additional_information: Optional[str] = None
    warning_message: Optional[str] = None
    reward_text: Optional[str] = None
    images: Optional[List[PosterImage]] = None

    # Classification hints
    subjects: Optional[List[str]] = None
    poster_classification: Optional[str] = None
    person_classification: Optional[str] = None
    status: Optional[str] = None

    # Physical / biographic
    sex: Optional[str] = None
    race: Optional[str] = None
    nationality: Optional[Union[str, List[str]]] = None
    dates_of_birth_used: Optional[List[str]] = None
    place_of_birth: Optional[str] = None
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    age_range: Optional[Union[str, List[str]]] = None
    height_min: Optional[int] = None
    height_max: Optional[int] = None
    weight: Optional[str] = None
    eyes: Optional[str] = None
    hair: Optional[str] = None
    scars_and_marks: Optional[str] = None

    # Case metadata
    field_offices: Optional[List[str]] = None
    possible_countries: Optional[List[str]] = None
    possible_states: Optional[List[str]] = None
    locations: Optional[List[str]] = None
    aliases: Optional[Union[str, List[str]]] = None
    publication: Optional[str] = None
    modified: Optional[str] = None
    ncic: Optional[str] = None
    url: Optional[str] = None
    path: Optional[str] = None


class FBIWantedResponse(RawModel):
    total: Optional[int] = None
    page: Optional[int] = None
    items: List[Any] = Field(default_factory=list)


class InterpolHref(RawModel):
    href: Optional[str] = None


class InterpolLinks(RawModel):
    self_: Optional[InterpolHref] = Field(default=None, alias="self")
    images: Optional[InterpolHref] = None
    thumbnail: Optional[InterpolHref] = None
    picture: Optional[InterpolHref] = None


class InterpolImage(RawModel):
    picture_id: Optional[str] = None
    links: Optional[InterpolLinks] = Field(default=None, alias="_links")


class InterpolEmbeddedImages(RawModel):
    images: List[InterpolImage] = Field(default_factory=list)


class InterpolArrestWarrant(RawModel):
    charge: Optional[str] = None
    issuing_country_id: Optional[str] = None


class InterpolNotice(RawModel):
    """Schema for an INTERPOL notice, list or detail shape"""

    entity_id: Optional[str] = None
    forename: Optional[str] = None
    name: Optional[str] = None
    date_of_birth: Optional[str] = None
    nationalities: Optional[Union[str, List[str]]] = None
    sex_id: Optional[str] = None
    place_of_birth: Optional[str] = None
    country_of_birth_id: Optional[str] = None
    height: Optional[float] = None  # metres
    weight: Optional[float] = None  # kilograms
    eyes_colors_id: Optional[Union[str, List[str]]] = None
    hairs_id: Optional[Union[str, List[str]]] = None
    distinguishing_marks: Optional[str] = None
    arrest_warrants: Optional[List[InterpolArrestWarrant]] = None

    # Yellow (missing person) notices
    date_of_event: Optional[str] = None
    place: Optional[str] = None

    links: Optional[InterpolLinks] = Field(default=None, alias="_links")
    embedded: Optional[InterpolEmbeddedImages] = Field(default=None, alias="_embedded")


class InterpolEmbeddedNotices(RawModel):
    notices: List[Any] = Field(default_factory=list)


class InterpolNoticesResponse(RawModel):
    total: Optional[int] = None
    embedded: Optional[InterpolEmbeddedNotices] = Field(default=None, alias="_embedded")


class InterpolImagesResponse(RawModel):
    embedded: Optional[InterpolEmbeddedImages] = Field(default=None, alias="_embedded")
