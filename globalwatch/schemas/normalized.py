"""Unified normalized person model"""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

SourceName = Literal["fbi", "interpol"]


def freeze(value: Any) -> Any:
    """Read-only deep copy: mappings become mappingproxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


ReadOnlyData = Annotated[
    Mapping[str, Any],
    AfterValidator(freeze),
    PlainSerializer(thaw, return_type=Dict[str, Any]),
]


class Classification(str, Enum):
    """Closed set of case categories a record can resolve to."""

    WANTED_CRIMINAL = "WANTED_CRIMINAL"
    CYBER_MOST_WANTED = "CYBER_MOST_WANTED"
    CRIMES_AGAINST_CHILDREN = "CRIMES_AGAINST_CHILDREN"
    MISSING_PERSON = "MISSING_PERSON"
    UNIDENTIFIED_PERSON = "UNIDENTIFIED_PERSON"
    VICTIM_OF_CRIME = "VICTIM_OF_CRIME"
    SEEKING_INFORMATION = "SEEKING_INFORMATION"
    CAPTURED = "CAPTURED"
    UNSPECIFIED = "UNSPECIFIED"

    @property
    def is_criminal(self) -> bool:
        return self in CRIMINAL_CLASSIFICATIONS

    @property
    def label(self) -> str:
        return CLASSIFICATION_LABELS[self]


CRIMINAL_CLASSIFICATIONS = frozenset(
    {
        Classification.WANTED_CRIMINAL,
        Classification.CYBER_MOST_WANTED,
        Classification.CRIMES_AGAINST_CHILDREN,
    }
)

CLASSIFICATION_LABELS: Dict[Classification, str] = {
    Classification.WANTED_CRIMINAL: "Wanted",
    Classification.CYBER_MOST_WANTED: "Cyber's Most Wanted",
    Classification.CRIMES_AGAINST_CHILDREN: "Crimes Against Children",
    Classification.MISSING_PERSON: "Missing Person",
    Classification.UNIDENTIFIED_PERSON: "Unidentified Person",
    Classification.VICTIM_OF_CRIME: "Victim of Crime",
    Classification.SEEKING_INFORMATION: "Seeking Information",
    Classification.CAPTURED: "Captured",
    Classification.UNSPECIFIED: "Unspecified",
}


class NormalizedPerson(BaseModel):
    """Canonical, immutable view of one wanted/missing person record.

    Built fresh from a raw source record on every fetch. ``images`` is never
    empty and ``charges`` is only populated for criminal classifications.
    ``original_data`` keeps a read-only copy of the raw payload for fields that
    are not canonicalized here; it serializes back to plain JSON.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Identity
    id: str
    raw_id: str
    source: SourceName
    details_url: str

    # Display
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    images: List[str]
    thumbnail_url: str

    # Classification
    classification: Classification
    case_type_description: Optional[str] = None
    charges: Optional[List[str]] = None

    # Physical / biographic
    sex: Optional[str] = None
    race: Optional[str] = None
    nationality: Optional[List[str]] = None
    date_of_birth: Optional[str] = None
    age: Optional[str] = None
    place_of_birth: Optional[str] = None
    height: Optional[str] = None
    weight: Optional[str] = None
    eye_color: Optional[str] = None
    hair_color: Optional[str] = None
    distinguishing_marks: Optional[str] = None

    # Case metadata
    field_offices: Optional[List[str]] = None
    possible_countries: Optional[List[str]] = None
    aliases: Optional[List[str]] = None
    reward_text: Optional[str] = None
    warning_message: Optional[str] = None
    details: Optional[str] = None
    remarks: Optional[str] = None
    publication: Optional[str] = None

    # Provenance
    original_data: ReadOnlyData
