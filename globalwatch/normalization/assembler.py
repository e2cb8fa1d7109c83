"""Compose parsed records into immutable NormalizedPerson entities."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from globalwatch.core.logging import get_logger
from globalwatch.normalization import fields
from globalwatch.normalization.classifier import CaseSignals, classify, derive_case_fields
from globalwatch.normalization.images import resolve_images
from globalwatch.schemas.normalized import NormalizedPerson, SourceName
from globalwatch.schemas.raw import FBIWantedItem, InterpolNotice, PosterImage

log = get_logger("normalization.assembler")


def interpol_path_id(entity_id: str) -> str:
    """INTERPOL ids look like ``2023/12345``; URLs and our ids use ``2023-12345``."""
    return entity_id.strip().replace("/", "-")


def interpol_entity_id(raw_id: str) -> str:
    """Accept either id form and return the canonical ``2023/12345`` one."""
    raw_id = raw_id.strip()
    if "/" in raw_id:
        return raw_id
    return raw_id.replace("-", "/", 1)


def normalize_fbi_item(raw: Dict[str, Any]) -> Optional[NormalizedPerson]:
    """Normalize one FBI Wanted API record; ``None`` when it cannot be used."""
    try:
        item = FBIWantedItem.model_validate(raw)
    except ValidationError as exc:
        log.warning(f"Dropping malformed FBI record uid={raw.get('uid')!r}: {exc.error_count()} invalid field(s)")
        return None

    uid = (item.uid or "").strip()
    if not uid:
        log.warning("Dropping FBI record without uid")
        return None

    name = fields.first_text(item.title)
    images, thumbnail = resolve_images(item.images, name)

    signals = CaseSignals(
        status=item.status,
        title=item.title,
        subjects=tuple(item.subjects or ()),
        poster_classification=item.poster_classification,
        person_classification=item.person_classification,
        description=item.description,
        details=item.details,
        remarks=item.remarks,
    )
    classification = classify(signals)
    locations = [*(item.field_offices or []), *(item.possible_states or []), *(item.locations or [])]
    case_description, charges = derive_case_fields(
        classification,
        signals,
        charge_candidates=item.subjects or (),
        locations=locations,
        publication=item.publication,
    )

    return NormalizedPerson(
        id=f"fbi-{uid}",
        raw_id=uid,
        source="fbi",
        details_url=f"/person/fbi/{uid}",
        name=name,
        images=images,
        thumbnail_url=thumbnail,
        classification=classification,
        case_type_description=case_description,
        charges=charges,
        sex=fields.first_text(item.sex),
        race=fields.first_text(item.race),
        nationality=fields.as_list(item.nationality),
        date_of_birth=fields.first_text(*(item.dates_of_birth_used or [])),
        age=fields.normalize_age(item.age_range, item.age_min, item.age_max),
        place_of_birth=fields.first_text(item.place_of_birth),
        height=fields.format_height(item.height_min, item.height_max),
        weight=fields.first_text(item.weight),
        eye_color=fields.first_text(item.eyes),
        hair_color=fields.first_text(item.hair),
        distinguishing_marks=fields.first_text(item.scars_and_marks),
        field_offices=fields.as_list(item.field_offices),
        possible_countries=fields.as_list(item.possible_countries),
        aliases=fields.as_list(item.aliases),
        reward_text=fields.first_text(item.reward_text),
        warning_message=fields.first_text(item.warning_message),
        details=fields.first_text(item.details, item.caution),
        remarks=fields.first_text(item.remarks),
        publication=fields.first_text(item.publication),
        original_data=raw,
    )


def _interpol_images(notice: InterpolNotice) -> List[PosterImage]:
    entries: List[PosterImage] = []
    for image in notice.embedded.images if notice.embedded else []:
        picture = image.links.picture if image.links else None
        if picture and picture.href:
            entries.append(PosterImage(original=picture.href))
    thumbnail = notice.links.thumbnail if notice.links else None
    if thumbnail and thumbnail.href:
        if entries:
            entries[0] = entries[0].model_copy(update={"thumb": thumbnail.href})
        else:
            entries.append(PosterImage(thumb=thumbnail.href))
    return entries


def normalize_interpol_notice(raw: Dict[str, Any], notice_type: str = "red") -> Optional[NormalizedPerson]:
    """Normalize one INTERPOL notice (list or detail shape)."""
    try:
        notice = InterpolNotice.model_validate(raw)
    except ValidationError as exc:
        log.warning(
            f"Dropping malformed INTERPOL notice entity_id={raw.get('entity_id')!r}: "
            f"{exc.error_count()} invalid field(s)"
        )
        return None

    entity_id = (notice.entity_id or "").strip()
    if not entity_id:
        log.warning("Dropping INTERPOL notice without entity_id")
        return None
    path_id = interpol_path_id(entity_id)

    name = fields.first_text(" ".join(p.strip() for p in (notice.forename, notice.name) if p and p.strip()))
    images, thumbnail = resolve_images(_interpol_images(notice), name)

    signals = CaseSignals(
        title=name,
        poster_classification="missing" if notice_type == "yellow" else None,
    )
    classification = classify(signals)
    warrant_charges = [w.charge for w in notice.arrest_warrants or [] if w.charge]
    case_description, charges = derive_case_fields(
        classification,
        signals,
        charge_candidates=warrant_charges,
        publication=notice.date_of_event,
    )

    return NormalizedPerson(
        id=f"interpol-{path_id}",
        raw_id=entity_id,
        source="interpol",
        details_url=f"/person/interpol/{path_id}",
        name=name,
        first_name=fields.first_text(notice.forename),
        last_name=fields.first_text(notice.name),
        images=images,
        thumbnail_url=thumbnail,
        classification=classification,
        case_type_description=case_description,
        charges=charges,
        sex=fields.decode_sex(notice.sex_id),
        nationality=fields.as_list(notice.nationalities),
        date_of_birth=fields.first_text(notice.date_of_birth),
        place_of_birth=fields.first_text(notice.place_of_birth, notice.country_of_birth_id),
        height=fields.format_metric_height(notice.height),
        weight=fields.format_weight(notice.weight),
        eye_color=fields.decode_eyes(notice.eyes_colors_id),
        hair_color=fields.decode_hair(notice.hairs_id),
        distinguishing_marks=fields.first_text(notice.distinguishing_marks),
        original_data=raw,
    )


Normalizer = Callable[[Dict[str, Any]], Optional[NormalizedPerson]]


def normalize_records(source: SourceName, items: Iterable[Dict[str, Any]], notice_type: str = "red") -> List[NormalizedPerson]:
    """Normalize a batch; bad records are dropped individually."""
    normalize: Normalizer = normalize_fbi_item
    if source == "interpol":
        normalize = partial(normalize_interpol_notice, notice_type=notice_type)

    items = list(items)
    people: List[NormalizedPerson] = []
    for raw in items:
        if not isinstance(raw, dict):
            log.warning(f"Skipping non-object {source} record: {type(raw).__name__}")
            continue
        person = normalize(raw)
        if person is not None:
            people.append(person)

    if len(people) != len(items):
        log.info(f"Normalized {source} batch: input={len(items)} kept={len(people)}")
    return people
