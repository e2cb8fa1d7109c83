"""Image candidate selection and placeholder fallback."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
from urllib.parse import quote

from globalwatch.core.config import settings
from globalwatch.schemas.normalized import NormalizedPerson
from globalwatch.schemas.raw import PosterImage

# Highest quality first; thumbnails are only a last resort.
QUALITY_TIERS = ("original", "large")
FALLBACK_TIER = "thumb"

CARD_SIZE = "300x400"
DETAIL_SIZE = "600x800"


def placeholder_url(name: Optional[str], size: str = CARD_SIZE) -> str:
    """Deterministic stand-in image for a record without a usable photo."""
    text = name.strip() if name and name.strip() else "No Image"
    encoded = quote(text, safe="!~*'()")
    return f"https://{settings.PLACEHOLDER_HOST}/{size}.png?text={encoded}"


def is_placeholder(url: Optional[str]) -> bool:
    return bool(url) and settings.PLACEHOLDER_HOST in url


def resolve_images(entries: Optional[Sequence[PosterImage]], name: Optional[str]) -> Tuple[List[str], str]:
    """Return ``(images, thumbnail_url)`` for a record's raw image entries.

    Every URL of a tier is collected across all entries before the next tier
    is considered. When no tier yields anything, the thumbnail of the first
    entry is used; when that is missing too, a placeholder for ``name``.
    """
    entries = list(entries or [])
    candidates: List[str] = []
    for tier in QUALITY_TIERS:
        for entry in entries:
            url = getattr(entry, tier, None)
            if url and url.strip():
                candidates.append(url.strip())

    if not candidates and entries:
        thumb = getattr(entries[0], FALLBACK_TIER, None)
        if thumb and thumb.strip():
            candidates.append(thumb.strip())

    images = list(dict.fromkeys(candidates)) or [placeholder_url(name)]
    return images, images[0]


def primary_image_url(person: NormalizedPerson) -> str:
    """Best real photo for a detail view, skipping placeholder URLs."""
    if person.images and person.images[0] and not is_placeholder(person.images[0]):
        return person.images[0]
    thumb = person.thumbnail_url
    if thumb and not is_placeholder(thumb):
        return thumb
    return placeholder_url(person.name, size=DETAIL_SIZE)
