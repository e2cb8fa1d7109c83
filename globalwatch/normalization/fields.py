"""Canonical display strings for heterogeneous raw fields."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

INCH_TO_METRE = 0.0254

SEX_CODES: Dict[str, str] = {
    "M": "Male",
    "F": "Female",
    "U": "Unknown",
}

HAIR_CODES: Dict[str, str] = {
    "BLA": "Black",
    "BRO": "Brown",
    "BRH": "Brown",
    "BLN": "Blond",
    "BLO": "Blond",
    "RED": "Red",
    "GRY": "Grey",
    "GRE": "Grey",
    "WHI": "White",
    "BAL": "Bald",
    "SDY": "Sandy",
    "AUB": "Auburn",
    "DYE": "Dyed",
}

EYE_CODES: Dict[str, str] = {
    "BLA": "Black",
    "BRO": "Brown",
    "BLU": "Blue",
    "GRN": "Green",
    "GRE": "Green",
    "GRY": "Grey",
    "HAZ": "Hazel",
    "MAR": "Maroon",
    "MUL": "Multicoloured",
    "PNK": "Pink",
}


def first_text(*values: Any) -> Optional[str]:
    """Return the first value that is a non-blank string."""
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def as_list(value: Any) -> Optional[List[str]]:
    """Normalize a scalar-or-list field to a list; absent or empty becomes None."""
    if value is None:
        return None
    items = value if isinstance(value, (list, tuple)) else [value]
    cleaned = [str(item).strip() for item in items if item is not None and str(item).strip()]
    return cleaned or None


def _positive(value: Optional[float]) -> Optional[float]:
    if value is None or value <= 0:
        return None
    return value


def format_height(height_min: Optional[float], height_max: Optional[float]) -> Optional[str]:
    """Format inch bounds as a display string.

    Equal bounds give feet/inches with metres, a lone (or differing) max is
    shown as a metric maximum, a lone min as a metric lower bound.
    """
    low, high = _positive(height_min), _positive(height_max)
    if low is not None and high is not None and low == high:
        feet, inches = divmod(int(round(high)), 12)
        return f"{feet}'{inches}\" ({high * INCH_TO_METRE:.2f}m)"
    if high is not None:
        return f"{high * INCH_TO_METRE:.2f}m (max)"
    if low is not None:
        return f"At least {low * INCH_TO_METRE:.2f}m"
    return None


def format_metric_height(metres: Optional[float]) -> Optional[str]:
    metres = _positive(metres)
    return f"{metres:.2f}m" if metres is not None else None


def format_weight(kilograms: Optional[float]) -> Optional[str]:
    kilograms = _positive(kilograms)
    if kilograms is None:
        return None
    return f"{kilograms:g} kg"


def decode(value: Any, table: Dict[str, str]) -> Optional[str]:
    """Map short codes (scalar or list) to labels; unknown codes pass through."""
    codes = as_list(value)
    if not codes:
        return None
    labels: List[str] = []
    for code in codes:
        label = table.get(code.upper(), code)
        if label not in labels:
            labels.append(label)
    return ", ".join(labels)


def decode_sex(value: Any) -> Optional[str]:
    return decode(value, SEX_CODES)


def decode_hair(value: Any) -> Optional[str]:
    return decode(value, HAIR_CODES)


def decode_eyes(value: Any) -> Optional[str]:
    return decode(value, EYE_CODES)


def normalize_age(age_range: Any, age_min: Optional[int], age_max: Optional[int]) -> Optional[str]:
    """Prefer the free-form range descriptor, e.g. "23 at time of disappearance"."""
    descriptor = as_list(age_range)
    if descriptor:
        return ", ".join(descriptor)
    for value in (age_max, age_min):
        if value is not None and value > 0:
            return str(value)
    return None
