"""Case classification for raw wanted/missing person records.

Records arrive with several weak and sometimes contradictory hints: a status
code, poster/person classification codes, subject tags, a title and free
text. ``classify`` runs an ordered list of pure rules over a
:class:`CaseSignals` view of the record and folds their answers:

0. ``captured`` status wins outright and stops the cascade.
1. Category tags (cyber, crimes against children).
2. Explicit poster/person classification codes.
3. Subject tag keywords.
4. Title keywords.
5. Free-text phrases from description, details and remarks.
6. ViCAP disambiguation.
7. Keyword match on title/description when the subject tags carry nothing.
8. Whatever is still undecided is a wanted criminal.

Rules 1-7 only run while the record is still undecided (or
``UNSPECIFIED``), so a later rule can refine a generic answer but never
replace a specific one. Identity-unknown language ("unidentified",
"Jane Doe", "John Doe") always beats generic victim language.

``derive_case_fields`` then produces the display description and the
charges list for the final classification.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from globalwatch.schemas.normalized import Classification

C = Classification

IDENTITY_UNKNOWN = re.compile(r"\bunidentified\b|\bjane doe\b|\bjohn doe\b")
CYBER_MARKER = re.compile(r"\bcyber")
CHILDREN_MARKER = re.compile(r"crimes against children|endangered child alert|\becap\b")

UNIDENTIFIED_TAG = re.compile(r"unidentified (?:persons?|human remains)")
MISSING_TAG = re.compile(r"missing persons?\b")
SEEKING_INFORMATION = re.compile(r"seeking information")
VICTIM_TAG = re.compile(r"homicides? and sexual assaults?|\bvictims?\b")

MISSING_WORD = re.compile(r"\bmissing\b")
VICTIM_WORD = re.compile(r"\bvictims?\b")

SEEKING_CAUSE_OF_DEATH = re.compile(
    r"seeking (?:the public's )?information (?:on|about|regarding|concerning|into|as to) (?:the )?cause of death"
)
REMAINS_FOUND = re.compile(
    r"skeletal remains"
    r"|human remains"
    r"|remains were (?:found|discovered|located|recovered)"
)
DEATH_PHRASE = re.compile(r"body was (?:found|discovered|located|recovered)|cause of death")
LAST_SEEN = re.compile(r"was last seen")
DISAPPEARANCE = re.compile(r"missing since|disappear")
ANYONE_WITH_INFORMATION = re.compile(r"anyone with information")
SUSPECT_LANGUAGE = re.compile(
    r"\bis wanted\b|\bwanted for\b|\bcharged with\b|\barrest warrant\b|\bfederal warrant\b|\bunlawful flight\b"
)
VICAP = re.compile(r"\bvicap\b")

DATE_ONLY = re.compile(
    r"^\s*(?:"
    r"\d{1,2}[/-]\d{1,2}[/-]\d{2,4}"
    r"|\d{4}(?:-\d{1,2}){0,2}"
    r"|(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.? \d{1,2},? \d{4}"
    r"|(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.? \d{4}"
    r")\s*$"
)
FILLER_TAG = re.compile(r"assistance|information")

US_STATES = frozenset(
    {
        "alabama", "alaska", "arizona", "arkansas", "california", "colorado", "connecticut",
        "delaware", "florida", "georgia", "hawaii", "idaho", "illinois", "indiana", "iowa",
        "kansas", "kentucky", "louisiana", "maine", "maryland", "massachusetts", "michigan",
        "minnesota", "mississippi", "missouri", "montana", "nebraska", "nevada",
        "new hampshire", "new jersey", "new mexico", "new york", "north carolina",
        "north dakota", "ohio", "oklahoma", "oregon", "pennsylvania", "rhode island",
        "south carolina", "south dakota", "tennessee", "texas", "utah", "vermont", "virginia",
        "washington", "west virginia", "wisconsin", "wyoming", "district of columbia",
        "puerto rico",
    }
)
LOCATION_SUFFIX = re.compile(r"(?:division|field office)$")


class CaseSignals(BaseModel):
    """Source-neutral classification hints pulled from one raw record."""

    model_config = ConfigDict(frozen=True)

    status: Optional[str] = None
    title: Optional[str] = None
    subjects: Tuple[str, ...] = ()
    poster_classification: Optional[str] = None
    person_classification: Optional[str] = None
    description: Optional[str] = None
    details: Optional[str] = None
    remarks: Optional[str] = None

    @property
    def title_text(self) -> str:
        return (self.title or "").lower()

    @property
    def subject_texts(self) -> List[str]:
        return [s.lower() for s in self.subjects if s and s.strip()]

    @property
    def free_text(self) -> str:
        return " ".join(t for t in (self.description, self.details, self.remarks) if t).lower()

    @property
    def has_substantive_subjects(self) -> bool:
        return any(not _is_filler(tag) for tag in self.subject_texts)


Rule = Callable[[CaseSignals], Optional[Classification]]


def _is_filler(tag: str) -> bool:
    return bool(DATE_ONLY.match(tag) or FILLER_TAG.search(tag))


def _has_identity_marker(*texts: str) -> bool:
    return any(IDENTITY_UNKNOWN.search(text) for text in texts if text)


def _victim_or_unidentified(signals: CaseSignals) -> Classification:
    if _has_identity_marker(signals.title_text, signals.free_text):
        return C.UNIDENTIFIED_PERSON
    return C.VICTIM_OF_CRIME


def _match_keywords(signals: CaseSignals, text: str) -> Optional[Classification]:
    """Shared title/description keyword families, most specific first."""
    if IDENTITY_UNKNOWN.search(text):
        return C.UNIDENTIFIED_PERSON
    if MISSING_WORD.search(text):
        return C.MISSING_PERSON
    if SEEKING_INFORMATION.search(text):
        return C.SEEKING_INFORMATION
    if VICTIM_WORD.search(text):
        return _victim_or_unidentified(signals)
    return None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def captured_status(signals: CaseSignals) -> Optional[Classification]:
    if (signals.status or "").strip().lower() == "captured":
        return C.CAPTURED
    return None


def category_tags(signals: CaseSignals) -> Optional[Classification]:
    texts = signals.subject_texts + [signals.title_text]
    if any(CYBER_MARKER.search(t) for t in texts):
        return C.CYBER_MOST_WANTED
    if any(CHILDREN_MARKER.search(t) for t in texts):
        return C.CRIMES_AGAINST_CHILDREN
    return None


def classification_codes(signals: CaseSignals) -> Optional[Classification]:
    codes = {
        (signals.poster_classification or "").strip().lower(),
        (signals.person_classification or "").strip().lower(),
    }
    if codes & {"missing", "missing person"}:
        return C.MISSING_PERSON
    if codes & {"information", "seeking information"}:
        return C.SEEKING_INFORMATION
    if "victim" in codes:
        # Provisional; refined to UNIDENTIFIED_PERSON by identity markers.
        return C.VICTIM_OF_CRIME
    return None


def subject_keywords(signals: CaseSignals) -> Optional[Classification]:
    tags = signals.subject_texts
    if any(UNIDENTIFIED_TAG.search(t) for t in tags):
        return C.UNIDENTIFIED_PERSON
    if any(MISSING_TAG.search(t) for t in tags):
        return C.MISSING_PERSON
    if any(SEEKING_INFORMATION.search(t) for t in tags):
        return C.SEEKING_INFORMATION
    if any(VICTIM_TAG.search(t) for t in tags):
        if _has_identity_marker(signals.title_text):
            return C.UNIDENTIFIED_PERSON
        return C.VICTIM_OF_CRIME
    return None


def title_keywords(signals: CaseSignals) -> Optional[Classification]:
    return _match_keywords(signals, signals.title_text)


def free_text_phrases(signals: CaseSignals) -> Optional[Classification]:
    text = signals.free_text
    # Posters naming a suspect describe the crime, not the subject.
    if not text or SUSPECT_LANGUAGE.search(text):
        return None
    if SEEKING_CAUSE_OF_DEATH.search(text):
        return C.SEEKING_INFORMATION
    if IDENTITY_UNKNOWN.search(text) or REMAINS_FOUND.search(text):
        return C.UNIDENTIFIED_PERSON
    if DEATH_PHRASE.search(text):
        return _victim_or_unidentified(signals)
    if LAST_SEEN.search(text) and DISAPPEARANCE.search(text):
        return C.MISSING_PERSON
    if SEEKING_INFORMATION.search(text):
        return C.SEEKING_INFORMATION
    # Boilerplate on most wanted posters; only meaningful without real charges.
    if ANYONE_WITH_INFORMATION.search(text) and not signals.has_substantive_subjects:
        return C.SEEKING_INFORMATION
    return None


def vicap_disambiguation(signals: CaseSignals) -> Optional[Classification]:
    text = " ".join(signals.subject_texts + [signals.title_text])
    if not VICAP.search(text):
        return None
    if "unidentified" in text or VICTIM_WORD.search(text):
        return C.UNIDENTIFIED_PERSON
    if SEEKING_INFORMATION.search(text):
        return C.SEEKING_INFORMATION
    return None


def degenerate_subjects(signals: CaseSignals) -> Optional[Classification]:
    if signals.has_substantive_subjects:
        return None
    if not _first(signals.title, signals.description):
        return C.UNSPECIFIED
    description = signals.description or ""
    if SUSPECT_LANGUAGE.search(description.lower()):
        description = ""
    text = " ".join(t for t in (signals.title, description) if t).lower()
    return _match_keywords(signals, text)


CASCADE: Sequence[Rule] = (
    category_tags,
    classification_codes,
    subject_keywords,
    title_keywords,
    free_text_phrases,
    vicap_disambiguation,
    degenerate_subjects,
)


def _is_generic(value: Optional[Classification]) -> bool:
    return value is None or value is C.UNSPECIFIED


def classify(signals: CaseSignals, rules: Sequence[Rule] = CASCADE) -> Classification:
    """Assign exactly one classification to a record. Never raises."""
    captured = captured_status(signals)
    if captured is not None:
        return captured

    current: Optional[Classification] = None
    for rule in rules:
        if not _is_generic(current):
            break
        candidate = rule(signals)
        if candidate is not None and (current is None or candidate is not C.UNSPECIFIED):
            current = candidate

    if current is C.VICTIM_OF_CRIME:
        current = _victim_or_unidentified(signals)
    return current or C.WANTED_CRIMINAL


# ---------------------------------------------------------------------------
# Derived display fields
# ---------------------------------------------------------------------------

CRIMINAL_DEFAULT_DESCRIPTIONS = {
    C.WANTED_CRIMINAL: "Wanted",
    C.CYBER_MOST_WANTED: "Wanted for cyber crimes",
    C.CRIMES_AGAINST_CHILDREN: "Wanted for crimes against children",
}

CASE_DEFAULT_DESCRIPTIONS = {
    C.UNIDENTIFIED_PERSON: "Unidentified Person",
    C.VICTIM_OF_CRIME: "Victim of Crime",
    C.SEEKING_INFORMATION: "Seeking Information",
    C.CAPTURED: "Captured",
    C.UNSPECIFIED: "Details not specified",
}


def _squash(value: str) -> str:
    return re.sub(r"[^a-z]", "", value.lower())


def _is_location(tag: str, locations: Iterable[str]) -> bool:
    lowered = tag.strip().lower()
    if lowered in US_STATES or LOCATION_SUFFIX.search(lowered):
        return True
    squashed = _squash(tag)
    return bool(squashed) and squashed in {_squash(loc) for loc in locations if loc}


def _is_category_label(tag: str, classification: Classification) -> bool:
    lowered = tag.strip().lower()
    if lowered == classification.label.lower():
        return True
    if classification is C.CYBER_MOST_WANTED:
        return bool(CYBER_MARKER.search(lowered))
    if classification is C.CRIMES_AGAINST_CHILDREN:
        return bool(CHILDREN_MARKER.search(lowered))
    return False


def filter_charges(
    candidates: Iterable[str],
    classification: Classification,
    locations: Iterable[str] = (),
) -> Optional[List[str]]:
    """Keep real charges: drop pure dates, pure locations and the category label."""
    locations = list(locations)
    charges: List[str] = []
    for tag in candidates:
        if not tag or not tag.strip():
            continue
        tag = tag.strip()
        if DATE_ONLY.match(tag.lower()) or _is_location(tag, locations):
            continue
        if _is_category_label(tag, classification) or tag in charges:
            continue
        charges.append(tag)
    return charges or None


def _first(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None


def derive_case_fields(
    classification: Classification,
    signals: CaseSignals,
    charge_candidates: Iterable[str] = (),
    locations: Iterable[str] = (),
    publication: Optional[str] = None,
) -> Tuple[str, Optional[List[str]]]:
    """Return ``(case_type_description, charges)`` for a final classification."""
    if classification.is_criminal:
        charges = filter_charges(charge_candidates, classification, locations)
        description = _first(
            " / ".join(charges) if charges else None,
            signals.description,
            signals.details,
        )
        return description or CRIMINAL_DEFAULT_DESCRIPTIONS[classification], charges

    if classification is C.MISSING_PERSON:
        since = (publication or "").split("T")[0] or "unknown date"
        default = f"Missing since {since}"
    else:
        default = CASE_DEFAULT_DESCRIPTIONS[classification]
    description = _first(signals.description, signals.details, signals.remarks)
    return description or default, None
