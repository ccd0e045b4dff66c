"""
Profile normalization.

Maps a raw profile document (camelCase or snake_case keys) to a
``CandidateProfile``. Language entries that carry raw test scores but no
CLB equivalent get one derived from the IRCC conversion charts, and an
age is computed from ``dob`` when no age is given.

Supported tests: IELTS General Training, CELPIP-G, PTE Core. Other tests
(TEF Canada, TCF Canada) are left without a CLB equivalent.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping

from crs_engine.models.profile import CandidateProfile

logger = logging.getLogger(__name__)

ABILITIES = ("speaking", "listening", "reading", "writing")

# Minimum score per ability for each CLB level, highest level first.
IELTS_THRESHOLDS = {
    "speaking": ((10, 7.5), (9, 7.0), (8, 6.5), (7, 6.0), (6, 5.5), (5, 5.0), (4, 4.0)),
    "listening": ((10, 8.5), (9, 8.0), (8, 7.5), (7, 6.0), (6, 5.5), (5, 5.0), (4, 4.5)),
    "reading": ((10, 8.0), (9, 7.0), (8, 6.5), (7, 6.0), (6, 5.0), (5, 4.0), (4, 3.5)),
    "writing": ((10, 7.5), (9, 7.0), (8, 6.5), (7, 6.0), (6, 5.5), (5, 5.0), (4, 4.0)),
}

PTE_THRESHOLDS = {
    "speaking": ((10, 89), (9, 84), (8, 76), (7, 68), (6, 59), (5, 51), (4, 42)),
    "listening": ((10, 89), (9, 82), (8, 71), (7, 60), (6, 50), (5, 39), (4, 28)),
    "reading": ((10, 88), (9, 78), (8, 69), (7, 60), (6, 51), (5, 42), (4, 33)),
    "writing": ((10, 90), (9, 88), (8, 79), (7, 69), (6, 60), (5, 51), (4, 41)),
}

CELPIP_MAX_LEVEL = 12


def _float(v: Any) -> float | None:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


def _banded(score: float | None, bands: tuple[tuple[int, float], ...]) -> int:
    if score is None:
        return 0
    for clb, minimum in bands:
        if score >= minimum:
            return clb
    return 0


def _celpip(score: float | None) -> int:
    if score is None:
        return 0
    level = int(score)
    return level if 1 <= level <= CELPIP_MAX_LEVEL else 0


def clb_from_scores(test: str | None, scores: Mapping[str, Any]) -> dict[str, int] | None:
    """
    Convert raw test scores to a CLB level per ability.

    Returns None for unsupported tests or when no ability score is present.
    """
    raw = {ability: _float(scores.get(ability)) for ability in ABILITIES}
    if all(v is None for v in raw.values()):
        return None
    name = (test or "").strip().lower()
    if "celpip" in name:
        return {ability: _celpip(raw[ability]) for ability in ABILITIES}
    if "pte" in name:
        return {ability: _banded(raw[ability], PTE_THRESHOLDS[ability]) for ability in ABILITIES}
    if "ielts" in name:
        return {ability: _banded(raw[ability], IELTS_THRESHOLDS[ability]) for ability in ABILITIES}
    return None


def ielts_scores_for_clb(clb: int) -> dict[str, float]:
    """Lowest IELTS score per ability that reaches the given CLB level."""
    scores = {}
    for ability in ABILITIES:
        bands = IELTS_THRESHOLDS[ability]
        scores[ability] = next((minimum for level, minimum in bands if level <= clb), 0.0)
    return scores


def _get(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    return data.get(camel) if data.get(camel) is not None else data.get(snake)


def _with_clb(entry: Mapping[str, Any]) -> dict[str, Any]:
    entry = dict(entry)
    if _get(entry, "clbEquivalent", "clb_equivalent") is not None:
        return entry
    derived = clb_from_scores(entry.get("test"), entry)
    if derived is not None:
        entry["clbEquivalent"] = derived
    else:
        logger.debug(f"No CLB equivalent derived for language test {entry.get('test')!r}")
    return entry


def _normalize_languages(data: dict[str, Any]) -> None:
    for key in ("languageProficiency", "language_proficiency"):
        langs = data.get(key)
        if isinstance(langs, list):
            data[key] = [_with_clb(lang) if isinstance(lang, Mapping) else lang for lang in langs]


def age_from_dob(dob: Any, as_of: date | None = None) -> int | None:
    """Whole years between dob and as_of (today by default); None if dob cannot be parsed."""
    if isinstance(dob, datetime):
        born = dob.date()
    elif isinstance(dob, date):
        born = dob
    elif isinstance(dob, str):
        try:
            born = datetime.fromisoformat(dob.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    else:
        return None
    today = as_of or date.today()
    age = today.year - born.year - ((today.month, today.day) < (born.month, born.day))
    return age if age >= 0 else None


def profile_from_dict(data: Mapping[str, Any], as_of: date | None = None) -> CandidateProfile:
    """Build a CandidateProfile from a raw profile document."""
    data = dict(data)

    if not data.get("age") and data.get("dob"):
        age = age_from_dob(data["dob"], as_of)
        if age is not None:
            data["age"] = age

    _normalize_languages(data)
    for key in ("spouseProfile", "spouse_profile"):
        spouse = data.get(key)
        if isinstance(spouse, Mapping):
            spouse = dict(spouse)
            _normalize_languages(spouse)
            data[key] = spouse

    return CandidateProfile.model_validate(data)
