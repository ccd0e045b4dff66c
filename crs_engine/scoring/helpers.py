"""Shared building blocks for the section calculators."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, TypeVar

from crs_engine.models.profile import CandidateProfile, LanguageProficiency, WorkInterval
from crs_engine.scoring.tables import (
    CLB_TIER_HIGH,
    CLB_TIER_MODERATE,
    FULL_TIME_HOURS,
    PART_TIME_HOURS,
)

SKILLED_NOC_PREFIXES = ("0", "1", "2", "3")

T = TypeVar("T", bound=WorkInterval)


def ensure_profile(profile) -> CandidateProfile:
    """Accept a CandidateProfile or a profile mapping; anything else fails validation."""
    if isinstance(profile, CandidateProfile):
        return profile
    return CandidateProfile.model_validate(profile)


def by_context(table: Mapping, key, with_spouse: bool) -> int:
    """Look up a (single, with_spouse) table; unknown keys score 0."""
    single_pts, spouse_pts = table.get(key, (0, 0))
    return spouse_pts if with_spouse else single_pts


# --- Language ---

def effective_clb(lang: LanguageProficiency) -> int | None:
    """Lowest CLB across the four abilities, or None when no CLB equivalent is given."""
    clb = lang.clb_equivalent
    if clb is None:
        return None
    return min(clb.speaking, clb.listening, clb.reading, clb.writing)


def highest_clb(languages: Iterable[LanguageProficiency]) -> int:
    return max(
        (c for c in (effective_clb(lang) for lang in languages) if c is not None),
        default=0,
    )


def find_language(languages: Iterable[LanguageProficiency], name: str) -> LanguageProficiency | None:
    """First entry for the given language (case-insensitive) that carries a CLB equivalent."""
    for lang in languages:
        if same_language(lang.language, name) and lang.clb_equivalent is not None:
            return lang
    return None


def same_language(a: str | None, b: str | None) -> bool:
    return (a or "").strip().lower() == (b or "").strip().lower()


def clb_tier(clb: int) -> str | None:
    if clb >= 9:
        return CLB_TIER_HIGH
    if clb >= 7:
        return CLB_TIER_MODERATE
    return None


# --- Work experience ---

def months_between(interval: WorkInterval) -> int:
    """Calendar months from start to end; 0 when either date is missing or end precedes start."""
    start, end = interval.start_date, interval.end_date
    if start is None or end is None:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    return max(0, months)


def prorated_months(interval: WorkInterval) -> float:
    """Full credit at 30+ hours/week, half credit at 15-29, none below 15."""
    months = months_between(interval)
    if interval.hours_per_week >= FULL_TIME_HOURS:
        return float(months)
    if interval.hours_per_week >= PART_TIME_HOURS:
        return months / 2
    return 0.0


def total_months(intervals: Iterable[T], predicate: Callable[[T], bool] | None = None) -> float:
    return sum(
        (prorated_months(i) for i in intervals if predicate is None or predicate(i)),
        0.0,
    )


def whole_years(months: float) -> int:
    return int(months // 12)


def noc_of(exp) -> str:
    occupation = getattr(exp, "occupation", None)
    return (occupation.noc if occupation else "") or ""


def noc_is_skilled(noc: str) -> bool:
    """NOC skill type 0 or skill level A/B (leading digit 0-3)."""
    return noc.strip().startswith(SKILLED_NOC_PREFIXES)


def noc_leads_with(noc: str, prefix: str) -> bool:
    return noc.strip().startswith(prefix)
