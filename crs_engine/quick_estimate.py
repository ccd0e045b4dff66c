"""
Quick CRS estimate from bucketed answers.

The answers are turned into a synthetic single applicant (one language
entry, at most one Canadian work entry) and scored on core human capital
only. Spouse, skill transferability and additional points are not part of
the quick estimate, so it understates profiles that would earn them.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

from crs_engine.models.profile import CandidateProfile, QuickEstimateInput
from crs_engine.normalize import ielts_scores_for_clb, profile_from_dict
from crs_engine.scoring.aggregate import clamp_total
from crs_engine.scoring.core import calculate_core_human_capital

logger = logging.getLogger(__name__)

AGE_RANGE_MIDPOINTS = {
    "under-18": 17,
    "18-19": 18,
    "20-29": 25,
    "30-34": 32,
    "35-39": 37,
    "40-44": 42,
    "45-plus": 45,
}

LANGUAGE_BANDS = {
    "clb4": 4,
    "clb5": 5,
    "clb6": 6,
    "clb7": 7,
    "clb8": 8,
    "clb9": 9,
    "clb10": 10,
}

EXPERIENCE_YEARS = {
    "none": 0,
    "less-than-1-year": 0,
    "1-year": 1,
    "2-years": 2,
    "3-years": 3,
    "4-years": 4,
    "5-years-plus": 5,
}

# Fixed anchor so the synthetic work entry never depends on today's date.
EXPERIENCE_START = date(2000, 1, 1)
FULL_TIME_WEEKLY_HOURS = 40


def _key(value: str | None) -> str:
    return (value or "").strip().lower()


def build_quick_profile(basic_info: QuickEstimateInput | Mapping[str, Any]) -> CandidateProfile:
    if not isinstance(basic_info, QuickEstimateInput):
        basic_info = QuickEstimateInput.model_validate(basic_info)

    clb = LANGUAGE_BANDS.get(_key(basic_info.language_proficiency), 0)
    years = EXPERIENCE_YEARS.get(_key(basic_info.canadian_work_experience), 0)

    data: dict[str, Any] = {
        "age": AGE_RANGE_MIDPOINTS.get(_key(basic_info.age), 0),
        "maritalStatus": "single",
        "education": [{"level": basic_info.education}] if basic_info.education else [],
        "languageProficiency": [
            {"language": "english", "test": "IELTS", **ielts_scores_for_clb(clb)},
        ],
        "workExperience": [],
    }
    if years > 0:
        data["workExperience"].append({
            "isCanadianExperience": True,
            "country": "Canada",
            "startDate": EXPERIENCE_START,
            "endDate": EXPERIENCE_START.replace(year=EXPERIENCE_START.year + years),
            "hoursPerWeek": FULL_TIME_WEEKLY_HOURS,
        })
    return profile_from_dict(data)


def get_quick_estimate(basic_info: QuickEstimateInput | Mapping[str, Any]) -> int:
    """Approximate CRS score: clamped core human capital subtotal of the synthetic profile."""
    profile = build_quick_profile(basic_info)
    core = calculate_core_human_capital(profile)
    estimate = clamp_total(core.subtotal)
    logger.debug(f"Quick estimate: {estimate}")
    return estimate
