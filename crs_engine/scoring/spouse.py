"""Spouse or common-law partner factors."""

from __future__ import annotations

import logging

from crs_engine.models.profile import ClbEquivalent, SpouseProfile
from crs_engine.models.results import SpousePoints
from crs_engine.scoring.helpers import total_months, whole_years
from crs_engine.scoring.tables import (
    SPOUSE_CANADIAN_WORK_MAX_YEARS,
    SPOUSE_CANADIAN_WORK_POINTS,
    SPOUSE_EDUCATION_POINTS,
    SPOUSE_LANGUAGE_BANDS,
    SPOUSE_LANGUAGE_CAP,
)

logger = logging.getLogger(__name__)


def _ability_points(clb: int) -> int:
    for threshold, points in SPOUSE_LANGUAGE_BANDS:
        if clb >= threshold:
            return points
    return 0


def _entry_points(clb: ClbEquivalent) -> int:
    return sum(_ability_points(v) for v in (clb.speaking, clb.listening, clb.reading, clb.writing))


def spouse_education_points(spouse: SpouseProfile) -> int:
    if spouse.education is None:
        return 0
    return SPOUSE_EDUCATION_POINTS.get(spouse.education.level, 0)


def spouse_language_points(spouse: SpouseProfile) -> int:
    """Each ability is banded on its own, summed over all entries, capped at 20."""
    total = sum(
        _entry_points(lang.clb_equivalent)
        for lang in spouse.language_proficiency
        if lang.clb_equivalent is not None
    )
    return min(SPOUSE_LANGUAGE_CAP, total)


def spouse_canadian_work_points(spouse: SpouseProfile) -> int:
    years = whole_years(total_months(spouse.canadian_work_experience))
    return SPOUSE_CANADIAN_WORK_POINTS[min(years, SPOUSE_CANADIAN_WORK_MAX_YEARS)]


def calculate_spouse_points(spouse_profile: SpouseProfile | None) -> SpousePoints:
    """
    Spouse section for a spouse profile.

    Callers decide whether the spouse counts (see
    ``CandidateProfile.has_counted_spouse``); ``None`` yields an all-zero section.
    """
    if spouse_profile is None:
        return SpousePoints()
    if not isinstance(spouse_profile, SpouseProfile):
        spouse_profile = SpouseProfile.model_validate(spouse_profile)

    edu_pts = spouse_education_points(spouse_profile)
    lang_pts = spouse_language_points(spouse_profile)
    work_pts = spouse_canadian_work_points(spouse_profile)
    subtotal = edu_pts + lang_pts + work_pts

    logger.debug(f"Spouse factors: education={edu_pts}, language={lang_pts}, canadian_work={work_pts}")
    return SpousePoints(
        education=edu_pts,
        language_proficiency=lang_pts,
        canadian_work_experience=work_pts,
        subtotal=subtotal,
    )
