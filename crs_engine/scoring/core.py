"""
Core / human capital factors: age, education, official languages and
Canadian work experience.

All lookups are split by spouse context: the "with spouse" column applies
only when the applicant is married and a spouse profile is supplied.
"""

from __future__ import annotations

import logging

from crs_engine.models.profile import CandidateProfile, LanguageProficiency
from crs_engine.models.results import CoreHumanCapitalPoints
from crs_engine.scoring.helpers import (
    by_context,
    effective_clb,
    ensure_profile,
    same_language,
    total_months,
    whole_years,
)
from crs_engine.scoring.tables import (
    AGE_POINTS,
    CANADIAN_WORK_MAX_YEARS,
    CANADIAN_WORK_POINTS,
    EDUCATION_POINTS,
    FIRST_LANGUAGE_MAX_CLB,
    FIRST_LANGUAGE_POINTS,
    SECOND_LANGUAGE_CAP,
    SECOND_LANGUAGE_MAX_CLB,
    SECOND_LANGUAGE_POINTS,
)

logger = logging.getLogger(__name__)


def age_points(age: int, with_spouse: bool) -> int:
    return by_context(AGE_POINTS, age, with_spouse)


def education_level_points(level: str, with_spouse: bool) -> int:
    return by_context(EDUCATION_POINTS, level, with_spouse)


def first_language_points(clb: int, with_spouse: bool) -> int:
    return by_context(FIRST_LANGUAGE_POINTS, min(clb, FIRST_LANGUAGE_MAX_CLB), with_spouse)


def second_language_points(clb: int) -> int:
    return min(SECOND_LANGUAGE_CAP, SECOND_LANGUAGE_POINTS.get(min(clb, SECOND_LANGUAGE_MAX_CLB), 0))


def canadian_work_points(years: int, with_spouse: bool) -> int:
    return by_context(CANADIAN_WORK_POINTS, min(max(0, years), CANADIAN_WORK_MAX_YEARS), with_spouse)


def calculate_education_points(profile: CandidateProfile, with_spouse: bool) -> int:
    """Highest-scoring education entry; entries are never summed."""
    if not profile.education:
        return 0
    return max(education_level_points(edu.level, with_spouse) for edu in profile.education)


def calculate_language_points(profile: CandidateProfile, with_spouse: bool) -> int:
    """
    First official language points plus the second-language bonus.

    The entry worth the most first-language points is the first official
    language. The best entry in a different language then adds the
    second-language bonus. When entries tie on first-language points, the
    one leaving the larger bonus is taken, so entry order never matters.
    Entries without a CLB equivalent are ignored.
    """
    scored: list[tuple[LanguageProficiency, int]] = [
        (lang, effective_clb(lang)) for lang in profile.language_proficiency
        if lang.clb_equivalent is not None
    ]
    if not scored:
        return 0

    def bonus_besides(first: LanguageProficiency) -> int:
        return max(
            (
                second_language_points(clb)
                for lang, clb in scored
                if not same_language(lang.language, first.language)
            ),
            default=0,
        )

    first_pts, second_pts = max(
        (first_language_points(clb, with_spouse), bonus_besides(lang)) for lang, clb in scored
    )
    return first_pts + second_pts


def calculate_canadian_work_points(profile: CandidateProfile, with_spouse: bool) -> int:
    months = total_months(profile.work_experience, lambda exp: exp.is_canadian_experience)
    return canadian_work_points(whole_years(months), with_spouse)


def calculate_core_human_capital(profile: CandidateProfile) -> CoreHumanCapitalPoints:
    profile = ensure_profile(profile)
    with_spouse = profile.has_counted_spouse

    age_pts = age_points(profile.age, with_spouse)
    edu_pts = calculate_education_points(profile, with_spouse)
    lang_pts = calculate_language_points(profile, with_spouse)
    work_pts = calculate_canadian_work_points(profile, with_spouse)
    subtotal = age_pts + edu_pts + lang_pts + work_pts

    logger.debug(
        f"Core human capital: age={age_pts}, education={edu_pts}, "
        f"language={lang_pts}, canadian_work={work_pts}, subtotal={subtotal}, with_spouse={with_spouse}"
    )
    return CoreHumanCapitalPoints(
        age=age_pts,
        education=edu_pts,
        language_proficiency=lang_pts,
        canadian_work_experience=work_pts,
        subtotal=subtotal,
    )
