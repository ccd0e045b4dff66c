"""
Skill transferability: education and foreign work experience combined with
official-language ability and with Canadian work experience, plus the
certificate-of-qualification bonus.

The education factor adds education x language and education x Canadian
work; the foreign work factor adds foreign work x language and foreign work
x Canadian work. Each factor is capped at 50 on its own. The subtotal
returned here is the unclamped sum; the aggregator applies the section
ceiling (100).
"""

from __future__ import annotations

import logging

from crs_engine.models.profile import CandidateProfile, EducationLevel
from crs_engine.models.results import SkillTransferabilityPoints
from crs_engine.scoring.helpers import (
    clb_tier,
    ensure_profile,
    highest_clb,
    total_months,
    whole_years,
)
from crs_engine.scoring.tables import (
    CERTIFICATE_LANGUAGE_POINTS,
    DEGREE_LEVELS,
    EDUCATION_CANADIAN_WORK_POINTS,
    EDUCATION_LANGUAGE_POINTS,
    FOREIGN_CANADIAN_WORK_POINTS,
    FOREIGN_WORK_LANGUAGE_POINTS,
    TRANSFERABILITY_FACTOR_CAP,
)

logger = logging.getLogger(__name__)


def _capped(points: int) -> int:
    return min(TRANSFERABILITY_FACTOR_CAP, points)


def _has_degree(profile: CandidateProfile) -> bool:
    return any(edu.level in DEGREE_LEVELS for edu in profile.education)


def _foreign_years_tier(profile: CandidateProfile) -> int | None:
    years = whole_years(total_months(profile.work_experience, lambda exp: not exp.is_canadian_experience))
    if years >= 3:
        return 3
    return 1 if years >= 1 else None


def _canadian_years_tier(profile: CandidateProfile) -> int | None:
    years = whole_years(total_months(profile.work_experience, lambda exp: exp.is_canadian_experience))
    if years >= 2:
        return 2
    return 1 if years >= 1 else None


def education_language_points(profile: CandidateProfile, clb: int) -> int:
    if not _has_degree(profile):
        return 0
    return EDUCATION_LANGUAGE_POINTS.get(clb_tier(clb), 0)


def education_canadian_work_points(profile: CandidateProfile) -> int:
    if not _has_degree(profile):
        return 0
    return EDUCATION_CANADIAN_WORK_POINTS.get(_canadian_years_tier(profile), 0)


def foreign_work_language_points(profile: CandidateProfile, clb: int) -> int:
    foreign_tier = _foreign_years_tier(profile)
    if foreign_tier is None:
        return 0
    return FOREIGN_WORK_LANGUAGE_POINTS.get((foreign_tier, clb_tier(clb)), 0)


def foreign_canadian_work_points(profile: CandidateProfile) -> int:
    foreign_tier = _foreign_years_tier(profile)
    if foreign_tier is None:
        return 0
    return FOREIGN_CANADIAN_WORK_POINTS.get((foreign_tier, _canadian_years_tier(profile)), 0)


def certificate_points(profile: CandidateProfile, clb: int) -> int:
    if not any(edu.level == EducationLevel.CERTIFICATE.value for edu in profile.education):
        return 0
    return _capped(CERTIFICATE_LANGUAGE_POINTS.get(clb_tier(clb), 0))


def calculate_skill_transferability(profile: CandidateProfile) -> SkillTransferabilityPoints:
    profile = ensure_profile(profile)
    clb = highest_clb(profile.language_proficiency)

    edu_pts = _capped(education_language_points(profile, clb) + education_canadian_work_points(profile))
    foreign_pts = _capped(foreign_work_language_points(profile, clb) + foreign_canadian_work_points(profile))
    cert_pts = certificate_points(profile, clb)

    logger.debug(
        f"Skill transferability: education={edu_pts}, foreign_work={foreign_pts}, certificate={cert_pts}"
    )
    return SkillTransferabilityPoints(
        education=edu_pts,
        foreign_work_experience=foreign_pts,
        certificate_of_qualification=cert_pts,
        subtotal=edu_pts + foreign_pts + cert_pts,
    )
