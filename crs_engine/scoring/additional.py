"""Additional points: nomination, job offer, Canadian study, French ability, sibling."""

from __future__ import annotations

import logging

from crs_engine.config import get_settings
from crs_engine.models.profile import CandidateProfile
from crs_engine.models.results import AdditionalPoints
from crs_engine.scoring.helpers import (
    effective_clb,
    ensure_profile,
    find_language,
    noc_is_skilled,
    noc_leads_with,
)
from crs_engine.scoring.tables import (
    CANADIAN_EDUCATION_POINTS,
    FRENCH_ENGLISH_MIN_CLB,
    FRENCH_MIN_CLB,
    FRENCH_ONLY_POINTS,
    FRENCH_WITH_ENGLISH_POINTS,
    JOB_OFFER_SENIOR_MANAGEMENT_POINTS,
    JOB_OFFER_SKILLED_POINTS,
    PROVINCIAL_NOMINATION_POINTS,
    SIBLING_POINTS,
)

logger = logging.getLogger(__name__)

CANADA = "canada"


def provincial_nomination_points(profile: CandidateProfile) -> int:
    return PROVINCIAL_NOMINATION_POINTS if profile.has_provincial_nomination else 0


def job_offer_points(profile: CandidateProfile) -> int:
    """Arranged employment. LMIA-exempt offers earn nothing."""
    if not profile.has_job_offer or profile.job_offer_details is None:
        return 0
    if not get_settings().award_job_offer_points:
        return 0
    details = profile.job_offer_details
    if details.lmia_exempt:
        return 0
    if noc_leads_with(details.noc, "00"):
        return JOB_OFFER_SENIOR_MANAGEMENT_POINTS
    if noc_is_skilled(details.noc):
        return JOB_OFFER_SKILLED_POINTS
    return 0


def canadian_education_points(profile: CandidateProfile) -> int:
    return max(
        (
            CANADIAN_EDUCATION_POINTS.get(edu.level, 0)
            for edu in profile.education
            if (edu.country or "").strip().lower() == CANADA
        ),
        default=0,
    )


def french_language_points(profile: CandidateProfile) -> int:
    french = find_language(profile.language_proficiency, "french")
    if french is None or effective_clb(french) < FRENCH_MIN_CLB:
        return 0
    english = find_language(profile.language_proficiency, "english")
    english_clb = effective_clb(english) if english is not None else 0
    if english_clb >= FRENCH_ENGLISH_MIN_CLB:
        return FRENCH_WITH_ENGLISH_POINTS
    return FRENCH_ONLY_POINTS


def sibling_points(profile: CandidateProfile) -> int:
    factors = profile.adaptability_factors
    if factors is None or factors.relatives_in_canada is None:
        return 0
    return SIBLING_POINTS if factors.relatives_in_canada.has else 0


def calculate_additional_breakdown(profile: CandidateProfile) -> AdditionalPoints:
    profile = ensure_profile(profile)

    nomination = provincial_nomination_points(profile)
    job_offer = job_offer_points(profile)
    study = canadian_education_points(profile)
    french = french_language_points(profile)
    sibling = sibling_points(profile)

    logger.debug(
        f"Additional points: nomination={nomination}, job_offer={job_offer}, "
        f"canadian_education={study}, french={french}, sibling={sibling}"
    )
    return AdditionalPoints(
        provincial_nomination=nomination,
        job_offer=job_offer,
        canadian_education=study,
        french_language_skills=french,
        sibling=sibling,
        subtotal=nomination + job_offer + study + french + sibling,
    )


def calculate_additional_points(profile: CandidateProfile) -> int:
    return calculate_additional_breakdown(profile).subtotal
