"""
Express Entry program eligibility.

Three programs are checked independently: Federal Skilled Worker (FSWP),
Canadian Experience Class (CEC) and Federal Skilled Trades (FSTP). Every
check of every program runs, so ``reasons`` lists all unmet requirements.
"""

from __future__ import annotations

import logging
from typing import Callable

from crs_engine.models.profile import (
    CandidateProfile,
    ClbEquivalent,
    EducationLevel,
    WorkExperience,
)
from crs_engine.models.results import EligibilityResult
from crs_engine.scoring.helpers import (
    ensure_profile,
    noc_is_skilled,
    noc_leads_with,
    noc_of,
    total_months,
)

logger = logging.getLogger(__name__)

FSWP = "FSWP"
CEC = "CEC"
FSTP = "FSTP"

MIN_SKILLED_MONTHS = 12
MIN_TRADE_MONTHS = 24
FSWP_MIN_CLB = 7
CEC_MIN_CLB = 7
CEC_NOC_B_MIN_CLB = 5
TRADE_NOC_PREFIX = "3"
NOC_B_PREFIX = "3"

FSWP_EXPERIENCE_REASON = "FSWP: at least 12 months of skilled work experience (NOC 0, 1, 2 or 3) is required"
FSWP_LANGUAGE_REASON = "FSWP: CLB 7 or higher in all four language abilities is required"
FSWP_EDUCATION_REASON = "FSWP: at least one education credential is required"
CEC_EXPERIENCE_REASON = "CEC: at least 12 months of skilled Canadian work experience is required"
CEC_LANGUAGE_REASON = "CEC: CLB {clb} or higher in all four language abilities is required"
FSTP_EXPERIENCE_REASON = "FSTP: at least 24 months of work experience in a skilled trade (NOC 3) is required"
FSTP_LANGUAGE_REASON = "FSTP: CLB 5 in speaking and listening and CLB 4 in reading and writing are required"
FSTP_OFFER_REASON = "FSTP: a job offer or a certificate of qualification is required"


def _is_skilled(exp: WorkExperience) -> bool:
    return noc_is_skilled(noc_of(exp))


def _is_canadian_skilled(exp: WorkExperience) -> bool:
    return exp.is_canadian_experience and _is_skilled(exp)


def _is_trade(exp: WorkExperience) -> bool:
    return noc_leads_with(noc_of(exp), TRADE_NOC_PREFIX)


def _any_language(profile: CandidateProfile, meets: Callable[[ClbEquivalent], bool]) -> bool:
    """True when a single language entry satisfies the requirement on its own."""
    return any(
        meets(lang.clb_equivalent)
        for lang in profile.language_proficiency
        if lang.clb_equivalent is not None
    )


def _all_abilities_at_least(minimum: int) -> Callable[[ClbEquivalent], bool]:
    def meets(clb: ClbEquivalent) -> bool:
        return min(clb.speaking, clb.listening, clb.reading, clb.writing) >= minimum
    return meets


def _trades_language(clb: ClbEquivalent) -> bool:
    return clb.speaking >= 5 and clb.listening >= 5 and clb.reading >= 4 and clb.writing >= 4


def check_skilled_worker(profile: CandidateProfile) -> list[str]:
    reasons = []
    if total_months(profile.work_experience, _is_skilled) < MIN_SKILLED_MONTHS:
        reasons.append(FSWP_EXPERIENCE_REASON)
    if not _any_language(profile, _all_abilities_at_least(FSWP_MIN_CLB)):
        reasons.append(FSWP_LANGUAGE_REASON)
    if not profile.education:
        reasons.append(FSWP_EDUCATION_REASON)
    return reasons


def check_canadian_experience(profile: CandidateProfile) -> list[str]:
    """CLB 7 normally; CLB 5 is enough when qualifying Canadian experience includes NOC B (leading 3)."""
    reasons = []
    canadian = [exp for exp in profile.work_experience if _is_canadian_skilled(exp)]
    if total_months(canadian) < MIN_SKILLED_MONTHS:
        reasons.append(CEC_EXPERIENCE_REASON)
    has_noc_b = any(noc_leads_with(noc_of(exp), NOC_B_PREFIX) for exp in canadian)
    min_clb = CEC_NOC_B_MIN_CLB if has_noc_b else CEC_MIN_CLB
    if not _any_language(profile, _all_abilities_at_least(min_clb)):
        reasons.append(CEC_LANGUAGE_REASON.format(clb=min_clb))
    return reasons


def check_skilled_trades(profile: CandidateProfile) -> list[str]:
    reasons = []
    if total_months(profile.work_experience, _is_trade) < MIN_TRADE_MONTHS:
        reasons.append(FSTP_EXPERIENCE_REASON)
    if not _any_language(profile, _trades_language):
        reasons.append(FSTP_LANGUAGE_REASON)
    has_certificate = any(edu.level == EducationLevel.CERTIFICATE.value for edu in profile.education)
    if not (profile.has_job_offer or has_certificate):
        reasons.append(FSTP_OFFER_REASON)
    return reasons


PROGRAM_CHECKS = (
    (FSWP, check_skilled_worker),
    (CEC, check_canadian_experience),
    (FSTP, check_skilled_trades),
)


def check_eligibility(profile: CandidateProfile) -> EligibilityResult:
    profile = ensure_profile(profile)

    eligible_programs: list[str] = []
    reasons: list[str] = []
    for program, check in PROGRAM_CHECKS:
        failures = check(profile)
        if failures:
            reasons.extend(failures)
        else:
            eligible_programs.append(program)
        logger.debug(f"Eligibility {program}: eligible={not failures}, unmet={len(failures)}")

    return EligibilityResult(
        is_eligible=bool(eligible_programs),
        eligible_programs=eligible_programs,
        reasons=reasons,
    )
