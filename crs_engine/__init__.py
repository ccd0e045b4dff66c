"""
Express Entry Comprehensive Ranking System (CRS) engine.

Pure functions over a candidate profile:

- calculate_points(profile) -> int
- get_points_breakdown(profile) -> PointsBreakdown
- check_eligibility(profile) -> EligibilityResult
- get_quick_estimate(basic_info) -> int

Profiles may be passed as CandidateProfile instances or as mappings with
camelCase or snake_case keys.
"""

import logging

from crs_engine.draws import evaluate_draws, latest_qualifying_draw
from crs_engine.eligibility import check_eligibility
from crs_engine.models import (
    CandidateProfile,
    EligibilityResult,
    PointsBreakdown,
    QuickEstimateInput,
)
from crs_engine.normalize import profile_from_dict
from crs_engine.quick_estimate import get_quick_estimate
from crs_engine.rules import RULES_SUMMARY, rules_signature
from crs_engine.scoring import (
    calculate_additional_points,
    calculate_core_human_capital,
    calculate_points,
    calculate_skill_transferability,
    calculate_spouse_points,
    get_points_breakdown,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RULES_SUMMARY",
    "CandidateProfile",
    "EligibilityResult",
    "PointsBreakdown",
    "QuickEstimateInput",
    "calculate_additional_points",
    "calculate_core_human_capital",
    "calculate_points",
    "calculate_skill_transferability",
    "calculate_spouse_points",
    "check_eligibility",
    "evaluate_draws",
    "get_points_breakdown",
    "get_quick_estimate",
    "latest_qualifying_draw",
    "profile_from_dict",
    "rules_signature",
]
