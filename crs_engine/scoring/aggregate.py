"""
CRS score aggregation.

Builds the four-section breakdown and the clamped total. Errors raised by
the section calculators (for example an invalid profile) propagate to the
caller unchanged.
"""

from __future__ import annotations

import logging

from crs_engine.config import get_settings
from crs_engine.models.profile import CandidateProfile
from crs_engine.models.results import PointsBreakdown, SpousePoints
from crs_engine.scoring.additional import calculate_additional_breakdown
from crs_engine.scoring.core import calculate_core_human_capital
from crs_engine.scoring.helpers import ensure_profile
from crs_engine.scoring.spouse import calculate_spouse_points
from crs_engine.scoring.tables import SKILL_TRANSFERABILITY_MAX
from crs_engine.scoring.transferability import calculate_skill_transferability

logger = logging.getLogger(__name__)


def clamp_total(raw_total: int) -> int:
    """Clamp a raw sum to [0, max_points]."""
    ceiling = get_settings().max_points
    total = min(ceiling, max(0, raw_total))
    if total != raw_total:
        logger.info(f"CRS total clamped from {raw_total} to {total}")
    return total


def get_points_breakdown(profile: CandidateProfile) -> PointsBreakdown:
    """
    Compute every section for a profile.

    The spouse section is all zeros unless the applicant is married and a
    spouse profile is present. The transferability subtotal is capped at 100
    here; its factor scores are left as computed.
    """
    profile = ensure_profile(profile)

    core = calculate_core_human_capital(profile)
    if profile.has_counted_spouse:
        spouse = calculate_spouse_points(profile.spouse_profile)
    else:
        spouse = SpousePoints()
    transferability = calculate_skill_transferability(profile)
    if transferability.subtotal > SKILL_TRANSFERABILITY_MAX:
        transferability = transferability.model_copy(update={"subtotal": SKILL_TRANSFERABILITY_MAX})
    additional = calculate_additional_breakdown(profile)

    raw_total = core.subtotal + spouse.subtotal + transferability.subtotal + additional.subtotal
    total = clamp_total(raw_total)
    logger.debug(
        f"CRS breakdown: core={core.subtotal}, spouse={spouse.subtotal}, "
        f"transferability={transferability.subtotal}, additional={additional.subtotal}, total={total}"
    )
    return PointsBreakdown(
        core_human_capital=core,
        spouse=spouse,
        skill_transferability=transferability,
        additional=additional,
        total=total,
    )


def calculate_points(profile: CandidateProfile) -> int:
    """Total CRS score, in [0, 1200]."""
    return get_points_breakdown(profile).total
