from crs_engine.scoring.additional import calculate_additional_breakdown, calculate_additional_points
from crs_engine.scoring.aggregate import calculate_points, clamp_total, get_points_breakdown
from crs_engine.scoring.core import calculate_core_human_capital
from crs_engine.scoring.spouse import calculate_spouse_points
from crs_engine.scoring.transferability import calculate_skill_transferability

__all__ = [
    "calculate_additional_breakdown",
    "calculate_additional_points",
    "calculate_core_human_capital",
    "calculate_points",
    "calculate_skill_transferability",
    "calculate_spouse_points",
    "clamp_total",
    "get_points_breakdown",
]
