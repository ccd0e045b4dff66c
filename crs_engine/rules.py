"""
CRS rules summary and signature.

The summary is derived from the point tables. Its signature changes whenever
a maximum in the tables changes, which lets callers tell whether scores
stored under an earlier release are still comparable.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from crs_engine.config import MAX_POINTS
from crs_engine.scoring.tables import (
    AGE_POINTS,
    CANADIAN_EDUCATION_POINTS,
    CANADIAN_WORK_POINTS,
    CERTIFICATE_LANGUAGE_POINTS,
    EDUCATION_POINTS,
    FIRST_LANGUAGE_POINTS,
    JOB_OFFER_SENIOR_MANAGEMENT_POINTS,
    JOB_OFFER_SKILLED_POINTS,
    PROVINCIAL_NOMINATION_POINTS,
    SECOND_LANGUAGE_CAP,
    SIBLING_POINTS,
    SKILL_TRANSFERABILITY_MAX,
    SPOUSE_LANGUAGE_CAP,
)


def _max(table, column: int) -> int:
    return max(pair[column] for pair in table.values())


def _build_summary() -> dict[str, Any]:
    canadian_study = sorted(set(CANADIAN_EDUCATION_POINTS.values()) - {0})
    return {
        "max_points": MAX_POINTS,
        "age_max_single": _max(AGE_POINTS, 0),
        "age_max_spouse": _max(AGE_POINTS, 1),
        "education_max_single": _max(EDUCATION_POINTS, 0),
        "education_max_spouse": _max(EDUCATION_POINTS, 1),
        "first_language_max_single": _max(FIRST_LANGUAGE_POINTS, 0),
        "first_language_max_spouse": _max(FIRST_LANGUAGE_POINTS, 1),
        "second_language": SECOND_LANGUAGE_CAP,
        "canadian_work_max_single": _max(CANADIAN_WORK_POINTS, 0),
        "canadian_work_max_spouse": _max(CANADIAN_WORK_POINTS, 1),
        "spouse_language_max": SPOUSE_LANGUAGE_CAP,
        "skill_transferability_max": SKILL_TRANSFERABILITY_MAX,
        "certificate_qualification": max(CERTIFICATE_LANGUAGE_POINTS.values()),
        "provincial_nomination": PROVINCIAL_NOMINATION_POINTS,
        "job_offer_senior": JOB_OFFER_SENIOR_MANAGEMENT_POINTS,
        "job_offer_skilled": JOB_OFFER_SKILLED_POINTS,
        "canadian_study_1_2yr": canadian_study[0],
        "canadian_study_3plus": canadian_study[-1],
        "sibling": SIBLING_POINTS,
    }


RULES_SUMMARY = _build_summary()


def rules_signature() -> str:
    """Short hash of the rules summary."""
    rules_str = json.dumps(RULES_SUMMARY, sort_keys=True)
    return hashlib.sha256(rules_str.encode()).hexdigest()[:16]
