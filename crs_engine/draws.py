"""
Compare a CRS score with past invitation rounds.

Draw history is supplied by the caller; nothing is fetched here.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from crs_engine.models.results import Draw, DrawOutcome

logger = logging.getLogger(__name__)


def _as_draw(draw: Draw | Mapping[str, Any]) -> Draw:
    return draw if isinstance(draw, Draw) else Draw.model_validate(draw)


def evaluate_draws(score: int, draws: Iterable[Draw | Mapping[str, Any]]) -> list[DrawOutcome]:
    """One outcome per draw, most recent first. A score equal to the cutoff qualifies."""
    parsed = sorted(
        (_as_draw(d) for d in draws),
        key=lambda d: (d.draw_date, d.draw_number),
        reverse=True,
    )
    outcomes = [
        DrawOutcome(
            draw_number=d.draw_number,
            draw_date=d.draw_date,
            program=d.program,
            minimum_score=d.minimum_score,
            qualifies=score >= d.minimum_score,
            margin=score - d.minimum_score,
        )
        for d in parsed
    ]
    logger.debug(f"Score {score} clears {sum(o.qualifies for o in outcomes)} of {len(outcomes)} draws")
    return outcomes


def latest_qualifying_draw(score: int, draws: Iterable[Draw | Mapping[str, Any]]) -> DrawOutcome | None:
    return next((o for o in evaluate_draws(score, draws) if o.qualifies), None)
