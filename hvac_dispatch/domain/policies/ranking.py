"""RankingPolicy — order scored technicians and resolve ties for first place."""

from __future__ import annotations

import logging
import random

from hvac_dispatch.domain.entities.job import Job
from hvac_dispatch.domain.entities.technician_score import TechnicianScore
from hvac_dispatch.domain.value_objects.scoring_config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
)

logger = logging.getLogger(__name__)

# Absorbs float noise such as 80.2 - 80.1 == 0.10000000000000853
_TIE_EPSILON = 1e-9


def _tie_break_key(score: TechnicianScore) -> tuple[float, float, int]:
    return (
        -score.technician.history_total(),
        score.distance,
        score.technician.current_job_count,
    )


def resolve_tie(
    tied: list[TechnicianScore],
    deterministic: bool = False,
    rng: random.Random | None = None,
) -> list[TechnicianScore]:
    """Order technicians tied for first place.

    Precedence: larger history sum, then shorter distance, then fewer
    current jobs. Anything still tied is shuffled, or ordered by technician
    id when ``deterministic`` is set.
    """
    if deterministic:
        return sorted(tied, key=lambda s: (_tie_break_key(s), str(s.technician_id)))

    shuffled = list(tied)
    (rng or random).shuffle(shuffled)
    # sorted() is stable, so the shuffle only decides fully-tied entries
    return sorted(shuffled, key=_tie_break_key)


def rank(
    scores: list[TechnicianScore],
    job: Job,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
    rng: random.Random | None = None,
) -> list[TechnicianScore]:
    """Sort highest total first, with the tie-break chain applied to the leaders."""
    if not scores:
        return []

    ordered = sorted(scores, key=lambda s: s.total_score, reverse=True)
    top_score = ordered[0].total_score
    threshold = config.ranking.tie_threshold + _TIE_EPSILON

    tied = [s for s in ordered if abs(s.total_score - top_score) <= threshold]
    others = [s for s in ordered if abs(s.total_score - top_score) > threshold]

    if len(tied) > 1:
        logger.info(
            "Job %s: %d technicians tied for first at %.2f, applying tie-break",
            job.id, len(tied), top_score,
        )
        tied = resolve_tie(tied, config.ranking.deterministic_tie_break, rng)

    return tied + others
