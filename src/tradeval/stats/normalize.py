"""Population z-scores for the raw score column (the TA Score)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from statistics import fmean, stdev
from typing import Iterable, List, Sequence, Tuple

from tradeval.models import MAX_MAGNITUDE, PlayerRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreDistribution:
    """Mean and sample standard deviation of the parseable scores."""

    mean: float
    std_dev: float
    count: int


def score_distribution(values: Iterable[float]) -> ScoreDistribution:
    """Mean and sample spread of ``values``.

    Non-finite values and values beyond ``MAX_MAGNITUDE`` are left out.
    """

    usable = [value for value in values if math.isfinite(value) and abs(value) <= MAX_MAGNITUDE]
    if not usable:
        return ScoreDistribution(mean=0.0, std_dev=0.0, count=0)
    mean = fmean(usable)
    # Sample variance is undefined for a single value; treat it as zero spread.
    std_dev = stdev(usable, xbar=mean) if len(usable) > 1 else 0.0
    return ScoreDistribution(mean=mean, std_dev=std_dev, count=len(usable))


def z_score(value: float, mean: float, std_dev: float) -> float:
    return (value - mean) / (std_dev if std_dev != 0 else 1.0)


def normalize_scores(
    records: Sequence[PlayerRecord],
) -> Tuple[List[PlayerRecord], ScoreDistribution]:
    """Return copies of ``records`` with ``relative_value`` assigned.

    Must be called once per ingested table: the statistics depend on the whole
    population. Records without a parseable score get a relative value of 0.
    """

    distribution = score_distribution(record.score for record in records if record.has_score)
    if distribution.std_dev == 0:
        logger.debug("Score spread is zero across %d players", distribution.count)

    normalized: List[PlayerRecord] = []
    for record in records:
        value = 0.0
        if record.has_score:
            value = z_score(record.score, distribution.mean, distribution.std_dev)
        normalized.append(record.model_copy(update={"relative_value": value}))

    logger.debug(
        "Normalized %d players: mean=%.3f std=%.3f",
        len(normalized),
        distribution.mean,
        distribution.std_dev,
    )
    return normalized, distribution
