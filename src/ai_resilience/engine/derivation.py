from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Sequence

from ai_resilience.domain.categories import JobGrowthCategory, TaskExposure
from ai_resilience.domain.epoch import (  # noqa: F401
    MODERATE_EPOCH_MIN_SUM,
    STRONG_EPOCH_MIN_SUM,
    epoch_sum,
    human_advantage_from_epoch,
)


DECLINING_QUICKLY_BELOW = -10.0
DECLINING_SLOWLY_BELOW = 0.0
STABLE_MAX = 5.0
GROWING_SLOWLY_MAX = 15.0

DEFAULT_EXPOSURE_LOW_BELOW = 33
DEFAULT_EXPOSURE_HIGH_FROM = 67


def job_growth_category(percent_change: float) -> JobGrowthCategory:
    """
    Map projected percent employment change onto a growth band.

    Bands are defined by cumulative exclusion, so the order of the checks
    is significant: -10 is Declining Slowly, 0 and 5 are Stable, 15 is
    Growing Slowly.
    """
    p = float(percent_change)

    if p < DECLINING_QUICKLY_BELOW:
        return JobGrowthCategory.DECLINING_QUICKLY
    elif p < DECLINING_SLOWLY_BELOW:
        return JobGrowthCategory.DECLINING_SLOWLY
    elif p <= STABLE_MAX:
        return JobGrowthCategory.STABLE
    elif p <= GROWING_SLOWLY_MAX:
        return JobGrowthCategory.GROWING_SLOWLY
    else:
        return JobGrowthCategory.GROWING_QUICKLY


def percentile_rank(value: float, sorted_scores: Sequence[float]) -> int:
    if not sorted_scores:
        raise ValueError("Cannot rank against an empty score list")

    below = sum(1 for s in sorted_scores if s < value)
    return int(math.floor(below / len(sorted_scores) * 100 + 0.5))


def task_exposure_from_percentile(
    percentile: float,
    low_below: float = DEFAULT_EXPOSURE_LOW_BELOW,
    high_from: float = DEFAULT_EXPOSURE_HIGH_FROM,
) -> TaskExposure:
    if percentile < low_below:
        return TaskExposure.LOW
    if percentile < high_from:
        return TaskExposure.MEDIUM
    return TaskExposure.HIGH


def exposure_terciles(
    scores: Mapping[Any, float],
    low_below: float = DEFAULT_EXPOSURE_LOW_BELOW,
    high_from: float = DEFAULT_EXPOSURE_HIGH_FROM,
) -> Dict[Any, TaskExposure]:
    """Tercile of each occupation's exposure score within the given universe."""
    ordered = sorted(float(v) for v in scores.values())

    return {
        code: task_exposure_from_percentile(
            percentile_rank(float(score), ordered),
            low_below=low_below,
            high_from=high_from,
        )
        for code, score in scores.items()
    }
