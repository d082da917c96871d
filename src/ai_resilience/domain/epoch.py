from __future__ import annotations

from typing import Any

from ai_resilience.domain.categories import EPOCH_DIMENSIONS, HumanAdvantageCategory


STRONG_EPOCH_MIN_SUM = 20
MODERATE_EPOCH_MIN_SUM = 12


def epoch_sum(scores: Any) -> int:
    return sum(getattr(scores, dim) for dim in EPOCH_DIMENSIONS)


def human_advantage_from_epoch(scores: Any) -> HumanAdvantageCategory:
    total = epoch_sum(scores)

    if total >= STRONG_EPOCH_MIN_SUM:
        return HumanAdvantageCategory.STRONG
    if total >= MODERATE_EPOCH_MIN_SUM:
        return HumanAdvantageCategory.MODERATE
    return HumanAdvantageCategory.WEAK


def check_epoch_consistency(scores: Any, total: int, category: HumanAdvantageCategory) -> None:
    """Raise ValueError when a stored sum or category disagrees with its sub-scores."""
    if total != epoch_sum(scores):
        raise ValueError("EPOCH sum does not match sub-scores.")
    if category != human_advantage_from_epoch(scores):
        raise ValueError("Human advantage category does not match EPOCH scores.")
