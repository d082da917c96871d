import pytest
from pydantic import ValidationError

from ai_resilience.domain.categories import HumanAdvantageCategory, JobGrowthCategory, TaskExposure
from ai_resilience.domain.epoch import check_epoch_consistency
from ai_resilience.domain.schemas import EPOCHScores
from ai_resilience.engine.derivation import (
    epoch_sum,
    exposure_terciles,
    human_advantage_from_epoch,
    job_growth_category,
    percentile_rank,
    task_exposure_from_percentile,
)


def _scores(e, p, o, c, h):
    return EPOCHScores(empathy=e, presence=p, opinion=o, creativity=c, hope=h)


@pytest.mark.parametrize(
    "percent, expected",
    [
        (-25.0, JobGrowthCategory.DECLINING_QUICKLY),
        (-10.0001, JobGrowthCategory.DECLINING_QUICKLY),
        (-10.0, JobGrowthCategory.DECLINING_SLOWLY),
        (-0.0001, JobGrowthCategory.DECLINING_SLOWLY),
        (0.0, JobGrowthCategory.STABLE),
        (5.0, JobGrowthCategory.STABLE),
        (5.0001, JobGrowthCategory.GROWING_SLOWLY),
        (15.0, JobGrowthCategory.GROWING_SLOWLY),
        (15.0001, JobGrowthCategory.GROWING_QUICKLY),
        (40.0, JobGrowthCategory.GROWING_QUICKLY),
    ],
)
def test_job_growth_boundaries(percent, expected):
    assert job_growth_category(percent) == expected


def test_job_growth_accepts_integers():
    assert job_growth_category(-10) == "Declining Slowly"
    assert job_growth_category(15) == "Growing Slowly"


def test_epoch_sum_adds_all_five_dimensions():
    assert epoch_sum(_scores(5, 5, 4, 4, 3)) == 21
    assert epoch_sum(_scores(1, 1, 1, 1, 1)) == 5
    assert epoch_sum(_scores(5, 5, 5, 5, 5)) == 25


@pytest.mark.parametrize(
    "scores, expected",
    [
        ((4, 4, 4, 4, 4), HumanAdvantageCategory.STRONG),  # 20
        ((4, 4, 4, 4, 3), HumanAdvantageCategory.MODERATE),  # 19
        ((3, 3, 2, 2, 2), HumanAdvantageCategory.MODERATE),  # 12
        ((3, 2, 2, 2, 2), HumanAdvantageCategory.WEAK),  # 11
        ((5, 5, 5, 5, 5), HumanAdvantageCategory.STRONG),
        ((1, 1, 1, 1, 1), HumanAdvantageCategory.WEAK),
    ],
)
def test_human_advantage_boundaries(scores, expected):
    assert human_advantage_from_epoch(_scores(*scores)) == expected


def test_epoch_scores_reject_out_of_range_values():
    with pytest.raises(ValidationError):
        _scores(0, 3, 3, 3, 3)
    with pytest.raises(ValidationError):
        _scores(3, 3, 6, 3, 3)


def test_percentile_rank_counts_strictly_lower_scores():
    ordered = [0.1, 0.5, 0.9]
    assert percentile_rank(0.1, ordered) == 0
    assert percentile_rank(0.5, ordered) == 33
    assert percentile_rank(0.9, ordered) == 67


def test_percentile_rank_rejects_empty_universe():
    with pytest.raises(ValueError):
        percentile_rank(1.0, [])


def test_task_exposure_from_percentile_cut_points():
    assert task_exposure_from_percentile(0) == TaskExposure.LOW
    assert task_exposure_from_percentile(32) == TaskExposure.LOW
    assert task_exposure_from_percentile(33) == TaskExposure.MEDIUM
    assert task_exposure_from_percentile(66) == TaskExposure.MEDIUM
    assert task_exposure_from_percentile(67) == TaskExposure.HIGH


def test_exposure_terciles_over_universe():
    terciles = exposure_terciles({"a": 0.9, "b": 0.1, "c": 0.5})

    assert terciles == {
        "a": TaskExposure.HIGH,
        "b": TaskExposure.LOW,
        "c": TaskExposure.MEDIUM,
    }


def test_epoch_consistency_check():
    scores = _scores(4, 4, 4, 4, 4)

    check_epoch_consistency(scores, 20, HumanAdvantageCategory.STRONG)
    with pytest.raises(ValueError, match="sum"):
        check_epoch_consistency(scores, 21, HumanAdvantageCategory.STRONG)
    with pytest.raises(ValueError, match="category"):
        check_epoch_consistency(scores, 20, HumanAdvantageCategory.MODERATE)
