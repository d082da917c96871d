import pytest
from pydantic import ValidationError

from ai_resilience.domain.categories import HumanAdvantageCategory
from ai_resilience.engine.epoch_estimator import (
    estimate_epoch_scores,
    generate_epoch_entries,
    job_zone_adjustment,
    load_category_defaults,
    normalize_epoch_scores,
)


@pytest.mark.parametrize("zone, delta", [(1, -1), (2, -1), (3, 0), (4, 0), (5, 1)])
def test_job_zone_adjustment(zone, delta):
    assert job_zone_adjustment(zone) == delta


def test_normalize_fills_missing_and_zero_scores():
    scores = normalize_epoch_scores({"empathy": 4, "presence": 0, "hope": None})

    assert scores.model_dump() == {"empathy": 4, "presence": 3, "opinion": 3, "creativity": 3, "hope": 3}


def test_normalize_rejects_out_of_range():
    with pytest.raises(ValidationError):
        normalize_epoch_scores({"empathy": 7})


def test_normalize_rejects_fractional_scores():
    with pytest.raises(ValidationError):
        normalize_epoch_scores({"empathy": 4.9})

    with pytest.raises(ValidationError):
        normalize_epoch_scores({"empathy": 4.9, "presence": 4.9, "opinion": 3.9, "creativity": 3.9, "hope": 2.9})


def test_normalize_accepts_whole_number_floats():
    scores = normalize_epoch_scores({"empathy": 4.0, "presence": 5})

    assert scores.empathy == 4
    assert scores.presence == 5


def test_school_teacher_estimate_is_capped_at_five():
    scores, rationale = estimate_epoch_scores("education", 4, "Elementary School Teachers")

    assert scores.model_dump() == {"empathy": 5, "presence": 5, "opinion": 4, "creativity": 4, "hope": 5}
    assert "job zone 4" in rationale


def test_routine_clerical_estimate_is_floored_at_one():
    scores, _ = estimate_epoch_scores("office-admin", 2, "Data Entry Keyers")

    assert scores.model_dump() == {"empathy": 2, "presence": 2, "opinion": 1, "creativity": 1, "hope": 1}


def test_unknown_category_uses_generic_defaults():
    scores, rationale = estimate_epoch_scores("underwater-basketry", None, "Widget Polishers")

    assert scores.model_dump() == {"empathy": 2, "presence": 3, "opinion": 3, "creativity": 2, "hope": 2}
    assert "job zone N/A" in rationale


def test_generate_entries_preserves_manual_scores():
    careers = [
        {"onet_code": "25-2021.00", "title": "Elementary School Teachers", "category": "education", "job_zone": 4},
        {"onet_code": "43-9021.00", "title": "Data Entry Keyers", "category": "office-admin", "job_zone": 2},
    ]
    existing = {
        "43-9021.00": {
            "onet_code": "43-9021.00",
            "title": "Data Entry Keyers",
            "epoch_scores": {"empathy": 2, "presence": 2, "opinion": 2, "creativity": 2, "hope": 2},
            "sum": 10,
            "category": "Weak",
            "rationale": "Curated",
            "source": "manual",
        }
    }

    entries = generate_epoch_entries(careers, existing=existing)

    educator = entries["25-2021.00"]
    assert educator.source == "generated"
    assert educator.sum == 23
    assert educator.category == HumanAdvantageCategory.STRONG

    clerk = entries["43-9021.00"]
    assert clerk.source == "manual"
    assert clerk.rationale == "Curated"
    assert clerk.sum == 10


def test_generated_entries_replace_previous_generated_scores():
    careers = [{"onet_code": "x", "title": "Widget Polishers", "category": "production", "job_zone": 3}]
    existing = {
        "x": {
            "onet_code": "x",
            "epoch_scores": {"empathy": 5, "presence": 5, "opinion": 5, "creativity": 5, "hope": 5},
            "sum": 25,
            "category": "Strong",
            "source": "generated",
        }
    }

    entry = generate_epoch_entries(careers, existing=existing)["x"]

    assert entry.sum == 10
    assert entry.category == HumanAdvantageCategory.WEAK


def test_packaged_defaults_cover_known_categories():
    defaults = load_category_defaults()

    assert "healthcare-clinical" in defaults["categories"]
    assert defaults["default"]["rationale"]


def test_inconsistent_manual_entry_is_rejected():
    careers = [{"onet_code": "x", "title": "Data Entry Keyers", "category": "office-admin", "job_zone": 2}]
    existing = {
        "x": {
            "onet_code": "x",
            "epoch_scores": {"empathy": 2, "presence": 2, "opinion": 2, "creativity": 2, "hope": 2},
            "sum": 20,
            "category": "Strong",
            "source": "manual",
        }
    }

    with pytest.raises(ValidationError):
        generate_epoch_entries(careers, existing=existing)
