import json

import pytest

from ai_resilience.core.methodology import load_methodology


def _write(tmp_path, raw):
    path = tmp_path / "methodology.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


def _raw():
    return json.loads(json.dumps(load_methodology().raw))


def test_packaged_methodology_loads():
    m = load_methodology()

    assert m.methodology_version.startswith("v1.0")
    assert m.job_growth_source == "BLS Employment Projections 2024-2034"
    assert m.job_growth_fallback_source == "Estimated"
    assert m.exposure_low_below == 33.0
    assert m.exposure_high_from == 67.0
    assert m.epoch_default_score == 3
    assert m.output_field("assessment") == "ai_assessment"


def test_custom_methodology_file(tmp_path):
    raw = _raw()
    raw["methodology_version"] = "v1.1-test"
    raw["output_fields"]["classification"] = "resilience"

    m = load_methodology(_write(tmp_path, raw))

    assert m.methodology_version == "v1.1-test"
    assert m.output_field("classification") == "resilience"


def test_missing_key_is_rejected(tmp_path):
    raw = _raw()
    del raw["job_growth"]

    with pytest.raises(ValueError, match="Missing methodology key: job_growth"):
        load_methodology(_write(tmp_path, raw))


def test_inverted_terciles_are_rejected(tmp_path):
    raw = _raw()
    raw["exposure_terciles"] = {"low_below": 70, "high_from": 30}

    with pytest.raises(ValueError, match="Invalid exposure terciles"):
        load_methodology(_write(tmp_path, raw))


def test_epoch_default_outside_scale_is_rejected(tmp_path):
    raw = _raw()
    raw["epoch"]["default_score"] = 0

    with pytest.raises(ValueError, match="EPOCH default score"):
        load_methodology(_write(tmp_path, raw))
