from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DEFAULT_METHODOLOGY_PATH = DATA_DIR / "methodology.json"


@dataclass(frozen=True)
class MethodologyConfig:
    raw: Dict[str, Any]

    @property
    def methodology_version(self) -> str:
        return str(self.raw["methodology_version"])

    @property
    def job_growth_source(self) -> str:
        return str(self.raw["job_growth"]["source"])

    @property
    def job_growth_fallback_source(self) -> str:
        return str(self.raw["job_growth"].get("fallback_source", "Estimated"))

    @property
    def exposure_low_below(self) -> float:
        return float(self.raw["exposure_terciles"]["low_below"])

    @property
    def exposure_high_from(self) -> float:
        return float(self.raw["exposure_terciles"]["high_from"])

    @property
    def epoch_default_score(self) -> int:
        return int(self.raw.get("epoch", {}).get("default_score", 3))

    def output_field(self, name: str) -> str:
        return str(self.raw["output_fields"][name])


def load_methodology(path: Optional[Path] = None) -> MethodologyConfig:
    source = Path(path) if path is not None else DEFAULT_METHODOLOGY_PATH
    raw = json.loads(source.read_text(encoding="utf-8"))
    _validate_methodology(raw)
    return MethodologyConfig(raw=raw)


def _validate_methodology(raw: Dict[str, Any]) -> None:
    if not isinstance(raw, dict):
        raise ValueError("Methodology must be a JSON object")
    for k in ["methodology_version", "job_growth", "exposure_terciles", "output_fields"]:
        if k not in raw:
            raise ValueError(f"Missing methodology key: {k}")
    if not str(raw["methodology_version"]).strip():
        raise ValueError("Methodology version must not be empty")
    if "source" not in raw["job_growth"]:
        raise ValueError("Missing job growth source label")

    terciles = raw["exposure_terciles"]
    for k in ["low_below", "high_from"]:
        if k not in terciles:
            raise ValueError(f"Missing exposure tercile cut point: {k}")
    low = float(terciles["low_below"])
    high = float(terciles["high_from"])
    if not 0 < low < high < 100:
        raise ValueError("Invalid exposure terciles: require 0 < low_below < high_from < 100")

    default_score = int(raw.get("epoch", {}).get("default_score", 3))
    if not 1 <= default_score <= 5:
        raise ValueError("EPOCH default score must be within 1-5")

    for k in ["assessment", "classification", "tier"]:
        if not str(raw["output_fields"].get(k, "")).strip():
            raise ValueError(f"Missing output field name: {k}")
