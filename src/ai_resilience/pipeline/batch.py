from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ai_resilience.core.assessment import build_assessment
from ai_resilience.core.methodology import MethodologyConfig, load_methodology
from ai_resilience.domain.categories import CLASSIFICATION_ORDER, TaskExposure
from ai_resilience.domain.schemas import OccupationSignals
from ai_resilience.engine.derivation import exposure_terciles
from ai_resilience.engine.epoch_estimator import normalize_epoch_scores
from ai_resilience.engine.presentation import resilience_rank

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    occupations: List[Dict[str, Any]]
    counts: Dict[str, int] = field(default_factory=dict)
    assessed: int = 0
    skipped: List[str] = field(default_factory=list)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json_atomic(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


def _occupation_key(occupation: Mapping[str, Any], index: int) -> str:
    return str(occupation.get("onet_code") or f"#{index}")


def _resolve_exposures(
    occupations: List[Dict[str, Any]],
    methodology: MethodologyConfig,
) -> Dict[int, TaskExposure]:
    """
    Task exposure per list position.

    Terciles are ranked over every raw exposure score in the batch; an
    explicit task_exposure on a record takes precedence over its tercile.
    """
    raw_scores: Dict[int, float] = {
        index: float(occ["ai_exposure_score"])
        for index, occ in enumerate(occupations)
        if occ.get("ai_exposure_score") is not None
    }

    exposures: Dict[int, TaskExposure] = {}
    if raw_scores:
        exposures.update(
            exposure_terciles(
                raw_scores,
                low_below=methodology.exposure_low_below,
                high_from=methodology.exposure_high_from,
            )
        )

    for index, occ in enumerate(occupations):
        if occ.get("task_exposure"):
            exposures[index] = TaskExposure(occ["task_exposure"])

    return exposures


def assess_occupations(
    occupations: List[Dict[str, Any]],
    methodology: Optional[MethodologyConfig] = None,
    now: Optional[datetime] = None,
) -> BatchResult:
    """
    Attach a fresh AI resilience assessment to every assessable occupation.

    Returned records are copies; any previous assessment fields are replaced
    wholesale. Occupations lacking an exposure signal or EPOCH scores are
    passed through untouched and reported as skipped.
    """
    methodology = methodology or load_methodology()
    assessment_field = methodology.output_field("assessment")
    classification_field = methodology.output_field("classification")
    tier_field = methodology.output_field("tier")

    exposures = _resolve_exposures(occupations, methodology)
    result = BatchResult(
        occupations=[],
        counts={c.value: 0 for c in CLASSIFICATION_ORDER},
    )

    for index, occ in enumerate(occupations):
        key = _occupation_key(occ, index)
        updated = dict(occ)

        exposure = exposures.get(index)
        epoch_raw = occ.get("epoch_scores")
        if exposure is None or not epoch_raw:
            missing = "task exposure" if exposure is None else "EPOCH scores"
            logger.warning("Skipping %s: missing %s", key, missing)
            result.skipped.append(key)
            result.occupations.append(updated)
            continue

        percent_change = occ.get("employment_percent_change")
        signals = OccupationSignals(
            onet_code=str(occ.get("onet_code", "")),
            title=str(occ.get("title", "")),
            task_exposure=exposure,
            automation_potential=occ.get("automation_potential") or None,
            percent_change=float(percent_change) if percent_change is not None else None,
            epoch_scores=normalize_epoch_scores(epoch_raw, methodology.epoch_default_score),
        )
        assessment = build_assessment(signals, methodology=methodology, now=now)

        updated[assessment_field] = assessment.model_dump(mode="json")
        updated[classification_field] = assessment.classification.value
        updated[tier_field] = resilience_rank(assessment.classification)

        result.counts[assessment.classification.value] += 1
        result.assessed += 1
        result.occupations.append(updated)

    logger.info(
        "Assessed %d occupations (%d skipped) with methodology %s",
        result.assessed,
        len(result.skipped),
        methodology.methodology_version,
    )
    for tier, count in result.counts.items():
        logger.info("  %s: %d", tier, count)

    return result


def run_batch(
    input_path: Path,
    output_path: Optional[Path] = None,
    methodology: Optional[MethodologyConfig] = None,
    now: Optional[datetime] = None,
) -> BatchResult:
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Occupations file not found: {input_path}")

    raw = _read_json(input_path)
    if not isinstance(raw, list):
        raise ValueError("Occupations file must contain a JSON list")

    result = assess_occupations(raw, methodology=methodology, now=now)

    target = Path(output_path) if output_path is not None else input_path
    _write_json_atomic(target, result.occupations)
    logger.info("Wrote %d occupations to %s", len(result.occupations), target)

    return result
