from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from ai_resilience.domain.schemas import OccupationSignals


def _stable_serialize(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def hash_object(obj: Any) -> str:
    serialized = _stable_serialize(obj)
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()


def signals_fingerprint(signals: OccupationSignals, methodology_version: str) -> str:
    """Changes whenever an upstream input or the methodology label changes."""
    payload: Dict[str, Any] = {
        "task_exposure": signals.task_exposure.value,
        "automation_potential": signals.effective_automation_potential.value,
        "percent_change": signals.percent_change,
        "epoch_scores": signals.epoch_scores.model_dump(),
        "methodology": methodology_version,
    }
    return hash_object(payload)
