"""
Heuristic EPOCH (Empathy, Presence, Opinion, Creativity, Hope) estimates.

Curated scores are the source of truth. For occupations nobody has scored
by hand yet, a starting estimate is built from the career category, the
O*NET job zone and a handful of title keywords. Manually curated entries
are never overwritten.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ai_resilience.core.methodology import DATA_DIR
from ai_resilience.domain.categories import EPOCH_DIMENSIONS
from ai_resilience.domain.schemas import EPOCHEntry, EPOCHScores
from ai_resilience.engine.derivation import epoch_sum, human_advantage_from_epoch


CATEGORY_DEFAULTS_PATH = DATA_DIR / "epoch_category_defaults.json"

MIN_SCORE = 1
MAX_SCORE = 5

# (title keywords, {dimension: delta})
TITLE_ADJUSTMENTS: Tuple[Tuple[Tuple[str, ...], Dict[str, int]], ...] = (
    (("counsel", "therapist", "social work", "psycholog"), {"empathy": 1, "hope": 1}),
    (("surgeon", "nurse", "technician", "installer", "mechanic", "operator"), {"presence": 1}),
    (("designer", "architect", "artist", "writer", "developer", "engineer"), {"creativity": 1}),
    (("manager", "director", "analyst", "specialist", "physician", "lawyer"), {"opinion": 1}),
    (("teacher", "instructor", "coach", "professor", "trainer"), {"hope": 1, "empathy": 1}),
    (("clerk", "data entry", "teller", "cashier", "receptionist"), {"creativity": -1, "opinion": -1}),
)


def _clamp(value: int) -> int:
    return min(MAX_SCORE, max(MIN_SCORE, int(value)))


def load_category_defaults(path: Optional[Path] = None) -> Dict[str, Any]:
    raw = json.loads((path or CATEGORY_DEFAULTS_PATH).read_text(encoding="utf-8"))
    if "default" not in raw or "categories" not in raw:
        raise ValueError("EPOCH defaults need 'default' and 'categories' keys")
    return raw


def normalize_epoch_scores(raw: Mapping[str, Any], default_score: int = 3) -> EPOCHScores:
    """Missing or zero sub-scores take the default; anything else must be a whole number 1-5."""
    values: Dict[str, Any] = {}
    for dim in EPOCH_DIMENSIONS:
        v = raw.get(dim)
        values[dim] = v if v else default_score
    return EPOCHScores(**values)


def job_zone_adjustment(job_zone: int) -> int:
    return math.floor((int(job_zone) - 3) * 0.5)


def estimate_epoch_scores(
    category: str,
    job_zone: Optional[int],
    title: str,
    defaults: Optional[Dict[str, Any]] = None,
) -> Tuple[EPOCHScores, str]:
    defaults = defaults or load_category_defaults()
    base = defaults["categories"].get(category) or defaults["default"]

    scores = {dim: int(base[dim]) for dim in EPOCH_DIMENSIONS}

    if job_zone:
        delta = job_zone_adjustment(job_zone)
        scores["opinion"] += delta
        scores["creativity"] += delta
    scores = {dim: _clamp(v) for dim, v in scores.items()}

    title_lower = (title or "").lower()
    for keywords, deltas in TITLE_ADJUSTMENTS:
        if any(k in title_lower for k in keywords):
            for dim, delta in deltas.items():
                scores[dim] = _clamp(scores[dim] + delta)

    rationale = (
        f"{base['rationale']}. Adjusted for job zone {job_zone or 'N/A'} "
        "and title characteristics."
    )
    return EPOCHScores(**scores), rationale


def generate_epoch_entries(
    careers: Iterable[Mapping[str, Any]],
    existing: Optional[Mapping[str, Mapping[str, Any]]] = None,
    defaults: Optional[Dict[str, Any]] = None,
) -> Dict[str, EPOCHEntry]:
    existing = existing or {}
    defaults = defaults or load_category_defaults()
    entries: Dict[str, EPOCHEntry] = {}

    for career in careers:
        code = str(career["onet_code"])

        prior = existing.get(code)
        if prior is not None and prior.get("source") == "manual":
            entries[code] = EPOCHEntry.model_validate(prior)
            continue

        title = str(career.get("title", ""))
        scores, rationale = estimate_epoch_scores(
            category=str(career.get("category", "")),
            job_zone=career.get("job_zone"),
            title=title,
            defaults=defaults,
        )
        entries[code] = EPOCHEntry(
            onet_code=code,
            title=title,
            epoch_scores=scores,
            sum=epoch_sum(scores),
            category=human_advantage_from_epoch(scores),
            rationale=rationale,
            source="generated",
        )

    return entries
