"""
Bridge from the four-tier classification to the retired 1-10 AI risk score.

Only consumers that still read ``ai_risk.score`` / ``ai_risk.label`` need
this. Remove once they have moved to the tier field.
"""

from __future__ import annotations

from typing import Dict, Union

from ai_resilience.domain.categories import ResilienceClassification


LEGACY_SCORES: Dict[ResilienceClassification, int] = {
    ResilienceClassification.AI_RESILIENT: 2,
    ResilienceClassification.AI_AUGMENTED: 4,
    ResilienceClassification.IN_TRANSITION: 6,
    ResilienceClassification.HIGH_DISRUPTION_RISK: 8,
}

LEGACY_LABELS: Dict[ResilienceClassification, str] = {
    ResilienceClassification.AI_RESILIENT: "very_low",
    ResilienceClassification.AI_AUGMENTED: "low",
    ResilienceClassification.IN_TRANSITION: "medium",
    ResilienceClassification.HIGH_DISRUPTION_RISK: "high",
}


def legacy_score(classification: Union[ResilienceClassification, str]) -> int:
    return LEGACY_SCORES[ResilienceClassification(classification)]


def legacy_label(classification: Union[ResilienceClassification, str]) -> str:
    return LEGACY_LABELS[ResilienceClassification(classification)]


def legacy_risk(classification: Union[ResilienceClassification, str]) -> Dict[str, object]:
    return {
        "score": legacy_score(classification),
        "label": legacy_label(classification),
    }
