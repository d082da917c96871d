from __future__ import annotations

from typing import Dict, Iterable, List, Union

from ai_resilience.domain.categories import ResilienceClassification


RESILIENCE_COLORS: Dict[ResilienceClassification, str] = {
    ResilienceClassification.AI_RESILIENT: "text-green-600 bg-green-100",
    ResilienceClassification.AI_AUGMENTED: "text-yellow-600 bg-yellow-100",
    ResilienceClassification.IN_TRANSITION: "text-orange-600 bg-orange-100",
    ResilienceClassification.HIGH_DISRUPTION_RISK: "text-red-600 bg-red-100",
}

RESILIENCE_RANKS: Dict[ResilienceClassification, int] = {
    ResilienceClassification.AI_RESILIENT: 1,
    ResilienceClassification.AI_AUGMENTED: 2,
    ResilienceClassification.IN_TRANSITION: 3,
    ResilienceClassification.HIGH_DISRUPTION_RISK: 4,
}

RESILIENCE_EMOJIS: Dict[ResilienceClassification, str] = {
    ResilienceClassification.AI_RESILIENT: "\U0001F7E2",
    ResilienceClassification.AI_AUGMENTED: "\U0001F7E1",
    ResilienceClassification.IN_TRANSITION: "\U0001F7E0",
    ResilienceClassification.HIGH_DISRUPTION_RISK: "\U0001F534",
}

RESILIENCE_DESCRIPTIONS: Dict[ResilienceClassification, str] = {
    ResilienceClassification.AI_RESILIENT: (
        "Strong human advantage or growing demand protects this career from AI displacement"
    ),
    ResilienceClassification.AI_AUGMENTED: (
        "AI will assist this work but human judgment and skills remain essential"
    ),
    ResilienceClassification.IN_TRANSITION: (
        "This career is being transformed by AI; adaptation and skill evolution needed"
    ),
    ResilienceClassification.HIGH_DISRUPTION_RISK: (
        "High AI exposure combined with declining demand creates significant risk"
    ),
}


def resilience_color(classification: Union[ResilienceClassification, str]) -> str:
    return RESILIENCE_COLORS[ResilienceClassification(classification)]


def resilience_rank(classification: Union[ResilienceClassification, str]) -> int:
    return RESILIENCE_RANKS[ResilienceClassification(classification)]


def resilience_emoji(classification: Union[ResilienceClassification, str]) -> str:
    return RESILIENCE_EMOJIS[ResilienceClassification(classification)]


def resilience_description(classification: Union[ResilienceClassification, str]) -> str:
    return RESILIENCE_DESCRIPTIONS[ResilienceClassification(classification)]


def sort_by_resilience(
    classifications: Iterable[Union[ResilienceClassification, str]],
) -> List[ResilienceClassification]:
    """Most resilient first."""
    return sorted(
        (ResilienceClassification(c) for c in classifications),
        key=resilience_rank,
    )
