from __future__ import annotations

from enum import Enum
from typing import Tuple


class TaskExposure(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class AutomationPotential(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class JobGrowthCategory(str, Enum):
    DECLINING_QUICKLY = "Declining Quickly"
    DECLINING_SLOWLY = "Declining Slowly"
    STABLE = "Stable"
    GROWING_SLOWLY = "Growing Slowly"
    GROWING_QUICKLY = "Growing Quickly"


class HumanAdvantageCategory(str, Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


class ResilienceClassification(str, Enum):
    AI_RESILIENT = "AI-Resilient"
    AI_AUGMENTED = "AI-Augmented"
    IN_TRANSITION = "In Transition"
    HIGH_DISRUPTION_RISK = "High Disruption Risk"


# Safest first.
CLASSIFICATION_ORDER: Tuple[ResilienceClassification, ...] = (
    ResilienceClassification.AI_RESILIENT,
    ResilienceClassification.AI_AUGMENTED,
    ResilienceClassification.IN_TRANSITION,
    ResilienceClassification.HIGH_DISRUPTION_RISK,
)


EPOCH_DIMENSIONS: Tuple[str, ...] = (
    "empathy",
    "presence",
    "opinion",
    "creativity",
    "hope",
)
