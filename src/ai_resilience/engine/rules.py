from __future__ import annotations

from itertools import product
from typing import Dict, List, Tuple, Union

from ai_resilience.core.classification_types import (
    ClassificationInputs,
    ClassificationResult,
    ResilienceRule,
)
from ai_resilience.domain.categories import (
    AutomationPotential,
    HumanAdvantageCategory,
    JobGrowthCategory,
    ResilienceClassification,
    TaskExposure,
)


Exposure = TaskExposure
Growth = JobGrowthCategory
Human = HumanAdvantageCategory
Tier = ResilienceClassification


# First match wins. Guards overlap (rule 12 is a superset of rule 11,
# rule 7 shadows rule 9 for High exposure), so the order is part of the
# contract and must not be rearranged.
RESILIENCE_RULES: Tuple[ResilienceRule, ...] = (
    ResilienceRule(
        number=1,
        guard=lambda i: i.job_growth == Growth.GROWING_QUICKLY and i.task_exposure != Exposure.HIGH,
        classification=Tier.AI_RESILIENT,
        tag="Growing Quickly + Limited Exposure",
        explanation="Strong employment growth combined with limited AI applicability",
    ),
    ResilienceRule(
        number=2,
        guard=lambda i: i.human_advantage == Human.STRONG and i.task_exposure != Exposure.HIGH,
        classification=Tier.AI_RESILIENT,
        tag="Strong Human Advantage",
        explanation="High EPOCH scores with low/medium AI exposure means human skills remain essential",
    ),
    ResilienceRule(
        number=3,
        guard=lambda i: i.job_growth == Growth.GROWING_SLOWLY and i.task_exposure == Exposure.LOW,
        classification=Tier.AI_RESILIENT,
        tag="Growing + Low Exposure",
        explanation="Steady demand growth for work that AI cannot easily automate",
    ),
    ResilienceRule(
        number=4,
        guard=lambda i: i.task_exposure == Exposure.LOW and i.job_growth != Growth.DECLINING_QUICKLY,
        classification=Tier.AI_AUGMENTED,
        tag="Low Exposure",
        explanation="AI has limited applicability to this work; stable employment prospects",
    ),
    ResilienceRule(
        number=5,
        guard=lambda i: i.task_exposure == Exposure.MEDIUM
        and i.human_advantage in (Human.MODERATE, Human.STRONG),
        classification=Tier.AI_AUGMENTED,
        tag="Medium Exposure + Human Skills",
        explanation="AI augments this work but human judgment remains essential",
    ),
    ResilienceRule(
        number=6,
        guard=lambda i: i.task_exposure == Exposure.HIGH and i.job_growth == Growth.GROWING_QUICKLY,
        classification=Tier.AI_AUGMENTED,
        tag="High Exposure + Growing",
        explanation="Strong demand but AI is significantly augmenting this work",
    ),
    ResilienceRule(
        number=7,
        guard=lambda i: i.task_exposure == Exposure.HIGH and i.job_growth == Growth.STABLE,
        classification=Tier.IN_TRANSITION,
        tag="High Exposure + Stable",
        explanation="AI is transforming this work; role is evolving rather than disappearing",
    ),
    ResilienceRule(
        number=8,
        guard=lambda i: i.task_exposure == Exposure.HIGH
        and i.job_growth == Growth.DECLINING_SLOWLY
        and i.human_advantage == Human.MODERATE,
        classification=Tier.IN_TRANSITION,
        tag="High Exposure + Moderate Decline",
        explanation="AI is significantly impacting this field, but human skills provide partial protection",
    ),
    ResilienceRule(
        number=9,
        guard=lambda i: i.job_growth == Growth.STABLE and i.human_advantage == Human.MODERATE,
        classification=Tier.AI_AUGMENTED,
        tag="Stable + Moderate Human Skills",
        explanation="Balanced outlook where AI serves as a tool rather than replacement",
    ),
    ResilienceRule(
        number=10,
        guard=lambda i: i.task_exposure == Exposure.MEDIUM
        and i.job_growth == Growth.DECLINING_SLOWLY
        and i.human_advantage == Human.WEAK,
        classification=Tier.IN_TRANSITION,
        tag="Medium Exposure + Weak Human Advantage + Decline",
        explanation="Facing pressure from both AI capabilities and market shifts",
    ),
    ResilienceRule(
        number=11,
        guard=lambda i: i.task_exposure == Exposure.HIGH
        and i.job_growth == Growth.DECLINING_QUICKLY
        and i.human_advantage == Human.WEAK,
        classification=Tier.HIGH_DISRUPTION_RISK,
        tag="Maximum Risk",
        explanation="High AI exposure, rapidly declining demand, and limited human differentiation",
    ),
    ResilienceRule(
        number=12,
        guard=lambda i: i.task_exposure == Exposure.HIGH
        and i.job_growth in (Growth.DECLINING_QUICKLY, Growth.DECLINING_SLOWLY)
        and i.human_advantage == Human.WEAK,
        classification=Tier.HIGH_DISRUPTION_RISK,
        tag="High Risk",
        explanation="High AI exposure combined with declining employment and limited human differentiation",
    ),
    ResilienceRule(
        number=13,
        guard=lambda i: i.task_exposure == Exposure.HIGH,
        classification=Tier.IN_TRANSITION,
        tag="High AI Exposure",
        explanation="Significant AI applicability suggests ongoing transformation",
    ),
    ResilienceRule(
        number=14,
        guard=lambda i: True,
        classification=Tier.AI_AUGMENTED,
        tag="Default",
        explanation="Moderate AI impact with balanced human-AI collaboration expected",
    ),
)


def classify(
    task_exposure: Union[TaskExposure, str],
    automation_potential: Union[AutomationPotential, str],
    job_growth: Union[JobGrowthCategory, str],
    human_advantage: Union[HumanAdvantageCategory, str],
) -> ClassificationResult:
    """
    Classify an occupation into one of the four AI resilience tiers.

    Rules in RESILIENCE_RULES are evaluated in order and the first guard
    that holds decides the tier and rationale. Automation potential is
    carried for forward compatibility; no current rule reads it.

    Raises ValueError for any value outside its category enumeration.
    """
    inputs = ClassificationInputs(
        task_exposure=TaskExposure(task_exposure),
        automation_potential=AutomationPotential(automation_potential),
        job_growth=JobGrowthCategory(job_growth),
        human_advantage=HumanAdvantageCategory(human_advantage),
    )

    for rule in RESILIENCE_RULES:
        if rule.matches(inputs):
            return ClassificationResult(
                classification=rule.classification,
                rationale=rule.rationale,
                rule_number=rule.number,
            )

    raise RuntimeError(f"No resilience rule matched inputs: {inputs}")


def classification_matrix() -> List[Dict[str, object]]:
    """Every input combination with the tier and rule it resolves to."""
    rows: List[Dict[str, object]] = []

    for exposure, automation, growth, human in product(
        TaskExposure, AutomationPotential, JobGrowthCategory, HumanAdvantageCategory
    ):
        result = classify(exposure, automation, growth, human)
        rows.append(
            {
                "task_exposure": exposure.value,
                "automation_potential": automation.value,
                "job_growth": growth.value,
                "human_advantage": human.value,
                "classification": result.classification.value,
                "rule": result.rule_number,
                "rationale": result.rationale,
            }
        )

    return rows
