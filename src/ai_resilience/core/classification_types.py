from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ai_resilience.domain.categories import (
    AutomationPotential,
    HumanAdvantageCategory,
    JobGrowthCategory,
    ResilienceClassification,
    TaskExposure,
)


@dataclass(frozen=True)
class ClassificationInputs:
    task_exposure: TaskExposure
    automation_potential: AutomationPotential
    job_growth: JobGrowthCategory
    human_advantage: HumanAdvantageCategory


@dataclass(frozen=True)
class ResilienceRule:
    number: int
    guard: Callable[[ClassificationInputs], bool]
    classification: ResilienceClassification
    tag: str
    explanation: str

    @property
    def rationale(self) -> str:
        return f"{self.tag}: {self.explanation}"

    def matches(self, inputs: ClassificationInputs) -> bool:
        return bool(self.guard(inputs))


@dataclass(frozen=True)
class ClassificationResult:
    classification: ResilienceClassification
    rationale: str
    rule_number: int
