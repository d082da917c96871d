from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ai_resilience.core.methodology import DATA_DIR
from ai_resilience.domain.categories import ResilienceClassification
from ai_resilience.engine.derivation import job_growth_category
from ai_resilience.engine.rules import classify


REFERENCE_CASES_PATH = DATA_DIR / "reference_cases.json"


@dataclass(frozen=True)
class CaseOutcome:
    name: str
    onet_code: str
    expected: ResilienceClassification
    actual: ResilienceClassification
    rationale: str
    rule_number: int

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


@dataclass(frozen=True)
class ValidationReport:
    outcomes: List[CaseOutcome] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def failures(self) -> List[CaseOutcome]:
        return [o for o in self.outcomes if not o.passed]


def load_reference_cases(path: Optional[Path] = None) -> List[Dict[str, Any]]:
    raw = json.loads((path or REFERENCE_CASES_PATH).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError("Reference cases must be a list")
    return raw


def validate_reference_cases(cases: Optional[List[Dict[str, Any]]] = None) -> ValidationReport:
    cases = cases if cases is not None else load_reference_cases()
    outcomes: List[CaseOutcome] = []

    for case in cases:
        growth = job_growth_category(float(case["percent_change"]))
        result = classify(
            case["task_exposure"],
            case["automation_potential"],
            growth,
            case["human_advantage"],
        )
        outcomes.append(
            CaseOutcome(
                name=str(case["name"]),
                onet_code=str(case.get("onet_code", "")),
                expected=ResilienceClassification(case["expected"]),
                actual=result.classification,
                rationale=result.rationale,
                rule_number=result.rule_number,
            )
        )

    return ValidationReport(outcomes=outcomes)
