from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ai_resilience.domain.categories import (
    AutomationPotential,
    HumanAdvantageCategory,
    JobGrowthCategory,
    ResilienceClassification,
    TaskExposure,
)
from ai_resilience.domain.epoch import check_epoch_consistency


class EPOCHScores(BaseModel):
    """Five curated human-advantage sub-scores, each on a 1-5 scale."""

    model_config = ConfigDict(frozen=True)

    empathy: int = Field(..., ge=1, le=5)
    presence: int = Field(..., ge=1, le=5)
    opinion: int = Field(..., ge=1, le=5)
    creativity: int = Field(..., ge=1, le=5)
    hope: int = Field(..., ge=1, le=5)


class JobGrowthRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: JobGrowthCategory
    percent_change: float
    source: str = Field(..., min_length=1)


class HumanAdvantageRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: HumanAdvantageCategory
    epoch_scores: EPOCHScores
    epoch_sum: int = Field(..., ge=5, le=25)

    @model_validator(mode="after")
    def validate_consistency(self) -> "HumanAdvantageRecord":
        check_epoch_consistency(self.epoch_scores, self.epoch_sum, self.category)
        return self


class CareerAIAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    task_exposure: TaskExposure
    automation_potential: AutomationPotential
    job_growth: JobGrowthRecord
    human_advantage: HumanAdvantageRecord
    classification: ResilienceClassification
    classification_rationale: str = Field(..., min_length=1)
    rule_number: int = Field(..., ge=1)
    last_updated: str
    methodology: str
    inputs_hash: str = ""


class OccupationSignals(BaseModel):
    """Raw per-occupation inputs, already reduced to what the engine consumes."""

    model_config = ConfigDict(frozen=True)

    onet_code: str = ""
    title: str = ""
    task_exposure: TaskExposure
    automation_potential: Optional[AutomationPotential] = None
    percent_change: Optional[float] = None
    epoch_scores: EPOCHScores

    @property
    def effective_automation_potential(self) -> AutomationPotential:
        if self.automation_potential is not None:
            return self.automation_potential
        # No independent source yet; mirrors task exposure.
        return AutomationPotential(self.task_exposure.value)


class EPOCHEntry(BaseModel):
    onet_code: str
    title: str = ""
    epoch_scores: EPOCHScores
    sum: int = Field(..., ge=5, le=25)
    category: HumanAdvantageCategory
    rationale: str = ""
    source: Literal["manual", "generated"] = "generated"

    @model_validator(mode="after")
    def validate_consistency(self) -> "EPOCHEntry":
        check_epoch_consistency(self.epoch_scores, self.sum, self.category)
        return self
