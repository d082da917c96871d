from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ai_resilience.core.fingerprints import signals_fingerprint
from ai_resilience.core.methodology import MethodologyConfig, load_methodology
from ai_resilience.domain.schemas import (
    CareerAIAssessment,
    HumanAdvantageRecord,
    JobGrowthRecord,
    OccupationSignals,
)
from ai_resilience.engine.derivation import epoch_sum, human_advantage_from_epoch, job_growth_category
from ai_resilience.engine.rules import classify


ESTIMATED_GROWTH_SUFFIX = " (estimated growth)"


def build_assessment(
    signals: OccupationSignals,
    methodology: Optional[MethodologyConfig] = None,
    now: Optional[datetime] = None,
) -> CareerAIAssessment:
    """
    Derive categories from raw signals, classify, and assemble the record.

    An occupation without a growth projection is treated as 0% change and
    labelled with the fallback source; its rationale says so.
    """
    methodology = methodology or load_methodology()
    now = now or datetime.now(timezone.utc)

    if signals.percent_change is None:
        percent_change = 0.0
        growth_source = methodology.job_growth_fallback_source
    else:
        percent_change = float(signals.percent_change)
        growth_source = methodology.job_growth_source

    growth = job_growth_category(percent_change)
    human = human_advantage_from_epoch(signals.epoch_scores)
    automation = signals.effective_automation_potential

    result = classify(signals.task_exposure, automation, growth, human)

    rationale = result.rationale
    if signals.percent_change is None:
        rationale += ESTIMATED_GROWTH_SUFFIX

    return CareerAIAssessment(
        task_exposure=signals.task_exposure,
        automation_potential=automation,
        job_growth=JobGrowthRecord(
            category=growth,
            percent_change=percent_change,
            source=growth_source,
        ),
        human_advantage=HumanAdvantageRecord(
            category=human,
            epoch_scores=signals.epoch_scores,
            epoch_sum=epoch_sum(signals.epoch_scores),
        ),
        classification=result.classification,
        classification_rationale=rationale,
        rule_number=result.rule_number,
        last_updated=now.date().isoformat(),
        methodology=methodology.methodology_version,
        inputs_hash=signals_fingerprint(signals, methodology.methodology_version),
    )
