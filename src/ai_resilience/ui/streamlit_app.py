from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

SRC_PATH = Path(__file__).resolve().parents[2]
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from ai_resilience.domain.categories import AutomationPotential, TaskExposure
from ai_resilience.domain.schemas import EPOCHScores
from ai_resilience.engine.derivation import epoch_sum, human_advantage_from_epoch, job_growth_category
from ai_resilience.engine.legacy import legacy_label, legacy_score
from ai_resilience.engine.presentation import (
    resilience_color,
    resilience_description,
    resilience_emoji,
    resilience_rank,
)
from ai_resilience.engine.rules import classification_matrix, classify


APP_TITLE = "AI Resilience Explorer"


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    st.title(APP_TITLE)

    with st.sidebar:
        st.subheader("Exposure")
        exposure = st.selectbox("Task exposure", [e.value for e in TaskExposure], index=1)
        automation = st.selectbox(
            "Automation potential",
            [a.value for a in AutomationPotential],
            index=[a.value for a in AutomationPotential].index(exposure),
        )

        st.divider()
        st.subheader("Job growth")
        percent_change = st.number_input("Projected employment change (%)", value=3.0, step=0.5)

        st.divider()
        st.subheader("EPOCH scores")
        empathy = st.slider("Empathy", 1, 5, 3)
        presence = st.slider("Presence", 1, 5, 3)
        opinion = st.slider("Opinion", 1, 5, 3)
        creativity = st.slider("Creativity", 1, 5, 3)
        hope = st.slider("Hope", 1, 5, 3)

    scores = EPOCHScores(
        empathy=empathy,
        presence=presence,
        opinion=opinion,
        creativity=creativity,
        hope=hope,
    )
    growth = job_growth_category(percent_change)
    human = human_advantage_from_epoch(scores)

    result = classify(exposure, automation, growth, human)
    tier = result.classification

    col_a, col_b, col_c = st.columns([2, 1, 1])
    with col_a:
        st.metric("Classification", f"{resilience_emoji(tier)} {tier.value}")
    with col_b:
        st.metric("Rank", resilience_rank(tier))
    with col_c:
        st.metric("Rule", result.rule_number)

    st.write(resilience_description(tier))
    st.caption(f"Rationale: {result.rationale}")

    st.divider()
    st.subheader("Derived inputs")
    st.json(
        {
            "task_exposure": exposure,
            "automation_potential": automation,
            "job_growth": growth.value,
            "epoch_sum": epoch_sum(scores),
            "human_advantage": human.value,
            "color": resilience_color(tier),
            "legacy": {"score": legacy_score(tier), "label": legacy_label(tier)},
        }
    )

    st.divider()
    st.subheader("All input combinations")
    st.dataframe(classification_matrix(), width="stretch")


if __name__ == "__main__":
    main()
