from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ai_resilience.core.methodology import load_methodology
from ai_resilience.domain.categories import (
    AutomationPotential,
    HumanAdvantageCategory,
    JobGrowthCategory,
    TaskExposure,
)
from ai_resilience.domain.schemas import EPOCHScores
from ai_resilience.engine.derivation import human_advantage_from_epoch, job_growth_category
from ai_resilience.engine.epoch_estimator import generate_epoch_entries
from ai_resilience.engine.legacy import legacy_label, legacy_score
from ai_resilience.engine.presentation import resilience_description, resilience_emoji, resilience_rank
from ai_resilience.engine.rules import classification_matrix, classify
from ai_resilience.engine.validation import validate_reference_cases
from ai_resilience.pipeline.batch import _write_json_atomic, run_batch


def _write_json(obj: Any) -> None:
    sys.stdout.write(json.dumps(obj, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def cmd_classify(args: argparse.Namespace) -> int:
    exposure = TaskExposure(args.exposure)
    automation = AutomationPotential(args.automation or exposure.value)

    if args.growth is not None:
        growth = JobGrowthCategory(args.growth)
    else:
        growth = job_growth_category(args.percent_change)

    if args.human_advantage is not None:
        human = HumanAdvantageCategory(args.human_advantage)
    else:
        empathy, presence, opinion, creativity, hope = args.epoch
        human = human_advantage_from_epoch(
            EPOCHScores(
                empathy=empathy,
                presence=presence,
                opinion=opinion,
                creativity=creativity,
                hope=hope,
            )
        )

    result = classify(exposure, automation, growth, human)
    tier = result.classification

    if args.json:
        _write_json(
            {
                "inputs": {
                    "task_exposure": exposure.value,
                    "automation_potential": automation.value,
                    "job_growth": growth.value,
                    "human_advantage": human.value,
                },
                "classification": tier.value,
                "rank": resilience_rank(tier),
                "rationale": result.rationale,
                "rule": result.rule_number,
                "description": resilience_description(tier),
                "legacy": {"score": legacy_score(tier), "label": legacy_label(tier)},
            }
        )
    else:
        print(f"{resilience_emoji(tier)} {tier.value} (rule {result.rule_number})")
        print(f"  {result.rationale}")
    return 0


def cmd_assess(args: argparse.Namespace) -> int:
    methodology = load_methodology(Path(args.methodology) if args.methodology else None)
    result = run_batch(
        Path(args.input),
        output_path=Path(args.output) if args.output else None,
        methodology=methodology,
    )
    if args.json:
        _write_json(
            {
                "assessed": result.assessed,
                "skipped": result.skipped,
                "counts": result.counts,
            }
        )
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    report = validate_reference_cases()

    if args.json:
        _write_json(
            {
                "ok": report.ok,
                "passed": report.passed,
                "failed": report.failed,
                "failures": [
                    {
                        "name": o.name,
                        "expected": o.expected.value,
                        "actual": o.actual.value,
                        "rationale": o.rationale,
                    }
                    for o in report.failures()
                ],
            }
        )
        return 0 if report.ok else 1

    for o in report.outcomes:
        mark = "PASS" if o.passed else "FAIL"
        print(f"{mark} {o.name}: {o.actual.value} (rule {o.rule_number})")
        if not o.passed:
            print(f"  expected: {o.expected.value}", file=sys.stderr)
            print(f"  rationale: {o.rationale}", file=sys.stderr)
    print(f"Passed: {report.passed}/{len(report.outcomes)}")
    return 0 if report.ok else 1


def cmd_matrix(args: argparse.Namespace) -> int:
    rows = classification_matrix()
    if args.json:
        _write_json(rows)
        return 0

    print("exposure\tautomation\tgrowth\thuman_advantage\tclassification\trule")
    for r in rows:
        print(
            f"{r['task_exposure']}\t{r['automation_potential']}\t{r['job_growth']}\t"
            f"{r['human_advantage']}\t{r['classification']}\t{r['rule']}"
        )
    return 0


def cmd_epoch(args: argparse.Namespace) -> int:
    careers = _load_json(args.careers)
    existing: Dict[str, Any] = {}
    if args.existing and Path(args.existing).exists():
        existing = dict(_load_json(args.existing).get("scores", {}) or {})

    entries = generate_epoch_entries(careers, existing=existing)
    manual = sum(1 for e in entries.values() if e.source == "manual")

    output = {
        "metadata": {
            "total_scores": len(entries),
            "manual_scores": manual,
            "generated_scores": len(entries) - manual,
        },
        "scores": {code: e.model_dump(mode="json") for code, e in entries.items()},
    }
    target = Path(args.output)
    _write_json_atomic(target, output)
    logging.getLogger(__name__).info(
        "Wrote %d EPOCH entries (%d manual) to %s", len(entries), manual, target
    )
    return 0


def _values(enum_cls: Any) -> List[str]:
    return [m.value for m in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ai-resilience", description="AI resilience classification")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("classify", help="Classify a single occupation")
    p.add_argument("--exposure", required=True, choices=_values(TaskExposure))
    p.add_argument("--automation", choices=_values(AutomationPotential))
    growth = p.add_mutually_exclusive_group(required=True)
    growth.add_argument("--growth", choices=_values(JobGrowthCategory))
    growth.add_argument("--percent-change", type=float)
    human = p.add_mutually_exclusive_group(required=True)
    human.add_argument("--human-advantage", choices=_values(HumanAdvantageCategory))
    human.add_argument("--epoch", type=int, nargs=5, metavar=("E", "P", "O", "C", "H"))
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_classify)

    p = sub.add_parser("assess", help="Assess every occupation in a JSON file")
    p.add_argument("input")
    p.add_argument("--output")
    p.add_argument("--methodology")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_assess)

    p = sub.add_parser("validate", help="Check the reference occupations")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("matrix", help="List every input combination")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_matrix)

    p = sub.add_parser("epoch", help="Generate EPOCH estimates for careers")
    p.add_argument("careers")
    p.add_argument("--existing")
    p.add_argument("--output", required=True)
    p.set_defaults(func=cmd_epoch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = build_parser().parse_args(argv)

    try:
        return int(args.func(args))
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
