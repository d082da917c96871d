from ai_resilience.domain.categories import ResilienceClassification
from ai_resilience.engine.validation import load_reference_cases, validate_reference_cases


def test_reference_occupations_all_pass():
    report = validate_reference_cases()

    assert len(report.outcomes) == 14
    assert report.ok
    assert report.failures() == []


def test_reference_outcomes_carry_rules():
    report = validate_reference_cases()
    by_name = {o.name: o for o in report.outcomes}

    assert by_name["Data Entry Clerk"].rule_number == 11
    assert by_name["Truck Driver"].rule_number == 12
    assert by_name["Radiologist"].rule_number == 7
    assert by_name["Software Developer"].actual == ResilienceClassification.AI_AUGMENTED


def test_mismatched_expectation_is_reported():
    case = dict(load_reference_cases()[0], expected="AI-Resilient")

    report = validate_reference_cases([case])

    assert not report.ok
    assert report.failed == 1
    assert report.failures()[0].actual == ResilienceClassification.AI_AUGMENTED
