from advisorcomply.models.compliance_result import Severity
from advisorcomply.rules.catalog import FINRA_RULES, Rule, SEC_RULES
from advisorcomply.rules.evaluator import REVIEW_ACTION, escalate_severity, evaluate


def _rule(rule_id, keyword, severity):
    return Rule(id=rule_id, description=f"Rule {rule_id}", keywords=(keyword,), severity=severity)


# ============================================================
# SEVERITY ESCALATION
# ============================================================

def test_escalation_never_lowers_severity():
    assert escalate_severity(Severity.HIGH, Severity.MEDIUM) == Severity.HIGH
    assert escalate_severity(Severity.CRITICAL, Severity.HIGH) == Severity.CRITICAL
    assert escalate_severity(Severity.MEDIUM, Severity.LOW) == Severity.MEDIUM


def test_escalation_raises_severity():
    assert escalate_severity(Severity.LOW, Severity.MEDIUM) == Severity.MEDIUM
    assert escalate_severity(Severity.MEDIUM, Severity.HIGH) == Severity.HIGH
    assert escalate_severity(Severity.HIGH, Severity.CRITICAL) == Severity.CRITICAL


def test_high_then_medium_stays_high():
    catalog = [
        _rule("R1", "alpha", Severity.HIGH),
        _rule("R2", "beta", Severity.MEDIUM),
    ]
    result = evaluate("alpha beta", catalog)

    assert result.severity == Severity.HIGH
    assert result.rule_violations == ("R1", "R2")


# ============================================================
# MATCHING
# ============================================================

def test_matching_is_case_insensitive_substring():
    result = evaluate("We GUARANTEE results", FINRA_RULES)

    assert not result.passed
    assert result.rule_violations == ("FINRA_2210",)
    assert result.severity == Severity.HIGH


def test_multiple_rules_fire_in_catalog_order():
    result = evaluate("Please record this for the client", SEC_RULES)

    assert result.rule_violations == ("SEC_17a4", "SEC_17a3", "SEC_17a8")
    assert result.severity == Severity.CRITICAL
    assert len(result.issues) == len(result.recommendations) == 3


def test_recommendation_text():
    result = evaluate("variable annuity", FINRA_RULES)

    assert result.recommendations == (
        "Review content for variable insurance communications must include required disclosures",
    )
    assert result.required_actions == (REVIEW_ACTION,)


def test_clean_content_passes():
    result = evaluate("Had a great conversation about markets today", FINRA_RULES)

    assert result.passed
    assert result.issues == ()
    assert result.severity == Severity.LOW
    assert result.required_actions == ()


def test_none_content_is_treated_as_empty():
    result = evaluate(None, FINRA_RULES)

    assert result.passed
    assert result.severity == Severity.LOW
