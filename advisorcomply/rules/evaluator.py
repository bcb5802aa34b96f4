from typing import Iterable, List, Optional

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.rules.catalog import Rule

REVIEW_ACTION = "Review and address compliance issues"


def escalate_severity(current: Severity, triggered: Severity) -> Severity:
    """
    Raise the running severity for a triggered rule. Never lowers it.
    """
    if triggered == Severity.CRITICAL:
        return Severity.CRITICAL
    if triggered == Severity.HIGH and current != Severity.CRITICAL:
        return Severity.HIGH
    if triggered == Severity.MEDIUM and current == Severity.LOW:
        return Severity.MEDIUM
    return current


def rule_matches(rule: Rule, lowered_content: str) -> bool:
    return any(keyword.lower() in lowered_content for keyword in rule.keywords)


def evaluate(content: Optional[str], catalog: Iterable[Rule]) -> ComplianceResult:
    """
    Scan content against every rule in a catalog.

    A single content string may trigger several rules. Issues, rule ids and
    recommendations keep catalog order.
    """
    lowered = (content or "").lower()

    issues: List[str] = []
    rule_violations: List[str] = []
    recommendations: List[str] = []
    severity = Severity.LOW

    for rule in catalog:
        if not rule_matches(rule, lowered):
            continue

        issues.append(rule.description)
        rule_violations.append(rule.id)
        recommendations.append(f"Review content for {rule.description.lower()}")
        severity = escalate_severity(severity, rule.severity)

    return ComplianceResult(
        passed=not issues,
        issues=tuple(issues),
        severity=severity,
        recommendations=tuple(recommendations),
        rule_violations=tuple(rule_violations),
        required_actions=(REVIEW_ACTION,) if issues else (),
    )
