from typing import Dict, Sequence

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.models.validation import RiskAssessment, RiskLevel

# Points per result at each severity. Every result counts, passing ones
# included, so a fully clean run still scores 5 * 5 = 25.
SEVERITY_POINTS: Dict[Severity, int] = {
    Severity.CRITICAL: 40,
    Severity.HIGH: 25,
    Severity.MEDIUM: 15,
    Severity.LOW: 5,
}

MAX_RISK_SCORE = 100


def count_by_severity(results: Sequence[ComplianceResult]) -> Dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for result in results:
        counts[result.severity] += 1
    return counts


def risk_level_for(counts: Dict[Severity, int]) -> RiskLevel:
    if counts[Severity.CRITICAL] > 0:
        return RiskLevel.CRITICAL
    if counts[Severity.HIGH] > 0:
        return RiskLevel.HIGH
    if counts[Severity.MEDIUM] > 0:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def aggregate_risk(results: Sequence[ComplianceResult]) -> RiskAssessment:
    """
    Combine the domain check results into one capped 0-100 score.
    """
    counts = count_by_severity(results)
    risk_level = risk_level_for(counts)

    raw_score = sum(SEVERITY_POINTS[severity] * count for severity, count in counts.items())
    score = min(MAX_RISK_SCORE, raw_score)

    risk_factors = tuple(
        issue for result in results if not result.passed for issue in result.issues
    )

    return RiskAssessment(
        overall_risk_score=score,
        risk_level=risk_level,
        risk_factors=risk_factors,
        mitigation_required=risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL),
    )
