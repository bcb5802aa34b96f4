from dataclasses import replace
from typing import Optional

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.catalog import STATE_RULES
from advisorcomply.rules.evaluator import evaluate


class StateRegulationCheck(DomainCheck):
    """
    State rules are reported at MEDIUM whenever any of them fires,
    regardless of the per-rule severity in the catalog.
    """

    def domain(self) -> str:
        return "state_regulation_compliance"

    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        result = evaluate(content, STATE_RULES)
        severity = Severity.LOW if result.passed else Severity.MEDIUM
        return replace(result, severity=severity)
