from typing import Optional

from advisorcomply.models.compliance_result import ComplianceResult
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.catalog import SEC_RULES
from advisorcomply.rules.evaluator import evaluate


class SECComplianceCheck(DomainCheck):

    def domain(self) -> str:
        return "sec_compliance"

    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        return evaluate(content, SEC_RULES)
