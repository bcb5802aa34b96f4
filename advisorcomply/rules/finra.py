from typing import Optional

from advisorcomply.models.compliance_result import ComplianceResult
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.catalog import FINRA_RULES
from advisorcomply.rules.evaluator import evaluate


class FINRAComplianceCheck(DomainCheck):

    def domain(self) -> str:
        return "finra_compliance"

    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        return evaluate(content, FINRA_RULES)
