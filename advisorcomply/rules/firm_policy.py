"""
Firm policy check.

Per-firm rules are not implemented. The check runs whatever rules an injected
FirmPolicyProvider returns for the advisor; the default provider has none, so
the check always passes.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.catalog import Rule
from advisorcomply.rules.evaluator import evaluate

logger = logging.getLogger("advisorcomply.rules.firm_policy")


class FirmPolicyProvider(ABC):

    @abstractmethod
    def rules_for(self, advisor_id: Optional[str]) -> Sequence[Rule]:
        pass


class NoFirmPolicies(FirmPolicyProvider):

    def rules_for(self, advisor_id: Optional[str]) -> Sequence[Rule]:
        return ()


class StaticFirmPolicies(FirmPolicyProvider):
    """Fixed advisor_id -> rules mapping, for firms that load rules from config."""

    def __init__(self, rules_by_advisor: Dict[str, Sequence[Rule]]):
        self._rules_by_advisor = dict(rules_by_advisor)

    def rules_for(self, advisor_id: Optional[str]) -> Sequence[Rule]:
        return self._rules_by_advisor.get(advisor_id or "", ())


class FirmPolicyCheck(DomainCheck):

    def __init__(self, provider: Optional[FirmPolicyProvider] = None):
        self.provider = provider or NoFirmPolicies()

    def domain(self) -> str:
        return "firm_policy_compliance"

    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        rules = self.provider.rules_for(advisor_id)
        if not rules:
            return ComplianceResult(passed=True, severity=Severity.LOW)

        logger.debug(f"Running {len(rules)} firm policy rules for advisor {advisor_id}")
        return evaluate(content, rules)
