import re
from abc import ABC, abstractmethod
from typing import List, Optional

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.evaluator import REVIEW_ACTION
from advisorcomply.rules.patterns import (
    CLIENT_NAME,
    SENSITIVE_PATTERNS,
    SENSITIVE_PATTERN_ORDER,
)

CLIENT_NAMES_RULE = "CLIENT_PRIVACY_001"
SENSITIVE_INFO_RULE = "CLIENT_PRIVACY_002"

PRIVACY_RULE_IDS = frozenset({CLIENT_NAMES_RULE, SENSITIVE_INFO_RULE})


class NameDetector(ABC):
    """
    Finds personal names in free text. Swappable so the regex heuristic
    can be replaced by an NER model without touching the pipeline.
    """

    @abstractmethod
    def find_names(self, text: str) -> List[str]:
        pass


class RegexNameDetector(NameDetector):

    def __init__(self, pattern: Optional[re.Pattern] = None):
        self.pattern = pattern or CLIENT_NAME

    def find_names(self, text: str) -> List[str]:
        return self.pattern.findall(text)


def find_sensitive_number(text: str) -> Optional[str]:
    """Return the name of the first sensitive pattern that matches, if any."""
    for name in SENSITIVE_PATTERN_ORDER:
        if SENSITIVE_PATTERNS[name].search(text):
            return name
    return None


class ClientPrivacyCheck(DomainCheck):
    """
    Pattern-based privacy check. Any finding is CRITICAL.
    """

    def __init__(self, name_detector: Optional[NameDetector] = None):
        self.name_detector = name_detector or RegexNameDetector()

    def domain(self) -> str:
        return "client_privacy_compliance"

    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        text = content or ""

        issues: List[str] = []
        rule_violations: List[str] = []
        recommendations: List[str] = []

        if self.name_detector.find_names(text):
            issues.append("Content may contain client names")
            rule_violations.append(CLIENT_NAMES_RULE)
            recommendations.append("Remove or anonymize client names before publishing")

        if find_sensitive_number(text):
            issues.append("Content may contain sensitive financial information")
            rule_violations.append(SENSITIVE_INFO_RULE)
            recommendations.append("Remove sensitive financial information before publishing")

        return ComplianceResult(
            passed=not issues,
            issues=tuple(issues),
            severity=Severity.CRITICAL if issues else Severity.LOW,
            recommendations=tuple(recommendations),
            rule_violations=tuple(rule_violations),
            required_actions=(REVIEW_ACTION,) if issues else (),
        )
