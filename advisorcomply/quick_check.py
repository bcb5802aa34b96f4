"""
Lightweight keyword pre-checks for UI paths.

Independent from the full engine on purpose: no rule catalog, no audit trail,
and slightly different keyword lists.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from advisorcomply.models.validation import RiskLevel
from advisorcomply.remediation.modifications import (
    INVESTMENT_ADVICE_DISCLAIMER,
    NO_GUARANTEE_DISCLAIMER,
    PAST_PERFORMANCE_DISCLAIMER,
)
from advisorcomply.rules.patterns import CLIENT_NAME

INVESTMENT_KEYWORDS = ["buy", "sell", "invest", "recommend", "suggest"]
PERFORMANCE_KEYWORDS = ["return", "performance", "yield", "gain", "profit"]
QUICK_GUARANTEE_KEYWORDS = ["guarantee", "guaranteed", "promise", "assure", "certain"]
DISCLAIMER_GUARANTEE_KEYWORDS = ["guaranteed", "guarantee", "promise", "assured", "certain"]


@dataclass(frozen=True)
class QuickCheckResult:
    is_compliant: bool
    issues: Tuple[str, ...] = ()
    risk_level: RiskLevel = RiskLevel.LOW

    def to_dict(self) -> dict:
        return {
            "is_compliant": self.is_compliant,
            "issues": list(self.issues),
            "risk_level": self.risk_level.value,
        }


def _contains_any(text: str, keywords: List[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def quick_compliance_check(content: Optional[str]) -> QuickCheckResult:
    text = content or ""
    issues: List[str] = []
    risk_level = RiskLevel.LOW

    if _contains_any(text, INVESTMENT_KEYWORDS):
        issues.append("Content may contain investment advice")
        risk_level = RiskLevel.HIGH

    if CLIENT_NAME.search(text):
        issues.append("Content may contain client names")
        risk_level = RiskLevel.CRITICAL

    if _contains_any(text, PERFORMANCE_KEYWORDS):
        issues.append("Content may contain performance claims")
        if risk_level == RiskLevel.LOW:
            risk_level = RiskLevel.MEDIUM

    if _contains_any(text, QUICK_GUARANTEE_KEYWORDS):
        issues.append("Content may contain guarantee language")
        if risk_level == RiskLevel.LOW:
            risk_level = RiskLevel.HIGH

    return QuickCheckResult(is_compliant=not issues, issues=tuple(issues), risk_level=risk_level)


def generate_compliance_disclaimers(content: Optional[str]) -> List[str]:
    """Preview the disclaimers a post would need, before validation runs."""
    text = content or ""
    disclaimers: List[str] = []

    if _contains_any(text, INVESTMENT_KEYWORDS):
        disclaimers.append(INVESTMENT_ADVICE_DISCLAIMER)

    if _contains_any(text, PERFORMANCE_KEYWORDS):
        disclaimers.append(PAST_PERFORMANCE_DISCLAIMER)

    if _contains_any(text, DISCLAIMER_GUARANTEE_KEYWORDS):
        disclaimers.append(NO_GUARANTEE_DISCLAIMER)

    return disclaimers
