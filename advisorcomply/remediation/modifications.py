"""
Disclaimers and required changes derived from fired rules.

This module proposes changes. It never edits the content itself.
"""
from typing import Optional, Sequence, Set

from advisorcomply.models.compliance_result import ComplianceResult
from advisorcomply.models.validation import ContentModifications
from advisorcomply.rules.client_privacy import CLIENT_NAMES_RULE, SENSITIVE_INFO_RULE

INVESTMENT_ADVICE_DISCLAIMER = (
    "This is not investment advice. Please consult with a qualified financial advisor."
)
PAST_PERFORMANCE_DISCLAIMER = "Past performance does not guarantee future results."
NO_GUARANTEE_DISCLAIMER = "No investment is guaranteed. All investments carry risk."

# rule id -> disclaimer to inject, in injection order
DISCLAIMERS_BY_RULE = [
    ("FINRA_2212", INVESTMENT_ADVICE_DISCLAIMER),
    ("FINRA_2213", PAST_PERFORMANCE_DISCLAIMER),
]

# rule id -> required change, in report order
REQUIRED_CHANGES_BY_RULE = [
    (CLIENT_NAMES_RULE, "Remove or anonymize client names"),
    (SENSITIVE_INFO_RULE, "Remove sensitive financial information"),
]


def fired_rule_ids(results: Sequence[ComplianceResult]) -> Set[str]:
    return {rule_id for result in results for rule_id in result.rule_violations}


def generate_modifications(
    content: Optional[str],
    results: Sequence[ComplianceResult],
) -> ContentModifications:
    original = content or ""
    fired = fired_rule_ids(results)

    disclaimers = tuple(text for rule_id, text in DISCLAIMERS_BY_RULE if rule_id in fired)
    required_changes = tuple(
        text for rule_id, text in REQUIRED_CHANGES_BY_RULE if rule_id in fired
    )

    return ContentModifications(
        original_content=original,
        modified_content=original,
        injected_disclaimers=disclaimers,
        removed_content=required_changes,
        added_warnings=(),
    )
