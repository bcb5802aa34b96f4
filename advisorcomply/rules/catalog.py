"""
Static regulatory rule tables.

Each rule fires when any of its keywords appears (case-insensitive substring)
in the content. Tables are built at import time and never mutated.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from advisorcomply.models.compliance_result import Severity


@dataclass(frozen=True)
class Rule:
    id: str
    description: str
    keywords: Tuple[str, ...]
    severity: Severity


FINRA_RULES: Tuple[Rule, ...] = (
    # Rule 2210: Communications with the Public
    Rule(
        id="FINRA_2210",
        description="Communications with the Public must be fair and balanced",
        keywords=("guaranteed", "guarantee", "promise", "assured", "certain"),
        severity=Severity.HIGH,
    ),
    # Rule 2211: Variable Life Insurance and Variable Annuities
    Rule(
        id="FINRA_2211",
        description="Variable insurance communications must include required disclosures",
        keywords=("variable annuity", "variable life", "insurance"),
        severity=Severity.HIGH,
    ),
    Rule(
        id="FINRA_2212",
        description="Investment advice must include appropriate disclaimers",
        keywords=("buy", "sell", "invest", "recommend", "suggest"),
        severity=Severity.CRITICAL,
    ),
    Rule(
        id="FINRA_2213",
        description="Performance claims must be substantiated and include disclaimers",
        keywords=("return", "performance", "yield", "gain", "profit"),
        severity=Severity.HIGH,
    ),
    Rule(
        id="FINRA_2214",
        description="Testimonials must include required disclosures",
        keywords=("testimonial", "review", "client said", "customer"),
        severity=Severity.MEDIUM,
    ),
)

SEC_RULES: Tuple[Rule, ...] = (
    # Rule 17a-4: Records to be Preserved
    Rule(
        id="SEC_17a4",
        description="All communications must be properly recorded and preserved",
        keywords=("record", "preserve", "maintain"),
        severity=Severity.HIGH,
    ),
    # Rule 17a-3: Records to be Made
    Rule(
        id="SEC_17a3",
        description="All communications must be properly recorded",
        keywords=("record", "document", "log"),
        severity=Severity.HIGH,
    ),
    Rule(
        id="SEC_17a8",
        description="Customer information must be protected and not disclosed",
        keywords=("client", "customer", "account", "personal"),
        severity=Severity.CRITICAL,
    ),
    Rule(
        id="SEC_17a9",
        description="Customer consent required for certain communications",
        keywords=("consent", "permission", "authorization"),
        severity=Severity.HIGH,
    ),
)

STATE_RULES: Tuple[Rule, ...] = (
    Rule(
        id="STATE_CCPA",
        description="California Consumer Privacy Act compliance",
        keywords=("california", "ccpa", "privacy"),
        severity=Severity.HIGH,
    ),
    # "ny" is a bare substring and also matches words like "company"
    Rule(
        id="STATE_NY",
        description="New York State financial regulations",
        keywords=("new york", "ny", "state"),
        severity=Severity.MEDIUM,
    ),
)

CATALOGS: Dict[str, Tuple[Rule, ...]] = {
    "FINRA": FINRA_RULES,
    "SEC": SEC_RULES,
    "STATE": STATE_RULES,
}

KNOWN_RULE_IDS: FrozenSet[str] = frozenset(
    rule.id for catalog in CATALOGS.values() for rule in catalog
)


def get_catalog(domain: str) -> Tuple[Rule, ...]:
    """
    Return the rule table for a regulatory domain (FINRA, SEC, STATE).
    """
    key = (domain or "").upper()
    if key not in CATALOGS:
        raise ValueError(f"Unknown rule catalog: {domain}")
    return CATALOGS[key]
