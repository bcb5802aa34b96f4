import pytest

from advisorcomply.models.validation import RiskLevel
from advisorcomply.quick_check import generate_compliance_disclaimers, quick_compliance_check
from advisorcomply.remediation.modifications import (
    INVESTMENT_ADVICE_DISCLAIMER,
    NO_GUARANTEE_DISCLAIMER,
    PAST_PERFORMANCE_DISCLAIMER,
)

CLEAN = "Had a productive meeting about financial planning"


@pytest.mark.parametrize("content, expected_issue, expected_level", [
    ("I recommend buying Apple stock", "Content may contain investment advice", RiskLevel.HIGH),
    ("Had a meeting with John Smith", "Content may contain client names", RiskLevel.CRITICAL),
    ("Our portfolio returned 15% last year", "Content may contain performance claims", RiskLevel.MEDIUM),
    ("This investment is guaranteed to make money", "Content may contain guarantee language", RiskLevel.HIGH),
])
def test_quick_check_flags_issue(content, expected_issue, expected_level):
    result = quick_compliance_check(content)

    assert not result.is_compliant
    assert expected_issue in result.issues
    assert result.risk_level == expected_level


@pytest.mark.parametrize("content", [CLEAN, "", None])
def test_quick_check_clean(content):
    result = quick_compliance_check(content)

    assert result.is_compliant
    assert result.issues == ()
    assert result.risk_level == RiskLevel.LOW


def test_performance_does_not_lower_existing_level():
    result = quick_compliance_check("John Smith saw a great return")

    assert result.risk_level == RiskLevel.CRITICAL


def test_quick_check_accepts_assure_variants():
    assert not quick_compliance_check("We assure you of results").is_compliant


def test_quick_check_to_dict():
    payload = quick_compliance_check("I recommend buying Apple stock").to_dict()

    assert payload == {
        "is_compliant": False,
        "issues": ["Content may contain investment advice"],
        "risk_level": "high",
    }


def test_disclaimers_for_investment_advice():
    assert INVESTMENT_ADVICE_DISCLAIMER in generate_compliance_disclaimers("I recommend buying Tesla stock")


def test_disclaimers_for_performance_claims():
    assert PAST_PERFORMANCE_DISCLAIMER in generate_compliance_disclaimers("Our portfolio returned 20% last year")


def test_disclaimers_for_guarantees():
    disclaimers = generate_compliance_disclaimers("This investment is guaranteed to make money")

    assert NO_GUARANTEE_DISCLAIMER in disclaimers


def test_multiple_disclaimers_keep_order():
    content = (
        "I recommend buying Apple stock. Our portfolio returned 15% last year "
        "and this investment is guaranteed to make money."
    )

    assert generate_compliance_disclaimers(content) == [
        INVESTMENT_ADVICE_DISCLAIMER,
        PAST_PERFORMANCE_DISCLAIMER,
        NO_GUARANTEE_DISCLAIMER,
    ]


@pytest.mark.parametrize("content", [CLEAN, "", None])
def test_no_disclaimers_for_clean_content(content):
    assert generate_compliance_disclaimers(content) == []
