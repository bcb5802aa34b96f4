import pytest

from advisorcomply.config import Settings
from advisorcomply.models.audit_entry import AuditAction
from advisorcomply.models.compliance_result import Severity
from advisorcomply.models.validation import RiskLevel, ValidationStatus, ValidationType
from advisorcomply.orchestrator.engine import (
    ComplianceEngine,
    get_engine,
    validate_content_compliance,
)
from advisorcomply.remediation.modifications import (
    INVESTMENT_ADVICE_DISCLAIMER,
    PAST_PERFORMANCE_DISCLAIMER,
)
from advisorcomply.rules.catalog import KNOWN_RULE_IDS
from advisorcomply.rules.client_privacy import NameDetector, PRIVACY_RULE_IDS
from fixtures.sample_posts import (
    ADVICE_WITH_CLIENT_NAME_POST,
    CLEAN_POST,
    CREDIT_CARD_POST,
    EVERYTHING_POST,
    GUARANTEE_ONLY_POST,
    UNFORMATTED_SSN_POST,
)


@pytest.fixture
def engine():
    return ComplianceEngine()


# ============================================================
# SCENARIOS
# ============================================================

def test_clean_post_is_approved(engine):
    result = engine.validate_content(CLEAN_POST, "advisor-123")

    assert result.status == ValidationStatus.APPROVED
    assert result.risk_assessment.overall_risk_score == 25
    assert result.risk_assessment.risk_level == RiskLevel.LOW
    assert result.content_modifications.injected_disclaimers == ()
    assert len(result.audit_trail) == 1
    assert result.approval_workflow.escalated_to is None
    assert all(r.passed for r in result.compliance_checks.as_list())


def test_guarantee_alone_requires_modification(engine):
    result = engine.validate_content(GUARANTEE_ONLY_POST, "advisor-123")

    assert result.status == ValidationStatus.REQUIRES_MODIFICATION
    assert result.compliance_checks.finra_compliance.rule_violations == ("FINRA_2210",)
    assert result.compliance_checks.finra_compliance.severity == Severity.HIGH
    assert result.risk_assessment.overall_risk_score == 45
    assert result.risk_assessment.mitigation_required
    assert result.approval_workflow.escalated_to == "compliance-team"


def test_advice_with_client_name_is_rejected(engine):
    result = engine.validate_content(ADVICE_WITH_CLIENT_NAME_POST, "advisor-123")
    checks = result.compliance_checks

    assert result.status == ValidationStatus.REJECTED
    assert checks.finra_compliance.severity == Severity.CRITICAL
    assert checks.finra_compliance.rule_violations == ("FINRA_2210", "FINRA_2212")
    assert checks.client_privacy_compliance.rule_violations == ("CLIENT_PRIVACY_001",)
    assert INVESTMENT_ADVICE_DISCLAIMER in result.content_modifications.injected_disclaimers
    assert "Investment advice must include appropriate disclaimers" in result.risk_assessment.risk_factors
    assert "Content may contain client names" in result.risk_assessment.risk_factors
    assert result.risk_assessment.overall_risk_score == 95
    assert result.approval_workflow.is_escalated


def test_credit_card_is_rejected(engine):
    result = engine.validate_content(CREDIT_CARD_POST, "advisor-123")
    privacy = result.compliance_checks.client_privacy_compliance

    assert privacy.rule_violations == ("CLIENT_PRIVACY_002",)
    assert privacy.severity == Severity.CRITICAL
    assert result.status == ValidationStatus.REJECTED
    assert result.content_modifications.removed_content == ("Remove sensitive financial information",)


def test_unformatted_ssn_is_rejected_and_escalated(engine):
    result = engine.validate_content(UNFORMATTED_SSN_POST, "advisor-123")

    assert result.status == ValidationStatus.REJECTED
    assert result.approval_workflow.escalated_to is not None


def test_score_is_capped(engine):
    result = engine.validate_content(EVERYTHING_POST, "advisor-123")

    assert result.status == ValidationStatus.REJECTED
    assert result.risk_assessment.overall_risk_score == 100


def test_multiple_issues_yield_multiple_disclaimers(engine):
    content = (
        "I recommend buying Tesla stock to John Smith. Our portfolio returned 25% last year "
        "and this investment is guaranteed to make money."
    )
    result = engine.validate_content(content, "advisor-123")

    assert result.status == ValidationStatus.REJECTED
    assert result.risk_assessment.overall_risk_score > 90
    assert len(result.compliance_checks.finra_compliance.issues) > 1
    assert result.content_modifications.injected_disclaimers == (
        INVESTMENT_ADVICE_DISCLAIMER,
        PAST_PERFORMANCE_DISCLAIMER,
    )


@pytest.mark.parametrize("content", ["", None])
def test_empty_content_is_approved(engine, content):
    result = engine.validate_content(content, "advisor-123")

    assert result.status == ValidationStatus.APPROVED
    assert result.risk_assessment.overall_risk_score == 25
    assert result.content_modifications.original_content == ""


# ============================================================
# RECORD SHAPE & INVARIANTS
# ============================================================

def test_record_metadata(engine):
    result = engine.validate_content(CLEAN_POST, "advisor-123", "meeting-9")

    assert result.id.startswith("compliance-")
    assert result.content_id.startswith("content-")
    assert result.advisor_id == "advisor-123"
    assert result.meeting_id == "meeting-9"
    assert result.validation_type == ValidationType.PRE_PUBLICATION
    assert result.created_at == result.updated_at


def test_audit_trail_starts_with_system_created_entry(engine):
    result = engine.validate_content("Test content for audit trail", "advisor-123")

    assert len(result.audit_trail) == 1
    assert result.audit_trail[0].action == AuditAction.CREATED
    assert result.audit_trail[0].performed_by == "system"


def test_ids_are_unique_per_call(engine):
    first = engine.validate_content(CLEAN_POST, "advisor-123")
    second = engine.validate_content(CLEAN_POST, "advisor-123")

    assert first.id != second.id
    assert first.content_id != second.content_id


@pytest.mark.parametrize("content", [
    CLEAN_POST, GUARANTEE_ONLY_POST, ADVICE_WITH_CLIENT_NAME_POST, EVERYTHING_POST,
])
def test_validation_is_idempotent(engine, content):
    first = engine.validate_content(content, "advisor-123")
    second = engine.validate_content(content, "advisor-123")

    assert first.status == second.status
    assert first.risk_assessment == second.risk_assessment
    assert first.compliance_checks == second.compliance_checks
    assert first.content_modifications == second.content_modifications


@pytest.mark.parametrize("content", [
    CLEAN_POST, GUARANTEE_ONLY_POST, ADVICE_WITH_CLIENT_NAME_POST,
    CREDIT_CARD_POST, EVERYTHING_POST, "our company office",
])
def test_status_invariants(engine, content):
    result = engine.validate_content(content, "advisor-123")
    results = result.compliance_checks.as_list()

    assert 0 <= result.risk_assessment.overall_risk_score <= 100
    if result.status == ValidationStatus.REJECTED:
        assert any(r.severity == Severity.CRITICAL for r in results)
    if result.status == ValidationStatus.APPROVED:
        assert all(r.passed for r in results)
    for r in results:
        assert set(r.rule_violations) <= KNOWN_RULE_IDS | PRIVACY_RULE_IDS


def test_state_only_issues_are_pending(engine):
    result = engine.validate_content("our company office", "advisor-123")

    assert result.compliance_checks.state_regulation_compliance.severity == Severity.MEDIUM
    assert result.status == ValidationStatus.PENDING
    assert not result.approval_workflow.is_escalated


# ============================================================
# INJECTION
# ============================================================

def test_settings_drive_escalation():
    engine = ComplianceEngine(settings=Settings(escalation_score_threshold=20, escalation_team="cco"))
    result = engine.validate_content(CLEAN_POST, "advisor-123")

    assert result.status == ValidationStatus.APPROVED
    assert result.approval_workflow.escalated_to == "cco"


def test_custom_name_detector_is_used():
    class NoNames(NameDetector):
        def find_names(self, text):
            return []

    engine = ComplianceEngine(name_detector=NoNames())
    result = engine.validate_content("Notes from Wall Street", "advisor-123")

    assert result.compliance_checks.client_privacy_compliance.passed


def test_module_level_helper_uses_shared_engine():
    assert get_engine() is get_engine()

    result = validate_content_compliance(CLEAN_POST, "advisor-123")
    assert result.status == ValidationStatus.APPROVED


def test_returned_results_cannot_be_mutated(engine):
    result = engine.validate_content(ADVICE_WITH_CLIENT_NAME_POST, "advisor-123")
    finra = result.compliance_checks.finra_compliance

    with pytest.raises(AttributeError):
        finra.issues.append("injected")
    with pytest.raises(AttributeError):
        result.risk_assessment.risk_factors.append("injected")
    with pytest.raises(AttributeError):
        result.content_modifications.injected_disclaimers.clear()

    again = engine.validate_content(ADVICE_WITH_CLIENT_NAME_POST, "advisor-123")
    assert again.compliance_checks.finra_compliance.issues == finra.issues
