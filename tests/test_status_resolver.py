from advisorcomply.decision.status import resolve_status
from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.models.validation import ValidationStatus


def _passing():
    return ComplianceResult(passed=True)


def _failing(severity):
    return ComplianceResult(passed=False, issues=("issue",), severity=severity)


def _with(*failures):
    return list(failures) + [_passing() for _ in range(5 - len(failures))]


def test_all_passed_is_approved():
    assert resolve_status(_with()) == ValidationStatus.APPROVED


def test_any_critical_is_rejected():
    assert resolve_status(_with(_failing(Severity.CRITICAL))) == ValidationStatus.REJECTED


def test_single_high_requires_modification():
    assert resolve_status(_with(_failing(Severity.HIGH))) == ValidationStatus.REQUIRES_MODIFICATION


def test_one_or_two_medium_failures_are_pending():
    assert resolve_status(_with(_failing(Severity.MEDIUM))) == ValidationStatus.PENDING
    assert resolve_status(
        _with(_failing(Severity.MEDIUM), _failing(Severity.MEDIUM))
    ) == ValidationStatus.PENDING


def test_more_than_two_failures_require_modification():
    results = _with(
        _failing(Severity.MEDIUM),
        _failing(Severity.MEDIUM),
        _failing(Severity.LOW),
    )
    assert resolve_status(results) == ValidationStatus.REQUIRES_MODIFICATION


def test_critical_wins_over_high():
    results = _with(_failing(Severity.HIGH), _failing(Severity.CRITICAL))
    assert resolve_status(results) == ValidationStatus.REJECTED
