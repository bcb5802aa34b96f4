from typing import Sequence

from advisorcomply.models.compliance_result import ComplianceResult, Severity
from advisorcomply.models.validation import ValidationStatus

# More than this many failed checks forces modification even without HIGH results
MAX_FAILED_BEFORE_MODIFICATION = 2


def resolve_status(results: Sequence[ComplianceResult]) -> ValidationStatus:
    """
    Map domain check results to a validation status.

    Order matters: one CRITICAL rejects, one HIGH forces modification
    even when it is the only failure.
    """
    critical = sum(1 for r in results if r.severity == Severity.CRITICAL)
    high = sum(1 for r in results if r.severity == Severity.HIGH)
    failed = sum(1 for r in results if not r.passed)

    if critical > 0:
        return ValidationStatus.REJECTED
    if high > 0 or failed > MAX_FAILED_BEFORE_MODIFICATION:
        return ValidationStatus.REQUIRES_MODIFICATION
    if failed > 0:
        return ValidationStatus.PENDING
    return ValidationStatus.APPROVED
