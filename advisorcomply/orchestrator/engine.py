import logging
import time
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from advisorcomply.audit.trail import create_audit_trail
from advisorcomply.config import Settings
from advisorcomply.decision.status import resolve_status
from advisorcomply.models.audit_entry import AuditAction
from advisorcomply.models.compliance_result import ComplianceResult
from advisorcomply.models.validation import (
    ComplianceChecks,
    ComplianceValidation,
    ValidationType,
)
from advisorcomply.remediation.modifications import generate_modifications
from advisorcomply.risk.aggregator import aggregate_risk
from advisorcomply.rules.base import DomainCheck
from advisorcomply.rules.client_privacy import (
    ClientPrivacyCheck,
    NameDetector,
    RegexNameDetector,
)
from advisorcomply.rules.finra import FINRAComplianceCheck
from advisorcomply.rules.firm_policy import FirmPolicyCheck, FirmPolicyProvider
from advisorcomply.rules.sec import SECComplianceCheck
from advisorcomply.rules.state import StateRegulationCheck
from advisorcomply.workflow.approval import build_approval_workflow

logger = logging.getLogger("advisorcomply.engine")

NAME_DETECTORS = ("regex", "presidio")


def build_name_detector(kind: str) -> NameDetector:
    """
    Resolve the configured name detector. Presidio loads a spaCy model,
    so it is imported only when selected.
    """
    if kind == "regex":
        return RegexNameDetector()
    if kind == "presidio":
        from advisorcomply.ml.presidio_names import PresidioNameDetector
        return PresidioNameDetector()
    raise ValueError(f"Unknown name detector: {kind}. Expected one of {NAME_DETECTORS}")


def _generate_id(prefix: str) -> str:
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


class ComplianceEngine:
    """
    Runs the five domain checks over a piece of generated content and
    assembles a ComplianceValidation.

    Holds no per-call state; build one at startup and share it.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        name_detector: Optional[NameDetector] = None,
        firm_policy_provider: Optional[FirmPolicyProvider] = None,
    ):
        self.settings = settings or Settings()
        self.finra_check = FINRAComplianceCheck()
        self.sec_check = SECComplianceCheck()
        self.firm_policy_check = FirmPolicyCheck(firm_policy_provider)
        if name_detector is None:
            name_detector = build_name_detector(self.settings.name_detector)
        self.client_privacy_check = ClientPrivacyCheck(name_detector)
        self.state_regulation_check = StateRegulationCheck()

    @property
    def checks(self) -> List[DomainCheck]:
        return [
            self.finra_check,
            self.sec_check,
            self.firm_policy_check,
            self.client_privacy_check,
            self.state_regulation_check,
        ]

    def run_checks(self, content: Optional[str], advisor_id: str) -> ComplianceChecks:
        # No data dependency between checks; order only fixes the output keys.
        results = {check.domain(): check.evaluate(content, advisor_id) for check in self.checks}
        return ComplianceChecks(**results)

    def validate_content(
        self,
        content: Optional[str],
        advisor_id: str,
        meeting_id: Optional[str] = None,
    ) -> ComplianceValidation:
        validation_id = _generate_id("compliance")
        content_id = _generate_id("content")

        logger.info(f"Starting compliance validation for content: {content_id}")

        checks = self.run_checks(content, advisor_id)
        results: List[ComplianceResult] = checks.as_list()

        risk_assessment = aggregate_risk(results)
        status = resolve_status(results)
        content_modifications = generate_modifications(content, results)

        approval_workflow = build_approval_workflow(
            risk_assessment,
            status,
            threshold=self.settings.escalation_score_threshold,
            escalation_team=self.settings.escalation_team,
        )

        audit_trail = create_audit_trail(validation_id, AuditAction.CREATED, "system")
        now = datetime.now(timezone.utc)

        validation = ComplianceValidation(
            id=validation_id,
            content_id=content_id,
            advisor_id=advisor_id,
            meeting_id=meeting_id,
            validation_type=ValidationType.PRE_PUBLICATION,
            status=status,
            compliance_checks=checks,
            risk_assessment=risk_assessment,
            content_modifications=content_modifications,
            approval_workflow=approval_workflow,
            audit_trail=audit_trail,
            created_at=now,
            updated_at=now,
        )

        logger.info(f"Compliance validation completed: {validation_id}, Status: {status.value}")
        return validation


# Global variable to hold the default instance
_engine_instance: Optional[ComplianceEngine] = None


def get_engine() -> ComplianceEngine:
    """
    Lazily build the default engine. Services should construct their own
    ComplianceEngine and inject it; this exists for scripts and quick use.
    """
    global _engine_instance
    if _engine_instance is None:
        from advisorcomply.config import get_settings
        _engine_instance = ComplianceEngine(settings=get_settings())
    return _engine_instance


def validate_content_compliance(
    content: Optional[str],
    advisor_id: str,
    meeting_id: Optional[str] = None,
) -> ComplianceValidation:
    return get_engine().validate_content(content, advisor_id, meeting_id)
