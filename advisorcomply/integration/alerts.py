import logging
from datetime import datetime, timezone
from typing import Optional

import requests

from advisorcomply.models.validation import ComplianceValidation

logger = logging.getLogger("advisorcomply.integration")


def build_alert_payload(validation: ComplianceValidation) -> dict:
    # Identifiers and counts only; post text never leaves the service.
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "alert_level": "COMPLIANCE_REVIEW",
        "validation_id": validation.id,
        "content_id": validation.content_id,
        "status": validation.status.value,
        "risk_score": validation.risk_assessment.overall_risk_score,
        "escalated_to": validation.approval_workflow.escalated_to,
        "escalation_reason": validation.approval_workflow.escalation_reason,
        "issue_count": len(validation.risk_assessment.risk_factors),
    }


def trigger_escalation_alert(
    validation: ComplianceValidation,
    webhook_url: Optional[str],
) -> bool:
    """
    Notify the compliance team that a validation needs human review.
    Returns True when the webhook accepted the alert.
    """
    if not webhook_url:
        logger.warning(
            f"Escalation for {validation.id} not sent: COMPLIANCE_ALERT_WEBHOOK_URL is not set."
        )
        return False

    try:
        response = requests.post(
            webhook_url,
            json=build_alert_payload(validation),
            timeout=2.0,
            headers={"Content-Type": "application/json"}
        )
        response.raise_for_status()
        logger.info(f"Escalation alert sent for {validation.id}. Status: {response.status_code}")
        return True

    except requests.exceptions.RequestException as e:
        # Alert delivery must not fail the validation itself.
        logger.error(f"Failed to send escalation alert for {validation.id}: {e}")
        return False
