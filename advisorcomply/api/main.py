import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from advisorcomply.config import get_settings
from advisorcomply.integration.alerts import trigger_escalation_alert
from advisorcomply.orchestrator.engine import ComplianceEngine
from advisorcomply.quick_check import generate_compliance_disclaimers, quick_compliance_check
from advisorcomply.storage import build_store
from advisorcomply.telemetry import (
    emit_exception_telemetry,
    emit_validation_telemetry,
    init_telemetry,
)
from advisorcomply.workflow.approval import ReviewAction, record_review

settings = get_settings()

# --- 1. AUDIT LOGGING ---
logging.basicConfig(
    filename=settings.audit_log_file,
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")

tags_metadata = [
    {
        "name": "Validation",
        "description": "Pre-publication compliance checks for generated posts.",
    },
    {
        "name": "Review",
        "description": "Human approval workflow for escalated validations.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="Advisor Compliance Engine",
    description="""
    **FINRA / SEC compliance layer** for AI-generated advisor social posts.

    * **Domain checks:** FINRA, SEC, firm policy, client privacy, state rules.
    * **Risk decision:** 0-100 score with approved / pending / requires modification / rejected.
    * **Approval workflow:** escalation to the compliance team with an append-only audit trail.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry(settings.appinsights_connection_string)

engine = ComplianceEngine(settings=settings)
store = build_store(settings.validation_store_dir)


# --- 2. MIDDLEWARE: AUDIT TRAIL ---
@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class ValidateRequest(BaseModel):
    content: Optional[str] = None
    advisor_id: str
    meeting_id: Optional[str] = None


class ContentRequest(BaseModel):
    content: Optional[str] = None


class QuickCheckResponse(BaseModel):
    is_compliant: bool
    issues: List[str]
    risk_level: str


class DisclaimersResponse(BaseModel):
    disclaimers: List[str]


class ReviewRequest(BaseModel):
    action: ReviewAction
    reviewer_id: str
    reason: Optional[str] = None


# --- ENDPOINTS ---

@app.post("/validate", tags=["Validation"])
def validate(request: ValidateRequest) -> Dict[str, Any]:
    """
    Run the full compliance pipeline on generated content and store the result.
    """
    try:
        start_time = time.perf_counter()

        validation = engine.validate_content(
            request.content,
            request.advisor_id,
            request.meeting_id,
        )
        store.put(validation)

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        emit_validation_telemetry(
            latency_ms=latency_ms,
            risk_score=validation.risk_assessment.overall_risk_score,
            status=validation.status.value,
            escalated=validation.approval_workflow.is_escalated,
        )

        if validation.approval_workflow.is_escalated:
            trigger_escalation_alert(validation, settings.alert_webhook_url)

        return validation.to_dict()

    except Exception as e:
        emit_exception_telemetry(e)
        audit_logger.error(f"ENGINE_ERROR: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Compliance validation failed")


@app.post("/quick-check", response_model=QuickCheckResponse, tags=["Validation"])
def quick_check(request: ContentRequest):
    return quick_compliance_check(request.content).to_dict()


@app.post("/disclaimers", response_model=DisclaimersResponse, tags=["Validation"])
def disclaimers(request: ContentRequest):
    return {"disclaimers": generate_compliance_disclaimers(request.content)}


@app.get("/validations/{validation_id}", tags=["Review"])
def get_validation(validation_id: str) -> Dict[str, Any]:
    try:
        validation = store.get(validation_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if validation is None:
        raise HTTPException(status_code=404, detail="Validation not found")
    return validation.to_dict()


@app.post("/validations/{validation_id}/review", tags=["Review"])
def review_validation(validation_id: str, request: ReviewRequest) -> Dict[str, Any]:
    """
    Apply a reviewer decision (approve, reject, request changes, start review).
    """
    def apply(validation):
        return record_review(
            validation,
            request.action,
            request.reviewer_id,
            reason=request.reason,
        )

    try:
        updated = store.update(validation_id, apply)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if updated is None:
        raise HTTPException(status_code=404, detail="Validation not found")

    audit_logger.info(
        f"REVIEW validation={validation_id} action={request.action.value} "
        f"status={updated.status.value}"
    )
    return updated.to_dict()


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "engine_version": settings.engine_version,
        "modules": ["FINRA", "SEC", "FirmPolicy", "ClientPrivacy", "StateRegulation", "AuditTrail"]
    }
