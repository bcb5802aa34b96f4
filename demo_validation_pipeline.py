import shutil

from advisorcomply.orchestrator.engine import ComplianceEngine
from advisorcomply.models.validation import ValidationStatus

# --- AUDIT-STYLE UI THEME ---
class Colors:
    OKGREEN = '\033[92m'     # Approved
    WARNING = '\033[93m'     # Pending / modification
    FAIL = '\033[91m'        # Rejected

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD

STATUS_COLORS = {
    ValidationStatus.APPROVED: Colors.OKGREEN,
    ValidationStatus.PENDING: Colors.WARNING,
    ValidationStatus.REQUIRES_MODIFICATION: Colors.WARNING,
    ValidationStatus.REJECTED: Colors.FAIL,
}

def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)

def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")

def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")

# --- MAIN DEMO ---
def run_demo():
    engine = ComplianceEngine()

    post = (
        "Great meeting with John Smith today. I recommend you buy this "
        "guaranteed fund, it returned 12% last year."
    )

    # 1. SETUP
    print_section("Scenario Initialization")
    print_kv("Advisor", "advisor-demo-001")
    print_kv("Meeting", "meeting-demo-042")
    print_kv("Draft Post", post)

    validation = engine.validate_content(post, "advisor-demo-001", "meeting-demo-042")

    # 2. CHECKS
    print_section("Step 1: Domain Checks")
    for domain, result in validation.compliance_checks.to_dict().items():
        color = Colors.OKGREEN if result["passed"] else Colors.FAIL
        print_kv(domain, f"{'PASS' if result['passed'] else 'FAIL'} ({result['severity']})", color)
        for rule_id, issue in zip(result["rule_violations"], result["issues"]):
            print(f"   ├─ {Colors.BOLD}{rule_id}{Colors.ENDC} : {issue}")

    # 3. SCORING
    print_section("Step 2: Risk Assessment")
    risk = validation.risk_assessment
    print_kv("Risk Score", risk.overall_risk_score, Colors.BOLD)
    print_kv("Risk Level", risk.risk_level.value.upper())
    print_kv("Mitigation Required", risk.mitigation_required)

    # 4. MODIFICATIONS
    print_section("Step 3: Required Modifications")
    for disclaimer in validation.content_modifications.injected_disclaimers:
        print(f"  + {disclaimer}")
    for change in validation.content_modifications.removed_content:
        print(f"  - {change}")

    # 5. VERDICT
    print_section("Step 4: Final Verdict")
    status_color = STATUS_COLORS.get(validation.status, Colors.WARNING)
    print(f"{Colors.BOLD}STATUS:{Colors.ENDC}     [{status_color}{validation.status.value.upper()}{Colors.ENDC}]")
    print(f"{Colors.BOLD}ESCALATED:{Colors.ENDC}  {validation.approval_workflow.escalated_to or 'no'}")
    print(f"{Colors.BOLD}AUDIT:{Colors.ENDC}      {len(validation.audit_trail)} entry")

    print_separator("=")
    print("\n")

if __name__ == "__main__":
    run_demo()
