import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value if value else None


@dataclass(frozen=True)
class Settings:
    escalation_score_threshold: int = 70
    escalation_team: str = "compliance-team"
    engine_version: str = "advisorcomply-1.0.0"
    audit_log_file: str = "audit.log"
    validation_store_dir: Optional[str] = None
    alert_webhook_url: Optional[str] = None
    appinsights_connection_string: Optional[str] = None
    name_detector: str = "regex"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            escalation_score_threshold=_int_env("ESCALATION_SCORE_THRESHOLD", 70),
            escalation_team=os.getenv("ESCALATION_TEAM", "compliance-team"),
            engine_version=os.getenv("ENGINE_VERSION", "advisorcomply-1.0.0"),
            audit_log_file=os.getenv("AUDIT_LOG_FILE", "audit.log"),
            validation_store_dir=_optional_env("VALIDATION_STORE_DIR"),
            alert_webhook_url=_optional_env("COMPLIANCE_ALERT_WEBHOOK_URL"),
            appinsights_connection_string=_optional_env("APPLICATIONINSIGHTS_CONNECTION_STRING"),
            name_detector=os.getenv("NAME_DETECTOR", "regex").strip().lower(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
