from abc import ABC, abstractmethod
from typing import Optional

from advisorcomply.models.compliance_result import ComplianceResult


class DomainCheck(ABC):
    """
    Base class for the five regulatory domain checks.
    """

    @abstractmethod
    def domain(self) -> str:
        """Return the domain key (e.g. finra_compliance)."""
        pass

    @abstractmethod
    def evaluate(self, content: Optional[str], advisor_id: Optional[str] = None) -> ComplianceResult:
        """
        Evaluate content and return a single ComplianceResult.
        """
        pass
