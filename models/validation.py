"""
Validation result models
"""

from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class IssueCategory(str, Enum):
    CONFIG = "config"
    SUPPLIER = "supplier"
    BUYER = "buyer"
    INVOICE = "invoice"
    ITEMS = "items"
    TAX = "tax"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class Profile(str, Enum):
    """Target compliance regime"""
    NATIONAL = "NATIONAL"  # LHDN MyInvois
    NETWORK = "NETWORK"    # PEPPOL

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        aliases = {
            'NATIONAL': cls.NATIONAL,
            'LHDN': cls.NATIONAL,
            'NETWORK': cls.NETWORK,
            'PEPPOL': cls.NETWORK,
        }
        return aliases.get(value.strip().upper())


class ValidationIssue(BaseModel):
    """A single detected problem; two issues are equal when code and field match"""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    category: IssueCategory
    severity: Severity
    code: str

    def __eq__(self, other):
        if not isinstance(other, ValidationIssue):
            return NotImplemented
        return (self.code, self.field) == (other.code, other.field)

    def __hash__(self):
        return hash((self.code, self.field))


class ValidationSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_errors: int = 0
    total_warnings: int = 0
    by_category: Dict[str, int] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """
    Complete validation result

    is_valid and summary are derived from the issue lists so they can never
    disagree with them.
    """

    model_config = ConfigDict(frozen=True)

    errors: Tuple[ValidationIssue, ...] = ()
    warnings: Tuple[ValidationIssue, ...] = ()

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @computed_field
    @property
    def summary(self) -> ValidationSummary:
        by_category: Dict[str, int] = {}
        for issue in self.errors:
            by_category[issue.category.value] = by_category.get(issue.category.value, 0) + 1

        return ValidationSummary(
            total_errors=len(self.errors),
            total_warnings=len(self.warnings),
            by_category=by_category,
        )

    @property
    def error_codes(self) -> List[str]:
        return [issue.code for issue in self.errors]

    @property
    def warning_codes(self) -> List[str]:
        return [issue.code for issue in self.warnings]

    def has_issue(self, code: str) -> bool:
        return any(issue.code == code for issue in self.errors + self.warnings)


class ReadinessResult(BaseModel):
    """Outcome of the presence-only readiness pre-check"""

    model_config = ConfigDict(frozen=True)

    ready: bool
    issues: List[str] = Field(default_factory=list)
