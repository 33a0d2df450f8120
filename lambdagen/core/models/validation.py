"""Validation result types shared by domain and chain checks."""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(BaseModel):
    """A single problem found while validating a configuration."""

    severity: Severity
    category: str
    message: str

    def __str__(self) -> str:
        return f"[{self.category}] {self.message}"


class ValidationResult(BaseModel):
    """Outcome of a validation pass. Valid when it holds no errors."""

    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, category: str, message: str) -> None:
        self.issues.append(ValidationIssue(severity=Severity.ERROR, category=category, message=message))

    def add_warning(self, category: str, message: str) -> None:
        self.issues.append(ValidationIssue(severity=Severity.WARNING, category=category, message=message))
