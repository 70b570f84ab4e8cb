"""Validation issue types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Sort key placing errors first."""
        return list(ValidationSeverity).index(self)


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique issue code (e.g., 'E001', 'W002')."""

    message: str
    """Human-readable message."""

    severity: ValidationSeverity
    """Severity level."""

    path: str | None = None
    """Dotted path to the offending element (e.g., 'SpaceCenter.procedures.Foo')."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.path:
            parts.append(f"at {self.path}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get only info-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.INFO]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def _add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        path: str,
        suggestion: str | None,
        context: dict[str, Any],
    ) -> None:
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                path=path,
                suggestion=suggestion,
                context=context,
            )
        )

    def add_error(
        self, code: str, message: str, path: str, suggestion: str | None = None, **context: Any
    ) -> None:
        """Add an error issue."""
        self._add(ValidationSeverity.ERROR, code, message, path, suggestion, context)

    def add_warning(
        self, code: str, message: str, path: str, suggestion: str | None = None, **context: Any
    ) -> None:
        """Add a warning issue."""
        self._add(ValidationSeverity.WARNING, code, message, path, suggestion, context)

    def add_info(
        self, code: str, message: str, path: str, suggestion: str | None = None, **context: Any
    ) -> None:
        """Add an informational issue."""
        self._add(ValidationSeverity.INFO, code, message, path, suggestion, context)

    def sorted_issues(self) -> list[ValidationIssue]:
        """Issues ordered by severity, then path, then code."""
        return sorted(self.issues, key=lambda i: (i.severity.rank, i.path or "", i.code))

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard validation issue codes."""

    # E0xx - Reference errors
    E001_UNDEFINED_CLASS = "E001"
    E002_UNDEFINED_ENUMERATION = "E002"

    # E2xx - Structure errors
    E200_MALFORMED_TYPE = "E200"

    # W0xx - Warnings
    W002_SUSPICIOUS_RECEIVER = "W002"
    W003_MISSING_DOCUMENTATION = "W003"

    # I0xx - Informational
    I001_EXTERNAL_SERVICE = "I001"
