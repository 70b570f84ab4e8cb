"""Semantic validation of service files."""

from terraformer.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from terraformer.validation.validator import (
    ServiceFileValidator,
    ValidationError,
)

__all__ = [
    "ErrorCodes",
    "ServiceFileValidator",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
