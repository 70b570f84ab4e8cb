"""Main validator combining all validation rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from terraformer.validation.base import CompositeValidator
from terraformer.validation.errors import ValidationResult
from terraformer.validation.rules import (
    MethodReceiverValidator,
    MissingDocumentationValidator,
    TypeArityValidator,
    TypeReferenceValidator,
)

if TYPE_CHECKING:
    from terraformer.models.service import ServiceFile


class ServiceFileValidator:
    """Main validator for service files.

    Combines structural checks (container arity), reference checks and
    naming-convention checks.
    """

    def __init__(self, strict: bool = False, check_documentation: bool = True) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors in validate_and_raise.
            check_documentation: Whether to warn about empty documentation.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            TypeArityValidator(),
            TypeReferenceValidator(),
            MethodReceiverValidator(),
        )
        if check_documentation:
            self._validator.add(MissingDocumentationValidator())

    def validate(self, doc: ServiceFile) -> ValidationResult:
        """Validate a service file.

        Returns
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(doc, result)
        return result

    def validate_and_raise(self, doc: ServiceFile) -> ValidationResult:
        """Validate and raise exception if invalid.

        Raises
        ------
            ValidationError: If validation fails.

        """
        result = self.validate(doc)

        if not result.is_valid:
            raise ValidationError(result)

        if self.strict and result.warnings:
            raise ValidationError(result)

        return result


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)
