"""Validator base classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from terraformer.validation.errors import ValidationResult

if TYPE_CHECKING:
    from terraformer.models.service import Service, ServiceFile


class BaseValidator(ABC):
    """A check over a whole service file."""

    @abstractmethod
    def validate(self, doc: ServiceFile, result: ValidationResult) -> None:
        """Add the issues found in doc to result."""


class ServiceValidator(BaseValidator):
    """A check applied to each service independently, in name order."""

    def validate(self, doc: ServiceFile, result: ValidationResult) -> None:
        for service_name, service in doc.iter_services():
            self.validate_service(service_name, service, result)

    @abstractmethod
    def validate_service(
        self,
        service_name: str,
        service: Service,
        result: ValidationResult,
    ) -> None:
        """Validate one service.

        Args:
        ----
            service_name: Name of the service in the document.
            service: The service definition.
            result: The result object to add issues to.

        """


class CompositeValidator(BaseValidator):
    """Runs several validators in order against one shared result."""

    def __init__(self, *validators: BaseValidator) -> None:
        self.validators = list(validators)

    def add(self, validator: BaseValidator) -> None:
        self.validators.append(validator)

    def validate(self, doc: ServiceFile, result: ValidationResult) -> None:
        for validator in self.validators:
            validator.validate(doc, result)
