"""Semantic checks over a loaded service file.

None of these checks affect code generation; they report problems that the
schema cannot express.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from terraformer.errors import MalformedTypeError
from terraformer.models.types import ClassType, EnumerationType, Type
from terraformer.transform.partitioner import split_method_name
from terraformer.transform.type_resolver import child_types
from terraformer.validation.base import BaseValidator, ServiceValidator
from terraformer.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from terraformer.models.service import Service, ServiceFile


def _signature_types(service_name: str, service: Service) -> Iterator[tuple[str, Type]]:
    """Yield (path, type) for every parameter and return type of a service."""
    for proc_name, procedure in service.procedures.items():
        base = f"{service_name}.procedures.{proc_name}"
        for index, param in enumerate(procedure.parameters):
            yield f"{base}.parameters[{index}]", param.type
        if procedure.return_type is not None:
            yield f"{base}.return_type", procedure.return_type


def _walk(path: str, type_: Type, result: ValidationResult) -> Iterator[Type]:
    """Yield a type and all of its descendants, reporting malformed containers."""
    pending = [type_]
    while pending:
        current = pending.pop()
        yield current
        try:
            pending.extend(child_types(current))
        except MalformedTypeError as e:
            result.add_error(
                code=ErrorCodes.E200_MALFORMED_TYPE,
                message=str(e),
                path=path,
                construct=e.construct,
                found=e.found,
            )


class TypeArityValidator(ServiceValidator):
    """Validates that list/set types have one child and dictionaries two."""

    def validate_service(self, service_name: str, service: Service, result: ValidationResult) -> None:
        for path, type_ in _signature_types(service_name, service):
            # _walk reports arity errors as it goes
            for _ in _walk(path, type_, result):
                pass


class TypeReferenceValidator(BaseValidator):
    """Validates that class and enumeration references point to declarations.

    References to services absent from the document are legal (they are
    generated from another file) and only reported as information.
    """

    def validate(self, doc: ServiceFile, result: ValidationResult) -> None:
        """Check every class/enumeration reference in every signature."""
        external: set[str] = set()
        scratch = ValidationResult()

        for service_name, service in doc.iter_services():
            for path, type_ in _signature_types(service_name, service):
                for node in _walk(path, type_, scratch):
                    if not isinstance(node, (ClassType, EnumerationType)):
                        continue
                    if node.service not in doc:
                        external.add(node.service)
                        continue
                    self._check_declared(node, doc.services[node.service], path, result)

        for service in sorted(external):
            result.add_info(
                code=ErrorCodes.I001_EXTERNAL_SERVICE,
                message=f"Service '{service}' is referenced but not defined in this file",
                path=service,
                suggestion="Generate it from its own service file into the same directory",
            )

    def _check_declared(
        self,
        node: ClassType | EnumerationType,
        owner: Service,
        path: str,
        result: ValidationResult,
    ) -> None:
        if isinstance(node, ClassType):
            if node.name not in owner.classes:
                result.add_error(
                    code=ErrorCodes.E001_UNDEFINED_CLASS,
                    message=f"Class '{node.service}.{node.name}' is not declared",
                    path=path,
                    suggestion=f"Declare '{node.name}' in the classes of '{node.service}'",
                    available=sorted(owner.classes),
                )
        elif node.name not in owner.enumerations:
            result.add_error(
                code=ErrorCodes.E002_UNDEFINED_ENUMERATION,
                message=f"Enumeration '{node.service}.{node.name}' is not declared",
                path=path,
                suggestion=f"Declare '{node.name}' in the enumerations of '{node.service}'",
                available=sorted(owner.enumerations),
            )


class MethodReceiverValidator(ServiceValidator):
    """Flags methods whose first parameter is not an instance of their class.

    Methods are recognized by name alone, so a procedure whose prefix happens
    to match an unrelated class becomes a method and loses its first
    parameter.
    """

    def validate_service(self, service_name: str, service: Service, result: ValidationResult) -> None:
        class_names = frozenset(service.classes)
        for proc_name, procedure in sorted(service.procedures.items()):
            split = split_method_name(proc_name, class_names)
            if split is None:
                continue
            owner = split[0]
            path = f"{service_name}.procedures.{proc_name}"

            if not procedure.parameters:
                result.add_warning(
                    code=ErrorCodes.W002_SUSPICIOUS_RECEIVER,
                    message=f"'{proc_name}' is treated as a method of '{owner}' "
                    "but has no receiver parameter",
                    path=path,
                )
                continue

            receiver = procedure.parameters[0]
            if not (
                isinstance(receiver.type, ClassType)
                and receiver.type.service == service_name
                and receiver.type.name == owner
            ):
                result.add_warning(
                    code=ErrorCodes.W002_SUSPICIOUS_RECEIVER,
                    message=f"'{proc_name}' is treated as a method of '{owner}' "
                    f"but its first parameter '{receiver.name}' "
                    f"is not a '{owner}'; it will be dropped",
                    path=f"{path}.parameters[0]",
                    suggestion="Rename the procedure if it is not a method",
                )


class MissingDocumentationValidator(ServiceValidator):
    """Warns about services, classes and enumerations without documentation."""

    def validate_service(self, service_name: str, service: Service, result: ValidationResult) -> None:
        undocumented = [] if service.documentation.strip() else [service_name]
        undocumented += [
            f"{service_name}.classes.{name}"
            for name, class_def in sorted(service.classes.items())
            if not class_def.documentation.strip()
        ]
        undocumented += [
            f"{service_name}.enumerations.{name}"
            for name, enum_def in sorted(service.enumerations.items())
            if not enum_def.documentation.strip()
        ]

        for path in undocumented:
            result.add_warning(
                code=ErrorCodes.W003_MISSING_DOCUMENTATION,
                message="Documentation is empty",
                path=path,
            )
