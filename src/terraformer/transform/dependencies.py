"""Extract the cross-service symbols a service's generated module references."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from terraformer.models.service import Procedure, Service
from terraformer.models.types import ClassType, EnumerationType, Type
from terraformer.transform.type_resolver import child_types, qualified_name

logger = logging.getLogger(__name__)


def signature_types(procedure: Procedure) -> Iterator[Type]:
    """Yield every parameter type of a procedure, then its return type."""
    for param in procedure.parameters:
        yield param.type
    if procedure.return_type is not None:
        yield procedure.return_type


def extract_dependencies(service: Service, service_name: str) -> tuple[str, ...]:
    """Compute the qualified names of foreign classes and enumerations.

    Type nesting depth is controlled by the input document, so the walk uses
    an explicit work list instead of recursion.

    Args:
    ----
        service: The service to scan.
        service_name: Name of the service (references to it are local).

    Returns:
    -------
        Sorted, de-duplicated qualified names.

    Raises:
    ------
        MalformedTypeError: If a container type has the wrong arity.

    """
    found: set[str] = set()
    pending: list[Type] = []

    for procedure in service.procedures.values():
        pending.extend(signature_types(procedure))

    while pending:
        type_ = pending.pop()
        if isinstance(type_, (ClassType, EnumerationType)):
            if type_.service != service_name:
                found.add(qualified_name(type_.service, type_.name))
        else:
            pending.extend(child_types(type_))

    dependencies = tuple(sorted(found))
    logger.debug("Service %s depends on %s", service_name, dependencies or "nothing")
    return dependencies


def dependency_modules(dependencies: Iterable[str]) -> tuple[str, ...]:
    """Return the sorted, distinct module prefixes of qualified names."""
    return tuple(sorted({dep.split("::", 1)[0] for dep in dependencies}))
