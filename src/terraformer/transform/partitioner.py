"""Recover classes and methods from a service's flat procedure list.

A procedure named ``<Class>_<Method>`` where ``<Class>`` is declared by the
same service is a method of that class; its first parameter is the receiver
and is dropped from the generated signature. Every other procedure is a free
procedure. The match is purely syntactic: a prefix that coincides with an
unrelated class name still produces a method.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from terraformer.casing import to_snake_case
from terraformer.errors import TerraformerError
from terraformer.models.service import ProcParameter, Procedure, Service
from terraformer.transform.type_resolver import TypeKind, resolve_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParamSignature:
    """A normalized parameter.

    Attributes
    ----------
        name: Generated identifier (snake case).
        raw_name: Name as declared in the service file.
        type: Resolved Rust type expression.
        kind: Shape of the resolved type.
        by_ref: Whether the parameter is taken by reference.

    """

    name: str
    raw_name: str
    type: str
    kind: TypeKind
    by_ref: bool


@dataclass(frozen=True)
class ReturnSignature:
    """A resolved return type."""

    type: str
    kind: TypeKind
    is_class: bool
    is_nullable: bool


@dataclass(frozen=True)
class ProcedureSignature:
    """Normalized signature of a free procedure or a method.

    Attributes
    ----------
        rpc_name: Procedure name as declared; used on the wire.
        name: Method name (suffix after the class prefix) or procedure name.
        id: Procedure id from the service file.
        documentation: Documentation string, unmodified.
        params: Parameters in call order, receiver excluded.
        returns: Return description, or None when nothing is returned.
        owner: Owning class for methods, None for free procedures.

    """

    rpc_name: str
    name: str
    id: int
    documentation: str
    params: tuple[ParamSignature, ...]
    returns: ReturnSignature | None
    owner: str | None = None

    @property
    def is_method(self) -> bool:
        return self.owner is not None


@dataclass
class PartitionedProcedures:
    """Methods grouped by class, and free procedures, sorted by name."""

    methods: dict[str, dict[str, ProcedureSignature]] = field(default_factory=dict)
    procedures: dict[str, ProcedureSignature] = field(default_factory=dict)


def check_name_collisions(scope: str, names: list[str]) -> None:
    """Reject distinct names that generate the same snake-case identifier.

    Raises
    ------
        TerraformerError: If two names in scope convert to one identifier.

    """
    seen: dict[str, str] = {}
    for name in sorted(names):
        identifier = to_snake_case(name)
        if identifier in seen:
            raise TerraformerError(
                f"{scope}: '{seen[identifier]}' and '{name}' both generate '{identifier}'"
            )
        seen[identifier] = name


def split_method_name(proc_name: str, class_names: set[str] | frozenset[str]) -> tuple[str, str] | None:
    """Split ``<Class>_<Method>`` into (class, method) if the class is declared.

    Returns None for free procedures, including names with nothing after
    the class prefix.
    """
    prefix, sep, suffix = proc_name.partition("_")
    if sep and suffix and prefix in class_names:
        return prefix, suffix
    return None


def normalize_parameter(param: ProcParameter, service_name: str) -> ParamSignature:
    """Resolve a parameter's type and convert its name."""
    resolved = resolve_type(param.type, service_name)
    return ParamSignature(
        name=to_snake_case(param.name),
        raw_name=param.name,
        type=resolved.expr,
        kind=resolved.kind,
        by_ref=resolved.by_ref,
    )


def normalize_procedure(
    proc_name: str,
    procedure: Procedure,
    service_name: str,
    owner: str | None = None,
    name: str | None = None,
) -> ProcedureSignature:
    """Build the signature of one procedure.

    Args:
    ----
        proc_name: Declared procedure name.
        procedure: The procedure definition.
        service_name: Service being generated.
        owner: Owning class when the procedure is a method.
        name: Method name; defaults to proc_name.

    Returns:
    -------
        The normalized signature. Methods lose their first parameter.

    """
    parameters = procedure.parameters[1:] if owner is not None else procedure.parameters
    params = tuple(normalize_parameter(param, service_name) for param in parameters)

    returns = None
    if procedure.return_type is not None:
        resolved = resolve_type(procedure.return_type, service_name)
        returns = ReturnSignature(
            type=resolved.expr,
            kind=resolved.kind,
            is_class=resolved.kind is TypeKind.CLASS,
            is_nullable=procedure.return_is_nullable,
        )

    return ProcedureSignature(
        rpc_name=proc_name,
        name=name if name is not None else proc_name,
        id=procedure.id,
        documentation=procedure.documentation,
        params=params,
        returns=returns,
        owner=owner,
    )


def partition_procedures(service: Service, service_name: str) -> PartitionedProcedures:
    """Classify every procedure of a service as a method or a free procedure.

    Args:
    ----
        service: The service definition.
        service_name: Name of the service.

    Returns:
    -------
        Methods grouped by class and free procedures, both sorted by name.

    Raises:
    ------
        MalformedTypeError: If any signature type cannot be resolved.
        TerraformerError: If two procedures of one scope generate the same
            function name.

    """
    class_names = frozenset(service.classes)
    methods: dict[str, dict[str, ProcedureSignature]] = {}
    procedures: dict[str, ProcedureSignature] = {}

    for proc_name, procedure in service.procedures.items():
        split = split_method_name(proc_name, class_names)
        if split is None:
            procedures[proc_name] = normalize_procedure(proc_name, procedure, service_name)
            continue

        owner, method_name = split
        logger.debug("%s.%s is a method of %s", service_name, proc_name, owner)
        methods.setdefault(owner, {})[method_name] = normalize_procedure(
            proc_name, procedure, service_name, owner=owner, name=method_name
        )

    check_name_collisions(f"{service_name} procedures", list(procedures))
    for owner, group in methods.items():
        check_name_collisions(f"{service_name}.{owner} methods", list(group))

    return PartitionedProcedures(
        methods={owner: dict(sorted(group.items())) for owner, group in sorted(methods.items())},
        procedures=dict(sorted(procedures.items())),
    )
