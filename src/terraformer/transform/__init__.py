"""Core transformations from the IDL model to generation-ready signatures.

The transformation process:
    1. Resolve each type node into a Rust expression (type_resolver)
    2. Collect the foreign symbols a service references (dependencies)
    3. Split procedures into class methods and free procedures (partitioner)

Example:
-------
    >>> from terraformer.transform import extract_dependencies, partition_procedures
    >>>
    >>> deps = extract_dependencies(service, "SpaceCenter")
    >>> parts = partition_procedures(service, "SpaceCenter")
    >>> "get_Name" in parts.methods["Vessel"]
    True
"""

from terraformer.transform.dependencies import dependency_modules, extract_dependencies
from terraformer.transform.partitioner import (
    ParamSignature,
    PartitionedProcedures,
    ProcedureSignature,
    ReturnSignature,
    partition_procedures,
)
from terraformer.transform.type_resolver import (
    ResolvedType,
    TypeKind,
    child_types,
    module_name,
    qualified_name,
    resolve_type,
)

__all__ = [
    "ParamSignature",
    "PartitionedProcedures",
    "ProcedureSignature",
    "ResolvedType",
    "ReturnSignature",
    "TypeKind",
    "child_types",
    "dependency_modules",
    "extract_dependencies",
    "module_name",
    "partition_procedures",
    "qualified_name",
    "resolve_type",
]
