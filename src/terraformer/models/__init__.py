"""Pydantic models for kRPC service-definition documents.

Primary Entry Points:
    load_service_file(path): Load and validate a JSON/YAML service file
    validate_service_file(path): Validate and return list of errors
    ServiceFile: Root model for the entire document

Example:
-------
    >>> from terraformer.models import load_service_file
    >>> doc = load_service_file(Path("KRPC.SpaceCenter.json"))
    >>> for name, service in doc.iter_services():
    ...     print(name, len(service.procedures))

Model Hierarchy:
    ServiceFile (root)
    └── Service
        ├── Procedure
        │   └── ProcParameter
        ├── ClassDefinition
        └── EnumDefinition
            └── EnumValue
"""

from terraformer.models.loader import (
    load_service_data,
    load_service_file,
    parse_service_file,
    validate_service_file,
)
from terraformer.models.service import (
    ClassDefinition,
    EnumDefinition,
    EnumValue,
    Procedure,
    ProcParameter,
    Service,
    ServiceFile,
)
from terraformer.models.types import (
    CONTAINER_CODES,
    PRIMITIVE_CODES,
    ClassType,
    DictionaryType,
    EnumerationType,
    ListType,
    PrimitiveType,
    SetType,
    TupleType,
    Type,
    TypeCode,
)

__all__ = [
    # Type algebra
    "CONTAINER_CODES",
    "PRIMITIVE_CODES",
    "ClassType",
    "DictionaryType",
    "EnumerationType",
    "ListType",
    "PrimitiveType",
    "SetType",
    "TupleType",
    "Type",
    "TypeCode",
    # Document models
    "ClassDefinition",
    "EnumDefinition",
    "EnumValue",
    "Procedure",
    "ProcParameter",
    "Service",
    "ServiceFile",
    # Loader utilities
    "load_service_data",
    "load_service_file",
    "parse_service_file",
    "validate_service_file",
]
