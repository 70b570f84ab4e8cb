"""Models for service-definition documents."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from terraformer.models.types import Type


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ProcParameter(_Model):
    """A named, typed procedure parameter."""

    name: Annotated[str, Field(min_length=1)]
    type: Type


class Procedure(_Model):
    """A remote procedure.

    Example:
    -------
        ```json
        "Vessel_GetName": {
          "id": 1,
          "documentation": "The name of the vessel.",
          "parameters": [{"name": "this", "type": {"code": "CLASS", ...}}],
          "return_type": {"code": "STRING"}
        }
        ```

    """

    id: int
    documentation: str
    parameters: list[ProcParameter]
    return_type: Type | None = None
    return_is_nullable: bool = False


class ClassDefinition(_Model):
    """A class declared by a service. Only carries documentation."""

    documentation: str


class EnumValue(_Model):
    """A single named enumeration value."""

    name: Annotated[str, Field(min_length=1)]
    value: Annotated[int, Field(ge=0)]


class EnumDefinition(_Model):
    """An enumeration with its values in declared order."""

    documentation: str
    values: list[EnumValue]

    @field_validator("values")
    @classmethod
    def validate_unique_names(cls, values: list[EnumValue]) -> list[EnumValue]:
        """Value names must be unique; numeric values may repeat."""
        seen: set[str] = set()
        for value in values:
            if value.name in seen:
                raise ValueError(f"Duplicate enumeration value name '{value.name}'")
            seen.add(value.name)
        return values


class Service(_Model):
    """A named collection of procedures, classes and enumerations."""

    id: int
    documentation: str
    procedures: dict[str, Procedure]
    classes: dict[str, ClassDefinition]
    enumerations: dict[str, EnumDefinition]


class ServiceFile(RootModel[dict[str, Service]]):
    """Root model of a service-definition document: service name -> Service."""

    model_config = ConfigDict(frozen=True)

    @property
    def services(self) -> dict[str, Service]:
        """Services keyed by name, in document order."""
        return self.root

    def service_names(self) -> list[str]:
        """Service names in lexicographic order."""
        return sorted(self.root)

    def iter_services(self) -> Iterator[tuple[str, Service]]:
        """Yield (name, service) pairs in lexicographic order."""
        for name in self.service_names():
            yield name, self.root[name]

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: object) -> bool:
        return name in self.root
