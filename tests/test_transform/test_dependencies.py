"""Tests for cross-service dependency extraction."""

from typing import Any

import pytest
from terraformer.errors import MalformedTypeError
from terraformer.models import ClassType, Procedure, Service, TupleType
from terraformer.transform.dependencies import (
    dependency_modules,
    extract_dependencies,
    signature_types,
)


def make_service(procedures: dict[str, Any], classes: dict[str, Any] | None = None) -> Service:
    return Service.model_validate(
        {
            "id": 1,
            "documentation": "",
            "procedures": procedures,
            "classes": classes or {},
            "enumerations": {},
        }
    )


def make_procedure(
    parameters: list[dict[str, Any]], return_type: dict[str, Any] | None = None
) -> dict[str, Any]:
    proc: dict[str, Any] = {"id": 1, "documentation": "", "parameters": parameters}
    if return_type is not None:
        proc["return_type"] = return_type
    return proc


class TestExtractDependencies:
    """Tests for extract_dependencies."""

    def test_no_dependencies(self, space_center: Service) -> None:
        """A service referencing only itself has no dependencies."""
        assert extract_dependencies(space_center, "SpaceCenter") == ()

    def test_drawing_fixture(self, drawing: Service) -> None:
        """Should find parameter, return and nested references."""
        assert extract_dependencies(drawing, "Drawing") == (
            "space_center::ReferenceFrame",
            "space_center::VesselType",
        )

    def test_nested_in_list(self) -> None:
        """A reference inside a list return type is found."""
        service = make_service(
            {
                "P": make_procedure(
                    [], {"code": "LIST", "types": [{"code": "CLASS", "service": "B", "name": "Part"}]}
                )
            }
        )
        assert extract_dependencies(service, "A") == ("b::Part",)

    def test_reported_once(self) -> None:
        """Repeated references are reported exactly once."""
        ref = {"code": "CLASS", "service": "B", "name": "Part"}
        service = make_service(
            {
                "P": make_procedure([{"name": "x", "type": ref}], ref),
                "Q": make_procedure([{"name": "y", "type": {"code": "SET", "types": [ref]}}]),
            }
        )
        assert extract_dependencies(service, "A") == ("b::Part",)

    def test_sorted(self) -> None:
        """Output is in lexicographic order."""
        service = make_service(
            {
                "P": make_procedure(
                    [
                        {"name": "z", "type": {"code": "CLASS", "service": "Zeta", "name": "Z"}},
                        {"name": "a", "type": {"code": "ENUMERATION", "service": "Alpha", "name": "A"}},
                        {"name": "m", "type": {"code": "CLASS", "service": "Alpha", "name": "B"}},
                    ]
                )
            }
        )
        assert extract_dependencies(service, "Own") == ("alpha::A", "alpha::B", "zeta::Z")

    def test_deep_nesting(self) -> None:
        """Deep type nesting does not exhaust the stack."""
        node: Any = ClassType(code="CLASS", service="B", name="Part")
        for _ in range(5000):
            node = TupleType.model_construct(code="TUPLE", types=[node])
        procedure = Procedure.model_construct(
            id=1, documentation="", parameters=[], return_type=node, return_is_nullable=False
        )
        service = Service.model_construct(
            id=1, documentation="", procedures={"P": procedure}, classes={}, enumerations={}
        )
        assert extract_dependencies(service, "A") == ("b::Part",)

    def test_arity_violation(self) -> None:
        """Malformed containers are reported."""
        service = make_service({"P": make_procedure([], {"code": "LIST", "types": []})})
        with pytest.raises(MalformedTypeError):
            extract_dependencies(service, "A")


class TestSignatureTypes:
    """Tests for signature_types."""

    def test_parameters_then_return(self, drawing: Service) -> None:
        """Should yield parameters in order, then the return type."""
        codes = [t.code for t in signature_types(drawing.procedures["AddLine"])]
        assert codes == ["TUPLE", "TUPLE", "CLASS", "BOOL", "CLASS"]

    def test_no_return(self, drawing: Service) -> None:
        """Procedures without a return type yield only parameters."""
        assert [t.code for t in signature_types(drawing.procedures["Clear"])] == ["BOOL"]


class TestDependencyModules:
    """Tests for dependency_modules."""

    def test_distinct_sorted(self) -> None:
        """Should return each module once, sorted."""
        deps = ("space_center::Vessel", "drawing::Line", "space_center::Part")
        assert dependency_modules(deps) == ("drawing", "space_center")

    def test_empty(self) -> None:
        """No dependencies means no modules."""
        assert dependency_modules(()) == ()
