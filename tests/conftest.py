"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from terraformer.models import Service, ServiceFile, parse_service_file


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def demo_json(fixtures_dir: Path) -> Path:
    """Return path to the single-class demo service file."""
    return fixtures_dir / "demo.json"


@pytest.fixture
def space_center_json(fixtures_dir: Path) -> Path:
    """Return path to the SpaceCenter service file."""
    return fixtures_dir / "KRPC.SpaceCenter.json"


@pytest.fixture
def drawing_json(fixtures_dir: Path) -> Path:
    """Return path to the Drawing service file (references SpaceCenter)."""
    return fixtures_dir / "KRPC.Drawing.json"


@pytest.fixture
def space_center_data(space_center_json: Path) -> dict[str, Any]:
    """Return the raw SpaceCenter document."""
    return json.loads(space_center_json.read_text())


@pytest.fixture
def space_center_file(space_center_data: dict[str, Any]) -> ServiceFile:
    """Return the parsed SpaceCenter document."""
    return parse_service_file(space_center_data)


@pytest.fixture
def space_center(space_center_file: ServiceFile) -> Service:
    """Return the SpaceCenter service."""
    return space_center_file.services["SpaceCenter"]


@pytest.fixture
def drawing(drawing_json: Path) -> Service:
    """Return the Drawing service."""
    return parse_service_file(json.loads(drawing_json.read_text())).services["Drawing"]


@pytest.fixture
def minimal_service_data() -> dict[str, Any]:
    """Return a minimal valid service with no members."""
    return {
        "id": 1,
        "documentation": "An empty service.",
        "procedures": {},
        "classes": {},
        "enumerations": {},
    }


@pytest.fixture
def services_dir(tmp_path: Path, space_center_json: Path, drawing_json: Path) -> Path:
    """Return a directory holding the SpaceCenter and Drawing service files."""
    directory = tmp_path / "services"
    directory.mkdir()
    (directory / space_center_json.name).write_text(space_center_json.read_text())
    (directory / drawing_json.name).write_text(drawing_json.read_text())
    (directory / "README.txt").write_text("not a service file")
    return directory
