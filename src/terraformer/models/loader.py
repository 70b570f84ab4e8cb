"""JSON/YAML service file loading utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from terraformer.errors import LoaderError
from terraformer.models.service import ServiceFile

SUPPORTED_EXTENSIONS = frozenset({".json", ".yaml", ".yml"})


def load_service_data(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML service file and return the raw dictionary.

    Args:
    ----
        path: Path to the service file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be read or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .json, .yaml, or .yml",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"JSON parsing error: {e}", path) from e
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except UnicodeDecodeError as e:
        raise LoaderError(f"File is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected object at root level, got {type(data).__name__}",
            path,
        )

    return data


def parse_service_file(data: dict[str, Any]) -> ServiceFile:
    """Validate already-parsed data against the service file model.

    Raises
    ------
        ValidationError: If the data does not match the model.

    """
    return ServiceFile.model_validate(data)


def load_service_file(path: Path) -> ServiceFile:
    """Load and validate a service file.

    Args:
    ----
        path: Path to the service file.

    Returns:
    -------
        Validated ServiceFile model instance.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is invalid.

    """
    return parse_service_file(load_service_data(path))


def validate_service_file(path: Path) -> list[str]:
    """Validate a service file and return a list of errors.

    This is a non-throwing version of load_service_file, useful for the
    validate CLI command.

    Args:
    ----
        path: Path to the service file.

    Returns:
    -------
        List of error messages (empty if valid).

    """
    try:
        data = load_service_data(path)
    except LoaderError as e:
        return [str(e)]

    errors: list[str] = []
    try:
        parse_service_file(data)
    except ValidationError as e:
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

    return errors
