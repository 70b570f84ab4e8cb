"""Generator configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _validate_extension(value: str) -> str:
    """Require a file extension with a leading dot."""
    if not value.startswith(".") or len(value) < 2:
        raise ValueError(f"Extension must start with '.', got '{value}'")
    return value


Extension = Annotated[str, AfterValidator(_validate_extension)]


class GeneratorConfig(BaseModel):
    """Settings for one code generation run.

    Example:
    -------
        >>> config = GeneratorConfig(write_index=False)
        >>> config.output_extension
        '.rs'

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_extension: Annotated[
        Extension,
        Field(description="Extension of service files picked up from a directory"),
    ] = ".json"
    output_extension: Annotated[
        Extension,
        Field(description="Extension appended to generated module names"),
    ] = ".rs"
    write_index: Annotated[
        bool,
        Field(description="Write an index module declaring every generated module"),
    ] = True
    index_name: Annotated[
        str,
        Field(min_length=1, description="Stem of the index module"),
    ] = "mod"
    template_dir: Annotated[
        Path | None,
        Field(description="Directory searched for templates before the built-in ones"),
    ] = None
    service_template: str = "service.rs.j2"
    index_template: str = "mod.rs.j2"
