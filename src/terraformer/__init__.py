"""terraformer: compile kRPC service definitions into Rust client modules.

This package provides tools for:
- Loading and validating JSON service-definition documents
- Resolving the IDL type algebra into Rust type expressions
- Partitioning flat procedure lists into classes with methods
- Rendering one Rust module per service through Jinja2 templates

Quick Start:
    >>> from pathlib import Path
    >>> from terraformer.emit import generate
    >>>
    >>> written = generate(Path("KRPC.SpaceCenter.json"), Path("out/"))

Modules:
    models: Pydantic models for the service-definition format
    transform: Type resolution, dependency extraction, procedure partitioning
    emit: Template environment and per-service code generation
    validation: Semantic lint beyond schema
    cli: Command-line interface
"""

__version__ = "0.1.0"
