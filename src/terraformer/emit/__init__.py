"""Render service modules through Jinja2 templates and write them out."""

from terraformer.emit.environment import create_environment
from terraformer.emit.filters import oneline, snake_case
from terraformer.emit.generator import (
    DocumentGenerator,
    ServiceGenerator,
    find_service_files,
    generate,
    generate_directory,
    generate_documents,
)

__all__ = [
    "DocumentGenerator",
    "ServiceGenerator",
    "create_environment",
    "find_service_files",
    "generate",
    "generate_directory",
    "generate_documents",
    "oneline",
    "snake_case",
]
