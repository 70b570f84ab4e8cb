"""CLI module for terraformer."""

from __future__ import annotations

from typing import Any

from terraformer.cli.error_formatter import ErrorTable
from terraformer.cli.exception_handler import handle_exceptions
from terraformer.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "app",
    "ErrorTable",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]


def __getattr__(name: str) -> Any:
    # cli_main imports this package, so the app is resolved lazily
    if name == "app":
        from terraformer.cli_main import app

        return app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
