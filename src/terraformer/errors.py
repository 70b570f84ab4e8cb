"""Exception types raised while loading and compiling service files."""

from __future__ import annotations

from pathlib import Path


class TerraformerError(Exception):
    """Base class for terraformer errors."""


class LoaderError(TerraformerError):
    """Error during service file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class MalformedTypeError(TerraformerError, ValueError):
    """A type node cannot be resolved.

    Raised for container arity violations and for type codes outside the
    closed IDL type algebra.
    """

    def __init__(self, message: str, code: str, found: int | None = None) -> None:
        """Initialize MalformedTypeError.

        Args:
        ----
            message: Description of the problem.
            code: The IDL type code of the offending construct.
            found: Number of child types found, for arity violations.

        """
        self.code = code
        self.found = found
        super().__init__(message)

    @property
    def construct(self) -> str:
        """Lowercase name of the offending construct (e.g. 'dictionary')."""
        return self.code.lower()
