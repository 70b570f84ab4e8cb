"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

from terraformer.models.types import TypeCode

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "bool_type": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be an object",
    "model_type": "Must be an object",
    "literal_error": "Must be one of the allowed values",
    "union_tag_invalid": "Unknown type code",
    "union_tag_not_found": "Type object has no 'code' field",
    "value_error": "Invalid value",
    "string_too_short": "String is too short",
    "greater_than_equal": "Value is too small",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    msg = error["msg"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, msg)

    if error_type == "union_tag_invalid":
        tag = ctx.get("tag", "unknown")
        expected = ctx.get("expected_tags", "")
        base_msg = f"Unknown type code '{tag}'; expected one of: {expected}"

    elif error_type == "literal_error":
        expected = ctx.get("expected", "unknown")
        base_msg = f"Must be one of: {expected}"

    elif error_type == "greater_than_equal":
        ge = ctx.get("ge", 0)
        base_msg = f"Must be greater than or equal to {ge}"

    elif error_type == "value_error":
        base_msg = msg.removeprefix("Value error, ")

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string, e.g. ``SpaceCenter.procedures.Foo.parameters[0]``.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    suggestions: dict[str, str] = {
        "missing": "Add the required field to the service file",
        "union_tag_invalid": "Use one of: " + ", ".join(code.value for code in TypeCode),
        "union_tag_not_found": "Add a 'code' field to the type object",
    }

    return suggestions.get(error["type"])
