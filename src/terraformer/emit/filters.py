"""Custom Jinja2 filters available to service templates."""

from __future__ import annotations

from typing import Any

from terraformer.casing import to_snake_case


def oneline(value: Any) -> str:
    """Collapse a documentation string onto a single line."""
    if value is None:
        return ""
    return str(value).strip().replace("\r\n", "\n").replace("\n", " ")


def snake_case(value: Any) -> str:
    """Apply identifier case conversion to a raw name."""
    return to_snake_case(str(value))


FILTERS = {
    "oneline": oneline,
    "snake_case": snake_case,
}
