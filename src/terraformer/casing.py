"""Identifier case conversion shared by every naming decision."""

from __future__ import annotations

import re

# Word boundaries: lower->Upper ("getName") and the end of an acronym ("UTCTime").
_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def to_snake_case(identifier: str) -> str:
    """Convert an identifier to lowercase, underscore-separated words.

    Digits stay attached to the word they follow.

    Examples:
    --------
        >>> to_snake_case("SpaceCenter")
        'space_center'
        >>> to_snake_case("GetUTCTime")
        'get_utc_time'
        >>> to_snake_case("get_Name")
        'get_name'
        >>> to_snake_case("KRPC")
        'krpc'

    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(identifier):
        if chunk:
            words.extend(_BOUNDARY.sub(" ", chunk).split())
    return "_".join(word.lower() for word in words)
