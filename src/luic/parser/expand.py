"""Property expansion and value helpers used by the parser."""

from __future__ import annotations

import re

from luic import vocabulary
from luic.errors import ParseError

_UNIT_SUFFIX_RE = re.compile(r"^(-?(?:\d+(?:\.\d+)?|\.\d+)(?:/\d+)?)([a-zA-Z%]+)?$")
_BARE_NUMBER_RE = re.compile(r"^-?(?:\d+(?:\.\d+)?|\.\d+)$")


def expand_property(base: str, identifier: str | None = None) -> list[str]:
    """Expand *base* by an identifier suffix.

    ``None`` and ``none`` keep the base property, ``all`` yields every
    recognized ``base-*`` property and any other identifier yields
    ``base-identifier``. Every result must be a recognized property.
    """
    if identifier is None or identifier == "none":
        candidates = [base]
    elif identifier == "all":
        candidates = vocabulary.property_variants(base)
        if not candidates:
            raise ParseError(f"Property {base} has no variants to expand with $all")
    else:
        candidates = [f"{base}-{identifier}"]

    for candidate in candidates:
        if not vocabulary.is_property(candidate):
            raise ParseError(f"Invalid property: {candidate}")
    return candidates


def split_unit(text: str) -> tuple[str | int, str | None]:
    """Split ``"10px"`` into ``(10, "px")``; non-numeric text is returned whole."""
    match = _UNIT_SUFFIX_RE.match(text)
    if match is None:
        return text, None
    number, unit = match.groups()
    if re.fullmatch(r"-?\d+", number):
        return int(number), unit
    return number, unit


def media_condition(width: str) -> str:
    """Normalize a media width into ``(min-width: <n><unit>)``."""
    width = width.strip()
    if _BARE_NUMBER_RE.match(width):
        width = f"{width}px"
    return f"(min-width: {width})"
