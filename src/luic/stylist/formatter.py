"""Class-name formatting strategies.

A formatter maps a declaration to a class selector, e.g.::

    width: 100px                      -> .w_100px       (minimalistic)
    width: 100px                      -> .Width_100px   (full-name)
    width: {size} :hover @768px       -> .w_sz_h_m768   (minimalistic)
"""

from __future__ import annotations

import re
from typing import Callable

from luic.errors import ConfigError
from luic.model.records import Declaration

__all__ = [
    "CLASS_NAME_FORMATTERS",
    "ClassFormatter",
    "safe_class_name",
    "select_class_formatter",
]

ClassFormatter = Callable[[Declaration], str]

_SPECIAL_CHARACTERS = frozenset("#(),./:'\"+*!")
_VOWELS = frozenset("aeiouAEIOU")
_MEDIA_WIDTH_RE = re.compile(r":\s*(-?\d+(?:\.\d+)?)")

_BOOTSTRAP_PREFIXES = (
    ("padding", "p"),
    ("margin", "m"),
    ("border", "b"),
    ("width", "w"),
    ("height", "h"),
)


def safe_class_name(text: str) -> str:
    """Drop characters that are not valid in a class name; ``%`` becomes ``p``."""
    return "".join(
        "p" if char == "%" else char
        for char in text
        if char not in _SPECIAL_CHARACTERS
    )


def _strip_vowels(text: str) -> str:
    return text[:1] + "".join(c for c in text[1:] if c not in _VOWELS)


def _value_suffix(declaration: Declaration, shorten: bool) -> str:
    if declaration.optional_name:
        name = safe_class_name(declaration.optional_name)
        return _strip_vowels(name) if shorten else name
    joined = "-".join("-".join(value.split()) for value in declaration.values)
    return safe_class_name(joined) or "none"


def _tags(declaration: Declaration, shorten: bool) -> list[str]:
    tags: list[str] = []
    if declaration.pseudo_class:
        tag = declaration.pseudo_class.lstrip(":")[:1]
        tags.append(_strip_vowels(tag) if shorten else tag)
    if declaration.media:
        match = _MEDIA_WIDTH_RE.search(declaration.media)
        width = match.group(1).replace(".", "").replace("-", "") if match else ""
        tag = f"m{width}"
        tags.append(_strip_vowels(tag) if shorten else tag)
    return tags


def _compose(prefix: str, declaration: Declaration, shorten: bool) -> str:
    parts = [prefix, _value_suffix(declaration, shorten), *_tags(declaration, shorten)]
    return "." + "_".join(parts)


def minimalistic_class_formatter(declaration: Declaration) -> str:
    prefix = "".join(part[:1] for part in declaration.property.split("-")).lower()
    return _compose(prefix, declaration, shorten=True)


def standard_class_formatter(declaration: Declaration) -> str:
    prefix = "".join(part[:1] for part in declaration.property.split("-")).lower()
    return _compose(prefix, declaration, shorten=False)


def full_name_class_formatter(declaration: Declaration) -> str:
    prefix = "".join(part.capitalize() for part in declaration.property.split("-"))
    return _compose(prefix, declaration, shorten=False)


def bootstrap_class_formatter(declaration: Declaration) -> str:
    prefix = declaration.property[:1]
    for name, short in _BOOTSTRAP_PREFIXES:
        if declaration.property.startswith(name):
            prefix = short
            break
    return _compose(prefix, declaration, shorten=False)


CLASS_NAME_FORMATTERS: dict[str, ClassFormatter] = {
    "minimalistic": minimalistic_class_formatter,
    "standard": standard_class_formatter,
    "full-name": full_name_class_formatter,
    "bootstrap": bootstrap_class_formatter,
}


def select_class_formatter(mode: str) -> ClassFormatter:
    formatter = CLASS_NAME_FORMATTERS.get(mode)
    if formatter is None:
        raise ConfigError(f'Class name formatter "{mode}" not found.')
    return formatter
