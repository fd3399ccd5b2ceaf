"""CSS generator: renders parser records as class rules.

Records are rendered in order. Declarations with a media condition are
held back and emitted after everything else, one ``@media`` block per
distinct condition in first-seen order.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from luic import vocabulary
from luic.errors import ConfigError, InvalidValueError, RenderError
from luic.model.records import CommentRecord, Declaration, LayerRecord, Record
from luic.model.tokens import Edge
from luic.stylist.formatter import select_class_formatter

__all__ = ["CssGenerator", "RENDER_MODES", "generate", "validate_value"]

logger = logging.getLogger(__name__)

RENDER_MODES = ("minimalistic", "standard", "pretty")

_INDENT = {"minimalistic": "", "standard": "  ", "pretty": "    "}
_SEPARATOR = {"minimalistic": "", "standard": "\n", "pretty": "\n\n"}

_UNIT_RE = re.compile(
    r"(?:^|\s)(?:auto|inherit|initial|revert|revert-layer|unset"
    r"|-?\d*\.?\d+(?:px|em|rem|%|vw|vh|vmin|vmax|ch|ex|mm|cm|in|pt|pc))(?:\s|$)",
    re.IGNORECASE,
)
_COLOR_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_COLOR_FUNC_RE = re.compile(r"^(?:rgba?|hsla?)\(.*\)$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^-?\d*\.?\d+$")
_TERM = r"(?:[A-Za-z_-][\w-]*|-?\d*\.?\d+(?:[A-Za-z]+|%)?|#[0-9A-Fa-f]{3,8})"
_TERM_LIST_RE = re.compile(rf"^{_TERM}(?:(?:\s*,\s*|\s+){_TERM})*$")
_MEDIA_RE = re.compile(
    r"^\((min-width|max-width):\s*"
    r"([0-9]+(?:\.[0-9]+)?(?:px|rem|em|%|vw|vh)|var\(--[a-zA-Z0-9-]+\))\)$"
)


def _is_css_function(value: str) -> bool:
    head, paren, _ = value.partition("(")
    return bool(paren) and head in vocabulary.CSS_FUNCTIONS


def _is_recognized(value: str) -> bool:
    if _UNIT_RE.search(value):
        return True
    if _is_css_function(value):
        return True
    if _COLOR_HEX_RE.match(value) or _COLOR_FUNC_RE.match(value):
        return True
    return all(vocabulary.is_value_keyword(part) for part in value.split())


def validate_value(value: str, property_name: str) -> str:
    """Return *value* ready to render for *property_name*.

    Bare numbers get a ``px`` unit where the property needs a length.
    Raises :class:`InvalidValueError` if the value cannot be used.
    """
    trimmed = value.strip()
    if not trimmed:
        raise RenderError(f"Empty value for property {property_name}")
    if property_name in vocabulary.COMPOUND_PROPERTIES:
        return trimmed
    if _is_recognized(trimmed):
        return trimmed

    intrinsic = trimmed.lower() in vocabulary.INTRINSIC_SIZES
    if property_name in vocabulary.PROPERTIES_REQUIRING_UNITS:
        if _NUMERIC_RE.match(trimmed):
            return f"{trimmed}px"
        if intrinsic:
            return trimmed
        raise InvalidValueError(property_name, value)

    if intrinsic or _TERM_LIST_RE.match(trimmed):
        return trimmed
    raise InvalidValueError(property_name, value)


class CssGenerator:
    """Renders records in one of three layouts.

    ``minimalistic`` puts everything on one line, ``standard`` indents by
    two spaces and ``pretty`` by four with a blank line between rules.
    Indentation follows the depth of open ``@layer`` blocks.
    """

    def __init__(
        self,
        class_name_format: str = "minimalistic",
        mode: str = "standard",
        layers: bool = False,
        mobile_first: bool = False,
    ) -> None:
        if mode not in RENDER_MODES:
            raise ConfigError(f"Unknown render mode {mode!r}")
        self.mode = mode
        self.layers = layers
        self.mobile_first = mobile_first
        self._class_name = select_class_formatter(class_name_format)
        self._layer_stack: list[str] = []

    @property
    def _separator(self) -> str:
        return _SEPARATOR[self.mode]

    def _indent(self, depth: int | None = None) -> str:
        if depth is None:
            depth = len(self._layer_stack)
        return _INDENT[self.mode] * depth

    def generate(self, records: Sequence[Record]) -> str:
        self._layer_stack = []
        lines: list[str] = []
        media_groups: dict[str, list[tuple[Declaration, str]]] = {}

        layer_names = list(
            dict.fromkeys(r.name for r in records if isinstance(r, LayerRecord))
        )
        if self.layers and layer_names:
            lines.append(f"@layer {', '.join(layer_names)};")

        for record in records:
            if isinstance(record, CommentRecord):
                lines.append(f"{self._indent()}/* {record.text} */")
            elif isinstance(record, LayerRecord):
                layer_css = self._layer(record)
                if layer_css:
                    lines.append(layer_css)
            else:
                value = validate_value(record.joined, record.property)
                if record.media:
                    media_groups.setdefault(record.media, []).append((record, value))
                else:
                    lines.append(self._block(record, value, self._indent()))

        while self.layers and self._layer_stack:
            self._layer_stack.pop()
            lines.append(f"{self._indent()}}}")

        for condition, entries in media_groups.items():
            lines.append(self._media(condition, entries))

        logger.debug(
            "generated %d rule(s) in %d media group(s)",
            sum(isinstance(r, Declaration) for r in records),
            len(media_groups),
        )
        return self._separator.join(lines).strip()

    def _block(self, declaration: Declaration, value: str, indent: str) -> str:
        pseudo = declaration.pseudo_class or ""
        if pseudo and not pseudo.startswith(":"):
            pseudo = f":{pseudo}"
        selector = f"{self._class_name(declaration)}{pseudo}"
        prop = declaration.property
        if self.mode == "minimalistic":
            return f"{indent}{selector}{{{prop}:{value}}}"
        step = _INDENT[self.mode]
        return f"{indent}{selector} {{\n{indent}{step}{prop}: {value};\n{indent}}}"

    def _media(self, condition: str, entries: list[tuple[Declaration, str]]) -> str:
        if not self.mobile_first:
            condition = condition.replace("min-width", "max-width")
        if not _MEDIA_RE.match(condition):
            raise RenderError(f"Invalid media query condition: {condition}")
        inner = self._indent(1)
        content = self._separator.join(
            self._block(declaration, value, inner) for declaration, value in entries
        )
        if self.mode == "minimalistic":
            return f"@media {condition}{{{content}}}"
        return f"@media {condition} {{\n{content}\n}}"

    def _layer(self, record: LayerRecord) -> str:
        if not self.layers:
            return ""
        if record.edge is Edge.START:
            line = f"{self._indent()}@layer {record.name} {{"
            self._layer_stack.append(record.name)
            return line
        if self._layer_stack:
            self._layer_stack.pop()
        return f"{self._indent()}}}"


def generate(
    records: Sequence[Record],
    class_name_format: str = "minimalistic",
    mode: str = "standard",
    *,
    layers: bool = False,
    mobile_first: bool = False,
) -> str:
    """Render *records* to CSS text."""
    generator = CssGenerator(
        class_name_format=class_name_format,
        mode=mode,
        layers=layers,
        mobile_first=mobile_first,
    )
    return generator.generate(records)
