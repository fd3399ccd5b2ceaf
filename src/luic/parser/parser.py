"""Statement parser: turns the token stream into declaration records.

Tokens are grouped into lines; each line holds one statement:

    ADD <property> [$identifier ...] [:pseudo] [@width] <value> ...
    VAR <name> = <value> ...
    IMPORT (<path>) / TEMPLATE (<path>)   (already inlined by the resolver)

Layer markers always form a line of their own.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence

from luic.errors import ParseError, VariableNotFoundError
from luic.model.records import CommentRecord, Declaration, LayerRecord, Record
from luic.model.tokens import (
    Comment,
    Edge,
    Identifier,
    LayerMarker,
    MediaValue,
    MediaVariableRef,
    Property,
    PseudoClass,
    Token,
    TokenKind,
    Value,
    ValueType,
    Variable,
    VariableRef,
)
from luic.parser.expand import expand_property, media_condition, split_unit
from luic.store import VariableStore

__all__ = ["Parser", "parse", "group_lines", "remove_duplicates", "elide_empty_layers"]

logger = logging.getLogger(__name__)


def group_lines(tokens: Sequence[Token]) -> list[list[Token]]:
    """Split *tokens* on NEWLINE; every layer marker becomes its own group."""
    grouped: list[list[Token]] = []
    current: list[Token] = []
    for token in tokens:
        if token.kind is TokenKind.NEWLINE:
            if current:
                grouped.append(current)
                current = []
        elif isinstance(token, LayerMarker):
            if current:
                grouped.append(current)
                current = []
            grouped.append([token])
        else:
            current.append(token)
    if current:
        grouped.append(current)
    return grouped


def remove_duplicates(records: Sequence[Record]) -> list[Record]:
    """Drop later records with the same (property, values); layers are kept.

    Pseudo-class and media are not part of the key, so a variant that only
    differs in those is dropped too (logged at DEBUG).
    """
    seen: set[tuple[str, tuple[str, ...]]] = set()
    unique: list[Record] = []
    for record in records:
        if isinstance(record, LayerRecord):
            unique.append(record)
            continue
        key = (record.property, tuple(record.values))
        if key in seen:
            logger.debug("dropping duplicate record %r", record)
            continue
        seen.add(key)
        unique.append(record)
    return unique


def elide_empty_layers(records: Sequence[Record]) -> list[Record]:
    """Remove START/END pairs of the same layer with nothing between them."""
    result: list[Record] = []
    for record in records:
        if (
            isinstance(record, LayerRecord)
            and record.edge is Edge.END
            and result
            and isinstance(result[-1], LayerRecord)
            and result[-1].edge is Edge.START
            and result[-1].name == record.name
        ):
            result.pop()
            continue
        result.append(record)
    return result


class Parser:
    """Interprets statements against a :class:`VariableStore`.

    The store is shared across calls to :meth:`parse`, so a ``VAR`` parsed
    earlier stays visible to later statements of the same compile.
    """

    def __init__(self, store: VariableStore | None = None) -> None:
        self.store = store if store is not None else VariableStore()

    @property
    def variables(self) -> dict[str, str]:
        return self.store.all()

    def parse(self, tokens: Sequence[Token]) -> list[Record]:
        records: list[Record] = []
        for line in group_lines(tokens):
            records.extend(self._parse_line(line))
        records = elide_empty_layers(remove_duplicates(records))
        logger.debug("parsed %d token(s) into %d record(s)", len(tokens), len(records))
        return records

    def _parse_line(self, line: list[Token]) -> list[Record]:
        first = line[0]
        if isinstance(first, LayerMarker):
            return [LayerRecord(first.name, first.edge)]
        if isinstance(first, Comment):
            if not first.is_public:
                return []
            if len(line) == 1:
                return [CommentRecord(first.text)]

        buckets: dict[TokenKind, list[Token]] = defaultdict(list)
        for token in line:
            buckets[token.kind].append(token)

        records: list[Record] = [
            CommentRecord(c.text) for c in buckets[TokenKind.COMMENT] if c.is_public
        ]

        keywords = buckets[TokenKind.KEYWORD]
        if not keywords:
            raise ParseError("Invalid line - no keyword found")
        if len(keywords) > 1:
            raise ParseError("Invalid line - multiple keywords found")

        keyword = keywords[0].name
        unknown = buckets[TokenKind.UNKNOWN]
        if unknown and keyword in ("ADD", "VAR"):
            char = getattr(unknown[0], "char", "")
            raise ParseError(f"Unexpected character {char!r} in {keyword} statement")

        if keyword == "ADD":
            records.extend(self._parse_add(line, buckets))
        elif keyword == "VAR":
            self._parse_var(line)
        elif keyword in ("IMPORT", "TEMPLATE"):
            pass
        else:
            raise ParseError(f"Invalid keyword: {keyword}")
        return records

    # -- ADD ------------------------------------------------------------------

    def _parse_add(
        self, line: list[Token], buckets: dict[TokenKind, list[Token]]
    ) -> list[Declaration]:
        properties = buckets[TokenKind.PROPERTY]
        if not properties:
            raise ParseError("ADD statement requires a property")
        if len(properties) > 1:
            raise ParseError("ADD statement accepts exactly one property")
        base = properties[0]
        assert isinstance(base, Property)

        values: list[str] = []
        references: list[str] = []
        has_literal = False
        for index, token in enumerate(line):
            if isinstance(token, Value):
                text = token.text
                following = line[index + 1] if index + 1 < len(line) else None
                if isinstance(following, ValueType):
                    text += following.unit
                values.append(text)
                has_literal = True
            elif isinstance(token, Variable):
                values.append(token.name)
                has_literal = True
            elif isinstance(token, VariableRef):
                values.append(self._resolve_ref(token))
                references.append(token.name)
            elif isinstance(token, ValueType):
                previous = line[index - 1] if index > 0 else None
                if not isinstance(previous, Value):
                    raise ParseError(f"Unit {token.unit} must directly follow a value")
            elif token.kind is TokenKind.COMMA:
                if not values:
                    raise ParseError("Unexpected ',' before the first value")
                values[-1] += ","
        if not values:
            raise ParseError("ADD statement requires at least one value")

        optional_name = "-".join(references) if references and not has_literal else None
        pseudo_class = self._single(buckets[TokenKind.PSEUDO_CLASS], "pseudo-class")
        media = self._media(
            buckets[TokenKind.MEDIA_VALUE] + buckets[TokenKind.MEDIA_VARIABLE_REF]
        )

        expanded: list[str] = []
        identifiers = buckets[TokenKind.IDENTIFIER]
        if identifiers:
            for identifier in identifiers:
                assert isinstance(identifier, Identifier)
                expanded.extend(expand_property(base.name, identifier.name))
        else:
            expanded = expand_property(base.name)

        return [
            Declaration(
                property=name,
                values=tuple(values),
                optional_name=optional_name,
                pseudo_class=pseudo_class.name if isinstance(pseudo_class, PseudoClass) else None,
                media=media,
            )
            for name in expanded
        ]

    def _media(self, tokens: list[Token]) -> str | None:
        token = self._single(tokens, "media condition")
        if isinstance(token, MediaValue):
            return media_condition(token.literal)
        if isinstance(token, MediaVariableRef):
            width = self.store.get(token.name)
            if width is None:
                logger.warning(
                    "media variable %s is not defined; condition dropped", token.name
                )
                return None
            return media_condition(width)
        return None

    @staticmethod
    def _single(tokens: list[Token], what: str) -> Token | None:
        if len(tokens) > 1:
            raise ParseError(f"ADD statement accepts at most one {what}")
        return tokens[0] if tokens else None

    # -- VAR ------------------------------------------------------------------

    def _parse_var(self, line: list[Token]) -> None:
        split = next(
            (i for i, token in enumerate(line) if token.kind is TokenKind.EQUALS), None
        )
        if split is not None:
            names = [t for t in line[:split] if isinstance(t, Variable)]
            rest = line[split + 1:]
        else:
            head = next((i for i, t in enumerate(line) if isinstance(t, Variable)), None)
            names = [line[head]] if head is not None else []
            rest = line[head + 1:] if head is not None else []

        if not names:
            raise ParseError("VAR statement requires a variable name")
        if len(names) > 1:
            raise ParseError("VAR statement accepts exactly one variable name")
        name = names[0]
        assert isinstance(name, Variable)

        values: list[str | int] = []
        units: list[str | None] = []
        for index, token in enumerate(rest):
            if isinstance(token, Value):
                if isinstance(token.literal, int):
                    value, unit = token.literal, None
                else:
                    value, unit = split_unit(token.literal)
                following = rest[index + 1] if index + 1 < len(rest) else None
                if isinstance(following, ValueType):
                    unit = following.unit
                values.append(value)
                units.append(unit)
            elif isinstance(token, Variable):
                values.append(token.name)
                units.append(None)
            elif isinstance(token, VariableRef):
                slots = self.store.slots(token.name)
                if slots is None:
                    raise VariableNotFoundError(token.name)
                for slot in slots:
                    values.append(slot.value)
                    units.append(token.unit if token.unit is not None else slot.unit)
            elif token.kind is TokenKind.COMMA:
                if not values:
                    raise ParseError("Unexpected ',' before the first value")
                # The separator belongs to the rendered slot, unit included.
                values[-1] = f"{values[-1]}{units[-1] or ''},"
                units[-1] = None
        if not values:
            raise ParseError("VAR statement requires a value")

        self.store.define(name.name, values, units)

    def _resolve_ref(self, token: VariableRef) -> str:
        slots = self.store.slots(token.name)
        if slots is None:
            raise VariableNotFoundError(token.name)
        return " ".join(slot.render(token.unit) for slot in slots)


def parse(tokens: Sequence[Token], store: VariableStore | None = None) -> list[Record]:
    """Parse *tokens* with a fresh :class:`Parser`."""
    return Parser(store).parse(tokens)
