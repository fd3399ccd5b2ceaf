"""Token model: one frozen dataclass per token variant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class TokenKind(Enum):
    """Lexical class of a token."""

    KEYWORD = "KEYWORD"
    PROPERTY = "PROPERTY"
    IDENTIFIER = "IDENTIFIER"
    VALUE = "VALUE"
    VALUE_TYPE = "VALUE_TYPE"
    VARIABLE = "VARIABLE"
    VARIABLE_REF = "VARIABLE_REF"
    MEDIA_VALUE = "MEDIA_VALUE"
    MEDIA_VARIABLE_REF = "MEDIA_VARIABLE_REF"
    PSEUDO_CLASS = "PSEUDO_CLASS"
    COMMENT = "COMMENT"
    LAYER = "LAYER"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    LEFT_BRACKET = "LEFT_BRACKET"
    RIGHT_BRACKET = "RIGHT_BRACKET"
    COMMA = "COMMA"
    EQUALS = "EQUALS"
    NEWLINE = "NEWLINE"
    UNKNOWN = "UNKNOWN"


class Visibility(Enum):
    """Whether a comment is copied into the generated CSS."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class Edge(Enum):
    """Which boundary of a layer span a marker represents."""

    START = "START"
    END = "END"


@dataclass(frozen=True)
class Keyword:
    kind: ClassVar[TokenKind] = TokenKind.KEYWORD
    name: str


@dataclass(frozen=True)
class Property:
    kind: ClassVar[TokenKind] = TokenKind.PROPERTY
    name: str


@dataclass(frozen=True)
class Identifier:
    kind: ClassVar[TokenKind] = TokenKind.IDENTIFIER
    name: str


@dataclass(frozen=True)
class Value:
    """A literal. Bare integers are kept as ``int``; everything else is text."""

    kind: ClassVar[TokenKind] = TokenKind.VALUE
    literal: str | int

    @property
    def text(self) -> str:
        return str(self.literal)


@dataclass(frozen=True)
class ValueType:
    kind: ClassVar[TokenKind] = TokenKind.VALUE_TYPE
    unit: str


@dataclass(frozen=True)
class Variable:
    kind: ClassVar[TokenKind] = TokenKind.VARIABLE
    name: str


@dataclass(frozen=True)
class VariableRef:
    """``{name}`` with an optional unit written straight after the brace."""

    kind: ClassVar[TokenKind] = TokenKind.VARIABLE_REF
    name: str
    unit: str | None = None


@dataclass(frozen=True)
class MediaValue:
    kind: ClassVar[TokenKind] = TokenKind.MEDIA_VALUE
    literal: str


@dataclass(frozen=True)
class MediaVariableRef:
    kind: ClassVar[TokenKind] = TokenKind.MEDIA_VARIABLE_REF
    name: str


@dataclass(frozen=True)
class PseudoClass:
    """Selector fragment including the leading colon, e.g. ``:hover``."""

    kind: ClassVar[TokenKind] = TokenKind.PSEUDO_CLASS
    name: str


@dataclass(frozen=True)
class Comment:
    kind: ClassVar[TokenKind] = TokenKind.COMMENT
    visibility: Visibility
    text: str

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


@dataclass(frozen=True)
class LayerMarker:
    kind: ClassVar[TokenKind] = TokenKind.LAYER
    name: str
    edge: Edge


@dataclass(frozen=True)
class Symbol:
    """Structural tokens. ``char`` is only kept for UNKNOWN tokens."""

    kind: TokenKind
    char: str = ""

    def __post_init__(self) -> None:
        if self.kind not in _SYMBOL_KINDS:
            raise ValueError(f"{self.kind.value} is not a structural token")


_SYMBOL_KINDS = frozenset(
    {
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.COMMA,
        TokenKind.EQUALS,
        TokenKind.NEWLINE,
        TokenKind.UNKNOWN,
    }
)

NEWLINE = Symbol(TokenKind.NEWLINE)
EQUALS = Symbol(TokenKind.EQUALS)

Token = Union[
    Keyword,
    Property,
    Identifier,
    Value,
    ValueType,
    Variable,
    VariableRef,
    MediaValue,
    MediaVariableRef,
    PseudoClass,
    Comment,
    LayerMarker,
    Symbol,
]
