"""Hand-written single-pass scanner for LUI source text.

Dispatch at each position, in priority order:

    whitespace, ``//`` comments, newline, ``LAYER `` markers, ``@`` media
    widths, ``$`` identifiers, ``:`` pseudo-classes, numbers, bare words,
    ``%``, ``{ref}``, ``#hex``, ``=`` and finally structural characters.

Anything that matches none of these becomes an UNKNOWN token; the parser
decides what to do with it.
"""

from __future__ import annotations

import logging

from luic import vocabulary
from luic.errors import LexError
from luic.model.tokens import (
    EQUALS,
    NEWLINE,
    Comment,
    Edge,
    Identifier,
    LayerMarker,
    MediaValue,
    MediaVariableRef,
    PseudoClass,
    Symbol,
    Token,
    TokenKind,
    Value,
    ValueType,
    VariableRef,
    Visibility,
)
from luic.tokenizer.classify import classify_word

__all__ = ["Tokenizer", "tokenize"]

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MAX_HEX_DIGITS = 8

_SYMBOLS: dict[str, TokenKind] = {
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
}


def _is_whitespace(char: str | None) -> bool:
    return char is not None and char.isspace() and char != "\n"


def _is_digit(char: str | None) -> bool:
    return char is not None and char in "0123456789"


def _is_alpha(char: str | None) -> bool:
    return char is not None and char.isascii() and char.isalpha()


def _is_word_char(char: str | None) -> bool:
    return char is not None and (char.isascii() and char.isalnum() or char in "_@-")


def _is_name_char(char: str | None) -> bool:
    return char is not None and (char.isascii() and char.isalnum() or char in "_-")


class Tokenizer:
    """Converts combined source text into a flat list of tokens.

    The instance keeps the cursor (offset, line, column) and the tokens
    emitted so far; the latter are only read, for bare-word classification.
    """

    def __init__(self) -> None:
        self._source = ""
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    # -- cursor ---------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str | None:
        index = self._pos + offset
        if index < len(self._source):
            return self._source[index]
        return None

    def _advance(self) -> str:
        char = self._source[self._pos]
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def _skip_whitespace(self) -> None:
        while _is_whitespace(self._peek()):
            self._advance()

    def _take_while(self, predicate) -> str:
        start = self._pos
        while predicate(self._peek()):
            self._advance()
        return self._source[start:self._pos]

    def _at_number(self) -> bool:
        """A digit, or ``-`` / ``.`` / ``-.`` directly followed by one."""
        offset = 1 if self._peek() == "-" else 0
        if self._peek(offset) == ".":
            offset += 1
        return _is_digit(self._peek(offset))

    def _at_comment(self) -> bool:
        return self._peek() == "/" and self._peek(1) == "/"

    def _error(self, message: str) -> LexError:
        return LexError(message, self._line, self._column)

    # -- main loop ------------------------------------------------------------

    def tokenize(self, source: str) -> list[Token]:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens = []
        tokens = self._tokens

        while not self._at_end():
            char = self._peek()

            if _is_whitespace(char):
                self._advance()
                continue

            if self._at_comment():
                if tokens and tokens[-1] == EQUALS:
                    raise self._error("Expected a value after '='")
                tokens.append(self._read_comment())
                continue

            if char == "\n":
                tokens.append(NEWLINE)
                self._advance()
                continue

            if char == "L" and self._source.startswith("LAYER ", self._pos):
                tokens.append(self._read_layer_marker())
                continue

            if char == "@":
                tokens.append(self._read_media())
                continue

            if char == "$":
                tokens.append(self._read_identifier())
                continue

            if char == ":":
                tokens.append(self._read_pseudo_class())
                continue

            if self._at_number():
                tokens.append(self._read_number())
                continue

            if _is_alpha(char) or char in ("_", "-"):
                word = self._take_while(_is_word_char)
                tokens.append(classify_word(word, tokens))
                continue

            if char == "%":
                self._advance()
                tokens.append(ValueType("%"))
                continue

            if char == "{":
                tokens.append(self._read_variable_ref())
                continue

            if char == "#":
                tokens.append(self._read_color())
                continue

            if char == "=":
                self._advance()
                tokens.append(EQUALS)
                self._skip_whitespace()
                if self._at_comment():
                    # The comment branch reports the missing value.
                    continue
                tokens.append(self._read_value_after_equals())
                continue

            tokens.append(self._read_symbol())

        logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
        return list(tokens)

    # -- token readers --------------------------------------------------------

    def _read_comment(self) -> Comment:
        self._advance()
        self._advance()
        visibility = Visibility.PRIVATE
        if self._peek() == "*":
            self._advance()
            visibility = Visibility.PUBLIC
        text = self._take_while(lambda c: c is not None and c != "\n")
        return Comment(visibility, text.strip())

    def _read_layer_marker(self) -> LayerMarker:
        for _ in range(len("LAYER ")):
            self._advance()
        self._skip_whitespace()
        name = self._take_while(lambda c: c is not None and not c.isspace())
        self._skip_whitespace()
        action = self._take_while(lambda c: c is not None and not c.isspace())
        if not name:
            raise self._error("LAYER marker without a name")
        if action not in (Edge.START.value, Edge.END.value):
            raise self._error(f"Unknown LAYER action: {action}")
        self._skip_whitespace()
        if self._peek() == "\n":
            self._advance()
        return LayerMarker(name, Edge(action))

    def _read_braced_name(self) -> str:
        self._advance()  # {
        name = self._take_while(lambda c: c is not None and c not in "}\n")
        if self._peek() != "}":
            raise self._error("Unterminated '{'")
        self._advance()
        return name.strip()

    def _read_variable_ref(self) -> VariableRef:
        name = self._read_braced_name()
        unit: str | None = None
        if self._peek() == "%":
            self._advance()
            unit = "%"
        elif _is_alpha(self._peek()):
            unit = self._take_while(_is_alpha)
            if not vocabulary.is_value_type(unit):
                raise self._error(f"Unknown unit: {unit}")
        return VariableRef(name, unit)

    def _read_media(self) -> MediaValue | MediaVariableRef:
        self._advance()  # @
        if self._peek() == "{":
            return MediaVariableRef(self._read_braced_name())
        literal = self._take_while(lambda c: c is not None and not c.isspace())
        if not literal:
            raise self._error("Expected a media width after '@'")
        return MediaValue(literal)

    def _read_identifier(self) -> Identifier:
        self._advance()  # $
        name = self._take_while(_is_name_char)
        if not vocabulary.is_identifier(name):
            raise self._error(f"Unknown identifier: ${name}")
        return Identifier(name)

    def _read_pseudo_class(self) -> PseudoClass:
        self._advance()  # :
        name = self._take_while(_is_name_char)
        argument = ""
        if self._peek() == "(":
            start = self._pos
            depth = 0
            while True:
                char = self._peek()
                if char is None or char == "\n":
                    raise self._error(f"Unbalanced parentheses in pseudo-class :{name}")
                self._advance()
                if char == "(":
                    depth += 1
                elif char == ")":
                    depth -= 1
                    if depth == 0:
                        break
            argument = self._source[start:self._pos]
        if not vocabulary.is_pseudo_class(name):
            raise self._error(f"Unknown pseudo-class: :{name}")
        return PseudoClass(f":{name}{argument}")

    def _read_number(self) -> Value:
        start = self._pos
        if self._peek() == "-":
            self._advance()
        self._take_while(_is_digit)
        fractional = False
        if self._peek() in (".", "/") and _is_digit(self._peek(1)):
            self._advance()
            self._take_while(_is_digit)
            fractional = True
        unit = self._take_while(_is_alpha)
        text = self._source[start:self._pos]
        if unit or fractional:
            return Value(text)
        return Value(int(text))

    def _read_color(self) -> Value:
        self._advance()  # #
        start = self._pos
        while _is_hex(self._peek()) and self._pos - start < _MAX_HEX_DIGITS:
            self._advance()
        return Value(f"#{self._source[start:self._pos]}")

    def _read_value_after_equals(self) -> Token:
        char = self._peek()
        if char is None or char == "\n":
            raise self._error("Expected a value after '='")
        if char == "{":
            return self._read_variable_ref()
        if char == "#":
            return self._read_color()
        if self._at_number():
            return self._read_number()
        if _is_alpha(char) or char in ("_", "-"):
            word = self._take_while(_is_word_char)
            if not vocabulary.is_value_type(word):
                return Value(word)
            # A typed value: ``= px {base}``.
            self._skip_whitespace()
            if self._peek() != "{":
                raise self._error(f"Expected a variable reference after unit {word}")
            return VariableRef(self._read_braced_name(), word)
        raise self._error(f"Unknown value format after '=': {char}")

    def _read_symbol(self) -> Symbol:
        char = self._advance()
        kind = _SYMBOLS.get(char)
        if kind is None:
            return Symbol(TokenKind.UNKNOWN, char)
        return Symbol(kind)


def _is_hex(char: str | None) -> bool:
    return char is not None and char in _HEX_DIGITS


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* with a fresh :class:`Tokenizer`."""
    return Tokenizer().tokenize(source)
