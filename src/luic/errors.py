"""Compiler error types.

Every failure the pipeline can produce is a :class:`CompileError` tagged
with an :class:`ErrorKind`, so a host can report them uniformly.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Stage of the pipeline that rejected the input."""

    LOAD = "load"
    CYCLE = "cycle"
    LEXICAL = "lexical"
    SEMANTIC = "semantic"
    RENDER = "render"
    CONFIG = "config"


class CompileError(Exception):
    """Base class for all fatal compile failures."""

    kind: ErrorKind = ErrorKind.SEMANTIC

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def position(self) -> str | None:
        if self.line is None:
            return None
        return f"{self.line}:{self.column if self.column is not None else 0}"

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} ({self.position})"


class ImportLoadError(CompileError):
    """Raised when an imported, templated or entry file cannot be read."""

    kind = ErrorKind.LOAD

    def __init__(self, directive: str, path: str, reason: str = ""):
        self.directive = directive
        self.path = path
        message = f"Failed to load {directive.lower()} at {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CircularImportError(CompileError):
    """Raised when a file is imported while it is still being resolved."""

    kind = ErrorKind.CYCLE

    def __init__(self, path: str, chain: list[str] | None = None):
        self.path = path
        self.chain = list(chain or [])
        super().__init__(f"Circular import detected: {path}")


class LexError(CompileError):
    """Raised by the tokenizer; always carries a line and column."""

    kind = ErrorKind.LEXICAL


class ParseError(CompileError):
    """Raised when a statement is structurally or semantically invalid."""

    kind = ErrorKind.SEMANTIC


class VariableNotFoundError(ParseError):
    """Raised when a ``{name}`` reference has no prior ``VAR`` binding."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable not found: {name}")


class RenderError(CompileError):
    """Raised by the CSS generator."""

    kind = ErrorKind.RENDER


class InvalidValueError(RenderError):
    """Raised when a value is not acceptable CSS for its property."""

    def __init__(self, property_name: str, value: str):
        self.property = property_name
        self.value = value
        super().__init__(
            f"Invalid value '{value}' for property '{property_name}'. "
            "Expected a number with unit or valid CSS value."
        )


class ConfigError(CompileError):
    """Raised for unknown render modes or class-name formats."""

    kind = ErrorKind.CONFIG
