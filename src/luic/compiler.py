"""Compile pipeline: resolver -> tokenizer -> parser -> generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from luic.config import CompileOptions
from luic.model.records import Record
from luic.model.tokens import Token
from luic.parser import Parser
from luic.resolver import ImportResolver, layer_name_for
from luic.store import VariableStore
from luic.stylist import CssGenerator
from luic.tokenizer import tokenize

__all__ = ["CompileResult", "compile_file", "compile_source"]

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Output of one compile plus what a host may want to show about it."""

    css: str
    records: list[Record] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)
    variables: dict[str, str] = field(default_factory=dict)
    source_files: list[str] = field(default_factory=list)

    @property
    def rule_count(self) -> int:
        return sum(1 for r in self.records if r.property not in ("COMMENT", "LAYER"))


def compile_source(
    text: str,
    options: CompileOptions | None = None,
    *,
    store: VariableStore | None = None,
) -> CompileResult:
    """Compile already-resolved source *text* to CSS.

    Any :class:`~luic.errors.CompileError` aborts the compile; nothing is
    returned for partially valid input.
    """
    options = (options or CompileOptions()).validate()
    generator = CssGenerator(
        class_name_format=options.class_name_format,
        mode=options.mode,
        layers=options.layers,
        mobile_first=options.mobile_first,
    )
    store = store if store is not None else VariableStore()

    tokens = tokenize(text)
    parser = Parser(store)
    records = parser.parse(tokens)
    css = generator.generate(records)
    logger.debug("compiled %d record(s) into %d byte(s) of CSS", len(records), len(css))
    return CompileResult(
        css=css, records=records, tokens=tokens, variables=parser.variables
    )


def compile_file(
    path: str | Path,
    options: CompileOptions | None = None,
    *,
    output_name: str | None = None,
) -> CompileResult:
    """Resolve imports of *path* and compile the combined text.

    The entry file's layer is named after *output_name* (an output file
    path or base name) when given, otherwise after the entry file.
    """
    options = (options or CompileOptions()).validate()
    resolver = ImportResolver(
        templates_dir=options.templates_dir, extension=options.extension
    )
    layer_name = layer_name_for(output_name) if output_name else None
    resolved = resolver.resolve(path, layer_name=layer_name)
    result = compile_source(resolved.text, options)
    result.source_files = resolved.files
    return result
