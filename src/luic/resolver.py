"""Import resolver: inline IMPORT/TEMPLATE dependencies into one source text.

Each file's own body is wrapped in a layer marker pair::

    LAYER buttons START
    ADD padding 10px
    LAYER buttons END

Dependencies are expanded depth-first, so the deepest import comes first
and the entry file's own body comes last.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from luic.config import DEFAULT_EXTENSION
from luic.errors import CircularImportError, ImportLoadError

__all__ = ["ImportResolver", "ResolvedSource", "resolve_imports", "strip_directives"]

logger = logging.getLogger(__name__)

_DIRECTIVE_RE = re.compile(r"^[ \t]*(IMPORT|TEMPLATE)\s+\(([^)]+)\)", re.MULTILINE)

_DIRECTIVE_LINE_RE = re.compile(
    r"^[ \t]*(?:IMPORT|TEMPLATE)[ \t]+\([^)\n]+\)[ \t]*$", re.MULTILINE
)


@dataclass(frozen=True)
class ResolvedSource:
    """Combined text plus every file that contributed to it."""

    text: str
    files: list[str] = field(default_factory=list)


def strip_directives(content: str) -> str:
    """Remove whole-line IMPORT/TEMPLATE directives from *content*."""
    return _DIRECTIVE_LINE_RE.sub("", content)


def layer_marker(name: str, body: str) -> str:
    return f"LAYER {name} START\n{body}\nLAYER {name} END\n"


def layer_name_for(path: str | Path) -> str:
    # Marker names are single words for the tokenizer.
    return re.sub(r"\s+", "-", Path(path).stem)


class ImportResolver:
    """Depth-first resolver with cycle detection.

    ``_resolving`` is the stack of files whose imports are being expanded;
    meeting one of them again is a cycle. ``_expanded`` holds files that
    were already inlined, so a shared dependency appears only once.
    """

    def __init__(
        self,
        templates_dir: str | Path | None = None,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else Path.cwd() / "assets"
        self.extension = extension
        self._cache: dict[Path, str] = {}
        self._resolving: list[Path] = []
        self._expanded: set[Path] = set()

    def resolve(
        self, entry_path: str | Path, layer_name: str | None = None
    ) -> ResolvedSource:
        """Resolve *entry_path* and everything it imports.

        *layer_name* names the entry file's own layer; it defaults to the
        entry file's base name.
        """
        entry = Path(entry_path).resolve()
        self._resolving = []
        self._expanded = set()
        files: list[Path] = []

        content = self._read(entry, "entry")
        text = self._expand(entry, content, layer_name or layer_name_for(entry), files)
        logger.debug("resolved %s from %d file(s)", entry, len(files))
        return ResolvedSource(text=text, files=[str(p) for p in files])

    def _expand(
        self, path: Path, content: str, layer_name: str, files: list[Path]
    ) -> str:
        self._resolving.append(path)
        files.append(path)
        parts: list[str] = []

        for match in _DIRECTIVE_RE.finditer(content):
            directive, raw = match.group(1), match.group(2).strip()
            dependency = self._locate(path, directive, raw)
            if dependency in self._resolving:
                raise CircularImportError(
                    str(dependency), [str(p) for p in self._resolving]
                )
            if dependency in self._expanded:
                logger.debug("skipping %s, already inlined", dependency)
                continue
            dependency_content = self._read(dependency, directive)
            parts.append(
                self._expand(
                    dependency, dependency_content, layer_name_for(dependency), files
                )
            )

        parts.append(layer_marker(layer_name, strip_directives(content)))
        self._resolving.pop()
        self._expanded.add(path)
        return "\n".join(parts)

    def _locate(self, importer: Path, directive: str, raw: str) -> Path:
        if not Path(raw).suffix:
            raw = f"{raw}{self.extension}"
        base = self.templates_dir if directive == "TEMPLATE" else importer.parent
        return (base / raw).resolve()

    def _read(self, path: Path, directive: str) -> str:
        if path in self._cache:
            return self._cache[path]
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise ImportLoadError(directive, str(path), reason) from exc
        logger.debug("read %s (%d bytes)", path, len(content))
        self._cache[path] = content
        return content


def resolve_imports(
    entry_path: str | Path,
    layer_name: str | None = None,
    templates_dir: str | Path | None = None,
    extension: str = DEFAULT_EXTENSION,
) -> ResolvedSource:
    """Convenience wrapper around :meth:`ImportResolver.resolve`."""
    resolver = ImportResolver(templates_dir=templates_dir, extension=extension)
    return resolver.resolve(entry_path, layer_name=layer_name)
