from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from luic.errors import ConfigError
from luic.stylist import CLASS_NAME_FORMATTERS, RENDER_MODES

CLASS_NAME_FORMATS = tuple(CLASS_NAME_FORMATTERS)
DEFAULT_EXTENSION = ".lui"


def _default_templates_dir() -> str:
    return str(Path.cwd() / "assets")


@dataclass(frozen=True)
class CompileOptions:
    class_name_format: str = "minimalistic"
    mode: str = "standard"
    layers: bool = False
    mobile_first: bool = False
    templates_dir: str = field(default_factory=_default_templates_dir)
    extension: str = DEFAULT_EXTENSION

    def validate(self) -> "CompileOptions":
        """Raise :class:`ConfigError` for an unknown mode or format."""
        if self.mode not in RENDER_MODES:
            raise ConfigError(
                f"Unknown render mode {self.mode!r}; expected one of {', '.join(RENDER_MODES)}"
            )
        if self.class_name_format not in CLASS_NAME_FORMATS:
            raise ConfigError(
                f"Class name formatter {self.class_name_format!r} not found; "
                f"expected one of {', '.join(CLASS_NAME_FORMATS)}"
            )
        if not self.extension.startswith("."):
            raise ConfigError(f"File extension must start with '.': {self.extension!r}")
        return self
