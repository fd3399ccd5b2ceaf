"""Parser output: one record per CSS rule, comment or layer boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from luic.model.tokens import Edge

COMMENT = "COMMENT"
LAYER = "LAYER"


@dataclass(frozen=True)
class Declaration:
    """A single class rule to emit.

    Attributes:
        property: A recognized CSS property name.
        values: Resolved values, joined with a space when rendered.
        optional_name: Variable name(s) the values came from; shortens the class name.
        pseudo_class: Selector suffix such as ``:hover``.
        media: Normalized condition such as ``(min-width: 768px)``.
    """

    property: str
    values: tuple[str, ...]
    optional_name: str | None = None
    pseudo_class: str | None = None
    media: str | None = None

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError(f"Declaration for {self.property!r} has no values")

    @property
    def joined(self) -> str:
        return " ".join(self.values)


@dataclass(frozen=True)
class CommentRecord:
    """A public ``//*`` comment copied into the output."""

    text: str

    @property
    def values(self) -> tuple[str, ...]:
        return (self.text,)

    property: ClassVar[str] = COMMENT


@dataclass(frozen=True)
class LayerRecord:
    """A START or END boundary of one source file's layer."""

    name: str
    edge: Edge

    @property
    def values(self) -> tuple[str, str]:
        return (self.name, self.edge.value)

    property: ClassVar[str] = LAYER


Record = Union[Declaration, CommentRecord, LayerRecord]
