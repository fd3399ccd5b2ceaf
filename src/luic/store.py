"""Variable store: name -> ordered (value, unit) slots for one compile."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    """One part of a variable's value, e.g. ``(10, "px")``."""

    value: str | int | float
    unit: str | None = None

    def render(self, unit: str | None = None) -> str:
        return f"{self.value}{unit if unit is not None else (self.unit or '')}"


class VariableStore:
    """Holds ``VAR`` bindings for exactly one compile invocation.

    The store does no validation of its own; the parser decides what may
    be defined and what a missing name means.
    """

    def __init__(self) -> None:
        self._variables: dict[str, tuple[Slot, ...]] = {}

    def define(
        self,
        name: str,
        values: Sequence[str | int | float],
        units: Sequence[str | None] | None = None,
    ) -> None:
        """Bind *name*, replacing any earlier binding.

        *units* is matched to *values* by position; missing entries mean
        "no unit".
        """
        units = list(units or [])
        units.extend([None] * (len(values) - len(units)))
        self._variables[name] = tuple(
            Slot(value, unit) for value, unit in zip(values, units)
        )
        logger.debug("defined variable %s = %s", name, self.get(name))

    def update(
        self,
        name: str,
        values: Sequence[str | int | float],
        units: Sequence[str | None] | None = None,
    ) -> bool:
        """Rebind an existing variable. Returns False if *name* is unknown."""
        if name not in self._variables:
            return False
        self.define(name, values, units)
        return True

    def slots(self, name: str) -> tuple[Slot, ...] | None:
        return self._variables.get(name)

    def get(self, name: str) -> str | None:
        slots = self._variables.get(name)
        if slots is None:
            return None
        return " ".join(slot.render() for slot in slots)

    def remove(self, name: str) -> bool:
        if name in self._variables:
            del self._variables[name]
            return True
        return False

    def clear(self) -> None:
        self._variables.clear()

    def all(self) -> dict[str, str]:
        return {name: self.get(name) or "" for name in self._variables}

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __len__(self) -> int:
        return len(self._variables)
