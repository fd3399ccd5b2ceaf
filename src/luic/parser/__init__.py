from luic.parser.expand import expand_property, media_condition, split_unit
from luic.parser.parser import (
    Parser,
    elide_empty_layers,
    group_lines,
    parse,
    remove_duplicates,
)

__all__ = [
    "Parser",
    "elide_empty_layers",
    "expand_property",
    "group_lines",
    "media_condition",
    "parse",
    "remove_duplicates",
    "split_unit",
]
