from luic.stylist.formatter import (
    CLASS_NAME_FORMATTERS,
    ClassFormatter,
    safe_class_name,
    select_class_formatter,
)
from luic.stylist.generator import RENDER_MODES, CssGenerator, generate, validate_value

__all__ = [
    "CLASS_NAME_FORMATTERS",
    "ClassFormatter",
    "CssGenerator",
    "RENDER_MODES",
    "generate",
    "safe_class_name",
    "select_class_formatter",
    "validate_value",
]
