"""Closed vocabularies of the LUI language and of the CSS it targets.

The compiler only ever asks "is this word a member of ...?" of these
tables; they are plain frozensets so the tokenizer, parser and generator
can share them without copying.
"""

from __future__ import annotations

KEYWORDS = frozenset({"ADD", "IMPORT", "STYLE", "VAR", "LAYER", "TEMPLATE"})

# Property-expansion suffixes written as ``$name``.
IDENTIFIERS = frozenset(
    {
        "none",
        "all",
        "left",
        "right",
        "top",
        "bottom",
        "inline",
        "block",
        "color",
        "center",
        "start",
        "end",
    }
)

# Length units and ``%``; used to validate typed references and typed values.
VALUE_TYPES = frozenset(
    {
        "%",
        "px",
        "em",
        "rem",
        "vh",
        "vw",
        "vmin",
        "vmax",
        "mm",
        "cm",
        "in",
        "pt",
        "pc",
        "ch",
        "ex",
    }
)

PROPERTIES = frozenset(
    {
        # box model
        "width",
        "height",
        "min-width",
        "min-height",
        "max-width",
        "max-height",
        "inline-size",
        "block-size",
        "box-sizing",
        "aspect-ratio",
        "margin",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "margin-block",
        "margin-block-start",
        "margin-block-end",
        "margin-inline",
        "margin-inline-start",
        "margin-inline-end",
        "padding",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "padding-block",
        "padding-block-start",
        "padding-block-end",
        "padding-inline",
        "padding-inline-start",
        "padding-inline-end",
        # borders and outlines
        "border",
        "border-top",
        "border-right",
        "border-bottom",
        "border-left",
        "border-block",
        "border-inline",
        "border-color",
        "border-style",
        "border-width",
        "border-radius",
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-left-radius",
        "border-bottom-right-radius",
        "border-collapse",
        "border-spacing",
        "outline",
        "outline-color",
        "outline-style",
        "outline-width",
        "outline-offset",
        # positioning
        "position",
        "top",
        "right",
        "bottom",
        "left",
        "inset",
        "z-index",
        "float",
        "clear",
        "display",
        "visibility",
        "overflow",
        "overflow-x",
        "overflow-y",
        # flex and grid
        "flex",
        "flex-direction",
        "flex-wrap",
        "flex-flow",
        "flex-grow",
        "flex-shrink",
        "flex-basis",
        "order",
        "justify-content",
        "justify-items",
        "justify-self",
        "align-content",
        "align-items",
        "align-self",
        "place-content",
        "place-items",
        "place-self",
        "gap",
        "row-gap",
        "column-gap",
        "grid",
        "grid-area",
        "grid-template",
        "grid-template-columns",
        "grid-template-rows",
        "grid-template-areas",
        "grid-column",
        "grid-column-start",
        "grid-column-end",
        "grid-row",
        "grid-row-start",
        "grid-row-end",
        "grid-auto-flow",
        "grid-auto-columns",
        "grid-auto-rows",
        # typography
        "color",
        "font",
        "font-family",
        "font-size",
        "font-style",
        "font-weight",
        "font-variant",
        "line-height",
        "letter-spacing",
        "word-spacing",
        "text-align",
        "text-decoration",
        "text-decoration-color",
        "text-decoration-line",
        "text-decoration-style",
        "text-indent",
        "text-overflow",
        "text-shadow",
        "text-transform",
        "white-space",
        "word-break",
        "vertical-align",
        "list-style",
        "list-style-type",
        "list-style-position",
        # backgrounds and effects
        "background",
        "background-color",
        "background-image",
        "background-position",
        "background-repeat",
        "background-size",
        "background-attachment",
        "background-clip",
        "box-shadow",
        "opacity",
        "filter",
        "backdrop-filter",
        "mix-blend-mode",
        "object-fit",
        "object-position",
        "cursor",
        "pointer-events",
        "user-select",
        "content",
        # motion
        "transform",
        "transform-origin",
        "transition",
        "transition-property",
        "transition-duration",
        "transition-timing-function",
        "transition-delay",
        "animation",
        "animation-name",
        "animation-duration",
        "animation-timing-function",
        "animation-delay",
        "animation-iteration-count",
        "animation-direction",
        "animation-fill-mode",
        "animation-play-state",
    }
)

# Properties whose bare numeric values get a default ``px`` unit.
PROPERTIES_REQUIRING_UNITS = frozenset(
    {
        "width",
        "height",
        "min-width",
        "min-height",
        "max-width",
        "max-height",
        "inline-size",
        "block-size",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "margin-block",
        "margin-block-start",
        "margin-block-end",
        "margin-inline",
        "margin-inline-start",
        "margin-inline-end",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "padding-block",
        "padding-block-start",
        "padding-block-end",
        "padding-inline",
        "padding-inline-start",
        "padding-inline-end",
        "border-width",
        "border-radius",
        "border-top-left-radius",
        "border-top-right-radius",
        "border-bottom-left-radius",
        "border-bottom-right-radius",
        "border-spacing",
        "outline-width",
        "outline-offset",
        "top",
        "right",
        "bottom",
        "left",
        "inset",
        "gap",
        "row-gap",
        "column-gap",
        "flex-basis",
        "font-size",
        "letter-spacing",
        "word-spacing",
        "text-indent",
    }
)

# Properties that accept several space-separated parts verbatim.
COMPOUND_PROPERTIES = frozenset(
    {"border", "margin", "padding", "background", "font", "animation"}
)

PSEUDO_CLASSES = frozenset(
    {
        "hover",
        "active",
        "focus",
        "focus-visible",
        "focus-within",
        "visited",
        "link",
        "target",
        "checked",
        "disabled",
        "enabled",
        "required",
        "optional",
        "invalid",
        "valid",
        "placeholder-shown",
        "read-only",
        "empty",
        "root",
        "first-child",
        "last-child",
        "only-child",
        "first-of-type",
        "last-of-type",
        "only-of-type",
        "nth-child",
        "nth-last-child",
        "nth-of-type",
        "nth-last-of-type",
        "not",
        "is",
        "where",
        "has",
    }
)

CSS_FUNCTIONS = frozenset(
    {
        "calc",
        "var",
        "min",
        "max",
        "clamp",
        "rgb",
        "rgba",
        "hsl",
        "hsla",
        "url",
        "env",
        "attr",
        "linear-gradient",
        "radial-gradient",
        "conic-gradient",
        "repeat",
        "minmax",
        "fit-content",
        "translate",
        "translateX",
        "translateY",
        "rotate",
        "scale",
        "skew",
        "cubic-bezier",
        "steps",
        "blur",
        "brightness",
        "drop-shadow",
    }
)

# Bare words the tokenizer reads as values rather than variable names.
CSS_VALUE_KEYWORDS = frozenset(
    {
        # globals
        "auto",
        "inherit",
        "initial",
        "unset",
        "revert",
        "revert-layer",
        "none",
        "normal",
        # display and layout
        "block",
        "inline",
        "inline-block",
        "flex",
        "inline-flex",
        "grid",
        "inline-grid",
        "contents",
        "table",
        "hidden",
        "visible",
        "scroll",
        "clip",
        "static",
        "relative",
        "absolute",
        "fixed",
        "sticky",
        "row",
        "row-reverse",
        "column",
        "column-reverse",
        "wrap",
        "nowrap",
        "wrap-reverse",
        "start",
        "end",
        "center",
        "stretch",
        "baseline",
        "flex-start",
        "flex-end",
        "space-between",
        "space-around",
        "space-evenly",
        "left",
        "right",
        "top",
        "bottom",
        "both",
        "border-box",
        "content-box",
        "cover",
        "contain",
        "repeat",
        "no-repeat",
        # typography
        "bold",
        "bolder",
        "lighter",
        "italic",
        "oblique",
        "underline",
        "overline",
        "line-through",
        "uppercase",
        "lowercase",
        "capitalize",
        "justify",
        "ellipsis",
        "pre",
        "pre-wrap",
        "break-all",
        "serif",
        "sans-serif",
        "monospace",
        # borders
        "solid",
        "dashed",
        "dotted",
        "double",
        "groove",
        "ridge",
        "inset",
        "outset",
        # interaction and motion
        "pointer",
        "default",
        "text",
        "move",
        "not-allowed",
        "grab",
        "ease",
        "ease-in",
        "ease-out",
        "ease-in-out",
        "linear",
        "infinite",
        "alternate",
        "forwards",
        "backwards",
        "paused",
        "running",
        "max-content",
        "min-content",
        "fit-content",
        # colors
        "transparent",
        "currentColor",
        "black",
        "white",
        "red",
        "green",
        "blue",
        "yellow",
        "orange",
        "purple",
        "pink",
        "gray",
        "grey",
        "silver",
        "navy",
        "teal",
        "maroon",
        "olive",
        "lime",
        "aqua",
        "fuchsia",
        "crimson",
        "gold",
        "indigo",
        "coral",
        "tomato",
    }
)

# Properties where a bare ``all`` is a value (``transition: all 1s``).
ALL_AS_VALUE_PROPERTIES = frozenset({"transition", "transition-property", "will-change"})

# Sizing keywords accepted even where a length is required.
INTRINSIC_SIZES = frozenset(
    {"max-content", "min-content", "fit-content", "-webkit-fill-available"}
)


def is_keyword(word: str) -> bool:
    return word in KEYWORDS


def is_property(word: str) -> bool:
    return word in PROPERTIES


def is_identifier(word: str) -> bool:
    return word in IDENTIFIERS


def is_value_type(word: str) -> bool:
    return word in VALUE_TYPES


def is_value_keyword(word: str) -> bool:
    return word in CSS_VALUE_KEYWORDS


def is_pseudo_class(name: str) -> bool:
    return name in PSEUDO_CLASSES


def property_variants(base: str) -> list[str]:
    """Recognized ``base-*`` properties, sorted."""
    prefix = f"{base}-"
    return sorted(p for p in PROPERTIES if p.startswith(prefix))
