"""Tests for class-name formatting and CSS generation."""

import pytest

from luic.errors import ConfigError, InvalidValueError, RenderError
from luic.model.records import CommentRecord, Declaration, LayerRecord
from luic.model.tokens import Edge
from luic.stylist import CssGenerator, generate, select_class_formatter, validate_value
from luic.stylist.formatter import safe_class_name

WIDTH = Declaration("width", ("100px",))


# ---------------------------------------------------------------------------
# Class-name formatters
# ---------------------------------------------------------------------------


class TestClassFormatters:
    def test_minimalistic(self) -> None:
        assert select_class_formatter("minimalistic")(WIDTH) == ".w_100px"

    def test_standard(self) -> None:
        assert select_class_formatter("standard")(WIDTH) == ".w_100px"

    def test_full_name(self) -> None:
        assert select_class_formatter("full-name")(WIDTH) == ".Width_100px"

    def test_full_name_hyphenated_property(self) -> None:
        decl = Declaration("background-color", ("red",))
        assert select_class_formatter("full-name")(decl) == ".BackgroundColor_red"

    def test_bootstrap(self) -> None:
        decl = Declaration("padding-top", ("4px",))
        assert select_class_formatter("bootstrap")(decl) == ".p_4px"

    def test_pseudo_class_tag(self) -> None:
        decl = Declaration("width", ("100px",), pseudo_class=":hover")
        assert select_class_formatter("minimalistic")(decl) == ".w_100px_h"

    def test_media_tag(self) -> None:
        decl = Declaration("width", ("100px",), media="(min-width: 768px)")
        assert select_class_formatter("minimalistic")(decl) == ".w_100px_m768"

    def test_optional_name_is_shortened(self) -> None:
        decl = Declaration("width", ("50px",), optional_name="size")
        assert select_class_formatter("minimalistic")(decl) == ".w_sz"
        assert select_class_formatter("standard")(decl) == ".w_size"

    def test_percent_and_special_characters(self) -> None:
        decl = Declaration("width", ("50%",))
        assert select_class_formatter("minimalistic")(decl) == ".w_50p"
        assert safe_class_name("rgba(0,0,0,0.5)") == "rgba00005"

    def test_multi_part_value(self) -> None:
        decl = Declaration("margin", ("0 auto",))
        assert select_class_formatter("minimalistic")(decl) == ".m_0-auto"

    def test_unknown_formatter(self) -> None:
        with pytest.raises(ConfigError, match="not found"):
            select_class_formatter("fancy")


# ---------------------------------------------------------------------------
# Value validation
# ---------------------------------------------------------------------------


class TestValidateValue:
    def test_unit_value_passes(self) -> None:
        assert validate_value("100px", "width") == "100px"

    def test_bare_number_gets_px(self) -> None:
        assert validate_value("100", "width") == "100px"

    def test_keyword(self) -> None:
        assert validate_value("auto", "width") == "auto"

    def test_intrinsic_size(self) -> None:
        assert validate_value("fit-content", "width") == "fit-content"

    def test_invalid_length(self) -> None:
        with pytest.raises(InvalidValueError, match="Invalid value 'banana' for property 'width'"):
            validate_value("banana", "width")

    def test_compound_property_passes_through(self) -> None:
        assert validate_value("1px solid whatever", "border") == "1px solid whatever"

    def test_unitless_number_for_other_properties(self) -> None:
        assert validate_value("0.5", "opacity") == "0.5"

    def test_colors(self) -> None:
        assert validate_value("#fff", "color") == "#fff"
        assert validate_value("rgba(0, 0, 0, 0.5)", "background-color") == "rgba(0, 0, 0, 0.5)"

    def test_free_identifier(self) -> None:
        assert validate_value("Helvetica", "font-family") == "Helvetica"

    def test_function(self) -> None:
        assert validate_value("calc(100% - 2px)", "width") == "calc(100% - 2px)"

    def test_empty(self) -> None:
        with pytest.raises(RenderError, match="Empty value"):
            validate_value("  ", "width")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRenderModes:
    def test_minimalistic(self) -> None:
        assert generate([WIDTH], "minimalistic", "minimalistic") == ".w_100px{width:100px}"

    def test_standard(self) -> None:
        assert generate([WIDTH], "minimalistic", "standard") == (
            ".w_100px {\n  width: 100px;\n}"
        )

    def test_pretty(self) -> None:
        css = generate([WIDTH, Declaration("height", ("1px",))], mode="pretty")
        assert css == (
            ".w_100px {\n    width: 100px;\n}\n\n.h_1px {\n    height: 1px;\n}"
        )

    def test_optional_name(self) -> None:
        decl = Declaration("width", ("50px",), optional_name="size")
        assert generate([decl], "minimalistic", "minimalistic") == ".w_sz{width:50px}"

    def test_pseudo_class_selector(self) -> None:
        decl = Declaration("background", ("blue",), pseudo_class=":hover")
        assert generate([decl], "minimalistic", "minimalistic") == (
            ".b_blue_h:hover{background:blue}"
        )

    def test_default_unit_in_output(self) -> None:
        decl = Declaration("width", ("100",))
        assert generate([decl], "minimalistic", "minimalistic") == ".w_100{width:100px}"

    def test_comment(self) -> None:
        css = generate([CommentRecord("hello"), WIDTH], mode="standard")
        assert css.startswith("/* hello */\n")

    def test_invalid_value_aborts(self) -> None:
        with pytest.raises(InvalidValueError):
            generate([WIDTH, Declaration("width", ("banana",))])

    def test_unknown_render_mode(self) -> None:
        with pytest.raises(ConfigError):
            CssGenerator(mode="compact")


class TestMediaGroups:
    def test_shared_condition_is_grouped(self) -> None:
        records = [
            Declaration("padding", ("10px",), media="(min-width: 768px)"),
            Declaration("margin", ("5px",), media="(min-width: 768px)"),
            Declaration("width", ("1px",)),
        ]
        css = generate(records, "minimalistic", "minimalistic")
        assert css == (
            ".w_1px{width:1px}"
            "@media (max-width: 768px){.p_10px_m768{padding:10px}.m_5px_m768{margin:5px}}"
        )

    def test_mobile_first_keeps_min_width(self) -> None:
        records = [Declaration("padding", ("10px",), media="(min-width: 768px)")]
        css = generate(records, "minimalistic", "minimalistic", mobile_first=True)
        assert css.startswith("@media (min-width: 768px){")

    def test_conditions_in_first_seen_order(self) -> None:
        records = [
            Declaration("width", ("1px",), media="(min-width: 1024px)"),
            Declaration("width", ("2px",), media="(min-width: 640px)"),
            Declaration("width", ("3px",), media="(min-width: 1024px)"),
        ]
        css = generate(records, mode="standard")
        assert css.count("@media") == 2
        assert css.index("1024px") < css.index("640px")
        assert css.index("w_1px") < css.index("w_3px") < css.index("w_2px")

    def test_standard_media_block_is_indented(self) -> None:
        records = [Declaration("padding", ("10px",), media="(min-width: 768px)")]
        assert generate(records, mode="standard") == (
            "@media (max-width: 768px) {\n"
            "  .p_10px_m768 {\n"
            "    padding: 10px;\n"
            "  }\n"
            "}"
        )

    def test_malformed_condition(self) -> None:
        records = [Declaration("padding", ("10px",), media="(min-width: wide)")]
        with pytest.raises(RenderError, match="Invalid media query condition"):
            generate(records)


class TestLayers:
    RECORDS = [
        LayerRecord("base", Edge.START),
        Declaration("width", ("1px",)),
        LayerRecord("base", Edge.END),
        LayerRecord("main", Edge.START),
        Declaration("height", ("2px",)),
        LayerRecord("main", Edge.END),
    ]

    def test_layers_enabled(self) -> None:
        css = generate(self.RECORDS, mode="standard", layers=True)
        assert css == (
            "@layer base, main;\n"
            "@layer base {\n"
            "  .w_1px {\n"
            "    width: 1px;\n"
            "  }\n"
            "}\n"
            "@layer main {\n"
            "  .h_2px {\n"
            "    height: 2px;\n"
            "  }\n"
            "}"
        )

    def test_layers_disabled(self) -> None:
        css = generate(self.RECORDS, "minimalistic", "minimalistic")
        assert css == ".w_1px{width:1px}.h_2px{height:2px}"

    def test_unclosed_layer_is_closed(self) -> None:
        records = [LayerRecord("base", Edge.START), Declaration("width", ("1px",))]
        css = generate(records, "minimalistic", "minimalistic", layers=True)
        assert css == "@layer base;@layer base {.w_1px{width:1px}}"


class TestCommaSeparatedValues:
    def test_font_family_list_is_valid(self) -> None:
        assert validate_value("Arial, sans-serif", "font-family") == "Arial, sans-serif"

    def test_transition_list_is_valid(self) -> None:
        value = "opacity 1s, transform 2s"
        assert validate_value(value, "transition") == value

    def test_comma_is_kept_in_output_and_dropped_from_class(self) -> None:
        decl = Declaration("font-family", ("Arial,", "sans-serif"))
        assert generate([decl], "minimalistic", "minimalistic") == (
            ".ff_Arial-sans-serif{font-family:Arial, sans-serif}"
        )

    def test_leading_dot_decimal(self) -> None:
        assert validate_value(".5", "opacity") == ".5"
        assert validate_value(".5", "width") == ".5px"
