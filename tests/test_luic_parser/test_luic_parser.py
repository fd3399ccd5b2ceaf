"""Tests for the statement parser / property expander."""

import logging

import pytest

from luic import vocabulary
from luic.errors import ParseError, VariableNotFoundError
from luic.model.records import CommentRecord, Declaration, LayerRecord
from luic.model.tokens import Edge, Keyword, Property, Value
from luic.parser import Parser, expand_property, media_condition, split_unit
from luic.store import VariableStore
from luic.tokenizer import tokenize


@pytest.fixture()
def parser() -> Parser:
    return Parser(VariableStore())


def _parse(parser: Parser, source: str):
    return parser.parse(tokenize(source))


# ---------------------------------------------------------------------------
# ADD
# ---------------------------------------------------------------------------


class TestAdd:
    def test_simple_add(self, parser: Parser) -> None:
        assert _parse(parser, "ADD width 100px") == [Declaration("width", ("100px",))]

    def test_numeric_value_is_rendered_as_text(self, parser: Parser) -> None:
        assert _parse(parser, "ADD padding 1") == [Declaration("padding", ("1",))]

    def test_percent_is_fused(self, parser: Parser) -> None:
        assert _parse(parser, "ADD width 50%") == [Declaration("width", ("50%",))]

    def test_several_values_keep_source_order(self, parser: Parser) -> None:
        _parse(parser, "VAR accent = red")
        records = _parse(parser, "ADD border 1px solid {accent}")
        assert records == [Declaration("border", ("1px", "solid", "red"))]

    def test_bare_word_value(self, parser: Parser) -> None:
        records = _parse(parser, "ADD font-family Helvetica")
        assert records == [Declaration("font-family", ("Helvetica",))]

    def test_pseudo_class(self, parser: Parser) -> None:
        records = _parse(parser, "ADD background :hover blue")
        assert records == [
            Declaration("background", ("blue",), pseudo_class=":hover")
        ]

    def test_requires_property(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="requires a property"):
            _parse(parser, "ADD 100px")

    def test_requires_value(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="at least one value"):
            _parse(parser, "ADD width")

    def test_unrecognized_property(self, parser: Parser) -> None:
        tokens = [Keyword("ADD"), Property("marding"), Value("1")]
        with pytest.raises(ParseError, match="Invalid property: marding"):
            parser.parse(tokens)


class TestKeywords:
    def test_missing_keyword(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="no keyword"):
            _parse(parser, "width 100px")

    def test_multiple_keywords(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="multiple keywords"):
            _parse(parser, "ADD VAR width 1px")

    def test_import_is_a_no_op(self, parser: Parser) -> None:
        assert _parse(parser, "IMPORT (buttons)") == []

    def test_unsupported_keyword(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="Invalid keyword: STYLE"):
            _parse(parser, "STYLE width 1px")


# ---------------------------------------------------------------------------
# Property expansion
# ---------------------------------------------------------------------------


class TestExpansion:
    def test_single_identifier(self, parser: Parser) -> None:
        assert _parse(parser, "ADD margin $top 4px") == [
            Declaration("margin-top", ("4px",))
        ]

    def test_all_identifier(self, parser: Parser) -> None:
        records = _parse(parser, "ADD margin $all 4px")
        expected = sorted(p for p in vocabulary.PROPERTIES if p.startswith("margin-"))
        assert [r.property for r in records] == expected
        assert all(r.values == ("4px",) for r in records)
        assert "margin-left" in expected

    def test_several_identifiers(self, parser: Parser) -> None:
        records = _parse(parser, "ADD padding $top $bottom 2px")
        assert [r.property for r in records] == ["padding-top", "padding-bottom"]

    def test_invalid_expansion(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="Invalid property: color-top"):
            _parse(parser, "ADD color $top red")

    def test_expand_property_none(self) -> None:
        assert expand_property("margin", "none") == ["margin"]
        assert expand_property("margin") == ["margin"]

    def test_all_without_variants(self) -> None:
        with pytest.raises(ParseError):
            expand_property("opacity", "all")


# ---------------------------------------------------------------------------
# VAR and references
# ---------------------------------------------------------------------------


class TestVariables:
    def test_declare_and_reference(self, parser: Parser) -> None:
        _parse(parser, "VAR size = 50px")
        assert _parse(parser, "ADD width {size}") == [
            Declaration("width", ("50px",), optional_name="size")
        ]

    def test_undefined_reference(self, parser: Parser) -> None:
        with pytest.raises(VariableNotFoundError, match="Variable not found: size"):
            _parse(parser, "ADD width {size}")

    def test_multi_value_variable(self, parser: Parser) -> None:
        _parse(parser, "VAR pad = 10px 20px")
        assert parser.store.get("pad") == "10px 20px"

    def test_percent_variable(self, parser: Parser) -> None:
        _parse(parser, "VAR half = 50%")
        assert parser.store.get("half") == "50%"
        slots = parser.store.slots("half")
        assert slots is not None
        assert (slots[0].value, slots[0].unit) == (50, "%")

    def test_reference_with_unit_override(self, parser: Parser) -> None:
        _parse(parser, "VAR base = 8\nVAR gap = {base}px")
        assert parser.store.get("gap") == "8px"

    def test_typed_value(self, parser: Parser) -> None:
        _parse(parser, "VAR base = 8\nVAR gap = rem {base}")
        assert parser.store.get("gap") == "8rem"

    def test_reference_in_var_keeps_units(self, parser: Parser) -> None:
        _parse(parser, "VAR base = 4px\nVAR copy = {base}")
        assert parser.store.get("copy") == "4px"

    def test_undefined_reference_in_var(self, parser: Parser) -> None:
        with pytest.raises(VariableNotFoundError):
            _parse(parser, "VAR gap = {missing}")

    def test_redefinition_replaces(self, parser: Parser) -> None:
        _parse(parser, "VAR size = 1px\nVAR size = 2px")
        assert parser.variables == {"size": "2px"}

    def test_several_references_join_optional_name(self, parser: Parser) -> None:
        _parse(parser, "VAR a = 1px\nVAR b = 2px")
        records = _parse(parser, "ADD margin {a} {b}")
        assert records == [Declaration("margin", ("1px", "2px"), optional_name="a-b")]

    def test_mixed_values_have_no_optional_name(self, parser: Parser) -> None:
        _parse(parser, "VAR a = 1px")
        records = _parse(parser, "ADD margin {a} 2px")
        assert records[0].optional_name is None

    def test_var_requires_value(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="requires a value"):
            _parse(parser, "VAR size")


# ---------------------------------------------------------------------------
# Media conditions
# ---------------------------------------------------------------------------


class TestMedia:
    def test_literal_width(self, parser: Parser) -> None:
        records = _parse(parser, "ADD padding @768px 10px")
        assert records[0].media == "(min-width: 768px)"

    def test_bare_width_gets_px(self) -> None:
        assert media_condition("768") == "(min-width: 768px)"

    def test_variable_width(self, parser: Parser) -> None:
        _parse(parser, "VAR tablet = 1024px")
        records = _parse(parser, "ADD width @{tablet} 10px")
        assert records[0].media == "(min-width: 1024px)"

    def test_undefined_media_variable_is_dropped(self, parser: Parser) -> None:
        records = _parse(parser, "ADD width @{tablet} 10px")
        assert records == [Declaration("width", ("10px",))]


# ---------------------------------------------------------------------------
# Comments, layers and post-processing
# ---------------------------------------------------------------------------


class TestPostProcessing:
    def test_comments(self, parser: Parser) -> None:
        records = _parse(parser, "//* hello\n// hidden\nADD width 1px")
        assert records == [CommentRecord("hello"), Declaration("width", ("1px",))]

    def test_deduplication(self, parser: Parser) -> None:
        tokens = []
        for _ in range(100):
            tokens.extend(tokenize("ADD margin 100px\n"))
        assert parser.parse(tokens) == [Declaration("margin", ("100px",))]

    def test_single_statement_is_kept(self, parser: Parser) -> None:
        assert len(_parse(parser, "ADD margin 100px")) == 1

    def test_layers_are_not_deduplicated(self, parser: Parser) -> None:
        source = (
            "LAYER a START\nADD width 1px\nLAYER a END\n"
            "LAYER b START\nADD height 1px\nLAYER b END\n"
        )
        records = _parse(parser, source)
        assert [r for r in records if isinstance(r, LayerRecord)] == [
            LayerRecord("a", Edge.START),
            LayerRecord("a", Edge.END),
            LayerRecord("b", Edge.START),
            LayerRecord("b", Edge.END),
        ]

    def test_empty_layer_is_elided(self, parser: Parser) -> None:
        source = (
            "LAYER a START\nVAR x = 1px\nLAYER a END\n"
            "LAYER b START\nADD width {x}\nLAYER b END\n"
        )
        assert _parse(parser, source) == [
            LayerRecord("b", Edge.START),
            Declaration("width", ("1px",), optional_name="x"),
            LayerRecord("b", Edge.END),
        ]

    def test_layer_emptied_by_deduplication(self, parser: Parser) -> None:
        source = (
            "LAYER a START\nADD width 1px\nLAYER a END\n"
            "LAYER b START\nADD width 1px\nLAYER b END\n"
        )
        records = _parse(parser, source)
        assert LayerRecord("b", Edge.START) not in records


class TestSplitUnit:
    def test_integer_with_unit(self) -> None:
        assert split_unit("10px") == (10, "px")

    def test_decimal(self) -> None:
        assert split_unit("1.5rem") == ("1.5", "rem")

    def test_word(self) -> None:
        assert split_unit("red") == ("red", None)


# ---------------------------------------------------------------------------
# Comma-separated values, bare suffixes and unexpected characters
# ---------------------------------------------------------------------------


class TestCommaValues:
    def test_font_family_list(self, parser: Parser) -> None:
        records = _parse(parser, "ADD font-family Arial, sans-serif")
        assert records == [Declaration("font-family", ("Arial,", "sans-serif"))]
        assert records[0].joined == "Arial, sans-serif"

    def test_transition_list(self, parser: Parser) -> None:
        records = _parse(parser, "ADD transition opacity 1s, transform 2s")
        assert records[0].joined == "opacity 1s, transform 2s"

    def test_comma_after_percent(self, parser: Parser) -> None:
        records = _parse(parser, "ADD background-position 50%, 10px")
        assert records[0].values == ("50%,", "10px")

    def test_comma_in_variable(self, parser: Parser) -> None:
        _parse(parser, "VAR stack = Arial, sans-serif")
        assert parser.store.get("stack") == "Arial, sans-serif"
        records = _parse(parser, "ADD font-family {stack}")
        assert records[0].joined == "Arial, sans-serif"

    def test_comma_keeps_unit_in_variable(self, parser: Parser) -> None:
        _parse(parser, "VAR shadow = 1px, 2px")
        assert parser.store.get("shadow") == "1px, 2px"

    def test_leading_comma(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="before the first value"):
            _parse(parser, "ADD font-family , serif")


class TestBareExpansion:
    def test_all_without_dollar(self, parser: Parser) -> None:
        records = _parse(parser, "ADD margin all 4px")
        assert len(records) > 1
        assert [r.property for r in records] == vocabulary.property_variants("margin")
        assert all(r.values == ("4px",) for r in records)

    def test_side_without_dollar(self, parser: Parser) -> None:
        assert _parse(parser, "ADD margin top 4px") == [
            Declaration("margin-top", ("4px",))
        ]

    def test_transition_all_is_one_record(self, parser: Parser) -> None:
        records = _parse(parser, "ADD transition all 1s")
        assert records == [Declaration("transition", ("all", "1s"))]

    def test_display_none_is_a_value(self, parser: Parser) -> None:
        assert _parse(parser, "ADD display none") == [Declaration("display", ("none",))]


class TestUnexpectedCharacters:
    def test_unknown_character_in_add(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="Unexpected character ';'"):
            _parse(parser, "ADD width 1px ;")

    def test_unknown_character_in_var(self, parser: Parser) -> None:
        with pytest.raises(ParseError, match="in VAR statement"):
            _parse(parser, "VAR gap = 1px ?")

    def test_leading_dot_value(self, parser: Parser) -> None:
        assert _parse(parser, "ADD opacity .5") == [Declaration("opacity", (".5",))]


class TestDuplicateLogging:
    def test_dropped_variant_is_logged(self, parser: Parser, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="luic.parser.parser"):
            records = _parse(parser, "ADD color red\nADD color :hover red")
        assert records == [Declaration("color", ("red",))]
        assert "dropping duplicate record" in caplog.text
        assert ":hover" in caplog.text
