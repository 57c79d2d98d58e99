"""Tests for token value formatting."""

import logging

import pytest

from tokensmith.core.formatter import (
    SYSTEM_FONT_STACK,
    TokenFormatter,
    format_token,
    format_value,
    nameable,
    variable_name,
)


class TestVariableName:
    def test_strips_namespace_segments(self):
        assert variable_name(["primitives", "color", "brand", "primary"]) == "--brand--primary"

    def test_strips_segments_anywhere(self):
        assert variable_name(["blocks", "button", "color", "primary"]) == "--button--primary"

    def test_catch_all_path(self):
        assert variable_name(["text", "heading"]) == "--text--heading"


class TestDimensions:
    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            (24, "rem", "1.5rem"),
            (16, None, "1rem"),
            (14, "rem", "0.875rem"),
            (1, "px", "1px"),
            (1200, "px", "1200px"),
            (8, "em", "0.5em"),
            (24, "", "1.5"),
            (50, "%", "50%"),
        ],
    )
    def test_unit_conversion(self, make_token, value, unit, expected):
        token = make_token("primitives.size.x", "dimension", value, unit=unit)
        assert format_value(token) == expected

    def test_line_height_pixels(self, make_token):
        token = make_token("typography.line-height.base", "dimension", 24)
        assert format_value(token) == "1.5"

    def test_line_height_ratio_kept(self, make_token):
        token = make_token("typography.line-height.headings", "dimension", 1.2)
        assert format_value(token) == "1.2"

    def test_line_height_checked_before_unit(self, make_token):
        token = make_token("typography.line-height.base", "dimension", 16, unit="px")
        assert format_value(token) == "1"

    def test_custom_base(self, make_token):
        token = make_token("primitives.spacing.spacing-lg", "dimension", 20, unit="rem")
        assert TokenFormatter(base=10).format_value(token) == "2rem"


class TestAliases:
    def test_alias_becomes_var(self, make_token):
        token = make_token("text.heading", "color", "{primitives.color.brand.500}")
        assert format_value(token) == "var(--brand--500)"

    def test_alias_wins_over_dimension(self, make_token):
        token = make_token(
            "blocks.card.padding",
            "dimension",
            24,
            original_value="{primitives.spacing.spacing-lg}",
            unit="rem",
        )
        assert format_value(token) == "var(--spacing--spacing-lg)"


class TestFontFamily:
    def test_quotes_names_with_spaces(self, make_token):
        token = make_token("typography.font-family.headings", "string", "Open Sans")
        assert format_value(token) == f'"Open Sans", {SYSTEM_FONT_STACK}'

    def test_single_word_unquoted(self, make_token):
        token = make_token("typography.font-family.body", "string", "Inter")
        assert format_value(token) == f"Inter, {SYSTEM_FONT_STACK}"

    def test_requires_font_family_segment(self, make_token):
        token = make_token("typography.font-families.body", "string", "Inter")
        assert format_value(token) == "Inter"


class TestPassthrough:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, "true"), (False, "false"), (700, "700"), (700.0, "700"), (1.25, "1.25")],
    )
    def test_js_stringification(self, make_token, value, expected):
        token = make_token("typography.font-weight.headings", "number", value)
        assert format_value(token) == expected

    def test_non_numeric_dimension_passes_through(self, make_token):
        token = make_token("primitives.size.auto", "dimension", "auto")
        assert format_value(token) == "auto"


def test_format_token(make_token):
    token = make_token("primitives.color.brand.500", "color", "#2f305e")
    assert format_token(token) == "  --brand--500: #2f305e;"


class TestLists:
    def test_resolved_list_joined(self, make_token):
        token = make_token(
            "typography.stack.body",
            "string",
            ["Inter", "serif"],
            original_value=["{typography.font-family.brand}", "serif"],
        )
        assert format_value(token) == "Inter,serif"

    def test_unresolved_items_become_var(self, make_token):
        token = make_token("typography.stack.body", "string", ["{primitives.missing}", 12])
        assert format_value(token) == "var(--missing),12"
        assert "{" not in format_token(token)


class TestUnnameablePaths:
    def test_only_namespace_segments(self):
        with pytest.raises(ValueError, match="primitives.color"):
            variable_name(["primitives", "color"])

    def test_nameable_drops_and_logs(self, make_token, caplog):
        tokens = [
            make_token("primitives.color", "color", "#000"),
            make_token("primitives.color.ink", "color", "#000"),
        ]
        with caplog.at_level(logging.WARNING):
            kept = nameable(tokens)

        assert [t.dotted_path for t in kept] == ["primitives.color.ink"]
        assert "Skipping primitives.color" in caplog.text
