"""Tests for colour utility classes."""

from tokensmith.core.utilities import UTILITIES_HEADER, class_name, emit_utilities


class TestClassName:
    def test_single_dash_join(self, make_token):
        token = make_token("primitives.color.brand.primary", "color", "#2f305e")
        assert class_name(token) == "brand-primary"

    def test_double_dash_collapsed(self, make_token):
        token = make_token("primitives.color.brand--dark.blue", "color", "#000")
        assert class_name(token) == "brand-dark-blue"


class TestEmitUtilities:
    def test_rules_for_color_token(self, make_token):
        token = make_token("primitives.color.brand.primary", "color", "#2f305e")
        css = emit_utilities([token])

        assert (
            ".has-color-brand-primary {\n"
            "  color: var(--brand--primary) !important;\n"
            "}\n\n"
            ".has-bg-brand-primary {\n"
            "  background-color: var(--brand--primary) !important;\n"
            "}\n\n"
        ) in css

    def test_only_color_tokens(self, make_token):
        tokens = [
            make_token("primitives.spacing.spacing-lg", "dimension", 24),
            make_token("text.heading", "color", "{primitives.color.brand.500}"),
        ]
        css = emit_utilities(tokens)
        assert "spacing" not in css
        assert ".has-color-text-heading" in css
        assert ".has-bg-text-heading" in css

    def test_empty_output(self):
        assert emit_utilities([]) == (
            UTILITIES_HEADER + "\n/* COLOR UTILITIES */\n\n/* END COLOR UTILITIES */\n"
        )

    def test_namespace_only_path_skipped(self, make_token):
        token = make_token("primitives.color", "color", "#000000")
        assert emit_utilities([token]) == emit_utilities([])

    def test_input_order(self, make_token):
        tokens = [
            make_token("primitives.color.gray.900", "color", "#111111"),
            make_token("primitives.color.brand.500", "color", "#2f305e"),
        ]
        css = emit_utilities(tokens)
        assert css.index("has-color-gray-900") < css.index("has-color-brand-500")
