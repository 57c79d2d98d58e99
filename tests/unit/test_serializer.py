"""Tests for the variables stylesheet serializer."""

import logging

from tokensmith.core.ir import Namespace
from tokensmith.core.serializer import (
    CssVariablesSerializer,
    category_of,
    partition,
    serialize,
)


def _banner(title: str) -> str:
    return (
        "  /* ==================== */\n"
        f"  /* {title.ljust(20)} */\n"
        "  /* ==================== */\n"
        "\n"
    )


class TestSerialize:
    def test_empty_input_keeps_banners(self):
        expected = (
            ":root {\n"
            + _banner("PRIMITIVES")
            + _banner("TYPOGRAPHY")
            + _banner("BLOCKS")
            + _banner("UTILITY TOKENS")
            + "}\n"
        )
        assert serialize([]) == expected

    def test_full_layout(self, make_token):
        tokens = [
            make_token("primitives.spacing.spacing-lg", "dimension", 24, unit="rem"),
            make_token("primitives.color.brand.500", "color", "#2f305e"),
            make_token("text.heading", "color", "{primitives.color.brand.500}"),
        ]
        expected = (
            ":root {\n"
            + _banner("PRIMITIVES")
            + "  /* brand */\n"
            "  --brand--500: #2f305e;\n"
            "\n"
            "  /* spacing */\n"
            "  --spacing--spacing-lg: 1.5rem;\n"
            "\n"
            + _banner("TYPOGRAPHY")
            + _banner("BLOCKS")
            + _banner("UTILITY TOKENS")
            + "  /* text */\n"
            "  --text--heading: var(--brand--500);\n"
            "\n"
            "}\n"
        )
        assert serialize(tokens) == expected

    def test_group_keeps_token_order(self, make_token):
        tokens = [
            make_token("primitives.color.brand.500", "color", "#2f305e"),
            make_token("primitives.color.brand.100", "color", "#ffffff"),
        ]
        css = serialize(tokens)
        assert css.index("--brand--500") < css.index("--brand--100")

    def test_custom_namespace_order(self, make_token):
        namespaces = (Namespace(key=None, title="OTHER"), Namespace(key="primitives", title="P"))
        tokens = [
            make_token("primitives.color.brand.500", "color", "#2f305e"),
            make_token("text.heading", "color", "#000000"),
        ]
        css = CssVariablesSerializer(namespaces=namespaces).serialize(tokens)
        assert css.index("OTHER") < css.index("--text--heading") < css.index("--brand--500")


    def test_namespace_only_path_skipped(self, make_token, caplog):
        with caplog.at_level(logging.WARNING):
            css = serialize([make_token("primitives.color", "color", "#000000")])

        assert css == serialize([])
        assert "--:" not in css
        assert "Skipping primitives.color" in caplog.text


class TestPartition:
    def test_exact_first_segment(self, make_token):
        tokens = [
            make_token("primitives.color.brand.500", "color", "#2f305e"),
            make_token("primitives-extra.size", "dimension", 4),
        ]
        buckets = {ns.title: members for ns, members in partition(tokens)}

        assert [t.dotted_path for t in buckets["PRIMITIVES"]] == ["primitives.color.brand.500"]
        assert [t.dotted_path for t in buckets["UTILITY TOKENS"]] == ["primitives-extra.size"]

    def test_every_token_in_exactly_one_bucket(self, make_token):
        tokens = [
            make_token("primitives.a", "color", "#000"),
            make_token("typography.b", "string", "x"),
            make_token("blocks.c", "color", "#000"),
            make_token("text.d", "color", "#000"),
        ]
        placed = [t for _, members in partition(tokens) for t in members]
        assert sorted(t.dotted_path for t in placed) == sorted(t.dotted_path for t in tokens)


class TestCategory:
    def test_first_non_namespace_segment(self, make_token):
        assert category_of(make_token("primitives.color.brand.500", "color", "#000")) == "brand"

    def test_fallback(self, make_token):
        assert category_of(make_token("primitives.color", "color", "#000")) == "other"
