"""Tests for unit classification."""

import pytest

from tokensmith.core.units import UNIT_RULES, UnitRule, classify_unit


class TestClassifyUnit:
    @pytest.mark.parametrize(
        ("key", "unit"),
        [
            ("spacing-lg", "rem"),
            ("letter-spacing-tight", "em"),
            ("line-height-body", ""),
            ("border-width-thin", "px"),
            ("artboard-width", "px"),
            ("max-width-content", "px"),
            ("radius-sm", "rem"),
            ("padding-x", "rem"),
            ("margin-block", "rem"),
        ],
    )
    def test_known_keys(self, key: str, unit: str):
        assert classify_unit(key) == unit

    def test_no_match_returns_none(self):
        assert classify_unit("font-weight") is None
        assert classify_unit("") is None

    def test_first_match_wins(self):
        # "letter-spacing" also contains "spacing"
        assert classify_unit("letter-spacing") == "em"

    def test_order_is_load_bearing(self):
        reordered = (UnitRule("spacing", "rem"), UnitRule("letter-spacing", "em"))
        assert classify_unit("letter-spacing-tight", reordered) == "rem"

    def test_deterministic(self):
        assert classify_unit("spacing-xl") == classify_unit("spacing-xl")

    def test_rules_are_ordered_pairs(self):
        assert isinstance(UNIT_RULES, tuple)
        assert [r.substring for r in UNIT_RULES][:2] == ["line-height", "letter-spacing"]
