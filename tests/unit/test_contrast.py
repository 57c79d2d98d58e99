"""Tests for WCAG contrast math."""

import pytest

from tokensmith.core.contrast import (
    compliance_label,
    contrast_combinations,
    contrast_ratio,
    parse_hex,
    relative_luminance,
    wcag_compliance,
)
from tokensmith.core.errors import ColorError
from tokensmith.core.ir import NamedColor


def _color(name: str, value: str) -> NamedColor:
    return NamedColor(name=name, value=value, human_name=name.strip("-"))


class TestLuminance:
    def test_extremes(self):
        assert relative_luminance("#000000") == 0
        assert relative_luminance("#ffffff") == pytest.approx(1)

    def test_shorthand_and_alpha(self):
        assert relative_luminance("#fff") == relative_luminance("#ffffff")
        assert relative_luminance("#2f305e80") == relative_luminance("#2f305e")

    @pytest.mark.parametrize("value", ["", "#12", "#12345", "#gggggg", "blue"])
    def test_invalid_hex(self, value: str):
        with pytest.raises(ColorError):
            parse_hex(value)

    def test_color_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hex("not-a-colour")


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21)

    def test_identical_colors(self):
        assert contrast_ratio("#2f305e", "#2f305e") == pytest.approx(1)

    @pytest.mark.parametrize(("a", "b"), [("#2f305e", "#ffffff"), ("#777777", "#111111")])
    def test_symmetric(self, a: str, b: str):
        assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_hash_optional(self):
        assert contrast_ratio("000000", "ffffff") == pytest.approx(21)


class TestWcagCompliance:
    def test_below_aa_large(self):
        result = wcag_compliance(2.9)
        assert not (result.aa_large or result.aa_all or result.aaa_large or result.aaa_all)

    def test_aa_large_boundary(self):
        result = wcag_compliance(3.0)
        assert result.aa_large
        assert not result.aa_all

    def test_aa_all_boundary(self):
        result = wcag_compliance(4.5)
        assert result.aa_large and result.aa_all and result.aaa_large
        assert not result.aaa_all

    def test_aaa_all_boundary(self):
        result = wcag_compliance(7.0)
        assert result.aaa_all

    @pytest.mark.parametrize(
        ("ratio", "label"),
        [
            (21, "AAA ✓ All sizes"),
            (5, "AA ✓ | AAA ✓ Large"),
            (3.5, "AA ✓ Large"),
            (2, ""),
        ],
    )
    def test_labels(self, ratio: float, label: str):
        assert compliance_label(wcag_compliance(ratio)) == label


class TestCombinations:
    def test_directional_pairs_sorted(self):
        colors = [
            _color("--brand--ink", "#000000"),
            _color("--brand--paper", "#ffffff"),
            _color("--brand--mid", "#777777"),
        ]
        pairs = contrast_combinations(colors)
        ratios = [pair.ratio for pair in pairs]

        assert ratios == sorted(ratios, reverse=True)
        assert (pairs[0].foreground.name, pairs[0].background.name) == (
            "--brand--ink",
            "--brand--paper",
        )
        assert (pairs[1].foreground.name, pairs[1].background.name) == (
            "--brand--paper",
            "--brand--ink",
        )
        assert all(pair.foreground != pair.background for pair in pairs)

    def test_low_contrast_pairs_dropped(self):
        colors = [_color("--brand--a", "#777777"), _color("--brand--b", "#888888")]
        assert contrast_combinations(colors) == []

    def test_every_pair_passes_aa_large(self):
        colors = [
            _color("--brand--ink", "#000000"),
            _color("--brand--paper", "#ffffff"),
            _color("--brand--mid", "#777777"),
        ]
        assert all(pair.wcag.aa_large for pair in contrast_combinations(colors))
