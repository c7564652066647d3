"""Tests for the CSS macro expander and the expand -> denest pipeline."""

from pathlib import Path

import pytest

from stylemacro.config import ExpanderConfig
from stylemacro.errors import (
    InvalidHexDigitError,
    UnbalancedBracesError,
    UnsupportedColorFormatError,
    WrongArgumentCountError,
)
from stylemacro.macros import CssMacroExpander


@pytest.fixture()
def expander() -> CssMacroExpander:
    return CssMacroExpander()


# ---------------------------------------------------------------------------
# prefixed
# ---------------------------------------------------------------------------


class TestPrefixed:
    def test_all_vendor_prefixes(self, expander):
        assert expander.expand("¤prefixed(border-radius: 4px);") == (
            "-moz-border-radius: 4px;"
            "-webkit-border-radius: 4px;"
            "-o-border-radius: 4px;"
            "-ms-border-radius: 4px;"
            "-khtml-border-radius: 4px;"
            "border-radius: 4px;"
        )

    def test_commas_in_value_survive(self, expander):
        out = expander.expand("¤prefixed(transition: color 1s, width 2s)")
        assert "-webkit-transition: color 1s, width 2s;" in out

    def test_configured_prefixes(self):
        expander = CssMacroExpander(ExpanderConfig(vendor_prefixes=("-webkit-", "")))
        assert expander.expand("¤prefixed(a: b)") == "-webkit-a: b;a: b;"

    def test_needs_a_declaration(self, expander):
        with pytest.raises(WrongArgumentCountError):
            expander.expand("¤prefixed()")


# ---------------------------------------------------------------------------
# Color builtins
# ---------------------------------------------------------------------------


class TestColorFunctions:
    def test_lighten_and_darken_meet_at_mid_gray(self, expander):
        assert expander.expand("¤lighten(#000000, 50%)") == "#808080"
        assert expander.expand("¤darken(#ffffff, 50%)") == "#808080"

    def test_rotate_hue(self, expander):
        assert expander.expand("¤rotateHue(#ff0000, 120)") == "#00ff00"

    def test_desaturate(self, expander):
        assert expander.expand("¤desaturate(#f00, 100%)") == "#808080"

    def test_saturate(self, expander):
        assert expander.expand("¤saturate(#ff0000, 0.5)") == "#ff0000"

    def test_color_from_variable(self, expander):
        src = "¤set(fg, #000)a { color: ¤lighten(¤fg, 1); }"
        assert expander.expand(src) == "a { color: #ffffff; }"

    def test_named_color_unsupported(self, expander):
        with pytest.raises(UnsupportedColorFormatError):
            expander.expand("¤lighten(red, 10%)")

    def test_bad_hex_digit(self, expander):
        with pytest.raises(InvalidHexDigitError):
            expander.expand("¤darken(#12g, 10%)")

    def test_punctuation_in_hex_is_a_bad_digit(self, expander):
        with pytest.raises(InvalidHexDigitError) as exc_info:
            expander.expand("¤lighten(#12-456, 1)")
        assert exc_info.value.digit == "-"

    def test_needs_two_arguments(self, expander):
        with pytest.raises(WrongArgumentCountError):
            expander.expand("¤lighten(#fff)")


# ---------------------------------------------------------------------------
# expand_and_denest
# ---------------------------------------------------------------------------


class TestExpandAndDenest:
    def test_full_pipeline(self, expander):
        src = (
            "¤set(accent, #000000)\n"
            ".card {\n"
            "\tcolor: ¤lighten(¤accent, 50%);\n"
            "\t:hover { color: ¤darken(#ffffff, 50%); }\n"
            "\t.title { font-weight: bold; }\n"
            "}\n"
        )
        assert expander.expand_and_denest(src) == (
            ".card {\n\tcolor: #808080;\n}\n\n"
            ".card:hover {\n\tcolor: #808080;\n}\n\n"
            ".card .title {\n\tfont-weight: bold;\n}"
        )

    def test_nested_without_macros(self, expander):
        src = ".outer { .inner { color: red; } :hover { color: blue; } }"
        assert expander.expand_and_denest(src) == (
            ".outer .inner {\n\tcolor: red;\n}\n\n.outer:hover {\n\tcolor: blue;\n}"
        )

    def test_at_rule_passes_through(self, expander):
        src = "@import url(a.css);\n.a { .b { x: y; } }"
        assert expander.expand_and_denest(src) == "@import url(a.css);\n.a .b {\n\tx: y;\n}"

    def test_macro_generates_declarations(self, expander):
        src = "¤define(rounded, r){¤prefixed(border-radius: ¤r);}.a { ¤rounded(2px) }"
        out = expander.expand_and_denest(src)
        assert out.startswith(".a {\n\t-moz-border-radius: 2px;\n")
        assert out.endswith("\tborder-radius: 2px;\n}")

    def test_unbalanced_input(self, expander):
        with pytest.raises(UnbalancedBracesError):
            expander.expand_and_denest("a { color: red;")


# ---------------------------------------------------------------------------
# Fixture stylesheet
# ---------------------------------------------------------------------------


FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestThemeFixture:
    @pytest.fixture()
    def output(self) -> str:
        return CssMacroExpander().expand_and_denest((FIXTURES / "theme.css").read_text())

    def test_no_markers_left(self, output: str) -> None:
        assert "¤" not in output

    def test_comment_removed(self, output: str) -> None:
        assert "/*" not in output

    def test_charset_first(self, output: str) -> None:
        assert output.startswith('@charset "utf-8";\n.card {\n')

    def test_flat_selectors(self, output: str) -> None:
        assert "\n\n.card:hover {\n\tbackground: #336699;\n}" in output
        assert "\n\n.card .title, .card .subtitle {\n" in output

    def test_prefixed_border_radius(self, output: str) -> None:
        for prefix in ("-moz-", "-webkit-", "-o-", "-ms-", "-khtml-"):
            assert f"\t{prefix}border-radius: 4px;\n" in output
