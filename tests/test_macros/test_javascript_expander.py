"""Tests for the script macro expander."""

import pytest

from stylemacro.errors import WrongArgumentCountError
from stylemacro.macros import JavascriptMacroExpander


@pytest.fixture()
def expander() -> JavascriptMacroExpander:
    return JavascriptMacroExpander()


class TestForeach:
    def test_generates_guarded_loop(self, expander):
        out = expander.expand("¤foreach(item; items) { log(item); }")
        assert "var foreach_loop_temporary_2 = items;" in out
        assert "if(foreach_loop_temporary_2 != null)" in out
        assert "var item = foreach_loop_temporary_2[foreach_loop_counter_1];" in out
        assert "log(item);" in out

    def test_names_unique_per_loop(self, expander):
        expander.expand("¤foreach(a; b) { }")
        out = expander.expand("¤foreach(a; b) { }")
        assert "foreach_loop_counter_3" in out
        assert "foreach_loop_temporary_4" in out

    def test_body_is_expanded(self, expander):
        expander.define_variable("fn", "render")
        out = expander.expand("¤foreach(x; xs) { ¤fn(x); }")
        assert "render;" in out

    def test_needs_code_block(self, expander):
        with pytest.raises(WrongArgumentCountError):
            expander.expand("¤foreach(x)")

    def test_head_needs_semicolon(self, expander):
        with pytest.raises(WrongArgumentCountError):
            expander.expand("¤foreach(x) { y }")


class TestBuiltinSet:
    def test_css_builtins_absent(self, expander):
        assert expander.expand("[¤prefixed(a: b)]") == "[]"

    def test_generic_builtins_present(self, expander):
        assert expander.expand("¤echo(a, b)") == "a, b"
