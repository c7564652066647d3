"""Tests for the compact-CSS beautifier."""

from stylemacro.css import beautify_css


class TestBeautify:
    def test_single_block(self):
        assert beautify_css("a{color:red;}") == "a {\n\tcolor: red;\n}"

    def test_blocks_separated_by_blank_line(self):
        assert beautify_css("a{color:red;}b{x:y;}") == "a {\n\tcolor: red;\n}\n\nb {\n\tx: y;\n}"

    def test_existing_space_after_colon_kept_single(self):
        assert beautify_css("a{color: red;}") == "a {\n\tcolor: red;\n}"
