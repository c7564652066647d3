from stylemacro.css.beautify import beautify_css
from stylemacro.css.denest import combine_selectors, denest, denest_css
from stylemacro.css.lexer import lex_css, strip_comments
from stylemacro.css.model import AtRule, CssNode, Rule, RuleSet, css_to_string

__all__ = [
    "AtRule",
    "Rule",
    "RuleSet",
    "CssNode",
    "css_to_string",
    "lex_css",
    "strip_comments",
    "denest",
    "denest_css",
    "combine_selectors",
    "beautify_css",
]
