from __future__ import annotations


def beautify_css(css: str) -> str:
    """Spread compact CSS over lines: one declaration per line, tab indented."""
    css = css.replace(":", ": ")
    css = css.replace(":  ", ": ")
    css = css.replace("{", " {\n\t")
    css = css.replace(";", ";\n\t")
    css = css.replace("\t}", "}\n\n")
    return css.strip()
