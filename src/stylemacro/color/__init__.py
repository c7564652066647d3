from stylemacro.color.model import Color, darken, desaturate, lighten, rotate_hue, saturate
from stylemacro.color.parser import read_css_color, read_css_number

__all__ = [
    "Color",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "rotate_hue",
    "read_css_color",
    "read_css_number",
]
