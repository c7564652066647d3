"""Color model: an RGBA value plus HSL-space adjustments."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color.

    Channels are integers in 0-255.  Adjustments go through HSL, with hue,
    lightness and saturation in the 0-1 range used by :mod:`colorsys`.
    """

    r: int
    g: int
    b: int
    a: int = 255

    # --- HSL round trip -------------------------------------------------------

    def to_hls(self) -> tuple[float, float, float]:
        return colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)

    @classmethod
    def from_hls(cls, hue: float, lightness: float, saturation: float, alpha: int = 255) -> Color:
        rgb = colorsys.hls_to_rgb(hue, lightness, saturation)
        r, g, b = (int(round(x * 255)) for x in rgb)
        return cls(r, g, b, alpha)

    # --- serialization --------------------------------------------------------

    def to_css(self) -> str:
        """Return ``#rrggbb`` for opaque colors, ``#rrggbbaa`` otherwise."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text

    def __str__(self) -> str:
        return self.to_css()


# ---------------------------------------------------------------------------
# Adjustments
# ---------------------------------------------------------------------------


def lighten(color: Color, amount: float) -> Color:
    h, l, s = color.to_hls()
    return Color.from_hls(h, _clamp(l + amount), s, color.a)


def darken(color: Color, amount: float) -> Color:
    h, l, s = color.to_hls()
    return Color.from_hls(h, _clamp(l - amount), s, color.a)


def saturate(color: Color, amount: float) -> Color:
    h, l, s = color.to_hls()
    return Color.from_hls(h, l, _clamp(s + amount), color.a)


def desaturate(color: Color, amount: float) -> Color:
    h, l, s = color.to_hls()
    return Color.from_hls(h, l, _clamp(s - amount), color.a)


def rotate_hue(color: Color, degrees: float) -> Color:
    """Rotate the hue by *degrees* around the color wheel."""
    h, l, s = color.to_hls()
    return Color.from_hls((h + degrees / 360.0) % 1.0, l, s, color.a)
