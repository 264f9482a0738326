"""Pastel color generation and conversion."""

import colorsys
import random
import re

from pastelboard.constants import LIGHTNESS, SATURATION

_HSL = re.compile(
    r"^\s*hsl\(\s*(-?\d+(?:\.\d+)?)(?:deg)?[\s,]+(\d+(?:\.\d+)?)%[\s,]+(\d+(?:\.\d+)?)%\s*\)\s*$"
)


def random_color(
    rng: random.Random | None = None,
    saturation: int = SATURATION,
    lightness: int = LIGHTNESS,
) -> str:
    """Random pastel color with a uniform hue.

    Saturation and lightness are fixed so every color stays readable
    under dark text. Returned as "hsl(<h>deg <s>% <l>%)".
    """
    hue = (rng or random).randrange(360)
    return f"hsl({hue}deg {saturation}% {lightness}%)"


def parse_hsl(color: str) -> tuple[float, float, float] | None:
    """Parse an hsl() color into (hue, saturation%, lightness%), or None."""
    match = _HSL.match(color)
    if not match:
        return None
    hue, sat, light = (float(g) for g in match.groups())
    return hue % 360, min(sat, 100.0), min(light, 100.0)


def hsl_to_hex(color: str) -> str | None:
    """Convert an hsl() color to "#rrggbb" for terminals that need RGB.

    Returns None if the color is not in hsl() form.
    """
    parsed = parse_hsl(color)
    if parsed is None:
        return None
    hue, sat, light = parsed
    r, g, b = colorsys.hls_to_rgb(hue / 360, light / 100, sat / 100)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
