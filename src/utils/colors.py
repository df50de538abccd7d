"""
Color conversion utilities

Pure functions converting between the HEX, RGB, RGBA and HSL text notations.
Every string goes through classify() first; parse() never raises and returns
None for anything it does not recognize, so callers can keep their previous value.
"""

import math
import re
from typing import NamedTuple, Optional

from models.enums import ColorNotation


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]"""
    h: float
    s: float
    l: float


class ParsedColor(NamedTuple):
    r: int
    g: int
    b: int
    a: Optional[float] = None


_HEX_RE = re.compile(r'^#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$', re.IGNORECASE)
_RGB_RE = re.compile(r'^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$', re.IGNORECASE)
_RGBA_RE = re.compile(
    r'^rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.?\d+)\s*\)$', re.IGNORECASE
)
_HSL_RE = re.compile(
    r'^hsl\(\s*(\d*\.?\d+)\s*,\s*(\d*\.?\d+)%\s*,\s*(\d*\.?\d+)%\s*\)$', re.IGNORECASE
)
_HEX_DIGITS_RE = re.compile(r'^[0-9A-F]*$')


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]"""
    return max(low, min(high, value))


def clamp_channel(value: float) -> int:
    """Clamp an 8-bit channel to [0, 255] and round half up"""
    return int(math.floor(clamp(value, 0, 255) + 0.5))


def clamp_alpha(value: float) -> float:
    return float(clamp(value, 0.0, 1.0))


def normalize_hue(value: float) -> float:
    """
    Clamp hue to [0, 360] and fold 360 onto 0 so the result lies in [0, 360).

    Example:
        normalize_hue(400)  # 0.0
        normalize_hue(-5)   # 0.0
        normalize_hue(359)  # 359.0
    """
    return float(clamp(value, 0, 360)) % 360


def classify(text: str) -> ColorNotation:
    """
    Classify a color string into one notation without extracting numbers.

    Returns:
        ColorNotation member (UNRECOGNIZED for anything malformed)
    """
    if not isinstance(text, str):
        return ColorNotation.UNRECOGNIZED

    candidate = text.strip()
    if _HEX_RE.match(candidate):
        return ColorNotation.HEX
    if _RGB_RE.match(candidate):
        return ColorNotation.RGB
    if _RGBA_RE.match(candidate):
        return ColorNotation.RGBA
    if _HSL_RE.match(candidate):
        return ColorNotation.HSL
    return ColorNotation.UNRECOGNIZED


def parse(text: str) -> Optional[ParsedColor]:
    """
    Parse any of the four notations into channel values.

    Channels are clamped to their domains. Only RGBA input carries alpha.

    Args:
        text: "#9333EA", "rgb(147, 51, 234)", "rgba(147, 51, 234, 0.5)" or "hsl(271, 81%, 56%)"

    Returns:
        ParsedColor, or None when the text is not a recognized color

    Example:
        parse("rgb(147, 51, 234)")  # ParsedColor(r=147, g=51, b=234, a=None)
        parse("purple")             # None
    """
    notation = classify(text)
    candidate = text.strip() if notation is not ColorNotation.UNRECOGNIZED else ""

    if notation is ColorNotation.HEX:
        m = _HEX_RE.match(candidate)
        return ParsedColor(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))

    if notation is ColorNotation.RGB:
        m = _RGB_RE.match(candidate)
        r, g, b = (clamp_channel(int(v)) for v in m.groups())
        return ParsedColor(r, g, b)

    if notation is ColorNotation.RGBA:
        m = _RGBA_RE.match(candidate)
        r, g, b = (clamp_channel(int(v)) for v in m.groups()[:3])
        return ParsedColor(r, g, b, clamp_alpha(float(m.group(4))))

    if notation is ColorNotation.HSL:
        m = _HSL_RE.match(candidate)
        h, s, l = (float(v) for v in m.groups())
        rgb = to_rgb(h, s, l)
        return ParsedColor(rgb.r, rgb.g, rgb.b)

    return None


def to_hex(r: float, g: float, b: float) -> str:
    """
    Render channels as "#RRGGBB" (uppercase, each channel clamped to [0, 255]).

    Example:
        to_hex(147, 51, 234)  # "#9333EA"
        to_hex(300, -4, 0)    # "#FF0000"
    """
    return "#" + "".join(f"{clamp_channel(c):02X}" for c in (r, g, b))


def to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB (0-255) to HSL.

    Values are not rounded so that to_rgb(*to_hsl(r, g, b)) reproduces the input.
    Use format_hsl() for the rounded text form.

    Example:
        to_hsl(255, 0, 0)      # HSL(h=0.0, s=100.0, l=50.0)
        to_hsl(128, 128, 128)  # HSL(h=0.0, s=0.0, l=50.19...)
    """
    r_norm, g_norm, b_norm = (clamp_channel(c) / 255.0 for c in (r, g, b))
    max_c = max(r_norm, g_norm, b_norm)
    min_c = min(r_norm, g_norm, b_norm)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        # Achromatic: no hue, no saturation
        return HSL(0.0, 0.0, l * 100)

    delta = max_c - min_c
    s = delta / (2 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)

    if max_c == r_norm:
        h = (g_norm - b_norm) / delta + (6 if g_norm < b_norm else 0)
    elif max_c == g_norm:
        h = (b_norm - r_norm) / delta + 2
    else:
        h = (r_norm - g_norm) / delta + 4

    return HSL((h * 60) % 360, s * 100, l * 100)


def to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to RGB (0-255), inverse of to_hsl().

    Hue is folded into [0, 360); saturation and lightness are clamped to [0, 100].

    Example:
        to_rgb(0, 100, 50)    # RGB(r=255, g=0, b=0)
        to_rgb(120, 100, 25)  # RGB(r=0, g=128, b=0)
    """
    h = normalize_hue(h)
    s = clamp(s, 0, 100) / 100
    l = clamp(l, 0, 100) / 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(
        clamp_channel((r + m) * 255),
        clamp_channel((g + m) * 255),
        clamp_channel((b + m) * 255),
    )


def format_number(value: float) -> str:
    """Render a number without a trailing ".0" for integral values"""
    if float(value).is_integer():
        return str(int(value))
    return repr(round(float(value), 4))


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_rgba(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r}, {g}, {b}, {format_number(a)})"


def format_hsl(h: float, s: float, l: float) -> str:
    """Render HSL rounded to whole degrees / percent (360 folds onto 0)"""
    h_int = int(math.floor(h + 0.5)) % 360
    s_int = int(math.floor(s + 0.5))
    l_int = int(math.floor(l + 0.5))
    return f"hsl({h_int}, {s_int}%, {l_int}%)"


def clean_hex_input(text: str) -> Optional[str]:
    """
    Normalize in-progress HEX typing.

    Strips "#" and uppercases. Returns the cleaned digits when they are a
    valid prefix of a 6-digit HEX value (0-6 hex digits), otherwise None.

    Example:
        clean_hex_input("#93a")     # "93A"
        clean_hex_input("9333EA")   # "9333EA"
        clean_hex_input("9333EAF")  # None (too long)
        clean_hex_input("93G")      # None
    """
    cleaned = text.replace("#", "").strip().upper()
    if len(cleaned) <= 6 and _HEX_DIGITS_RE.match(cleaned):
        return cleaned
    return None


def hex_equals(first: str, second: str) -> bool:
    """Case-insensitive HEX comparison (used for preset highlighting)"""
    return first.strip().upper() == second.strip().upper()
