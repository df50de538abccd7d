"""
Color model - Canonical color value with derived representations

The canonical value is always a "#RRGGBB" string. RGB, RGBA and HSL views are
computed from it on demand, so they can never drift from the stored value.
Alpha lives next to the canonical value because HEX cannot carry it.
"""

from dataclasses import dataclass, replace
from typing import Optional

from models.enums import ColorFormat
from utils.colors import (
    HSL,
    RGB,
    clamp,
    clamp_alpha,
    clamp_channel,
    format_hsl,
    format_rgb,
    format_rgba,
    hex_equals,
    normalize_hue,
    parse,
    to_hex,
    to_hsl,
    to_rgb,
)

RGB_CHANNELS = ("r", "g", "b")
HSL_CHANNELS = ("h", "s", "l")


@dataclass(frozen=True)
class Color:
    """
    Immutable color value

    Examples:
        # Create from any notation
        color = Color.parse("rgb(147, 51, 234)")
        color.hex                 # "#9333EA"

        # Edit one channel (clamped), get a new canonical value
        color = color.with_rgb_channel("r", 300)
        color.hex                 # "#FF33EA"

        # Render a live representation
        color.format(ColorFormat.HSL)
    """

    hex: str
    alpha: float = 1.0

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Create from "#RRGGBB" (any case)

        Raises:
            ValueError: If value is not a 6-digit HEX color
        """
        color = cls.parse(value)
        if color is None or not value.strip().startswith("#"):
            raise ValueError(f"Not a HEX color: {value!r}")
        return color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, alpha: float = 1.0) -> 'Color':
        return cls(hex=to_hex(r, g, b), alpha=clamp_alpha(alpha))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> 'Color':
        rgb = to_rgb(h, s, l)
        return cls.from_rgb(*rgb)

    @classmethod
    def parse(cls, text: str) -> Optional['Color']:
        """
        Create from any supported notation

        Returns:
            Color, or None if the text is not a recognized color
        """
        parsed = parse(text)
        if parsed is None:
            return None
        alpha = parsed.a if parsed.a is not None else 1.0
        return cls.from_rgb(parsed.r, parsed.g, parsed.b, alpha)

    # === DERIVED REPRESENTATIONS ===

    def to_rgb(self) -> RGB:
        parsed = parse(self.hex)
        return RGB(parsed.r, parsed.g, parsed.b)

    def to_hsl(self) -> HSL:
        return to_hsl(*self.to_rgb())

    def format(self, fmt: ColorFormat) -> str:
        """
        Render the color in one of the four text notations

        Args:
            fmt: Target notation

        Returns:
            "#9333EA", "rgb(147, 51, 234)", "rgba(147, 51, 234, 1)" or "hsl(271, 81%, 56%)"
        """
        fmt = ColorFormat(fmt)
        if fmt is ColorFormat.HEX:
            return self.hex
        if fmt is ColorFormat.RGB:
            return format_rgb(*self.to_rgb())
        if fmt is ColorFormat.RGBA:
            return format_rgba(*self.to_rgb(), self.alpha)
        return format_hsl(*self.to_hsl())

    def representations(self) -> dict:
        """All four live representations keyed by format value"""
        return {fmt.value: self.format(fmt) for fmt in ColorFormat}

    # === CHANNEL EDITS ===

    def with_rgb_channel(self, channel: str, value: float) -> 'Color':
        """
        Replace one of r/g/b (clamped to 0-255)

        Raises:
            KeyError: If channel is not r, g or b
        """
        if channel not in RGB_CHANNELS:
            raise KeyError(channel)
        channels = self.to_rgb()._asdict()
        channels[channel] = clamp_channel(value)
        return replace(self, hex=to_hex(**channels))

    def with_alpha(self, value: float) -> 'Color':
        return replace(self, alpha=clamp_alpha(value))

    def with_hsl_channel(self, channel: str, value: float) -> 'Color':
        """
        Replace one of h/s/l and recompute the canonical value

        Hue is clamped to [0, 360] with 360 folding onto 0; saturation and
        lightness are clamped to [0, 100]. The untouched channels come from
        the current canonical value.

        Raises:
            KeyError: If channel is not h, s or l
        """
        if channel not in HSL_CHANNELS:
            raise KeyError(channel)
        channels = self.to_hsl()._asdict()
        if channel == "h":
            channels["h"] = normalize_hue(value)
        else:
            channels[channel] = clamp(value, 0, 100)
        return replace(self, hex=to_hex(*to_rgb(**channels)))

    # === COMPARISON ===

    def matches(self, hex_value: str) -> bool:
        """Case-insensitive match against a HEX string (preset highlighting)"""
        return hex_equals(self.hex, hex_value)

    def __str__(self) -> str:
        if self.alpha < 1.0:
            return f"Color({self.hex}, alpha={self.alpha})"
        return f"Color({self.hex})"
