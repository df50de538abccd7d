"""
Enums for the widget configurator
"""

from enum import Enum, auto


class Mode(str, Enum):
    """Configurator workspace mode"""
    UI = "ui"        # Visual preview
    CODE = "code"    # Generated code view


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class Device(str, Enum):
    """Preview frame size"""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


class Preset(str, Enum):
    """Feature preset the configuration started from"""
    FULL = "full"
    MINIMAL = "minimal"
    SOCIAL = "social"
    CUSTOM = "custom"


class AccountType(str, Enum):
    EIP7702 = "eip7702"
    EIP4337 = "eip4337"


class Persistence(str, Enum):
    """Where the wallet session is kept"""
    DEVICE = "device"
    SESSION = "session"
    NONE = "none"


class SessionDuration(str, Enum):
    MINUTES_15 = "15min"
    HOUR_1 = "1hour"
    HOURS_24 = "24hours"
    DAYS_7 = "7days"


class Currency(str, Enum):
    USD = "USD"
    EUR = "EUR"
    ETH = "ETH"


class ComponentType(str, Enum):
    """
    Auth blocks that can be shown and reordered in the widget.

    Each member doubles as the name of the boolean flag that enables it.
    """
    EMAIL = "email"
    SMS = "sms"
    SOCIAL = "social"
    PASSKEY = "passkey"
    EXTERNAL = "external"


class LogoSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    CUSTOM = "custom"


class HorizontalPosition(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalPosition(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class LogoAnimation(str, Enum):
    NONE = "none"
    FADE = "fade"
    SLIDE = "slide"
    BOUNCE = "bounce"
    PULSE = "pulse"


class ColorFormat(str, Enum):
    """Live representations offered by the color picker"""
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"


class ColorNotation(Enum):
    """Result of classifying a color string before any numeric extraction"""
    HEX = auto()
    RGB = auto()
    RGBA = auto()
    HSL = auto()
    UNRECOGNIZED = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    STATE = auto()       # Store merges
    COLOR = auto()       # Color edits, notation parsing
    ORDER = auto()       # Block reordering
    EXPORT = auto()      # Snippet / document projection
    EVENT = auto()       # Event bus events and handling
    API = auto()
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
