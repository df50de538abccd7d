"""
Utility functions for the widget configurator
"""

from .colors import (
    classify,
    parse,
    to_hex,
    to_hsl,
    to_rgb,
)

__all__ = [
    'classify',
    'parse',
    'to_hex',
    'to_hsl',
    'to_rgb',
]
