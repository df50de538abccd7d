"""
Color Manager - Processes the primary color palette

Processes color data from ConfigManager (does NOT load files).
Single responsibility: Provide access to the preset palette.
"""

from typing import Dict, List, Optional, Tuple

from models.color import Color
from models.errors import UnknownPresetError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.COLOR)


class ColorManager:
    """
    Color preset manager (data processor only)

    Responsibilities:
    - Normalize preset HEX values to canonical uppercase
    - Keep palette display order
    - Match a canonical value back to its preset (case-insensitive)

    Does NOT load files - receives data from ConfigManager.

    Example:
        # Created by ConfigManager
        color_mgr = ColorManager(data)

        color_mgr.preset_hex("blue")          # "#3B82F6"
        color_mgr.find_preset("#3b82f6")      # "blue"
    """

    def __init__(self, data: dict):
        """
        Initialize ColorManager with parsed config data

        Args:
            data: Config dict with 'presets' and 'preset_order' keys
                  Example: {
                      'presets': {'purple': '#9333EA', 'blue': '#3B82F6', ...},
                      'preset_order': ['purple', 'blue', ...]
                  }
        """
        self.data = data
        self._preset_cache: Dict[str, str] = {}
        self._process_data()

    def _process_data(self):
        """Validate presets and build the name -> canonical HEX cache"""
        for name, value in self.data.get('presets', {}).items():
            color = Color.parse(str(value))
            if color is None:
                log.warn(f"Skipping invalid color preset: {name}", value=value)
                continue
            self._preset_cache[name] = color.hex

    @property
    def presets(self) -> Dict[str, str]:
        """Get all presets as {name: "#RRGGBB"} dict"""
        return self._preset_cache

    @property
    def preset_order(self) -> List[str]:
        """Palette display order (falls back to definition order)"""
        order = [name for name in self.data.get('preset_order', []) if name in self._preset_cache]
        return order or list(self._preset_cache)

    def palette(self) -> List[Tuple[str, str]]:
        """Ordered (name, hex) pairs"""
        return [(name, self._preset_cache[name]) for name in self.preset_order]

    def preset_hex(self, name: str) -> str:
        """
        Get canonical HEX for a preset name

        Raises:
            UnknownPresetError: If preset doesn't exist
        """
        try:
            return self._preset_cache[name]
        except KeyError:
            raise UnknownPresetError(name, self.preset_order) from None

    def find_preset(self, hex_value: str) -> Optional[str]:
        """
        Find the preset matching a HEX value

        Args:
            hex_value: "#RRGGBB" in any case

        Returns:
            Preset name, or None if no preset matches exactly
        """
        for name in self.preset_order:
            if Color(self._preset_cache[name]).matches(hex_value):
                return name
        return None

    def is_preset(self, hex_value: str) -> bool:
        return self.find_preset(hex_value) is not None
