"""
Color Picker Controller

Backs the primary color control: four live representations of the stored
canonical HEX value, channel edits, HEX typing and the preset palette.
"""

from typing import Dict, List, Optional, Union

from models.color import Color
from models.enums import ColorFormat
from models.events import EventSource, PrimaryColorChangedEvent
from managers.color_manager import ColorManager
from services.config_store import ConfigStore
from services.event_bus import EventBus
from utils.colors import clean_hex_input
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.COLOR)


class ColorPickerController:
    """
    Primary color editing controller

    The store owns the canonical value. This controller keeps only what the
    canonical HEX can't carry:
        - the selected display format
        - the HEX draft while the user is still typing (1-5 digits)
        - the RGBA alpha

    Every representation is re-derived from the canonical value. When the value
    changes outside this controller (another control, an API merge) the local
    state is dropped lazily on the next read.

    Example:
        >>> picker = ColorPickerController(store, color_manager)
        >>> picker.set_format("hsl")
        >>> picker.set_hsl_channel("h", 200)
        >>> picker.formatted_value()    # re-derived from the new canonical HEX
        >>> picker.set_hex_text("#3B8")      # draft only, store untouched
        False
    """

    def __init__(
        self,
        store: ConfigStore,
        color_manager: ColorManager,
        event_bus: Optional[EventBus] = None,
        fmt: ColorFormat = ColorFormat.HEX
    ):
        self.store = store
        self.color_manager = color_manager
        self.event_bus = event_bus
        self._format = ColorFormat(fmt)
        self._synced_hex: Optional[str] = None
        self._color: Color = Color(store.current().primary_color)
        self._hex_draft = ""
        self.sync()

    # ===== STATE =====

    def sync(self) -> bool:
        """
        Re-derive local state if the canonical value changed externally

        Returns:
            True if local state was reset
        """
        canonical = self.store.current().primary_color
        if canonical == self._synced_hex:
            return False

        self._color = Color(canonical)
        self._hex_draft = canonical[1:]
        self._synced_hex = canonical
        log.debug("Picker synced to canonical value", hex=canonical)
        return True

    @property
    def color(self) -> Color:
        self.sync()
        return self._color

    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def hex_draft(self) -> str:
        """Digits currently in the HEX field (without '#')"""
        self.sync()
        return self._hex_draft

    def set_format(self, fmt: Union[ColorFormat, str]) -> None:
        self._format = ColorFormat(fmt)

    def formatted_value(self) -> str:
        """Live value in the selected format"""
        return self.color.format(self._format)

    def representations(self) -> Dict[str, str]:
        return self.color.representations()

    # ===== EDITS =====

    def set_hex_text(self, text: str) -> bool:
        """
        Handle typing in the HEX field

        Invalid characters or more than six digits are rejected (the draft
        keeps its previous content). Only a complete 6-digit value is committed.

        Returns:
            True if the store was updated
        """
        self.sync()
        cleaned = clean_hex_input(text)
        if cleaned is None:
            log.debug("Rejected HEX input", text=text)
            return False

        self._hex_draft = cleaned
        if len(cleaned) < 6:
            log.debug("HEX draft held", draft=cleaned)
            return False

        return self._commit(Color.from_hex("#" + cleaned).with_alpha(self._color.alpha))

    def set_rgb_channel(self, channel: str, value: float) -> bool:
        """Edit r/g/b (clamped to 0-255)"""
        return self._commit(self.color.with_rgb_channel(channel, value))

    def set_rgba_channel(self, channel: str, value: float) -> bool:
        """
        Edit r/g/b/a

        Alpha is clamped to 0-1 and kept locally; the canonical HEX drops it.
        """
        if channel == "a":
            self._color = self.color.with_alpha(value)
            return False
        return self.set_rgb_channel(channel, value)

    def set_hsl_channel(self, channel: str, value: float) -> bool:
        """Edit h (0-360, 360 wraps to 0) or s/l (0-100)"""
        return self._commit(self.color.with_hsl_channel(channel, value))

    def set_color_text(self, text: str) -> bool:
        """
        Apply free text in any notation

        Unparsable text keeps the previous value.

        Returns:
            True if the store was updated
        """
        color = Color.parse(text)
        if color is None:
            log.debug("Ignored unparsable color", text=text)
            return False
        return self._commit(color)

    def select_preset(self, name: str) -> bool:
        """
        Pick a palette color

        Raises:
            UnknownPresetError: If preset doesn't exist
        """
        hex_value = self.color_manager.preset_hex(name)
        return self._commit(Color(hex_value, alpha=self.color.alpha))

    # ===== PALETTE =====

    def active_preset(self) -> Optional[str]:
        return self.color_manager.find_preset(self.color.hex)

    def presets(self) -> List[Dict]:
        """Palette with the active entry flagged"""
        active = self.active_preset()
        return [
            {"name": name, "hex": hex_value, "active": name == active}
            for name, hex_value in self.color_manager.palette()
        ]

    # ===== INTERNAL =====

    def _commit(self, color: Color) -> bool:
        previous = self.store.current().primary_color
        self._color = color
        self._hex_draft = color.hex[1:]
        self._synced_hex = color.hex

        if color.hex == previous:
            return False

        self.store.update({"primary_color": color.hex}, source=EventSource.COLOR_PICKER)
        if self.event_bus:
            self.event_bus.publish(PrimaryColorChangedEvent(previous=previous, current=color.hex))
        log.info(f"Primary color changed: {previous} → {color.hex}")
        return True
