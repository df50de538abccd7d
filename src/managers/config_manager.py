"""
Config Manager

Reads the YAML configuration (with include: support), builds the
sub-managers and the session's starting WidgetConfig.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from engine.ordered_list import is_permutation
from managers.color_manager import ColorManager
from models.color import Color
from models.domain.widget_config import DEFAULT_COMPONENT_ORDER, WidgetConfig
from models.enums import ComponentType
from models.errors import DomainError
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.CONFIG)

SRC_DIR = Path(__file__).resolve().parent.parent


def read_yaml(path: Path) -> Dict[str, Any]:
    """Load one YAML mapping (an empty file yields {})"""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a mapping at top level, got {type(data).__name__}")
    return data


class ConfigManager:
    """
    Configuration entry point

    config.yaml either holds everything (monolithic) or lists other files:

        include:
          - colors.yaml      # presets, preset_order
          - defaults.yaml    # widget:

    Included files are merged in order, later top-level keys win. If the main
    file or any include can't be read, factory_defaults.yaml is used instead.

    Example:
        config = ConfigManager()
        config.load()
        config.color_manager.preset_hex("blue")   # "#3B82F6"
        store = ConfigStore(config.default_widget_config())
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Args:
            config_path: Main config file (relative paths are resolved against src/)
            defaults_path: Fallback used when the main config can't be loaded
        """
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict[str, Any] = {}
        self.color_manager = ColorManager({})
        self.used_fallback = False

    @staticmethod
    def _resolve(path) -> Path:
        path = Path(path)
        return path if path.is_absolute() else SRC_DIR / path

    # ===== Loading =====

    def load(self) -> Dict[str, Any]:
        """
        Read configuration and (re)build sub-managers

        Returns:
            Merged configuration data
        """
        try:
            self.data = self._read_main(self.config_path)
            self.used_fallback = False
        except (OSError, ValueError, yaml.YAMLError) as ex:
            log.error("Failed to load config", path=str(self.config_path), error=f"{type(ex).__name__}: {ex}")
            log.warn("Falling back to factory defaults", path=str(self.factory_defaults_path))
            self.data = read_yaml(self.factory_defaults_path)
            self.used_fallback = True

        self.color_manager = ColorManager({
            "presets": self.data.get("presets") or {},
            "preset_order": self.data.get("preset_order") or [],
        })
        log.info("Configuration loaded", presets=len(self.color_manager.presets), fallback=self.used_fallback)
        return self.data

    def _read_main(self, path: Path) -> Dict[str, Any]:
        main = read_yaml(path)
        includes: Optional[List[str]] = main.pop("include", None)
        if not includes:
            log.debug("Monolithic configuration", path=path.name)
            return main

        merged: Dict[str, Any] = {}
        for name in includes:
            part = read_yaml(path.parent / name)
            merged.update(part)
            log.debug(f"Included {name}", keys=", ".join(part))

        # Keys set directly in the main file override included ones
        merged.update(main)
        return merged

    # ===== Widget defaults =====

    @property
    def widget(self) -> Dict[str, Any]:
        """Raw widget: section (document keys)"""
        return self.data.get("widget") or {}

    def default_widget_config(self) -> WidgetConfig:
        """
        Starting record for a session

        Built-in WidgetConfig defaults overridden by the widget: section. A
        section that doesn't fit the record is ignored as a whole; an
        unparsable primaryColor or a componentOrder that doesn't list every
        block exactly once falls back to the built-in value of that field only.
        """
        try:
            config = Serializer.record_from_dict(WidgetConfig, self.widget)
        except DomainError as ex:
            log.error("Invalid widget defaults, using built-in values", error=ex.message)
            return WidgetConfig()

        if not is_permutation(config.component_order, tuple(ComponentType)):
            log.error(
                "Invalid default componentOrder, using built-in order",
                value=",".join(block.value for block in config.component_order)
            )
            config = replace(config, component_order=DEFAULT_COMPONENT_ORDER)

        color = Color.parse(config.primary_color)
        if color is None:
            log.error("Invalid default primaryColor, using built-in value", value=config.primary_color)
            return replace(config, primary_color=WidgetConfig.primary_color)

        return replace(config, primary_color=color.hex)
