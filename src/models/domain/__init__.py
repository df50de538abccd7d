"""Domain models - Configuration record"""

from models.domain.widget_config import WidgetConfig, LogoSettings, DEFAULT_COMPONENT_ORDER

__all__ = [
    "WidgetConfig",
    "LogoSettings",
    "DEFAULT_COMPONENT_ORDER",
]
