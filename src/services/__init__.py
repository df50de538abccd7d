"""Services layer"""

from .event_bus import EventBus
from .config_store import ConfigStore

__all__ = [
    "EventBus",
    "ConfigStore",
]
