"""
Event system for the widget configurator

Store snapshots and UI-level notifications share one synchronous bus.
"""

from models.events.types import EventType
from models.events.base import Event
from models.events.sources import EventSource

from models.events.config_events import (
    ConfigUpdatedEvent,
    ComponentOrderChangedEvent,
    PrimaryColorChangedEvent,
)

__all__ = [
    "EventType",
    "Event",
    "EventSource",
    "ConfigUpdatedEvent",
    "ComponentOrderChangedEvent",
    "PrimaryColorChangedEvent",
]
