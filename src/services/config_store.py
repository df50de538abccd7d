"""Config store - Owns the single configuration record of a session"""

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

from engine.ordered_list import is_permutation
from models.color import Color
from models.domain.widget_config import WidgetConfig
from models.enums import ComponentType
from models.errors import InvalidConfigValueError
from models.events import ConfigUpdatedEvent, EventSource
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.STATE)


class ConfigStore:
    """
    Holds the current WidgetConfig and merges partial updates into it.

    Every merge is atomic: the whole partial is validated and coerced first,
    then a new frozen snapshot replaces the old one in one assignment.
    A rejected partial leaves the current snapshot untouched.

    After each successful merge a ConfigUpdatedEvent carrying the new complete
    snapshot is published synchronously, so subscribers observe snapshots in
    merge order and never see a half-merged record.

    Example:
        store = ConfigStore(WidgetConfig(), event_bus)
        store.update({"sms": True})
        store.update(theme="light", primaryColor="#3b82f6")
        store.current().primary_color   # "#3B82F6"
    """

    def __init__(self, initial: Optional[WidgetConfig] = None, event_bus: Optional[EventBus] = None):
        self._initial = initial if initial is not None else WidgetConfig()
        self._config = self._initial
        self._event_bus = event_bus
        self._version = 1

        log.debug("ConfigStore initialized", primary_color=self._config.primary_color)

    # === Read ===

    def current(self) -> WidgetConfig:
        """Current snapshot (immutable, safe to hand out)"""
        return self._config

    @property
    def version(self) -> int:
        """Incremented on every successful merge"""
        return self._version

    def to_dict(self) -> Dict[str, Any]:
        return Serializer.record_to_dict(self._config)

    # === Write ===

    def update(self, partial: Optional[Dict[str, Any]] = None, *, source: EventSource = EventSource.CONFIG_STORE, **fields) -> WidgetConfig:
        """
        Merge a partial update into the current record

        Keys may be snake_case field names or camelCase document keys. Fields
        not named keep their values. An empty partial is a no-op that still
        publishes the (unchanged) snapshot.

        Args:
            partial: Mapping of field -> value
            source: Event source recorded on the published event
            **fields: Extra field -> value pairs (merged after partial)

        Returns:
            The new snapshot

        Raises:
            UnknownConfigFieldError: A key is not a configuration field
            InvalidConfigValueError: A value doesn't fit its field, or
                component_order is not a permutation of the block set
        """
        merged: Dict[str, Any] = dict(partial or {})
        merged.update(fields)

        updates = Serializer.partial_from_dict(WidgetConfig, merged, self._config)
        if "primary_color" in updates:
            updates["primary_color"] = self._canonical_color(updates["primary_color"])
        if "component_order" in updates and not is_permutation(updates["component_order"], tuple(ComponentType)):
            raise InvalidConfigValueError("component_order", updates["component_order"], "must list every block exactly once")

        changed = self._changed_fields(updates)
        self._config = replace(self._config, **updates)
        self._version += 1

        if changed:
            log.info(f"Config updated: {', '.join(changed)}", version=self._version)
        else:
            log.debug("Config update without changes", version=self._version)

        if self._event_bus:
            self._event_bus.publish(ConfigUpdatedEvent(
                snapshot=self._config,
                changed_fields=changed,
                version=self._version,
                source=source,
            ))
        return self._config

    def reset(self, source: EventSource = EventSource.CONFIG_STORE) -> WidgetConfig:
        """Restore the session's starting record (published like any merge)"""
        fields = Serializer.record_to_dict(self._initial)
        return self.update(fields, source=source)

    # === Internal ===

    @staticmethod
    def _canonical_color(value: str) -> str:
        color = Color.parse(value)
        if color is None:
            raise InvalidConfigValueError("primary_color", value, "not a recognized color")
        return color.hex

    def _changed_fields(self, updates: Dict[str, Any]) -> Tuple[str, ...]:
        return tuple(
            name for name, value in updates.items()
            if getattr(self._config, name) != value
        )
