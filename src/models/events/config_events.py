from dataclasses import dataclass
from typing import Optional, Tuple

from models.events.base import Event
from models.events.types import EventType
from models.events.sources import EventSource
from models.domain.widget_config import WidgetConfig
from models.enums import ComponentType


@dataclass(init=False)
class ConfigUpdatedEvent(Event):
    """
    Fired after every successful merge.

    Carries the complete new snapshot, never a partially merged record.
    """

    snapshot: WidgetConfig
    changed_fields: Tuple[str, ...]
    version: int

    def __init__(
        self,
        *,
        snapshot: WidgetConfig,
        changed_fields: Tuple[str, ...],
        version: int,
        source: Optional[EventSource] = EventSource.CONFIG_STORE,
    ):
        super().__init__(type=EventType.CONFIG_UPDATED, source=source)
        self.snapshot = snapshot
        self.changed_fields = changed_fields
        self.version = version


@dataclass(init=False)
class ComponentOrderChangedEvent(Event):
    """Fired when a completed drag actually moved a block"""

    source_id: ComponentType
    target_id: ComponentType
    order: Tuple[ComponentType, ...]

    def __init__(
        self,
        *,
        source_id: ComponentType,
        target_id: ComponentType,
        order: Tuple[ComponentType, ...],
    ):
        super().__init__(type=EventType.COMPONENT_ORDER_CHANGED, source=EventSource.PREVIEW)
        self.source_id = source_id
        self.target_id = target_id
        self.order = order


@dataclass(init=False)
class PrimaryColorChangedEvent(Event):
    """Fired when a color control commits a new canonical value"""

    previous: str
    current: str

    def __init__(self, *, previous: str, current: str):
        super().__init__(type=EventType.PRIMARY_COLOR_CHANGED, source=EventSource.COLOR_PICKER)
        self.previous = previous
        self.current = current
