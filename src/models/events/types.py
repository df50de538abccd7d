from enum import Enum, auto


class EventType(Enum):
    # Store
    CONFIG_UPDATED = auto()

    # Preview
    COMPONENT_ORDER_CHANGED = auto()

    # Color picker
    PRIMARY_COLOR_CHANGED = auto()
