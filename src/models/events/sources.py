from enum import Enum, auto

class EventSource(Enum):
    """Event source identifiers for application events"""
    CONFIG_STORE = auto()       # Snapshot publication after a merge
    PREVIEW = auto()            # Preview surface (drag & drop)
    COLOR_PICKER = auto()       # Color entry controls
    API = auto()                # HTTP clients
