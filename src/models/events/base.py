from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict

from models.events.types import EventType
from models.events.sources import EventSource

_ENVELOPE_FIELDS = ("type", "source", "timestamp")


@dataclass(init=False)
class Event:
    """
    Common envelope of every bus event

    Subclasses take their payload as keyword arguments and pass type/source up;
    the timestamp is taken at construction.
    """

    type: EventType
    source: EventSource | None
    timestamp: float = field(default_factory=time.time)

    def __init__(self, *, type: EventType, source: EventSource | None):
        self.type = type
        self.source = source
        self.timestamp = time.time()

    def to_data(self) -> Dict[str, Any]:
        """Payload fields only (envelope stripped), in assignment order"""
        return {key: value for key, value in vars(self).items() if key not in _ENVELOPE_FIELDS}
