"""
Event Bus - Synchronous pub-sub for configurator events

publish() runs the middleware chain, records the event, then calls every
matching subscription before returning. Nothing is queued, so subscribers
see events in exactly the order they were published.
"""

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional

from models.events import Event, EventType
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)

Handler = Callable[[Event], None]
Middleware = Callable[[Event], Optional[Event]]

HISTORY_LIMIT = 100


@dataclass
class Subscription:
    handler: Handler
    priority: int = 0
    filter_fn: Optional[Callable[[Event], bool]] = None

    def accepts(self, event: Event) -> bool:
        return self.filter_fn is None or bool(self.filter_fn(event))


def _name(fn) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


class EventBus:
    """
    Event routing between the store, the controllers and outer layers

    - Subscriptions are kept per event type, highest priority first
      (registration order among equal priorities)
    - Middleware may replace an event or drop it by returning None
    - A handler that raises is logged and skipped; the rest still run
    - The last HISTORY_LIMIT delivered events are kept for inspection

    Example:
        bus = EventBus()
        bus.subscribe(
            EventType.CONFIG_UPDATED,
            on_color,
            filter_fn=lambda e: "primary_color" in e.changed_fields
        )
        bus.publish(ConfigUpdatedEvent(snapshot=config, changed_fields=("primary_color",), version=2))
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT):
        self._subscriptions: Dict[EventType, List[Subscription]] = defaultdict(list)
        self._middleware: List[Middleware] = []
        self._history: Deque[Event] = deque(maxlen=history_limit)

    # === Registration ===

    def subscribe(
        self,
        event_type: EventType,
        handler: Handler,
        priority: int = 0,
        filter_fn: Optional[Callable[[Event], bool]] = None
    ) -> None:
        subscriptions = self._subscriptions[event_type]
        subscriptions.append(Subscription(handler, priority, filter_fn))
        subscriptions.sort(key=lambda s: -s.priority)

        log.debug("Subscribed", event_type=event_type.name, handler=_name(handler), priority=priority)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        """Drop every subscription of handler to event_type"""
        remaining = [s for s in self._subscriptions.get(event_type, []) if s.handler != handler]
        self._subscriptions[event_type] = remaining

    def add_middleware(self, middleware: Middleware) -> None:
        """Append to the middleware chain (runs in registration order)"""
        self._middleware.append(middleware)
        log.debug("Middleware registered", middleware=_name(middleware))

    def subscriber_count(self, event_type: EventType) -> int:
        return len(self._subscriptions.get(event_type, []))

    # === Delivery ===

    def publish(self, event: Event) -> int:
        """
        Deliver event synchronously

        Returns:
            Number of handlers that ran without raising (0 when dropped by middleware)
        """
        for middleware in self._middleware:
            event = middleware(event)
            if event is None:
                return 0

        self._history.append(event)

        delivered = 0
        for subscription in list(self._subscriptions.get(event.type, [])):
            if not subscription.accepts(event):
                continue
            try:
                subscription.handler(event)
            except Exception as ex:
                log.error(
                    f"Handler {_name(subscription.handler)} failed on {event.type.name}",
                    error=f"{type(ex).__name__}: {ex}"
                )
                continue
            delivered += 1
        return delivered

    # === History ===

    def get_event_history(self, limit: int = 10) -> List[Event]:
        """Most recent events, oldest first (empty for limit <= 0)"""
        if limit <= 0:
            return []
        return list(self._history)[-limit:]

    def clear_history(self) -> None:
        self._history.clear()
