"""
Unit tests for the synchronous EventBus

Tests publishing, subscription, priorities, middleware, filtering and fault tolerance.
"""

from models.domain.widget_config import WidgetConfig
from models.enums import ComponentType
from models.events import (
    ComponentOrderChangedEvent,
    ConfigUpdatedEvent,
    EventType,
    PrimaryColorChangedEvent,
)
from services.event_bus import EventBus
from services.middleware import log_middleware


def _config_event(version=2, fields=("sms",)):
    return ConfigUpdatedEvent(snapshot=WidgetConfig(), changed_fields=fields, version=version)


def test_basic_pub_sub():
    """Test basic publish/subscribe"""
    bus = EventBus()
    received = []

    bus.subscribe(EventType.CONFIG_UPDATED, received.append)
    bus.publish(_config_event())

    assert len(received) == 1
    assert received[0].version == 2
    print("✓ Basic pub/sub works!")


def test_only_matching_type_delivered():
    bus = EventBus()
    received = []

    bus.subscribe(EventType.PRIMARY_COLOR_CHANGED, received.append)
    bus.publish(_config_event())
    bus.publish(PrimaryColorChangedEvent(previous="#9333EA", current="#3B82F6"))

    assert [e.type for e in received] == [EventType.PRIMARY_COLOR_CHANGED]


def test_filtering():
    """Test per-handler filtering"""
    bus = EventBus()
    color_events = []

    bus.subscribe(
        EventType.CONFIG_UPDATED,
        color_events.append,
        filter_fn=lambda e: "primary_color" in e.changed_fields
    )

    bus.publish(_config_event(fields=("sms",)))
    bus.publish(_config_event(fields=("primary_color",)))

    assert len(color_events) == 1


def test_priority_order():
    """Higher priority handlers run first; equal priorities keep registration order"""
    bus = EventBus()
    calls = []

    bus.subscribe(EventType.CONFIG_UPDATED, lambda e: calls.append("low"), priority=0)
    bus.subscribe(EventType.CONFIG_UPDATED, lambda e: calls.append("high"), priority=10)
    bus.subscribe(EventType.CONFIG_UPDATED, lambda e: calls.append("low2"), priority=0)

    bus.publish(_config_event())

    assert calls == ["high", "low", "low2"]


def test_middleware_blocking():
    """Middleware returning None blocks the event"""
    bus = EventBus()
    received = []

    bus.add_middleware(lambda e: None if e.version > 5 else e)
    bus.subscribe(EventType.CONFIG_UPDATED, received.append)

    assert bus.publish(_config_event(version=2)) == 1
    assert bus.publish(_config_event(version=9)) == 0

    assert [e.version for e in received] == [2]
    assert len(bus.get_event_history()) == 1


def test_log_middleware_passes_through():
    bus = EventBus()
    received = []

    bus.add_middleware(log_middleware)
    bus.subscribe(EventType.COMPONENT_ORDER_CHANGED, received.append)

    event = ComponentOrderChangedEvent(
        source_id=ComponentType.SMS,
        target_id=ComponentType.PASSKEY,
        order=tuple(ComponentType),
    )
    bus.publish(event)
    bus.publish(_config_event())

    assert received == [event]


def test_fault_tolerance():
    """A failing handler doesn't stop the others"""
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.CONFIG_UPDATED, broken, priority=5)
    bus.subscribe(EventType.CONFIG_UPDATED, received.append)

    assert bus.publish(_config_event()) == 1
    assert len(received) == 1


def test_unsubscribe():
    bus = EventBus()
    received = []

    bus.subscribe(EventType.CONFIG_UPDATED, received.append)
    assert bus.subscriber_count(EventType.CONFIG_UPDATED) == 1
    bus.unsubscribe(EventType.CONFIG_UPDATED, received.append)
    assert bus.subscriber_count(EventType.CONFIG_UPDATED) == 0
    bus.publish(_config_event())

    assert received == []


def test_history_bounded():
    bus = EventBus()

    for version in range(150):
        bus.publish(_config_event(version=version))

    history = bus.get_event_history(limit=200)
    assert len(history) == 100
    assert history[-1].version == 149
    assert [e.version for e in bus.get_event_history(limit=2)] == [148, 149]

    bus.clear_history()
    assert bus.get_event_history() == []


def test_event_payload():
    event = PrimaryColorChangedEvent(previous="#9333EA", current="#3B82F6")

    assert event.to_data() == {"previous": "#9333EA", "current": "#3B82F6"}
    assert event.timestamp > 0


def test_history_limit_zero_is_empty():
    bus = EventBus()
    bus.publish(_config_event(version=2))
    bus.publish(_config_event(version=3))

    assert bus.get_event_history(limit=0) == []
    assert bus.get_event_history(limit=-1) == []
    assert len(bus.get_event_history(limit=1)) == 1
