"""
Middleware for EventBus

Middleware = pipeline functions that process events before handlers.
Can modify events, block events, or log/validate events.
"""

from models.events import Event
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


def log_middleware(event: Event) -> Event:
    """
    Log all events for debugging

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source_str = event.source.name if event.source else None

    data = event.to_data()
    if 'changed_fields' in data:
        data_str = f"fields={','.join(data['changed_fields'])} v{data.get('version')}"
    elif 'order' in data:
        data_str = "order=" + ",".join(block.value for block in data['order'])
    else:
        data_str = str(data)

    log.debug(f"Event: {event.type.name} from {source_str} | {data_str}")
    return event
