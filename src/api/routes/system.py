"""
System endpoints - Session introspection and reset
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_service_container
from models.events import EventSource
from services.service_container import ServiceContainer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/system", tags=["System"])


@router.get("/events")
async def get_recent_events(
    limit: int = Query(10, ge=1, le=100),
    services: ServiceContainer = Depends(get_service_container)
) -> Dict[str, Any]:
    """
    Most recent bus events, oldest first.

    Payloads are summarized by field name (snapshots are not inlined).
    """
    events: List[Dict[str, Any]] = []
    for event in services.event_bus.get_event_history(limit):
        events.append({
            "type": event.type.name,
            "source": event.source.name if event.source else None,
            "timestamp": event.timestamp,
            "fields": list(event.to_data()),
        })
    return {"count": len(events), "events": events}


@router.post("/reset")
async def reset_session(
    services: ServiceContainer = Depends(get_service_container)
) -> Dict[str, Any]:
    """Restore the session's starting configuration"""
    store = services.config_store
    store.reset(source=EventSource.API)
    log.info("Session reset via API", version=store.version)
    return store.to_dict()
