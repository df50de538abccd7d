"""
Session access for API routes

main.py (or a test) registers the session's ServiceContainer once; routes
receive it through Depends(get_service_container).

    @router.get("/config")
    async def get_config(services: ServiceContainer = Depends(get_service_container)):
        return services.config_store.to_dict()
"""

from typing import Optional

from fastapi import HTTPException, status

from services.service_container import ServiceContainer

_current: Optional[ServiceContainer] = None


def set_service_container(services: Optional[ServiceContainer]) -> None:
    """Register the active session (None detaches it)"""
    global _current
    _current = services


async def get_service_container() -> ServiceContainer:
    """Route dependency; 503 until a session is registered"""
    if _current is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No configurator session is attached yet."
        )
    return _current
