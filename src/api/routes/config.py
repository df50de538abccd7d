"""
Config Endpoints - HTTP routes for the configuration record

GET returns the full document (camelCase keys in record declaration order).
PATCH merges a partial: named fields change, everything else is untouched.
A partial with an unknown key or a bad value is rejected as a whole (422).
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from api.dependencies import get_service_container
from api.schemas.color import PrimaryColorRequest, PrimaryColorResponse
from api.schemas.config import BlocksResponse, ReorderRequest, ReorderResponse
from models.events import EventSource
from services.service_container import ServiceContainer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(
    prefix="/config",
    tags=["Config"],
)


# ============================================================================
# GET ENDPOINTS
# ============================================================================

@router.get(
    "",
    summary="Get configuration",
    description="Full configuration document (every field, no omissions)"
)
async def get_config(
    services: ServiceContainer = Depends(get_service_container)
) -> Dict[str, Any]:
    return services.config_store.to_dict()


@router.get(
    "/blocks",
    response_model=BlocksResponse,
    summary="Visible preview blocks",
    description="componentOrder filtered by the per-block enable flags"
)
async def get_visible_blocks(
    services: ServiceContainer = Depends(get_service_container)
) -> BlocksResponse:
    blocks = [block.value for block in services.preview.visible_blocks()]
    return BlocksResponse(blocks=blocks, count=len(blocks))


# ============================================================================
# WRITE ENDPOINTS
# ============================================================================

@router.patch(
    "",
    summary="Merge partial configuration"
)
async def update_config(
    partial: Dict[str, Any] = Body(..., examples=[{"sms": True, "theme": "light"}]),
    services: ServiceContainer = Depends(get_service_container)
) -> Dict[str, Any]:
    """
    Merge a partial update into the configuration.

    Keys may be camelCase document keys or snake_case field names.
    `customLogo: null` clears the logo image.

    **Errors:**
    - 422: Unknown field or value that doesn't fit its field
    """
    services.config_store.update(partial, source=EventSource.API)
    return services.config_store.to_dict()


@router.post(
    "/reorder",
    response_model=ReorderResponse,
    response_model_by_alias=True,
    summary="Reorder preview blocks"
)
async def reorder_blocks(
    request: ReorderRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> ReorderResponse:
    """
    Apply a completed drag: the source block moves into the target's slot.

    Identity moves, unknown ids and hidden blocks leave the order unchanged.
    """
    changed = services.preview.complete_drag(request.source_id, request.target_id)
    order = [block.value for block in services.config_store.current().component_order]
    return ReorderResponse(changed=changed, component_order=order)


@router.put(
    "/primary-color",
    response_model=PrimaryColorResponse,
    summary="Set primary color (any notation)"
)
async def set_primary_color(
    request: PrimaryColorRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> PrimaryColorResponse:
    """
    Set the primary color from HEX, rgb(), rgba() or hsl() text.

    Unparsable text keeps the previous color (`changed: false`).
    The stored value is always canonical `#RRGGBB`.
    """
    picker = services.color_picker
    changed = picker.set_color_text(request.value)
    return PrimaryColorResponse(
        changed=changed,
        primary_color=services.config_store.current().primary_color,
        representations=picker.representations(),
    )
