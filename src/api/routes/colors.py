"""
Color Endpoints - Notation parsing and the preset palette
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_service_container
from api.schemas.color import ColorTextRequest, ParsedColorResponse, PresetListResponse, PresetResponse
from models.color import Color
from models.enums import ColorNotation
from services.service_container import ServiceContainer
from utils.colors import classify

router = APIRouter(
    prefix="/colors",
    tags=["Colors"],
)


@router.post(
    "/parse",
    response_model=ParsedColorResponse,
    summary="Parse color text"
)
async def parse_color(
    request: ColorTextRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> ParsedColorResponse:
    """
    Classify and convert color text without touching the configuration.

    Unrecognized text returns `recognized: false` (never an error).
    """
    notation = classify(request.text)
    color = Color.parse(request.text) if notation is not ColorNotation.UNRECOGNIZED else None
    if color is None:
        return ParsedColorResponse(recognized=False, notation=ColorNotation.UNRECOGNIZED.name)

    return ParsedColorResponse(
        recognized=True,
        notation=notation.name,
        representations=color.representations(),
        preset=services.color_manager.find_preset(color.hex),
    )


@router.get(
    "/presets",
    response_model=PresetListResponse,
    summary="Preset palette"
)
async def list_presets(
    services: ServiceContainer = Depends(get_service_container)
) -> PresetListResponse:
    presets = [PresetResponse(**preset) for preset in services.color_picker.presets()]
    return PresetListResponse(presets=presets, count=len(presets))
