"""
Export Endpoints - Snippet and document artifacts

Both artifacts are rendered on demand from the current snapshot and are
identical for identical configurations.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from api.dependencies import get_service_container
from engine.code_projector import to_document, to_snippet
from services.service_container import ServiceContainer

router = APIRouter(
    prefix="/export",
    tags=["Export"],
)


@router.get(
    "/snippet",
    response_class=PlainTextResponse,
    summary="Component snippet",
    description="Declarative <SmartWalletAuth /> block for the current configuration"
)
async def export_snippet(
    services: ServiceContainer = Depends(get_service_container)
) -> str:
    return to_snippet(services.config_store.current())


@router.get(
    "/document",
    summary="Configuration document",
    description="Full JSON dump of the configuration (indent 2, declaration order)"
)
async def export_document(
    services: ServiceContainer = Depends(get_service_container)
) -> Response:
    return Response(
        content=to_document(services.config_store.current()),
        media_type="application/json"
    )
