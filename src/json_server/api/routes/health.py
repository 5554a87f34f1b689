from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from json_server.api.dependencies import get_config, get_registry
from json_server.api.schemas import HealthResponse, ReadinessResponse
from json_server.config import ServerConfig
from json_server.core.registry import Registry

router = APIRouter()


@router.get("/_health_check", response_class=PlainTextResponse)
async def health_check() -> str:
    return "ok"


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    registry: Registry = Depends(get_registry),
    config: ServerConfig = Depends(get_config),
) -> ReadinessResponse:
    """Readiness probe: report the snapshot being served."""
    return ReadinessResponse(routes=len(registry), generation=registry.generation, watch=config.watch)
