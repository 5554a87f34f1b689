from __future__ import annotations

import unicodedata

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import HTMLResponse

from json_server.api.dependencies import get_registry
from json_server.api.errors import error_response
from json_server.api.schemas import ErrorResponse
from json_server.core.index import render_index, render_index_html
from json_server.core.registry import API_PREFIX, Registry
from json_server.models import EndpointDescriptor

router = APIRouter(prefix=API_PREFIX, tags=["data"])


def _wants_html(request: Request, output_format: str | None) -> bool:
    if output_format is not None:
        return output_format.lower() == "html"
    accept = request.headers.get("accept", "")
    html_at = accept.find("text/html")
    json_at = accept.find("application/json")
    return html_at != -1 and (json_at == -1 or html_at < json_at)


@router.get("", response_model=list[EndpointDescriptor])
@router.get("/", response_model=list[EndpointDescriptor], include_in_schema=False)
async def index(
    request: Request,
    output_format: str | None = Query(None, alias="format"),
    registry: Registry = Depends(get_registry),
) -> list[EndpointDescriptor] | Response:
    """List every served endpoint, sorted by route name."""
    if _wants_html(request, output_format):
        return HTMLResponse(render_index_html(registry))
    return render_index(registry)


@router.get("/{route}")
async def document(
    route: str,
    registry: Registry = Depends(get_registry),
) -> Response:
    """Serve one document as a JSON array."""
    name = unicodedata.normalize("NFC", route)
    doc = registry.get(name)
    if doc is None:
        return error_response(status.HTTP_404_NOT_FOUND, ErrorResponse(error="route not found", route=name))
    return Response(content=doc.body, media_type="application/json")
