from __future__ import annotations

from pydantic import BaseModel

from json_server.models import EndpointDescriptor


class ErrorResponse(BaseModel):
    error: str
    route: str | None = None
    path: str | None = None
    method: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    routes: int
    generation: int
    watch: bool = False


class SkippedFileResponse(BaseModel):
    file: str
    reason: str


class ReloadResponse(BaseModel):
    generation: int
    routes: list[EndpointDescriptor]
    skipped: list[SkippedFileResponse]
