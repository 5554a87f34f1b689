from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from json_server import __version__

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "json-server",
            "description": "Serve a directory of JSON files as a read-only REST API.",
            "version": __version__,
        },
        "links": {
            "self": "/",
            "api": "/api",
            "health": "/_health_check",
            "live": "/healthz/live",
            "ready": "/healthz/ready",
            "reload": "/_reload",
        },
    }
