from fastapi import Request

from json_server.config import ServerConfig
from json_server.core.registry import Registry, RegistryHolder


def get_holder(request: Request) -> RegistryHolder:
    holder: RegistryHolder = request.app.state.holder
    return holder


def get_registry(request: Request) -> Registry:
    """Return the snapshot that is current when the request starts."""
    return get_holder(request).current


def get_config(request: Request) -> ServerConfig:
    config: ServerConfig = request.app.state.config
    return config
