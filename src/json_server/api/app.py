from __future__ import annotations

from functools import partial

from fastapi import FastAPI
from starlette.middleware.gzip import GZipMiddleware

from json_server import __version__
from json_server.api.errors import install_exception_handlers
from json_server.api.lifespan import lifespan
from json_server.api.middleware import RequestLoggingMiddleware
from json_server.api.routes.data import router as data_router
from json_server.api.routes.health import router as health_router
from json_server.api.routes.reload import router as reload_router
from json_server.api.routes.root import router as root_router
from json_server.config import ServerConfig
from json_server.core.loader import load_directory
from json_server.core.registry import RegistryHolder


def build_holder(config: ServerConfig) -> RegistryHolder:
    """Load the data directory once and wrap the first snapshot in a holder.

    Raises ``DataDirectoryError`` if the directory is missing or unreadable.
    """
    report = load_directory(config.data_dir)
    return RegistryHolder(report.registry, loader=partial(load_directory, config.data_dir))


def create_app(config: ServerConfig, holder: RegistryHolder | None = None) -> FastAPI:
    app = FastAPI(
        title="json-server",
        description="Serve a directory of JSON files as a read-only REST API.",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.config = config
    app.state.holder = holder if holder is not None else build_holder(config)
    app.state.watcher = None

    install_exception_handlers(app)

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(reload_router)
    app.include_router(data_router)

    return app


def app_from_env() -> FastAPI:
    """ASGI factory for ``uvicorn --factory json_server.api.app:app_from_env``."""
    return create_app(ServerConfig.from_env())
