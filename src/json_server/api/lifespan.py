from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable, Coroutine
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI

from json_server.config import ServerConfig
from json_server.core.ports.watcher import FileWatcherPort
from json_server.core.registry import RegistryHolder
from json_server.watcher.watchfiles_adapter import WatchfilesWatcher


def make_reload_callback(holder: RegistryHolder) -> Callable[[set[Path]], Coroutine[Any, Any, None]]:
    async def _on_change(_paths: set[Path]) -> None:
        await asyncio.to_thread(holder.reload)

    return _on_change


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: ServerConfig = app.state.config
    watcher: FileWatcherPort | None = None
    if config.watch:
        watcher = WatchfilesWatcher(config.data_dir, make_reload_callback(app.state.holder))
        await watcher.start()
    app.state.watcher = watcher
    try:
        yield
    finally:
        if watcher is not None:
            await watcher.stop()
        app.state.watcher = None
