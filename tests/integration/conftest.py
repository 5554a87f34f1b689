"""Fixtures that run the app on a real uvicorn server."""

import socket
import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import pytest
import uvicorn
from fastapi import FastAPI

from json_server.api.app import create_app
from json_server.config import ServerConfig


@dataclass(frozen=True)
class LiveServer:
    base_url: str
    app: FastAPI


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return int(sock.getsockname()[1])


@pytest.fixture
def live_server(data_dir: Path) -> Iterator[LiveServer]:
    """Serve ``data_dir`` on a free local port for the duration of a test."""
    config = ServerConfig(data_dir=data_dir, port=_free_port())
    app = create_app(config)
    server = uvicorn.Server(uvicorn.Config(app, host=config.host, port=config.port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline or not thread.is_alive():
            raise RuntimeError("uvicorn did not start in time")
        time.sleep(0.02)

    yield LiveServer(base_url=f"http://{config.host}:{config.port}", app=app)

    server.should_exit = True
    thread.join(timeout=10)
