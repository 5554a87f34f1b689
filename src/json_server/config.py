from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from json_server.errors import DataDirectoryError

DEFAULT_DATA_DIR = "./data"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ServerConfig:
    data_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    watch: bool = False
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build a config from ``JSON_SERVER_*`` environment variables."""
        return cls(
            data_dir=Path(os.getenv("JSON_SERVER_DATA_DIR", DEFAULT_DATA_DIR)),
            host=os.getenv("JSON_SERVER_HOST", DEFAULT_HOST),
            port=int(os.getenv("JSON_SERVER_PORT", str(DEFAULT_PORT))),
            watch=os.getenv("JSON_SERVER_WATCH", "").strip().lower() in _TRUTHY,
            log_level=os.getenv("JSON_SERVER_LOG", "info"),
        )


def resolve_data_dir(path: str | Path) -> Path:
    """Return ``path`` if it is an existing, listable directory.

    Raises ``DataDirectoryError`` otherwise.
    """
    data_dir = Path(path)
    if not data_dir.exists():
        raise DataDirectoryError(data_dir, "data directory does not exist")
    if not data_dir.is_dir():
        raise DataDirectoryError(data_dir, "data directory is not a directory")
    if not os.access(data_dir, os.R_OK | os.X_OK):
        raise DataDirectoryError(data_dir, "data directory is not readable")
    return data_dir
