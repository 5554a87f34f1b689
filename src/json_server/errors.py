from pathlib import Path


class JsonServerError(Exception):
    """Base class for errors raised by json-server."""


class DataDirectoryError(JsonServerError):
    """The data directory is missing, not a directory, or cannot be listed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")
