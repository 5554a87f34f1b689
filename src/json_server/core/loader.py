"""Scan a data directory and build a ``Registry`` from its JSON files.

Files are processed in file-name order, so when two files derive the same route
name the one whose file name sorts last is kept.
"""

from __future__ import annotations

import json
import logging
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from json_server.config import resolve_data_dir
from json_server.core.registry import Document, Registry
from json_server.errors import DataDirectoryError

logger = logging.getLogger(__name__)

JSON_EXTENSION = ".json"

_FORBIDDEN_ROUTE_CHARS = frozenset("/\\")
_RESERVED_ROUTES = frozenset({".", ".."})


class InvalidRouteName(ValueError):
    pass


@dataclass(frozen=True)
class SkippedFile:
    path: Path
    reason: str


@dataclass(frozen=True)
class Collision:
    route: str
    kept: Path
    replaced: Path


@dataclass(frozen=True)
class LoadReport:
    registry: Registry
    skipped: list[SkippedFile] = field(default_factory=list)
    collisions: list[Collision] = field(default_factory=list)


def is_json_file(path: Path) -> bool:
    return path.name.lower().endswith(JSON_EXTENSION)


def derive_route_name(file_name: str) -> str:
    """Strip the ``.json`` extension and normalise the rest to a route name.

    Raises ``InvalidRouteName`` for names that cannot be served as a single path segment.
    """
    if not file_name.lower().endswith(JSON_EXTENSION):
        raise InvalidRouteName(f"not a {JSON_EXTENSION} file")
    stem = file_name[: -len(JSON_EXTENSION)]
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidRouteName("file name is not valid UTF-8") from None
    route = unicodedata.normalize("NFC", stem)
    if not route:
        raise InvalidRouteName("empty route name")
    if route in _RESERVED_ROUTES:
        raise InvalidRouteName(f"reserved route name {route!r}")
    if any(ch in _FORBIDDEN_ROUTE_CHARS for ch in route):
        raise InvalidRouteName("route name contains a path separator")
    return route


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_document(raw: bytes) -> Any:
    """Decode UTF-8 bytes (optionally BOM-prefixed) and parse them as strict JSON."""
    text = raw.decode("utf-8-sig")
    return json.loads(text, parse_constant=_reject_constant)


def _list_candidates(directory: Path) -> list[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except FileNotFoundError:
        raise DataDirectoryError(directory, "data directory does not exist") from None
    except NotADirectoryError:
        raise DataDirectoryError(directory, "data directory is not a directory") from None
    except PermissionError:
        raise DataDirectoryError(directory, "data directory is not readable") from None
    return [p for p in entries if is_json_file(p) and p.is_file()]


def load_directory(directory: str | Path, generation: int = 1) -> LoadReport:
    """Load every eligible JSON file in ``directory`` into a new registry generation.

    Only a missing or unreadable directory raises. Bad files are skipped and reported.
    """
    data_dir = resolve_data_dir(directory)
    documents: dict[str, Document] = {}
    skipped: list[SkippedFile] = []
    collisions: list[Collision] = []

    for path in _list_candidates(data_dir):
        try:
            route = derive_route_name(path.name)
        except InvalidRouteName as exc:
            logger.warning("Skipping %r: %s", path.name, exc)
            skipped.append(SkippedFile(path, str(exc)))
            continue

        try:
            doc = Document.from_value(route, path, parse_document(path.read_bytes()))
        except OSError as exc:
            reason = f"unreadable: {exc.strerror or exc}"
            logger.warning("Skipping %s: %s", path.name, reason)
            skipped.append(SkippedFile(path, reason))
            continue
        except UnicodeDecodeError:
            logger.warning("Skipping %s: not UTF-8 encoded", path.name)
            skipped.append(SkippedFile(path, "not UTF-8 encoded"))
            continue
        except ValueError as exc:
            reason = f"invalid JSON: {exc}"
            logger.warning("Skipping %s: %s", path.name, reason)
            skipped.append(SkippedFile(path, reason))
            continue
        except RecursionError:
            logger.warning("Skipping %s: document nested too deeply", path.name)
            skipped.append(SkippedFile(path, "document nested too deeply"))
            continue

        previous = documents.get(route)
        if previous is not None:
            logger.warning("Route %r from %s replaces %s", route, path.name, previous.source.name)
            collisions.append(Collision(route=route, kept=path, replaced=previous.source))
        documents[route] = doc

    registry = Registry(documents.values(), generation=generation)
    logger.info("Loaded %d route(s) from %s (generation %d)", len(registry), data_dir, generation)
    return LoadReport(registry=registry, skipped=skipped, collisions=collisions)
