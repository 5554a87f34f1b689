"""Immutable route registry and the holder that publishes registry snapshots."""

from __future__ import annotations

import builtins
import logging
import threading
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from json_server.core.coercion import render_array
from json_server.models import EndpointDescriptor

if TYPE_CHECKING:
    from json_server.core.loader import LoadReport

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def route_path(route: str) -> str:
    return f"{API_PREFIX}/{quote(route, safe='')}"


@dataclass(frozen=True)
class Document:
    route: str
    source: Path
    value: Any
    body: bytes = field(repr=False)

    @classmethod
    def from_value(cls, route: str, source: Path, value: Any) -> Document:
        return cls(route=route, source=source, value=value, body=render_array(value))


class Registry:
    """One generation of the route -> document mapping.

    Never mutated after construction. A reload builds a new ``Registry``.
    """

    __slots__ = ("_documents", "_routes", "generation")

    def __init__(self, documents: Iterable[Document] = (), generation: int = 0) -> None:
        by_route = {doc.route: doc for doc in documents}
        self._documents: Mapping[str, Document] = MappingProxyType(by_route)
        self._routes: tuple[str, ...] = tuple(sorted(by_route))
        self.generation = generation

    def get(self, route: str) -> Document | None:
        return self._documents.get(route)

    def list(self) -> tuple[str, ...]:
        """Route names in lexicographic order."""
        return self._routes

    def documents(self) -> tuple[Document, ...]:
        """Documents in route-name order."""
        return tuple(self._documents[route] for route in self._routes)

    def descriptors(self) -> builtins.list[EndpointDescriptor]:
        return [EndpointDescriptor(name=route, path=route_path(route)) for route in self._routes]

    def __contains__(self, route: object) -> bool:
        return route in self._documents

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"Registry(generation={self.generation}, routes={list(self._routes)!r})"


class RegistryHolder:
    """Publishes registry snapshots to concurrent readers.

    Readers take ``current`` without locking. Writers hold the lock only to hand out a
    generation number and to swap the reference, never while reading files.
    """

    def __init__(self, registry: Registry, loader: Callable[[int], LoadReport] | None = None) -> None:
        self._current = registry
        self._loader = loader
        self._last_generation = registry.generation
        self._write_lock = threading.Lock()

    @property
    def current(self) -> Registry:
        return self._current

    def publish(self, registry: Registry) -> Registry:
        with self._write_lock:
            previous = self._current
            self._current = registry
            self._last_generation = max(self._last_generation, registry.generation)
        logger.debug("Published registry generation %d (was %d)", registry.generation, previous.generation)
        return registry

    def reload(self) -> LoadReport:
        """Build the next generation with the configured loader and publish it.

        The previous snapshot stays visible if the loader raises. A reload that finishes
        after a newer one does not replace it.
        """
        if self._loader is None:
            raise RuntimeError("RegistryHolder has no loader configured")
        with self._write_lock:
            self._last_generation += 1
            generation = self._last_generation
        try:
            report = self._loader(generation)
        except Exception:
            logger.exception("Reload failed; keeping generation %d", self._current.generation)
            raise
        with self._write_lock:
            if report.registry.generation > self._current.generation:
                self._current = report.registry
            else:
                logger.debug("Dropping stale generation %d", report.registry.generation)
        return report
