from json_server.core.coercion import as_array, render_array
from json_server.core.index import render_index, render_index_html
from json_server.core.loader import (
    Collision,
    InvalidRouteName,
    LoadReport,
    SkippedFile,
    derive_route_name,
    load_directory,
)
from json_server.core.registry import Document, Registry, RegistryHolder, route_path

__all__ = [
    "Collision",
    "Document",
    "InvalidRouteName",
    "LoadReport",
    "Registry",
    "RegistryHolder",
    "SkippedFile",
    "as_array",
    "derive_route_name",
    "load_directory",
    "render_array",
    "render_index",
    "render_index_html",
    "route_path",
]
