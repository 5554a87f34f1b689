from collections.abc import Sequence
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from json_server.cli.options import DEFAULT_DATA_DIR_PATH, DataDirOption
from json_server.core.loader import load_directory
from json_server.core.registry import route_path
from json_server.errors import DataDirectoryError

console = Console()


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def routes(data_dir: DataDirOption = DEFAULT_DATA_DIR_PATH) -> None:
    """List the routes a data directory would serve."""
    try:
        report = load_directory(data_dir)
    except DataDirectoryError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    registry = report.registry
    _render_table(
        ["route", "path", "source"],
        [(doc.route, route_path(doc.route), doc.source.name) for doc in registry.documents()],
    )

    if report.skipped:
        console.print(f"[yellow]Skipped {len(report.skipped)} file(s):[/yellow]")
        for skipped in report.skipped:
            console.print(f"  {escape(skipped.path.name)}: {escape(skipped.reason)}")
    for collision in report.collisions:
        console.print(
            f"[yellow]Route '{escape(collision.route)}': {escape(collision.kept.name)} "
            f"replaces {escape(collision.replaced.name)}[/yellow]"
        )
