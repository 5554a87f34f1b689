from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from json_server.cli.options import DEFAULT_DATA_DIR_PATH, DataDirOption
from json_server.config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig
from json_server.errors import DataDirectoryError
from json_server.log import configure_logging

console = Console()


def serve(
    data_dir: DataDirOption = DEFAULT_DATA_DIR_PATH,
    port: Annotated[
        int, typer.Option("--port", "-p", envvar="JSON_SERVER_PORT", min=1, max=65535, help="Port to listen on.")
    ] = DEFAULT_PORT,
    host: Annotated[str, typer.Option(envvar="JSON_SERVER_HOST", help="Interface to bind.")] = DEFAULT_HOST,
    watch: Annotated[
        bool, typer.Option("--watch/--no-watch", envvar="JSON_SERVER_WATCH", help="Reload when JSON files change.")
    ] = False,
    log_level: Annotated[
        str, typer.Option(envvar="JSON_SERVER_LOG", help="debug, info, warning or error.")
    ] = "info",
) -> None:
    """Start the HTTP server."""
    import uvicorn

    from json_server.api.app import create_app

    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    config = ServerConfig(data_dir=data_dir, host=host, port=port, watch=watch, log_level=log_level)
    try:
        app = create_app(config)
    except DataDirectoryError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    registry = app.state.holder.current
    if len(registry):
        console.print(f"[green]Serving {len(registry)} route(s) from {escape(str(data_dir))}[/green]")
        for descriptor in registry.descriptors():
            console.print(f"  {escape(descriptor.path)}")
    else:
        console.print(f"[yellow]No JSON files found in {escape(str(data_dir))}; /api is empty[/yellow]")

    console.print(f"[green]Listening on http://{host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
