import typer

from json_server.cli.routes import routes
from json_server.cli.serve import serve

app = typer.Typer(
    name="json-server",
    help="json-server CLI: serve a directory of JSON files as a REST API.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("serve")(serve)
app.command("routes")(routes)


def main() -> None:
    app()
