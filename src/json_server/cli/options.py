from pathlib import Path
from typing import Annotated

import typer

from json_server.config import DEFAULT_DATA_DIR

DataDirOption = Annotated[
    Path,
    typer.Option(
        "--data-dir",
        "-d",
        envvar="JSON_SERVER_DATA_DIR",
        help="Directory of .json files; data/users.json is served at /api/users.",
    ),
]

DEFAULT_DATA_DIR_PATH = Path(DEFAULT_DATA_DIR)
