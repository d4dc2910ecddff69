from pathlib import Path

import typer
import uvicorn
from loguru import logger

from logdrop.api.app import create_app
from logdrop.cli.utils import ROOT_ENVVAR, load_config


def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """Run the HTTP API."""
    config = load_config(root)
    logger.info("Serving logdrop on {}:{} (root: {})", host, port, config.root)
    uvicorn.run(create_app(config), host=host, port=port)
