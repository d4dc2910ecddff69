import asyncio
from pathlib import Path

import typer
from rich.console import Console

from logdrop.cli.theme import theme
from logdrop.cli.utils import ROOT_ENVVAR, exit_code_for, load_config
from logdrop.domain.errors import LogdropError
from logdrop.infrastructure.service_factory import create_services

console = Console()
err_console = Console(stderr=True)


def read_artifact(
    logical_path: str = typer.Argument(..., help="Artifact path as stored on the log record"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """Print an artifact's content, decompressing it when needed."""
    asyncio.run(_read(logical_path, root))


async def _read(logical_path: str, root: Path | None) -> None:
    services = create_services(load_config(root))

    try:
        content = await services.retrieve_artifact.execute(logical_path)
    except LogdropError as e:
        err_console.print(f"[{theme.ERROR_BOLD}]{e.error_class.value}:[/] {e}")
        raise typer.Exit(exit_code_for(e)) from e

    # Artifacts are raw logs: no markup, no highlighting
    console.print(content, end="", markup=False, highlight=False, soft_wrap=True)
