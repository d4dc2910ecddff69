import asyncio
from pathlib import Path

import typer
from rich.console import Console

from logdrop.cli.theme import theme
from logdrop.cli.utils import ROOT_ENVVAR, exit_code_for, load_config
from logdrop.domain.errors import LogdropError
from logdrop.infrastructure.service_factory import create_services

console = Console()


def delete_log(
    record_id: int = typer.Argument(..., help="Log record ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """Delete a log record and its stored artifact."""
    if not yes:
        typer.confirm(f"Delete log {record_id} and its artifact?", abort=True)
    asyncio.run(_delete(record_id, root))


async def _delete(record_id: int, root: Path | None) -> None:
    services = create_services(load_config(root))

    try:
        record = await services.delete_log.execute(record_id)
    except LogdropError as e:
        console.print(f"[{theme.ERROR_BOLD}]{e}[/]")
        raise typer.Exit(exit_code_for(e)) from e

    console.print(f"[{theme.SUCCESS}]Deleted log {record.id}[/]")
