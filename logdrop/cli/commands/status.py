import asyncio
from pathlib import Path

import typer
from rich.console import Console

from logdrop.cli.theme import theme
from logdrop.cli.utils import ROOT_ENVVAR, exit_code_for, load_config
from logdrop.domain.errors import LogdropError
from logdrop.domain.value_objects.log_status import LogStatus
from logdrop.infrastructure.service_factory import create_services

console = Console()


def set_log_status(
    record_id: int = typer.Argument(..., help="Log record ID"),
    status: LogStatus = typer.Argument(..., help="New status"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """Change a log record's status."""
    asyncio.run(_set_status(record_id, status, root))


async def _set_status(record_id: int, status: LogStatus, root: Path | None) -> None:
    services = create_services(load_config(root))

    try:
        record = await services.update_log_status.execute(record_id, status)
    except LogdropError as e:
        console.print(f"[{theme.ERROR_BOLD}]{e}[/]")
        raise typer.Exit(exit_code_for(e)) from e

    console.print(
        f"Log {record.id} is now [{theme.status_style(record.status)}]{record.status.value}[/]"
    )
