import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from logdrop.cli.theme import theme
from logdrop.cli.utils import ROOT_ENVVAR, load_config
from logdrop.domain.value_objects.log_filter import LogFilter
from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus
from logdrop.infrastructure.service_factory import create_services

console = Console()


def list_all_logs(
    device: str | None = typer.Option(None, "--device", "-d", help="Filter by device ID"),
    level: LogLevel | None = typer.Option(None, "--level", "-l", help="Filter by level"),
    status: LogStatus | None = typer.Option(None, "--status", "-s", help="Filter by status"),
    search: str | None = typer.Option(None, "--search", help="Substring of message"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Max rows"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """List log records, newest first."""
    filters = LogFilter(device_id=device, level=level, status=status, search=search, limit=limit)
    asyncio.run(_list_logs(filters, root))


async def _list_logs(filters: LogFilter, root: Path | None) -> None:
    services = create_services(load_config(root))
    records = await services.list_logs.execute(filters)

    if not records:
        console.print(f"[{theme.DIM}]No logs found[/]")
        return

    table = Table(title="Logs")
    table.add_column("ID", style=theme.INFO, justify="right")
    table.add_column("Device")
    table.add_column("Level")
    table.add_column("Message")
    table.add_column("Artifact", style=theme.DIM)
    table.add_column("Status")
    table.add_column("Created", style=theme.DIM)

    for record in records:
        table.add_row(
            str(record.id),
            record.device_id,
            f"[{theme.level_style(record.level)}]{record.level.value}[/]",
            record.message[:50],
            record.file_path or "-",
            f"[{theme.status_style(record.status)}]{record.status.value}[/]",
            record.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        )

    console.print(table)
