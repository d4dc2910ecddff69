import asyncio
import mimetypes
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from logdrop.application.dto.log_submission import LogSubmission
from logdrop.cli.theme import theme
from logdrop.cli.utils import ROOT_ENVVAR, exit_code_for, load_config, parse_tags
from logdrop.domain.errors import LogdropError
from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.infrastructure.service_factory import create_services

console = Console()


def submit_log(
    device_id: str = typer.Argument(..., help="Submitting device identifier"),
    file: Path | None = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False, help="Attachment to store"
    ),
    content_type: str | None = typer.Option(
        None, "--type", "-t", help="Attachment MIME type (guessed from --file if omitted)"
    ),
    level: LogLevel = typer.Option(LogLevel.INFO, "--level", "-l", help="Log level"),
    message: str = typer.Option("", "--message", "-m", help="Log message"),
    tag: list[str] = typer.Option([], "--tag", help="Tag as key=value (repeatable)"),
    timestamp: datetime | None = typer.Option(None, "--timestamp", help="Event time (ISO 8601)"),
    root: Path | None = typer.Option(None, "--root", envvar=ROOT_ENVVAR, help="Storage root"),
) -> None:
    """Submit a log record, optionally with an attachment."""
    tags = parse_tags(tag)
    asyncio.run(_submit(device_id, file, content_type, level, message, tags, timestamp, root))


def _guess_type(file: Path) -> str | None:
    mime, encoding = mimetypes.guess_type(file.name)
    if encoding == "gzip":
        return "application/gzip"
    return mime


async def _submit(
    device_id: str,
    file: Path | None,
    content_type: str | None,
    level: LogLevel,
    message: str,
    tags: dict[str, str] | None,
    timestamp: datetime | None,
    root: Path | None,
) -> None:
    services = create_services(load_config(root))

    attachment: bytes | None = None
    if file is not None:
        attachment = file.read_bytes()
        content_type = content_type or _guess_type(file)

    submission = LogSubmission(
        device_id=device_id,
        level=level,
        message=message,
        tags=tags,
        timestamp=timestamp,
        declared_type=content_type,
        attachment=attachment,
    )

    try:
        record = await services.submit_log.execute(submission)
    except LogdropError as e:
        console.print(f"[{theme.ERROR_BOLD}]Submission failed:[/] {e}")
        raise typer.Exit(exit_code_for(e)) from e

    console.print(f"[{theme.SUCCESS_BOLD}]Log {record.id} submitted[/]")
    if record.file_path:
        console.print(f"  [{theme.DIM}]artifact:[/] {record.file_path}")
