import sys
from pathlib import Path

import typer
from loguru import logger

from logdrop.cli.commands import delete, list_logs, read, serve, status, submit


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()

    file_path = log_file or Path("logdrop.log")
    logger.add(
        file_path,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )


app = typer.Typer(
    name="logdrop",
    help="logdrop - device log submission and artifact retrieval",
    no_args_is_help=True,
)

# Register commands
app.command(name="submit")(submit.submit_log)
app.command(name="read")(read.read_artifact)
app.command(name="list")(list_logs.list_all_logs)
app.command(name="status")(status.set_log_status)
app.command(name="delete")(delete.delete_log)
app.command(name="serve")(serve.serve)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Log file path"),
) -> None:
    """logdrop - device log submission and artifact retrieval."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
