from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path

import aiofiles
from loguru import logger


async def atomic_write(
    path: Path,
    content: str | bytes,
    suffix: str | None = None,
    exclusive: bool = False,
) -> None:
    """Write content to file atomically using temp file + rename pattern.

    With ``exclusive`` the temp file is published with a hard link instead of
    a rename, so an existing file at ``path`` is never replaced and
    FileExistsError is raised instead.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in the same directory so the publish stays on one filesystem
    fd, temp_path_str = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=".tmp_",
        suffix=suffix or path.suffix,
    )
    temp_path = Path(temp_path_str)
    binary = isinstance(content, bytes)

    try:
        async with aiofiles.open(
            fd,
            mode="wb" if binary else "w",
            encoding=None if binary else "utf-8",
            closefd=True,
        ) as f:
            await f.write(content)
            await f.flush()
            await asyncio.to_thread(os.fsync, f.fileno())
        if exclusive:
            await asyncio.to_thread(os.link, temp_path, path)
            await asyncio.to_thread(temp_path.unlink)
        else:
            await asyncio.to_thread(temp_path.replace, path)
        logger.debug("Atomic write completed: {}", path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise
