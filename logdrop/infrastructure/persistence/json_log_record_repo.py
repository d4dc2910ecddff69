from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
from filelock import FileLock
from loguru import logger
from pydantic import ValidationError

from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort
from logdrop.infrastructure.persistence.atomic_io import atomic_write

if TYPE_CHECKING:
    from logdrop.domain.entities.log_record import NewLogRecord
    from logdrop.domain.value_objects.log_filter import LogFilter
    from logdrop.domain.value_objects.log_status import LogStatus


class JsonLogRecordRepo(LogRecordRepoPort):
    """File-based JSON storage implementation of LogRecordRepoPort.

    One ``<id>.json`` file per record. IDs come from a counter file and are
    assigned under a file lock, so several processes can share a records
    directory.
    """

    def __init__(self, records_dir: Path) -> None:
        self.records_dir = records_dir

    def _record_path(self, record_id: int) -> Path:
        return self.records_dir / f"{record_id:08d}.json"

    def _lock_path(self) -> Path:
        return self.records_dir / ".lock"

    def _counter_path(self) -> Path:
        return self.records_dir / ".counter"

    async def _read_json(self, path: Path) -> dict[str, Any] | None:
        """Read JSON file, return None if not exists."""
        if not path.exists():
            return None
        async with aiofiles.open(path, encoding="utf-8") as f:
            content = await f.read()
        return json.loads(content)  # type: ignore[no-any-return]

    async def _load(self, record_id: int) -> LogRecord | None:
        data = await self._read_json(self._record_path(record_id))
        if data is None:
            return None
        return LogRecord.model_validate(data)

    async def _next_id(self) -> int:
        """Advance the ID counter. Caller must hold the lock."""
        counter_path = self._counter_path()
        current = 0
        if counter_path.exists():
            async with aiofiles.open(counter_path, encoding="utf-8") as f:
                current = int((await f.read()).strip() or 0)
        next_id = current + 1
        await atomic_write(counter_path, str(next_id), suffix=".counter")
        return next_id

    async def create(self, record: NewLogRecord) -> LogRecord:
        self.records_dir.mkdir(parents=True, exist_ok=True)

        lock = FileLock(self._lock_path())
        with lock:
            record_id = await self._next_id()
            stored = LogRecord.model_validate({**record.model_dump(), "id": record_id})
            await atomic_write(self._record_path(record_id), stored.model_dump_json(indent=2))

        logger.info("Created log record {} for device {}", record_id, stored.device_id)
        return stored

    async def get(self, record_id: int) -> LogRecord | None:
        if not self._record_path(record_id).exists():
            logger.debug("Log record not found: {}", record_id)
            return None

        lock = FileLock(self._lock_path())
        with lock:
            return await self._load(record_id)

    async def list_records(self, filters: LogFilter | None = None) -> list[LogRecord]:
        if not self.records_dir.exists():
            return []

        records: list[LogRecord] = []
        for path in self.records_dir.glob("*.json"):
            if path.name.startswith("."):
                continue
            try:
                data = await self._read_json(path)
                if data is not None:
                    records.append(LogRecord.model_validate(data))
            except (json.JSONDecodeError, ValidationError) as e:
                logger.warning("Invalid log record file {}: {}", path.name, e)

        records.sort(key=lambda r: (r.created_at, r.id), reverse=True)

        if filters is None:
            return records
        matched = [r for r in records if filters.matches(r)]
        return matched[: filters.limit] if filters.limit else matched

    async def update_status(self, record_id: int, status: LogStatus) -> LogRecord | None:
        if not self.records_dir.exists():
            return None

        lock = FileLock(self._lock_path())
        with lock:
            record = await self._load(record_id)
            if record is None:
                return None
            record.status = status
            await atomic_write(self._record_path(record_id), record.model_dump_json(indent=2))

        logger.info("Log record {} status -> {}", record_id, status.value)
        return record

    async def delete(self, record_id: int) -> LogRecord | None:
        if not self.records_dir.exists():
            return None

        lock = FileLock(self._lock_path())
        with lock:
            record = await self._load(record_id)
            if record is None:
                return None
            self._record_path(record_id).unlink()

        logger.info("Deleted log record {}", record_id)
        return record
