from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logdrop.domain.entities.log_record import LogRecord, NewLogRecord
    from logdrop.domain.value_objects.log_filter import LogFilter
    from logdrop.domain.value_objects.log_status import LogStatus


class LogRecordRepoPort(ABC):
    """Port for log record persistence."""

    @abstractmethod
    async def create(self, record: "NewLogRecord") -> "LogRecord":
        """Persist a new record and assign its identifier."""

    @abstractmethod
    async def get(self, record_id: int) -> "LogRecord | None":
        """Load record by ID."""

    @abstractmethod
    async def list_records(self, filters: "LogFilter | None" = None) -> list["LogRecord"]:
        """List records, newest first."""

    @abstractmethod
    async def update_status(self, record_id: int, status: "LogStatus") -> "LogRecord | None":
        """Set the lifecycle status. Returns None if the record does not exist."""

    @abstractmethod
    async def delete(self, record_id: int) -> "LogRecord | None":
        """Remove a record. Returns the removed record, or None if absent."""
