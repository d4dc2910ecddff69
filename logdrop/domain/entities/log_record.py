from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus


class NewLogRecord(BaseModel):
    """Record data as submitted, before the repository assigns an ID."""

    device_id: str
    level: LogLevel = LogLevel.INFO
    message: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    tags: Any = None

    # Artifact reference: a logical path, set at creation and never changed
    file_path: str | None = None
    mime_type: str | None = None

    @property
    def has_attachment(self) -> bool:
        return self.file_path is not None


class LogRecord(NewLogRecord):
    id: int
    status: LogStatus = LogStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
