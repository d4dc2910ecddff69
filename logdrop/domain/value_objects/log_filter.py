from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus

if TYPE_CHECKING:
    from logdrop.domain.entities.log_record import LogRecord


class LogFilter(BaseModel, frozen=True):
    """Criteria for listing log records. Unset fields match everything."""

    device_id: str | None = None
    level: LogLevel | None = None
    status: LogStatus | None = None
    search: str | None = Field(default=None, description="Case-insensitive substring of message")
    has_attachment: bool | None = None
    limit: int | None = Field(default=None, gt=0)

    def matches(self, record: "LogRecord") -> bool:
        if self.device_id is not None and record.device_id != self.device_id:
            return False
        if self.level is not None and record.level != self.level:
            return False
        if self.status is not None and record.status != self.status:
            return False
        if self.search and self.search.lower() not in record.message.lower():
            return False
        if self.has_attachment is not None and record.has_attachment != self.has_attachment:
            return False
        return True
