from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from logdrop.domain.value_objects.log_level import LogLevel


class LogSubmission(BaseModel):
    """A device's log submission as received at the boundary."""

    device_id: str
    level: LogLevel = LogLevel.INFO
    message: str = ""
    timestamp: datetime | None = Field(
        default=None, description="Client-side event time (server time if absent)"
    )
    tags: Any = None

    # Attachment
    declared_type: str | None = Field(default=None, description="MIME-style content type")
    attachment: bytes | None = Field(default=None, repr=False)
