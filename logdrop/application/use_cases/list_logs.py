from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort
from logdrop.domain.value_objects.log_filter import LogFilter


class ListLogs:
    def __init__(self, record_repo: LogRecordRepoPort) -> None:
        self.record_repo = record_repo

    async def execute(self, filters: LogFilter | None = None) -> list[LogRecord]:
        """List log records newest first, optionally filtered."""
        return await self.record_repo.list_records(filters)
