from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.errors import LogRecordNotFoundError
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort


class GetLog:
    def __init__(self, record_repo: LogRecordRepoPort) -> None:
        self.record_repo = record_repo

    async def execute(self, record_id: int) -> LogRecord:
        record = await self.record_repo.get(record_id)
        if record is None:
            raise LogRecordNotFoundError(record_id)
        return record
