from loguru import logger

from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.errors import LogRecordNotFoundError
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort
from logdrop.domain.value_objects.log_status import LogStatus


class UpdateLogStatus:
    def __init__(self, record_repo: LogRecordRepoPort) -> None:
        self.record_repo = record_repo

    async def execute(self, record_id: int, status: LogStatus) -> LogRecord:
        record = await self.record_repo.update_status(record_id, status)
        if record is None:
            raise LogRecordNotFoundError(record_id)
        logger.info("Log {} marked {}", record_id, status.value)
        return record
