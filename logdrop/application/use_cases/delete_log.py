from loguru import logger

from logdrop.domain.entities.log_record import LogRecord
from logdrop.domain.errors import ArtifactNotFoundError, InvalidPathError, LogRecordNotFoundError
from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort
from logdrop.domain.services.path_sanitizer import PathSanitizer


class DeleteLog:
    def __init__(
        self,
        record_repo: LogRecordRepoPort,
        store: ArtifactStorePort,
        sanitizer: PathSanitizer,
    ) -> None:
        self.record_repo = record_repo
        self.store = store
        self.sanitizer = sanitizer

    async def execute(self, record_id: int) -> LogRecord:
        """Delete a log record and then its artifact, if it has one."""
        record = await self.record_repo.delete(record_id)
        if record is None:
            raise LogRecordNotFoundError(record_id)

        if record.file_path is not None:
            await self._remove_artifact(record_id, record.file_path)

        return record

    async def _remove_artifact(self, record_id: int, file_path: str) -> None:
        try:
            path = self.sanitizer.sanitize(file_path)
            removed = await self.store.delete(path)
        except (InvalidPathError, ArtifactNotFoundError):
            logger.warning(
                "Log {} had an unusable artifact reference {!r}, skipping file removal",
                record_id,
                file_path,
            )
            return

        if not removed:
            logger.warning("Artifact {} of log {} was already gone", path.logical, record_id)
