from loguru import logger

from logdrop.application.dto.log_submission import LogSubmission
from logdrop.application.use_cases.ingest_artifact import IngestArtifact
from logdrop.domain.entities.log_record import LogRecord, NewLogRecord
from logdrop.domain.errors import LogdropError
from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort
from logdrop.domain.services.path_sanitizer import PathSanitizer


class SubmitLog:
    def __init__(
        self,
        ingest: IngestArtifact,
        record_repo: LogRecordRepoPort,
        store: ArtifactStorePort,
        sanitizer: PathSanitizer,
    ) -> None:
        self.ingest = ingest
        self.record_repo = record_repo
        self.store = store
        self.sanitizer = sanitizer

    async def execute(self, submission: LogSubmission) -> LogRecord:
        """Store the attachment (if any), then create the log record.

        If the record cannot be created the freshly stored artifact is
        removed again before the error propagates.
        """
        file_path = await self.ingest.execute(
            submission.device_id,
            submission.declared_type,
            submission.attachment,
        )

        new_record = NewLogRecord(
            device_id=submission.device_id,
            level=submission.level,
            message=submission.message,
            tags=submission.tags,
            file_path=file_path,
            mime_type=submission.declared_type if file_path else None,
        )
        if submission.timestamp is not None:
            new_record.timestamp = submission.timestamp

        try:
            record = await self.record_repo.create(new_record)
        except Exception:
            if file_path is not None:
                await self._discard_artifact(file_path)
            raise

        logger.info(
            "Log {} submitted by {} (attachment: {})",
            record.id,
            record.device_id,
            file_path or "none",
        )
        return record

    async def _discard_artifact(self, file_path: str) -> None:
        logger.error("Record creation failed, removing orphaned artifact {}", file_path)
        try:
            await self.store.delete(self.sanitizer.sanitize(file_path))
        except (LogdropError, OSError) as e:
            # The record error is what the caller needs to see
            logger.error("Could not remove orphaned artifact {}: {}", file_path, e)
