from datetime import datetime
from typing import Any

from loguru import logger
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

from logdrop.domain.errors import ArtifactExistsError, InvalidSubmissionError
from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.services.artifact_namer import ArtifactNamer
from logdrop.domain.value_objects.storage_config import StorageConfig


def _log_name_collision(retry_state: Any) -> None:
    exc = retry_state.outcome.exception()
    logger.warning("Artifact name taken (attempt {}): {}", retry_state.attempt_number, exc)


class IngestArtifact:
    def __init__(
        self,
        store: ArtifactStorePort,
        namer: ArtifactNamer,
        config: StorageConfig,
    ) -> None:
        self.store = store
        self.namer = namer
        self.config = config

    async def execute(
        self,
        device_id: str,
        declared_type: str | None = None,
        attachment: bytes | None = None,
        timestamp: datetime | None = None,
    ) -> str | None:
        """Store an attachment and return the logical path to record.

        Returns None when there is no attachment; nothing is written then.
        The artifact is fully stored before the path is returned, and any
        storage failure propagates so no record references a missing file.
        """
        if not device_id or not device_id.strip():
            raise InvalidSubmissionError("device_id is required")

        if attachment is None:
            logger.debug("No attachment from device {}, nothing stored", device_id)
            return None

        if len(attachment) > self.config.max_upload_bytes:
            raise InvalidSubmissionError(
                f"attachment is {len(attachment)} bytes, limit is {self.config.max_upload_bytes}"
            )

        submitted_at = timestamp or self.namer.now()

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(ArtifactExistsError),
            stop=stop_after_attempt(self.config.max_name_attempts),
            before_sleep=_log_name_collision,
            reraise=True,
        ):
            with attempt:
                filename = self.namer.name(
                    device_id,
                    declared_type,
                    submitted_at,
                    attempt=attempt.retry_state.attempt_number - 1,
                )
                logical_path = await self.store.put(
                    f"{self.config.upload_dir}/{filename}", attachment
                )

        logger.info("Ingested artifact {} for device {}", logical_path, device_id)
        return logical_path
