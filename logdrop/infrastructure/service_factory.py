from dataclasses import dataclass

from logdrop.application.use_cases import (
    DeleteLog,
    GetLog,
    IngestArtifact,
    ListLogs,
    RetrieveArtifact,
    SubmitLog,
    UpdateLogStatus,
)
from logdrop.domain.services.artifact_namer import ArtifactNamer
from logdrop.domain.services.decompression_reader import DecompressionReader
from logdrop.domain.services.path_sanitizer import PathSanitizer
from logdrop.domain.value_objects.storage_config import StorageConfig
from logdrop.infrastructure.persistence.artifact_store import FileArtifactStore
from logdrop.infrastructure.persistence.json_log_record_repo import JsonLogRecordRepo


@dataclass(frozen=True)
class LogdropServices:
    """Use cases wired against one storage root."""

    config: StorageConfig
    ingest_artifact: IngestArtifact
    retrieve_artifact: RetrieveArtifact
    submit_log: SubmitLog
    get_log: GetLog
    list_logs: ListLogs
    update_log_status: UpdateLogStatus
    delete_log: DeleteLog


def create_services(config: StorageConfig, namer: ArtifactNamer | None = None) -> LogdropServices:
    """Build the file-backed stores and the use cases on top of them."""
    sanitizer = PathSanitizer(config.root)
    store = FileArtifactStore(config, sanitizer)
    record_repo = JsonLogRecordRepo(config.records_path)
    reader = DecompressionReader(config.max_decoded_bytes)

    ingest = IngestArtifact(store, namer or ArtifactNamer(), config)

    return LogdropServices(
        config=config,
        ingest_artifact=ingest,
        retrieve_artifact=RetrieveArtifact(sanitizer, store, reader),
        submit_log=SubmitLog(ingest, record_repo, store, sanitizer),
        get_log=GetLog(record_repo),
        list_logs=ListLogs(record_repo),
        update_log_status=UpdateLogStatus(record_repo),
        delete_log=DeleteLog(record_repo, store, sanitizer),
    )
