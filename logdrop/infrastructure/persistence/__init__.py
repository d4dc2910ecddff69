from logdrop.infrastructure.persistence.artifact_store import FileArtifactStore
from logdrop.infrastructure.persistence.json_log_record_repo import JsonLogRecordRepo

__all__ = ["FileArtifactStore", "JsonLogRecordRepo"]
