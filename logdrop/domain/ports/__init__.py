from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.ports.log_record_repo_port import LogRecordRepoPort

__all__ = ["ArtifactStorePort", "LogRecordRepoPort"]
