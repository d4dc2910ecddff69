from logdrop.application.dto import LogSubmission
from logdrop.application.use_cases import (
    DeleteLog,
    GetLog,
    IngestArtifact,
    ListLogs,
    RetrieveArtifact,
    SubmitLog,
    UpdateLogStatus,
)

__all__ = [
    "DeleteLog",
    "GetLog",
    "IngestArtifact",
    "ListLogs",
    "LogSubmission",
    "RetrieveArtifact",
    "SubmitLog",
    "UpdateLogStatus",
]
