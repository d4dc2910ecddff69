from logdrop.application.use_cases.delete_log import DeleteLog
from logdrop.application.use_cases.get_log import GetLog
from logdrop.application.use_cases.ingest_artifact import IngestArtifact
from logdrop.application.use_cases.list_logs import ListLogs
from logdrop.application.use_cases.retrieve_artifact import RetrieveArtifact
from logdrop.application.use_cases.submit_log import SubmitLog
from logdrop.application.use_cases.update_log_status import UpdateLogStatus

__all__ = [
    "DeleteLog",
    "GetLog",
    "IngestArtifact",
    "ListLogs",
    "RetrieveArtifact",
    "SubmitLog",
    "UpdateLogStatus",
]
