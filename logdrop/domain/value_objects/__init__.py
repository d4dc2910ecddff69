from logdrop.domain.value_objects.confined_path import ConfinedPath
from logdrop.domain.value_objects.log_filter import LogFilter
from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus
from logdrop.domain.value_objects.storage_config import StorageConfig

__all__ = [
    "ConfinedPath",
    "LogFilter",
    "LogLevel",
    "LogStatus",
    "StorageConfig",
]
