"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""

from logdrop.domain.value_objects.log_level import LogLevel
from logdrop.domain.value_objects.log_status import LogStatus


class Theme:
    """Terminal color theme for logdrop CLI."""

    # -------------------------------------------------------------------------
    # Status colors (for success/error/warning indicators)
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    INFO = "cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    DIM = "grey62"

    # -------------------------------------------------------------------------
    # Log levels
    # -------------------------------------------------------------------------
    LEVEL_DEBUG = "grey62"
    LEVEL_INFO = "cyan"
    LEVEL_WARN = "yellow"
    LEVEL_ERROR = "bold red"

    # -------------------------------------------------------------------------
    # Record status
    # -------------------------------------------------------------------------
    STATUS_PENDING = "grey62"
    STATUS_PROCESSING = "bold yellow"
    STATUS_COMPLETED = "bold green"
    STATUS_FAILED = "bold red"

    def level_style(self, level: LogLevel) -> str:
        match level:
            case LogLevel.DEBUG:
                return self.LEVEL_DEBUG
            case LogLevel.INFO:
                return self.LEVEL_INFO
            case LogLevel.WARN:
                return self.LEVEL_WARN
            case _:
                return self.LEVEL_ERROR

    def status_style(self, status: LogStatus) -> str:
        return {
            LogStatus.PENDING: self.STATUS_PENDING,
            LogStatus.PROCESSING: self.STATUS_PROCESSING,
            LogStatus.COMPLETED: self.STATUS_COMPLETED,
            LogStatus.FAILED: self.STATUS_FAILED,
        }[status]


theme = Theme()
