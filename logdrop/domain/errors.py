from enum import Enum


class ErrorClass(str, Enum):
    """How a failure should be reported at the boundary."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"


class LogdropError(Exception):
    """Base class for all typed failures raised by logdrop."""

    error_class: ErrorClass = ErrorClass.SERVER_ERROR


class InvalidPathError(LogdropError):
    """Raised when a logical path is malformed or escapes the storage root."""

    error_class = ErrorClass.BAD_REQUEST

    def __init__(self, requested: str, reason: str) -> None:
        self.requested = requested
        self.reason = reason
        super().__init__(f"Invalid path {requested!r}: {reason}")


class InvalidSubmissionError(LogdropError):
    """Raised when a log submission is missing required data."""

    error_class = ErrorClass.BAD_REQUEST


class ArtifactNotFoundError(LogdropError):
    """Raised when a logical path does not resolve to a stored artifact."""

    error_class = ErrorClass.NOT_FOUND

    def __init__(self, logical_path: str) -> None:
        self.logical_path = logical_path
        super().__init__(f"Artifact not found: {logical_path}")


class LogRecordNotFoundError(LogdropError):
    error_class = ErrorClass.NOT_FOUND

    def __init__(self, record_id: int) -> None:
        self.record_id = record_id
        super().__init__(f"Log record not found: {record_id}")


class StoreWriteError(LogdropError):
    """Raised when artifact bytes could not be persisted."""

    error_class = ErrorClass.SERVER_ERROR

    def __init__(self, logical_path: str, message: str) -> None:
        self.logical_path = logical_path
        super().__init__(f"Failed to store {logical_path}: {message}")


class ArtifactExistsError(StoreWriteError):
    """Raised when an artifact already exists under the requested name."""

    def __init__(self, logical_path: str) -> None:
        super().__init__(logical_path, "artifact already exists")


class DecodeFailureError(LogdropError):
    """Raised when a stored artifact cannot be decoded to text."""

    error_class = ErrorClass.SERVER_ERROR

    def __init__(self, logical_path: str, message: str) -> None:
        self.logical_path = logical_path
        super().__init__(f"Failed to decode {logical_path}: {message}")
