from enum import Enum


class LogStatus(str, Enum):
    # Operators move records between these freely; no ordering is enforced.
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
