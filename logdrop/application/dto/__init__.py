from logdrop.application.dto.log_submission import LogSubmission

__all__ = ["LogSubmission"]
