from logdrop.domain.entities.log_record import LogRecord, NewLogRecord

__all__ = ["LogRecord", "NewLogRecord"]
