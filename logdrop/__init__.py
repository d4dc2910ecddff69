"""logdrop - device log submission with write-once artifact storage."""

__version__ = "0.1.0"
