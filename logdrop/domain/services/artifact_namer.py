import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

FALLBACK_EXTENSION = "bin"
FALLBACK_DEVICE_ID = "device"
MAX_DEVICE_ID_LENGTH = 64

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MIME_EXTENSIONS: dict[str, str] = {
    # Compressed envelopes
    "application/gzip": "gz",
    "application/x-gzip": "gz",
    "application/x-bzip2": "bz2",
    "application/x-xz": "xz",
    # Archives
    "application/zip": "zip",
    "application/x-tar": "tar",
    # Text
    "text/plain": "txt",
    "text/csv": "csv",
    "text/html": "html",
    "text/xml": "xml",
    "application/xml": "xml",
    "application/json": "json",
    # Other
    "application/pdf": "pdf",
    "image/png": "png",
    "image/jpeg": "jpeg",
    "application/octet-stream": "bin",
}

_UNSAFE_DEVICE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def extension_for(declared_type: str | None) -> str:
    """Map a MIME-style content type to a file extension (``bin`` if unknown)."""
    if not declared_type:
        return FALLBACK_EXTENSION
    mime = declared_type.split(";", 1)[0].strip().lower()
    return MIME_EXTENSIONS.get(mime, FALLBACK_EXTENSION)


def safe_device_id(device_id: str) -> str:
    """Reduce a device identifier to a single safe filename component."""
    cleaned = _UNSAFE_DEVICE_CHARS.sub("_", device_id).lstrip(".")
    return cleaned[:MAX_DEVICE_ID_LENGTH] or FALLBACK_DEVICE_ID


def to_millis(timestamp: datetime) -> int:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return (timestamp - EPOCH) // timedelta(milliseconds=1)


class ArtifactNamer:
    """Derives ``{device}_{millis}.{ext}`` artifact filenames.

    Names are only unique to the millisecond. Callers that hit an existing
    artifact ask again with a higher ``attempt``, which adds a ``-{attempt}``
    suffix before the extension.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    def now(self) -> datetime:
        return self._clock()

    def name(
        self,
        device_id: str,
        declared_type: str | None = None,
        timestamp: datetime | None = None,
        attempt: int = 0,
    ) -> str:
        millis = to_millis(timestamp or self._clock())
        stem = f"{safe_device_id(device_id)}_{millis}"
        if attempt > 0:
            stem = f"{stem}-{attempt}"
        return f"{stem}.{extension_for(declared_type)}"
