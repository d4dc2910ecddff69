import bz2
import gzip
import io
import lzma
import zlib
from collections.abc import Callable
from typing import IO

from loguru import logger

from logdrop.domain.errors import DecodeFailureError
from logdrop.domain.value_objects.confined_path import ConfinedPath

# suffix -> (envelope name, opener over an in-memory stream)
ENVELOPES: dict[str, tuple[str, Callable[[IO[bytes]], IO[bytes]]]] = {
    ".gz": ("gzip", lambda fileobj: gzip.GzipFile(fileobj=fileobj, mode="rb")),
    ".bz2": ("bzip2", lambda fileobj: bz2.BZ2File(fileobj, mode="rb")),
    ".xz": ("xz", lambda fileobj: lzma.LZMAFile(fileobj, mode="rb")),
}

_STREAM_ERRORS = (OSError, EOFError, lzma.LZMAError, zlib.error)


def is_compressed(path: ConfinedPath) -> bool:
    return path.suffix in ENVELOPES


class DecompressionReader:
    """Decodes artifact bytes to text, unwrapping compression by filename suffix.

    Detection never sniffs content: a ``.gz`` name over non-gzip bytes is a
    decode failure, not plain text.
    """

    def __init__(self, max_decoded_bytes: int | None = None) -> None:
        self.max_decoded_bytes = max_decoded_bytes

    def decode(self, path: ConfinedPath, data: bytes) -> str:
        """Return the text content of an artifact.

        Raises:
            DecodeFailureError: If the envelope is corrupt or truncated, the
                output exceeds ``max_decoded_bytes``, or the payload is not
                valid UTF-8.
        """
        envelope = ENVELOPES.get(path.suffix)
        raw = data if envelope is None else self._decompress(path, data, *envelope)

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Artifact {} is not valid UTF-8: {}", path.logical, e)
            raise DecodeFailureError(path.logical, f"invalid UTF-8 at byte {e.start}") from e

    def _decompress(
        self,
        path: ConfinedPath,
        data: bytes,
        envelope: str,
        opener: Callable[[IO[bytes]], IO[bytes]],
    ) -> bytes:
        if not data:
            raise DecodeFailureError(path.logical, f"empty {envelope} stream")

        limit = self.max_decoded_bytes
        try:
            with opener(io.BytesIO(data)) as stream:
                raw = stream.read() if limit is None else stream.read(limit + 1)
        except _STREAM_ERRORS as e:
            logger.warning("Failed to decompress {} as {}: {}", path.logical, envelope, e)
            raise DecodeFailureError(path.logical, f"corrupt {envelope} stream: {e}") from e

        if limit is not None and len(raw) > limit:
            raise DecodeFailureError(
                path.logical, f"decompressed size exceeds limit of {limit} bytes"
            )

        logger.debug("Decompressed {} ({} -> {} bytes)", path.logical, len(data), len(raw))
        return raw
