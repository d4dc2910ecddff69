from pathlib import Path

from loguru import logger

from logdrop.domain.errors import InvalidPathError
from logdrop.domain.value_objects.confined_path import ConfinedPath

PARENT_SEGMENT = ".."


class PathSanitizer:
    """Turns untrusted logical paths into paths confined to the storage root.

    Parent-directory segments are rejected outright rather than stripped, and
    the joined path is canonicalized and checked against the root before any
    caller is allowed to touch the filesystem.
    """

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()

    def sanitize(self, requested: str) -> ConfinedPath:
        """Validate a caller-supplied logical path.

        Raises:
            InvalidPathError: If the path is empty, contains a ``..`` segment,
                or resolves outside the storage root.
        """
        if not requested or not requested.strip():
            raise self._reject(requested or "", "empty path")
        if "\x00" in requested:
            raise self._reject(requested, "NUL byte in path")

        segments: list[str] = []
        for segment in requested.replace("\\", "/").lstrip("/").split("/"):
            if segment == PARENT_SEGMENT:
                raise self._reject(requested, "parent directory segment")
            if segment in ("", "."):
                continue
            segments.append(segment)

        if not segments:
            raise self._reject(requested, "path has no components")

        logical = "/".join(segments)
        absolute = (self.root / logical).resolve()

        # Symlinks under the root can still point elsewhere
        if absolute == self.root or not absolute.is_relative_to(self.root):
            raise self._reject(requested, "resolves outside storage root")

        return ConfinedPath(logical=logical, absolute=absolute)

    def _reject(self, requested: str, reason: str) -> InvalidPathError:
        logger.warning("Rejected path {!r}: {}", requested, reason)
        return InvalidPathError(requested, reason)
