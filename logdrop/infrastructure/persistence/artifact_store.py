from __future__ import annotations

import asyncio

import aiofiles
from loguru import logger

from logdrop.domain.errors import (
    ArtifactExistsError,
    ArtifactNotFoundError,
    InvalidPathError,
    StoreWriteError,
)
from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.services.path_sanitizer import PathSanitizer
from logdrop.domain.value_objects.confined_path import ConfinedPath
from logdrop.domain.value_objects.storage_config import StorageConfig
from logdrop.infrastructure.persistence.atomic_io import atomic_write


class FileArtifactStore(ArtifactStorePort):
    """Write-once artifact storage on the local filesystem.

    Logical paths are root-relative, but only files inside the upload area
    count as artifacts. Anything else under the root (the record store in
    particular) is never read, written or removed through this store.
    """

    def __init__(self, config: StorageConfig, sanitizer: PathSanitizer | None = None) -> None:
        self.config = config
        self.sanitizer = sanitizer or PathSanitizer(config.root)

    def _in_artifact_area(self, path: ConfinedPath) -> bool:
        area = self.config.upload_path
        return path.absolute != area and path.absolute.is_relative_to(area)

    async def put(self, filename: str, data: bytes) -> str:
        """Write bytes to ``filename`` (root-relative) and return its logical path.

        The file only becomes visible once fully written and synced.
        """
        target = self.sanitizer.sanitize(filename)
        if not self._in_artifact_area(target):
            logger.warning("Refusing to store {} outside the upload area", target.logical)
            raise InvalidPathError(filename, "outside the upload area")

        try:
            await atomic_write(target.absolute, data, exclusive=True)
        except FileExistsError as e:
            logger.warning("Artifact already exists, refusing to overwrite: {}", target.logical)
            raise ArtifactExistsError(target.logical) from e
        except OSError as e:
            logger.error("Failed to write artifact {}: {}", target.logical, e)
            raise StoreWriteError(target.logical, e.strerror or str(e)) from e

        logger.info("Stored artifact {} ({} bytes)", target.logical, len(data))
        return target.logical

    async def get(self, path: ConfinedPath) -> bytes:
        if not self._in_artifact_area(path):
            logger.warning("Read outside the upload area refused: {}", path.logical)
            raise ArtifactNotFoundError(path.logical)

        if not await asyncio.to_thread(path.absolute.is_file):
            logger.debug("Artifact not found: {}", path.logical)
            raise ArtifactNotFoundError(path.logical)

        try:
            async with aiofiles.open(path.absolute, mode="rb") as f:
                return await f.read()
        except (FileNotFoundError, IsADirectoryError) as e:
            # Removed between the check and the open
            raise ArtifactNotFoundError(path.logical) from e

    async def delete(self, path: ConfinedPath) -> bool:
        """Remove an artifact; deleting an absent artifact is not an error."""
        if not self._in_artifact_area(path):
            logger.warning("Delete outside the upload area refused: {}", path.logical)
            raise ArtifactNotFoundError(path.logical)
        if await asyncio.to_thread(path.absolute.is_dir):
            raise ArtifactNotFoundError(path.logical)

        try:
            await asyncio.to_thread(path.absolute.unlink)
        except FileNotFoundError:
            logger.debug("Artifact already absent: {}", path.logical)
            return False

        logger.info("Deleted artifact {}", path.logical)
        return True
