from loguru import logger

from logdrop.domain.ports.artifact_store_port import ArtifactStorePort
from logdrop.domain.services.decompression_reader import DecompressionReader
from logdrop.domain.services.path_sanitizer import PathSanitizer


class RetrieveArtifact:
    def __init__(
        self,
        sanitizer: PathSanitizer,
        store: ArtifactStorePort,
        reader: DecompressionReader,
    ) -> None:
        self.sanitizer = sanitizer
        self.store = store
        self.reader = reader

    async def execute(self, requested_path: str) -> str:
        """Resolve a logical path to the artifact's text content.

        Raises InvalidPathError (bad request), ArtifactNotFoundError (not
        found) or DecodeFailureError (server error). Nothing is cached.
        """
        path = self.sanitizer.sanitize(requested_path)
        data = await self.store.get(path)
        content = self.reader.decode(path, data)
        logger.debug("Retrieved {} ({} chars)", path.logical, len(content))
        return content
