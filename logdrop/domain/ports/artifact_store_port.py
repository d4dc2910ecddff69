from abc import ABC, abstractmethod

from logdrop.domain.value_objects.confined_path import ConfinedPath


class ArtifactStorePort(ABC):
    """Port for write-once artifact storage addressed by logical path."""

    @abstractmethod
    async def put(self, filename: str, data: bytes) -> str:
        """Persist bytes under ``filename`` and return its logical path.

        Never overwrites: raises ArtifactExistsError if the name is taken.
        """

    @abstractmethod
    async def get(self, path: ConfinedPath) -> bytes:
        """Load artifact bytes. Raises ArtifactNotFoundError if absent."""

    @abstractmethod
    async def delete(self, path: ConfinedPath) -> bool:
        """Remove an artifact. Returns False if it was already absent."""
