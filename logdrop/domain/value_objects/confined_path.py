from pathlib import Path

from pydantic import BaseModel, Field


class ConfinedPath(BaseModel, frozen=True):
    """A logical path that has been proven to resolve inside the storage root."""

    logical: str = Field(description="Normalized root-relative path")
    absolute: Path = Field(description="Canonical filesystem path inside the root")

    @property
    def name(self) -> str:
        return self.absolute.name

    @property
    def suffix(self) -> str:
        return self.absolute.suffix.lower()

    def __str__(self) -> str:
        return self.logical
