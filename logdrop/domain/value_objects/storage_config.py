from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024


class StorageConfig(BaseModel, frozen=True):
    """Storage settings injected into stores and handlers at construction."""

    root: Path = Field(description="Storage root; every artifact and record lives below it")
    upload_dir: str = Field(default="uploads", description="Artifact directory under root")
    records_dir: str = Field(default="records", description="Record directory under root")

    # Ingestion
    max_name_attempts: int = Field(default=5, ge=1)
    max_upload_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, gt=0)

    # Retrieval
    max_decoded_bytes: int | None = Field(
        default=None, gt=0, description="Cap on decompressed output (None = unbounded)"
    )

    @field_validator("root", mode="before")
    @classmethod
    def resolve_root(cls, v: Path | str) -> Path:
        """Store the root as an absolute, canonical path."""
        path = Path(v) if isinstance(v, str) else v
        return path.expanduser().resolve()

    @field_validator("upload_dir", "records_dir")
    @classmethod
    def validate_subdir(cls, v: str) -> str:
        if not v or v in (".", "..") or "/" in v or "\\" in v:
            raise ValueError(f"Must be a single directory name: {v!r}")
        return v

    @property
    def upload_path(self) -> Path:
        return self.root / self.upload_dir

    @property
    def records_path(self) -> Path:
        return self.root / self.records_dir
