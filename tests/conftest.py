from datetime import UTC, datetime
from pathlib import Path

import pytest

from logdrop.domain.services.artifact_namer import ArtifactNamer
from logdrop.domain.services.path_sanitizer import PathSanitizer
from logdrop.domain.value_objects.storage_config import StorageConfig
from logdrop.infrastructure.persistence.artifact_store import FileArtifactStore

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
FIXED_MILLIS = 1704164645678


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / ".logdrop"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def storage_config(storage_root: Path) -> StorageConfig:
    return StorageConfig(root=storage_root)


@pytest.fixture
def sanitizer(storage_root: Path) -> PathSanitizer:
    return PathSanitizer(storage_root)


@pytest.fixture
def artifact_store(storage_config: StorageConfig, sanitizer: PathSanitizer) -> FileArtifactStore:
    return FileArtifactStore(storage_config, sanitizer)


@pytest.fixture
def fixed_namer() -> ArtifactNamer:
    return ArtifactNamer(clock=lambda: FIXED_NOW)
