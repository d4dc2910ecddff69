"""Domain services."""

from logdrop.domain.services.artifact_namer import ArtifactNamer
from logdrop.domain.services.decompression_reader import DecompressionReader
from logdrop.domain.services.path_sanitizer import PathSanitizer

__all__ = [
    "ArtifactNamer",
    "DecompressionReader",
    "PathSanitizer",
]
