"""CLI utility functions."""

from pathlib import Path

import typer

from logdrop.domain.errors import ErrorClass, LogdropError
from logdrop.domain.value_objects.storage_config import StorageConfig

DEFAULT_ROOT_NAME = ".logdrop"
ROOT_ENVVAR = "LOGDROP_ROOT"

EXIT_CODES: dict[ErrorClass, int] = {
    ErrorClass.SERVER_ERROR: 1,
    ErrorClass.BAD_REQUEST: 2,
    ErrorClass.NOT_FOUND: 3,
}


def load_config(root: Path | None) -> StorageConfig:
    """Build storage config from the --root option, falling back to ./.logdrop."""
    return StorageConfig(root=root or Path.cwd() / DEFAULT_ROOT_NAME)


def exit_code_for(error: LogdropError) -> int:
    return EXIT_CODES[error.error_class]


def parse_tags(values: list[str]) -> dict[str, str] | None:
    """Turn repeated ``key=value`` options into a tag mapping.

    Args:
        values: Raw option values

    Returns:
        Mapping of tags, or None when no tags were given

    Raises:
        typer.BadParameter: If a value has no ``=``
    """
    if not values:
        return None
    tags: dict[str, str] = {}
    for value in values:
        key, sep, tag_value = value.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {value!r}", param_hint="--tag")
        tags[key] = tag_value
    return tags
