"""
YAML snapshots of albums.

The text format is the album's primary persistence. A snapshot is a
readable, diffable export of the same content, written with PyYAML.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from album_catalog.constants import DEFAULT_ENCODING
from album_catalog.errors import AlbumIOError, CatalogValidationError, describe_error
from album_catalog.models.album import Album

logger = logging.getLogger(__name__)


def export_yaml(album: Album, path: Path | str, encoding: str = DEFAULT_ENCODING) -> Path:
    """
    Write an album snapshot.

    Args:
        album: The album to export
        path: Destination file
        encoding: Text encoding

    Returns:
        Path to the written file
    """
    path = Path(path)
    yaml_dict = album.to_yaml_dict()

    try:
        with open(path, "w", encoding=encoding) as f:
            yaml.safe_dump(
                yaml_dict, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )
    except OSError as e:
        raise AlbumIOError(f"Cannot write snapshot: {e.strerror or e}", path=path) from e

    logger.debug(f"Exported {len(album)} tracks to {path}")
    return path


def import_yaml(path: Path | str, encoding: str = DEFAULT_ENCODING) -> Album:
    """
    Read an album snapshot written by export_yaml.

    Raises:
        AlbumIOError: If the file cannot be read or does not hold an album
    """
    path = Path(path)

    try:
        with open(path, encoding=encoding) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise AlbumIOError(f"Cannot read snapshot: {e.strerror or e}", path=path) from e
    except yaml.YAMLError as e:
        raise AlbumIOError(f"Invalid YAML: {e}", path=path) from e

    if not isinstance(data, dict):
        raise AlbumIOError("Snapshot does not contain an album", path=path)

    try:
        return Album.from_yaml_dict(data)
    except (CatalogValidationError, ValidationError) as e:
        raise AlbumIOError(f"Invalid album snapshot: {describe_error(e)}", path=path) from e
