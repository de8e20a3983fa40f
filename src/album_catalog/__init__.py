"""
Album catalog - typed compositions, album aggregates and a text file format.

Compositions carry a title, a duration and a style (pop, rock or jazz).
Albums group compositions and offer totals, style sorting, duration search
and persistence in a line-oriented, pipe-delimited text format.
"""

from album_catalog.errors import (
    AlbumCatalogError,
    AlbumIOError,
    CatalogValidationError,
    CompositionNotFoundError,
)
from album_catalog.models import Album, Composition, MusicStyle, StyleSummary

__version__ = "0.1.0"

__all__ = [
    "Album",
    "AlbumCatalogError",
    "AlbumIOError",
    "CatalogValidationError",
    "Composition",
    "CompositionNotFoundError",
    "MusicStyle",
    "StyleSummary",
]
