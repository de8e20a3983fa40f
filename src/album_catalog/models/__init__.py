"""
Pydantic models for the album catalog.

This module provides:
- MusicStyle: Style tag (pop, rock, jazz) with its sort order
- Composition: A single track
- Album: Ordered, non-empty collection of tracks
- StyleSummary: Per-style aggregate of an album
"""

from album_catalog.models.album import Album, StyleSummary
from album_catalog.models.composition import Composition, MusicStyle

__all__ = [
    "Album",
    "Composition",
    "MusicStyle",
    "StyleSummary",
]
