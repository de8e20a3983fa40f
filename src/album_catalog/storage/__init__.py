"""
Album persistence.

This module provides:
- text_format: the pipe-delimited album file codec
- yaml_snapshot: YAML export/import of albums (import it directly, it
  depends on the model layer)
"""

from album_catalog.storage.text_format import (
    escape_title,
    iter_records,
    parse_track_count,
    render_album_text,
    split_record,
    unescape_title,
)

__all__ = [
    "escape_title",
    "iter_records",
    "parse_track_count",
    "render_album_text",
    "split_record",
    "unescape_title",
]
