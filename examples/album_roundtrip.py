#!/usr/bin/env python3
"""
Example: Album Round-Trip Workflow.

Usage:
    python examples/album_roundtrip.py

This example shows:
1. Building an album, including a title that contains the separator
2. Saving it in the text format and reading it back
3. Summarizing the album by style
4. Exporting a YAML snapshot and importing it again
"""

from pathlib import Path

from album_catalog.models import Album, Composition
from album_catalog.storage.yaml_snapshot import export_yaml, import_yaml


def main() -> None:
    """Demonstrate text and YAML round trips."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Album Catalog Round-Trip Demo")
    print("=" * 50)
    print()

    album = Album(
        compositions=[
            Composition.jazz("So What", 562),
            Composition.rock("Paranoid | Live", 171),
            Composition.pop("Dancing Queen", 231),
            Composition.jazz("Take Five", 324),
        ]
    )

    # 1. Text format
    print("1. Saving to the text format...")
    text_path = album.save_to_file(output_dir / "demo_album.txt")
    print(text_path.read_text(encoding="utf-8"))

    loaded = Album.load_from_file(text_path)
    print(f"   Reloaded {len(loaded)} tracks, identical: {list(loaded) == list(album)}")
    print()

    # 2. Style summary
    print("2. Tracks per style:")
    for summary in album.styles_summary():
        print(
            f"   {summary.style.label:<5} {summary.track_count} tracks, "
            f"{summary.total_seconds} sec"
        )
    print()

    # 3. YAML snapshot
    print("3. Exporting YAML snapshot...")
    yaml_path = export_yaml(album, output_dir / "demo_album.yaml")
    print(yaml_path.read_text(encoding="utf-8"))

    restored = import_yaml(yaml_path)
    print(f"   Restored {len(restored)} tracks, identical: {list(restored) == list(album)}")


if __name__ == "__main__":
    main()
