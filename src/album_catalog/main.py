#!/usr/bin/env python3
"""
Entry point for the album catalog demo.

Builds a fixed sample album, exercises each album operation and reports
the results: print, sort by style, total duration, duration search, save
to the text format and reload.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from album_catalog.config import CatalogSettings, load_settings
from album_catalog.constants import ReportMessages
from album_catalog.errors import CompositionNotFoundError, describe_error
from album_catalog.models import Album, Composition

logger = logging.getLogger(__name__)


def build_sample_album() -> Album:
    """Build the fixed five-track sample album."""
    return Album(
        compositions=[
            Composition.rock("Numb", 185),
            Composition.pop("Blinding Lights", 200),
            Composition.jazz("Autumn Leaves", 240),
            Composition.pop("Levitating", 205),
            Composition.rock("In the End", 215),
        ]
    )


def _print_album(album: Album, out: TextIO) -> None:
    for line in album.format_tracks():
        print(line, file=out)


def run(settings: CatalogSettings, out: TextIO | None = None) -> Album:
    """
    Run the demo.

    Errors propagate to the caller. A search miss ends the run before
    anything is saved.

    Args:
        settings: Run settings
        out: Stream for the report (default: stdout)

    Returns:
        The album reloaded from disk
    """
    out = out or sys.stdout
    album = build_sample_album()

    print(ReportMessages.ALBUM_HEADER, file=out)
    _print_album(album, out)

    album.sort_by_style()
    print(f"\n{ReportMessages.SORTED_HEADER}", file=out)
    _print_album(album, out)

    print(
        "\n" + ReportMessages.TOTAL_DURATION.format(seconds=album.total_duration()),
        file=out,
    )

    min_seconds, max_seconds = settings.search_range
    print(
        "\n" + ReportMessages.SEARCHING.format(min_seconds=min_seconds, max_seconds=max_seconds),
        file=out,
    )
    found = album.find_by_duration(min_seconds, max_seconds)
    print(ReportMessages.FOUND.format(composition=found), file=out)

    path = album.save_to_file(settings.album_path, encoding=settings.encoding)
    print("\n" + ReportMessages.SAVED.format(path=path), file=out)

    loaded = Album.load_from_file(path, encoding=settings.encoding)
    print(f"\n{ReportMessages.LOADED_HEADER}", file=out)
    _print_album(loaded, out)

    return loaded


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser. Every flag is optional."""
    parser = argparse.ArgumentParser(description="Album catalog demo")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Album file to save and reload (default: album.txt)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status: 0 on success, 1 if an error was reported
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        settings = load_settings(args.config, overrides={"album_path": args.path})
        logging.getLogger().setLevel(logging.DEBUG if args.debug else settings.log_level)
        run(settings)
    except CompositionNotFoundError as e:
        logger.error(f"Search error: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Argument error: {describe_error(e)}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
