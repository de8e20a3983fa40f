"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from album_catalog.models import Album, Composition


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def album_path(temp_dir: Path) -> Path:
    """Path for a temporary album file."""
    return temp_dir / "album.txt"


@pytest.fixture
def sample_album() -> Album:
    """The five-track album used throughout the examples."""
    return Album(
        compositions=[
            Composition.rock("Numb", 185),
            Composition.pop("Blinding Lights", 200),
            Composition.jazz("Autumn Leaves", 240),
            Composition.pop("Levitating", 205),
            Composition.rock("In the End", 215),
        ]
    )
