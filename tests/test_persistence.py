"""
Tests for album persistence.

Tests cover:
- Escaping and record splitting
- Track count parsing
- Save and load in the text format, including error paths
- YAML snapshots
"""

from pathlib import Path

import pytest

from album_catalog.errors import AlbumIOError
from album_catalog.models import Album, Composition
from album_catalog.storage import (
    escape_title,
    iter_records,
    parse_track_count,
    render_album_text,
    split_record,
    unescape_title,
)
from album_catalog.storage.yaml_snapshot import export_yaml, import_yaml


class TestEscaping:
    """Tests for title escaping and record splitting."""

    def test_escape(self):
        """Only the separator is escaped."""
        assert escape_title("A|B|C") == "A\\|B\\|C"
        assert escape_title("plain") == "plain"

    def test_unescape(self):
        """Unescape reverses escape."""
        assert unescape_title("A\\|B") == "A|B"

    def test_split_plain(self):
        """Plain records split into three fields."""
        assert split_record("Numb|ROCK|185") == ["Numb", "ROCK", "185"]

    def test_split_keeps_escaped_separator(self):
        """Escaped separators do not split."""
        assert split_record("A\\|B|POP|60") == ["A\\|B", "POP", "60"]

    def test_split_keeps_extra_separators_in_title(self):
        """Only the last two separators split."""
        assert split_record("a|b|c|d") == ["a|b", "c", "d"]

    def test_split_title_ending_in_backslash(self):
        """A backslash before the real separator does not hide it."""
        assert split_record("C:\\|POP|200") == ["C:\\", "POP", "200"]

    def test_split_too_few_fields(self):
        """Records missing a field split short."""
        assert split_record("Numb|ROCK") == ["Numb", "ROCK"]


class TestTrackCount:
    """Tests for the count line."""

    def test_valid(self):
        """Positive integers are accepted, surrounding spaces ignored."""
        assert parse_track_count("5") == 5
        assert parse_track_count(" 3 ") == 3

    def test_missing(self):
        """No count line means an empty file."""
        with pytest.raises(AlbumIOError, match="File is empty"):
            parse_track_count(None)

    @pytest.mark.parametrize("line", ["0", "-2", "abc", "", "2.0"])
    def test_invalid(self, line):
        """Zero, negative and non-numeric counts are rejected."""
        with pytest.raises(AlbumIOError, match="Invalid track count"):
            parse_track_count(line)

    def test_render_text(self):
        """Rendered text starts with the count and ends with a newline."""
        text = render_album_text([Composition.pop("A", 1), Composition.jazz("B|C", 2)])
        assert text == "2\nA|POP|1\nB\\|C|JAZZ|2\n"

    def test_iter_records_ignores_trailing_lines(self):
        """Only the declared number of records is read."""
        records = list(iter_records(["1", "A|POP|1", "B|POP|2"]))
        assert records == [(2, ["A", "POP", "1"])]


class TestSaveLoad:
    """Tests for Album.save_to_file and Album.load_from_file."""

    def test_save_format(self, sample_album, album_path):
        """Saved file has the count line and one record per track."""
        sample_album.save_to_file(album_path)
        assert album_path.read_text(encoding="utf-8").splitlines() == [
            "5",
            "Numb|ROCK|185",
            "Blinding Lights|POP|200",
            "Autumn Leaves|JAZZ|240",
            "Levitating|POP|205",
            "In the End|ROCK|215",
        ]

    def test_save_returns_path(self, sample_album, album_path):
        """save_to_file returns the written path."""
        assert sample_album.save_to_file(str(album_path)) == album_path

    def test_round_trip(self, sample_album, album_path):
        """Loading a saved album gives the same ordered tracks."""
        sample_album.save_to_file(album_path)
        loaded = Album.load_from_file(album_path)
        assert list(loaded) == list(sample_album)

    def test_round_trip_after_sort(self, sample_album, album_path):
        """Saving uses the current order."""
        sample_album.sort_by_style()
        sample_album.save_to_file(album_path)
        loaded = Album.load_from_file(album_path)
        assert [t.title for t in loaded] == [t.title for t in sample_album]

    def test_round_trip_escaped_titles(self, album_path):
        """Titles with separators and non-ASCII text survive."""
        album = Album(
            compositions=[
                Composition.pop("Left|Right", 100),
                Composition.jazz("Café Müller", 300),
                Composition.rock("|||", 50),
            ]
        )
        album.save_to_file(album_path)
        assert list(Album.load_from_file(album_path)) == list(album)

    @pytest.mark.parametrize("title", ["C:\\", "a\\|b", "x|", "\\", "\\|\\"])
    def test_round_trip_backslash_titles(self, album_path, title):
        """Titles with backslashes next to separators survive."""
        album = Album(compositions=[Composition.pop(title, 200), Composition.rock("Next", 10)])
        album.save_to_file(album_path)
        assert list(Album.load_from_file(album_path)) == list(album)

    @pytest.mark.parametrize("title", ["two\nlines", "carriage\rreturn"])
    def test_save_rejects_line_breaks(self, album_path, title):
        """Titles with line breaks cannot be written and nothing is saved."""
        album = Album(compositions=[Composition.jazz(title, 60)])
        with pytest.raises(AlbumIOError, match="cannot contain line breaks"):
            album.save_to_file(album_path)
        assert not album_path.exists()

    def test_save_to_missing_directory(self, sample_album, temp_dir):
        """Write failures raise AlbumIOError."""
        with pytest.raises(AlbumIOError, match="Cannot write album"):
            sample_album.save_to_file(temp_dir / "missing" / "album.txt")

    def test_load_missing_file(self, temp_dir):
        """Missing files raise AlbumIOError."""
        with pytest.raises(AlbumIOError, match="Cannot read album"):
            Album.load_from_file(temp_dir / "nope.txt")

    def test_load_empty_file(self, album_path):
        """Empty files raise AlbumIOError."""
        album_path.write_text("", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="File is empty"):
            Album.load_from_file(album_path)

    @pytest.mark.parametrize("count", ["0", "-1", "three"])
    def test_load_bad_count(self, album_path, count):
        """Zero, negative and unparsable counts raise AlbumIOError."""
        album_path.write_text(f"{count}\nNumb|ROCK|185\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="Invalid track count"):
            Album.load_from_file(album_path)

    def test_load_truncated(self, album_path):
        """Fewer records than declared raises AlbumIOError."""
        album_path.write_text("3\nNumb|ROCK|185\nLevitating|POP|205\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="Unexpected end of file"):
            Album.load_from_file(album_path)

    def test_load_count_without_trailing_newline(self, album_path):
        """The last record does not need a newline."""
        album_path.write_text("1\nNumb|ROCK|185", encoding="utf-8")
        assert Album.load_from_file(album_path)[0] == Composition.rock("Numb", 185)

    def test_load_windows_line_endings(self, album_path):
        """CRLF files load like LF files."""
        album_path.write_bytes(b"1\r\nNumb|ROCK|185\r\n")
        assert Album.load_from_file(album_path)[0] == Composition.rock("Numb", 185)

    @pytest.mark.parametrize(
        ("line", "reason"),
        [
            ("Numb|ROCK", "Invalid serialized composition format"),
            ("Numb|rock|185", "Unknown style"),
            ("Numb|ROCK|long", "Invalid duration"),
            ("Numb|ROCK|0", "Duration must be positive"),
            (" |ROCK|10", "Title must be non-empty"),
        ],
    )
    def test_load_bad_record(self, album_path, line, reason):
        """Undecodable records raise AlbumIOError naming the line."""
        album_path.write_text(f"2\nOK|POP|10\n{line}\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match=reason) as exc_info:
            Album.load_from_file(album_path)
        assert "Line 3" in str(exc_info.value)
        assert exc_info.value.path == album_path

    def test_load_invalid_encoding(self, album_path):
        """Bytes that are not UTF-8 raise AlbumIOError."""
        album_path.write_bytes(b"1\n\xff\xfe|POP|10\n")
        with pytest.raises(AlbumIOError, match="Cannot decode"):
            Album.load_from_file(album_path)

    def test_io_error_is_os_error(self, temp_dir):
        """AlbumIOError can be handled as an OSError."""
        with pytest.raises(OSError):
            Album.load_from_file(temp_dir / "nope.txt")


class TestYamlSnapshot:
    """Tests for YAML export and import."""

    def test_round_trip(self, sample_album, temp_dir):
        """Exported snapshots import to the same album."""
        path = export_yaml(sample_album, temp_dir / "album.yaml")
        assert list(import_yaml(path)) == list(sample_album)

    def test_snapshot_content(self, sample_album, temp_dir):
        """Snapshots carry schema, total and tracks."""
        path = export_yaml(sample_album, temp_dir / "album.yaml")
        text = path.read_text(encoding="utf-8")
        assert "schema: album/v1" in text
        assert "total_duration: 1045" in text
        assert "style: JAZZ" in text

    def test_not_a_mapping(self, temp_dir):
        """Snapshots must hold a mapping."""
        path = temp_dir / "album.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="does not contain an album"):
            import_yaml(path)

    def test_empty_track_list(self, temp_dir):
        """An empty album is still invalid."""
        path = temp_dir / "album.yaml"
        path.write_text("schema: album/v1\ntracks: []\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="at least one composition"):
            import_yaml(path)

    def test_unknown_schema(self, temp_dir):
        """Other schema versions are rejected."""
        path = temp_dir / "album.yaml"
        path.write_text("schema: album/v2\ntracks: []\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="Unsupported album schema"):
            import_yaml(path)

    def test_invalid_yaml(self, temp_dir):
        """Malformed YAML raises AlbumIOError."""
        path = temp_dir / "album.yaml"
        path.write_text("tracks: [unclosed\n", encoding="utf-8")
        with pytest.raises(AlbumIOError, match="Invalid YAML"):
            import_yaml(path)

    def test_missing_file(self, temp_dir):
        """Missing snapshots raise AlbumIOError."""
        with pytest.raises(AlbumIOError):
            import_yaml(Path(temp_dir) / "missing.yaml")
