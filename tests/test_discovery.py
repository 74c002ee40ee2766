"""Tests for the discovery engine."""

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filemover.core import DiscoveryError, MoveSpec, SourceNotADirectoryError
from filemover.discovery import infer_date_segments, plan_moves, resolve_dated_destination
from filemover.mover import EntryStat


def fake_filesystem(tree: dict[Path, list[str]]) -> MagicMock:
    """Filesystem where keys of ``tree`` are directories and everything else a file."""
    fs = MagicMock()
    fs.list_directory.side_effect = lambda path: tree[path]
    fs.stat_entry.side_effect = lambda path: EntryStat(
        is_directory=path in tree, is_file=path not in tree
    )
    return fs


class TestInferDateSegments:
    """Tests for year/month inference."""

    def test_year_and_month(self):
        """Test a path with both a year and a month folder."""
        assert infer_date_segments(Path("/data/2023/07/clip.mp4")) == ("2023", "07")

    def test_no_digit_segments(self):
        """Test a path without any digit folders."""
        assert infer_date_segments(Path("/data/misc/clip.mp4")) == (None, None)

    def test_month_without_year(self):
        """Test that month is inferred even when no year folder exists."""
        assert infer_date_segments(Path("/data/07/clip.mp4")) == (None, "07")

    def test_first_segments_win(self):
        """Test that the first matching folders are used."""
        assert infer_date_segments(Path("/2019/01/2023/07/clip.mp4")) == ("2019", "01")

    def test_segments_must_be_whole(self):
        """Test that digits embedded in a folder name are ignored."""
        assert infer_date_segments(Path("/2020-backup/photos 07/clip.mp4")) == (None, None)

    def test_file_name_ignored(self):
        """Test that a digit-only file name is not treated as a segment."""
        assert infer_date_segments(Path("/data/2023.mp4")) == (None, None)

    def test_values_not_range_checked(self):
        """Test that inference is not validated against the calendar."""
        assert infer_date_segments(Path("/9999/42/clip.mp4")) == ("9999", "42")


class TestResolveDatedDestination:
    """Tests for dated destination paths."""

    def test_year_month_layout(self):
        """Test destination with year and month."""
        result = resolve_dated_destination(Path("/src/2023/07/clip.mp4"), Path("/dest"))
        assert result == Path("/dest/2023/07/clip.mp4")

    def test_without_digit_folders(self):
        """Test destination without digit folders lands in the root."""
        result = resolve_dated_destination(Path("/src/misc/clip.mp4"), Path("/dest"))
        assert result == Path("/dest/clip.mp4")

    def test_year_only(self):
        """Test destination with only a year folder."""
        result = resolve_dated_destination(Path("/src/2021/party/clip.mp4"), Path("/dest"))
        assert result == Path("/dest/2021/clip.mp4")


class TestFlatDiscovery:
    """Tests for flat-mode discovery."""

    @pytest.fixture
    def source(self, tmp_path):
        """Create a source folder with mixed content."""
        source = tmp_path / "source"
        source.mkdir()
        (source / "a.jpg").write_text("a")
        (source / "b.jpg").write_text("b")
        (source / "c.png").write_text("c")
        (source / "upper.JPG").write_text("upper")
        (source / "partial.jpg.bak").write_text("partial")
        nested = source / "nested"
        nested.mkdir()
        (nested / "deep.jpg").write_text("deep")
        return source

    def test_matches_immediate_children_only(self, source, tmp_path):
        """Test that only direct children ending with the suffix are planned."""
        spec = MoveSpec(source_root=source, destination_root=tmp_path / "dest", extension=".jpg")

        plan = plan_moves(spec)

        assert {move.source_path.name for move in plan} == {"a.jpg", "b.jpg"}

    def test_keeps_listing_order(self, source, tmp_path):
        """Test that the plan follows the directory listing order."""
        spec = MoveSpec(source_root=source, destination_root=tmp_path / "dest", extension=".jpg")

        plan = plan_moves(spec)

        expected = [name for name in os.listdir(source) if name.endswith(".jpg")]
        assert [move.source_path.name for move in plan] == expected

    def test_destination_is_root_plus_name(self, source, tmp_path):
        """Test that flat destinations sit directly in the destination root."""
        dest = tmp_path / "dest"
        spec = MoveSpec(source_root=source, destination_root=dest, extension=".png")

        plan = plan_moves(spec)

        assert [(m.source_path, m.destination_path) for m in plan] == [
            (source / "c.png", dest / "c.png")
        ]

    def test_order_from_filesystem_listing(self):
        """Test ordering against an injected listing."""
        root = Path("/src")
        fs = fake_filesystem({root: ["z.jpg", "a.jpg", "m.txt", "b.jpg"]})
        spec = MoveSpec(source_root=root, destination_root="/dest", extension=".jpg")

        plan = plan_moves(spec, filesystem=fs)

        assert [m.source_path.name for m in plan] == ["z.jpg", "a.jpg", "b.jpg"]
        fs.list_directory.assert_called_once_with(root)

    def test_no_match_gives_empty_plan(self, source, tmp_path):
        """Test that no matching file yields an empty plan."""
        spec = MoveSpec(source_root=source, destination_root=tmp_path / "dest", extension=".gif")
        assert len(plan_moves(spec)) == 0

    def test_source_missing(self, tmp_path):
        """Test that a missing source root is reported."""
        spec = MoveSpec(
            source_root=tmp_path / "missing", destination_root=tmp_path / "dest", extension=".jpg"
        )
        with pytest.raises(SourceNotADirectoryError):
            plan_moves(spec)

    def test_source_is_a_file(self, tmp_path):
        """Test that a file as source root is reported."""
        source = tmp_path / "file.jpg"
        source.write_text("x")
        spec = MoveSpec(source_root=source, destination_root=tmp_path / "dest", extension=".jpg")

        with pytest.raises(SourceNotADirectoryError):
            plan_moves(spec)

    def test_listing_failure(self):
        """Test that an unreadable source root raises DiscoveryError."""
        fs = MagicMock()
        fs.stat_entry.return_value = EntryStat(is_directory=True, is_file=False)
        fs.list_directory.side_effect = PermissionError("denied")
        spec = MoveSpec(source_root="/src", destination_root="/dest", extension=".jpg")

        with pytest.raises(DiscoveryError) as exc_info:
            plan_moves(spec, filesystem=fs)

        assert isinstance(exc_info.value.error, PermissionError)


class TestDateDiscovery:
    """Tests for date-partitioned discovery."""

    @pytest.fixture
    def source(self, tmp_path):
        """Create a source tree with dated and undated folders."""
        source = tmp_path / "source"
        (source / "2023" / "07").mkdir(parents=True)
        (source / "2023" / "07" / "clip.mp4").write_text("july")
        (source / "2023" / "07" / "photo.jpg").write_text("photo")
        (source / "misc").mkdir()
        (source / "misc" / "other.mp4").write_text("misc")
        (source / "2023" / "07" / "@eaDir").mkdir()
        (source / "2023" / "07" / "@eaDir" / "thumb.mp4").write_text("sidecar")
        (source / "@snapshot.mp4").write_text("hidden")
        (source / "LOUD.MP4").write_text("upper")
        (source / "clip.mp4.part").write_text("partial")
        return source

    def spec(self, source, dest, extension="mp4", **kwargs):
        return MoveSpec(
            source_root=source, destination_root=dest, extension=extension, date_mode=True, **kwargs
        )

    def test_dated_and_undated_destinations(self, source, tmp_path):
        """Test year/month inference and fallback to the destination root."""
        dest = tmp_path / "dest"

        plan = plan_moves(self.spec(source, dest))

        mapping = {m.source_path: m.destination_path for m in plan}
        assert mapping == {
            source / "2023" / "07" / "clip.mp4": dest / "2023" / "07" / "clip.mp4",
            source / "misc" / "other.mp4": dest / "other.mp4",
        }

    def test_at_prefixed_entries_never_included(self, source, tmp_path):
        """Test that '@' folders and files are skipped even with matching files."""
        plan = plan_moves(self.spec(source, tmp_path / "dest"))

        assert all("@" not in str(m.source_path.relative_to(source)) for m in plan)

    def test_at_prefixed_folders_never_visited(self):
        """Test that discovery does not list '@' folders."""
        root = Path("/src")
        fs = fake_filesystem({root: ["@eaDir", "a.mp4"], root / "@eaDir": ["b.mp4"]})

        plan = plan_moves(self.spec(root, Path("/dest")), filesystem=fs)

        assert [m.source_path for m in plan] == [root / "a.mp4"]
        listed = [call.args[0] for call in fs.list_directory.call_args_list]
        assert root / "@eaDir" not in listed

    def test_extension_with_dot_accepted(self, source, tmp_path):
        """Test that '.mp4' behaves like 'mp4'."""
        with_dot = plan_moves(self.spec(source, tmp_path / "dest", extension=".mp4"))
        without_dot = plan_moves(self.spec(source, tmp_path / "dest", extension="mp4"))
        assert set(with_dot) == set(without_dot)

    def test_extension_is_case_sensitive(self, source, tmp_path):
        """Test that upper-case extensions are only matched literally."""
        plan = plan_moves(self.spec(source, tmp_path / "dest", extension="MP4"))
        assert [m.source_path.name for m in plan] == ["LOUD.MP4"]

    def test_depth_first_order(self):
        """Test that a subtree is fully resolved before its next sibling."""
        root = Path("/src")
        fs = fake_filesystem(
            {
                root: ["2022", "top.mp4", "2023"],
                root / "2022": ["01", "b.mp4"],
                root / "2022" / "01": ["a.mp4"],
                root / "2023": ["c.mp4"],
            }
        )

        plan = plan_moves(self.spec(root, Path("/dest")), filesystem=fs)

        assert [(str(m.source_path), str(m.destination_path)) for m in plan] == [
            ("/src/2022/01/a.mp4", "/dest/2022/01/a.mp4"),
            ("/src/2022/b.mp4", "/dest/2022/b.mp4"),
            ("/src/top.mp4", "/dest/top.mp4"),
            ("/src/2023/c.mp4", "/dest/2023/c.mp4"),
        ]

    def test_custom_ignored_prefixes(self):
        """Test that ignored prefixes can be configured."""
        root = Path("/src")
        fs = fake_filesystem({root: ["@keep.mp4", "_skip.mp4"]})

        plan = plan_moves(self.spec(root, Path("/dest")), filesystem=fs, ignored_prefixes=["_"])

        assert [m.source_path.name for m in plan] == ["@keep.mp4"]

    def test_nested_listing_failure(self):
        """Test that an unreadable subfolder aborts discovery."""
        root = Path("/src")
        tree = {root: ["locked"], root / "locked": []}
        fs = fake_filesystem(tree)

        def list_directory(path):
            if path == root / "locked":
                raise PermissionError("denied")
            return tree[path]

        fs.list_directory.side_effect = list_directory

        with pytest.raises(DiscoveryError):
            plan_moves(self.spec(root, Path("/dest")), filesystem=fs)

    def test_source_not_directory_no_flat_fallback(self, tmp_path):
        """Test that date mode fails on a bad source root instead of falling back."""
        with pytest.raises(SourceNotADirectoryError):
            plan_moves(self.spec(tmp_path / "missing", tmp_path / "dest"))
