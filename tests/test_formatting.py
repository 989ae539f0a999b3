import os
import time
import unittest
from datetime import datetime
from pathlib import Path
from unittest import mock

from fileexplorer.core import formatting
from fileexplorer.core.listing import Entry, EntryKind, parent_entry

from _support import make_repo_tmpdir


class FormatSizeTests(unittest.TestCase):
    def test_directory_is_always_dir_marker(self):
        for size in (0, 1, 4096, 10**12, None):
            self.assertEqual(formatting.format_size(True, size), "<DIR>")

    def test_byte_scale_below_one_kilobyte(self):
        self.assertEqual(formatting.format_size(False, 0), "0 B")
        self.assertEqual(formatting.format_size(False, 512), "512 B")
        self.assertEqual(formatting.format_size(False, 1023), "1023 B")

    def test_scaled_units_use_base_1024(self):
        self.assertEqual(formatting.format_size(False, 1024), "1.0 KB")
        self.assertEqual(formatting.format_size(False, 1229), "1.2 KB")
        self.assertEqual(formatting.format_size(False, 1_048_576), "1.0 MB")
        self.assertEqual(formatting.format_size(False, 3 * 1024**3), "3.0 GB")
        self.assertEqual(formatting.format_size(False, 1024**4), "1.0 TB")

    def test_values_that_round_to_1024_promote_to_next_unit(self):
        self.assertEqual(formatting.format_size(False, 1_048_575), "1.0 MB")
        self.assertEqual(formatting.format_size(False, 1024**3 - 1), "1.0 GB")
        self.assertEqual(formatting.format_size(False, 1_048_000), "1023.4 KB")

    def test_unit_rank_is_monotonic_with_size(self):
        units = list(formatting.SIZE_UNITS)
        sizes = [0, 1, 1023, 1024, 50_000, 1_048_575, 1_048_576, 2**30, 2**40, 2**50, 2**60]
        ranks = [units.index(formatting.format_size(False, s).split()[1]) for s in sizes]
        self.assertEqual(ranks, sorted(ranks))

    def test_missing_size_degrades_to_empty(self):
        self.assertEqual(formatting.format_size(False, None), "")


class FormatModifiedTests(unittest.TestCase):
    def test_formats_local_time(self):
        ts = time.mktime((2024, 3, 5, 14, 7, 9, 0, 0, -1))
        self.assertEqual(formatting.format_modified(ts), "2024-03-05 14:07:09")

    def test_matches_fixed_pattern(self):
        label = formatting.format_modified(86400 * 365)
        self.assertRegex(label, r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

    def test_unavailable_timestamp_is_empty(self):
        self.assertEqual(formatting.format_modified(None), "")

    def test_out_of_range_timestamp_is_empty(self):
        self.assertEqual(formatting.format_modified(1e20), "")
        self.assertEqual(formatting.format_modified("not-a-time"), "")


class DisplayInfoTests(unittest.TestCase):
    def setUp(self):
        self._tmp = make_repo_tmpdir("_tmp_formatting_")
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_file_reports_size_and_mtime(self):
        path = self.root / "data.bin"
        path.write_bytes(b"x" * 2048)
        os.utime(path, (1_700_000_000, 1_700_000_000))

        size, modified = formatting.display_info(Entry(str(path), EntryKind.FILE))

        self.assertEqual(size, "2.0 KB")
        self.assertEqual(modified, datetime.fromtimestamp(1_700_000_000).strftime("%Y-%m-%d %H:%M:%S"))

    def test_directory_reports_dir_marker(self):
        sub = self.root / "sub"
        sub.mkdir()
        size, modified = formatting.display_info(Entry(str(sub), EntryKind.DIRECTORY))
        self.assertEqual(size, "<DIR>")
        self.assertNotEqual(modified, "")

    def test_vanished_path_degrades_to_empty_labels(self):
        entry = Entry(str(self.root / "gone.txt"), EntryKind.FILE)
        self.assertEqual(formatting.display_info(entry), ("", ""))

    def test_parent_marker_never_touches_filesystem(self):
        with mock.patch.object(formatting.os, "stat") as stat:
            info = formatting.display_info(parent_entry(str(self.root)))
        stat.assert_not_called()
        self.assertEqual(info, ("<DIR>", ""))


if __name__ == "__main__":
    unittest.main()
