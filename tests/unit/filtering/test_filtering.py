"""Tests for filter-policy composition from listing options."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treelist.config import TreeConfig
from treelist.errors import ConfigurationError
from treelist.filtering import FilterPolicy
from treelist.gitignore import IgnoredPaths


class FilterPolicyTests(unittest.TestCase):
    def test_hidden_entries_rejected_unless_all_files(self) -> None:
        self.assertFalse(FilterPolicy().accepts("root/.secret", 1))
        self.assertTrue(FilterPolicy(all_files=True).accepts("root/.secret", 1))
        self.assertTrue(FilterPolicy().accepts("root/visible", 1))

    def test_dirs_only_rejects_files_but_never_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "sub").mkdir()
            (root / "file.txt").write_text("x", encoding="utf-8")
            policy = FilterPolicy(dirs_only=True)

            self.assertTrue(policy.accepts(root / "sub", 1))
            self.assertFalse(policy.accepts(root / "file.txt", 1))

    def test_depth_limit_accepts_entries_at_the_limit_only(self) -> None:
        policy = FilterPolicy(max_depth=2)
        self.assertTrue(policy.accepts("a", 1))
        self.assertTrue(policy.accepts("a/b", 2))
        self.assertFalse(policy.accepts("a/b/c", 3))

    def test_permits_descent_stops_before_exceeding_limit(self) -> None:
        policy = FilterPolicy(max_depth=1)
        self.assertTrue(policy.permits_descent(0))
        self.assertFalse(policy.permits_descent(1))
        self.assertTrue(FilterPolicy().permits_descent(10_000))

    def test_ignore_patterns_match_entry_names(self) -> None:
        policy = FilterPolicy(ignore_patterns=("*.pyc", "build"))
        self.assertFalse(policy.accepts("pkg/mod.pyc", 1))
        self.assertFalse(policy.accepts("pkg/build", 1))
        self.assertTrue(policy.accepts("pkg/mod.py", 1))

    def test_hidden_check_runs_before_filesystem_classification(self) -> None:
        policy = FilterPolicy(dirs_only=True)
        with mock.patch("treelist.filtering.is_directory") as is_directory:
            self.assertFalse(policy.accepts("root/.hidden", 1))
        is_directory.assert_not_called()

    def test_git_ignored_paths_reject_entries_lexically(self) -> None:
        git_ignored = IgnoredPaths(root="root", files=frozenset({"debug.log"}), dirs=frozenset({"dist"}))
        policy = FilterPolicy(git_ignored=git_ignored)
        self.assertFalse(policy.accepts("root/dist", 1))
        self.assertFalse(policy.accepts("root/dist/bundle.js", 2))
        self.assertFalse(policy.accepts("root/debug.log", 1))
        self.assertTrue(policy.accepts("root/src", 1))

    def test_from_config_copies_flags(self) -> None:
        config = TreeConfig(all_files=True, dirs_only=True, max_depth=3, ignore_patterns=("*.tmp",))
        policy = FilterPolicy.from_config(config)
        self.assertEqual(
            (policy.all_files, policy.dirs_only, policy.max_depth, policy.ignore_patterns, policy.git_ignored),
            (True, True, 3, ("*.tmp",), None),
        )

    def test_from_config_loads_git_ignored_paths_for_root(self) -> None:
        config = TreeConfig(gitignore=True)
        with mock.patch("treelist.filtering.load_ignored_paths", return_value=mock.sentinel.ignored) as load:
            policy = FilterPolicy.from_config(config, "project")
        load.assert_called_once_with("project")
        self.assertIs(policy.git_ignored, mock.sentinel.ignored)


class TreeConfigTests(unittest.TestCase):
    def test_rejects_non_positive_depth(self) -> None:
        with self.assertRaises(ConfigurationError):
            TreeConfig(max_depth=0)

    def test_rejects_non_integer_depth(self) -> None:
        with self.assertRaises(ConfigurationError):
            TreeConfig(max_depth="2")  # type: ignore[arg-type]

    def test_rejects_unknown_sort(self) -> None:
        with self.assertRaises(ConfigurationError):
            TreeConfig(sort="size")


if __name__ == "__main__":
    unittest.main()
