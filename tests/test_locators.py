from __future__ import annotations

import os
import sys
import tempfile
import unittest
from dataclasses import dataclass
from pathlib import Path
from unittest import mock

from pathentry import HostPlatform, PathEntry, config


@dataclass(frozen=True)
class FixedPlatform:
    executable: str | None = None
    home: str | None = None

    def executable_path(self) -> str | None:
        return self.executable

    def home_directory(self) -> str | None:
        return self.home


class ResourceDirectoryTests(unittest.TestCase):
    def test_resource_directory_sits_next_to_executable(self) -> None:
        entry = PathEntry.open_resource_directory(FixedPlatform(executable="/opt/app/bin/game"))
        self.assertEqual(entry.resolved_path, "/opt/app/bin/resource")
        self.assertFalse(entry.exists())

    def test_persisted_config_does_not_change_default_dirname(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"resource_dirname": "assets"}', encoding="utf-8")
            platform = FixedPlatform(executable="/opt/app/game")
            with mock.patch("pathentry.config.CONFIG_PATH", config_path):
                default = PathEntry.open_resource_directory(platform)
                configured = config.open_configured_resource_directory(platform)
        self.assertEqual(default.resolved_path, "/opt/app/resource")
        self.assertEqual(configured.resolved_path, "/opt/app/assets")

    def test_explicit_dirname_wins(self) -> None:
        entry = PathEntry.open_resource_directory(
            FixedPlatform(executable="/opt/app/game"),
            dirname="data",
        )
        self.assertEqual(entry.resolved_path, "/opt/app/data")

    def test_existing_resource_directory_resolves(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "resource").mkdir()
            platform = FixedPlatform(executable=str(root / "game"))
            entry = PathEntry.open_resource_directory(platform, dirname="resource")

            self.assertTrue(entry.is_directory())
            self.assertEqual(entry.resolved_path, str(root / "resource"))

    def test_unknown_executable_degrades_to_empty_path(self) -> None:
        self.assertEqual(PathEntry.open_resource_directory(FixedPlatform()).resolved_path, "")
        self.assertEqual(
            PathEntry.open_resource_directory(FixedPlatform(executable="game")).resolved_path,
            "",
        )

    @unittest.skipIf(sys.platform == "win32", "backslash is a separator on Windows")
    def test_backslash_is_not_a_separator_on_posix(self) -> None:
        entry = PathEntry.open_resource_directory(FixedPlatform(executable="foo\\bar"))
        self.assertEqual(entry.resolved_path, "")

    def test_windows_executable_path_splits_on_backslash(self) -> None:
        with mock.patch("pathentry.entry.EXECUTABLE_SEPARATORS", ("\\", "/")):
            entry = PathEntry.open_resource_directory(
                FixedPlatform(executable="C:\\Games\\app\\game.exe"),
            )
        self.assertEqual(entry.resolved_path, "C:\\Games\\app/resource")


class WorkingDirectoryTests(unittest.TestCase):
    def test_working_directory_is_under_home(self) -> None:
        entry = PathEntry.open_working_directory(".myapp", FixedPlatform(home="/home/someone"))
        self.assertEqual(entry.resolved_path, "/home/someone/.myapp")
        self.assertFalse(entry.exists())

    def test_working_directory_can_be_created_by_caller(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            home = str(Path(tmp).resolve())
            entry = PathEntry.open_working_directory("work", FixedPlatform(home=home))

            self.assertFalse(entry.exists())
            self.assertTrue(entry.mkdir())
            self.assertTrue(PathEntry.open_working_directory("work", FixedPlatform(home=home)).is_directory())

    def test_missing_home_degrades_to_empty_path(self) -> None:
        entry = PathEntry.open_working_directory("work", FixedPlatform(home=None))
        self.assertEqual(entry.resolved_path, "")
        self.assertEqual(entry.display_path, "")


class HostPlatformTests(unittest.TestCase):
    def test_home_directory_reads_environment(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/tester"}):
            self.assertEqual(HostPlatform().home_directory(), "/home/tester")

    def test_home_directory_unset_is_none(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIsNone(HostPlatform().home_directory())

    def test_frozen_bundle_reports_sys_executable(self) -> None:
        with mock.patch.object(sys, "frozen", True, create=True), mock.patch.object(
            sys, "executable", "/bundle/app"
        ):
            self.assertEqual(HostPlatform().executable_path(), "/bundle/app")

    @unittest.skipUnless(sys.platform.startswith("linux"), "reads /proc/self/exe")
    def test_linux_executable_comes_from_proc(self) -> None:
        self.assertEqual(HostPlatform().executable_path(), os.readlink("/proc/self/exe"))

    @unittest.skipUnless(sys.platform.startswith("linux"), "reads /proc/self/exe")
    def test_unreadable_proc_link_is_none(self) -> None:
        with mock.patch("pathentry.platform.os.readlink", side_effect=OSError("denied")):
            self.assertIsNone(HostPlatform().executable_path())


if __name__ == "__main__":
    unittest.main()
