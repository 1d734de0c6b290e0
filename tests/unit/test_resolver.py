"""Tests for canonpath.resolver — following one path's link chain."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from canonpath.paths import posix, windows
from canonpath.resolver import resolve_link


class TestResolveLinkInMemory:
    def test_non_link_returned_as_is(self, fake_links) -> None:
        fs = fake_links({})
        assert resolve_link("/no/such/path", fs=fs, flavor=posix) == "/no/such/path"
        assert fs.reads == []

    def test_relative_target_joined_to_link_directory(self, fake_links) -> None:
        fs = fake_links({"/d/link": "target"})
        assert resolve_link("/d/link", fs=fs, flavor=posix) == "/d/target"

    def test_absolute_target(self, fake_links) -> None:
        fs = fake_links({"/d/link": "/elsewhere/t"})
        assert resolve_link("/d/link", fs=fs, flavor=posix) == "/elsewhere/t"

    def test_target_is_normalized(self, fake_links) -> None:
        fs = fake_links({"/a/b/link": "../c/./d"})
        assert resolve_link("/a/b/link", fs=fs, flavor=posix) == "/a/c/d"

    def test_chain(self, fake_links) -> None:
        fs = fake_links({"/r/A": "B", "/r/B": "/r/C"})
        assert resolve_link("/r/A", fs=fs, flavor=posix) == "/r/C"

    def test_broken_link_resolves_to_missing_target(self, fake_links) -> None:
        fs = fake_links({"/r/broken": "gone/away"})
        assert resolve_link("/r/broken", fs=fs, flavor=posix) == "/r/gone/away"

    def test_self_link(self, fake_links) -> None:
        fs = fake_links({"/r/self": "self"})
        assert resolve_link("/r/self", fs=fs, flavor=posix) == "/r/self"

    def test_two_link_cycle_returns_start(self, fake_links) -> None:
        fs = fake_links({"/d/A": "B", "/d/B": "A"})
        assert resolve_link("/d/A", fs=fs, flavor=posix) == "/d/A"
        assert resolve_link("/d/B", fs=fs, flavor=posix) == "/d/B"

    def test_three_link_cycle(self, fake_links) -> None:
        fs = fake_links({"/c/A": "B", "/c/B": "/c/C", "/c/C": "A"})
        assert resolve_link("/c/B", fs=fs, flavor=posix) == "/c/B"
        assert len(fs.reads) == 3

    def test_cycle_entered_from_outside(self, fake_links) -> None:
        fs = fake_links({"/c/start": "A", "/c/A": "B", "/c/B": "A"})
        assert resolve_link("/c/start", fs=fs, flavor=posix) == "/c/A"

    def test_permission_error_propagates(self, fake_links) -> None:
        fs = fake_links({"/s/link": "x"}, denied={"/s/link"})
        with pytest.raises(PermissionError):
            resolve_link("/s/link", fs=fs, flavor=posix)

    def test_windows_cross_drive_chain(self, fake_links) -> None:
        fs = fake_links({"C:\\a\\l": "D:\\m", "D:\\m": "..\\n"})
        assert resolve_link("C:\\a\\l", fs=fs, flavor=windows) == "D:\\n"


class TestResolveLinkOnDisk:
    def test_real_chain(self, symlink_dir: Path) -> None:
        real = symlink_dir / "C"
        real.mkdir()
        os.symlink("C", str(symlink_dir / "B"))
        os.symlink("B", str(symlink_dir / "A"))
        assert resolve_link(str(symlink_dir / "A")) == str(real)

    def test_real_broken_link(self, symlink_dir: Path) -> None:
        os.symlink("missing", str(symlink_dir / "broken"))
        assert resolve_link(str(symlink_dir / "broken")) == str(symlink_dir / "missing")

    def test_real_cycle_terminates(self, symlink_dir: Path) -> None:
        os.symlink("b", str(symlink_dir / "a"))
        os.symlink("a", str(symlink_dir / "b"))
        assert resolve_link(str(symlink_dir / "a")) == str(symlink_dir / "a")

    def test_regular_file_untouched(self, symlink_dir: Path) -> None:
        f = symlink_dir / "plain.txt"
        f.write_text("x")
        assert resolve_link(str(f)) == str(f)
