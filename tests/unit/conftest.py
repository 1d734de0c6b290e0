"""Shared fixtures: an in-memory link table standing in for the filesystem."""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest


class FakeLinks:
    """LinkSource over a dict of link path -> stored target.

    Paths are matched exactly as strings. Anything not in ``links`` is a
    plain (possibly nonexistent) entry. Reading a path listed in ``denied``
    raises PermissionError.
    """

    def __init__(self, links: dict[str, str], denied: set[str] | None = None) -> None:
        self.links = dict(links)
        self.denied = set(denied or ())
        self.reads: list[str] = []

    def is_link(self, path: str) -> bool:
        return path in self.links

    def read_link_target(self, path: str) -> str:
        self.reads.append(path)
        if path in self.denied:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        if path not in self.links:
            raise OSError(errno.EINVAL, "Invalid argument", path)
        return self.links[path]


@pytest.fixture
def fake_links():
    return FakeLinks


def _can_symlink(tmp_dir: Path) -> bool:
    probe = tmp_dir / ".symlink-probe"
    try:
        os.symlink(str(tmp_dir), str(probe))
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


@pytest.fixture
def symlink_dir(tmp_path: Path) -> Path:
    """A temp directory where symlinks can be created; skips the test otherwise."""
    if not _can_symlink(tmp_path):
        pytest.skip("symlinks not supported on this platform")
    return tmp_path
