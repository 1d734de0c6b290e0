"""Filesystem queries used by canonicalization.

The resolver only needs two questions answered about an entry: is it a
symbolic link, and what target string does it store. LinkSource describes
that surface so tests (or callers with a virtual filesystem) can supply their
own; OsFilesystem answers it from the real filesystem.

On Windows, os.readlink() may return targets carrying the extended-length
prefix (\\\\?\\C:\\... or \\\\?\\UNC\\server\\share). The prefix is stripped so the
target compares equal to ordinary paths built from user input.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Protocol

from .paths import native

logger = logging.getLogger(__name__)

_IS_WINDOWS = sys.platform == "win32"

_EXTENDED_PREFIX = "\\\\?\\"
_EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"


class LinkSource(Protocol):
    def is_link(self, path: str) -> bool: ...

    def read_link_target(self, path: str) -> str: ...


def _strip_extended_prefix(target: str) -> str:
    if target.startswith(_EXTENDED_UNC_PREFIX):
        return "\\\\" + target[len(_EXTENDED_UNC_PREFIX) :]
    if target.startswith(_EXTENDED_PREFIX):
        return target[len(_EXTENDED_PREFIX) :]
    return target


class OsFilesystem:
    """LinkSource backed by the operating system."""

    def is_link(self, path: str) -> bool:
        # islink() reports False for entries it cannot lstat (missing,
        # permission denied, ELOOP in an intermediate component).
        return os.path.islink(path)

    def read_link_target(self, path: str) -> str:
        target = os.readlink(path)
        if _IS_WINDOWS:
            target = _strip_extended_prefix(target)
        return target


def link_exists(path: str) -> bool:
    """Whether a symlink entry exists at ``path``, broken or not."""
    return os.path.islink(path)


def file_exists(path: str) -> bool:
    """Whether ``path`` is a file. A symlink counts only if its target is a file."""
    return os.path.isfile(path)


def dir_exists(path: str) -> bool:
    """Whether ``path`` is a directory. A symlink counts only if its target is one."""
    return os.path.isdir(path)


def entry_exists(path: str) -> bool:
    return dir_exists(path) or file_exists(path) or link_exists(path)


def create_symlink(target: str, symlink: str, *, relative: bool = False) -> str:
    """Create a symlink at ``symlink`` pointing to ``target``.

    With ``relative=True`` the stored target is relative to the canonical
    location of the directory that holds the link, so it stays correct when
    that directory was itself reached through a link. Windows does not honor
    relative link targets the same way, so there the target is stored as a
    normalized absolute path instead.

    Returns the path of the created link.
    """
    from .canonical import canonicalize

    if relative:
        if _IS_WINDOWS:
            target = native.normalize(native.absolute(target))
        else:
            symlink_dir = canonicalize(native.dirname(native.absolute(symlink)))
            target = native.normalize(native.relative(native.absolute(target), symlink_dir))

    logger.debug("Creating %s pointing to %s", symlink, target)
    target_is_directory = dir_exists(native.join(native.dirname(native.absolute(symlink)), target))
    os.symlink(target, symlink, target_is_directory=target_is_directory)
    return symlink
