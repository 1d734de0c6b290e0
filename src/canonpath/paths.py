"""Lexical path utilities.

Nothing in this module touches the filesystem. A PathFlavor wraps one of the
stdlib path modules (posixpath or ntpath) so canonicalization runs against
either path syntax regardless of the host OS. Roots are treated as opaque
prefixes ("/", "//", "C:\\", "\\\\server\\share\\"); two paths whose roots differ
have no relative form, and relative() hands back the absolute path instead.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from types import ModuleType


class PathFlavor:
    """Path-string operations for one path syntax."""

    def __init__(self, module: ModuleType) -> None:
        self._mod = module
        self.sep: str = module.sep
        self._seps: str = module.sep + (module.altsep or "")

    @property
    def name(self) -> str:
        return "windows" if self._mod is ntpath else "posix"

    def __repr__(self) -> str:
        return f"PathFlavor({self.name})"

    def is_absolute(self, path: str) -> bool:
        return self._mod.isabs(path)

    def normalize(self, path: str) -> str:
        return self._mod.normpath(path)

    def dirname(self, path: str) -> str:
        return self._mod.dirname(path)

    def join(self, *parts: str) -> str:
        if not parts:
            return ""
        return self._mod.join(*parts)

    def absolute(self, path: str, cwd: str | None = None) -> str:
        """Make ``path`` absolute against ``cwd`` (default: the process cwd)."""
        if self.is_absolute(path):
            return path
        return self.join(cwd if cwd is not None else os.getcwd(), path)

    def root(self, path: str) -> str:
        """Return the root prefix of ``path``, or "" for a relative path."""
        drive, rest = self._mod.splitdrive(path)
        stripped = rest.lstrip(self._seps)
        leading = rest[: len(rest) - len(stripped)]
        if self._mod.altsep:
            leading = leading.replace(self._mod.altsep, self.sep)
        return drive + leading

    def split(self, path: str) -> list[str]:
        """Split ``path`` into its root (if any) followed by its segments.

        ``split("/a/b") == ["/", "a", "b"]`` and
        ``split("C:\\\\a") == ["C:\\\\", "a"]``; a relative path yields only
        its segments.
        """
        root = self.root(path)
        _, rest = self._mod.splitdrive(path)
        body = rest.lstrip(self._seps)
        if self._mod.altsep:
            body = body.replace(self._mod.altsep, self.sep)
        segments = [s for s in body.split(self.sep) if s]
        return [root, *segments] if root else segments

    def relative(self, path: str, start: str) -> str:
        """Express ``path`` relative to ``start``.

        Both must be absolute. Returns ``"."`` when they are the same
        directory and ``path`` unchanged when the roots differ.
        """
        if self._mod.normcase(self.root(path)) != self._mod.normcase(self.root(start)):
            return path
        return self._mod.relpath(path, start)


posix = PathFlavor(posixpath)
windows = PathFlavor(ntpath)
native = windows if os.path is ntpath else posix
