"""Transitive symlink resolution for a single path."""

from __future__ import annotations

from .filesystem import LinkSource, OsFilesystem
from .paths import PathFlavor, native


def resolve_link(path: str, *, fs: LinkSource | None = None, flavor: PathFlavor | None = None) -> str:
    """Return the transitive target of ``path``.

    If A links to B which links to C, resolving A returns C. Non-links and
    nonexistent paths come back unchanged, and a broken link resolves to its
    (missing) target.

    When ``path`` is part of a link cycle the first repeated link is
    returned: with A -> B -> A, resolving A returns A and resolving B
    returns B.

    An OSError raised while reading a link target propagates.
    """
    fs = fs if fs is not None else OsFilesystem()
    flavor = flavor or native

    seen: set[str] = set()
    while fs.is_link(path) and path not in seen:
        seen.add(path)
        path = flavor.normalize(flavor.join(flavor.dirname(path), fs.read_link_target(path)))
    return path
