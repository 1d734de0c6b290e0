"""Canonical path computation.

canonicalize() returns the normalized, absolute form of a path with every
symlink along it resolved. Unlike os.path.realpath(strict=True) it never
fails because part of the path is missing, a link is broken, or links form a
cycle: missing and unreadable entries are treated as plain directories, and
a cycle stops resolution at the first candidate path seen twice.
"""

from __future__ import annotations

from collections import deque

from .filesystem import LinkSource, OsFilesystem
from .paths import PathFlavor, native
from .resolver import resolve_link


def canonicalize(
    path: str,
    *,
    cwd: str | None = None,
    fs: LinkSource | None = None,
    flavor: PathFlavor | None = None,
) -> str:
    """Return the canonical path for ``path``.

    Relative paths are made absolute against ``cwd`` (default: the process
    working directory). ``path`` does not need to exist.

    An OSError raised while reading a link target (e.g. permission denied)
    propagates; nothing else raises.
    """
    fs = fs if fs is not None else OsFilesystem()
    flavor = flavor or native

    # Full candidate paths already attempted. Revisiting one means a link cycle.
    seen: set[str] = set()
    # Links whose targets were pushed back onto the queue, mapped to the length
    # of the queue left behind them. An entry is live while that tail is
    # untouched; expanding a live link again nests it inside itself, and the
    # queue would grow without ever repeating a candidate.
    expanded: dict[str, int] = {}
    components = deque(flavor.split(flavor.normalize(flavor.absolute(path, cwd))))

    # Built up incrementally as components are consumed.
    new_path = components.popleft()

    # A resolved component may push further components onto the front of the
    # queue when its link target spans several directories.
    while components:
        seen.add(flavor.join(new_path, *components))
        link_path = flavor.join(new_path, components.popleft())
        expanded = {link: tail for link, tail in expanded.items() if tail <= len(components)}
        resolved = resolve_link(link_path, fs=fs, flavor=flavor)
        relative = flavor.relative(resolved, new_path)

        # The component linked to its own parent directory.
        if relative == ".":
            continue

        segments = deque(flavor.split(relative))

        # Different root (drive, UNC share): canonicalize the whole target
        # again from that root.
        if flavor.is_absolute(relative):
            if relative in seen or link_path in expanded:
                new_path = relative
            else:
                expanded[link_path] = len(components)
                new_path = segments.popleft()
                segments.extend(components)
                components = segments
            continue

        while segments and segments[0] == "..":
            new_path = flavor.dirname(new_path)
            segments.popleft()

        # Linked to an ancestor of new_path.
        if not segments:
            continue

        # resolve_link() guarantees a lone segment is not a link (or is a
        # broken or cyclic one), so it can be taken as is.
        if len(segments) == 1:
            new_path = flavor.join(new_path, segments[0])
            continue

        sub_path = flavor.join(new_path, *segments)
        if sub_path in seen or link_path in expanded:
            new_path = sub_path
            continue

        expanded[link_path] = len(components)
        segments.extend(components)
        components = segments

    return new_path
