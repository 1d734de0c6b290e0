"""Canonical filesystem paths that tolerate broken and cyclic symlinks."""

from __future__ import annotations

from .canonical import canonicalize
from .resolver import resolve_link

__version__ = "0.1.0"

__all__ = ["__version__", "canonicalize", "resolve_link"]
