"""Helpers for expressing crawled files relative to the crawl root."""

from __future__ import annotations

import os


# Platform separators other than the forward slash.
SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep and sep != "/")


def _normalize(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    for sep in SEPARATORS:
        text = text.replace(sep, "/")
    return text


def _remainder(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> str:
    """Return the part of ``path`` after ``root``, starting with a separator."""
    base = _normalize(root).rstrip("/")
    full = _normalize(path)
    if not full.startswith(base + "/"):
        raise ValueError(f"{os.fspath(path)!r} is not under crawl root {os.fspath(root)!r}")
    return full[len(base) :]


def relative_id(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> str:
    """Relative identifier of ``path`` below ``root`` using forward slashes."""
    return _remainder(root, path)[1:]


def depth_below(root: str | os.PathLike[str], path: str | os.PathLike[str]) -> int:
    """Number of directories between ``root`` and ``path``.

    Counts the separators of the remainder including its leading one, minus
    one, so a file directly under the root sits at depth 0.
    """
    return max(_remainder(root, path).count("/") - 1, 0)


def prefix_repeat(base: str, prefix: str, times: int) -> str:
    """Prepend ``prefix`` to ``base`` ``times`` times."""
    return prefix * max(times, 0) + base
