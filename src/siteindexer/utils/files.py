"""Utility helpers for discovering files to index."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Iterator

LOGGER = logging.getLogger(__name__)


def _matches(path: Path, extensions: Collection[str] | None) -> bool:
    if not extensions:
        return True
    suffix = path.suffix.lower().lstrip(".")
    return suffix in {ext.lower().lstrip(".") for ext in extensions}


def iter_listed_files(
    directory: Path, extensions: Collection[str] | None = None, *, recursive: bool = True
) -> Iterator[Path]:
    """Yield matching files below ``directory``, descending depth-first in name order.

    Directories that cannot be listed are logged and skipped.
    """
    try:
        children = sorted(directory.iterdir(), key=lambda child: child.name)
    except (FileNotFoundError, NotADirectoryError):
        return
    except OSError as exc:
        LOGGER.error("Cannot list folder %s: %s", directory, exc)
        return

    for child in children:
        if child.is_dir():
            if recursive:
                yield from iter_listed_files(child, extensions, recursive=recursive)
        elif child.is_file() and _matches(child, extensions):
            yield child
