"""Exception types raised by the indexing pipeline."""

from __future__ import annotations

from pathlib import Path


class SiteIndexerError(Exception):
    """Base class for all site indexer failures."""


class IndexOutputError(SiteIndexerError):
    """The index artifact could not be created; aborts the whole run."""


class ExtractionError(SiteIndexerError):
    """Title and text could not be extracted from a page."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class AugmentationError(SiteIndexerError):
    """A page could not be read or rewritten while injecting the search box."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
