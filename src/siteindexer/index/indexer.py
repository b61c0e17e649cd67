"""Site indexing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from siteindexer.augment.searchbox import augment
from siteindexer.config import AppConfig
from siteindexer.errors import ExtractionError
from siteindexer.index.writer import IndexWriter
from siteindexer.ingestion.html_loader import extract
from siteindexer.models import IndexEntry, TitleRecord
from siteindexer.utils.files import find_files
from siteindexer.utils.paths import relative_id

LOGGER = logging.getLogger(__name__)

ExtractionStatus = Literal["indexed", "failed", "disabled"]
AugmentationStatus = Literal["applied", "already_augmented", "failed", "disabled"]


@dataclass(slots=True)
class FileResult:
    """Outcome of processing one page."""

    path: Path
    extraction: ExtractionStatus
    augmentation: AugmentationStatus


@dataclass(slots=True)
class IndexStats:
    indexed: int = 0
    failed: int = 0
    augmented: int = 0
    already_augmented: int = 0
    augment_failed: int = 0
    processed_files: list[Path] = field(default_factory=list)

    def record(self, result: FileResult) -> None:
        if result.extraction == "indexed":
            self.indexed += 1
        elif result.extraction == "failed":
            self.failed += 1

        if result.augmentation == "applied":
            self.augmented += 1
        elif result.augmentation == "already_augmented":
            self.already_augmented += 1
        elif result.augmentation == "failed":
            self.augment_failed += 1
        self.processed_files.append(result.path)


class Indexer:
    """Crawls a site, writes the search index and tags every page."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()

    def find_pages(self, root: Path) -> list[Path]:
        """Pages under ``root`` in crawl order, without the search box itself."""
        return [
            path
            for path in find_files(root, self.config.extensions, self.config.recursive)
            if path.name != self.config.searchbox_filename
        ]

    def build(self, start_dir: Path, output_path: Path) -> IndexStats:
        """Index every page under ``start_dir`` into ``output_path``.

        Raises ``IndexOutputError`` when the output cannot be created; any
        per-page failure is logged and counted instead.
        """
        root = Path(start_dir).absolute()
        writer = IndexWriter.open(
            Path(output_path),
            encoding=self.config.encoding,
            escape_literals=self.config.escape_literals,
        )
        stats = IndexStats()
        with writer:
            writer.write_header()
            LOGGER.info("%s initialized", Path(output_path).name)

            LOGGER.info("Crawling folder '%s'...", root)
            pages = self.find_pages(root)
            if not pages:
                LOGGER.warning("No HTML pages found under %s", root)

            for path in pages:
                LOGGER.info("Found file %s", path)
                stats.record(self._process(path, root, writer))
                writer.flush()
            LOGGER.info("Done with folder '%s', %d documents written", root, writer.entries)
        return stats

    def tag(self, start_dir: Path) -> IndexStats:
        """Add the search box to every page without rebuilding the index."""
        root = Path(start_dir).absolute()
        stats = IndexStats()
        for path in self.find_pages(root):
            status = self._augment(path, root)
            stats.record(FileResult(path=path, extraction="disabled", augmentation=status))
        return stats

    def _process(self, path: Path, root: Path, writer: IndexWriter) -> FileResult:
        extraction = self._index_single(path, root, writer)
        augmentation: AugmentationStatus = "disabled"
        if self.config.augment:
            augmentation = self._augment(path, root)
        return FileResult(path=path, extraction=extraction, augmentation=augmentation)

    def _index_single(self, path: Path, root: Path, writer: IndexWriter) -> ExtractionStatus:
        """Extract one page and append its entry and title record."""
        doc_id = relative_id(root, path)
        LOGGER.info("Indexing '%s'...", doc_id)
        try:
            document = extract(path, encoding=self.config.encoding)
        except ExtractionError as exc:
            LOGGER.error(f"Failed to index {doc_id}: {exc}")
            return "failed"

        writer.write_entry(IndexEntry.from_document(document, doc_id))
        writer.write_title(TitleRecord(id=doc_id, title=document.title))
        LOGGER.info("Done indexing '%s'", doc_id)
        return "indexed"

    def _augment(self, path: Path, root: Path) -> AugmentationStatus:
        return augment(
            path,
            root,
            searchbox_filename=self.config.searchbox_filename,
            encoding=self.config.encoding,
        )
