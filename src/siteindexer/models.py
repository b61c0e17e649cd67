"""Core Site Indexer data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(slots=True)
class Document:
    """One crawled page with its extracted title and normalized terms."""

    path: Path
    title: str
    tokens: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(self.tokens)


@dataclass(slots=True)
class IndexEntry:
    """Serialized projection of a document."""

    id: str
    text: str
    title: str

    @classmethod
    def from_document(cls, document: Document, doc_id: str) -> "IndexEntry":
        return cls(id=doc_id, text=document.text, title=document.title)


@dataclass(slots=True)
class TitleRecord:
    """Lookup pair from relative id to page title."""

    id: str
    title: str
