"""Serialization of index entries into the client-side search script."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from siteindexer.errors import IndexOutputError
from siteindexer.models import IndexEntry, TitleRecord

NEWLINE = "\r\n"
HEADER = (
    "var index = new LADDERS.search.index();",
    "var titles = new LADDERS.search.document();",
)


def js_string(value: str) -> str:
    """Double quoted script literal with quotes and control characters escaped."""
    return json.dumps(value, ensure_ascii=False)


class IndexWriter:
    """Writes the statements that rebuild the search index at page load.

    With ``escape_literals`` disabled values are embedded verbatim between
    quotes, as older consumers of the index expect.
    """

    def __init__(self, handle: TextIO, *, escape_literals: bool = True) -> None:
        self.handle = handle
        self.escape_literals = escape_literals
        self.entries = 0

    @classmethod
    def open(cls, path: Path, *, encoding: str = "utf-8", escape_literals: bool = True) -> "IndexWriter":
        """Create (or truncate) the artifact at ``path``."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = path.open("w", encoding=encoding, newline="")
        except OSError as exc:
            raise IndexOutputError(f"Cannot create index file {path}: {exc}") from exc
        return cls(handle, escape_literals=escape_literals)

    def _line(self, statement: str = "") -> None:
        self.handle.write(statement + NEWLINE)

    def _single(self, value: str) -> str:
        return js_string(value) if self.escape_literals else f"'{value}'"

    def _double(self, value: str) -> str:
        return js_string(value) if self.escape_literals else f'"{value}"'

    def write_header(self) -> None:
        for statement in HEADER:
            self._line(statement)

    def write_entry(self, entry: IndexEntry) -> None:
        self._line("var d = new LADDERS.search.document();")
        self._line(f'd.add("id", {self._single(entry.id)});')
        self._line(f'd.add("text", {self._double(entry.text)});')
        self._line(f'd.add("title", {self._single(entry.title)});')
        self._line("index.addDocument(d);")
        self.entries += 1

    def write_title(self, record: TitleRecord) -> None:
        self._line(f"titles.add({self._double(record.id)}, {self._double(record.title)});")
        self._line()

    def flush(self) -> None:
        self.handle.flush()

    def close(self) -> None:
        self.handle.close()

    def __enter__(self) -> "IndexWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
