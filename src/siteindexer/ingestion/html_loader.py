"""HTML loading and term extraction.

Uses BeautifulSoup with the standard library ``html.parser`` backend, so no
compiled parser is required.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from bs4 import BeautifulSoup

from siteindexer.errors import ExtractionError
from siteindexer.models import Document
from siteindexer.utils.text import tokenize

LOGGER = logging.getLogger(__name__)

# Elements whose contents are code or markup, not readable text.
NON_TEXT_TAGS = ["script", "style", "noscript", "template"]


def parse_html(markup: str) -> Dict[str, str]:
    """Return the title and plain text of an HTML document."""
    soup = BeautifulSoup(markup, "html.parser")

    # Title text with runs of whitespace collapsed and trimmed.
    title = ""
    if soup.title is not None:
        title = " ".join(soup.title.get_text().split())

    for tag in soup.find_all(NON_TEXT_TAGS):
        tag.decompose()

    container = soup.body if soup.body is not None else soup
    if container is soup and soup.title is not None:
        soup.title.decompose()
    text = container.get_text(separator=" ")
    return {"title": title, "text": text}


def extract(path: Path, *, encoding: str = "utf-8") -> Document:
    """Extract the title and normalized terms of the page at ``path``."""
    try:
        markup = path.read_text(encoding=encoding)
    except (OSError, UnicodeError) as exc:
        raise ExtractionError(path, f"cannot read page: {exc}") from exc

    try:
        parsed = parse_html(markup)
    except Exception as exc:
        raise ExtractionError(path, f"cannot parse page: {exc}") from exc

    tokens = list(tokenize(parsed["text"]))
    LOGGER.debug("Extracted %d terms from %s", len(tokens), path)
    return Document(path=path, title=parsed["title"], tokens=tokens)
