"""Injection of the search box frame into indexed pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from siteindexer.config import SEARCHBOX_FILENAME
from siteindexer.errors import AugmentationError
from siteindexer.utils.paths import depth_below, prefix_repeat

LOGGER = logging.getLogger(__name__)

AugmentStatus = Literal["applied", "already_augmented", "failed"]

MARKER = 'id="searchbox"'
SIGNATURE = "<!-- Search box courtesy of Site Indexer -->"
CLOSING_BODY = "</body>"


def build_snippet(searchbox_url: str) -> str:
    """Markup placed in front of the closing body tag."""
    return (
        f"<div {MARKER}>"
        f'  <iframe id="searchbox-frame" src="{searchbox_url}" width="100%" '
        f'style="border: 0" height="100%">'
        "  </iframe>"
        "</div>"
        f"{SIGNATURE}"
    )


def is_augmented(markup: str) -> bool:
    return MARKER in markup


def inject(markup: str, searchbox_url: str) -> str:
    """Insert the search box before the first closing body tag.

    Markup that already carries the marker is returned untouched.
    """
    if is_augmented(markup):
        return markup
    return markup.replace(CLOSING_BODY, build_snippet(searchbox_url) + CLOSING_BODY, 1)


def _read(path: Path, encoding: str) -> str:
    try:
        with path.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeError) as exc:
        raise AugmentationError(path, f"cannot read page: {exc}") from exc


def _write(path: Path, markup: str, encoding: str) -> None:
    try:
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(markup)
    except (OSError, UnicodeError) as exc:
        raise AugmentationError(path, f"cannot rewrite page: {exc}") from exc


def augment(
    path: Path,
    crawl_root: Path,
    *,
    searchbox_filename: str = SEARCHBOX_FILENAME,
    encoding: str = "utf-8",
) -> AugmentStatus:
    """Add the search box to ``path`` unless it already has one."""
    try:
        markup = _read(path, encoding)

        if is_augmented(markup):
            LOGGER.info("Tags already added to '%s', skipping", path.name)
            return "already_augmented"

        level = depth_below(crawl_root, path)
        searchbox_url = prefix_repeat(searchbox_filename, "../", level)
        LOGGER.info("Applying tags to '%s'", path.name)
        _write(path, inject(markup, searchbox_url), encoding)
    except AugmentationError as exc:
        LOGGER.error(f"Failed to tag {path}: {exc.__cause__}")
        return "failed"

    LOGGER.info("Applied tags to '%s'", path.name)
    return "applied"
