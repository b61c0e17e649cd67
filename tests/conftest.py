"""Shared fixtures for Site Indexer tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def page(title: str, body: str) -> str:
    return (
        "<html>\n<head><title>" + title + "</title></head>\n"
        "<body>\n<p>" + body + "</p>\n</body>\n</html>\n"
    )


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Small generated site with a nested page and the search box asset."""
    root = tmp_path / "site"
    (root / "sub").mkdir(parents=True)
    (root / "index.html").write_text(page("Home", "Hello, World!"), encoding="utf-8")
    (root / "sub" / "page.htm").write_text(page("Deep", "Deep page"), encoding="utf-8")
    (root / "searchbox.html").write_text(page("Search", "search box"), encoding="utf-8")
    (root / "style.css").write_text("body { color: red; }", encoding="utf-8")
    return root
