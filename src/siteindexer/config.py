"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_OUTPUT = Path("index.js")
SEARCHBOX_FILENAME = "searchbox.html"


@dataclass(slots=True)
class AppConfig:
    output_path: Path | None = None
    extensions: Tuple[str, ...] = ("html", "htm")
    recursive: bool = True
    searchbox_filename: str = SEARCHBOX_FILENAME
    encoding: str = "utf-8"
    escape_literals: bool = True
    augment: bool = True

    def __post_init__(self) -> None:
        if self.output_path is None:
            self.output_path = DEFAULT_OUTPUT

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        if self.output_path is None:
            self.output_path = DEFAULT_OUTPUT
        if Path(self.output_path).is_absolute() or base_dir is None:
            return Path(self.output_path)
        return base_dir / self.output_path
