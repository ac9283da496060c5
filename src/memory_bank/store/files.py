"""Flat-directory file access for the memory bank (blocking I/O)."""

from __future__ import annotations

import logging
from pathlib import Path

from memory_bank.errors import ValidationError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class FileStore:
    """Read/write access to the files directly under one directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def ensure_dir(self) -> bool:
        """Create the directory if absent. Returns True if it was created."""
        if self.root.is_dir():
            return False
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("Created memory bank directory: %s", self.root)
        return True

    def exists(self) -> bool:
        return self.root.is_dir()

    def resolve(self, file_name: str) -> Path:
        """Map a file name to its path, rejecting anything outside the directory."""
        if not isinstance(file_name, str) or not file_name:
            raise ValidationError("Missing or invalid 'file_name' parameter.")
        if (
            "/" in file_name
            or "\\" in file_name
            or "\0" in file_name
            or file_name in (".", "..")
            or Path(file_name).is_absolute()
        ):
            raise ValidationError(f"Invalid file name {file_name!r}: must be a plain file name.")

        path = self.root / file_name
        if path.resolve().parent != self.root.resolve():
            raise ValidationError(f"Invalid file name {file_name!r}: outside the memory bank.")
        return path

    def file_exists(self, file_name: str) -> bool:
        return self.resolve(file_name).exists()

    def read(self, file_name: str) -> str:
        return self.resolve(file_name).read_text(encoding="utf-8")

    def write(self, file_name: str, text: str) -> None:
        self.resolve(file_name).write_text(text, encoding="utf-8")

    def append(self, file_name: str, text: str) -> None:
        with self.resolve(file_name).open("a", encoding="utf-8") as f:
            f.write(text)

    def list_markdown(self) -> list[str]:
        """Markdown file names in directory enumeration order (not sorted)."""
        return [p.name for p in self.root.iterdir() if p.name.endswith(MARKDOWN_SUFFIX)]
