"""The four memory bank operations over one directory.

Every operation re-reads from disk, runs its blocking file I/O in a worker
thread, and reports failures as an ErrorResult instead of raising.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

from memory_bank.errors import ValidationError
from memory_bank.store.files import FileStore
from memory_bank.store.splicer import current_timestamp, format_entry, splice
from memory_bank.store.templates import INITIAL_FILES, is_canonical, render_template

logger = logging.getLogger(__name__)


# ── Results ──────────────────────────────────────────────────


@dataclass
class ErrorResult:
    """Failure of any operation, with a human-readable message."""

    message: str
    is_error: ClassVar[bool] = True

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "message": self.message}


@dataclass
class InitializeResult:
    messages: list[str] = field(default_factory=list)
    is_error: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", "messages": self.messages}


@dataclass
class StatusResult:
    exists: bool
    files: list[str] = field(default_factory=list)
    is_error: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"exists": self.exists, "files": self.files}


@dataclass
class ReadResult:
    content: str
    is_error: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content}


@dataclass
class AppendResult:
    message: str
    is_error: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", "message": self.message}


OperationResult = InitializeResult | StatusResult | ReadResult | AppendResult | ErrorResult


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing or invalid '{name}' parameter.")
    return value


class MemoryBankService:
    """Initialize, status, read and append over one memory bank directory."""

    def __init__(self, root: Path, clock: Callable[[], datetime] | None = None) -> None:
        self.store = FileStore(root)
        self._clock = clock

    @property
    def root(self) -> Path:
        return self.store.root

    def _timestamp(self) -> str:
        return current_timestamp(self._clock() if self._clock else None)

    # ── initialize ───────────────────────────────────────────

    async def initialize(self, project_brief_content: str | None = None) -> InitializeResult | ErrorResult:
        """Create the directory and any missing canonical files. Never overwrites."""
        try:
            messages = await asyncio.to_thread(self._initialize, project_brief_content)
        except Exception as e:
            logger.exception("Error initializing memory bank")
            return ErrorResult(str(e))
        return InitializeResult(messages)

    def _initialize(self, brief: str | None) -> list[str]:
        self.store.ensure_dir()
        timestamp = self._timestamp()
        messages: list[str] = []
        for file_name in INITIAL_FILES:
            if self.store.file_exists(file_name):
                messages.append(f"File {file_name} already exists.")
                continue
            content = render_template(file_name, timestamp, brief)
            self.store.write(file_name, content)
            logger.info("Created %s", file_name)
            messages.append(f"Created file: {file_name}")
        return messages

    # ── check_status ─────────────────────────────────────────

    async def check_status(self) -> StatusResult:
        """Whether the directory exists and which markdown files it holds."""
        try:
            return await asyncio.to_thread(self._check_status)
        except OSError as e:
            logger.debug("Memory bank not accessible at %s: %s", self.root, e)
            return StatusResult(exists=False)

    def _check_status(self) -> StatusResult:
        if not self.store.exists():
            return StatusResult(exists=False)
        return StatusResult(exists=True, files=self.store.list_markdown())

    # ── read_file ────────────────────────────────────────────

    async def read_file(self, file_name: str) -> ReadResult | ErrorResult:
        try:
            _require_text(file_name, "file_name")
            content = await asyncio.to_thread(self.store.read, file_name)
        except ValidationError as e:
            return ErrorResult(str(e))
        except Exception as e:
            logger.error("Error reading file %s: %s", file_name, e)
            return ErrorResult(f"Failed to read file {file_name}: {e}")
        return ReadResult(content)

    # ── append_entry ─────────────────────────────────────────

    async def append_entry(
        self,
        file_name: str,
        entry: str,
        section_header: str | None = None,
    ) -> AppendResult | ErrorResult:
        """Append a timestamped entry, optionally as the last item under a header."""
        try:
            _require_text(file_name, "file_name")
            _require_text(entry, "entry")
            self.store.resolve(file_name)
        except ValidationError as e:
            return ErrorResult(str(e))

        if not isinstance(section_header, str) or not section_header:
            section_header = None

        try:
            await asyncio.to_thread(self._append_entry, file_name, entry, section_header)
        except Exception as e:
            logger.exception("Error appending to file %s", file_name)
            return ErrorResult(f"Failed to append to file {file_name}: {e}")
        return AppendResult(f"Appended entry to {file_name}")

    def _append_entry(self, file_name: str, entry: str, header: str | None) -> None:
        self.store.ensure_dir()
        timestamp = self._timestamp()
        formatted = format_entry(entry, timestamp)

        if header is None:
            self.store.append(file_name, formatted)
            logger.info("Appended entry to %s", file_name)
            return

        try:
            existing = self.store.read(file_name)
        except FileNotFoundError:
            logger.warning("File %s not found, creating.", file_name)
            existing = render_template(file_name, timestamp) if is_canonical(file_name) else ""

        if header not in existing:
            logger.warning(
                'Header "%s" not found in %s. Appending header and entry to the end.',
                header,
                file_name,
            )
        self.store.write(file_name, splice(existing, formatted, header))
        logger.info("Appended entry to %s under %s", file_name, header)
