"""Error types shared by the store, service and tool layers.

Filesystem failures are left as the builtin ``OSError`` family; the service
turns them into error results at the operation boundary.
"""

from __future__ import annotations


class MemoryBankError(Exception):
    """Base class for memory bank errors."""


class ValidationError(MemoryBankError):
    """A required argument is missing, empty or of the wrong type."""


class UnknownToolError(MemoryBankError):
    """A tool call named an operation this server does not provide."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
