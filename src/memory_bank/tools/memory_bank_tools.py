"""MCP tools for the memory bank.

Each tool has a typed argument class validated once at the boundary;
call_tool() parses the raw call, dispatches on the argument type and wraps
the result in the MCP text-content envelope.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from memory_bank.errors import UnknownToolError, ValidationError

if TYPE_CHECKING:
    from memory_bank.service import MemoryBankService, OperationResult


class ToolName(str, Enum):
    INITIALIZE = "initialize_memory_bank"
    CHECK_STATUS = "check_memory_bank_status"
    READ_FILE = "read_memory_bank_file"
    APPEND_ENTRY = "append_memory_bank_entry"


# ── Tool definitions ─────────────────────────────────────────

TOOLS: list[dict[str, Any]] = [
    {
        "name": ToolName.INITIALIZE.value,
        "description": "Creates the memory-bank directory and standard .md files with initial templates.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "project_brief_content": {
                    "type": "string",
                    "description": "(Optional) Content from projectBrief.md to pre-fill productContext.md",
                },
            },
            "required": [],
        },
    },
    {
        "name": ToolName.CHECK_STATUS.value,
        "description": "Checks if the memory-bank directory exists and lists the .md files within it.",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": ToolName.READ_FILE.value,
        "description": "Reads the full content of a specified memory bank file.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_name": {
                    "type": "string",
                    "description": "The name of the memory bank file (e.g., 'productContext.md')",
                },
            },
            "required": ["file_name"],
        },
    },
    {
        "name": ToolName.APPEND_ENTRY.value,
        "description": (
            "Appends a new, timestamped entry to a specified file, "
            "optionally under a specific markdown header."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_name": {
                    "type": "string",
                    "description": "The name of the memory bank file to append to.",
                },
                "entry": {
                    "type": "string",
                    "description": "The content of the entry to append.",
                },
                "section_header": {
                    "type": "string",
                    "description": "(Optional) The exact markdown header (e.g., '## Decision') to append under.",
                },
            },
            "required": ["file_name", "entry"],
        },
    },
]


# ── Typed arguments ──────────────────────────────────────────


def _required_str(arguments: dict, key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"Missing or invalid '{key}' parameter.")
    return value


def _optional_str(arguments: dict, key: str) -> str | None:
    value = arguments.get(key)
    if isinstance(value, str) and value:
        return value
    return None


@dataclass
class InitializeArgs:
    project_brief_content: str | None = None

    @classmethod
    def from_arguments(cls, arguments: dict) -> InitializeArgs:
        return cls(project_brief_content=_optional_str(arguments, "project_brief_content"))


@dataclass
class StatusArgs:
    @classmethod
    def from_arguments(cls, arguments: dict) -> StatusArgs:
        return cls()


@dataclass
class ReadFileArgs:
    file_name: str

    @classmethod
    def from_arguments(cls, arguments: dict) -> ReadFileArgs:
        return cls(file_name=_required_str(arguments, "file_name"))


@dataclass
class AppendEntryArgs:
    file_name: str
    entry: str
    section_header: str | None = None

    @classmethod
    def from_arguments(cls, arguments: dict) -> AppendEntryArgs:
        return cls(
            file_name=_required_str(arguments, "file_name"),
            entry=_required_str(arguments, "entry"),
            section_header=_optional_str(arguments, "section_header"),
        )


ToolCall = InitializeArgs | StatusArgs | ReadFileArgs | AppendEntryArgs

_ARGUMENT_TYPES: dict[ToolName, type] = {
    ToolName.INITIALIZE: InitializeArgs,
    ToolName.CHECK_STATUS: StatusArgs,
    ToolName.READ_FILE: ReadFileArgs,
    ToolName.APPEND_ENTRY: AppendEntryArgs,
}


def parse_tool_call(name: str, arguments: dict | None) -> ToolCall:
    """Turn a raw tools/call request into typed arguments.

    Raises UnknownToolError for names outside ToolName and ValidationError
    for missing or mistyped arguments.
    """
    try:
        tool = ToolName(name)
    except ValueError:
        raise UnknownToolError(str(name)) from None
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ValidationError("Tool arguments must be an object.")
    return _ARGUMENT_TYPES[tool].from_arguments(arguments)


# ── Dispatch ─────────────────────────────────────────────────


@dataclass
class ToolResponse:
    """Operation payload plus error flag, rendered as MCP text content."""

    payload: dict[str, Any]
    is_error: bool = False

    @classmethod
    def from_result(cls, result: OperationResult) -> ToolResponse:
        return cls(payload=result.to_dict(), is_error=result.is_error)

    @classmethod
    def error(cls, message: str) -> ToolResponse:
        return cls(payload={"status": "error", "message": message}, is_error=True)

    def to_dict(self) -> dict[str, Any]:
        envelope: dict[str, Any] = {
            "content": [{"type": "text", "text": json.dumps(self.payload, indent=2)}],
        }
        if self.is_error:
            envelope["isError"] = True
        return envelope


async def dispatch(service: MemoryBankService, call: ToolCall) -> OperationResult:
    if isinstance(call, InitializeArgs):
        return await service.initialize(call.project_brief_content)
    if isinstance(call, StatusArgs):
        return await service.check_status()
    if isinstance(call, ReadFileArgs):
        return await service.read_file(call.file_name)
    if isinstance(call, AppendEntryArgs):
        return await service.append_entry(call.file_name, call.entry, call.section_header)
    raise TypeError(f"Unhandled tool call: {call!r}")


async def call_tool(service: MemoryBankService, name: str, arguments: dict | None) -> ToolResponse:
    """Validate, run and serialize one tool call. Never raises for bad input."""
    try:
        call = parse_tool_call(name, arguments)
    except (UnknownToolError, ValidationError) as e:
        return ToolResponse.error(str(e))
    result = await dispatch(service, call)
    return ToolResponse.from_result(result)
