"""MCP server: roo-memory-bank, memory bank tools over stdio.

Protocol: JSON-RPC 2.0 over stdio (NDJSON). Requests are handled strictly
one at a time; stdout carries only protocol messages, logs go to stderr.

Usage:
  python -m memory_bank serve
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import IO, Any

from memory_bank import __version__
from memory_bank.service import MemoryBankService
from memory_bank.tools.memory_bank_tools import TOOLS, ToolResponse, call_tool

logger = logging.getLogger(__name__)

# ── Constants ────────────────────────────────────────────────

SERVER_NAME = "roo-memory-bank-mcp-server"
PROTOCOL_VERSION = "2024-11-05"
STREAM_LIMIT = 16 * 1024 * 1024  # max bytes per request line

INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


# ── JSON-RPC 2.0 helpers ─────────────────────────────────────


def jsonrpc_result(req_id, result):
    return {"jsonrpc": "2.0", "id": req_id, "result": result}


def jsonrpc_error(req_id, code, message):
    return {"jsonrpc": "2.0", "id": req_id, "error": {"code": code, "message": message}}


# ── Request handler ──────────────────────────────────────────


class MemoryBankServer:
    """Routes JSON-RPC requests to the memory bank tools."""

    def __init__(self, service: MemoryBankService) -> None:
        self.service = service

    async def handle_request(self, req: Any) -> dict | None:
        if not isinstance(req, dict):
            return jsonrpc_error(None, INVALID_REQUEST, "Request must be a JSON object")

        req_id = req.get("id")
        method = req.get("method", "")

        # Notifications (no id) get no response
        if req_id is None:
            if method == "notifications/initialized":
                logger.info("Client initialized")
            return None

        if method == "initialize":
            return jsonrpc_result(req_id, {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
            })

        if method == "ping":
            return jsonrpc_result(req_id, {})

        if method == "tools/list":
            return jsonrpc_result(req_id, {"tools": TOOLS})

        if method == "tools/call":
            params = req.get("params") or {}
            if not isinstance(params, dict):
                return jsonrpc_error(req_id, INVALID_PARAMS, "params must be an object")
            tool_name = params.get("name", "")
            logger.info("Received call for tool: %s", tool_name)
            try:
                response = await call_tool(self.service, tool_name, params.get("arguments"))
            except Exception as e:
                logger.exception("Tool %s failed", tool_name)
                response = ToolResponse.error(f"Internal error: {e}")
            return jsonrpc_result(req_id, response.to_dict())

        return jsonrpc_error(req_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    async def handle_line(self, line: str) -> str | None:
        """Handle one NDJSON line; returns the serialized response, if any."""
        line = line.strip()
        if not line:
            return None
        try:
            req = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning("Parse error: %s", e)
            return None
        if isinstance(req, dict):
            logger.debug("<- %s", req.get("method", "?"))
        response = await self.handle_request(req)
        if response is None:
            return None
        return json.dumps(response)


# ── Stdio transport (NDJSON) ─────────────────────────────────


async def run_stdio(
    service: MemoryBankService,
    stdin: IO | None = None,
    stdout: IO[str] | None = None,
    limit: int = STREAM_LIMIT,
) -> None:
    """Serve requests from stdin until EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    server = MemoryBankServer(service)
    logger.info("Memory bank MCP server running on stdio (root=%s)", service.root)

    reader = asyncio.StreamReader(limit=limit)
    protocol = asyncio.StreamReaderProtocol(reader)
    await asyncio.get_running_loop().connect_read_pipe(lambda: protocol, stdin)

    while True:
        try:
            raw = await reader.readline()
        except (ValueError, asyncio.LimitOverrunError) as e:
            # The oversized line is dropped by the reader; its id is unknown
            logger.error("Request line exceeds %d bytes, skipped: %s", limit, e)
            output = json.dumps(jsonrpc_error(None, INVALID_REQUEST, f"Request exceeds {limit} bytes"))
        else:
            if not raw:
                break
            try:
                output = await server.handle_line(raw.decode("utf-8"))
            except Exception as e:
                logger.error("Handler error: %s", e)
                continue
        if output:
            stdout.write(output + "\n")
            stdout.flush()

    logger.info("stdin closed, shutting down")
