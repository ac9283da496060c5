"""Entry point: python -m memory_bank [serve|status]

- No args / "serve": MCP server on stdio (what MCP clients launch)
- "status":          Print the memory bank status as JSON and exit
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from memory_bank.config import load_config


def _setup_logging(level: str) -> None:
    # stdout is the protocol channel; keep logs on stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _build_service():
    config = load_config()
    _setup_logging(config.log_level)

    from memory_bank.service import MemoryBankService

    return MemoryBankService(config.root_dir)


def _run_serve() -> None:
    """MCP stdio server mode."""
    service = _build_service()

    from memory_bank.server import run_stdio

    try:
        asyncio.run(run_stdio(service))
    except KeyboardInterrupt:
        pass
    except Exception:
        logging.getLogger(__name__).exception("Fatal error running server")
        sys.exit(1)


def _run_status() -> None:
    service = _build_service()
    result = asyncio.run(service.check_status())
    print(json.dumps(result.to_dict(), indent=2))


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "serve"

    if cmd == "serve":
        _run_serve()
    elif cmd == "status":
        _run_status()
    else:
        print("Usage: python -m memory_bank [serve|status]")
        print("  serve   - MCP server on stdio (default)")
        print("  status  - Print memory bank status as JSON")
        sys.exit(1)


if __name__ == "__main__":
    main()
