"""Configuration loading from environment variables and memory-bank.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

MEMORY_BANK_DIR_NAME = "memory-bank"
_CONFIG_FILENAME = "memory-bank.toml"


def _default_root() -> Path:
    return Path.cwd() / MEMORY_BANK_DIR_NAME


@dataclass
class MemoryBankConfig:
    """Top-level server configuration."""

    root_dir: Path = field(default_factory=_default_root)
    log_level: str = "INFO"


def load_config(config_path: Path | None = None) -> MemoryBankConfig:
    """Load configuration from environment variables and optional memory-bank.toml.

    Priority: environment variables > memory-bank.toml > defaults.
    Relative directories are resolved against the current working directory.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        candidate = Path.cwd() / _CONFIG_FILENAME
        if candidate.exists():
            file_data = tomllib.loads(candidate.read_text())

    section = file_data.get("memory_bank", {})

    root_dir = os.getenv("MEMORY_BANK_DIR", section.get("root_dir"))
    root = Path(root_dir).expanduser() if root_dir else _default_root()
    if not root.is_absolute():
        root = Path.cwd() / root

    return MemoryBankConfig(
        root_dir=root,
        log_level=str(os.getenv("MEMORY_BANK_LOG_LEVEL", section.get("log_level", "INFO"))),
    )
