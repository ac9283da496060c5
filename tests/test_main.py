"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from memory_bank.__main__ import main


class TestMain:
    def test_status_command(self, tmp_path: Path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("MEMORY_BANK_DIR", raising=False)
        (tmp_path / "memory-bank").mkdir()
        (tmp_path / "memory-bank" / "progress.md").write_text("x", encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["memory-bank-mcp", "status"])

        main()
        out = json.loads(capsys.readouterr().out)
        assert out == {"exists": True, "files": ["progress.md"]}

    def test_unknown_command(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["memory-bank-mcp", "bogus"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 1
        assert "Usage" in capsys.readouterr().out
