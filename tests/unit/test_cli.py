"""
Tests for the fps CLI.

This test suite covers:
1. Help output
2. Preflight exit codes
3. Registry query output
4. Settings file generation
5. Confirmation prompt parsing
"""

import json
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

from fps.cli import main
from fps.commands.query import query_command
from flexcheck.prompt import accept_default, confirm, parse_answer


class TestCLI:
    """Test CLI entry points."""

    def test_help(self, capsys):
        """-h should print usage and exit 0."""
        assert main(["-h"]) == 0
        assert "fps - Flex plugin scripts" in capsys.readouterr().out

    def test_check_outside_project(self, capsys):
        """Running checks without package.json should exit 1 with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            assert main(["-C", "-d", tmpdir]) == 1
            assert "Error: Required file not found" in capsys.readouterr().err

    def test_check_missing_app_config(self, capsys, monkeypatch):
        """A failed check should exit 1."""
        with tempfile.TemporaryDirectory() as tmpdir:
            monkeypatch.setenv("HOME", str(Path(tmpdir) / "home"))
            (Path(tmpdir) / "package.json").write_text(json.dumps({"name": "plugin-x"}))

            assert main(["-d", tmpdir, "--noconfirm"]) == 1
            assert "appConfig.js" in capsys.readouterr().err

    def test_init_config(self, capsys):
        """--init-config should write preflight.toml once."""
        with tempfile.TemporaryDirectory() as tmpdir:
            assert main(["--init-config", "-d", tmpdir]) == 0
            assert (Path(tmpdir) / "preflight.toml").exists()

            assert main(["--init-config", "-d", tmpdir]) == 1
            assert "already exists" in capsys.readouterr().err

    def test_query_lists_plugins(self, capsys):
        """-Q should list registry entries."""
        with tempfile.TemporaryDirectory() as tmpdir:
            home = Path(tmpdir)
            plugins_json = home / ".twilio-cli" / "flex" / "plugins.json"
            plugins_json.parent.mkdir(parents=True)
            plugins_json.write_text(
                json.dumps(
                    {
                        "plugins": [
                            {"name": "plugin-a", "dir": "/a", "port": 3000},
                            {"name": "plugin-bb", "dir": "/b", "port": 0},
                        ]
                    }
                )
            )

            assert query_command(SimpleNamespace(verbose=False), home=home) == 0

            lines = capsys.readouterr().out.splitlines()
            assert lines == ["plugin-a   /a :3000", "plugin-bb  /b"]

    def test_query_creates_empty_registry(self, capsys):
        """-Q on a fresh machine should create the registry and print nothing."""
        with tempfile.TemporaryDirectory() as tmpdir:
            home = Path(tmpdir)

            assert query_command(SimpleNamespace(verbose=False), home=home) == 0
            assert capsys.readouterr().out == ""
            assert (home / ".twilio-cli" / "flex" / "plugins.json").exists()


class TestPrompt:
    """Test confirmation prompt helpers."""

    def test_parse_answer(self):
        assert parse_answer("", True) is True
        assert parse_answer("", False) is False
        assert parse_answer("Y", False) is True
        assert parse_answer("no", True) is False
        assert parse_answer("maybe", True) is None

    @pytest.mark.asyncio
    async def test_confirm_reasks_on_garbage(self):
        """Unrecognized answers should be asked again."""
        answers = iter(["maybe", "n"])
        prompts = []

        def read(prompt):
            prompts.append(prompt)
            return next(answers)

        assert await confirm("Update?", True, read=read) is False
        assert prompts == ["Update? [Y/n] ", "Update? [Y/n] "]

    @pytest.mark.asyncio
    async def test_confirm_eof_uses_default(self):
        def read(prompt):
            raise EOFError

        assert await confirm("Update?", True, read=read) is True

    @pytest.mark.asyncio
    async def test_accept_default(self):
        assert await accept_default("Update?", True) is True
