"""
End-to-end tests for the tasknote CLI.

Each test runs the CLI as a subprocess against a database in tmp_path.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def cli(tmp_path):
    """Run CLI commands against a temporary data directory."""
    env = os.environ.copy()
    env["TASKNOTE_DATA_DIR"] = str(tmp_path)
    env["TASKNOTE_DB_PATH"] = str(tmp_path / "test_tasknote.db")
    env.pop("TASKNOTE_PRESERVE_CONTENT", None)
    env["PYTHONIOENCODING"] = "utf-8"

    def run(*args, input=None):
        return subprocess.run(
            [sys.executable, "-m", "tasknote.cli.main", *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            input=input,
            env=env,
            cwd=PROJECT_ROOT,
        )

    return run


def json_out(result):
    assert result.returncode == 0, result.stderr
    return json.loads(result.stdout)


def test_version(cli):
    result = cli("version")
    assert result.returncode == 0
    assert "tasknote v" in result.stdout


def test_add_and_ls(cli):
    result = cli("add", "Pack for trip")
    assert result.returncode == 0
    assert "Created task" in result.stdout

    tasks = json_out(cli("ls", "--json"))
    assert len(tasks) == 1
    assert tasks[0]["title"] == "Pack for trip"
    assert tasks[0]["notes"] == {"format": "list", "items": []}


def test_add_empty_title_fails(cli):
    result = cli("add", "   ")
    assert result.returncode == 1
    assert "cannot be empty" in result.stderr


def test_checklist_commands(cli):
    cli("add", "Pack for trip")
    cli("check", "add", "1", "passport")
    cli("check", "add", "1", "charger")
    cli("check", "done", "1", "2")

    notes = json_out(cli("check", "mv", "1", "2", "1", "--json"))

    assert [item["text"] for item in notes["items"]] == ["charger", "passport"]
    assert [item["order"] for item in notes["items"]] == [0, 1]
    assert notes["items"][0]["completed"] is True


def test_show_raw(cli):
    cli("add", "Pack for trip")
    cli("check", "add", "1", "passport")
    cli("check", "done", "1", "1")

    result = cli("show", "1", "--raw")

    assert result.returncode == 0
    assert "1: Pack for trip" in result.stdout
    assert "1. [x] passport" in result.stdout


def test_show_missing_task(cli):
    result = cli("show", "42")
    assert result.returncode == 1
    assert "Task 42 not found" in result.stderr


def test_switch_and_text(cli):
    cli("add", "Pack for trip")
    cli("check", "add", "1", "passport")

    notes = json_out(cli("switch", "1", "both", "--json"))
    assert notes["format"] == "both"
    assert notes["items"][0]["text"] == "passport"

    notes = json_out(cli("text", "1", "Leave at 6", "--json"))
    assert notes["content"] == "Leave at 6"


def test_lossy_switch_needs_confirmation(cli):
    cli("add", "Pack for trip")
    cli("check", "add", "1", "passport")

    result = cli("switch", "1", "text", input="n\n")
    assert "Cancelled" in result.stdout

    notes = json_out(cli("switch", "1", "text", "--yes", "--json"))
    assert notes == {"format": "text", "content": ""}


def test_switch_invalid_format(cli):
    cli("add", "Pack for trip")
    result = cli("switch", "1", "table")
    assert result.returncode == 1
    assert "Invalid note format" in result.stderr


def test_export_import(cli):
    cli("add", "First")
    cli("add", "Second")
    cli("check", "add", "1", "passport")

    exported = cli("export", "1").stdout.strip()
    assert json.loads(exported)["items"][0]["text"] == "passport"

    notes = json_out(cli("import", "2", "--json", input=exported))
    assert notes["items"][0]["text"] == "passport"


def test_import_plain_text(cli):
    cli("add", "First")
    notes = json_out(cli("import", "1", "an old plain note", "--json"))
    assert notes == {"format": "text", "content": "an old plain note"}


def test_rm(cli):
    cli("add", "Pack for trip")
    result = cli("rm", "1")
    assert result.returncode == 0
    assert json_out(cli("ls", "--json")) == []


def test_migrate_with_nothing_to_do(cli):
    cli("add", "Pack for trip")
    result = cli("migrate")
    assert result.returncode == 0
    assert "No legacy notes" in result.stdout


def test_edit_piped_input(cli):
    """The editor falls back to plain input() without a TTY and saves on EOF."""
    cli("add", "Pack for trip")

    result = cli("edit", "1", input="add passport\nadd socks\nmv 2 1\n")
    assert result.returncode == 0, result.stderr

    notes = json_out(cli("export", "1"))
    assert [item["text"] for item in notes["items"]] == ["socks", "passport"]


def test_rename(cli):
    cli("add", "Pack for trip")
    cli("check", "add", "1", "passport")

    result = cli("rename", "1", "Pack for the beach")
    assert result.returncode == 0

    task = json_out(cli("show", "1", "--json"))
    assert task["title"] == "Pack for the beach"
    assert task["notes"]["items"][0]["text"] == "passport"
