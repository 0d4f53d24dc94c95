"""
Tests for the interactive note editor.

Covers:
- Command parsing (quotes, flags, raw text)
- Autocomplete for commands, formats and item numbers
- Command execution against an editing session, including save on exit
"""

import pytest
from prompt_toolkit.document import Document

from tasknote.core import repository, service
from tasknote.core.editing import NoteEditor
from tasknote.core.models import ChecklistItem, CombinedNote, ListNote, TextNote
from tasknote.repl.completer import create_completer
from tasknote.repl.main import execute_command
from tasknote.repl.parser import parse_command
from tasknote.repl.session import EditSession, open_session


# --- Test Fixtures ---

@pytest.fixture(autouse=True)
def temp_db(monkeypatch, tmp_path):
    """Use temporary database for all tests."""
    db_path = tmp_path / "test_tasknote.db"
    monkeypatch.setattr(repository, "DB_PATH", db_path)
    monkeypatch.setattr(repository, "DB_DIR", tmp_path)
    yield db_path


@pytest.fixture
def session():
    task = service.create_task("Pack for trip")
    return open_session(task.id, preserve_content=True)


def run(session, line):
    return execute_command(session, parse_command(line))


def texts(session):
    return [item.text for item in session.editor.items]


# --- Parser ---

def test_parse_simple_command():
    result = parse_command("done 2")
    assert result.command == "done"
    assert result.args == ["2"]
    assert result.int_arg(0) == 2


def test_parse_quoted_args():
    result = parse_command('edit 2 "Buy oat milk"')
    assert result.args == ["2", "Buy oat milk"]


def test_parse_flags():
    result = parse_command("switch list --Discard --yes")
    assert result.args == ["list"]
    assert result.flags == {"discard": True, "yes": True}


def test_parse_keeps_rest_verbatim():
    result = parse_command("text  Call at 5,  don't forget")
    assert result.command == "text"
    assert result.rest == "Call at 5,  don't forget"


def test_parse_unclosed_quote_falls_back():
    result = parse_command('add "Buy milk')
    assert result.args == ['"Buy', "milk"]


def test_parse_empty_and_case():
    assert parse_command("   ").command == ""
    assert parse_command("SHOW").command == "show"


def test_int_arg_invalid():
    result = parse_command("done two")
    assert result.int_arg(0) is None
    assert result.int_arg(5) is None


def test_text_after_keeps_dash_words():
    result = parse_command("add Try --force first")
    assert result.flags == {"force": True}
    assert result.text_after() == "Try --force first"


def test_text_after_unquotes_single_token():
    assert parse_command('add "Buy  milk"').text_after() == "Buy  milk"
    assert parse_command('edit 2 ""').text_after(skip=1) == ""
    assert parse_command("edit 2 Buy oat milk").text_after(skip=1) == "Buy oat milk"
    assert parse_command("edit 2").text_after(skip=1) == ""


# --- Completer ---

def completions(text, session=None):
    completer = create_completer(session)
    doc = Document(text, cursor_position=len(text))
    return [c.text for c in completer.get_completions(doc, None)]


def test_command_completion():
    assert "switch" in completions("sw")
    assert set(completions("e")) == {"edit", "exit"}


def test_switch_format_completion():
    assert completions("switch ") == ["text", "list", "both"]
    assert completions("switch b") == ["both"]


def test_switch_flag_completion():
    assert completions("switch list --d") == ["--discard"]
    assert "--yes" in completions("switch list ")


def test_item_number_completion(session):
    session.editor.add_item("a")
    session.editor.add_item("b")

    assert completions("done ", session) == ["1", "2"]
    assert completions("done 1 ", session) == []
    assert completions("done ") == []


# --- Execution ---

def test_add_done_and_mv(session):
    assert run(session, "add passport")
    run(session, 'add "phone charger"')
    run(session, "add socks")
    run(session, "done 1")
    run(session, "mv 3 1")

    assert texts(session) == ["socks", "passport", "phone charger"]
    assert session.editor.item_at(2).completed is True
    assert session.dirty is True


def test_add_and_edit_keep_dash_words(session):
    run(session, "add Use --force")
    run(session, "edit 1 Retry with --no-cache")
    run(session, "add --verbose")

    assert texts(session) == ["Retry with --no-cache", "--verbose"]


def test_done_on_sparse_orders(session, capsys):
    """Items loaded with gaps in their orders still toggle cleanly by position."""
    sparse = EditSession(
        task=session.task,
        editor=NoteEditor(ListNote(items=[
            ChecklistItem(id="a", text="passport", order=5),
            ChecklistItem(id="b", text="charger", order=9),
        ])),
    )

    run(sparse, "done 1")
    run(sparse, "done 2")
    run(sparse, "edit 2 phone charger")

    out = capsys.readouterr().out
    assert "Error" not in out
    assert "Marked done" in out
    assert "Item 2 updated" in out
    assert [(item.text, item.order, item.completed) for item in sparse.editor.items] == [
        ("passport", 0, True),
        ("phone charger", 1, True),
    ]


def test_edit_and_rm(session):
    run(session, "add passport")
    run(session, "add charger")

    run(session, "edit 2 phone charger")
    run(session, "rm 1")

    assert texts(session) == ["phone charger"]


def test_bad_item_number_prints_error(session, capsys):
    run(session, "done 3")
    assert "No checklist item #3" in capsys.readouterr().out


def test_text_on_checklist_prints_error(session, capsys):
    run(session, "text hello")
    assert "switch to 'text' or 'both'" in capsys.readouterr().out
    assert session.dirty is False


def test_switch_and_text(session):
    run(session, "add passport")
    run(session, "switch both")
    run(session, "text Leave at 6")

    assert isinstance(session.note, CombinedNote)
    assert session.note.content == "Leave at 6"
    assert texts(session) == ["passport"]


def test_lossy_switch_asks_first(session, monkeypatch):
    run(session, "add passport")

    monkeypatch.setattr("builtins.input", lambda prompt="": "n")
    run(session, "switch text")
    assert isinstance(session.note, ListNote)

    monkeypatch.setattr("builtins.input", lambda prompt="": "y")
    run(session, "switch text")
    assert session.note == TextNote(content="")


def test_switch_yes_skips_confirmation(session, monkeypatch):
    def fail(prompt=""):
        raise AssertionError("should not ask")

    run(session, "add passport")
    monkeypatch.setattr("builtins.input", fail)
    run(session, "switch both --discard --yes")

    assert session.note == CombinedNote(content="", items=[])


def test_switch_unknown_format(session, capsys):
    run(session, "switch table")
    assert "Invalid note format" in capsys.readouterr().out
    assert isinstance(session.note, ListNote)


def test_unknown_command(session, capsys):
    assert run(session, "frobnicate") is True
    assert "Unknown command" in capsys.readouterr().out


def test_save_writes_notes(session):
    run(session, "add passport")
    run(session, "save")

    assert session.dirty is False
    assert [item.text for item in service.load_notes(session.task.id).items] == ["passport"]


def test_exit_saves_changes(session):
    run(session, "add passport")

    assert run(session, "exit") is False
    assert [item.text for item in service.load_notes(session.task.id).items] == ["passport"]


def test_prompt_shows_format_and_unsaved_marker(session):
    task_id = session.task.id
    assert session.get_prompt() == f"#{task_id} list> "
    run(session, "add passport")
    assert session.get_prompt() == f"#{task_id} list*> "
