import io
import os

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
)

from minitools.watcher import ChangePrinter, main, watch

PARENT = os.path.join(os.sep, "data", "dir")
FILE = os.path.join(PARENT, "new.txt")


def test_created_event():
    out = io.StringIO()
    ChangePrinter(out).on_created(FileCreatedEvent(FILE))
    assert out.getvalue() == f"Path: {PARENT}\nCreated: new.txt\n"


def test_deleted_event():
    out = io.StringIO()
    ChangePrinter(out).on_deleted(FileDeletedEvent(FILE))
    assert out.getvalue() == f"Path: {PARENT}\nDeleted: new.txt\n"


def test_modified_file_event():
    out = io.StringIO()
    ChangePrinter(out).on_modified(FileModifiedEvent(FILE))
    assert out.getvalue() == f"Path: {PARENT}\nModified: new.txt\n"


def test_modified_directory_event_is_silent():
    out = io.StringIO()
    ChangePrinter(out).on_modified(DirModifiedEvent(PARENT))
    assert out.getvalue() == ""


def test_events_accumulate_in_order():
    out = io.StringIO()
    printer = ChangePrinter(out)
    printer.on_created(FileCreatedEvent(FILE))
    printer.on_deleted(FileDeletedEvent(FILE))
    lines = out.getvalue().splitlines()
    assert lines[1] == "Created: new.txt"
    assert lines[3] == "Deleted: new.txt"
    assert len(lines) == 4


def test_watch_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        watch(tmp_path / "absent")


def test_main_argument_errors(tmp_path, capsys):
    assert main([]) == 1
    assert main([str(tmp_path / "absent")]) == 1
    assert "watch file descriptor" in capsys.readouterr().err