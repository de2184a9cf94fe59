import io

import pytest

from pipenet.console import Console
from pipenet.pipe import Pipe


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out, io.StringIO()), out


def test_ids_increase():
    first = Pipe()
    second = Pipe()
    assert second.id == first.id + 1


def test_from_console_reads_all_fields():
    console, out = make_console("Main line\n12.5\n0.8\n1\n")
    pipe = Pipe.from_console(console)
    assert pipe.name == "Main line"
    assert pipe.length == 12.5
    assert pipe.diameter == 0.8
    assert pipe.in_repair is True
    assert "Enter pipe name: " in out.getvalue()


def test_from_console_retries_invalid_state():
    console, out = make_console("P\n1\n1\n3\n2\n")
    pipe = Pipe.from_console(console)
    assert pipe.in_repair is False
    assert "Type a number (1 - 2): " in out.getvalue()


def test_edit_changes_state():
    pipe = Pipe("p", 1.0, 1.0, False)
    console, _ = make_console("1\n")
    pipe.edit(console)
    assert pipe.in_repair is True


def test_describe_contains_fields():
    pipe = Pipe("North", 3.0, 2.0, True)
    text = pipe.describe()
    assert f"Pipe information: (ID: {pipe.id})\n" in text
    assert "Name: North\n" in text
    assert "State: Under repair\n" in text
    assert str(pipe) == text


def test_describe_operational():
    assert "State: Operational\n" in Pipe("x").describe()


def test_to_record_format():
    assert Pipe("a", 1.5, 2.0, True).to_record() == ["a", "1.5 2 1"]


def test_record_round_trip():
    original = Pipe("gas pipe 7", 120.25, 1.4, False)
    restored = Pipe.from_record(original.to_record())
    assert restored == original
    assert restored.id != original.id


def test_from_record_truncated():
    with pytest.raises(ValueError):
        Pipe.from_record(["only name"])


def test_from_record_bad_flag():
    with pytest.raises(ValueError):
        Pipe.from_record(["n", "1 2 yes"])