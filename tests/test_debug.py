import contextlib
import io

import pytest

from probetable.debug import print_table
from probetable.slot import Empty, Occupied, Tombstone, describe_slot
from probetable.table import ProbingTable, set_debug_trace_probing


@pytest.fixture
def trace_probing():
    set_debug_trace_probing(True)
    yield
    set_debug_trace_probing(False)


def test_describe_slot():
    assert describe_slot(0, Empty()) == "0\tempty"
    assert describe_slot(4, Occupied(4, "12")) == "4\t4, 12"
    assert describe_slot(4, Tombstone(4, "12")) == "4\t4, 12 (deleted)"


def test_describe():
    t = ProbingTable(4)
    t.insert(1, "one")
    t.insert(2, "two")
    t.delete(1)

    assert t.capacity == 4
    lines = t.describe()
    assert len(lines) == 4
    assert lines[0] == "0\tempty"
    assert lines[1] == "1\t1, one (deleted)"
    assert lines[2] == "2\t2, two"
    assert str(t) == "".join(line + "\n" for line in lines)


def test_print_table(capsys):
    t = ProbingTable(3)
    t.insert(2, "two")
    t.delete(2)

    print_table(t, "after delete")

    out = capsys.readouterr().out
    assert out == "== after delete ==\n0\tempty\n1\tempty\n2\t2, two (deleted)\n"


def test_trace_is_off_by_default(capsys):
    t = ProbingTable()
    t.insert(1, "one")
    t.find(1)

    assert capsys.readouterr().err == ""


def test_trace_probe(capsys, trace_probing):
    t = ProbingTable()
    t.insert(3, "a")
    capsys.readouterr()

    t.insert(13, "b")

    err = capsys.readouterr().err
    assert err.splitlines() == [
        "insert   3\t3, a",
        "insert   4\tempty",
    ]


def test_trace_rehash(capsys, trace_probing):
    t = ProbingTable(2)
    t.insert(0, "a")
    capsys.readouterr()

    t.insert(1, "b")

    err = capsys.readouterr().err
    assert "rehash   2 -> 4 (2 live)" in err.splitlines()


def test_trace_follows_redirected_stderr(trace_probing):
    t = ProbingTable()
    buf = io.StringIO()

    with contextlib.redirect_stderr(buf):
        t.insert(7, "x")

    assert buf.getvalue() == "insert   7\tempty\n"
