import sys
from typing import Any

from .slot import Slot, describe_slot


def _out(format: str, *args: Any):
    sys.stdout.write(format.format(*args))


def _trace(format: str, *args: Any):
    # looked up per call so redirected stderr sees the trace
    sys.stderr.write(format.format(*args))


def print_table(table: Any, name: str):
    _out("== {0:s} ==\n", name)

    for line in table.describe():
        _out("{0:s}\n", line)


def trace_probe(op: str, index: int, slot: Slot):
    _trace("{0:<8s} {1:s}\n", op, describe_slot(index, slot))


def trace_rehash(old_capacity: int, new_capacity: int, live: int):
    _trace("rehash   {0:d} -> {1:d} ({2:d} live)\n", old_capacity, new_capacity, live)
