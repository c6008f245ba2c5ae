from dataclasses import dataclass
from typing import Any, TypeGuard


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Occupied:
    key: Any
    value: Any


# Deleted entry. Keeps key and value but is logically absent.
@dataclass(frozen=True)
class Tombstone:
    key: Any
    value: Any


Slot = Empty | Occupied | Tombstone


@dataclass(frozen=True)
class NotFound:
    pass


def is_occupied(slot: Slot) -> TypeGuard[Occupied]:
    return isinstance(slot, Occupied)


def empty_slots(capacity: int) -> list[Slot]:
    return [Empty() for _ in range(capacity)]


def describe_slot(index: int, slot: Slot) -> str:
    match slot:
        case Empty():
            return f"{index}\tempty"
        case Occupied(key, value):
            return f"{index}\t{key}, {value}"
        case Tombstone(key, value):
            return f"{index}\t{key}, {value} (deleted)"
        case _:
            raise Exception("Wrong slot type", type(slot), slot)
