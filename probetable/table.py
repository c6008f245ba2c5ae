from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

from .debug import trace_probe, trace_rehash
from .slot import (
    Empty,
    NotFound,
    Occupied,
    Slot,
    Tombstone,
    describe_slot,
    empty_slots,
    is_occupied,
)


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 10


_debug_trace_probing = False


def set_debug_trace_probing(b: bool):
    global _debug_trace_probing
    _debug_trace_probing = b


class InvalidArgument(ValueError):
    pass


def _check_key(key: object):
    if key is None:
        raise InvalidArgument("The key cannot be None.")


@dataclass
class ProbingTable(Generic[K, V]):
    """Open-addressing map with linear probing and tombstone deletion.

    occupied_count counts every non-empty slot, tombstones included, and it
    alone decides when the table grows: once it exceeds half the capacity the
    storage is doubled and the live entries are reinserted. Deleting never
    shrinks the table or lowers the count.

    Not thread-safe. Callers sharing a table between threads must hold their
    own lock around every call.
    """

    occupied_count: int
    slots: list[Slot]

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgument(f"Capacity must be a positive int, got {capacity!r}.")
        self.slots = empty_slots(capacity)
        self.occupied_count = 0

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def slot_index(self, key: K) -> int:
        # % with a positive capacity is never negative, even for negative hashes
        return hash(key) % self.capacity

    def insert(self, key: K, value: V) -> bool:
        _check_key(key)

        for index, slot in self._probe("insert", key):
            match slot:
                case Empty():
                    self.slots[index] = Occupied(key, value)
                    self.occupied_count += 1
                    break
                case Tombstone():
                    # Already counted. An equal key further down the chain
                    # is not looked for.
                    self.slots[index] = Occupied(key, value)
                    break
                case Occupied(other, _) if other == key:
                    return False
        else:
            # wrapped around without finding a free slot
            return False

        if self.occupied_count > self.capacity // 2:
            self._rehash()

        return True

    def add_all(self, from_t: "ProbingTable[K, V]"):
        for key, value in from_t.items():
            self.insert(key, value)

    def find(self, key: K) -> V | NotFound:
        _check_key(key)

        index = self._locate(key)
        if index < 0:
            return NotFound()

        slot = self.slots[index]
        assert is_occupied(slot)
        return slot.value

    def contains(self, key: K) -> bool:
        return not isinstance(self.find(key), NotFound)

    def delete(self, key: K) -> bool:
        _check_key(key)

        if not self.contains(key):
            return False

        for index, slot in self._probe("delete", key):
            match slot:
                case Occupied(other, value) if other == key:
                    # occupied_count is left alone, the slot is still in use
                    self.slots[index] = Tombstone(other, value)
                    return True

        raise KeyError(key)

    def get_hash(self, key: K) -> int:
        """Bucket the key hashes to before probing, or -1 if absent."""
        _check_key(key)

        if self.contains(key):
            return self.slot_index(key)
        return -1

    def get_location(self, key: K) -> int:
        """Slot the key is actually stored in after probing, or -1 if absent."""
        _check_key(key)

        return self._locate(key)

    def clear(self):
        self.slots = empty_slots(self.capacity)
        self.occupied_count = 0

    def items(self) -> Iterator[tuple[K, V]]:
        for slot in self.slots:
            if is_occupied(slot):
                yield slot.key, slot.value

    def keys(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def describe(self) -> list[str]:
        return [describe_slot(index, slot) for index, slot in enumerate(self.slots)]

    def _probe(self, op: str, key: K) -> Iterator[tuple[int, Slot]]:
        index = self.slot_index(key)
        for _ in range(self.capacity):
            slot = self.slots[index]
            if _debug_trace_probing:
                trace_probe(op, index, slot)
            yield index, slot
            index = (index + 1) % self.capacity

    def _locate(self, key: K) -> int:
        for index, slot in self._probe("find", key):
            match slot:
                case Empty():
                    break
                case Occupied(other, _) if other == key:
                    return index
        return -1

    def _rehash(self):
        old_slots = self.slots
        live = [slot for slot in old_slots if is_occupied(slot)]

        self.slots = empty_slots(len(old_slots) * 2)
        self.occupied_count = 0

        if _debug_trace_probing:
            trace_rehash(len(old_slots), self.capacity, len(live))

        for slot in live:
            self.insert(slot.key, slot.value)

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return sum(1 for slot in self.slots if is_occupied(slot))

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.describe())
