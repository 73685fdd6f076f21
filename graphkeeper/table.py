"""Open-addressing hash table mapping vertex names to their slots."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_SIZE_MODULUS = 1 << 64


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _signed_bytes(key: str) -> Iterator[int]:
    for byte in key.encode("utf-8"):
        yield byte - 256 if byte > 127 else byte


def first_hash(key: str) -> int:
    """Primary hash of a key, as a signed 32-bit integer."""
    result = 0
    for char in _signed_bytes(key):
        result ^= char
        result = _to_int32((result << 3) ^ (result >> 13) ^ (result >> 5))
    return result


def second_hash(msize: int, key: str) -> int:
    """Probe step: the smallest positive step coprime with the table size.

    One is coprime with every size, so the table probes linearly.
    """
    step = 1
    while math.gcd(step, msize) != 1:
        step += 1
    return step


def common_hash(msize: int, key: str, iteration: int) -> int:
    """Hash of a key on the given probe iteration."""
    return _to_int32(first_hash(key) + second_hash(msize, key) * iteration)


def is_prime(number: int) -> bool:
    """Primality test used to size an expanded table.

    The trial bound is ``sqrt(number) + 1`` exclusive, so 2 is not reported
    as prime.
    """
    if number <= 1:
        return False
    bound = math.sqrt(number) + 1
    divisor = 2
    while divisor < bound:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def _position(hash_value: int, msize: int) -> int:
    return (hash_value % _SIZE_MODULUS) % msize


class SlotState(Enum):
    """State of one table slot."""

    FREE = 0
    BUSY = 1
    DELETED = -1


@dataclass
class KeySpace:
    """One slot of the table: a key with its vertex and adjacency list."""

    state: SlotState = SlotState.FREE
    key: str | None = None
    vertex: Any = None
    adjacency: list | None = None

    @property
    def busy(self) -> bool:
        return self.state is SlotState.BUSY

    def format(self) -> str:
        """Text of a busy slot: its key followed by its adjacency list."""
        if not self.busy:
            return ""
        items = "".join(f"{item} -> " for item in self.adjacency or ())
        return f"key {self.key}: {items}\n"


class Table:
    """Hash table with linear probing and tombstones for removed keys."""

    def __init__(self, msize: int) -> None:
        if msize < 1:
            raise ValueError("table size must be positive")
        self._slots = [KeySpace() for _ in range(msize)]
        self._count = 0

    @property
    def msize(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[KeySpace]:
        return (slot for slot in self._slots if slot.busy)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def _probe(self, key: str) -> Iterator[int]:
        msize = self.msize
        start = _position(first_hash(key), msize)
        position, iteration = start, 1
        while True:
            yield position
            position = _position(common_hash(msize, key, iteration), msize)
            iteration += 1
            if position == start:
                return

    def find(self, key: str) -> KeySpace | None:
        """Return the busy slot holding ``key``, or None."""
        for position in self._probe(key):
            slot = self._slots[position]
            if slot.state is SlotState.FREE:
                return None
            if slot.busy and slot.key == key:
                return slot
        return None

    def insert(self, key: str) -> KeySpace:
        """Place ``key`` in a slot with an empty adjacency list and return it.

        The table grows when full. Raises KeyError if the key is present.
        """
        if self._count == self.msize and key not in self:
            self.expand()
        if key in self:
            raise KeyError(key)
        for position in self._probe(key):
            slot = self._slots[position]
            if not slot.busy:
                slot.state = SlotState.BUSY
                slot.key = key
                slot.vertex = None
                slot.adjacency = []
                self._count += 1
                return slot
        raise RuntimeError(f"no free slot for {key!r}")

    def _locate(self, key: str) -> KeySpace:
        slot = self.find(key)
        if slot is None:
            raise KeyError(key)
        return slot

    def remove(self, key: str) -> None:
        """Delete ``key`` and its data. Raises KeyError if absent."""
        slot = self._locate(key)
        slot.state = SlotState.DELETED
        slot.key = None
        slot.vertex = None
        slot.adjacency = None
        self._count -= 1

    def release(self, key: str) -> KeySpace:
        """Delete ``key`` but hand back its data as a detached slot.

        Raises KeyError if absent.
        """
        slot = self._locate(key)
        detached = KeySpace(SlotState.BUSY, slot.key, slot.vertex, slot.adjacency)
        slot.state = SlotState.DELETED
        slot.key = None
        slot.vertex = None
        slot.adjacency = None
        self._count -= 1
        return detached

    def expand(self) -> None:
        """Grow to the next prime size above the current one, keeping data."""
        size = self.msize + 1
        while not is_prime(size):
            size += 1
        grown = Table(size)
        for slot in self:
            placed = grown.insert(slot.key)
            placed.vertex = slot.vertex
            placed.adjacency = slot.adjacency
        self._slots = grown._slots
        self._count = grown._count

    def format(self) -> str:
        """Text of every busy slot in slot order."""
        return "".join(slot.format() for slot in self)