"""A small fixed-capacity byte ring buffer used as the unit under test in the examples."""

from __future__ import annotations


class RingBuffer:
    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data = bytearray(capacity)
        self._head = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, value: int) -> bool:
        """Append a byte; returns False when the buffer is full."""
        if self._size == len(self._data):
            return False
        self._data[(self._head + self._size) % len(self._data)] = value
        self._size += 1
        return True

    def pop(self) -> int | None:
        if self._size == 0:
            return None
        value = self._data[self._head]
        self._head = (self._head + 1) % len(self._data)
        self._size -= 1
        return value

    def test_view(self) -> tuple[memoryview, int]:
        """Read-only view of the backing storage and the head index, for tests."""
        return memoryview(self._data).toreadonly(), self._head
