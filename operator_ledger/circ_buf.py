"""Fixed-size circular buffer of operator history entries ordered by epoch."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from operator_ledger.entry import OperatorHistoryEntry
from operator_ledger.errors import DuplicateEpochError, EpochOutOfRangeError

OPERATOR_HISTORY_ENTRY_MAX_ITEMS = 512
_RESERVED_LEN = 328
_INDEX = struct.Struct("<Q")
_DEFAULT_EPOCH = OperatorHistoryEntry().epoch


def _search(arr: Sequence[OperatorHistoryEntry], epoch: int, start: int, count: int) -> int | None:
    """Binary search over `count` slots starting at `start`, wrapping around."""
    length = len(arr)
    left, right = 0, count
    while left < right:
        mid = (left + right) // 2
        found = arr[(start + mid) % length].epoch
        if found == epoch:
            return None
        if found < epoch:
            left = mid + 1
        else:
            right = mid
    return (start + left) % length


def find_insert_position(
    arr: Sequence[OperatorHistoryEntry], idx: int, epoch: int
) -> int | None:
    """Slot where `epoch` belongs, or None if it is already present or arr is empty."""
    length = len(arr)
    if length == 0:
        return None
    if idx != length - 1 and arr[idx + 1].epoch == _DEFAULT_EPOCH:
        # Buffer not yet full: search the filled prefix without wraparound.
        position = _search(arr, epoch, 0, idx + 1)
    else:
        # idx + 1 holds the smallest epoch.
        position = _search(arr, epoch, idx + 1, length)
    if position is None or arr[position].epoch == epoch:
        return None
    return position


class CircBuf:
    """Circular buffer whose current index points at the latest entry."""

    SIZE = _INDEX.size + 1 + OPERATOR_HISTORY_ENTRY_MAX_ITEMS * OperatorHistoryEntry.SIZE + _RESERVED_LEN

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._index = 0
        self._is_empty = False
        self._arr = [OperatorHistoryEntry() for _ in range(OPERATOR_HISTORY_ENTRY_MAX_ITEMS)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircBuf):
            return NotImplemented
        return (self._index, self._is_empty, self._arr) == (other._index, other._is_empty, other._arr)

    def __repr__(self) -> str:
        return f"CircBuf(index={self._index}, is_empty={self._is_empty})"

    def index(self) -> int:
        return self._index

    def is_empty(self) -> bool:
        return self._is_empty

    def push(self, item: OperatorHistoryEntry) -> None:
        """Advance the index and store `item` there, overwriting the oldest slot."""
        self._index = (self._index + 1) % len(self._arr)
        self._arr[self._index] = item
        self._is_empty = False

    def last(self) -> OperatorHistoryEntry | None:
        """The entry at the current index, or None when empty."""
        if self._is_empty:
            return None
        return self._arr[self._index]

    def entries(self) -> list[OperatorHistoryEntry]:
        """The underlying slot list; assigning into it modifies the buffer."""
        return self._arr

    def insert(self, entry: OperatorHistoryEntry, epoch: int) -> None:
        """Insert `entry` at the sorted position of `epoch`.

        Raises EpochOutOfRangeError if the buffer is empty or `epoch` lies outside
        the held range, and DuplicateEpochError if `epoch` is already present.
        """
        if self._is_empty:
            raise EpochOutOfRangeError()

        length = len(self._arr)
        next_i = (self._index + 1) % length
        if self._arr[next_i].epoch == _DEFAULT_EPOCH:
            min_epoch = self._arr[0].epoch
        else:
            min_epoch = self._arr[next_i].epoch

        if epoch < min_epoch or epoch > self._arr[self._index].epoch:
            raise EpochOutOfRangeError()

        insert_pos = find_insert_position(self._arr, self._index, epoch)
        if insert_pos is None:
            raise DuplicateEpochError()

        end_index = self._index + length if self._index < insert_pos else self._index
        for i in range(end_index, insert_pos - 1, -1):
            slot = i % length
            self._arr[(slot + 1) % length] = self._arr[slot]

        self._arr[insert_pos] = entry
        self._index = (self._index + 1) % length

    def to_bytes(self) -> bytes:
        return b"".join(
            (
                _INDEX.pack(self._index),
                bytes([1 if self._is_empty else 0]),
                *(entry.to_bytes() for entry in self._arr),
                bytes(_RESERVED_LEN),
            )
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> CircBuf:
        if len(data) != cls.SIZE:
            raise ValueError(f"circular buffer needs {cls.SIZE} bytes, got {len(data)}")
        view = memoryview(data)
        (index,) = _INDEX.unpack_from(view)
        if index >= OPERATOR_HISTORY_ENTRY_MAX_ITEMS:
            raise ValueError(f"index {index} is outside the buffer")
        start = _INDEX.size + 1
        size = OperatorHistoryEntry.SIZE
        buf = cls()
        buf._index = index
        buf._is_empty = view[_INDEX.size] != 0
        buf._arr = [
            OperatorHistoryEntry.from_bytes(bytes(view[offset:offset + size]))
            for offset in range(start, start + OPERATOR_HISTORY_ENTRY_MAX_ITEMS * size, size)
        ]
        return buf