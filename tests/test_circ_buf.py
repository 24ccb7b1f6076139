import pytest
from hypothesis import given
from hypothesis import strategies as st

from operator_ledger.circ_buf import (
    OPERATOR_HISTORY_ENTRY_MAX_ITEMS,
    CircBuf,
    find_insert_position,
)
from operator_ledger.entry import OperatorHistoryEntry
from operator_ledger.errors import DuplicateEpochError, EpochOutOfRangeError


def _entry(epoch):
    return OperatorHistoryEntry(activated_stake_lamports=epoch * 10, rank=epoch, epoch=epoch)


def _filled(epochs):
    buf = CircBuf()
    for epoch in epochs:
        buf.push(_entry(epoch))
    return buf


def _ordered_epochs(buf):
    arr = buf.entries()
    start = buf.index() + 1
    return [entry.epoch for entry in arr[start:] + arr[:start]]


def test_new_buffer():
    buf = CircBuf()
    assert buf.index() == 0
    assert buf.is_empty() is False
    assert buf.last() == OperatorHistoryEntry()
    assert len(buf.entries()) == OPERATOR_HISTORY_ENTRY_MAX_ITEMS == 512


def test_push_advances_index():
    buf = CircBuf()
    entry = _entry(1)
    buf.push(entry)
    assert buf.index() == 1
    assert buf.last() == entry


def test_push_wraps_around():
    buf = _filled(range(1, OPERATOR_HISTORY_ENTRY_MAX_ITEMS + 1))
    assert buf.index() == 0
    assert buf.last().epoch == OPERATOR_HISTORY_ENTRY_MAX_ITEMS


def test_entries_is_mutable_view():
    buf = CircBuf()
    entry = _entry(9)
    buf.entries()[5] = entry
    assert buf.entries()[5] == entry


def test_insert_into_partial_buffer():
    buf = _filled([1, 2, 4])
    buf.insert(_entry(3), 3)
    assert buf.index() == 4
    assert [e.epoch for e in buf.entries()[:5]] == [0, 1, 2, 3, 4]
    assert buf.last() == _entry(4)


def test_insert_duplicate():
    buf = _filled([1, 2, 4])
    with pytest.raises(DuplicateEpochError):
        buf.insert(_entry(2), 2)


def test_insert_above_range():
    buf = _filled([1, 2, 4])
    with pytest.raises(EpochOutOfRangeError):
        buf.insert(_entry(5), 5)


def test_insert_into_empty_buffer():
    data = bytearray(CircBuf().to_bytes())
    data[8] = 1
    buf = CircBuf.from_bytes(bytes(data))
    assert buf.is_empty() is True
    assert buf.last() is None
    with pytest.raises(EpochOutOfRangeError):
        buf.insert(_entry(1), 1)


def test_insert_with_wraparound():
    epochs = [e for e in range(1, 601) if e != 550]
    buf = _filled(epochs)
    before = buf.index()
    buf.insert(_entry(550), 550)
    ordered = _ordered_epochs(buf)
    assert buf.index() == (before + 1) % OPERATOR_HISTORY_ENTRY_MAX_ITEMS
    assert all(a < b for a, b in zip(ordered, ordered[1:]))
    assert 550 in ordered
    assert buf.last().epoch == 600


def test_insert_below_range_after_wrap():
    buf = _filled(range(1, 601))
    with pytest.raises(EpochOutOfRangeError):
        buf.insert(_entry(1), 1)


@given(
    st.lists(st.integers(1, 60000), min_size=3, max_size=40, unique=True).map(sorted),
    st.data(),
)
def test_insert_missing_epoch_restores_order(epochs, data):
    missing = data.draw(st.integers(1, len(epochs) - 2))
    buf = _filled(epochs[:missing] + epochs[missing + 1:])
    buf.insert(_entry(epochs[missing]), epochs[missing])
    assert buf.index() == len(epochs)
    assert [e.epoch for e in buf.entries()[1:len(epochs) + 1]] == epochs
    assert buf.entries()[0] == OperatorHistoryEntry()


def test_find_insert_position_empty():
    assert find_insert_position([], 0, 5) is None


def test_find_insert_position_partial():
    arr = [_entry(e) for e in (0, 1, 2, 4)] + [OperatorHistoryEntry()] * 2
    assert find_insert_position(arr, 3, 3) == 3
    assert find_insert_position(arr, 3, 2) is None


def test_bytes_round_trip():
    buf = _filled([3, 7, 11])
    restored = CircBuf.from_bytes(buf.to_bytes())
    assert restored == buf
    assert len(buf.to_bytes()) == CircBuf.SIZE


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        CircBuf.from_bytes(bytes(100))


def test_from_bytes_index_out_of_range():
    data = bytearray(CircBuf().to_bytes())
    data[0:8] = (OPERATOR_HISTORY_ENTRY_MAX_ITEMS).to_bytes(8, "little")
    with pytest.raises(ValueError):
        CircBuf.from_bytes(bytes(data))