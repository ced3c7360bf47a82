"""Level 3: Python protocol surface and configuration hooks."""

from __future__ import annotations

from fixed_size_buffer import FixedSizeBuffer
from fixed_size_buffer.config_manager.buffer_config import BufferConfig


def test_len_matches_size() -> None:
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(3)
    assert len(buffer) == 0

    buffer.extend([1, 2, 3, 4])
    assert len(buffer) == buffer.size() == 3


def test_truthiness_follows_emptiness() -> None:
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(2)
    assert not buffer

    buffer.write(0)
    assert buffer


def test_iteration_does_not_consume() -> None:
    """Iterating walks the snapshot, oldest first."""
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(3)
    buffer.extend([1, 2, 3, 4, 5])

    assert list(buffer) == [3, 4, 5]
    assert list(buffer) == [3, 4, 5]
    assert buffer.size() == 3


def test_drain_consumes_everything() -> None:
    buffer: FixedSizeBuffer[str] = FixedSizeBuffer(4)
    buffer.extend("abc")

    assert list(buffer.drain()) == ["a", "b", "c"]
    assert buffer.empty() is True
    assert buffer.read_count == 3


def test_drain_is_lazy() -> None:
    """Values written while draining are picked up."""
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(4)
    buffer.write(1)

    seen = []
    for value in buffer.drain():
        seen.append(value)
        if value < 3:
            buffer.write(value + 1)

    assert seen == [1, 2, 3]


def test_clear_discards_values_and_counts_them() -> None:
    """Clear empties the buffer and keeps the counters consistent."""
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(3)
    buffer.extend([1, 2, 3, 4])

    buffer.clear()

    assert buffer.empty() is True
    assert buffer.snapshot() == []
    assert buffer.dropped_count == 4
    assert buffer.write_count - buffer.read_count - buffer.dropped_count == 0
    assert buffer._slots == [None, None, None, None]


def test_clear_keeps_buffer_usable() -> None:
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(2)
    buffer.extend([1, 2])
    buffer.clear()

    buffer.extend([3, 4, 5])

    assert buffer.snapshot() == [4, 5]


def test_clear_without_clearing_slots() -> None:
    """With clear_vacated off, clear only moves the read position."""
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(2, clear_vacated=False)
    buffer.extend([1, 2])

    buffer.clear()

    assert buffer.empty() is True
    assert buffer._slots[:2] == [1, 2]


def test_repr_shows_state() -> None:
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer(3)
    buffer.extend([1, 2])

    assert repr(buffer) == "FixedSizeBuffer(capacity=3, size=2, values=[1, 2])"


def test_from_config_applies_all_fields() -> None:
    config = BufferConfig(capacity=5, clear_vacated=False, drop_log_interval=7)

    buffer: FixedSizeBuffer[int] = FixedSizeBuffer.from_config(config)

    assert buffer.capacity == 5
    assert buffer.clear_vacated is False
    assert len(buffer._slots) == 6


def test_from_default_config() -> None:
    buffer: FixedSizeBuffer[int] = FixedSizeBuffer.from_config(BufferConfig())

    assert buffer.capacity == BufferConfig().capacity
    assert buffer.clear_vacated is True
