"""Fixed-capacity ring buffer with overwrite-on-full semantics.

The buffer is a list of ``capacity + 1`` slots with a read position and a
write position. Writing moves the write position forward and reading trails
it in the same direction around the list.

The extra slot separates the two boundary states:

- Empty: read and write positions are equal. Reading returns None and does
  not move the read position.
- Full: the write position is immediately before the read position. Writing
  in this state drops the oldest value by moving the read position forward.

A full buffer of capacity 3, wrapped around after writing 1 to 5. The slot
at the write position is the separator and is never read::

          w   r
    | 5 |   | 3 | 4 |
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from fixed_size_buffer.const import (
    DEFAULT_CLEAR_VACATED,
    DEFAULT_DROP_LOG_INTERVAL,
    MAX_CAPACITY,
)
from fixed_size_buffer.exceptions import InvalidCapacityError
from fixed_size_buffer.sampled_logger import make_sampled_logger

if TYPE_CHECKING:
    from fixed_size_buffer.config_manager.buffer_config import BufferConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FixedSizeBuffer(Generic[T]):
    """FIFO ring buffer with a fixed capacity that overwrites the oldest value.

    - Single writer, single reader, no locking.
    - Underflow returns None, overflow silently drops the oldest value.
    """

    def __init__(
        self,
        capacity: int,
        *,
        clear_vacated: bool = DEFAULT_CLEAR_VACATED,
        drop_log_interval: int = DEFAULT_DROP_LOG_INTERVAL,
    ) -> None:
        """Initialize an empty buffer.

        Args:
            capacity: The number of values this buffer can hold.
            clear_vacated: Reset slots to None once their value is read,
                dropped or cleared, so only unread values stay referenced.
            drop_log_interval: Log the first overwrite drop and every Nth one.

        Raises:
            InvalidCapacityError: if capacity is not an int, is negative, above
                ``MAX_CAPACITY``, or too large for ``capacity + 1`` slots to be
                allocated in memory.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(
                f"capacity must be an int, got {type(capacity).__name__}"
            )
        if capacity < 0:
            raise InvalidCapacityError(f"capacity must be >= 0, got {capacity}")
        if capacity > MAX_CAPACITY:
            raise InvalidCapacityError(
                f"capacity must be <= {MAX_CAPACITY}, got {capacity}"
            )

        self._capacity = capacity
        try:
            self._slots: list[T | None] = [None] * (capacity + 1)
        except MemoryError as exc:
            raise InvalidCapacityError(
                f"cannot allocate {capacity + 1} slots for capacity {capacity}"
            ) from exc
        self.read_pos = 0
        self.write_pos = 0
        self.clear_vacated = clear_vacated

        self._write_ctr = 0
        self._read_ctr = 0
        self._drop_ctr = 0
        self._log_drop = make_sampled_logger(
            "Dropped %d values so far from buffer of capacity %d",
            log_interval=drop_log_interval,
            target_logger=logger,
        )

    @classmethod
    def from_config(cls, config: BufferConfig) -> FixedSizeBuffer[T]:
        """Build a buffer from a resolved configuration."""
        return cls(
            config.capacity,
            clear_vacated=config.clear_vacated,
            drop_log_interval=config.drop_log_interval,
        )

    @property
    def capacity(self) -> int:
        """The capacity given at construction."""
        return self._capacity

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._slots)

    def write(self, value: T) -> None:
        """Write one value to the buffer.

        If the buffer is full before the write, the oldest unread value is
        dropped. A buffer of capacity 0 ignores every write.

        :param value: the value to write
        """
        if self._capacity == 0:
            return

        self._slots[self.write_pos] = value

        if self.full():
            # The dropped slot becomes the separator.
            if self.clear_vacated:
                self._slots[self.read_pos] = None
            self.read_pos = self._advance(self.read_pos)
            self._drop_ctr += 1
            self._log_drop(self._drop_ctr, self._capacity)
        self.write_pos = self._advance(self.write_pos)
        self._write_ctr += 1

    def read(self) -> T | None:
        """Read and consume the oldest value.

        Returns None if the buffer is empty. Check ``empty()`` first when None
        is itself a stored value.
        """
        if self.empty():
            return None

        value = self._slots[self.read_pos]
        if self.clear_vacated:
            self._slots[self.read_pos] = None
        self.read_pos = self._advance(self.read_pos)
        self._read_ctr += 1
        return value

    def peek(self) -> T | None:
        """Return the oldest value without consuming it, or None if empty."""
        if self.empty():
            return None

        return self._slots[self.read_pos]

    def full(self) -> bool:
        """Return True if the next write will overwrite an unread value."""
        # The write position sits just behind the read position.
        return self._advance(self.write_pos) == self.read_pos

    def empty(self) -> bool:
        """Return True if there is nothing to read."""
        return self.read_pos == self.write_pos

    def size(self) -> int:
        """Return the number of unread values."""
        if self.write_pos >= self.read_pos:
            return self.write_pos - self.read_pos
        return len(self._slots) - self.read_pos + self.write_pos

    def snapshot(self) -> list[T]:
        """Return the unread values, oldest first, without consuming them."""
        if self.write_pos >= self.read_pos:
            return self._slots[self.read_pos : self.write_pos]  # type: ignore[return-value]
        return (
            self._slots[self.read_pos :] + self._slots[: self.write_pos]  # type: ignore[return-value]
        )

    def extend(self, values: Iterable[T]) -> None:
        """Write each value in order."""
        for value in values:
            self.write(value)

    def drain(self) -> Iterator[T]:
        """Yield values by consuming the buffer until it is empty."""
        while not self.empty():
            yield self.read()  # type: ignore[misc]

    def clear(self) -> None:
        """Discard every unread value, counting them as dropped."""
        self._drop_ctr += self.size()
        if self.clear_vacated:
            for index in range(len(self._slots)):
                self._slots[index] = None
        self.read_pos = self.write_pos

    @property
    def write_count(self) -> int:
        """Total values written since construction."""
        return self._write_ctr

    @property
    def read_count(self) -> int:
        """Total values returned by ``read``."""
        return self._read_ctr

    @property
    def dropped_count(self) -> int:
        """Total values discarded by overwriting or ``clear``."""
        return self._drop_ctr

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"size={self.size()}, values={self.snapshot()!r})"
        )
