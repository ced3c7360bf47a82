"""Pydantic models for fixed-size buffer configuration."""

from pydantic import BaseModel, Field

from fixed_size_buffer.const import (
    DEFAULT_CAPACITY,
    DEFAULT_CLEAR_VACATED,
    DEFAULT_DROP_LOG_INTERVAL,
    MAX_CAPACITY,
)


class BufferConfig(BaseModel):
    """Configuration options for a fixed-size buffer.

    Attributes:
        capacity: number of values the buffer holds before overwriting.
        clear_vacated: whether consumed slots are reset to None.
        drop_log_interval: log the first overwrite drop and every Nth one.
    """

    capacity: int = Field(default=DEFAULT_CAPACITY, ge=0, le=MAX_CAPACITY)
    clear_vacated: bool = DEFAULT_CLEAR_VACATED
    drop_log_interval: int = Field(default=DEFAULT_DROP_LOG_INTERVAL, ge=1)
