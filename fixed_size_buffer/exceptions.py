"""Exceptions raised by fixed-size buffers."""


class FixedSizeBufferError(Exception):
    """Base class for fixed-size buffer errors."""


class InvalidCapacityError(FixedSizeBufferError, ValueError):
    """Raised when a buffer is constructed with an unusable capacity."""
