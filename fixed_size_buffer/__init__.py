"""Fixed-capacity circular buffer with overwrite-on-overflow semantics."""

from .exceptions import FixedSizeBufferError, InvalidCapacityError
from .ring_buffer import FixedSizeBuffer

__version__ = "1.0.0"

__all__ = ["FixedSizeBuffer", "FixedSizeBufferError", "InvalidCapacityError"]
