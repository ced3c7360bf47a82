"""Helpers for parsing capacity values from profiles, env and the CLI."""

from fixed_size_buffer.config_manager.buffer_config import BufferConfig

_UNIT_MULTIPLIERS = {
    "k": 1_000,
    "m": 1_000_000,
    "g": 1_000_000_000,
}


def parse_capacity(value: int | str) -> int:
    """Parse a value count from an integer or unit-suffixed string.

    Supported string units (case-insensitive):
        k (thousand), m (million), g (billion)

    Underscores are ignored, so ``"10_000"`` parses as ``10000``.

    Args:
        value: Raw capacity as an ``int`` or string with an optional unit
            suffix.

    Returns:
        The parsed capacity.

    Raises:
        ValueError: If the input cannot be parsed, contains an unknown unit,
            or is negative.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid capacity value: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Capacity must be >= 0: {value!r}")
        return value

    normalized_value = str(value).strip().lower().replace("_", "")

    if normalized_value.isdigit():
        return int(normalized_value)

    numeric_part = ""
    unit_suffix = ""
    for character in normalized_value:
        if character.isdigit() and not unit_suffix:
            numeric_part += character
        else:
            unit_suffix += character

    if not numeric_part or not unit_suffix:
        raise ValueError(f"Invalid capacity value: {value!r}")

    multiplier = _UNIT_MULTIPLIERS.get(unit_suffix)
    if multiplier is None:
        raise ValueError(f"Unknown capacity unit in value: {value!r}")

    return int(numeric_part) * multiplier


def build_default_buffer_config() -> BufferConfig:
    """Build the configuration used when no profile is selected."""
    return BufferConfig()
