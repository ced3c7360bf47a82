"""Constants for fixed-size buffers."""

import sys
from pathlib import Path

DEFAULT_CAPACITY = 1024
# One slot is reserved as the separator, so capacity + 1 must be a valid length.
MAX_CAPACITY = sys.maxsize - 1

DEFAULT_DROP_LOG_INTERVAL = 1000  # log the first drop and then every Nth drop
DEFAULT_CLEAR_VACATED = True

CONFIG_DIR = Path.home() / ".fixed_size_buffer"
PROFILES_DIR_NAME = "profiles"
PROFILE_SUFFIX = ".yaml"

ENV_CAPACITY = "FSB_CAPACITY"
ENV_CLEAR_VACATED = "FSB_CLEAR_VACATED"
ENV_DROP_LOG_INTERVAL = "FSB_DROP_LOG_INTERVAL"
