"""Resolve buffer configuration from profile, environment, and CLI overrides."""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import ValidationError

from fixed_size_buffer.config_manager.buffer_config import BufferConfig
from fixed_size_buffer.config_manager.helpers import parse_capacity
from fixed_size_buffer.config_manager.profiles import ProfileManager
from fixed_size_buffer.const import (
    ENV_CAPACITY,
    ENV_CLEAR_VACATED,
    ENV_DROP_LOG_INTERVAL,
)

logger = logging.getLogger(__name__)

_ENV_MAP: dict[str, str] = {
    "capacity": ENV_CAPACITY,
    "clear_vacated": ENV_CLEAR_VACATED,
    "drop_log_interval": ENV_DROP_LOG_INTERVAL,
}

YES_CONFIRMATION = {"1", "true", "yes", "y"}


class ConfigManager:
    """Build effective buffer configuration from profile, env, and overrides."""

    def __init__(
        self, profile_manager: ProfileManager, profile: str | None = None
    ) -> None:
        """Initialise ConfigManager.

        Args:
            profile_manager: ProfileManager instance
            profile: Name of the profile to load as the base configuration.
        """
        self.profile_manager = profile_manager
        self.profile = profile

    def _read_env_overrides(self) -> dict[str, Any]:
        """Read configuration overrides from environment variables.

        Unparsable values are logged and skipped.

        Returns:
            A dictionary of configuration field names to override values.
        """
        overrides: dict[str, Any] = {}

        for field_name, env_var_name in _ENV_MAP.items():
            env_value = os.getenv(env_var_name)
            if env_value is None:
                continue

            if field_name == "capacity":
                try:
                    overrides[field_name] = parse_capacity(env_value)
                except ValueError:
                    logger.warning("Ignoring invalid %s=%r", env_var_name, env_value)
            elif field_name == "drop_log_interval":
                try:
                    overrides[field_name] = int(env_value)
                except ValueError:
                    logger.warning("Ignoring invalid %s=%r", env_var_name, env_value)
            else:
                overrides[field_name] = env_value.strip().lower() in YES_CONFIRMATION

        return overrides

    def resolve_effective_config(
        self, cli_config: dict[str, Any] | None = None
    ) -> BufferConfig:
        """Resolve the effective buffer configuration.

        Precedence, lowest first: profile (or defaults), environment, CLI.
        CLI values of ``None`` are treated as not given.

        Args:
            cli_config: Optional CLI-provided configuration overrides.

        Returns:
            The resolved ``BufferConfig``.

        Raises:
            ProfileNotFound: If the selected profile does not exist.
            pydantic.ValidationError: If the merged values are invalid.
        """
        base_config = self.profile_manager.get_profile(self.profile)

        merged: dict[str, Any] = base_config.model_dump()
        merged.update(self._read_env_overrides())
        if cli_config is not None:
            merged.update(
                {name: value for name, value in cli_config.items() if value is not None}
            )

        try:
            return BufferConfig(**merged)
        except ValidationError:
            logger.error("Invalid buffer configuration: %r", merged)
            raise
