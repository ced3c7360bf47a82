"""API for handling buffer configuration profiles."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from fixed_size_buffer.config_manager.buffer_config import BufferConfig
from fixed_size_buffer.config_manager.helpers import (
    build_default_buffer_config,
    parse_capacity,
)
from fixed_size_buffer.const import CONFIG_DIR, PROFILE_SUFFIX, PROFILES_DIR_NAME


class ProfileNotFound(Exception):
    """Raised when a requested profile cannot be found on disk."""


class ProfileAlreadyExist(Exception):
    """Raised when attempting to create a profile that already exists."""


class InvalidProfileName(ValueError):
    """Raised when a profile name is empty or contains a path component."""


class ProfileManager:
    """Manage buffer profiles stored on disk."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialise ProfileManager.

        Args:
            config_dir: Root configuration directory. Defaults to
                ``~/.fixed_size_buffer``.
        """
        self._config_dir = config_dir or CONFIG_DIR

    @property
    def config_dir(self) -> Path:
        """Return the root directory used for resolving configuration."""
        return self._config_dir

    def _profiles_dir(self) -> Path:
        return self._config_dir / PROFILES_DIR_NAME

    def _get_profile_path(self, profile: str) -> Path:
        """Return the YAML path for a profile, creating its directory.

        Raises:
            InvalidProfileName: If the name is empty, a dot name, or contains
                a path separator.
        """
        if profile in {"", ".", ".."} or "/" in profile or "\\" in profile:
            raise InvalidProfileName(f"Invalid profile name: {profile!r}")

        profiles_dir = self._profiles_dir()
        profiles_dir.mkdir(parents=True, exist_ok=True)
        return profiles_dir / f"{profile}{PROFILE_SUFFIX}"

    def list_profiles(self) -> list[str]:
        """List available profile names.

        Returns:
            Sorted profile names without the ``.yaml`` suffix.
        """
        profiles_dir = self._profiles_dir()
        if not profiles_dir.exists():
            return []

        return sorted(
            path.stem
            for path in profiles_dir.iterdir()
            if path.is_file() and path.suffix == PROFILE_SUFFIX
        )

    def get_profile(self, profile: str | None = None) -> BufferConfig:
        """Load a profile configuration from disk.

        Args:
            profile: Name of the profile to load. ``None`` returns defaults.

        Returns:
            Parsed buffer configuration for the profile.

        Raises:
            ProfileNotFound:
                If the profile YAML file does not exist.
            InvalidProfileName:
                If the name could resolve outside the profiles directory.
            pydantic.ValidationError:
                If the stored values are invalid.
        """
        if profile is None:
            return build_default_buffer_config()

        profile_path = self._get_profile_path(profile)

        try:
            with profile_path.open("r") as profile_file:
                profile_data = yaml.safe_load(profile_file) or {}
        except FileNotFoundError as exc:
            raise ProfileNotFound(f"Profile {profile!r} not found.") from exc

        raw_capacity = profile_data.get("capacity")
        if isinstance(raw_capacity, str):
            try:
                profile_data["capacity"] = parse_capacity(raw_capacity)
            except ValueError:
                # BufferConfig rejects the raw string below.
                pass

        return BufferConfig(**profile_data)

    def create_profile(self, profile: str) -> None:
        """Create a new profile with default configuration values.

        Raises:
            ProfileAlreadyExist:
                If a profile with the same name already exists.
        """
        profile_path = self._get_profile_path(profile)

        try:
            with profile_path.open("x") as profile_file:
                yaml.safe_dump(BufferConfig().model_dump(), profile_file)
        except FileExistsError as exc:
            raise ProfileAlreadyExist(f"Profile {profile!r} already exists.") from exc

    def update_profile(self, profile: str, updates: dict[str, Any]) -> BufferConfig:
        """Update an existing profile with the provided field values.

        Args:
            profile: Name of the profile to update.
            updates: Mapping of field names to new values. Fields with a value of
                ``None`` are ignored and do not overwrite existing values.

        Returns:
            The updated buffer configuration.

        Raises:
            ProfileNotFound:
                If the profile YAML file does not exist.
        """
        current = self.get_profile(profile)
        filtered_updates = {
            name: value for name, value in updates.items() if value is not None
        }
        # model_copy would skip validation of the updates.
        new_config = BufferConfig(**{**current.model_dump(), **filtered_updates})

        with self._get_profile_path(profile).open("w") as profile_file:
            yaml.safe_dump(new_config.model_dump(), profile_file)

        return new_config
