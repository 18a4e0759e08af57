"""Settings file I/O.

This module provides the pydantic model for the ``[compare]`` settings
table and functions to load and save it as TOML. Ignored paths are not
part of the settings; they are supplied for each comparison.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from treecmp.core.compare import DEFAULT_ACTUAL_PATH, DEFAULT_EXPECTED_PATH
from treecmp.core.errors import SettingsError, SettingsParseError, SettingsValidationError
from treecmp.core.paths import get_settings_path
from treecmp.core.textdiff import DEFAULT_CONTEXT
from treecmp.tree.ignore import DEFAULT_BLACKLIST_PATTERNS


class CompareSettings(BaseModel):
    """Defaults applied to every comparison.

    Attributes:
        expected: Expected tree directory, relative to the root.
        actual: Generated tree directory, relative to the root.
        blacklist: Glob patterns of files never content-compared.
        context: Characters of unchanged text printed around a change.
    """

    model_config = ConfigDict(extra="forbid")

    expected: str = DEFAULT_EXPECTED_PATH
    actual: str = DEFAULT_ACTUAL_PATH
    blacklist: list[str] = Field(default_factory=lambda: list(DEFAULT_BLACKLIST_PATTERNS))
    context: int = Field(default=DEFAULT_CONTEXT, ge=0)

    @field_validator("expected", "actual")
    @classmethod
    def validate_directory(cls, v: str, info: Any) -> str:
        """Reject blank directory names."""
        value = v.strip()
        if not value:
            msg = f"{info.field_name}: directory name cannot be empty"
            raise ValueError(msg)
        return value

    @field_validator("blacklist")
    @classmethod
    def validate_blacklist(cls, v: list[str]) -> list[str]:
        """Reject blank patterns."""
        for pattern in v:
            if not pattern.strip():
                msg = "blacklist: patterns cannot be empty"
                raise ValueError(msg)
        return v


def load_settings(path: Path | None = None) -> CompareSettings:
    """Load and validate settings from a TOML file.

    A missing file yields the default settings.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated CompareSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsValidationError: If the content doesn't match the schema.
        SettingsError: If the file cannot be read.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return CompareSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    section = data.get("compare", {})
    if not isinstance(section, dict):
        raise SettingsValidationError(f"Invalid settings content: [compare] must be a table in {settings_path}")

    try:
        return CompareSettings.model_validate(section)
    except ValidationError as e:
        raise SettingsValidationError(f"Invalid settings content: {e}") from e


def save_settings(settings: CompareSettings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and
    moved into place with os.replace(). The temporary file is removed on
    failure.

    Args:
        settings: The settings to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"compare": settings.model_dump(mode="json")}
    tmp_name: str | None = None
    try:
        with NamedTemporaryFile("wb", dir=settings_path.parent, suffix=".tmp", delete=False) as tmp:
            tmp_name = tmp.name
            tomli_w.dump(data, tmp)
        os.replace(tmp_name, settings_path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
