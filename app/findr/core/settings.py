"""User settings for findr.

Settings are optional and stored in ~/.config/findr/config.toml:

    sort_entries = true
    show_errors = true

    [colors]
    error = "#ff0000"

A missing default settings file simply yields the defaults.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from findr.core.paths import get_settings_path
from findr.core.theme import ThemeColors

logger = logging.getLogger(__name__)


class FindrSettings(BaseModel):
    """Persistent user preferences.

    Attributes:
        sort_entries: Visit directory children in name order.
        show_errors: Print recoverable traversal errors to stderr.
        colors: Colors used for diagnostics and error messages.
    """

    model_config = ConfigDict(extra="forbid")

    sort_entries: Annotated[
        bool,
        Field(description="Visit directory children in name order"),
    ] = True
    show_errors: Annotated[
        bool,
        Field(description="Report unreadable entries on stderr"),
    ] = True
    colors: Annotated[
        ThemeColors,
        Field(default_factory=ThemeColors, description="Diagnostic colors"),
    ]


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when an explicitly requested settings file is missing."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


def load_settings(path: Path | None = None) -> FindrSettings:
    """Load settings from a TOML file.

    Args:
        path: Settings file to read. If None, the default settings path is
            used and a missing file falls back to defaults.

    Returns:
        Validated FindrSettings object.

    Raises:
        SettingsNotFoundError: If an explicit ``path`` doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or the content doesn't
            match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        if path is not None:
            raise SettingsNotFoundError(f"Settings file not found: {settings_path}")
        logger.debug("No settings file at %s, using defaults", settings_path)
        return FindrSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return FindrSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content in {settings_path}: {e}") from e
