from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import ConfigurationError, PathResolver, SettingsLoader
from .model import Settings


def load_settings(path: Optional[str] = None) -> Settings:
    """Public API (Config)

    Contract:
    - path defaults to env XLEXPORT_SETTINGS; neither set -> default Settings.
    - JSON object with optional keys: paths, base_dir, date_format,
      datetime_format, time_format, max_column_width.
    - Missing or unparsable file -> ConfigurationError.
    """
    return SettingsLoader().load(path)


def resolve_dir(location: str, settings: Settings) -> Optional[Path]:
    """Public API (Config): settings key -> base_dir relative -> as given. None if not found."""
    return PathResolver(settings).resolve_dir(location)


def resolve_file(location: str, settings: Settings) -> Optional[Path]:
    """Public API (Config): same lookup order as resolve_dir, for files."""
    return PathResolver(settings).resolve_file(location)
