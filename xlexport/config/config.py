from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .model import Settings

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "XLEXPORT_SETTINGS"


class ConfigurationError(RuntimeError):
    pass


class SettingsLoader:
    def load(self, path: Optional[str] = None) -> Settings:
        path = path or os.environ.get(SETTINGS_ENV_VAR)
        if not path:
            return Settings()

        p = Path(path)
        if not p.exists():
            raise ConfigurationError(f"settings file not found: {p}")
        try:
            data: Dict[str, Any] = json.loads(p.read_text(encoding="utf-8"))
        except Exception as e:
            raise ConfigurationError(f"Cannot parse settings JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("settings root must be an object")

        paths = data.get("paths", {})
        if not isinstance(paths, dict):
            raise ConfigurationError("settings.paths must be an object")

        known = {k: data[k] for k in (
            "base_dir", "date_format", "datetime_format", "time_format", "max_column_width",
        ) if k in data}
        # relative base_dir is anchored at the settings file
        if "base_dir" in known and not Path(known["base_dir"]).is_absolute():
            known["base_dir"] = str((p.parent / known["base_dir"]).resolve())

        logger.debug("loaded settings from %s", p)
        return Settings(paths={str(k): str(v) for k, v in paths.items()}, **known)


class PathResolver:
    """Resolves a user supplied location through the configured lookup strategies.

    Order: named key in ``settings.paths``, then relative to ``settings.base_dir``,
    then the string as given. The first candidate that exists wins.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def candidates(self, location: str) -> List[Path]:
        base = Path(self.settings.base_dir)
        out: List[Path] = []
        mapped = self.settings.paths.get(location)
        if mapped is not None:
            mp = Path(mapped)
            out.append(mp if mp.is_absolute() else base / mp)
        out.append(base / location)
        out.append(Path(location))
        return out

    def resolve_dir(self, location: str) -> Optional[Path]:
        if not location:
            return None
        for c in self.candidates(location):
            if c.is_dir():
                return c
        return None

    def resolve_file(self, location: str) -> Optional[Path]:
        if not location:
            return None
        for c in self.candidates(location):
            if c.is_file():
                return c
        return None
