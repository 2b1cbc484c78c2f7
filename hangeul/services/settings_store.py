from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

logger = logging.getLogger(__name__)

SETTINGS_ENV: Final[str] = "HANGEUL_SETTINGS"

CODECS: Final[tuple[str, ...]] = ("modern", "lazy")
FORMATS: Final[tuple[str, ...]] = ("text", "yaml")

_DEFAULT_CODEC: Final[str] = "modern"
_DEFAULT_FORMAT: Final[str] = "text"


class SettingsStore:
    """YAML-backed settings store for the command-line front-end.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the CLI defaults (codec, output format, fillers)

    Notes:
      - Path precedence: constructor argument, then $HANGEUL_SETTINGS,
        then <project_root>/settings.yaml.
      - Loading never raises; unknown or malformed values fall back to defaults.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            settings_path = os.environ.get(SETTINGS_ENV) or None
        if settings_path is None:
            # hangeul/services/settings_store.py -> <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        """Atomically write settings (UTF-8).

        Raises:
            OSError: if the file cannot be written.
        """
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))
        logger.debug("Saved settings to %s", p)

    def _choice(self, key: str, choices: tuple[str, ...], default: str) -> str:
        v = self.load().get(key, default)
        cleaned = str(v).strip().lower() if v is not None else ""
        if cleaned in choices:
            return cleaned
        logger.debug("Invalid %s %r in settings; using %r", key, v, default)
        return default

    def get_codec(self) -> str:
        return self._choice("codec", CODECS, _DEFAULT_CODEC)

    def get_format(self) -> str:
        return self._choice("format", FORMATS, _DEFAULT_FORMAT)

    def get_show_fillers(self) -> bool:
        v = self.load().get("show_fillers", False)
        return v if isinstance(v, bool) else False

    def set_value(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)
