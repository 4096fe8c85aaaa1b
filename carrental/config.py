"""Reading settings from the client's JSON configuration file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_CONFIGURATION_PATH = "settings.json"


class ConfigurationError(RuntimeError):
    """Raised when the configuration file or one of its sections is unusable."""


class ConfigurationManager:
    """Looks up top-level sections of a JSON configuration file."""

    def __init__(self, path: str | Path = DEFAULT_CONFIGURATION_PATH) -> None:
        self.path = Path(path)

    def _load(self) -> Any:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            raise ConfigurationError(f"Couldn't open the file: {self.path}") from exc
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigurationError("Failed to create JSON doc.") from exc

    def get(self, key: str) -> Any:
        """Return the value stored under ``key``; the file is read on every call."""
        document = self._load()
        value = document.get(key) if isinstance(document, dict) else None
        if value is None:
            raise ConfigurationError(f"Section with key: {key} doesn't exists.")
        return value