# config_manager.py - JSON config manager

import json
import os
from typing import Any, Dict, Optional

from .logger_utils import get_logger

log = get_logger("config")

DEFAULTS: Dict[str, Any] = {
    "suggest_limit": 8,   # suggestions shown per keystroke
    "search_limit": 50,   # results per submitted query
    "catalog_path": "",   # JSON catalog; empty = built-in sample books
    "log_level": "INFO",
    "log_file": "",
}

_NON_NEGATIVE = ("suggest_limit", "search_limit")


class Config:
    """
    data: values from the config file plus anything changed with set(); this is what save() writes.
    overrides: per-run values (command-line flags), read first but never saved.
    """
    def __init__(self, path: Optional[str] = None, **overrides):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self.overrides: Dict[str, Any] = {}
        self._load()
        for k, v in overrides.items():
            self.override(k, v)

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            log.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in raw.items():
            if k not in self.data:
                log.warning("config %s: ignoring unknown option %r", self.path, k)
                continue
            try:
                self.data[k] = self._coerce(k, v)
            except ValueError as e:
                log.warning("config %s: %s", self.path, e)

    def _coerce(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        try:
            val = type(DEFAULTS[key])(val)
        except (TypeError, ValueError):
            raise ValueError(f"bad value for {key}: {val!r}") from None
        if key in _NON_NEGATIVE and val < 0:
            raise ValueError(f"{key} must be >= 0, got {val}")
        return val

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        if key in self.overrides:
            return self.overrides[key]
        return self.data[key]

    def set(self, key, val):
        """Change an option and persist it; replaces any per-run override of it."""
        self.data[key] = self._coerce(key, val)
        self.overrides.pop(key, None)
        self.save()

    def override(self, key, val):
        self.overrides[key] = self._coerce(key, val)

    def items(self):
        return [(k, self.get(k)) for k in self.data]

    @property
    def suggest_limit(self) -> int:
        return self.get("suggest_limit")

    @property
    def search_limit(self) -> int:
        return self.get("search_limit")

    @property
    def catalog_path(self) -> str:
        return self.get("catalog_path")
