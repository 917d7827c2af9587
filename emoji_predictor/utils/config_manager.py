# config_manager.py - JSON config manager for the shell

import json
import logging
import os
from typing import Any, Dict, List, Tuple

from emoji_predictor.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "emoji_config.json"

DEFAULTS: Dict[str, Any] = {
    "word_results": 6,  # cap for current-word predictions
    "sentence_results": 12,  # cap for settled-sentence predictions
    "log_level": "WARNING",
}


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH, autosave=True):
        self.path = path
        self.autosave = autosave
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: expected an object", self.path)
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    logger.debug("unknown config key %r ignored", k)
                    continue
                try:
                    self.data[k] = _coerce(k, DEFAULTS[k], v)
                except ConfigError as e:
                    logger.warning("config %s: %s; keeping default", self.path, e)
        elif self.autosave:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self) -> List[Tuple[str, Any]]:
        return list(self.data.items())

    def set(self, key, val):
        """Set an option, coercing `val` to the type of its default."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = _coerce(key, DEFAULTS[key], val)
        if self.autosave:
            self.save()


def _coerce(key: str, default: Any, val: Any) -> Any:
    kind = type(default)
    if isinstance(val, kind):
        return val
    try:
        return kind(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} expects {kind.__name__}, got {val!r}") from e
