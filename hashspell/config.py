"""Configuration management: JSON-based, stored in ~/.config/hashspell/."""
import json
import logging
import os
from pathlib import Path

from hashspell.sizing import DEFAULT_TABLE_SIZE, DEFAULT_TARGET_PROBES
from hashspell.table import OverflowPolicy

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "table_size": DEFAULT_TABLE_SIZE,
    "auto_size": False,  # size the table from the dictionary's word count
    "target_probes": DEFAULT_TARGET_PROBES,
    "overflow": "reject",  # "reject", "wrap" or "grow"
    "jobs": 1,
    "debug_logging": False,
}

CONFIG_DIR = Path.home() / ".config" / "hashspell"
CONFIG_FILE = CONFIG_DIR / "config.json"
CONFIG_ENV = "HASHSPELL_CONFIG"


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return CONFIG_FILE


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_config_path()
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(stored, dict):
                logger.warning("Ignoring config %s: expected a JSON object", self.path)
                return
            self._data.update(stored)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    @property
    def table_size(self) -> int:
        size = int(self._data["table_size"])
        if size < 1:
            raise ValueError(f"table_size must be positive, got {size}")
        return size

    @table_size.setter
    def table_size(self, val):
        self._data["table_size"] = int(val)
        self.save()

    @property
    def auto_size(self) -> bool:
        return bool(self._data["auto_size"])

    @property
    def target_probes(self) -> float:
        return float(self._data["target_probes"])

    @property
    def overflow(self) -> OverflowPolicy:
        return OverflowPolicy.parse(self._data["overflow"])

    @overflow.setter
    def overflow(self, val):
        self._data["overflow"] = OverflowPolicy.parse(val).value
        self.save()

    @property
    def jobs(self) -> int:
        return max(1, int(self._data.get("jobs", 1)))

    @property
    def debug_logging(self) -> bool:
        return bool(self._data["debug_logging"])
