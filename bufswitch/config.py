"""Configuration management — JSON-based, stored in ~/.config/bufswitch/."""
import json
import logging
from pathlib import Path

from bufswitch.matcher import DEFAULT_MATCHER, FOLD_POLICIES, FOLD_SMART

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "ignore_patterns": ["^ "],  # hidden buffers
    "uninteresting_patterns": ["^\\*"],  # *scratch*, *Messages*, ...
    "matcher": DEFAULT_MATCHER,  # "substring", "word-parts" or "subsequence"
    "fold_case": FOLD_SMART,  # "always", "never" or "smart"
    "status_width": 80,
    "separator": " ",
    "ellipsis": "...",
    "highlight": "reverse",  # "reverse" or "none"
    "debug_logging": False,
}

CONFIG_DIR = Path.home() / ".config" / "bufswitch"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
                self._data.update(stored)
            except (json.JSONDecodeError, IOError):
                logger.warning("Ignoring unreadable config file %s", self.path)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def ignore_patterns(self):
        return list(self._data["ignore_patterns"])

    @property
    def uninteresting_patterns(self):
        return list(self._data["uninteresting_patterns"])

    @property
    def matcher(self):
        return self._data["matcher"]

    @matcher.setter
    def matcher(self, val):
        self._data["matcher"] = val
        self.save()

    @property
    def fold_case(self):
        policy = self._data["fold_case"]
        if policy not in FOLD_POLICIES:
            logger.warning("Invalid fold_case %r, using %r", policy, FOLD_SMART)
            return FOLD_SMART
        return policy

    @property
    def status_width(self):
        return int(self._data["status_width"])

    @property
    def separator(self):
        return self._data["separator"]

    @property
    def ellipsis(self):
        return self._data["ellipsis"]

    @property
    def highlight(self):
        return self._data.get("highlight", "reverse")

    @property
    def debug_logging(self):
        return self._data["debug_logging"]
