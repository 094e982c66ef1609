"""
settings.py — Persisted Settings
==================================
Layout and pacing configuration, stored as JSON in the user's home
folder and passed explicitly into the runner.

    settings = load_settings()          # creates the file on first use
    settings.lines_count = 80
    save_settings(settings)

File location:
    $SORTING_APP_HOME/settings.json   if the env var is set
    ~/.sorting_algorithms_app/settings.json   otherwise

A missing or empty file is (re)written with defaults.  A file that
cannot be read or parsed is logged and replaced by defaults in memory;
it is never allowed to stop the app from starting.
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

APP_FOLDER_NAME    = ".sorting_algorithms_app"
SETTINGS_FILE_NAME = "settings.json"
HOME_ENV_VAR       = "SORTING_APP_HOME"

MAX_LINES_COUNT = 500
MAX_DELAY_MS    = 5000


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
@dataclass
class Settings:
    screen_width:    int   = 800     # drawing area width
    screen_height:   int   = 600     # drawing area height
    lines_count:     int   = 50      # number of bars
    lines_margin:    int   = 1       # gap between bars
    screen_margin:   int   = 15      # empty border around the bars
    algorithm_delay: int   = 20      # ms per visualised step
    algorithm:       str   = "bubble"
    fill_step_ms:    float = 1       # completion fill: pause per line
    fill_hold_ms:    float = 1000    # completion fill: hold before reset
    app_name:        str   = "/// SORTING_ALGORITHMS_APP_ \\\\\\"

    def validated(self) -> "Settings":
        """Return a copy with every numeric field clamped into range."""
        return replace(
            self,
            screen_width=max(1, int(self.screen_width)),
            screen_height=max(1, int(self.screen_height)),
            lines_count=min(max(0, int(self.lines_count)), MAX_LINES_COUNT),
            lines_margin=max(0, int(self.lines_margin)),
            screen_margin=max(0, int(self.screen_margin)),
            algorithm_delay=min(max(0, int(self.algorithm_delay)), MAX_DELAY_MS),
            fill_step_ms=max(0.0, float(self.fill_step_ms)),
            fill_hold_ms=max(0.0, float(self.fill_hold_ms)),
        )

    @property
    def resolution(self):
        return (self.screen_width, self.screen_height)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Build from a (possibly partial) dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known}).validated()


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------
def settings_path() -> Path:
    base = os.environ.get(HOME_ENV_VAR)
    folder = Path(base) if base else Path.home() / APP_FOLDER_NAME
    return folder / SETTINGS_FILE_NAME


def load_settings(path: Optional[Path] = None) -> Settings:
    path = Path(path) if path else settings_path()
    try:
        if not path.exists() or not path.read_text(encoding="utf-8").strip():
            defaults = Settings()
            save_settings(defaults, path)
            return defaults
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("settings file does not contain a JSON object")
        return Settings.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Error loading settings from %s: %s", path, e)
        return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> bool:
    path = Path(path) if path else settings_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
        return True
    except OSError as e:
        logger.warning("Error saving settings to %s: %s", path, e)
        return False
