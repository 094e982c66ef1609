"""
engine/
-------
Run control, metrics & configuration layer.

    from engine import SortRunner, Recorder, Settings
"""

from engine.settings import Settings, load_settings, save_settings, settings_path
from engine.recorder import Recorder, RunMetrics, format_elapsed
from engine.runner   import SortRunner, RunnerState

__all__ = [
    "Settings",
    "load_settings",
    "save_settings",
    "settings_path",
    "Recorder",
    "RunMetrics",
    "format_elapsed",
    "SortRunner",
    "RunnerState",
]
