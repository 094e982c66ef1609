"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    settings_panel,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "settings_panel",
    "info_panel",
    "analytics_panel",
    "pseudocode_viewer",
]
