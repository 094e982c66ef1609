"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – randomize / sort / stop, with key-cap hints
  • algorithm_selector  – dropdown of the registered sorts
  • settings_panel      – line count, line margin, step delay
  • info_panel          – current algorithm, run state, TIMER
  • analytics_panel     – comparisons, swaps, wall time of the last run
  • pseudocode_viewer   – the selected algorithm's pseudocode

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - Buttons are rendered disabled when the run state forbids them, the
    same gating the engine enforces server-side.
"""

from typing import Optional, List

from algorithms import AlgoInfo
from engine import RunMetrics, Settings, format_elapsed
from engine.settings import MAX_LINES_COUNT, MAX_DELAY_MS


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    state: str = "idle",
    is_sorted: bool = False,
) -> str:
    busy = state != "idle"
    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Controls</h3>
      <div class="button-row">
        <button id="btn-shuffle" title="[SPACE] Randomize" {_disabled(busy)}>🔀 Randomize</button>
        <button id="btn-sort" title="[E] Sort" {_disabled(busy or is_sorted)}>▶ Sort</button>
        <button id="btn-stop" title="[S] Stop" {_disabled(state != "sorting")}>⏹ Stop</button>
      </div>
      <p class="hint"><kbd>SPACE</kbd> Randomize · <kbd>E</kbd> Sort · <kbd>S</kbd> Stop</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    disabled: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.complexity_time}</option>'
        )

    selected = next((a for a in algorithms if a.key == selected_key), None)
    description = selected.description if selected else ""

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {_disabled(disabled)}>
        {''.join(options)}
      </select>
      <p class="hint">{description}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Settings Panel
# ---------------------------------------------------------------------------
def settings_panel(settings: Settings, disabled: bool = False) -> str:
    return f"""
    <div class="panel settings-panel">
      <h3>⚙ Settings</h3>
      <label>Lines: <input type="number" id="cfg-lines" value="{settings.lines_count}"
             min="0" max="{MAX_LINES_COUNT}" {_disabled(disabled)}></label>
      <label>Margin: <input type="number" id="cfg-margin" value="{settings.lines_margin}"
             min="0" max="20" {_disabled(disabled)}></label>
      <label>Delay (ms): <input type="number" id="cfg-delay" value="{settings.algorithm_delay}"
             min="0" max="{MAX_DELAY_MS}" {_disabled(disabled)}></label>
      <button id="btn-apply" class="btn-secondary" {_disabled(disabled)}>Apply</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Bottom Info Panel
# ---------------------------------------------------------------------------
def info_panel(
    algo_name: str = "",
    state: str = "idle",
    elapsed_ms: float = 0.0,
) -> str:
    return f"""
    <div class="panel info-panel">
      <span class="algo-name">{algo_name}</span>
      <span class="run-state state-{state}">{state.upper()}</span>
      <span class="timer"><span class="timer-label">TIMER:</span> {format_elapsed(elapsed_ms)}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run a sort to see metrics.</p>
        </div>
        """

    outcome = "✅ Sorted" if metrics.completed else "⏹ Stopped"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        <tr><td>Lines:</td><td><strong>{metrics.lines_count}</strong></td></tr>
        <tr><td>Delay:</td><td><strong>{metrics.delay_ms:g} ms</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Outcome:</td><td><strong>{outcome}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        line_escaped = line.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
        lines_html.append(f'<div class="code-line" data-line="{i}">{line_escaped}</div>')

    return f"""
    <div class="code-block" title="{algo_label}">
      {''.join(lines_html)}
    </div>
    """
