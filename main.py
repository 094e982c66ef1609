"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                  – main UI
  GET  /api/state         – current snapshot (bars SVG, flags, timer, panels)
  GET  /api/algorithms    – registered sorts
  POST /api/algorithm     – select the algorithm for the next run
  POST /api/run           – start sorting
  POST /api/stop          – stop the current run
  POST /api/shuffle       – randomize the lines
  POST /api/config        – change line count / margin / delay

State management:
  One SortRunner per app, created by create_app() and kept in
  app.config["RUNNER"].  The runner sorts on its own event-loop thread;
  the browser polls /api/state to redraw the bars.

Status codes:
  400 – malformed request or unknown algorithm
  409 – request refused by the run state (e.g. start while sorting,
        stop during the completion animation)
"""

from flask import Flask, render_template_string, request, jsonify, current_app
import logging
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from engine import SortRunner, Settings, RunMetrics, load_settings, save_settings
from ui import (
    render_canvas,
    playback_controls,
    algorithm_selector,
    settings_panel,
    info_panel,
    analytics_panel,
    pseudocode_viewer,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(settings: Settings = None, runner: SortRunner = None, persist: bool = None) -> Flask:
    """
    Args:
        settings : Settings to start from.  Loaded from disk when omitted.
        runner   : Pre-built runner (tests).  Built from settings when omitted.
        persist  : Save settings changes to disk.  Defaults to True only
                   when settings were loaded from disk.
    """
    if persist is None:
        persist = settings is None and runner is None
    if runner is None:
        runner = SortRunner(settings or load_settings())

    app = Flask(__name__)
    app.config["RUNNER"] = runner
    app.config["PERSIST_SETTINGS"] = persist
    _register_routes(app)
    logger.debug("App created for %s (persist=%s)", runner.algo_info.label, persist)
    return app


def get_runner() -> SortRunner:
    return current_app.config["RUNNER"]


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------
def _metrics(snap: dict):
    data = snap.get("last_metrics")
    return RunMetrics(**data) if data else None


def _state_payload(snap: dict) -> dict:
    banner = "SORTED" if snap["state"] == "completing" else None
    return {
        "state":         snap["state"],
        "is_running":    snap["is_running"],
        "is_completing": snap["is_completing"],
        "algorithm":     snap["algorithm"],
        "delay":         snap["delay"],
        "is_sorted":     snap["container"]["is_sorted"],
        "timer":         snap["timer"],
        "lines":         snap["container"]["lines"],
        "svg":           render_canvas(snap["container"], banner=banner),
        "info":          info_panel(snap["algorithm"]["name"], snap["state"], snap["timer"]["elapsed_ms"]),
        "playback":      playback_controls(snap["state"], snap["container"]["is_sorted"]),
        "analytics":     analytics_panel(_metrics(snap)),
    }


def _refused(message: str):
    return jsonify({"error": message, **_state_payload(get_runner().snapshot())}), 409


def _persist(runner: SortRunner) -> None:
    if current_app.config["PERSIST_SETTINGS"]:
        save_settings(runner.settings)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        runner = get_runner()
        snap = runner.snapshot()
        info = get_algorithm(snap["algorithm"]["key"])
        busy = snap["state"] != "idle"

        html = render_template_string(INDEX_TEMPLATE,
            svg=render_canvas(snap["container"]),
            playback=playback_controls(snap["state"], snap["container"]["is_sorted"]),
            algo_selector=algorithm_selector(list_algorithms(sorts_only=True), info.key, disabled=busy),
            settings=settings_panel(runner.settings, disabled=busy),
            info=info_panel(snap["algorithm"]["name"], snap["state"], snap["timer"]["elapsed_ms"]),
            analytics=analytics_panel(_metrics(snap)),
            pseudocode=pseudocode_viewer(info.pseudocode, info.label),
        )
        return html

    @app.route("/api/state")
    def api_state():
        return jsonify(_state_payload(get_runner().snapshot()))

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "key":              a.key,
                "label":            a.label,
                "name":             a.name,
                "complexity_time":  a.complexity_time,
                "complexity_space": a.complexity_space,
                "description":      a.description,
                "tags":             a.tags,
            }
            for a in list_algorithms(sorts_only=True)
        ])

    @app.route("/api/algorithm", methods=["POST"])
    def api_algorithm():
        runner = get_runner()
        data = request.get_json(silent=True) or {}
        key = data.get("algo_key", "")
        try:
            selected = runner.select(key)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400
        if not selected:
            return _refused("Cannot change algorithm while sorting")
        _persist(runner)

        info = get_algorithm(key)
        return jsonify({
            "algo_key":      key,
            "algo_selector": algorithm_selector(list_algorithms(sorts_only=True), key),
            "pseudocode":    pseudocode_viewer(info.pseudocode, info.label),
        })

    @app.route("/api/run", methods=["POST"])
    def api_run():
        runner = get_runner()
        data = request.get_json(silent=True) or {}
        delay = data.get("delay")
        if delay is not None:
            try:
                delay = max(0, int(delay))
            except (TypeError, ValueError):
                return jsonify({"error": "delay must be an integer"}), 400

        if not runner.start(delay):
            return _refused("Already sorting, or lines are already sorted")
        return jsonify(_state_payload(runner.snapshot()))

    @app.route("/api/stop", methods=["POST"])
    def api_stop():
        runner = get_runner()
        if not runner.stop():
            return _refused("Cannot stop during the completion animation")
        return jsonify(_state_payload(runner.snapshot()))

    @app.route("/api/shuffle", methods=["POST"])
    def api_shuffle():
        runner = get_runner()
        if not runner.shuffle():
            return _refused("Cannot randomize while sorting")
        return jsonify(_state_payload(runner.snapshot()))

    @app.route("/api/config", methods=["POST"])
    def api_config():
        runner = get_runner()
        data = request.get_json(silent=True) or {}
        try:
            values = {
                field: int(data[field])
                for field in ("lines_count", "lines_margin", "delay")
                if data.get(field) is not None
            }
        except (TypeError, ValueError):
            return jsonify({"error": "lines_count, lines_margin and delay must be integers"}), 400

        if not runner.configure(**values):
            return _refused("Cannot change settings while sorting")
        _persist(runner)
        return jsonify({
            **_state_payload(runner.snapshot()),
            "settings": runner.settings.to_dict(),
        })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-green: #14ff09;
      --accent-red: #ff3b3b;
      --accent-amber: #f59e0b;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 14px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #canvas-svg svg { max-width: 100%; max-height: 100%; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 10px;
      padding: 14px;
      margin-bottom: 14px;
    }
    .panel h3 { font-size: 14px; margin-bottom: 10px; }
    .panel label { display: block; font-size: 13px; margin: 6px 0; color: var(--text-secondary); }
    .panel input, .panel select { width: 100%; background: var(--bg-dark); color: var(--text-primary);
                                  border: 1px solid var(--border); border-radius: 6px; padding: 6px; }
    .panel table { width: 100%; font-size: 13px; }
    .button-row { display: flex; gap: 6px; }
    button { flex: 1; padding: 8px; border-radius: 6px; border: 1px solid var(--border);
             background: var(--bg-dark); color: var(--text-primary); cursor: pointer; }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .hint, .placeholder { font-size: 12px; color: var(--text-secondary); margin-top: 8px; }
    kbd { color: var(--accent-amber); }

    .info-panel { display: flex; gap: 24px; margin: 0; border-radius: 0; font-family: monospace; }
    .timer-label { color: var(--accent-amber); }
    .state-sorting { color: var(--accent-red); }
    .state-completing { color: var(--accent-green); }

    .code-block { font-family: monospace; font-size: 12px; white-space: pre; }
    .code-line { padding: 1px 4px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="playback">{{ playback|safe }}</div>
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="settings">{{ settings|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div class="panel"><h3>📜 Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
  </div>
  <div id="main">
    <div id="canvas-container"><div id="canvas-svg">{{ svg|safe }}</div></div>
    <div id="info">{{ info|safe }}</div>
  </div>

  <script>
    async function post(url, body) {
      const r = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return r.json();
    }

    let lastState = null;

    function apply(data) {
      if (!data || !data.svg) return;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('info').innerHTML = data.info;
      document.getElementById('playback').innerHTML = data.playback;
      document.getElementById('analytics').innerHTML = data.analytics;
      const busy = data.state !== 'idle';
      document.querySelectorAll('#algo select, #settings input, #settings button')
        .forEach(el => el.disabled = busy);
      lastState = data.state;
    }

    async function poll() {
      try {
        const r = await fetch('/api/state');
        apply(await r.json());
      } catch (e) { /* server gone; keep last frame */ }
    }
    setInterval(poll, 50);

    const actions = {
      shuffle: () => post('/api/shuffle').then(apply),
      sort:    () => post('/api/run').then(apply),
      stop:    () => post('/api/stop').then(apply),
    };

    document.addEventListener('click', (e) => {
      if (e.target.id === 'btn-shuffle') actions.shuffle();
      if (e.target.id === 'btn-sort') actions.sort();
      if (e.target.id === 'btn-stop') actions.stop();
      if (e.target.id === 'btn-apply') {
        post('/api/config', {
          lines_count: +document.getElementById('cfg-lines').value,
          lines_margin: +document.getElementById('cfg-margin').value,
          delay: +document.getElementById('cfg-delay').value,
        }).then(apply);
      }
    });

    document.addEventListener('keydown', (e) => {
      if (e.target.tagName === 'INPUT') return;
      if (e.code === 'Space') { e.preventDefault(); actions.shuffle(); }
      if (e.key === 'e' || e.key === 'E') actions.sort();
      if (e.key === 's' || e.key === 'S') actions.stop();
    });

    document.getElementById('algo').addEventListener('change', async (e) => {
      if (e.target.id !== 'algo-selector') return;
      const data = await post('/api/algorithm', {algo_key: e.target.value});
      if (data.algo_selector) document.getElementById('algo').innerHTML = data.algo_selector;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, host="0.0.0.0", port=5000, threaded=True)
