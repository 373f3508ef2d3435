"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                    – main UI
  GET  /api/state           – advance the run by whatever is due, return state
  GET  /api/algorithms      – registry cards
  POST /api/array/new       – generate a new random array (ignored while sorting)
  POST /api/play            – Start / Pause / Resume button
  POST /api/pause           – pause the run in flight
  POST /api/resume          – restart a paused run on the current array
  POST /api/config/algo     – select algorithm (ignored while sorting)
  POST /api/config/speed    – set speed from the slider (or raw ms)
  POST /api/trace           – record a full headless run and return its steps

State management:
  One PlaybackController per app, guarded by a lock because the Flask
  development server is threaded.  The browser polls /api/state; each
  poll ticks the controller, so pacing follows wall-clock time whatever
  the poll interval.
"""

import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, render_template_string, request, jsonify

from config import Settings
from algorithms import get_algorithm, list_algorithms
from engine import PlaybackController, LoggingReporter, Recorder
from ui import (
    PLAY_LABELS,
    render_bars,
    playback_controls,
    algorithm_selector,
    array_controls,
    speed_control,
    metrics_panel,
    algorithm_card,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(settings: Optional[Settings] = None) -> Flask:
    settings   = settings if settings is not None else Settings.from_env()
    app        = Flask(__name__)
    controller = PlaybackController(reporter=LoggingReporter(), settings=settings)
    lock       = threading.Lock()

    controller.request_new_array(settings.default_size)
    app.config["SETTINGS"]   = settings
    app.config["CONTROLLER"] = controller

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------
    def payload() -> Dict[str, Any]:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def state_json(**extra) -> Dict[str, Any]:
        state = controller.to_dict()
        state["svg"]      = render_bars(controller.values, controller.highlight)
        state["play_label"] = PLAY_LABELS[controller.status]
        state.update(extra)
        return state

    def int_field(data: Dict[str, Any], key: str) -> Optional[int]:
        if key not in data:
            return None
        value = data[key]
        if isinstance(value, bool):
            raise ValueError(f"'{key}' must be an integer")
        return int(value)

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        with lock:
            info     = controller.algorithm_info
            disabled = not controller.inputs_enabled
            pacing   = controller.pacing
            html = render_template_string(
                INDEX_TEMPLATE,
                svg=render_bars(controller.values, controller.highlight),
                playback=playback_controls(controller.status),
                algo_selector=algorithm_selector(list_algorithms(), controller.algorithm, disabled),
                array_ctrl=array_controls(
                    len(controller.array), settings.min_size, settings.max_size, disabled,
                ),
                speed=speed_control(
                    pacing.slider if pacing.slider is not None else settings.default_speed_slider,
                    settings.speed_slider_min, settings.speed_slider_max, pacing.speed_ms,
                ),
                metrics=metrics_panel(controller.comparisons, controller.writes, controller.status),
                card=algorithm_card(info),
                pseudocode=pseudocode_viewer(info.pseudocode),
                explanation=explanation_panel(controller.to_dict()["explanation"]),
                analytics=analytics_panel(),
            )
        return html

    # -----------------------------------------------------------------------
    # API: Polling
    # -----------------------------------------------------------------------
    @app.route("/api/state")
    def api_state():
        with lock:
            taken = controller.tick()
            return jsonify(state_json(steps_taken=taken))

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([
            {
                "key":         a.key,
                "label":       a.label,
                "time":        a.complexity_time,
                "space":       a.complexity_space,
                "stable":      a.stable,
                "description": a.description,
                "pseudocode":  a.pseudocode,
            }
            for a in list_algorithms()
        ])

    # -----------------------------------------------------------------------
    # API: Array
    # -----------------------------------------------------------------------
    @app.route("/api/array/new", methods=["POST"])
    def api_array_new():
        try:
            size = int_field(payload(), "size")
        except (TypeError, ValueError):
            return jsonify({"error": "'size' must be an integer"}), 400
        with lock:
            accepted = controller.request_new_array(size)
            return jsonify(state_json(accepted=accepted))

    # -----------------------------------------------------------------------
    # API: Playback
    # -----------------------------------------------------------------------
    @app.route("/api/play", methods=["POST"])
    def api_play():
        with lock:
            accepted = controller.play_pause()
            return jsonify(state_json(accepted=accepted))

    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        with lock:
            accepted = controller.toggle_pause()
            return jsonify(state_json(accepted=accepted))

    @app.route("/api/resume", methods=["POST"])
    def api_resume():
        with lock:
            accepted = controller.resume()
            return jsonify(state_json(accepted=accepted))

    # -----------------------------------------------------------------------
    # API: Config Changes
    # -----------------------------------------------------------------------
    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        algo_key = payload().get("algo_key", "")
        with lock:
            try:
                accepted = controller.select_algorithm(algo_key)
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            info = controller.algorithm_info
            return jsonify(state_json(
                accepted=accepted,
                card=algorithm_card(info),
                pseudocode=pseudocode_viewer(info.pseudocode),
            ))

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        data = payload()
        try:
            slider = int_field(data, "slider")
            ms     = float(data["ms"]) if "ms" in data else None
        except (TypeError, ValueError):
            return jsonify({"error": "'slider' must be an integer and 'ms' a number"}), 400
        if slider is None and ms is None:
            return jsonify({"error": "Provide 'slider' or 'ms'"}), 400
        with lock:
            if slider is not None:
                controller.set_speed_slider(slider)
            else:
                controller.set_speed(ms)
            return jsonify({"speed_ms": round(controller.pacing.speed_ms, 2)})

    # -----------------------------------------------------------------------
    # API: Headless trace
    # -----------------------------------------------------------------------
    @app.route("/api/trace", methods=["POST"])
    def api_trace():
        data     = payload()
        algo_key = data.get("algo_key") or controller.algorithm
        if get_algorithm(algo_key) is None:
            return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400

        values = data.get("values")
        if values is None:
            with lock:
                values = list(controller.values)
        try:
            if isinstance(values, (str, bytes)) or any(isinstance(v, bool) for v in values):
                raise TypeError("values must be numbers")
            values = [float(v) for v in values]
        except (TypeError, ValueError):
            return jsonify({"error": "'values' must be a list of numbers"}), 400
        if len(values) > settings.max_size:
            return jsonify({"error": f"At most {settings.max_size} values"}), 400

        rec = Recorder()
        rec.start(algo_key, values)
        metrics = rec.run_to_completion()
        logger.info(
            "trace recorded: %s n=%d steps=%d", algo_key, metrics.size, metrics.total_steps,
        )
        result = rec.export()
        result["analytics"] = analytics_panel(metrics)
        return jsonify(result)

    return app


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    :root {
      --bg-dark: #161b22;
      --bg-darker: #0d1117;
      --bg-panel: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      margin: 0;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
    }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 320px;
      overflow: auto;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 14px;
      margin-bottom: 14px;
    }
    .panel h3 { margin: 0 0 10px; font-size: 14px; }
    .metrics-panel { display: flex; gap: 18px; font-size: 13px; }
    .algo-meta { display: flex; gap: 12px; color: var(--text-secondary); font-size: 12px; }
    .algo-badge { font-weight: 600; display: flex; align-items: center; gap: 8px; }
    .algo-badge-dot { width: 8px; height: 8px; border-radius: 50%; background: var(--accent-cyan); }
    .code-block { font-family: monospace; font-size: 13px; white-space: pre; }
    .explanation-text { font-size: 13px; color: var(--text-secondary); }
    .placeholder { color: var(--text-secondary); }
    button, select, input { width: 100%; margin-top: 6px; }
    .btn-primary { background: var(--accent-cyan); color: white; border: none; padding: 8px; border-radius: 8px; }
    .btn-secondary { background: transparent; color: var(--text-primary); border: 1px solid var(--border); padding: 8px; border-radius: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="playback-slot">{{ playback|safe }}</div>
    {{ algo_selector|safe }}
    {{ array_ctrl|safe }}
    {{ speed|safe }}
    <div id="card-slot">{{ card|safe }}</div>
  </div>

  <div id="main">
    <div id="metrics-slot">{{ metrics|safe }}</div>
    <div id="canvas-container">{{ svg|safe }}</div>
    <div id="bottom-panel">
      <div id="pseudocode-slot">{{ pseudocode|safe }}</div>
      <div>
        <div id="explanation-slot">{{ explanation|safe }}</div>
        <div id="analytics-slot">{{ analytics|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return res.json();
    }

    function setInputsEnabled(enabled) {
      for (const id of ['algo-selector', 'size-range', 'btn-new-array']) {
        const el = document.getElementById(id);
        if (el) el.disabled = !enabled;
      }
    }

    function applyState(s) {
      if (!s || s.error) return;
      document.getElementById('canvas-container').innerHTML = s.svg;
      const play = document.getElementById('btn-play');
      if (play && play.dataset.status !== s.status) {
        play.dataset.status = s.status;
        play.textContent = s.play_label;
      }
      document.getElementById('metric-comparisons').textContent = 'Comparisons: ' + s.comparisons;
      document.getElementById('metric-writes').textContent = 'Writes: ' + s.writes;
      document.getElementById('metric-status').textContent = 'Status: ' + s.status;
      if (s.explanation) {
        document.getElementById('explanation-slot').textContent = s.explanation;
      }
      setInputsEnabled(s.inputs_enabled);
    }

    // bound once; applyState only relabels the button
    document.getElementById('btn-play')?.addEventListener('click', async () => {
      applyState(await post('/api/play'));
    });

    document.getElementById('btn-new-array')?.addEventListener('click', async () => {
      const size = parseInt(document.getElementById('size-range').value, 10);
      applyState(await post('/api/array/new', {size}));
    });
    document.getElementById('size-range')?.addEventListener('input', async (e) => {
      document.getElementById('size-value').textContent = e.target.value;
      applyState(await post('/api/array/new', {size: parseInt(e.target.value, 10)}));
    });
    document.getElementById('speed-range')?.addEventListener('input', async (e) => {
      const r = await post('/api/config/speed', {slider: parseInt(e.target.value, 10)});
      document.getElementById('speed-ms').textContent = Math.round(r.speed_ms);
    });
    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      const r = await post('/api/config/algo', {algo_key: e.target.value});
      if (r.card) document.getElementById('card-slot').innerHTML = r.card;
      if (r.pseudocode) document.getElementById('pseudocode-slot').innerHTML = r.pseudocode;
      applyState(r);
    });

    setInterval(async () => {
      const res = await fetch('/api/state');
      applyState(await res.json());
    }, 50);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Sorting Algorithm Visualizer on http://localhost:%d", settings.port)
    create_app(settings).run(debug=settings.debug, host=settings.host, port=settings.port)
