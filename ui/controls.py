"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – Start / Pause / Resume button + status
  • algorithm_selector  – dropdown of registered algorithms
  • array_controls      – size slider + New Array button
  • speed_control       – speed slider
  • metrics_panel       – comparisons, writes, status
  • algorithm_card      – name, complexity, stability, description
  • pseudocode_viewer   – the selected algorithm's pseudocode
  • explanation_panel   – what the last step did
  • analytics_panel     – metrics of a recorded headless run

Design:
  - All panels are stateless render functions.
  - Configuration inputs render `disabled` while a run is in flight.
  - Output is raw HTML strings; the main app stitches them together.
"""

from html import escape
from typing import Optional, List

from algorithms import AlgoInfo
from engine import RunMetrics, RunStatus


def _disabled(flag: bool) -> str:
    return "disabled" if flag else ""


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
PLAY_LABELS = {
    RunStatus.IDLE:    "▶ Start",
    RunStatus.SORTING: "⏸ Pause",
    RunStatus.PAUSED:  "▶ Resume",
    RunStatus.DONE:    "▶ Start",
}


def playback_controls(status: RunStatus = RunStatus.IDLE) -> str:
    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <button id="btn-play" class="btn-primary" data-status="{status.value}">{PLAY_LABELS[status]}</button>
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

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector" {_disabled(disabled)}>
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Array Controls
# ---------------------------------------------------------------------------
def array_controls(
    size: int,
    min_size: int,
    max_size: int,
    disabled: bool = False,
) -> str:
    return f"""
    <div class="panel array-controls">
      <h3>📊 Array</h3>
      <label>Size: <span id="size-value">{size}</span></label>
      <input type="range" id="size-range" min="{min_size}" max="{max_size}" value="{size}" {_disabled(disabled)}>
      <button id="btn-new-array" class="btn-secondary" {_disabled(disabled)}>🎲 New Array</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Speed Control
# ---------------------------------------------------------------------------
def speed_control(slider: int, slider_min: int, slider_max: int, speed_ms: float) -> str:
    return f"""
    <div class="panel speed-control">
      <h3>⚡ Speed</h3>
      <input type="range" id="speed-range" min="{slider_min}" max="{slider_max}" value="{slider}">
      <div class="speed-info"><span id="speed-ms">{speed_ms:.0f}</span> ms / step</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Live Metrics
# ---------------------------------------------------------------------------
def metrics_panel(comparisons: int = 0, writes: int = 0, status: RunStatus = RunStatus.IDLE) -> str:
    return f"""
    <div class="panel metrics-panel">
      <span id="metric-comparisons">Comparisons: {comparisons}</span>
      <span id="metric-writes">Writes: {writes}</span>
      <span id="metric-status">Status: {status.value}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info Card
# ---------------------------------------------------------------------------
def algorithm_card(info: Optional[AlgoInfo]) -> str:
    if info is None:
        return '<div class="panel algo-card"><p class="placeholder">Select an algorithm.</p></div>'

    return f"""
    <div class="panel algo-card">
      <div class="algo-badge"><span class="algo-badge-dot"></span>{escape(info.label)}</div>
      <div class="algo-meta">
        <span>Time: {escape(info.complexity_time)}</span>
        <span>Space: {escape(info.complexity_space)}</span>
        <span>{info.stability_label}</span>
      </div>
      <p class="algo-description">{escape(info.description)}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str]) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = [
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(pseudocode_lines)
    ]
    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        explanation = "▶ Press <strong>Start</strong> to watch the algorithm step by step."
    else:
        explanation = escape(explanation)
    return f"""<div class="explanation-text">{explanation}</div>"""


# ---------------------------------------------------------------------------
# Analytics Panel (recorded run)
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📈 Analytics</h3>
          <p class="placeholder">Record a run to see its totals.</p>
        </div>
        """

    result = "✅ Sorted" if metrics.is_sorted else "❌ Not sorted"
    return f"""
    <div class="panel analytics-panel">
      <h3>📈 Analytics — {escape(metrics.algo_label)}</h3>
      <table>
        <tr><td>Size:</td><td><strong>{metrics.size}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Writes:</td><td><strong>{metrics.writes}</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Result:</td><td><strong>{result}</strong></td></tr>
      </table>
    </div>
    """
