"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: (values, Highlight) → SVG string.

The renderer consumes:
  • values     – a snapshot of the array (any sequence of floats in [0, 1))
  • highlight  – compare / swap / sorted index sets for this frame
  • config     – visual config (canvas size, colours, gap, …)

and produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets back
    a string; the values sequence is only read.
  - A bar's height is 10% of the canvas plus 90% scaled by its value,
    so a value of 0 is still visible.
  - Colour is a dict lookup on Highlight.state_of(idx).
"""

from typing import Dict, Optional, Sequence

from bars import Highlight, EMPTY_HIGHLIGHT


# ---------------------------------------------------------------------------
# Visual Config — colour palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    bar_colors: Dict[str, str] = {
        "default": "#0ea5e9",   # cyan blue
        "compare": "#f59e0b",   # amber
        "swap":    "#f43f5e",   # rose
        "sorted":  "#10b981",   # emerald
    }

    bar_gap:         float = 2.0     # px between bars
    min_height_frac: float = 0.10    # height of a bar whose value is 0
    corner_radius:   float = 2.0

    empty_text_color: str = "#7d8590"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[float],
    highlight: Optional[Highlight] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string with one <rect> per value.

    Args:
        values    : Array snapshot to draw.
        highlight : Index sets to colour (None → plain bars).
        config    : Visual config.
    """
    hl = highlight if highlight is not None else EMPTY_HIGHLIGHT
    w, h = config.width, config.height

    svg_parts = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{w}" height="{h}" fill="{config.bg}"/>',
    ]

    n = len(values)
    if n == 0:
        svg_parts.append(
            f'<text x="{w / 2}" y="{h / 2}" text-anchor="middle" '
            f'fill="{config.empty_text_color}" font-size="14">No data</text>'
        )
    else:
        slot = w / n
        bar_w = max(1.0, slot - config.bar_gap)
        for idx, value in enumerate(values):
            svg_parts.append(_render_bar(idx, value, slot, bar_w, hl, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_height(value: float, config: CanvasConfig = CONFIG) -> float:
    """Pixel height of one bar; values are clamped into [0, 1]."""
    v = min(1.0, max(0.0, float(value)))
    frac = config.min_height_frac + v * (1.0 - config.min_height_frac)
    return frac * config.height


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    idx: int,
    value: float,
    slot: float,
    bar_w: float,
    hl: Highlight,
    config: CanvasConfig,
) -> str:
    state = hl.state_of(idx)
    fill  = config.bar_colors.get(state, config.bar_colors["default"])
    bh    = bar_height(value, config)
    x     = idx * slot + (slot - bar_w) / 2
    y     = config.height - bh
    return (
        f'<rect class="bar {state}" data-idx="{idx}" x="{x:.2f}" y="{y:.2f}" '
        f'width="{bar_w:.2f}" height="{bh:.2f}" rx="{config.corner_radius}" fill="{fill}"/>'
    )
