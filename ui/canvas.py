"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: container snapshot → SVG string.

The renderer consumes:
  • container  – the dict produced by Container.to_dict() (or the
                 "container" entry of SortRunner.snapshot())
  • config     – visual config (background, frame, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  Works on a snapshot dict, never on live Line objects,
    so it can run on the web thread while a sort runs on the engine loop.
  - Each line's color is drawn as-is; the algorithm decides the colors.
  - A line's point is its baseline, so the rect's top edge is y - height.
"""

from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Visual Config
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg:            str = "#000000"
    frame_color:   str = "#30363d"
    frame_width:   int = 1

    # banner shown over the bars while the completion fill plays
    banner_color:  str = "#14ff09"
    banner_size:   int = 14
    banner_font:   str = "'JetBrains Mono', monospace"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    container: Dict[str, Any],
    config: CanvasConfig = CONFIG,
    banner: Optional[str] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        container : Container.to_dict() snapshot.
        config    : Visual config.
        banner    : Optional text drawn top-left (e.g. "SORTED").
    """
    width, height = container["resolution"]
    margin = container["frame_margin"]

    svg_parts = [
        f'<svg width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{width}" height="{height}" fill="{config.bg}"/>',
    ]

    # frame around the usable area
    if margin > 0:
        svg_parts.append(
            f'<rect x="{margin / 2}" y="{margin / 2}" width="{width - margin}" height="{height - margin}" '
            f'fill="none" stroke="{config.frame_color}" stroke-width="{config.frame_width}"/>'
        )

    for line in container["lines"]:
        svg_parts.append(_render_line(line))

    if banner:
        svg_parts.append(
            f'<text x="{margin + 4}" y="{margin + config.banner_size + 2}" '
            f'font-size="{config.banner_size}" font-family="{config.banner_font}" '
            f'fill="{config.banner_color}">{_escape(banner)}</text>'
        )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Line Rendering
# ---------------------------------------------------------------------------
def _render_line(line: Dict[str, Any]) -> str:
    top = line["y"] - line["height"]
    return (
        f'<rect class="line" x="{line["x"]:.2f}" y="{top:.2f}" '
        f'width="{line["width"]:.2f}" height="{line["height"]:.2f}" fill="{line["color"]}"/>'
    )


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
