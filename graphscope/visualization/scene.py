"""Render model for a graph session, plus a standalone SVG export.

``build_scene`` collects everything a renderer needs for one frame: node
glyphs and edge segments in world space, the viewport transform, the open
popup and the overlay state. ``scene_to_svg`` draws a scene into a single SVG
document, which is handy for inspecting layouts and popup placement without
a host UI.
"""

import html
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..graph.abstraction import Item, Point, Rect, Size
from ..layout.edges import EdgeSegment
from .style import StyleManager

logger = logging.getLogger(__name__)


@dataclass
class NodeGlyph:
    """A node as drawn, in world space."""
    id: str
    center: Point
    radius: float
    fill: str
    stroke: str
    label: str
    label_position: Point
    selected: bool = False
    stroke_width: float = 2.0


@dataclass
class PopupView:
    """The open detail popup, in screen space."""
    item: Item
    bounds: Rect


@dataclass
class Scene:
    """One renderable frame of the graph."""
    screen: Size
    # translate(tx, ty) scale(zoom) maps world to screen
    translate: Point
    zoom: float
    zoom_percent: int
    nodes: List[NodeGlyph] = field(default_factory=list)
    edges: List[EdgeSegment] = field(default_factory=list)
    popup: Optional[PopupView] = None
    empty_state: Optional[Tuple[str, str]] = None
    suggestions: List[str] = field(default_factory=list)
    edge_color: str = "rgba(156, 163, 175, 0.3)"
    edge_width: float = 1.0

    # Transform changes are animated except while dragging
    animate: bool = True


def build_scene(session) -> Scene:
    """Snapshot a GraphSession into a Scene."""
    style: StyleManager = session.style
    viewport = session.viewport
    selected_id = session.selection.selected_id

    # screen = origin + pan + zoom * (world - origin)
    zoom = viewport.zoom
    origin = viewport.origin
    translate = origin + viewport.pan - origin.scaled(zoom)

    nodes = []
    for positioned in session.positioned:
        radius = style.node_radius(positioned.relevance)
        center = positioned.position
        selected = positioned.id == selected_id
        nodes.append(NodeGlyph(
            id=positioned.id,
            center=center,
            radius=radius,
            fill=style.node_color(positioned.relevance),
            stroke=style.node_stroke(selected),
            label=style.label(positioned.item.title),
            label_position=Point(center.x, center.y + radius + style.config.label_offset),
            selected=selected,
            stroke_width=style.config.stroke_width,
        ))

    popup = None
    item = session.selected_item
    if item is not None:
        popup = PopupView(item=item, bounds=session.popup_bounds)

    return Scene(
        screen=session.screen_size,
        translate=translate,
        zoom=zoom,
        zoom_percent=viewport.zoom_percent,
        nodes=nodes,
        edges=list(session.segments),
        popup=popup,
        empty_state=session.empty_state,
        suggestions=session.suggestions.all(),
        edge_color=style.config.edge_color,
        edge_width=style.config.edge_width,
        animate=not viewport.is_dragging,
    )


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def scene_to_svg(scene: Scene) -> str:
    """Render a scene as a standalone SVG document."""
    width, height = scene.screen.width, scene.screen.height

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{_fmt(width)}" height="{_fmt(height)}" '
        f'viewBox="0 0 {_fmt(width)} {_fmt(height)}" font-family="sans-serif">',
        '<rect width="100%" height="100%" fill="#ffffff"/>',
    ]

    if scene.empty_state is not None:
        headline, hint = scene.empty_state
        svg_parts.append(
            f'<text x="{_fmt(width / 2)}" y="{_fmt(height / 2)}" text-anchor="middle" '
            f'font-size="14" fill="#6b7280">{html.escape(headline)}</text>'
        )
        svg_parts.append(
            f'<text x="{_fmt(width / 2)}" y="{_fmt(height / 2 + 18)}" text-anchor="middle" '
            f'font-size="12" fill="#6b7280">{html.escape(hint)}</text>'
        )

    svg_parts.append(
        f'<g class="graph" transform="translate({_fmt(scene.translate.x)} {_fmt(scene.translate.y)}) '
        f'scale({_fmt(scene.zoom)})">'
    )

    for segment in scene.edges:
        svg_parts.append(
            f'<line x1="{_fmt(segment.start.x)}" y1="{_fmt(segment.start.y)}" '
            f'x2="{_fmt(segment.end.x)}" y2="{_fmt(segment.end.y)}" '
            f'stroke="{scene.edge_color}" stroke-width="{_fmt(scene.edge_width)}"/>'
        )

    for node in scene.nodes:
        svg_parts.append(
            f'<circle cx="{_fmt(node.center.x)}" cy="{_fmt(node.center.y)}" '
            f'r="{_fmt(node.radius)}" fill="{node.fill}" stroke="{node.stroke}" '
            f'stroke-width="{_fmt(node.stroke_width)}" data-id="{html.escape(node.id)}"/>'
        )
        svg_parts.append(
            f'<text x="{_fmt(node.label_position.x)}" y="{_fmt(node.label_position.y)}" '
            f'text-anchor="middle" font-size="12">{html.escape(node.label)}</text>'
        )

    svg_parts.append('</g>')

    # Zoom indicator, top-left like the on-screen control bar
    svg_parts.append(
        f'<text x="16" y="28" font-size="12" fill="#374151">{scene.zoom_percent}%</text>'
    )

    if scene.popup is not None:
        bounds = scene.popup.bounds
        item = scene.popup.item
        svg_parts.append(
            f'<rect x="{_fmt(bounds.x)}" y="{_fmt(bounds.y)}" '
            f'width="{_fmt(bounds.width)}" height="{_fmt(bounds.height)}" '
            f'rx="8" fill="#ffffff" fill-opacity="0.95" stroke="#d1d5db"/>'
        )
        lines = [item.title, item.source, item.duration, ", ".join(item.tags)]
        y = bounds.y + 24
        for line in lines:
            if not line:
                continue
            svg_parts.append(
                f'<text x="{_fmt(bounds.x + 16)}" y="{_fmt(y)}" font-size="12">'
                f'{html.escape(line)}</text>'
            )
            y += 18

    svg_parts.append('</svg>')
    return "\n".join(svg_parts)


def export_svg(scene: Scene, output_path: Path) -> Path:
    """Write a scene to ``output_path`` as SVG."""
    output_path = Path(output_path)
    output_path.write_text(scene_to_svg(scene))
    logger.info("Graph snapshot written to %s", output_path)
    return output_path
