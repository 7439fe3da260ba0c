"""Node and edge styling.

Maps relevance to node radius and color bucket, and shortens titles for the
node labels. Values come from the ``style`` section of the graph
configuration (see graph_defaults.yaml).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

logger = logging.getLogger(__name__)


def _default_color_buckets() -> List[Tuple[float, str]]:
    # (exclusive lower bound on relevance, color), highest first
    return [
        (0.8, "rgb(59, 130, 246)"),   # Blue
        (0.6, "rgb(16, 185, 129)"),   # Emerald
        (0.4, "rgb(245, 158, 11)"),   # Amber
    ]


@dataclass
class StyleConfig:
    """Visual constants for nodes, labels and edges."""
    # Node radius = node_base_radius + relevance * node_relevance_radius
    node_base_radius: float = 20.0
    node_relevance_radius: float = 30.0

    color_buckets: List[Tuple[float, str]] = field(default_factory=_default_color_buckets)
    fallback_color: str = "rgb(156, 163, 175)"  # Gray
    selected_stroke: str = "#000"
    stroke_width: float = 2.0

    label_max_chars: int = 20
    label_offset: float = 16.0  # below the node edge

    edge_color: str = "rgba(156, 163, 175, 0.3)"
    edge_width: float = 1.0

    def __post_init__(self):
        if self.node_base_radius <= 0 or self.node_relevance_radius < 0:
            raise ValueError("Node radius settings must be positive")
        if self.label_max_chars < 1:
            raise ValueError("label_max_chars must be at least 1")
        self.color_buckets = sorted(
            ((float(t), str(c)) for t, c in self.color_buckets),
            key=lambda bucket: bucket[0],
            reverse=True,
        )


class StyleManager:
    """Applies a StyleConfig to individual items."""

    def __init__(self, config: StyleConfig = None):
        self.config = config or StyleConfig()

    def node_radius(self, relevance: float) -> float:
        """World-space radius of a node."""
        return self.config.node_base_radius + relevance * self.config.node_relevance_radius

    def node_color(self, relevance: float) -> str:
        for threshold, color in self.config.color_buckets:
            if relevance > threshold:
                return color
        return self.config.fallback_color

    def node_stroke(self, selected: bool) -> str:
        return self.config.selected_stroke if selected else "transparent"

    def label(self, title: str) -> str:
        """Title shortened to ``label_max_chars`` with a trailing ellipsis."""
        limit = self.config.label_max_chars
        if len(title) > limit:
            return f"{title[:limit]}..."
        return title
