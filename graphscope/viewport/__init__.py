"""Viewport: pan/zoom state and the world/screen transform."""

from .controller import ViewportController, ViewportConfig

__all__ = [
    "ViewportController",
    "ViewportConfig",
]
