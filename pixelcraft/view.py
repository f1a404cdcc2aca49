"""Zoom and pan state mapping between view and scene coordinates."""

from __future__ import annotations

ZOOM_STEP = 1.2


class CanvasView:
    """A uniform scale plus translation from scene space to view space."""

    def __init__(self) -> None:
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def wheel_event(self, delta_y: float) -> None:
        """Scrolling up zooms in; anything else zooms out."""
        if delta_y > 0:
            self.zoom_in()
        else:
            self.zoom_out()

    def zoom_in(self) -> None:
        self.zoom *= ZOOM_STEP

    def zoom_out(self) -> None:
        self.zoom *= 1 / ZOOM_STEP

    def pan_by(self, dx: float, dy: float) -> None:
        """Translate by ``(dx, dy)`` scene units."""
        self.offset_x += dx * self.zoom
        self.offset_y += dy * self.zoom

    def map_to_scene(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.offset_x) / self.zoom, (y - self.offset_y) / self.zoom

    def map_from_scene(self, x: float, y: float) -> tuple[float, float]:
        return x * self.zoom + self.offset_x, y * self.zoom + self.offset_y