"""The scene turns pointer input in scene coordinates into pixel requests."""

from __future__ import annotations

from typing import Callable

PixelCallback = Callable[[int, int], None]


class CanvasScene:
    """Reports a ``pixel_drawn(x, y)`` event for presses and left-button drags."""

    def __init__(self) -> None:
        self._listeners: list[PixelCallback] = []

    def connect(self, callback: PixelCallback) -> None:
        """Register a callback receiving integer pixel coordinates."""
        self._listeners.append(callback)

    def _emit(self, x: float, y: float) -> None:
        px, py = int(x), int(y)
        for listener in self._listeners:
            listener(px, py)

    def mouse_press_event(self, x: float, y: float) -> None:
        """Any button press draws at the pressed position."""
        self._emit(x, y)

    def mouse_move_event(self, x: float, y: float, left_button: bool) -> None:
        """Moving draws only while the left button is held."""
        if left_button:
            self._emit(x, y)