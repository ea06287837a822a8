"""Base class shared by every on-screen widget."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .canvas import Canvas, Display, UpdateMode

Callback = Callable[[list], Any]


def align4(value: int) -> int:
    """Round a coordinate up to a multiple of four, as a signed 16-bit value."""
    aligned = (value + 3) & 0xFFFC
    return aligned - 0x10000 if aligned >= 0x8000 else aligned


class Widget(ABC):
    """A rectangular touch target.

    The hit box (``rx``/``by``) is fixed when the widget is created; moving it
    with ``set_geometry`` or ``set_pos`` changes where it is drawn only.
    """

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        w: int = 0,
        h: int = 0,
        display: Optional[Display] = None,
    ) -> None:
        self.x = align4(x)
        self.y = y
        self.w = align4(w)
        self.h = h
        self.rx = self.x + self.w
        self.by = self.y + self.h
        self.display = display
        self.id = 0
        self.selected = False
        self.hidden = False
        self.enabled = True
        self.custom_string = ""

    def is_in_box(self, x: int, y: int) -> bool:
        """Whether (x, y) lies strictly inside the hit box; also updates ``selected``."""
        if x == -1 or y == -1:
            return False
        self.selected = self.x < x < self.rx and self.y < y < self.by
        return self.selected

    def set_geometry(self, x: int, y: int, w: int, h: int) -> None:
        self.x = align4(x)
        self.y = y
        self.w = align4(w)
        self.h = h

    def set_pos(self, x: int, y: int) -> None:
        self.x = align4(x)
        self.y = y

    def update_gram(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.display is None:
            raise RuntimeError("widget has no display")
        self.display.update_area(self.x, self.y, self.w, self.h, mode)

    def _push(self, canvas: Canvas, mode: UpdateMode) -> None:
        if self.display is not None:
            canvas.push(self.display, self.x, self.y, mode)

    @abstractmethod
    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        """Push the widget to the display."""

    @abstractmethod
    def draw_on(self, canvas: Canvas) -> None:
        """Draw the widget onto another canvas."""

    @abstractmethod
    def bind(self, event: int, callback: Callback) -> None:
        """Attach a callback to an event."""

    @abstractmethod
    def update_state(self, x: int, y: int) -> None:
        """Feed a touch position, or (-1, -1) when the finger is up."""