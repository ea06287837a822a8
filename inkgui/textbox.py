"""Editable text box widget."""

from __future__ import annotations

from typing import Optional

from .canvas import Canvas, Datum, Display, UpdateMode
from .widget import Callback, Widget

EVENT_NONE = 0
EVENT_PRESSED = 1
BACKSPACE = "\u0008"


class Textbox(Widget):
    """A bordered box showing text; the last touched box holds the focus."""

    _touching_id = 0

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        w: int = 0,
        h: int = 0,
        display: Optional[Display] = None,
    ) -> None:
        super().__init__(x, y, w, h, display)
        self.canvas = Canvas(self.w, self.h)
        self._data = ""
        self.text_size = 26
        self.canvas.fill(15)
        self.canvas.draw_rect(0, 0, self.w, self.h, 15)
        self.canvas.text_size = self.text_size
        self.canvas.text_datum = Datum.TL
        self.canvas.text_color = 15
        self.margin_left = 8
        self.margin_right = 8
        self.margin_top = 8
        self.margin_bottom = 8
        self._state = EVENT_NONE

    @property
    def text(self) -> str:
        return self._data

    @property
    def state(self) -> int:
        return self._state

    @property
    def text_area(self) -> tuple[int, int, int, int]:
        """Left, top, right and bottom limits of the text inside the box."""
        return (
            self.margin_left,
            self.margin_top,
            self.w - self.margin_right,
            self.h - self.margin_bottom,
        )

    def set_text_margin(self, left: int, top: int, right: int, bottom: int) -> None:
        self.margin_left = left
        self.margin_top = top
        self.margin_right = right + left
        self.margin_bottom = bottom + top

    def set_text_size(self, size: int) -> None:
        self.text_size = size
        self.canvas.text_size = size
        self.draw(UpdateMode.GC16)

    def _render(self) -> None:
        canvas = self.canvas
        canvas.text_size = self.text_size
        canvas.fill(0)
        canvas.draw_rect(0, 0, self.w, self.h, 15)
        if self._state != EVENT_NONE:
            canvas.draw_rect(1, 1, self.w - 2, self.h - 2, 15)
            canvas.draw_rect(2, 2, self.w - 4, self.h - 4, 15)
        canvas.draw_string(self._data, self.margin_left, self.margin_top)

    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.hidden:
            return
        self._render()
        self._push(self.canvas, mode)

    def draw_on(self, canvas: Canvas) -> None:
        if self.hidden:
            return
        self._render()
        self.canvas.push_to(canvas, self.x, self.y)

    def bind(self, event: int, callback: Callback) -> None:
        """Text boxes take no callbacks."""

    def update_state(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        state = self._state
        if state == EVENT_PRESSED and Textbox._touching_id != self.id:
            state = EVENT_NONE
        if self.is_in_box(x, y):
            Textbox._touching_id = self.id
            state = EVENT_PRESSED
        self.set_state(state)

    def set_state(self, state: int) -> None:
        if state != self._state:
            if state == EVENT_PRESSED:
                Textbox._touching_id = self.id
            self._state = state

    def set_text(self, text: str) -> None:
        if text != self._data:
            self._data = text
            self.draw(UpdateMode.A2)

    def remove(self, index: int) -> None:
        """Delete the character at ``index``; -1 deletes the last one."""
        if 0 <= index < len(self._data):
            self._data = self._data[:index] + self._data[index + 1:]
        elif index == -1 and self._data:
            self._data = self._data[:-1]

    def add_text(self, text: str) -> None:
        """Append text, treating backspace characters as deletions."""
        if not text:
            return
        for char in text:
            if char == BACKSPACE:
                self.remove(-1)
            else:
                self._data += char
        self.draw(UpdateMode.A2)