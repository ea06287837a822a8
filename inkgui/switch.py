"""Multi-state toggle widget."""

from __future__ import annotations

from typing import Any, Optional

from .button import ButtonEvent
from .canvas import Canvas, Display, UpdateMode
from .widget import Callback, Widget

SWITCH_MAX_STATE = 5


def _store_arg(args: list, index: int, arg: Any) -> None:
    if len(args) > index:
        args[index] = arg
    else:
        args.append(arg)


class Switch(Widget):
    """A widget that cycles through its states on each tap."""

    def __init__(
        self,
        state_count: int,
        x: int = 0,
        y: int = 0,
        w: int = 0,
        h: int = 0,
        display: Optional[Display] = None,
    ) -> None:
        super().__init__(x, y, w, h, display)
        if state_count < 1:
            raise ValueError("a switch needs at least one state")
        self.state_count = min(state_count, SWITCH_MAX_STATE)
        self._canvases: list[Canvas] = []
        for _ in range(self.state_count):
            canvas = Canvas(self.w, self.h)
            canvas.text_size = 26
            canvas.fill(0)
            canvas.draw_rect(0, 0, self.w, self.h, 15)
            self._canvases.append(canvas)
        self._pressed_canvas = Canvas(self.w, self.h)
        self._pressed_canvas.fill(15)
        self._callbacks: list[Optional[Callback]] = [None] * SWITCH_MAX_STATE
        self._callback_args: list[list] = [[] for _ in range(SWITCH_MAX_STATE)]
        self._state = 0
        self._event = ButtonEvent.NONE
        self.labels = [""] * SWITCH_MAX_STATE

    @property
    def state(self) -> int:
        return self._state

    def canvas(self, state: int) -> Canvas:
        """The canvas for a state, or the pressed canvas for -1."""
        if state == -1:
            return self._pressed_canvas
        if not 0 <= state < self.state_count:
            raise IndexError(f"switch has no state {state}")
        return self._canvases[state]

    def set_label(self, state: int, label: str) -> None:
        if not 0 <= state < self.state_count:
            return
        canvas = self._canvases[state]
        canvas.fill(0)
        canvas.draw_rect(0, 0, self.w, self.h, 15)
        canvas.text_size = 26
        canvas.text_datum = 4
        canvas.text_color = 15
        canvas.draw_string(label, self.w // 2, self.h // 2 + 5)
        self.labels[state] = label

    def _current_canvas(self) -> Canvas:
        if self._event == ButtonEvent.PRESSED:
            return self._pressed_canvas
        return self._canvases[self._state]

    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.hidden:
            return
        self._push(self._current_canvas(), mode)

    def draw_on(self, canvas: Canvas) -> None:
        if self.hidden:
            return
        self._current_canvas().push_to(canvas, self.x, self.y)

    def bind(self, state: int, callback: Callback) -> None:
        """Call ``callback`` whenever the switch moves into ``state``."""
        if 0 <= state < SWITCH_MAX_STATE:
            self._callbacks[state] = callback

    def update_state(self, x: int, y: int) -> None:
        if not self.enabled or self.hidden:
            return
        if self.is_in_box(x, y):
            if self._event == ButtonEvent.NONE:
                self._event = ButtonEvent.PRESSED
                self.draw()
        elif self._event == ButtonEvent.PRESSED:
            self._event = ButtonEvent.NONE
            self._state = (self._state + 1) % self.state_count
            self.draw()
            callback = self._callbacks[self._state]
            if callback is not None:
                callback(self._callback_args[self._state])

    def set_state(self, state: int) -> None:
        """Jump to a state without firing callbacks; out-of-range values are ignored."""
        if not 0 <= state < self.state_count:
            return
        self._state = state
        self.draw(UpdateMode.NONE)

    def add_arg(self, state: int, index: int, arg: Any) -> None:
        if 0 <= state < SWITCH_MAX_STATE:
            _store_arg(self._callback_args[state], index, arg)