"""Push button widget with normal and pressed canvases."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Any, Optional, Sequence

from .canvas import Canvas, Datum, Display, UpdateMode
from .widget import Callback, Widget


class ButtonEvent(IntEnum):
    NONE = 0
    PRESSED = 1
    RELEASED = 2


class ButtonStyle(IntFlag):
    BORDERLESS = 0x01
    SOLID_BORDER = 0x02
    ALIGN_LEFT = 0x04
    ALIGN_RIGHT = 0x08
    ALIGN_CENTER = 0x10
    INVISIBLE = 0x20
    DEFAULT = SOLID_BORDER | ALIGN_CENTER


def _store_arg(args: list, index: int, arg: Any) -> None:
    if len(args) > index:
        args[index] = arg
    else:
        args.append(arg)


class Button(Widget):
    """A button that fires callbacks when pressed and when released.

    With ``label=None`` the canvases are left blank for the caller to paint.
    """

    def __init__(
        self,
        label: Optional[str] = None,
        x: int = 0,
        y: int = 0,
        w: int = 0,
        h: int = 0,
        style: ButtonStyle = ButtonStyle.DEFAULT,
        display: Optional[Display] = None,
    ) -> None:
        super().__init__(x, y, w, h, display)
        self._pressed_cb: Optional[Callback] = None
        self._released_cb: Optional[Callback] = None
        self._pressed_args: list = []
        self._released_args: list = []
        self.state = ButtonEvent.NONE
        self._label = ""
        self.invisible = False
        self.canvas_normal = Canvas(self.w, self.h)
        self.canvas_pressed = Canvas(self.w, self.h)
        if label is None:
            return
        if style & ButtonStyle.INVISIBLE:
            self.invisible = True
            return

        self._label = label
        normal, pressed = self.canvas_normal, self.canvas_pressed
        normal.fill(0)
        normal.text_size = 26
        normal.text_color = 15
        pressed.fill(15)
        pressed.text_size = 26
        pressed.text_color = 0
        if style & ButtonStyle.SOLID_BORDER:
            normal.draw_rect(0, 0, self.w, self.h, 15)

        text_y = self.h // 2 + 3
        if style & ButtonStyle.ALIGN_LEFT:
            datum, text_x = Datum.CL, 5
        elif style & ButtonStyle.ALIGN_RIGHT:
            datum, text_x = Datum.CR, self.w - 5
        elif style & ButtonStyle.ALIGN_CENTER:
            datum, text_x = Datum.CC, self.w // 2
        else:
            return
        for canvas in (normal, pressed):
            canvas.text_datum = datum
            canvas.draw_string(label, text_x, text_y)

    @property
    def label(self) -> str:
        return self._label

    def _current_canvas(self) -> Optional[Canvas]:
        if self.state in (ButtonEvent.NONE, ButtonEvent.RELEASED):
            return self.canvas_normal
        if self.state == ButtonEvent.PRESSED:
            return self.canvas_pressed
        return None

    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.hidden or self.invisible:
            return
        canvas = self._current_canvas()
        if canvas is not None:
            self._push(canvas, mode)

    def draw_on(self, canvas: Canvas) -> None:
        if self.hidden:
            return
        source = self._current_canvas()
        if source is not None:
            source.push_to(canvas, self.x, self.y)

    def bind(self, event: int, callback: Callback) -> None:
        if event == ButtonEvent.PRESSED:
            self._pressed_cb = callback
        elif event == ButtonEvent.RELEASED:
            self._released_cb = callback

    def update_state(self, x: int, y: int) -> None:
        if not self.enabled or self.hidden:
            return
        if self.is_in_box(x, y):
            if self.state == ButtonEvent.NONE:
                self.state = ButtonEvent.PRESSED
                self.draw()
                if self._pressed_cb is not None:
                    self._pressed_cb(self._pressed_args)
        elif self.state == ButtonEvent.PRESSED:
            self.state = ButtonEvent.NONE
            self.draw()
            if self._released_cb is not None:
                self._released_cb(self._released_args)

    def set_label(self, label: str) -> None:
        """Repaint both canvases with a centred label."""
        self._label = label
        normal, pressed = self.canvas_normal, self.canvas_pressed
        normal.fill(0)
        normal.draw_rect(0, 0, self.w, self.h, 15)
        normal.text_size = 26
        normal.text_datum = Datum.CC
        normal.text_color = 15
        normal.draw_string(label, self.w // 2, self.h // 2 + 3)

        pressed.fill(15)
        pressed.text_size = 26
        pressed.text_datum = Datum.CC
        pressed.text_color = 0
        pressed.draw_string(label, self.w // 2, self.h // 2 + 3)

    def add_arg(self, event: int, index: int, arg: Any) -> None:
        """Set the callback argument at ``index``, appending if the list is shorter."""
        if event == ButtonEvent.PRESSED:
            _store_arg(self._pressed_args, index, arg)
        elif event == ButtonEvent.RELEASED:
            _store_arg(self._released_args, index, arg)

    def set_bmp_button(self, label_left: str, label_right: str, image: Sequence[int]) -> None:
        """Paint a bordered button with a 32x32 icon and optional side labels."""
        normal = self.canvas_normal
        normal.fill(0)
        normal.draw_rect(0, 0, self.w, self.h, 15)
        normal.text_size = 26
        normal.text_color = 15
        if label_left:
            normal.text_datum = Datum.CL
            normal.draw_string(label_left, 47 + 8, (self.h >> 1) + 5)
        if label_right:
            normal.text_datum = Datum.CR
            normal.draw_string(label_right, self.w - 15, (self.h >> 1) + 5)
        normal.push_image(15, (self.h >> 1) - 16, 32, 32, image)
        self.canvas_pressed.copy_from(normal)
        self.canvas_pressed.reverse_color()