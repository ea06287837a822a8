"""Frame comparing the refresh modes of the e-paper panel side by side."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from .button import Button, ButtonEvent
from .canvas import Canvas, Datum, UpdateMode
from .frame import Frame
from .keyboard import Language

if TYPE_CHECKING:
    from .gui import Gui

MODE_DESCRIPTIONS = {
    UpdateMode.INIT: "Display initialization",
    UpdateMode.DU: "Monochrome menu, text input ",
    UpdateMode.GC16: "High quality images",
    UpdateMode.GL16: "Text with white background",
    UpdateMode.GLR16: "Text with white background",
    UpdateMode.GLD16: "Graphics with white background",
    UpdateMode.DU4: "Fast page flipping",
    UpdateMode.A2: "Anti-aliased text in menus",
}

_MODE_LABELS = ("DU", "GC16", "GL16", "GLR16", "GLD16", "DU4", "A2")

_TEXTS = {
    Language.JA: ("ホーム", "比較", "リセット"),
    Language.ZH: ("主页", "比较", "全部重置"),
    Language.EN: ("Home", "Compare", "Reset all"),
}

SAMPLE_X = 104
FIRST_ROW_Y = 168
ROW_PITCH = 108


def draw_compare_canvas(mode: int, canvas: Canvas) -> None:
    """Paint a 16-level gray ramp and a description of ``mode``."""
    canvas.fill(0)
    for level in range(16):
        canvas.fill_rect(level * 27, 0, 27, 50, level)
    description = MODE_DESCRIPTIONS.get(mode)
    if description is not None:
        canvas.draw_string(description, 8, 60)
    canvas.draw_rect(0, 0, 432, 100, 15)


class CompareFrame(Frame):
    """Seven sample rows, each refreshed with its own mode when tapped."""

    def __init__(self, gui: Gui, language: Language = Language.EN) -> None:
        super().__init__(gui)
        self.name = "Frame_Compare"
        self.canvas = Canvas(432, 100)
        self.canvas.text_size = 26
        self.canvas_time = Canvas(200, 30)
        self.canvas_time.text_size = 26
        self.canvas_time.text_datum = Datum.CR
        self._update_pending = False

        home, title, reset = _TEXTS.get(language, _TEXTS[Language.EN])
        self.exit_button(home)
        self.canvas_title.draw_string(title, 270, 34)

        reset_key = Button(reset, 4, 88, 532, 60, display=self.display)
        reset_key.bind(ButtonEvent.RELEASED, self._on_reset)
        self.mode_keys: list[Button] = [reset_key]
        for mode in range(1, 8):
            key = Button(None, 0, FIRST_ROW_Y + (mode - 1) * ROW_PITCH, 100, 100,
                         display=self.display)
            key.custom_string = str(mode)
            key.bind(ButtonEvent.RELEASED, partial(self._on_mode_key, key))
            self.mode_keys.append(key)
        for key, label in zip(self.mode_keys[1:], _MODE_LABELS):
            key.set_label(label)

        self.key_exit.bind(ButtonEvent.RELEASED, lambda args: self.stop())

    def _sample_y(self, mode: int) -> int:
        return FIRST_ROW_Y + (mode - 1) * ROW_PITCH

    def _on_reset(self, args: list) -> None:
        blank = Canvas(432, 748)
        blank.push(self.display, SAMPLE_X, FIRST_ROW_Y, UpdateMode.INIT)

    def _on_mode_key(self, key: Button, args: list) -> None:
        mode = int(key.custom_string)
        draw_compare_canvas(mode, self.canvas)
        self.canvas_time.fill(0)
        started = self.gui.clock()
        self.canvas.push(self.display, SAMPLE_X, self._sample_y(mode), UpdateMode(mode))
        elapsed = self.gui.clock() - started
        self.canvas_time.draw_string(f"{elapsed} ms", 200, 15)
        self.canvas_time.push(self.display, 330, 925, UpdateMode.GL16)

    def init(self, args: list) -> int:
        self.is_run = 1
        self._update_pending = True
        self.display.clear()
        self.canvas_title.push(self.display, 0, 8, UpdateMode.NONE)
        self.gui.add_object(self.key_exit)
        for key in self.mode_keys:
            self.gui.add_object(key)
        self.gui.set_auto_update(False)
        return 3

    def run(self) -> int:
        super().run()
        if self._update_pending:
            self._update_pending = False
            for mode in range(1, 8):
                draw_compare_canvas(mode, self.canvas)
                self.canvas.push(self.display, SAMPLE_X, self._sample_y(mode),
                                 UpdateMode(mode))
        return 1