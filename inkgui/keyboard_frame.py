"""Frame with a text box, an on-screen keyboard and text-size keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from .button import Button, ButtonEvent
from .canvas import Canvas, UpdateMode
from .frame import Frame
from .keyboard import Keyboard, Language
from .textbox import EVENT_PRESSED, Textbox

if TYPE_CHECKING:
    from .gui import Gui

DEFAULT_TEXT_SIZE = 26
MIN_TEXT_SIZE = 12
MAX_TEXT_SIZE = 96
TEXT_SIZE_STEP = 4
EMU_WIDTH = 320
EMU_HEIGHT = 160

_TEXTS = {
    Language.JA: ("ホーム", "鍵盤", "削除"),
    Language.ZH: ("主页", "文曲星模拟器", "清屏"),
    Language.EN: ("Home", "Dictionary Emulator", "CLR"),
}


class KeyboardFrame(Frame):
    """Typing screen: keys typed on the keyboard are appended to the text box."""

    def __init__(
        self, gui: Gui, horizontal: bool = False, language: Language = Language.EN
    ) -> None:
        super().__init__(gui)
        self.name = "Frame_Keyboard"
        display = self.display
        home, title, clear = _TEXTS.get(language, _TEXTS[Language.EN])
        size_label = str(DEFAULT_TEXT_SIZE)

        if horizontal:
            self.inputbox = Textbox(84, 25, 712, 250, display=display)
            self.key_textclear = Button(clear, 804, 25, 72, 120, display=display)
            self.key_textsize_plus = Button("+", 804, 157, 72, 40, display=display)
            self.key_textsize_reset = Button(size_label, 804, 196, 72, 40, display=display)
            self.key_textsize_minus = Button("-", 804, 235, 72, 40, display=display)
        else:
            key_y = 628
            self.inputbox = Textbox(4, 100, 532, 512, display=display)
            self.key_textclear = Button(clear, 4, key_y, 260, 52, display=display)
            self.key_textsize_plus = Button("+", 448, key_y, 88, 52, display=display)
            self.key_textsize_reset = Button(size_label, 360, key_y, 88, 52, display=display)
            self.key_textsize_minus = Button("-", 272, key_y, 88, 52, display=display)

        self.inputbox.set_state(EVENT_PRESSED)
        self.keyboard = Keyboard(horizontal, language=language, display=display)
        self.text_size = DEFAULT_TEXT_SIZE
        self.emulator_image: Optional[Sequence[int]] = None
        self.emu_canvas: Optional[Canvas] = None
        self._emu_pushed = False

        self.key_textclear.add_arg(ButtonEvent.RELEASED, 0, self.inputbox)
        self.key_textclear.bind(ButtonEvent.RELEASED, self._on_clear)
        for key, callback in (
            (self.key_textsize_plus, self._on_plus),
            (self.key_textsize_reset, self._on_reset),
            (self.key_textsize_minus, self._on_minus),
        ):
            key.add_arg(ButtonEvent.RELEASED, 0, self.inputbox)
            key.add_arg(ButtonEvent.RELEASED, 1, self.key_textsize_reset)
            key.bind(ButtonEvent.RELEASED, callback)

        self.exit_button(home)
        self.canvas_title.draw_string(title, 270, 34)
        self.key_exit.bind(ButtonEvent.RELEASED, lambda args: self.stop())

    def _on_clear(self, args: list) -> None:
        args[0].set_text("")

    def _apply_text_size(self, args: list) -> None:
        inputbox, size_key = args[0], args[1]
        size_key.set_label(str(self.text_size))
        size_key.draw(UpdateMode.GL16)
        inputbox.set_text_size(self.text_size)

    def _on_plus(self, args: list) -> None:
        self.text_size = min(self.text_size + TEXT_SIZE_STEP, MAX_TEXT_SIZE)
        self._apply_text_size(args)

    def _on_minus(self, args: list) -> None:
        self.text_size = max(self.text_size - TEXT_SIZE_STEP, MIN_TEXT_SIZE)
        self._apply_text_size(args)

    def _on_reset(self, args: list) -> None:
        self.text_size = DEFAULT_TEXT_SIZE
        self._apply_text_size(args)

    def init(self, args: list) -> int:
        self.is_run = 1
        self.display.clear()
        self.canvas_title.push(self.display, 0, 8, UpdateMode.NONE)
        for widget in (
            self.inputbox,
            self.keyboard,
            self.key_exit,
            self.key_textclear,
            self.key_textsize_plus,
            self.key_textsize_reset,
            self.key_textsize_minus,
        ):
            self.gui.add_object(widget)
        self.emu_canvas = Canvas(EMU_WIDTH, EMU_HEIGHT)
        if self.emulator_image is not None:
            self.emu_canvas.push_image(0, 0, EMU_WIDTH, EMU_HEIGHT, self.emulator_image)
        return 6

    def run(self) -> int:
        super().run()
        self.inputbox.add_text(self.keyboard.get_data())
        if not self._emu_pushed and self.emu_canvas is not None:
            self.emu_canvas.push(
                self.display, (540 - EMU_WIDTH) // 2, 180, UpdateMode.GC16
            )
            self._emu_pushed = True
        return 1