"""On-screen keyboard built from buttons and switches."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Optional

from .button import Button
from .canvas import Canvas, Display, UpdateMode
from .switch import Switch
from .widget import Callback, Widget


class Language(IntEnum):
    """Interface language used for the keyboard's function keys."""

    EN = 0
    ZH = 1
    JA = 2


class KeyboardStyle(IntFlag):
    NORMAL_TEXT = 0x01
    NEED_CONFIRM = 0x02
    DEFAULT = NORMAL_TEXT


class Layout(IntEnum):
    LOWER_ALPHA = 0
    UPPER_ALPHA = 1
    NUMBER = 2
    SYMBOL = 3


LOWER_CASE_KEYS = (
    "q", "w", "e", "r", "t", "y", "u", "i", "o", "p",
    "a", "s", "d", "f", "g", "h", "j", "k", "l",
    "z", "x", "c", "v", "b", "n", "m",
)

UPPER_CASE_KEYS = (
    "Q", "W", "E", "R", "T", "Y", "U", "I", "O", "P",
    "A", "S", "D", "F", "G", "H", "J", "K", "L",
    "Z", "X", "C", "V", "B", "N", "M",
)

NUMBER_KEYS = (
    "1", "2", "3", "4", "5", "6", "7", "8", "9", "0",
    "-", "/", ":", ";", "(", ")", "$", "&", "@",
    "_", "\"", ".", ",", "?", "!", "'",
)

SYMBOL_KEYS = (
    "[", "]", "{", "}", "#", "%", "^", "*", "+", "=",
    "_", "\\", "|", "~", "<", ">", "€", "£", "¥",
    "•", "✿", "\u221A", "\u221E", "\u2103", "\u2109", "\u2116",
)

KEY_MAPS = {
    Layout.LOWER_ALPHA: LOWER_CASE_KEYS,
    Layout.UPPER_ALPHA: UPPER_CASE_KEYS,
    Layout.NUMBER: NUMBER_KEYS,
    Layout.SYMBOL: SYMBOL_KEYS,
}

KEY_SPACE = 26
KEY_BACKSPACE = 27
KEY_WRAP = 28
KEY_CASE = 29
KEY_SWITCH = 30
KEY_NUMBER = 31

SW_CASE = 0
SW_SWITCH = 1
SW_NUMBER = 2

_LETTER_ROWS = ((0, 10), (10, 19), (19, 26))

_SPACE_LABELS = {Language.JA: "空白", Language.ZH: "空格", Language.EN: "Space"}
_WRAP_LABELS = {
    Language.JA: ("改行", "確認"),
    Language.ZH: ("换行", "确认"),
    Language.EN: ("Wrap", "Confirm"),
}


class Keyboard(Widget):
    """A 32-key keyboard; typed characters accumulate until ``get_data``."""

    def __init__(
        self,
        horizontal: bool = True,
        style: KeyboardStyle = KeyboardStyle.DEFAULT,
        language: Language = Language.EN,
        display: Optional[Display] = None,
    ) -> None:
        super().__init__(display=display)
        if style & KeyboardStyle.NORMAL_TEXT:
            wrap_choice = 0
        elif style & KeyboardStyle.NEED_CONFIRM:
            wrap_choice = 1
        else:
            raise ValueError("keyboard style needs an input mode")

        if horizontal:
            key_w, key_h, gap, base_x = 72, 44, 8, 84
            rows = (302, 356, 410, 464)
            row_offsets = (0, 40, 118)
            backspace = (base_x + 792 - 96, rows[2], 96)
            space = (base_x + 162, rows[3], 468)
            wrap = (base_x + 792 - 152, rows[3], 152)
            case = (base_x, rows[2], 96)
            switch = (base_x, rows[3], 68)
            number = (base_x + 162 - gap - 68, rows[3], 68)
        else:
            key_w, key_h, gap, base_x = 44, 52, 8, 16
            base_y = 700
            rows = (base_y, base_y + 64, base_y + 128, base_y + 192)
            row_offsets = (0, 28, 80)
            backspace = (base_x + 512 - 60, rows[2], 60)
            space = (base_x + 132, rows[3], 244)
            wrap = (base_x + 512 - 128, rows[3], 128)
            case = (base_x, rows[2], 60)
            switch = (base_x, rows[3], 56)
            number = (base_x + 56 + gap, rows[3], 60)

        self.buttons: list[Button] = []
        for (start, stop), row_y, offset in zip(_LETTER_ROWS, rows, row_offsets):
            for column, label in enumerate(LOWER_CASE_KEYS[start:stop]):
                self.buttons.append(
                    Button(label, base_x + offset + (gap + key_w) * column, row_y,
                           key_w, key_h, display=display)
                )

        space_label = _SPACE_LABELS.get(language, _SPACE_LABELS[Language.EN])
        wrap_label = _WRAP_LABELS.get(language, _WRAP_LABELS[Language.EN])[wrap_choice]
        bx, by, bw = space
        self.buttons.append(Button(space_label, bx, by, bw, key_h, display=display))
        bx, by, bw = backspace
        backspace_btn = Button("", bx, by, bw, key_h, display=display)
        backspace_btn.canvas_pressed.fill(0)
        backspace_btn.canvas_pressed.reverse_color()
        self.buttons.append(backspace_btn)
        bx, by, bw = wrap
        self.buttons.append(Button(wrap_label, bx, by, bw, key_h, display=display))

        self.switches: list[Switch] = [
            Switch(2, sx, sy, sw, key_h, display=display) for sx, sy, sw in (case, switch, number)
        ]
        self.switches[SW_CASE].canvas(1).reverse_color()
        self.switches[SW_SWITCH].set_label(0, "あ")
        self.switches[SW_SWITCH].set_label(1, "Aa")
        self.switches[SW_NUMBER].set_label(0, "123")
        self.switches[SW_NUMBER].set_label(1, "Abc")

        self.keys: list[Widget] = [*self.buttons, *self.switches]
        self._data = ""
        self._layout = Layout.LOWER_ALPHA

    @property
    def layout(self) -> Layout:
        return self._layout

    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.hidden:
            return
        for key in self.keys:
            key.draw(mode)

    def draw_on(self, canvas: Canvas) -> None:
        if self.hidden:
            return
        for key in self.keys:
            key.draw_on(canvas)

    def bind(self, event: int, callback: Callback) -> None:
        """The keyboard takes no callbacks; read typed text with ``get_data``."""

    def _apply_layout(self, layout: Layout) -> None:
        for button, label in zip(self.buttons, KEY_MAPS[layout]):
            button.set_label(label)
        self._layout = layout

    def _refresh(self) -> None:
        self.draw(UpdateMode.NONE)
        if self.display is not None:
            self.display.update_full(UpdateMode.GL16)

    def _toggle_case(self) -> None:
        case_switch = self.switches[SW_CASE]
        if self._layout in (Layout.NUMBER, Layout.SYMBOL):
            self._apply_layout(Layout.NUMBER if case_switch.state == 1 else Layout.SYMBOL)
        else:
            self._apply_layout(
                Layout.LOWER_ALPHA if case_switch.state == 1 else Layout.UPPER_ALPHA
            )
        case_switch.update_state(-1, -1)
        self._refresh()

    def _toggle_number(self) -> None:
        case_switch = self.switches[SW_CASE]
        number_switch = self.switches[SW_NUMBER]
        if number_switch.state == 1:
            case_switch.set_state(0)
            for state in (0, 1):
                canvas = case_switch.canvas(state)
                canvas.fill(0)
                canvas.draw_rect(0, 0, case_switch.w, case_switch.h, 15)
            case_switch.canvas(1).reverse_color()
            self._apply_layout(Layout.LOWER_ALPHA)
        else:
            case_switch.set_state(0)
            case_switch.set_label(0, "#+-")
            case_switch.set_label(1, "123")
            self._apply_layout(Layout.NUMBER)
        number_switch.update_state(-1, -1)
        self._refresh()

    def update_state(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        for index, key in enumerate(self.keys):
            pressed = key.is_in_box(x, y)
            key.update_state(x, y)
            if not pressed:
                continue
            if index < 26:
                self._data += KEY_MAPS[self._layout][index]
            elif index == KEY_BACKSPACE:
                self._data += "\u0008"
            elif index == KEY_SPACE:
                self._data += " "
            elif index == KEY_WRAP:
                self._data += "\n"
            elif index == KEY_CASE:
                self._toggle_case()
            elif index == KEY_NUMBER:
                self._toggle_number()

    def get_data(self) -> str:
        """Return the text typed since the last call and forget it."""
        data, self._data = self._data, ""
        return data