"""Smart-home control panel frame with light, socket and air-conditioner switches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from .button import Button, ButtonEvent
from .canvas import Canvas, Datum, UpdateMode
from .frame import Frame
from .keyboard import Language
from .switch import Switch

if TYPE_CHECKING:
    from .gui import Gui

ICON_SIZE = 92
DEFAULT_TEMPERATURE = 26

_TEXTS = {
    Language.JA: ("ホーム", "コントロールパネル"),
    Language.ZH: ("主页", "控制面板"),
    Language.EN: ("Home", "Control Panel"),
}

_SWITCH_TEXTS = {
    Language.JA: (("ランプ", "客間"), ("ランプ", "寝室"), ("炊飯器", "厨房"), ("パソコン", "寝室")),
    Language.ZH: (("吸顶灯", "客厅"), ("台灯", "卧室"), ("电饭煲", "厨房"), ("电脑", "卧室")),
    Language.EN: (
        ("Ceiling Light", "Living Room"),
        ("Table Lamp", "Bedroom"),
        ("Rice Cooker", "Kitchen"),
        ("Computer", "Bedroom"),
    ),
}

_AIR_ROOMS = {
    Language.JA: ("寝室", "客間"),
    Language.ZH: ("卧室", "客厅"),
    Language.EN: ("Bedroom", "Living Room"),
}


def _erase(canvas: Canvas, x: int, y: int, w: int, h: int, color: int) -> None:
    """Fill a rectangle and drop the strings anchored inside it."""
    canvas.fill_rect(x, y, w, h, color)
    canvas.texts = [
        t for t in canvas.texts if not (x <= t.x < x + w and y <= t.y < y + h)
    ]


def _air_adjust(args: list) -> None:
    """Raise or lower the set temperature of an air-conditioner switch that is on."""
    button, switch = args[0], args[1]
    if switch.state == 0:
        return
    temperature = int(switch.custom_string)
    temperature += 1 if int(button.custom_string) == 1 else -1
    switch.custom_string = str(temperature)
    canvas = switch.canvas(1)
    canvas.text_size = 36
    canvas.text_datum = Datum.TC
    _erase(canvas, 114 - 100, 108, 200, 38, 0)
    canvas.draw_string(f"{temperature}℃", 114, 108)
    if switch.display is not None:
        canvas.push(switch.display, switch.x, switch.y, UpdateMode.A2)


def _air_off(args: list) -> None:
    args[0].enabled = False
    args[1].enabled = False


def _air_on(args: list) -> None:
    args[0].enabled = True
    args[1].enabled = True


class HomeFrame(Frame):
    """Four on/off switches and two air conditioners with temperature keys."""

    def __init__(self, gui: Gui, language: Language = Language.EN) -> None:
        super().__init__(gui)
        self.name = "Frame_Home"
        display = self.display

        self.sw_light1 = Switch(2, 20, 44 + 72, 228, 228, display=display)
        self.sw_light2 = Switch(2, 288, 44 + 72, 228, 228, display=display)
        self.sw_socket1 = Switch(2, 20, 324 + 72, 228, 228, display=display)
        self.sw_socket2 = Switch(2, 288, 324 + 72, 228, 228, display=display)
        self.sw_air_1 = Switch(2, 20, 604 + 72, 228, 184, display=display)
        self.sw_air_2 = Switch(2, 288, 604 + 72, 228, 184, display=display)
        key_y = 604 + 72 + 184
        self.key_air_1_plus = Button(None, 20 + 116, key_y, 112, 44, display=display)
        self.key_air_1_minus = Button(None, 20, key_y, 116, 44, display=display)
        self.key_air_2_plus = Button(None, 288 + 116, key_y, 112, 44, display=display)
        self.key_air_2_minus = Button(None, 288, key_y, 116, 44, display=display)

        texts = _SWITCH_TEXTS.get(language, _SWITCH_TEXTS[Language.EN])
        for switch, (title, subtitle) in zip(
            (self.sw_light1, self.sw_light2, self.sw_socket1, self.sw_socket2), texts
        ):
            self.init_switch(switch, title, subtitle)

        rooms = _AIR_ROOMS.get(language, _AIR_ROOMS[Language.EN])
        air_units = (
            (self.sw_air_1, self.key_air_1_plus, self.key_air_1_minus, rooms[0]),
            (self.sw_air_2, self.key_air_2_plus, self.key_air_2_minus, rooms[1]),
        )
        for switch, plus, minus, room in air_units:
            self._init_air(switch, plus, minus, room)

        home, title = _TEXTS.get(language, _TEXTS[Language.EN])
        self.exit_button(home)
        self.canvas_title.draw_string(title, 270, 34)
        self.key_exit.bind(ButtonEvent.RELEASED, lambda args: self.stop())

    def _init_air(self, switch: Switch, plus: Button, minus: Button, room: str) -> None:
        plus.custom_string = "1"
        minus.custom_string = "0"
        for key in (plus, minus):
            key.add_arg(ButtonEvent.RELEASED, 0, key)
            key.add_arg(ButtonEvent.RELEASED, 1, switch)
            key.bind(ButtonEvent.RELEASED, _air_adjust)
            key.canvas_pressed.copy_from(key.canvas_normal)
            key.canvas_pressed.reverse_color()
            key.enabled = False

        off, on = switch.canvas(0), switch.canvas(1)
        off.text_datum = Datum.TC
        off.text_size = 26
        off.draw_string(room, 114, 152)
        on.copy_from(off)
        off.text_size = 36
        off.draw_string("OFF", 114, 108)
        on.text_size = 36
        on.text_datum = Datum.TC
        on.draw_string(f"{DEFAULT_TEMPERATURE}℃", 114, 108)
        switch.custom_string = str(DEFAULT_TEMPERATURE)

        for state, callback in ((0, _air_off), (1, _air_on)):
            switch.add_arg(state, 0, plus)
            switch.add_arg(state, 1, minus)
            switch.add_arg(state, 2, switch)
            switch.bind(state, callback)

    def init_switch(
        self,
        switch: Switch,
        title: str,
        subtitle: str,
        image_off: Optional[Sequence[int]] = None,
        image_on: Optional[Sequence[int]] = None,
    ) -> None:
        """Paint a tile with a title, a subtitle and an icon for each state."""
        off = switch.canvas(0)
        off.text_size = 36
        off.text_datum = Datum.TC
        off.draw_string(title, 114, 136)
        off.text_size = 26
        off.draw_string(subtitle, 114, 183)
        switch.canvas(1).copy_from(off)
        if image_off is not None:
            off.push_image(68, 20, ICON_SIZE, ICON_SIZE, image_off)
        if image_on is not None:
            switch.canvas(1).push_image(68, 20, ICON_SIZE, ICON_SIZE, image_on)

    def init(self, args: list) -> int:
        self.is_run = 1
        self.display.clear()
        self.canvas_title.push(self.display, 0, 8, UpdateMode.NONE)
        for widget in (
            self.sw_light1,
            self.sw_light2,
            self.sw_socket1,
            self.sw_socket2,
            self.sw_air_1,
            self.sw_air_2,
            self.key_air_1_plus,
            self.key_air_1_minus,
            self.key_air_2_plus,
            self.key_air_2_minus,
            self.key_exit,
        ):
            self.gui.add_object(widget)
        return 3