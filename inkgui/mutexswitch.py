"""A group of switches of which at most one is on."""

from __future__ import annotations

from typing import Optional

from .canvas import Canvas, Display, UpdateMode
from .switch import Switch
from .widget import Callback, Widget


class MutexSwitch(Widget):
    """Radio-style group: turning one switch on turns the others off."""

    def __init__(self, display: Optional[Display] = None) -> None:
        super().__init__(display=display)
        self.exclusive = True
        self.default_index = 0
        self.switches: list[Switch] = []
        self._last_pressed: Optional[int] = None

    def add(self, switch: Switch) -> None:
        self.switches.append(switch)

    def set_exclusive(self, exclusive: bool) -> None:
        self.exclusive = exclusive

    def set_default(self, index: int) -> None:
        """Switch on the member at ``index`` (if valid) and switch off the rest."""
        if 0 <= index < len(self.switches):
            self.default_index = index
        for position, switch in enumerate(self.switches):
            if position == self.default_index:
                self._last_pressed = position
                switch.set_state(1)
            else:
                switch.set_state(0)

    def draw(self, mode: UpdateMode = UpdateMode.DU4) -> None:
        if self.hidden:
            return
        for switch in self.switches:
            switch.draw(mode)

    def draw_on(self, canvas: Canvas) -> None:
        if self.hidden:
            return
        for switch in self.switches:
            switch.draw_on(canvas)

    def bind(self, event: int, callback: Callback) -> None:
        """The group takes no callbacks; bind them on the switches."""

    def update_state(self, x: int, y: int) -> None:
        if not self.enabled:
            return
        pressed: Optional[int] = None
        for position, switch in enumerate(self.switches):
            if position == self._last_pressed:
                switch.update_state(-1, -1)
                continue
            if switch.is_in_box(x, y):
                self._last_pressed = position
                pressed = position
            switch.update_state(x, y)

        if not self.exclusive or pressed is None:
            return
        for position, switch in enumerate(self.switches):
            if position == pressed:
                continue
            if switch.state != 0:
                switch.set_state(0)
                switch.draw(UpdateMode.GL16)