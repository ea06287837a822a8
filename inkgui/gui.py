"""Widget registry, frame stack and the touch event loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from .canvas import Display, UpdateMode
from .widget import Widget

if TYPE_CHECKING:
    from .frame import Frame

IDLE_REFRESH_MS = 2000


@dataclass(frozen=True)
class TouchEvent:
    """One reading of the touch panel."""

    finger_up: bool
    x: int = -1
    y: int = -1


TouchSource = Callable[[], Optional[TouchEvent]]
Clock = Callable[[], int]


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def _no_touch() -> Optional[TouchEvent]:
    return None


@dataclass
class _FrameEntry:
    frame: Any
    args: list = field(default_factory=list)


class Gui:
    """Owns the widgets on screen, the named frames and the frame stack.

    ``touch`` is called once per loop iteration and returns a
    :class:`TouchEvent` when the panel has data, else ``None``.
    ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self,
        display: Optional[Display] = None,
        touch: Optional[TouchSource] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.display = display if display is not None else Display()
        self.touch = touch if touch is not None else _no_touch
        self.clock = clock if clock is not None else _monotonic_ms
        self.objects: list[Widget] = []
        self.frame_stack: list[Frame] = []
        self.auto_update = True
        self.last_active_time = 0
        self._next_id = 1
        self._frames: dict[str, _FrameEntry] = {}
        self._pending_delete: Optional[Frame] = None
        self._switch_count = 0
        self._last_touch: Optional[tuple[bool, int, int]] = None

    def add_object(self, widget: Widget) -> None:
        """Register a widget for drawing and touch handling and give it an id."""
        widget.id = self._next_id
        self._next_id += 1
        self.objects.append(widget)

    def draw(self, mode: UpdateMode = UpdateMode.GC16) -> None:
        for widget in self.objects:
            widget.draw(mode)

    def process(self, x: int = -1, y: int = -1) -> None:
        """Feed a touch position to every widget; no position means finger up."""
        for widget in self.objects:
            widget.update_state(x, y)

    def clear(self) -> None:
        self.objects.clear()

    def _finish(self, frame: Frame, clear_screen: bool) -> None:
        frame.exit()
        if clear_screen:
            self.display.clear(True)
        self._pending_delete = None

    def run(self, frame: Frame) -> None:
        """Run ``frame`` until it stops, dispatching touches to the widgets."""
        if not frame.is_run:
            self._finish(frame, clear_screen=False)
            return

        self.draw(UpdateMode.NONE)
        if frame.frame_id == 1 or self._switch_count > 3:
            self._switch_count = 0
            self.display.update_full(UpdateMode.GC16)
        else:
            self.display.update_full(UpdateMode.GL16)
            self._switch_count += 1

        last_active: Optional[int] = None
        while True:
            if not frame.is_run or not frame.run():
                self._finish(frame, clear_screen=True)
                return

            event = self.touch()
            if event is not None:
                reading = (event.finger_up, event.x, event.y)
                if reading != self._last_touch:
                    self.mark_active()
                    self._last_touch = reading
                    if event.finger_up:
                        self.process()
                        last_active = self.clock()
                    else:
                        self.process(event.x, event.y)
                        last_active = None

            if last_active is not None and self.clock() - last_active > IDLE_REFRESH_MS:
                if self.display.update_count > 4:
                    self.display.reset_update_count()
                    if self.auto_update:
                        self.display.update_full(UpdateMode.GL16)
                last_active = None

    def main_loop(self) -> None:
        """Initialise and run the frame on top of the stack, if any."""
        if not self.frame_stack or self.frame_stack[-1] is None:
            return
        frame = self.frame_stack[-1]
        self.clear()
        self.auto_update = True
        entry = self._frames.get(frame.name)
        frame.init(entry.args if entry is not None else [])
        self.run(frame)

    def add_frame(self, name: str, frame: Frame) -> None:
        """Register a frame by name; an existing name keeps its frame."""
        self._frames.setdefault(name, _FrameEntry(frame))

    def add_frame_arg(self, name: str, index: int, arg: Any) -> None:
        """Set the init argument at ``index`` of a named frame, appending if needed."""
        entry = self._frames.get(name)
        if entry is None:
            return
        if len(entry.args) > index:
            entry.args[index] = arg
        else:
            entry.args.append(arg)

    def get_frame(self, name: str) -> Optional[Frame]:
        entry = self._frames.get(name)
        return entry.frame if entry is not None else None

    def push_frame(self, frame: Frame) -> None:
        self.frame_stack.append(frame)

    def pop_frame(self, delete: bool = False) -> None:
        """Remove the top frame; with ``delete`` it is dropped once it exits."""
        if not self.frame_stack:
            raise IndexError("no frame to pop")
        if delete:
            self._pending_delete = self.frame_stack[-1]
        self.frame_stack.pop()

    def overwrite_frame(self, frame: Frame) -> None:
        self.frame_stack = [frame]

    def set_auto_update(self, auto: bool) -> None:
        self.auto_update = auto

    def mark_active(self) -> None:
        """Record user activity so power saving is postponed."""
        self.last_active_time = self.clock()