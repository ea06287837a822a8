"""Base class for full-screen frames."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Optional

from .button import Button
from .canvas import Canvas, Datum, Display, UpdateMode

if TYPE_CHECKING:
    from .gui import Gui

FOOTER_HEIGHT = 28
FOOTER_MARGIN_BOTTOM = 10
SHUTDOWN_PROMPT = "Shutdown to save power, touch to continue?"


class Frame(ABC):
    """A screen with an optional title bar, exit button and idle power saving.

    Power saving is off unless ``auto_power_save`` is set; the two delays are
    measured from the last user activity recorded by the :class:`Gui`.
    """

    auto_power_save = False
    prompt_after_ms = 4 * 60 * 1000
    shutdown_after_ms = 5 * 60 * 1000

    def __init__(self, gui: Gui, has_title: bool = True) -> None:
        self.gui = gui
        self.name = "Frame_Base"
        self.frame_id = 0
        self.is_run = 1
        self.wake_lock = False
        self.canvas_title: Optional[Canvas] = None
        self.canvas_footer: Optional[Canvas] = None
        self.key_exit: Optional[Button] = None
        self.shutdown_handler: Optional[Callable[[], None]] = None
        self.shutdown_requested = False
        self._prompt_shown = False
        if has_title:
            title = Canvas(540, 64)
            for line_y in (64, 63, 62):
                title.draw_hline(0, line_y, 540, 15)
            title.text_size = 26
            title.text_datum = Datum.CC
            self.canvas_title = title
        gui.mark_active()

    @property
    def display(self) -> Display:
        return self.gui.display

    @property
    def prompt_shown(self) -> bool:
        return self._prompt_shown

    def exit_button(self, title: str, width: int = 150) -> None:
        """Create the exit button in the top-left corner labelled ``title``."""
        button = Button(None, 8, 12, width, 48, display=self.display)
        normal = button.canvas_normal
        normal.fill(0)
        normal.text_size = 26
        normal.text_datum = Datum.CL
        normal.text_color = 15
        normal.draw_string(title, 47 + 13, 28)
        button.canvas_pressed.copy_from(normal)
        button.canvas_pressed.reverse_color()
        self.key_exit = button

    def check_auto_power_save(self) -> None:
        """Show, hide or act on the idle shutdown prompt."""
        if self.wake_lock:
            return
        idle = self.gui.clock() - self.gui.last_active_time
        footer_y = self.display.height - FOOTER_HEIGHT - FOOTER_MARGIN_BOTTOM
        if idle > self.shutdown_after_ms:
            self.shutdown_requested = True
            if self.shutdown_handler is not None:
                self.shutdown_handler()
        elif idle > self.prompt_after_ms:
            if not self._prompt_shown:
                footer = Canvas(540, FOOTER_HEIGHT)
                footer.text_size = 26
                footer.text_datum = Datum.CC
                footer.draw_string(SHUTDOWN_PROMPT, 270, FOOTER_HEIGHT // 2)
                footer.push(self.display, 0, footer_y, UpdateMode.DU4)
                self.canvas_footer = footer
                self._prompt_shown = True
        elif self._prompt_shown:
            self.canvas_footer.fill(0)
            self.canvas_footer.push(self.display, 0, footer_y, UpdateMode.DU4)
            self._prompt_shown = False

    def run(self) -> int:
        """One loop step; returns zero once the frame should stop."""
        if self.auto_power_save:
            self.check_auto_power_save()
        return self.is_run

    def exit(self) -> None:
        """Called when the frame stops running."""

    @abstractmethod
    def init(self, args: list) -> int:
        """Prepare the screen and register widgets before running."""

    def stop(self) -> None:
        """Leave this frame: pop it from the stack and end its loop."""
        self.gui.pop_frame()
        self.is_run = 0