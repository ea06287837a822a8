"""In-memory widgets, frames and a touch event loop for e-paper screens."""

__version__ = "0.1.0"
__all__ = [
    "canvas",
    "widget",
    "button",
    "switch",
    "textbox",
    "mutexswitch",
    "keyboard",
    "gui",
    "frame",
    "compare",
    "home",
    "keyboard_frame",
]