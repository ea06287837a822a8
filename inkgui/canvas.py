"""Off-screen 4-bit grayscale canvases and a simulated e-paper display."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

WHITE = 0
BLACK = 15

_REVERSE_TABLE = bytes((15 - i) if i < 16 else i for i in range(256))


class UpdateMode(IntEnum):
    """Refresh waveforms of the e-paper panel."""

    INIT = 0
    DU = 1
    GC16 = 2
    GL16 = 3
    GLR16 = 4
    GLD16 = 5
    DU4 = 6
    A2 = 7
    NONE = 8


class Datum(IntEnum):
    """Reference point of a drawn string relative to its coordinates."""

    TL = 0
    TC = 1
    TR = 2
    CL = 3
    CC = 4
    CR = 5
    BL = 6
    BC = 7
    BR = 8


@dataclass(frozen=True)
class TextItem:
    """A string drawn on a canvas, with the text settings in force."""

    text: str
    x: int
    y: int
    datum: Datum
    size: int
    color: int


@dataclass(frozen=True)
class AreaUpdate:
    """One refresh request sent to the display."""

    x: int
    y: int
    w: int
    h: int
    mode: UpdateMode


def _check_color(color: int) -> int:
    if not 0 <= color <= 15:
        raise ValueError(f"color must be in 0..15, got {color}")
    return color


def _blit(src: "Canvas", dst: bytearray, dst_w: int, dst_h: int, x: int, y: int) -> None:
    x0 = max(x, 0)
    x1 = min(x + src.width, dst_w)
    if x0 >= x1:
        return
    span = x1 - x0
    for row in range(max(y, 0), min(y + src.height, dst_h)):
        s = (row - y) * src.width + (x0 - x)
        d = row * dst_w + x0
        dst[d:d + span] = src._pixels[s:s + span]


class Canvas:
    """A width x height buffer of 4-bit gray levels (0 white, 15 black)."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas size must not be negative")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)
        self.texts: list[TextItem] = []
        self.text_size = 1
        self.text_color = BLACK
        self.text_datum = Datum.TL

    @property
    def pixels(self) -> bytes:
        """Snapshot of all pixels, row by row."""
        return bytes(self._pixels)

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self._pixels[y * self.width + x]

    def fill(self, color: int) -> None:
        _check_color(color)
        self._pixels[:] = bytes([color]) * len(self._pixels)
        self.texts.clear()

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        _check_color(color)
        x0, x1 = max(x, 0), min(x + w, self.width)
        if x0 >= x1:
            return
        run = bytes([color]) * (x1 - x0)
        for row in range(max(y, 0), min(y + h, self.height)):
            start = row * self.width + x0
            self._pixels[start:start + len(run)] = run

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        _check_color(color)
        if w <= 0 or h <= 0:
            return
        self.fill_rect(x, y, w, 1, color)
        self.fill_rect(x, y + h - 1, w, 1, color)
        self.fill_rect(x, y, 1, h, color)
        self.fill_rect(x + w - 1, y, 1, h, color)

    def draw_hline(self, x: int, y: int, length: int, color: int) -> None:
        self.fill_rect(x, y, length, 1, color)

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Record a string at (x, y) using the current size, color and datum."""
        self.texts.append(
            TextItem(text, x, y, Datum(self.text_datum), self.text_size, self.text_color)
        )

    def push_image(self, x: int, y: int, w: int, h: int, image: Sequence[int]) -> None:
        """Copy a w x h image of gray levels onto the canvas at (x, y)."""
        data = bytes(image)
        if len(data) != w * h:
            raise ValueError(f"image holds {len(data)} pixels, expected {w * h}")
        if any(v > 15 for v in data):
            raise ValueError("image pixels must be in 0..15")
        x0, x1 = max(x, 0), min(x + w, self.width)
        if x0 >= x1:
            return
        span = x1 - x0
        for row in range(max(y, 0), min(y + h, self.height)):
            s = (row - y) * w + (x0 - x)
            d = row * self.width + x0
            self._pixels[d:d + span] = data[s:s + span]

    def reverse_color(self) -> None:
        self._pixels = bytearray(self._pixels.translate(_REVERSE_TABLE))
        self.texts = [
            TextItem(t.text, t.x, t.y, t.datum, t.size, 15 - t.color) for t in self.texts
        ]

    def copy_from(self, other: "Canvas") -> None:
        """Make this canvas an exact copy of another."""
        self.width = other.width
        self.height = other.height
        self._pixels = bytearray(other._pixels)
        self.texts = list(other.texts)
        self.text_size = other.text_size
        self.text_color = other.text_color
        self.text_datum = other.text_datum

    def push(self, display: "Display", x: int, y: int, mode: UpdateMode) -> None:
        display.blit(self, x, y, mode)

    def push_to(self, target: "Canvas", x: int, y: int) -> None:
        """Copy this canvas onto another canvas at (x, y)."""
        _blit(self, target._pixels, target.width, target.height, x, y)
        target.texts.extend(
            TextItem(t.text, t.x + x, t.y + y, t.datum, t.size, t.color) for t in self.texts
        )


class Display:
    """An in-memory e-paper panel that records every refresh request."""

    def __init__(self, width: int = 540, height: int = 960) -> None:
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)
        self.updates: list[AreaUpdate] = []
        self.update_count = 0

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside the display")
        return self._pixels[y * self.width + x]

    def update_area(self, x: int, y: int, w: int, h: int, mode: UpdateMode) -> None:
        self.updates.append(AreaUpdate(x, y, w, h, UpdateMode(mode)))
        self.update_count += 1

    def update_full(self, mode: UpdateMode) -> None:
        self.update_area(0, 0, self.width, self.height, mode)

    def clear(self, init: bool = False) -> None:
        self._pixels[:] = bytes(len(self._pixels))
        self.update_full(UpdateMode.INIT if init else UpdateMode.GC16)

    def reset_update_count(self) -> None:
        self.update_count = 0

    def blit(self, canvas: Canvas, x: int, y: int, mode: UpdateMode) -> None:
        """Write a canvas into display memory and refresh it unless mode is NONE."""
        _blit(canvas, self._pixels, self.width, self.height, x, y)
        if mode != UpdateMode.NONE:
            self.update_area(x, y, canvas.width, canvas.height, mode)