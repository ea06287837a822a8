# inkgui

A small widget toolkit for touch-driven e-paper screens, kept entirely in
memory so that screens can be built, driven and inspected in plain Python.

## What is in it

- `inkgui.canvas`: `Canvas`, a buffer of 4-bit grey levels (0 white,
  15 black) with `fill`, `fill_rect`, `draw_rect`, `draw_hline`,
  `push_image`, `reverse_color`, `copy_from`, `push` and `push_to`;
  `Display`, an in-memory panel that keeps its pixels, records every
  refresh as an `AreaUpdate` in `updates` and counts them in
  `update_count`; the `UpdateMode` and `Datum` enums.
- `inkgui.widget`: `Widget`, the abstract base with a hit box,
  `is_in_box`, `hidden`, `enabled`, `id` and `custom_string`, and
  `align4`, which rounds x positions and widths up to a multiple of four.
- `inkgui.button`: `Button` with `ButtonEvent.PRESSED` / `RELEASED`
  callbacks, `add_arg`, `set_label`, `set_bmp_button` and `ButtonStyle`
  flags for border, alignment and invisibility.
- `inkgui.switch`: `Switch`, which cycles through up to five states on
  each tap, with one canvas and one callback per state.
- `inkgui.mutexswitch`: `MutexSwitch`, a group of switches in which
  turning one on turns the others off (unless `set_exclusive(False)`).
- `inkgui.textbox`: `Textbox`, bordered text with `set_text`,
  `add_text` (backspace characters delete), `remove`, margins and size.
- `inkgui.keyboard`: `Keyboard`, a 32-key on-screen keyboard with lower
  case, upper case, number and symbol layouts; typed text is collected
  and returned by `get_data()`. Function-key labels come in English,
  Chinese or Japanese (`Language`).
- `inkgui.gui`: `Gui`, which numbers and holds the live widgets, keeps a
  stack of frames and a registry of named frames with init arguments,
  and runs the touch loop (`run`, `main_loop`) from a touch source and a
  millisecond clock that you supply. `TouchEvent` is one touch reading.
- `inkgui.frame`: `Frame`, the base screen with a title canvas, an
  `exit_button`, `stop()` and an optional idle power-save prompt.
- Ready-made screens: `CompareFrame` (`inkgui.compare`) shows each
  refresh mode on a grey ramp; `HomeFrame` (`inkgui.home`) is a control
  panel of light, socket and air-conditioner switches with temperature
  keys; `KeyboardFrame` (`inkgui.keyboard_frame`) is a text box with a
  keyboard, a clear key and text-size keys.

## Installing

```
pip install .
```

There are no runtime dependencies.

## Using widgets

```python
from inkgui.canvas import Display
from inkgui.button import Button, ButtonEvent

display = Display(540, 960)
pressed = []

button = Button("OK", 20, 20, 200, 60, display=display)
button.add_arg(ButtonEvent.RELEASED, 0, "ok")
button.bind(ButtonEvent.RELEASED, lambda args: pressed.append(args[0]))

button.update_state(100, 50)   # finger down inside the button
button.update_state(-1, -1)    # finger lifted
assert pressed == ["ok"]
```

## Running a screen

`Gui` calls `touch()` once per loop step; it returns a `TouchEvent` or
`None`. The loop ends when the frame stops, here by tapping its exit
button:

```python
from itertools import count

from inkgui.gui import Gui, TouchEvent
from inkgui.keyboard_frame import KeyboardFrame

events = iter([TouchEvent(False, 50, 30), TouchEvent(True)])
ticks = count()

gui = Gui(touch=lambda: next(events, None), clock=lambda: next(ticks))
frame = KeyboardFrame(gui)
gui.push_frame(frame)
gui.main_loop()
assert frame.is_run == 0 and gui.frame_stack == []
```

## What it does not do

- It drives no real panel or touch controller: `Display` lives in memory,
  and touches and time come from the callables given to `Gui`.
- Text is not rasterised. `draw_string` records a `TextItem` (text,
  position, datum, size, colour) in the canvas's `texts` list; only
  rectangles, images and colour inversion change pixels.
- No icons or images are bundled; `push_image`, `set_bmp_button` and
  `HomeFrame.init_switch` take the pixel data from the caller.
- Power saving only flags `shutdown_requested` and calls an optional
  `shutdown_handler`; it is off unless `Frame.auto_power_save` is set.
- There are no file-browser, settings, network or other screens beyond
  the three listed above, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```