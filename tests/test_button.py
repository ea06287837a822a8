import pytest

from inkgui.button import Button, ButtonEvent, ButtonStyle
from inkgui.canvas import Datum, Display, UpdateMode


@pytest.fixture
def display():
    return Display(540, 960)


def centre(widget):
    return widget.x + widget.w // 2, widget.y + widget.h // 2


def test_default_style_paints_canvases(display):
    b = Button("OK", 20, 20, 100, 48, display=display)
    assert b.label == "OK"
    assert b.canvas_normal.pixel(0, 0) == 15
    assert b.canvas_normal.pixel(2, 2) == 0
    assert b.canvas_pressed.pixel(2, 2) == 15
    assert b.canvas_normal.texts[0].text == "OK"
    assert b.canvas_normal.texts[0].datum == Datum.CC
    assert b.canvas_pressed.texts[0].color == 0


def test_align_left_style(display):
    b = Button("L", 20, 20, 100, 48, ButtonStyle.ALIGN_LEFT, display)
    assert b.canvas_normal.texts[0].datum == Datum.CL
    assert b.canvas_normal.pixel(0, 0) == 0


def test_plain_button_is_blank():
    b = Button(None, 0, 0, 40, 40)
    assert b.label == ""
    assert sum(b.canvas_normal.pixels) == 0
    assert b.canvas_normal.texts == []


def test_press_and_release_fire_callbacks(display):
    b = Button("OK", 20, 20, 100, 48, display=display)
    calls = []
    b.add_arg(ButtonEvent.PRESSED, 0, "p")
    b.add_arg(ButtonEvent.RELEASED, 0, "r")
    b.bind(ButtonEvent.PRESSED, lambda args: calls.append(("pressed", list(args))))
    b.bind(ButtonEvent.RELEASED, lambda args: calls.append(("released", list(args))))

    b.update_state(*centre(b))
    assert b.state == ButtonEvent.PRESSED
    assert display.pixel(b.x + 3, b.y + 3) == 15
    assert display.updates[-1].mode == UpdateMode.DU4

    b.update_state(*centre(b))
    assert calls == [("pressed", ["p"])]

    b.update_state(-1, -1)
    assert b.state == ButtonEvent.NONE
    assert calls == [("pressed", ["p"]), ("released", ["r"])]


def test_add_arg_replaces_or_appends():
    b = Button("OK", 20, 20, 100, 48)
    received = []
    b.add_arg(ButtonEvent.RELEASED, 0, "a")
    b.add_arg(ButtonEvent.RELEASED, 5, "b")
    b.add_arg(ButtonEvent.RELEASED, 0, "c")
    b.bind(ButtonEvent.RELEASED, lambda args: received.extend(args))
    b.update_state(*centre(b))
    b.update_state(-1, -1)
    assert received == ["c", "b"]


def test_disabled_button_ignores_touch(display):
    b = Button("OK", 20, 20, 100, 48, display=display)
    b.enabled = False
    b.update_state(*centre(b))
    assert b.state == ButtonEvent.NONE
    assert display.updates == []


def test_hidden_button_ignores_touch(display):
    b = Button("OK", 20, 20, 100, 48, display=display)
    b.hidden = True
    b.update_state(*centre(b))
    assert b.state == ButtonEvent.NONE


def test_invisible_button_is_not_drawn(display):
    b = Button("X", 20, 20, 100, 48, ButtonStyle.INVISIBLE, display)
    assert b.invisible is True
    b.draw(UpdateMode.GC16)
    assert display.updates == []
    assert b.label == ""


def test_set_label_repaints():
    b = Button("old", 20, 20, 100, 48)
    b.set_label("new")
    assert b.label == "new"
    assert [t.text for t in b.canvas_normal.texts] == ["new"]
    assert [t.text for t in b.canvas_pressed.texts] == ["new"]


def test_set_bmp_button_pressed_is_reverse():
    b = Button(None, 0, 0, 200, 60)
    b.set_bmp_button("left", "right", [7] * 1024)
    assert all(a + p == 15 for a, p in zip(b.canvas_normal.pixels, b.canvas_pressed.pixels))
    assert b.canvas_normal.pixel(15, (b.h >> 1) - 16) == 7
    assert [t.text for t in b.canvas_normal.texts] == ["left", "right"]


def test_draw_on_copies_to_canvas():
    from inkgui.canvas import Canvas

    target = Canvas(200, 200)
    b = Button("OK", 20, 20, 100, 48)
    b.draw_on(target)
    assert target.pixel(b.x, b.y) == 15
    assert target.texts[0].text == "OK"