from inkgui.button import Button, ButtonEvent
from inkgui.canvas import Display, UpdateMode
from inkgui.frame import Frame
from inkgui.gui import Gui, TouchEvent

import pytest


class Clock:
    def __init__(self, start=0, step=0):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


class ScriptedFrame(Frame):
    def __init__(self, gui, iterations, name="Scripted"):
        super().__init__(gui, has_title=False)
        self.name = name
        self.iterations = iterations
        self.calls = 0
        self.init_args = None
        self.exited = False

    def init(self, args):
        self.init_args = list(args)
        return 0

    def run(self):
        self.calls += 1
        if self.calls > self.iterations:
            return 0
        return super().run()

    def exit(self):
        self.exited = True


def scripted_touch(events):
    iterator = iter(events)
    return lambda: next(iterator, None)


def full_updates(display):
    return [
        u.mode for u in display.updates
        if u.w == display.width and u.h == display.height and u.mode != UpdateMode.INIT
    ]


def make_button(display, log):
    button = Button("ok", 100, 100, 100, 60, display=display)
    button.bind(ButtonEvent.PRESSED, lambda args: log.append("pressed"))
    button.bind(ButtonEvent.RELEASED, lambda args: log.append("released"))
    return button


def test_add_object_assigns_sequential_ids():
    gui = Gui(Display(), clock=Clock())
    first = Button("a", 0, 0, 40, 40)
    second = Button("b", 40, 0, 40, 40)
    gui.add_object(first)
    gui.add_object(second)
    assert [first.id, second.id] == [1, 2]
    assert gui.objects == [first, second]


def test_process_routes_touch_to_widgets():
    display = Display()
    gui = Gui(display, clock=Clock())
    log = []
    gui.add_object(make_button(display, log))
    gui.process(150, 130)
    gui.process()
    assert log == ["pressed", "released"]


def test_clear_forgets_widgets():
    gui = Gui(Display(), clock=Clock())
    gui.add_object(Button("a", 0, 0, 40, 40))
    gui.clear()
    assert gui.objects == []


def test_draw_pushes_every_widget_with_mode():
    display = Display()
    gui = Gui(display, clock=Clock())
    gui.add_object(Button("a", 0, 0, 40, 40, display=display))
    gui.add_object(Button("b", 40, 0, 40, 40, display=display))
    gui.draw(UpdateMode.GC16)
    assert [u.mode for u in display.updates] == [UpdateMode.GC16, UpdateMode.GC16]


def test_frame_registry_keeps_first_frame():
    gui = Gui(Display(), clock=Clock())
    first = ScriptedFrame(gui, 0)
    second = ScriptedFrame(gui, 0)
    gui.add_frame("main", first)
    gui.add_frame("main", second)
    assert gui.get_frame("main") is first
    assert gui.get_frame("missing") is None


def test_frame_args_reach_init():
    gui = Gui(Display(), clock=Clock())
    frame = ScriptedFrame(gui, 0, name="main")
    gui.add_frame("main", frame)
    gui.add_frame_arg("main", 0, "x")
    gui.add_frame_arg("main", 5, "y")
    gui.add_frame_arg("main", 0, "z")
    gui.add_frame_arg("missing", 0, "ignored")
    gui.push_frame(frame)
    gui.main_loop()
    assert frame.init_args == ["z", "y"]
    assert gui.get_frame("missing") is None


def test_stack_push_pop_overwrite():
    gui = Gui(Display(), clock=Clock())
    a, b, c = (ScriptedFrame(gui, 0) for _ in range(3))
    gui.push_frame(a)
    gui.push_frame(b)
    gui.pop_frame()
    assert gui.frame_stack == [a]
    gui.push_frame(b)
    gui.overwrite_frame(c)
    assert gui.frame_stack == [c]


def test_pop_empty_stack_raises():
    gui = Gui(Display(), clock=Clock())
    with pytest.raises(IndexError):
        gui.pop_frame(True)


def test_run_stopped_frame_exits_without_drawing():
    display = Display()
    gui = Gui(display, clock=Clock())
    frame = ScriptedFrame(gui, 3)
    frame.is_run = 0
    gui.run(frame)
    assert frame.exited
    assert display.updates == []


def test_frame_switch_refresh_modes():
    display = Display()
    gui = Gui(display, clock=Clock())
    for _ in range(5):
        gui.run(ScriptedFrame(gui, 0))
    assert full_updates(display) == [UpdateMode.GL16] * 4 + [UpdateMode.GC16]


def test_first_frame_id_uses_gc16():
    display = Display()
    gui = Gui(display, clock=Clock())
    frame = ScriptedFrame(gui, 0)
    frame.frame_id = 1
    gui.run(frame)
    assert full_updates(display) == [UpdateMode.GC16]
    assert display.updates[-1].mode == UpdateMode.INIT


def test_run_dispatches_touch_once_per_change():
    display = Display()
    clock = Clock(start=500)
    events = [TouchEvent(False, 150, 130), TouchEvent(False, 150, 130), TouchEvent(True)]
    gui = Gui(display, touch=scripted_touch(events), clock=clock)
    log = []
    gui.add_object(make_button(display, log))
    gui.run(ScriptedFrame(gui, 5))
    assert log == ["pressed", "released"]
    assert gui.last_active_time == 500


@pytest.mark.parametrize("auto, expected", [(True, 2), (False, 1)])
def test_idle_refresh_after_release(auto, expected):
    display = Display()
    for _ in range(5):
        display.update_area(0, 0, 10, 10, UpdateMode.DU4)
    events = [TouchEvent(False, 150, 130), TouchEvent(True)]
    gui = Gui(display, touch=scripted_touch(events), clock=Clock(step=1000))
    gui.add_object(make_button(display, []))
    gui.set_auto_update(auto)
    gui.run(ScriptedFrame(gui, 10))
    assert full_updates(display).count(UpdateMode.GL16) == expected


def test_main_loop_with_empty_stack_does_nothing():
    display = Display()
    gui = Gui(display, clock=Clock())
    gui.main_loop()
    assert display.updates == []


def test_main_loop_resets_widgets_and_auto_update():
    display = Display()
    gui = Gui(display, clock=Clock())
    gui.add_object(Button("a", 0, 0, 40, 40))
    gui.set_auto_update(False)
    frame = ScriptedFrame(gui, 0)
    gui.push_frame(frame)
    gui.main_loop()
    assert gui.objects == []
    assert gui.auto_update is True
    assert frame.init_args == []
    assert frame.exited