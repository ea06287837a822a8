import pytest

from inkgui.canvas import AreaUpdate, Canvas, Datum, Display, TextItem, UpdateMode


def test_fill_sets_every_pixel():
    c = Canvas(4, 3)
    c.fill(7)
    assert set(c.pixels) == {7}
    assert len(c.pixels) == 12


def test_fill_rect_is_clipped():
    c = Canvas(5, 5)
    c.fill_rect(3, 3, 10, 10, 9)
    assert c.pixel(4, 4) == 9
    assert c.pixel(3, 3) == 9
    assert c.pixel(2, 2) == 0
    assert sum(1 for v in c.pixels if v == 9) == 4


def test_draw_rect_outline_only():
    c = Canvas(6, 6)
    c.draw_rect(0, 0, 6, 6, 15)
    assert c.pixel(0, 0) == 15
    assert c.pixel(5, 5) == 15
    assert c.pixel(0, 3) == 15
    assert c.pixel(2, 2) == 0


def test_hline_outside_is_ignored():
    c = Canvas(10, 5)
    c.draw_hline(0, 5, 10, 15)
    assert sum(c.pixels) == 0


def test_draw_string_records_settings():
    c = Canvas(10, 10)
    c.text_size = 26
    c.text_datum = Datum.CC
    c.text_color = 15
    c.draw_string("hello", 4, 5)
    assert c.texts == [TextItem("hello", 4, 5, Datum.CC, 26, 15)]


def test_fill_clears_texts():
    c = Canvas(10, 10)
    c.draw_string("x", 0, 0)
    c.fill(0)
    assert c.texts == []


def test_push_image_places_pixels():
    c = Canvas(4, 4)
    c.push_image(1, 1, 2, 2, [1, 2, 3, 4])
    assert [c.pixel(1, 1), c.pixel(2, 1), c.pixel(1, 2), c.pixel(2, 2)] == [1, 2, 3, 4]
    assert c.pixel(0, 0) == 0


def test_push_image_wrong_length():
    c = Canvas(4, 4)
    with pytest.raises(ValueError):
        c.push_image(0, 0, 2, 2, [1, 2, 3])


def test_invalid_color_rejected():
    c = Canvas(2, 2)
    with pytest.raises(ValueError):
        c.fill(16)


def test_pixel_out_of_range():
    with pytest.raises(IndexError):
        Canvas(2, 2).pixel(2, 0)


def test_reverse_color_round_trip():
    c = Canvas(3, 3)
    c.push_image(0, 0, 3, 3, range(9))
    before = c.pixels
    c.reverse_color()
    assert all(a + b == 15 for a, b in zip(before, c.pixels))
    c.reverse_color()
    assert c.pixels == before


def test_copy_from_duplicates():
    src = Canvas(3, 2)
    src.fill(5)
    src.draw_string("a", 1, 1)
    dst = Canvas(1, 1)
    dst.copy_from(src)
    assert (dst.width, dst.height) == (3, 2)
    assert dst.pixels == src.pixels
    assert dst.texts == src.texts


def test_push_to_clips_and_translates_text():
    src = Canvas(3, 3)
    src.fill(8)
    src.draw_string("t", 1, 1)
    dst = Canvas(4, 4)
    dst.push_to(dst, 0, 0) if False else src.push_to(dst, 2, 2)
    assert dst.pixel(3, 3) == 8
    assert dst.pixel(1, 1) == 0
    assert dst.texts[0].x == 3 and dst.texts[0].y == 3


def test_display_blit_without_refresh():
    d = Display(20, 20)
    c = Canvas(2, 2)
    c.fill(15)
    c.push(d, 5, 6, UpdateMode.NONE)
    assert d.pixel(5, 6) == 15
    assert d.updates == []
    assert d.update_count == 0


def test_display_blit_with_refresh():
    d = Display(20, 20)
    c = Canvas(2, 3)
    c.push(d, 5, 6, UpdateMode.GC16)
    assert d.updates == [AreaUpdate(5, 6, 2, 3, UpdateMode.GC16)]
    assert d.update_count == 1


def test_display_clear_and_reset():
    d = Display(10, 10)
    c = Canvas(2, 2)
    c.fill(15)
    c.push(d, 0, 0, UpdateMode.NONE)
    d.clear(True)
    assert d.pixel(0, 0) == 0
    assert d.updates[-1] == AreaUpdate(0, 0, 10, 10, UpdateMode.INIT)
    d.reset_update_count()
    assert d.update_count == 0