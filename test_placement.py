#!/usr/bin/env python3
"""Tests for the public placement entry points."""

import pytest
from PIL import Image, ImageChops

from textplace import (
    FontContext,
    NoWrap,
    Placement,
    Scale,
    Wrap,
    layout_text,
    place_text,
    text_on_image,
    text_on_image_draw_debug,
)
from textplace.api.builder import prepare_lines
from textplace.render.image import MARKER_COLOR, PillowRenderer, blank_canvas
from textplace.utils.text import split_logical_lines

EXAMPLE_TEXT = """This is Line 1
        Thisislinewithextralong 2"""


def test_split_logical_lines_trims_and_keeps_blank_lines():
    assert split_logical_lines("  one \n\n\ttwo\r\nthree  ") == ["one", "", "two", "three"]
    assert split_logical_lines("") == []


def test_no_wrap_yields_trimmed_logical_lines(metrics):
    assert prepare_lines(EXAMPLE_TEXT, metrics, NoWrap()) == ["This is Line 1", "Thisislinewithextralong 2"]


def test_wrap_splits_long_lines(metrics):
    lines = prepare_lines(EXAMPLE_TEXT, metrics, Wrap(100))
    assert lines == ["This is", "Line 1", "Thisislin-", "ewithextr-", "along 2"]


def test_text_on_image_draws_every_physical_line(metrics, renderer):
    placed = text_on_image(object(), EXAMPLE_TEXT, metrics, 400, 800, "center", "center", Wrap(100), renderer)

    assert [call[1] for call in renderer.calls] == [line.text for line in placed]
    assert len(renderer.calls) == 5
    # Five lines of height 20 centered on y=800
    assert [line.y for line in placed] == [750, 770, 790, 810, 830]


def test_too_narrow_wrap_fails_before_drawing(metrics, renderer):
    with pytest.raises(ValueError, match="at least 20"):
        text_on_image(object(), "hello", metrics, 0, 0, wrap=Wrap(19), renderer=renderer)
    assert renderer.calls == []


def test_debug_marks_anchor_before_text(metrics, renderer):
    text_on_image_draw_debug(object(), "hi", metrics, 12, 34, "left", "top", renderer=renderer)
    assert renderer.calls[0] == ("marker", 12, 34, MARKER_COLOR)
    assert renderer.calls[1][:4] == ("line", "hi", 12, 34)


def test_debug_does_not_mark_when_settings_are_invalid(metrics, renderer):
    with pytest.raises(ValueError):
        text_on_image_draw_debug(object(), "hi", metrics, 0, 0, wrap=Wrap(5), renderer=renderer)
    with pytest.raises(ValueError):
        text_on_image_draw_debug(object(), "hi", metrics, 0, 0, justify="middle", renderer=renderer)
    assert renderer.calls == []


def test_place_text_uses_placement_settings(metrics, renderer):
    placement = Placement(justify="left", vertical_anchor="top", wrap_width=50, debug=True)

    placed = place_text(object(), "abcdefg", metrics, 10, 10, placement, renderer)

    assert renderer.calls[0][0] == "marker"
    assert [(line.text, line.x, line.y) for line in placed] == [("abcd-", 10, 10), ("efg", 10, 30)]


def test_layout_text_needs_no_canvas(metrics):
    placed = layout_text("one\ntwo", metrics, 0, 0, "right", "bottom")
    assert [(line.text, line.x, line.y) for line in placed] == [("one", -30, -40), ("two", -30, -20)]


def test_text_is_drawn_on_a_real_image():
    font = FontContext.default(Scale.uniform(32), (0, 0, 0, 255))
    canvas = blank_canvas((400, 200))
    before = canvas.copy()

    placed = text_on_image(canvas, "Hello\nworld", font, 200, 100, wrap=Wrap(300))

    assert [line.text for line in placed] == ["Hello", "world"]
    assert ImageChops.difference(before, canvas).convert("RGB").getbbox() is not None


def test_stretched_text_is_drawn_on_a_real_image():
    font = FontContext.default(Scale(x=48, y=24), (200, 0, 0, 255))
    canvas = Image.new("RGB", (400, 100), (255, 255, 255))

    text_on_image(canvas, "wide", font, 0, 0, "left", "top")

    bbox = ImageChops.difference(Image.new("RGB", (400, 100), (255, 255, 255)), canvas).getbbox()
    assert bbox is not None
    assert bbox[0] < font.measure_width("wide")


def test_debug_marker_is_drawn_on_a_real_image():
    font = FontContext.default(Scale.uniform(20))
    canvas = blank_canvas((50, 50))

    text_on_image_draw_debug(canvas, "", font, 25, 25)

    assert canvas.getpixel((25, 25)) == MARKER_COLOR
    assert canvas.getpixel((23, 25)) == MARKER_COLOR
    assert canvas.getpixel((25, 27)) == MARKER_COLOR
    assert canvas.getpixel((23, 23)) == (255, 255, 255, 255)


def test_marker_near_edge_is_clipped():
    canvas = blank_canvas((10, 10))
    PillowRenderer().draw_marker(canvas, MARKER_COLOR, 0, 0)
    assert canvas.getpixel((0, 0)) == MARKER_COLOR
    assert canvas.getpixel((2, 0)) == MARKER_COLOR


def test_negative_scale_fails_without_touching_canvas():
    canvas = blank_canvas((100, 100))
    before = canvas.copy()

    with pytest.raises(ValueError, match="cannot be <= 0"):
        font = FontContext.default(Scale(x=-40, y=40))
        text_on_image(canvas, "never drawn", font, 50, 50)

    assert ImageChops.difference(before, canvas).convert("RGB").getbbox() is None


def test_too_narrow_wrap_leaves_real_image_untouched():
    font = FontContext.default(Scale.uniform(32), (0, 0, 0, 255))
    canvas = blank_canvas((200, 100))
    before = canvas.copy()

    with pytest.raises(ValueError, match="below 2 ems"):
        text_on_image_draw_debug(canvas, "never drawn", font, 100, 50, wrap=Wrap(1))

    assert ImageChops.difference(before, canvas).convert("RGB").getbbox() is None


def test_stretched_text_starts_at_its_origin():
    font = FontContext.default(Scale(x=48, y=24), (0, 0, 0, 255))
    canvas = Image.new("RGB", (400, 100), (255, 255, 255))

    text_on_image(canvas, "Hello", font, 100, 20, "left", "top")

    bbox = ImageChops.difference(Image.new("RGB", (400, 100), (255, 255, 255)), canvas).getbbox()
    assert bbox is not None
    assert 95 <= bbox[0] < 100 + font.measure_width("Hello")
    assert bbox[2] > 100 + font.measure_width("Hello") // 2
