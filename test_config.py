#!/usr/bin/env python3
"""Tests for configuration models and loading."""

import pytest
from pydantic import ValidationError

from textplace.config import Config, FontConfig, Placement, load_config, parse_color
from textplace.types import NoWrap, Wrap


def test_placement_defaults():
    placement = Placement()
    assert placement.justify == "center"
    assert placement.vertical_anchor == "center"
    assert placement.wrap_policy == NoWrap()
    assert placement.debug is False


def test_placement_wrap_policy():
    assert Placement(wrap_width=250).wrap_policy == Wrap(250)


@pytest.mark.parametrize("width", [0, -10])
def test_non_positive_wrap_width_is_rejected(width):
    with pytest.raises(ValueError):
        Wrap(width)
    with pytest.raises(ValidationError):
        Placement(wrap_width=width)


def test_unknown_justification_is_rejected():
    with pytest.raises(ValidationError):
        Placement(justify="middle")


def test_font_config_rejects_non_positive_size():
    with pytest.raises(ValidationError):
        FontConfig(size=0)
    with pytest.raises(ValidationError):
        FontConfig(scale_x=-1)


@pytest.mark.parametrize("color", [(300, 0, 0, 255), (0, -5, 0, 255), (0, 0, 0, 999), (0, 0, 0)])
def test_font_config_rejects_invalid_color(color):
    with pytest.raises(ValidationError):
        FontConfig(color=color)


def test_load_config_rejects_out_of_range_color(tmp_path):
    config_path = tmp_path / "textplace.toml"
    config_path.write_text("[font]\ncolor = [300, -5, 0, 999]\n")

    with pytest.raises(ValidationError):
        load_config(config_path)


def test_load_config(tmp_path):
    config_path = tmp_path / "textplace.toml"
    config_path.write_text(
        '[font]\nsize = 24\ncolor = [0, 255, 0, 255]\n\n'
        '[placement]\njustify = "right"\nvertical_anchor = "bottom"\nwrap_width = 250\n'
    )

    config = load_config(config_path)

    assert config.font.size == 24
    assert config.font.color == (0, 255, 0, 255)
    assert config.font.path is None
    assert config.placement.justify == "right"
    assert config.placement.wrap_policy == Wrap(250)


def test_load_config_defaults_missing_tables(tmp_path):
    config_path = tmp_path / "textplace.toml"
    config_path.write_text("")
    assert load_config(config_path) == Config()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "nope.toml")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#00ff00", (0, 255, 0, 255)),
        ("#ff000080", (255, 0, 0, 128)),
        ("10, 20, 30", (10, 20, 30, 255)),
        ("10,20,30,40", (10, 20, 30, 40)),
    ],
)
def test_parse_color(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["#fff", "#gggggg", "1,2", "1,2,x", "0,0,256"])
def test_parse_color_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_color(value)
