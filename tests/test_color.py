import random
import re

import pytest

from fauxgen.color import ALL_COLOR_NAMES, SAFE_COLOR_NAMES, Color
from fauxgen.generator import Generator


def make_color(seed=None):
    return Color(Generator(random.Random(seed)))


@pytest.mark.parametrize("seed", range(10))
def test_hex(seed):
    color = make_color(seed).hex()
    assert len(color) == 7
    assert "#" in color
    assert re.fullmatch(r"#[0-9A-F]{6}", color)


@pytest.mark.parametrize("seed", range(10))
def test_rgb(seed):
    color = make_color(seed).rgb()
    assert 5 <= len(color) <= 11
    assert "," in color
    parts = color.split(",")
    assert len(parts) == 3
    assert all(0 <= int(part) <= 255 for part in parts)


def test_rgb_as_array():
    values = make_color(3).rgb_as_array()
    assert len(values) == 3
    assert all(0 <= int(value) <= 255 for value in values)


@pytest.mark.parametrize("seed", range(10))
def test_css(seed):
    color = make_color(seed).css()
    assert 10 < len(color) <= 16
    assert "rgb(" in color
    assert "," in color
    assert ")" in color
    assert re.fullmatch(r"rgb\(\d{1,3},\d{1,3},\d{1,3}\)", color)


def test_safe_color_name():
    color = make_color().safe_color_name()
    assert len(color) > 0
    assert color in SAFE_COLOR_NAMES


def test_color_name():
    color = make_color().color_name()
    assert len(color) > 0
    assert color in ALL_COLOR_NAMES