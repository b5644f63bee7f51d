import pytest

from perfectform import settings
from perfectform.settings import (
    BLACK,
    BLUE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GREEN,
    RED,
    set_window_dimensions,
    window_dimensions,
)


@pytest.fixture(autouse=True)
def restore_dimensions():
    saved = window_dimensions()
    yield
    set_window_dimensions(saved)


def test_default_dimensions():
    assert window_dimensions() == (DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert (DEFAULT_WIDTH, DEFAULT_HEIGHT) == (1280, 720)


def test_set_then_get_round_trip():
    set_window_dimensions((800, 600))
    assert window_dimensions() == (800, 600)


def test_dimensions_have_named_fields():
    set_window_dimensions((1024, 768))
    dims = window_dimensions()
    assert dims.width == 1024
    assert dims.height == 768


def test_setting_dimensions_twice_keeps_last():
    set_window_dimensions((640, 480))
    set_window_dimensions((1920, 1080))
    assert window_dimensions() == (1920, 1080)


@pytest.mark.parametrize("colour", [RED, GREEN, BLUE, BLACK])
def test_colours_are_opaque(colour):
    assert colour[3] == settings.ALPHA_OPAQUE
    assert all(channel in (0.0, 1.0) for channel in colour[:3])