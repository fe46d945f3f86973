import pytest

from inkpad.config import Config
from inkpad.core.options import SignaturePadOptions


def test_defaults():
    options = SignaturePadOptions()
    assert options.velocity_filter_weight == 0.7
    assert options.min_width == 0.5
    assert options.max_width == 2.5
    assert options.resolve_dot_size() == 1.5


def test_none_falls_back_to_defaults():
    options = SignaturePadOptions(min_width=None, max_width=None, pen_color=None)
    assert (options.min_width, options.max_width) == (0.5, 2.5)
    assert options.pen_color == (0.0, 0.0, 0.0, 1.0)


def test_from_dict_accepts_camel_case():
    options = SignaturePadOptions.from_dict({"minWidth": 1, "maxWidth": 4, "dotSize": 3, "unknown": 1})
    assert (options.min_width, options.max_width) == (1, 4)
    assert options.resolve_dot_size() == 3.0


@pytest.mark.parametrize("kwargs", [
    {"velocity_filter_weight": 0.0},
    {"velocity_filter_weight": 1.5},
    {"min_width": 0},
    {"min_width": 3.0, "max_width": 2.0},
    {"pen_color": "blue"},
])
def test_invalid_options_raise(kwargs):
    with pytest.raises(ValueError):
        SignaturePadOptions(**kwargs)


def test_from_config():
    options = SignaturePadOptions.from_config(Config)
    assert options.max_width == Config.MAX_WIDTH
    assert options.to_dict()["background_color"] == [1.0, 1.0, 1.0, 1.0]


def test_zero_dot_size_is_kept():
    options = SignaturePadOptions(dot_size=0)
    assert options.resolve_dot_size() == 0.0
