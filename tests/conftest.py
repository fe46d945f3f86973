import pytest

from inkpad.core.canvas import RecordingSurface
from inkpad.core.signature_pad import SignaturePad


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def pad(surface):
    return SignaturePad(surface)


def draw_gesture(pad, points, event=None):
    """Feed (x, y, time) samples as one gesture"""
    (x, y, t), rest = points[0], points[1:]
    pad.stroke_begin(x, y, t, event=event)
    for x, y, t in rest:
        pad.stroke_update(x, y, t)
    pad.stroke_end(event=event)
