"""
SignaturePad: live capture controller

입력 이벤트(begin/update/end)를 받아 StrokeBuilder → WidthModulator →
CurveRenderer pipeline을 구동하고, raw 샘플을 Drawing에 누적한다.
Event wiring and the surface's lifecycle stay with the caller.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .canvas import Surface
from .drawing import Drawing
from .options import SignaturePadOptions
from .point import Point
from .renderer import CurveRenderer, Dot
from .replay import StrokeReplay
from .stroke_builder import CurveSegment, StrokeBuilder
from .width import WidthModulator

logger = logging.getLogger(__name__)

CoordinateTransform = Callable[[float, float], Tuple[float, float]]


def identity_transform(x: float, y: float) -> Tuple[float, float]:
    return x, y


class OriginOffset:
    """Coordinate transform: client position → surface-local position"""

    def __init__(self, left: float = 0.0, top: float = 0.0):
        self.left = left
        self.top = top

    def __call__(self, x: float, y: float) -> Tuple[float, float]:
        return x - self.left, y - self.top

    def __repr__(self) -> str:
        return f"OriginOffset(left={self.left}, top={self.top})"


class StrokeObserver:
    """Gesture boundary notifications; return values are ignored"""

    def on_stroke_begin(self, event: Any):
        pass

    def on_stroke_end(self, event: Any):
        pass


class CallbackObserver(StrokeObserver):
    """Adapts the on_begin/on_end option callables"""

    def __init__(self, on_begin: Optional[Callable] = None, on_end: Optional[Callable] = None):
        self.on_begin = on_begin
        self.on_end = on_end

    def on_stroke_begin(self, event: Any):
        if self.on_begin is not None:
            self.on_begin(event)

    def on_stroke_end(self, event: Any):
        if self.on_end is not None:
            self.on_end(event)


class SignaturePad:
    """
    Variable-width ink on an external surface

    Single-threaded: each call runs to completion before the next.
    """

    def __init__(
        self,
        surface: Surface,
        options: Optional[SignaturePadOptions] = None,
        coordinate_transform: Optional[CoordinateTransform] = None,
    ):
        """
        Args:
            surface: Drawing surface (owned by the caller)
            options: Ink options (default: SignaturePadOptions())
            coordinate_transform: Maps event positions to surface-local ones,
                called once per raw event
        """
        self.surface = surface
        self.options = options if options is not None else SignaturePadOptions()
        self.coordinate_transform = coordinate_transform or identity_transform

        self.width_modulator = WidthModulator(
            velocity_filter_weight=self.options.velocity_filter_weight,
            min_width=self.options.min_width,
            max_width=self.options.max_width,
        )
        self.builder = StrokeBuilder(self.width_modulator)
        self.renderer = CurveRenderer(surface)
        self.replayer = StrokeReplay(self.builder, self.renderer, self.options)

        self.drawing = Drawing()
        self._context = self.builder.new_context()
        self.segment_count = 0

        self._observers: List[StrokeObserver] = []
        if self.options.on_begin is not None or self.options.on_end is not None:
            self.add_observer(CallbackObserver(self.options.on_begin, self.options.on_end))

        self.clear()

    # Observers

    def add_observer(self, observer: StrokeObserver):
        self._observers.append(observer)

    def remove_observer(self, observer: StrokeObserver):
        if observer in self._observers:
            self._observers.remove(observer)

    # Input events

    def stroke_begin(self, x: float, y: float, time: Optional[int] = None, event: Any = None):
        """
        Start a gesture at (x, y)

        A new point group is committed immediately and kept even if the
        gesture ends early.
        """
        self.drawing.begin_group()
        self._reset()
        self.stroke_update(x, y, time)

        for observer in list(self._observers):
            observer.on_stroke_begin(event)

    def stroke_update(self, x: float, y: float, time: Optional[int] = None) -> Optional[CurveSegment]:
        """
        Add a sample to the gesture in progress

        Returns:
            The segment drawn for this sample, if any
        """
        local_x, local_y = self.coordinate_transform(x, y)
        point = Point(local_x, local_y, time)

        segment = self.builder.add_point(self._context, point)
        if segment is not None:
            self.renderer.draw_curve(segment.curve, segment.start_width, segment.end_width)
            self.segment_count += 1

        self.drawing.append(point)
        return segment

    def stroke_end(self, event: Any = None):
        """Finish the gesture; short gestures become a dot"""
        self.replayer.finish_gesture(self._context)

        for observer in list(self._observers):
            observer.on_stroke_end(event)

    # Drawing state

    def clear(self):
        """Clear the surface and forget every point group"""
        self.replayer.clear_surface()
        self.drawing.clear()
        self.segment_count = 0
        self._reset()

    def is_empty(self) -> bool:
        return self.drawing.is_empty()

    def to_data(self) -> List[List[Dict[str, Any]]]:
        return self.drawing.to_data()

    def from_data(
        self,
        point_groups: Union[Drawing, Iterable[Iterable[Dict[str, Any]]]],
        include_last_point: bool = True,
    ) -> List[Dot]:
        """
        Replace the drawing with persisted point groups and redraw it

        Args:
            point_groups: Drawing or exchange-format list
            include_last_point: See StrokeReplay.replay

        Returns:
            Drawn dots in draw order
        """
        drawing = point_groups if isinstance(point_groups, Drawing) else Drawing.from_data(point_groups)

        dots = self.replayer.replay(drawing, include_last_point=include_last_point)
        self.drawing.replace(drawing)
        self.segment_count = 0
        self._reset()
        return dots

    def _reset(self):
        self.builder.begin(self._context)
        self.surface.set_fill_color(self.options.pen_color)

    def __repr__(self) -> str:
        return f"SignaturePad(groups={len(self.drawing)}, segments={self.segment_count})"


def test_signature_pad():
    """Draw a wave and a dot, then replay them onto a second surface"""
    import numpy as np
    from .canvas import RasterSurface

    surface = RasterSurface(width=400, height=200)
    pad = SignaturePad(surface, options=SignaturePadOptions(background_color=(1.0, 1.0, 1.0, 1.0)))

    xs = np.linspace(20, 380, 40)
    pad.stroke_begin(xs[0], 100, 0)
    for i, x in enumerate(xs[1:], start=1):
        pad.stroke_update(x, 100 + 60 * np.sin(x / 40), i * 16 + (i % 5) * 4)
    pad.stroke_end()

    pad.stroke_begin(200, 180, 1000)
    pad.stroke_end()

    print(f"Pad: {pad}")
    surface.save_image("test_signature.png")

    replay_surface = RasterSurface(width=400, height=200)
    replayed = SignaturePad(replay_surface, options=pad.options)
    replayed.from_data(pad.to_data())

    print(f"Replay identical: {np.array_equal(surface.image, replay_surface.image)}")


if __name__ == "__main__":
    test_signature_pad()
