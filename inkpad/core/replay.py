"""
StrokeReplay: redraw persisted point groups

저장된 PointGroup들을 live 입력과 같은 pipeline에 다시 통과시켜
동일한 primitive 순서를 재현한다.
"""

import logging
from typing import List

from .drawing import Drawing, PointGroup
from .options import SignaturePadOptions
from .renderer import CurveRenderer, Dot
from .stroke_builder import GestureContext, StrokeBuilder

logger = logging.getLogger(__name__)


class StrokeReplay:
    """
    Deterministic batch replay

    Each group gets a fresh gesture context, exactly as a live gesture does.
    Every point of a group is replayed by default, including the last one,
    and the gesture is closed the way live capture closes it, so a replay
    draws the same primitives as the capture did. The older scheme, where a
    group's last point only closes the window and draws nothing, is kept
    behind include_last_point=False.
    """

    def __init__(self, builder: StrokeBuilder, renderer: CurveRenderer, options: SignaturePadOptions):
        self.builder = builder
        self.renderer = renderer
        self.options = options

    def clear_surface(self):
        """Wipe the surface to the background colour and arm the pen colour"""
        surface = self.renderer.surface
        surface.clear_region()
        surface.fill_region(self.options.background_color)
        surface.set_fill_color(self.options.pen_color)

    def replay(self, drawing: Drawing, include_last_point: bool = True) -> List[Dot]:
        """
        Clear the surface and redraw every group

        Args:
            drawing: Point groups to draw
            include_last_point: False reproduces the legacy replay in which a
                group's last point only closes the window and draws nothing

        Returns:
            Drawn dots in draw order
        """
        self.clear_surface()

        dots: List[Dot] = []
        for group in drawing:
            dots.extend(self.replay_group(group, include_last_point))

        logger.info(f"[Replay] Redrew {len(drawing)} groups ({len(dots)} dots)")
        return dots

    def replay_group(self, group: PointGroup, include_last_point: bool = True) -> List[Dot]:
        """Draw one gesture's samples"""
        if not group:
            logger.warning("[Replay] Skipping empty point group")
            return []

        if len(group) == 1:
            return self.renderer.draw_dot(group[0], self.options.resolve_dot_size())

        context = self.builder.new_context()
        points = group if include_last_point else group[:-1]

        dots: List[Dot] = []
        for point in points:
            segment = self.builder.add_point(context, point)
            if segment is not None:
                dots.extend(self.renderer.draw_curve(segment.curve, segment.start_width, segment.end_width))

        if include_last_point:
            dots.extend(self.finish_gesture(context))

        return dots

    def finish_gesture(self, context: GestureContext) -> List[Dot]:
        """Dot for gestures too short to form a curve"""
        if self.builder.can_draw_curve(context) or not context.window:
            return []
        return self.renderer.draw_dot(context.window[0], self.options.resolve_dot_size())
