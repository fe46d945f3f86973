# Core modules
from .point import Point
from .bezier import Bezier, calculate_curve_control_points
from .stroke_builder import StrokeBuilder, CurveSegment
from .width import WidthModulator, stroke_width
from .renderer import CurveRenderer
from .drawing import Drawing
from .replay import StrokeReplay
from .options import SignaturePadOptions
from .signature_pad import SignaturePad

__all__ = ['Point', 'Bezier', 'calculate_curve_control_points', 'StrokeBuilder', 'CurveSegment',
           'WidthModulator', 'stroke_width', 'CurveRenderer', 'Drawing', 'StrokeReplay',
           'SignaturePadOptions', 'SignaturePad']
