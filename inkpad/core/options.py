"""
SignaturePadOptions: pad configuration

누락되거나 None인 값은 기본값으로 대체되고, 생성 시 한 번 검증된다.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional, Union

from inkpad.utils.helpers import Color, parse_color

DotSize = Union[float, Callable[[], float], None]

# Exchange/config key → field name
_CAMEL_CASE_KEYS = {
    "velocityFilterWeight": "velocity_filter_weight",
    "minWidth": "min_width",
    "maxWidth": "max_width",
    "dotSize": "dot_size",
    "penColor": "pen_color",
    "backgroundColor": "background_color",
    "onBegin": "on_begin",
    "onEnd": "on_end",
}

DEFAULTS: Dict[str, Any] = {
    "velocity_filter_weight": 0.7,
    "min_width": 0.5,
    "max_width": 2.5,
    "dot_size": None,
    "pen_color": (0.0, 0.0, 0.0, 1.0),
    "background_color": (0.0, 0.0, 0.0, 0.0),
    "on_begin": None,
    "on_end": None,
}


@dataclass
class SignaturePadOptions:
    """
    Ink configuration

    Attributes:
        velocity_filter_weight: Weight of the newest velocity sample, in (0, 1]
        min_width: Narrowest stroke radius (> 0)
        max_width: Widest stroke radius (>= min_width)
        dot_size: Radius of single-point strokes; number, zero-arg callable,
            or None for the min/max midpoint
        pen_color: Ink colour
        background_color: Colour painted on clear()
        on_begin: Called with the begin event of every gesture
        on_end: Called with the end event of every gesture
    """

    velocity_filter_weight: float = 0.7
    min_width: float = 0.5
    max_width: float = 2.5
    dot_size: DotSize = None
    pen_color: Color = (0.0, 0.0, 0.0, 1.0)
    background_color: Color = (0.0, 0.0, 0.0, 0.0)
    on_begin: Optional[Callable[[Any], Any]] = None
    on_end: Optional[Callable[[Any], Any]] = None

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) is None and DEFAULTS[f.name] is not None:
                setattr(self, f.name, DEFAULTS[f.name])
        self.validate()

    def validate(self):
        """Raise ValueError for settings the width model cannot use"""
        if not 0.0 < self.velocity_filter_weight <= 1.0:
            raise ValueError(
                f"velocity_filter_weight must be in (0, 1], got {self.velocity_filter_weight}")
        if self.min_width <= 0:
            raise ValueError(f"min_width must be positive, got {self.min_width}")
        if self.max_width < self.min_width:
            raise ValueError(
                f"max_width ({self.max_width}) must not be below min_width ({self.min_width})")
        # Fails early on unparseable colours
        parse_color(self.pen_color)
        parse_color(self.background_color)

    def resolve_dot_size(self) -> float:
        """Radius for a single-point stroke"""
        if self.dot_size is None:
            return (self.min_width + self.max_width) / 2
        if callable(self.dot_size):
            return float(self.dot_size())
        return float(self.dot_size)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SignaturePadOptions":
        """
        Build options from a dict

        snake_case와 camelCase 키 모두 허용. Unknown keys are ignored.
        """
        kwargs = {}
        for key, value in (data or {}).items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in DEFAULTS:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_config(cls, config) -> "SignaturePadOptions":
        """Build options from the application Config"""
        return cls(
            velocity_filter_weight=config.get("VELOCITY_FILTER_WEIGHT"),
            min_width=config.get("MIN_WIDTH"),
            max_width=config.get("MAX_WIDTH"),
            dot_size=config.get("DOT_SIZE"),
            pen_color=config.get("PEN_COLOR"),
            background_color=config.get("BACKGROUND_COLOR"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view (callables are not exported)"""
        dot_size = None if callable(self.dot_size) else self.dot_size
        return {
            "velocity_filter_weight": self.velocity_filter_weight,
            "min_width": self.min_width,
            "max_width": self.max_width,
            "dot_size": dot_size,
            "resolved_dot_size": self.resolve_dot_size(),
            "pen_color": parse_color(self.pen_color).tolist(),
            "background_color": parse_color(self.background_color).tolist(),
        }
