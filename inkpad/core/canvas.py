"""
Drawing surfaces

SignaturePad는 surface를 생성/소유하지 않는다. 이 모듈은 surface 계약과
두 가지 구현을 제공한다:
- RasterSurface: NumPy RGBA 버퍼 + OpenCV 래스터화
- RecordingSurface: 호출 순서를 그대로 기록 (replay 비교용)
"""

import math
from typing import List, Protocol, Tuple

import cv2
import numpy as np

from inkpad.utils.helpers import parse_color

# Fixed-point bits for sub-pixel circle centres (cv2.circle shift)
SUBPIXEL_SHIFT = 4

# Largest fixed-point coordinate handed to cv2 (int32 with headroom)
FIXED_POINT_LIMIT = 1 << 28


class Surface(Protocol):
    """Drawing-surface contract used by the renderer and the pad"""

    def set_fill_color(self, color) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def draw_circle(self, x: float, y: float, radius: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self) -> None: ...

    def clear_region(self) -> None: ...

    def fill_region(self, color) -> None: ...


class RasterSurface:
    """
    RGBA raster surface

    이미지: (height, width, 4) float32 in [0, 1], straight alpha
    A path is the union of its circles; fill() composites it once.
    """

    def __init__(self, width: int = 1024, height: int = 768):
        self.width = width
        self.height = height
        self.image = np.zeros((height, width, 4), dtype=np.float32)
        self.fill_color = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)
        self._path: List[Tuple[float, float, float]] = []

    def set_fill_color(self, color):
        self.fill_color = parse_color(color)

    def begin_path(self):
        self._path = []

    def move_to(self, x: float, y: float):
        # Circles are closed sub-paths; the pen position carries no geometry
        pass

    def draw_circle(self, x: float, y: float, radius: float):
        self._path.append((x, y, radius))

    def close_path(self):
        pass

    def fill(self):
        """Rasterise the current path and composite the fill colour"""
        if not self._path:
            return

        mask = np.zeros((self.height, self.width), dtype=np.uint8)
        scale = 1 << SUBPIXEL_SHIFT
        for x, y, radius in self._path:
            if not self._overlaps(x, y, radius):
                continue

            if max(abs(x), abs(y), radius) * scale > FIXED_POINT_LIMIT:
                self._fill_circle_exact(mask, x, y, radius)
                continue

            center = (int(round(x * scale)), int(round(y * scale)))
            r = max(0, int(round(radius * scale)))
            cv2.circle(mask, center, r, 255, thickness=-1,
                       lineType=cv2.LINE_AA, shift=SUBPIXEL_SHIFT)

        if not mask.any():
            return

        coverage = mask.astype(np.float32) / 255.0
        self._composite(coverage * self.fill_color[3], self.fill_color[:3])

    def _overlaps(self, x: float, y: float, radius: float) -> bool:
        """False for non-finite circles and circles entirely off the surface"""
        if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(radius)):
            return False
        return (x + radius >= 0 and x - radius < self.width
                and y + radius >= 0 and y - radius < self.height)

    def _fill_circle_exact(self, mask: np.ndarray, x: float, y: float, radius: float):
        """Pixel-centre test for circles too large for cv2 fixed point"""
        ys, xs = np.mgrid[0:self.height, 0:self.width]
        inside = (xs - x) ** 2 + (ys - y) ** 2 <= radius * radius
        mask[inside] = 255

    def _composite(self, src_alpha: np.ndarray, src_rgb: np.ndarray):
        """Source-over blending of a solid colour with per-pixel alpha"""
        dst_alpha = self.image[..., 3]
        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)

        src_term = src_rgb[None, None, :] * src_alpha[..., None]
        dst_term = self.image[..., :3] * (dst_alpha * (1.0 - src_alpha))[..., None]

        out_rgb = np.divide(
            src_term + dst_term,
            out_alpha[..., None],
            out=np.zeros_like(src_term),
            where=out_alpha[..., None] > 0,
        )

        self.image[..., :3] = out_rgb
        self.image[..., 3] = out_alpha

    def clear_region(self):
        self.image.fill(0.0)

    def fill_region(self, color):
        rgba = parse_color(color)
        self.image[...] = rgba

    def to_uint8(self) -> np.ndarray:
        """RGBA image (H, W, 4) in [0, 255] uint8"""
        return (np.clip(self.image, 0.0, 1.0) * 255).astype(np.uint8)

    def save_image(self, filename: str):
        """
        Save the surface to a file

        Args:
            filename: Target path (.png 권장, alpha 유지)
        """
        # OpenCV는 BGRA 순서
        image_bgra = cv2.cvtColor(self.to_uint8(), cv2.COLOR_RGBA2BGRA)
        cv2.imwrite(filename, image_bgra)

    def __repr__(self) -> str:
        return f"RasterSurface({self.width}x{self.height})"


class RecordingSurface:
    """
    Surface that only records calls

    calls: [('begin_path',), ('draw_circle', x, y, r), ...]
    """

    def __init__(self):
        self.calls: List[tuple] = []

    def set_fill_color(self, color):
        self.calls.append(("set_fill_color", tuple(parse_color(color).tolist())))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x: float, y: float):
        self.calls.append(("move_to", x, y))

    def draw_circle(self, x: float, y: float, radius: float):
        self.calls.append(("draw_circle", x, y, radius))

    def close_path(self):
        self.calls.append(("close_path",))

    def fill(self):
        self.calls.append(("fill",))

    def clear_region(self):
        self.calls.append(("clear_region",))

    def fill_region(self, color):
        self.calls.append(("fill_region", tuple(parse_color(color).tolist())))

    def circles(self) -> List[Tuple[float, float, float]]:
        """Ordered (x, y, radius) of every drawn circle"""
        return [call[1:] for call in self.calls if call[0] == "draw_circle"]

    def fill_count(self) -> int:
        return sum(1 for call in self.calls if call[0] == "fill")

    def reset(self):
        self.calls = []

    def __len__(self) -> int:
        return len(self.calls)


def count_inked_pixels(image: np.ndarray, background, tolerance: float = 1e-3) -> int:
    """Number of pixels that differ from the background colour"""
    diff = np.abs(image - parse_color(background)[None, None, :])
    return int(np.count_nonzero(diff.max(axis=-1) > tolerance))
