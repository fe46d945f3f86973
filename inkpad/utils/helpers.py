"""Helper utilities for inkpad"""

import base64
from io import BytesIO
from typing import Sequence, Union

import numpy as np
from PIL import Image

Color = Union[str, Sequence[float]]


def parse_color(color: Color) -> np.ndarray:
    """
    Normalise a colour to RGBA float32 in [0, 1]

    Args:
        color: (r, g, b) / (r, g, b, a) floats in [0, 1], or '#rrggbb' / '#rrggbbaa'

    Returns:
        numpy array (4,)
    """
    if isinstance(color, str):
        text = color.strip().lstrip('#')
        if len(text) not in (6, 8):
            raise ValueError(f"Unsupported colour string: {color!r}")
        channels = [int(text[i:i + 2], 16) / 255.0 for i in range(0, len(text), 2)]
    else:
        channels = [float(c) for c in color]

    if len(channels) == 3:
        channels.append(1.0)
    if len(channels) != 4:
        raise ValueError(f"Colour needs 3 or 4 channels, got {len(channels)}")

    return np.clip(np.array(channels, dtype=np.float32), 0.0, 1.0)


def numpy_to_base64_png(image: np.ndarray) -> str:
    """
    Convert numpy array to base64-encoded PNG string

    Args:
        image: numpy array (H, W, 3|4) in range [0, 1] (float) or [0, 255] (uint8)

    Returns:
        Base64-encoded PNG string
    """
    # Convert to uint8 if needed
    if image.dtype == np.float32 or image.dtype == np.float64:
        image = (np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)

    pil_image = Image.fromarray(image)

    buffer = BytesIO()
    pil_image.save(buffer, format='PNG')
    buffer.seek(0)

    return base64.b64encode(buffer.read()).decode('utf-8')


def base64_png_to_numpy(base64_string: str) -> np.ndarray:
    """
    Decode a base64 PNG back to a numpy array

    Args:
        base64_string: Base64-encoded image

    Returns:
        numpy array (H, W, C) uint8
    """
    img_bytes = base64.b64decode(base64_string)
    return np.array(Image.open(BytesIO(img_bytes)))
