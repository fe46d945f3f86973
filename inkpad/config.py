"""Configuration settings for the inkpad server"""

import os
from typing import Optional

class Config:
    """Application configuration"""

    # Server settings
    HOST: str = os.environ.get("INKPAD_HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("INKPAD_PORT", "8000"))
    DEBUG: bool = True
    LOG_LEVEL: str = os.environ.get("INKPAD_LOG_LEVEL", "info")

    # Surface settings
    RENDER_WIDTH: int = 600
    RENDER_HEIGHT: int = 300
    MAX_RENDER_DIMENSION: int = 4096  # Largest surface accepted by /api/render

    # Ink settings
    VELOCITY_FILTER_WEIGHT: float = 0.7  # Weight of the newest velocity sample
    MIN_WIDTH: float = 0.5
    MAX_WIDTH: float = 2.5
    DOT_SIZE: Optional[float] = None  # None → (MIN_WIDTH + MAX_WIDTH) / 2
    PEN_COLOR: tuple = (0.0, 0.0, 0.0, 1.0)  # Black
    BACKGROUND_COLOR: tuple = (1.0, 1.0, 1.0, 1.0)  # White

    # CORS settings
    CORS_ORIGINS: list = [
        "http://localhost",
        "http://localhost:8000",
        "http://127.0.0.1",
        "http://127.0.0.1:8000",
    ]

    @classmethod
    def get(cls, key: str, default: Optional[any] = None) -> any:
        """Get configuration value"""
        return getattr(cls, key, default)


config = Config()
