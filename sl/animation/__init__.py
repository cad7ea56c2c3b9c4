"""Frame and animation primitives."""

from sl.animation.animation import FRAME_DELIMITER, Animation
from sl.animation.frame import Frame

__all__ = ["Animation", "FRAME_DELIMITER", "Frame"]
