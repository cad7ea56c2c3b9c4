"""Looping frame sequences advanced by discrete ticks."""

from __future__ import annotations

from typing import Iterable

from sl.animation.frame import Frame
from sl.errors import EmptyAnimationError, InvalidAnimationSpeedError

FRAME_DELIMITER = "\n\n\n"


class Animation:
    """A looping sequence of frames shown at a fixed speed.

    ``speed`` is the number of ticks a frame stays on screen before the next
    one is shown, so lower is faster.
    """

    def __init__(self, frames: Iterable[Frame], speed: int = 1) -> None:
        if speed < 1:
            raise InvalidAnimationSpeedError(speed)
        self._frames = tuple(frames)
        if not self._frames:
            raise EmptyAnimationError()
        self._speed = speed
        self._current_frame_index = 0
        self._current_tick = 0

    @classmethod
    def from_text(cls, speed: int, text: str) -> Animation:
        """Parse frames separated by two blank lines (three newlines)."""
        if speed < 1:
            raise InvalidAnimationSpeedError(speed)
        frames = [Frame.from_text(block) for block in text.split(FRAME_DELIMITER)]
        return cls(frames, speed)

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def current_frame_index(self) -> int:
        return self._current_frame_index

    @property
    def current_tick(self) -> int:
        return self._current_tick

    @property
    def current_frame(self) -> Frame:
        return self._frames[self._current_frame_index]

    @property
    def width(self) -> int:
        """Widest frame, so the bounding box stays fixed while animating."""
        return max(frame.width for frame in self._frames)

    @property
    def height(self) -> int:
        """Tallest frame."""
        return max(frame.height for frame in self._frames)

    def step(self) -> None:
        """Advance one tick, moving to the next frame every ``speed`` ticks."""
        self._current_tick += 1
        if self._current_tick == self._speed:
            self._current_frame_index = (self._current_frame_index + 1) % len(self._frames)
            self._current_tick = 0

    def reset(self) -> None:
        self._current_frame_index = 0
        self._current_tick = 0


__all__ = ["Animation", "FRAME_DELIMITER"]
