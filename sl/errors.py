"""Exceptions raised while building trains and their animations."""

from __future__ import annotations


class SLError(Exception):
    """Base class for every error that aborts startup."""


class AnimationError(SLError):
    """Raised when animation text or parameters cannot form a valid animation."""


class EmptyFrameError(AnimationError):
    """Raised when a frame's source text is empty."""

    def __init__(self) -> None:
        super().__init__("Animation frame is empty")


class EmptyAnimationError(AnimationError):
    """Raised when an animation has no frames."""

    def __init__(self) -> None:
        super().__init__("Animation has no frames")


class InvalidAnimationSpeedError(AnimationError):
    """Raised when an animation speed is not a positive integer."""

    def __init__(self, speed: int) -> None:
        super().__init__(f"Invalid animation speed: {speed} (must be at least 1)")
        self.speed = speed


class TrainError(SLError):
    """Raised when a train cannot be loaded or selected."""


class TrainLoadError(TrainError):
    """Raised when a custom train file or directory cannot be read."""


class NoTrainsFoundError(TrainError):
    """Raised when a train directory holds no .train files."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"No .train files found in {directory}")
        self.directory = directory


class InvalidTrainIndexError(TrainError):
    """Raised when a requested built-in train number is out of range."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Invalid train number {index}; choose 0 to {count - 1}")
        self.index = index
        self.count = count


__all__ = [
    "SLError",
    "AnimationError",
    "EmptyFrameError",
    "EmptyAnimationError",
    "InvalidAnimationSpeedError",
    "TrainError",
    "TrainLoadError",
    "NoTrainsFoundError",
    "InvalidTrainIndexError",
]
