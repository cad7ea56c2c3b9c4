"""Position and motion of a train crossing the viewport."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from sl.animation import Animation
from sl.trains.definition import TrainDefinition

# Terminal cells are taller than they are wide, so climb one row for every
# FLYING_RATE columns travelled.
FLYING_RATE = 10

DEFAULT_SMOKE_SPEED = 1
DEFAULT_SMOKE_OFFSET = 0


@dataclass
class SmokeState:
    """Smoke animation drawn above the train, shifted right by ``offset``."""

    animation: Animation
    offset: int = DEFAULT_SMOKE_OFFSET


class TrainState:
    """A train (and optional smoke) drifting left across a viewport.

    ``x`` and ``y`` are offsets from the train's starting point: ``x == 0``
    puts the train just past the right edge and each step moves it one
    column left. The viewport size is unknown until ``set_viewport`` is
    called by the display driver.
    """

    def __init__(
        self,
        train_animation: Animation,
        smoke: SmokeState | None = None,
        flying: bool = False,
        flying_rate: int = FLYING_RATE,
    ) -> None:
        if flying_rate < 1:
            raise ValueError(f"flying_rate must be at least 1, got {flying_rate}")
        self.train_animation = train_animation
        self.smoke = smoke
        self.flying = flying
        self.flying_rate = flying_rate
        self.x = 0
        self.y = 0
        self.ticks = 0
        self.view_width: int | None = None
        self.view_height: int | None = None

    @classmethod
    def from_definition(
        cls,
        definition: TrainDefinition,
        flying: bool = False,
        flying_rate: int = FLYING_RATE,
    ) -> TrainState:
        """Validate a train definition into animations."""
        train_animation = Animation.from_text(definition.train_animation_speed, definition.train)

        smoke = None
        if definition.smoke is not None:
            speed = definition.smoke_animation_speed
            offset = definition.smoke_offset
            smoke = SmokeState(
                animation=Animation.from_text(
                    DEFAULT_SMOKE_SPEED if speed is None else speed,
                    definition.smoke,
                ),
                offset=DEFAULT_SMOKE_OFFSET if offset is None else offset,
            )

        return cls(train_animation, smoke=smoke, flying=flying, flying_rate=flying_rate)

    @property
    def smoke_width(self) -> int:
        return self.smoke.animation.width if self.smoke is not None else 0

    @property
    def smoke_height(self) -> int:
        return self.smoke.animation.height if self.smoke is not None else 0

    @property
    def width(self) -> int:
        """Widest extent of the train or its smoke."""
        return max(self.train_animation.width, self.smoke_width)

    @property
    def height(self) -> int:
        """Combined height of the train and the smoke above it."""
        return self.train_animation.height + self.smoke_height

    def set_viewport(self, width: int, height: int) -> None:
        """Record the viewport size; may be called again on every resize."""
        if self.flying and self.view_width is None:
            # Start at the bottom, raised by the train and smoke height so the
            # whole train is visible.
            self.y = height - self.height
        if (width, height) != (self.view_width, self.view_height):
            logger.debug(f"Viewport set to {width}x{height}")
        self.view_width = width
        self.view_height = height

    def step(self) -> None:
        """Advance one tick: move left, animate, and climb when flying."""
        self.x -= 1
        self.ticks += 1
        self.train_animation.step()

        if self.flying and self.ticks % self.flying_rate == 0:
            self.y -= 1

        if self.smoke is not None:
            self.smoke.animation.step()

    def complete(self) -> bool:
        """True once the whole train has left past the left edge."""
        if self.view_width is None:
            raise RuntimeError("Viewport size is unknown; call set_viewport first")
        return self.x < -(self.view_width + self.width)


__all__ = ["FLYING_RATE", "SmokeState", "TrainState"]
