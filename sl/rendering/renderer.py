"""Draw a TrainState onto a surface relative to the viewport."""

from __future__ import annotations

from sl.logic.train_state import TrainState
from sl.rendering.surface import Surface


def print_clipped(surface: Surface, text: str, x: int, y: int) -> None:
    """Print text at (x, y), keeping the visible tail when x is negative.

    Surfaces drop a line that starts left of column 0, so the hidden prefix is
    cut here and the rest is drawn from column 0.
    """
    if x >= 0:
        surface.print(x, y, text)
        return
    hidden = -x
    if hidden >= len(text):
        return
    surface.print(0, y, text[hidden:])


def render(state: TrainState, surface: Surface) -> None:
    """Draw the smoke, then the train, at the state's current position."""
    if state.view_width is None or state.view_height is None:
        raise RuntimeError("Viewport size is unknown; call set_viewport first")

    x_origin = state.view_width + state.x

    # Center the train vertically.
    middle_row = state.view_height // 2
    y_origin = middle_row - state.train_animation.height // 2 + state.y

    if state.smoke is not None:
        smoke = state.smoke
        smoke_top = y_origin - smoke.animation.height
        for row, line in enumerate(smoke.animation.current_frame.lines):
            print_clipped(surface, line, x_origin + smoke.offset, smoke_top + row)

    for row, line in enumerate(state.train_animation.current_frame.lines):
        print_clipped(surface, line, x_origin, y_origin + row)


__all__ = ["print_clipped", "render"]
