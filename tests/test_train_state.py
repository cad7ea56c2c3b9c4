from __future__ import annotations

import pytest

from sl.errors import EmptyFrameError, InvalidAnimationSpeedError
from sl.logic.train_state import FLYING_RATE, TrainState
from sl.trains.definition import TrainDefinition


def _state(
    train: str = "X",
    smoke: str | None = None,
    flying: bool = False,
    **kwargs,
) -> TrainState:
    definition = TrainDefinition(train=train, train_animation_speed=1, smoke=smoke, **kwargs)
    return TrainState.from_definition(definition, flying=flying)


def test_from_definition_defaults() -> None:
    state = _state()

    assert (state.x, state.y) == (0, 0)
    assert state.view_width is None
    assert state.view_height is None
    assert state.smoke is None
    assert state.flying is False


def test_from_definition_smoke_defaults() -> None:
    state = _state(smoke="~~")

    assert state.smoke is not None
    assert state.smoke.offset == 0
    assert state.smoke.animation.speed == 1


def test_from_definition_smoke_settings() -> None:
    state = _state(smoke="~~", smoke_offset=4, smoke_animation_speed=3)

    assert state.smoke is not None
    assert state.smoke.offset == 4
    assert state.smoke.animation.speed == 3


def test_from_definition_propagates_train_errors() -> None:
    with pytest.raises(InvalidAnimationSpeedError):
        TrainState.from_definition(TrainDefinition(train="X", train_animation_speed=0))
    with pytest.raises(EmptyFrameError):
        TrainState.from_definition(TrainDefinition(train="", train_animation_speed=1))


def test_from_definition_propagates_smoke_errors() -> None:
    with pytest.raises(InvalidAnimationSpeedError):
        _state(smoke="~", smoke_animation_speed=0)
    with pytest.raises(EmptyFrameError):
        _state(smoke="")


def test_invalid_flying_rate() -> None:
    definition = TrainDefinition(train="X", train_animation_speed=1)
    with pytest.raises(ValueError):
        TrainState.from_definition(definition, flying_rate=0)


def test_step_moves_left_and_animates() -> None:
    state = _state(train="a\n\n\nb")

    state.step()

    assert state.x == -1
    assert state.y == 0
    assert state.train_animation.current_frame_index == 1


def test_step_animates_smoke_at_its_own_speed() -> None:
    state = _state(train="a\n\n\nb", smoke="1\n\n\n2", smoke_animation_speed=2)

    state.step()
    assert state.train_animation.current_frame_index == 1
    assert state.smoke is not None
    assert state.smoke.animation.current_frame_index == 0

    state.step()
    assert state.train_animation.current_frame_index == 0
    assert state.smoke.animation.current_frame_index == 1


def test_complete_requires_viewport() -> None:
    state = _state()

    with pytest.raises(RuntimeError):
        state.complete()


def test_single_char_train_completes_after_leaving_viewport() -> None:
    state = _state()
    state.set_viewport(10, 5)

    for _ in range(11):
        state.step()
        assert not state.complete()

    assert state.x == -11
    state.step()
    assert state.x == -12
    assert state.complete()


def test_complete_flips_on_first_tick_past_edge() -> None:
    state = _state(train="abcd", smoke="~~~~~~~")
    state.set_viewport(20, 10)

    ticks = 0
    while not state.complete():
        assert state.x + state.width >= -state.view_width
        state.step()
        ticks += 1

    assert state.x + state.width < -state.view_width
    # Smoke is wider than the train, so it decides when the run is over.
    assert ticks == 20 + 7 + 1


def test_dimensions_without_smoke() -> None:
    state = _state(train="abc\nde")

    assert state.width == 3
    assert state.height == 2
    assert state.smoke_width == 0
    assert state.smoke_height == 0


def test_dimensions_with_smoke() -> None:
    state = _state(train="abc\nde", smoke="~\n~\n~~~~~")

    assert state.width == 5
    assert state.height == 5


def test_set_viewport_flying_starts_at_bottom() -> None:
    state = _state(train="a\nb", smoke="~", flying=True)

    state.set_viewport(40, 20)

    assert state.y == 20 - 3
    assert (state.view_width, state.view_height) == (40, 20)


def test_set_viewport_not_flying_keeps_y() -> None:
    state = _state(train="a\nb")

    state.set_viewport(40, 20)

    assert state.y == 0


def test_set_viewport_resize_keeps_position() -> None:
    state = _state(train="a\nb", flying=True)
    state.set_viewport(40, 20)
    for _ in range(FLYING_RATE):
        state.step()
    y = state.y

    state.set_viewport(80, 30)

    assert state.y == y
    assert (state.view_width, state.view_height) == (80, 30)


def test_flying_climbs_every_flying_rate_ticks() -> None:
    state = _state(flying=True)
    state.set_viewport(100, 50)
    start_y = state.y

    for tick in range(1, 3 * FLYING_RATE + 1):
        state.step()
        assert state.y == start_y - tick // FLYING_RATE


def test_custom_flying_rate() -> None:
    definition = TrainDefinition(train="X", train_animation_speed=1)
    state = TrainState.from_definition(definition, flying=True, flying_rate=2)
    state.set_viewport(10, 10)

    for _ in range(4):
        state.step()

    assert state.y == 10 - 1 - 2


def test_not_flying_never_climbs() -> None:
    state = _state()
    state.set_viewport(100, 50)

    for _ in range(3 * FLYING_RATE):
        state.step()

    assert state.y == 0
