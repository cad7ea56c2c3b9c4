from __future__ import annotations

from unittest.mock import MagicMock
import curses

import pytest

from sl.display.terminal import CursesSurface
from sl.rendering.surface import TextSurface


def test_text_surface_starts_blank() -> None:
    surface = TextSurface(3, 2)

    assert surface.lines() == ["   ", "   "]


def test_text_surface_print_and_right_clip() -> None:
    surface = TextSurface(5, 2)

    surface.print(3, 1, "abcdef")

    assert surface.lines() == ["     ", "   ab"]


def test_text_surface_discards_out_of_bounds_rows() -> None:
    surface = TextSurface(4, 2)

    surface.print(0, -1, "xx")
    surface.print(0, 2, "yy")

    assert surface.render() == "    \n    "


def test_text_surface_clear() -> None:
    surface = TextSurface(2, 1)
    surface.print(0, 0, "ab")

    surface.clear()

    assert surface.lines() == ["  "]


def test_text_surface_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        TextSurface(-1, 2)


def _window(height: int, width: int) -> MagicMock:
    window = MagicMock()
    window.getmaxyx.return_value = (height, width)
    return window


def test_curses_surface_truncates_at_right_edge() -> None:
    window = _window(5, 10)

    CursesSurface(window).print(7, 2, "abcdef")

    window.addstr.assert_called_once_with(2, 7, "abc")


@pytest.mark.parametrize("x, y", [(10, 0), (-1, 0), (0, -1), (0, 5)])
def test_curses_surface_skips_out_of_bounds(x: int, y: int) -> None:
    window = _window(5, 10)

    CursesSurface(window).print(x, y, "abc")

    window.addstr.assert_not_called()


def test_curses_surface_ignores_bottom_right_error() -> None:
    window = _window(5, 10)
    window.addstr.side_effect = curses.error

    CursesSurface(window).print(9, 4, "x")

    window.addstr.assert_called_once_with(4, 9, "x")
