"""Curses output and the timer-driven redraw loop."""

from __future__ import annotations

import curses
import time
from typing import Any, Callable

from loguru import logger

from sl.logic.train_state import TrainState
from sl.rendering.renderer import render

DEFAULT_FPS = 18


class CursesSurface:
    """Surface adapter over a curses window."""

    def __init__(self, window: Any) -> None:
        self._window = window

    def print(self, x: int, y: int, text: str) -> None:
        height, width = self._window.getmaxyx()
        if y < 0 or y >= height or x < 0 or x >= width:
            return
        visible = text[: width - x]
        if not visible:
            return
        try:
            self._window.addstr(y, x, visible)
        except curses.error:
            # addstr raises after writing the bottom-right cell because the
            # cursor cannot advance past it; the text is already on screen.
            pass


class TerminalDriver:
    """Steps and redraws a train at a fixed frame rate until it has left."""

    def __init__(
        self,
        window: Any,
        state: TrainState,
        fps: int = DEFAULT_FPS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps < 1:
            raise ValueError(f"fps must be at least 1, got {fps}")
        self._window = window
        self._state = state
        self._surface = CursesSurface(window)
        self._frame_interval = 1.0 / fps
        self._clock = clock
        self._sleep = sleep

    def setup(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        self._window.nodelay(True)
        self.update_viewport()

    def update_viewport(self) -> None:
        height, width = self._window.getmaxyx()
        self._state.set_viewport(width, height)

    def handle_input(self) -> None:
        """Drain pending keys; only resizes matter, the train can't be stopped."""
        while True:
            key = self._window.getch()
            if key == -1:
                return
            if key == curses.KEY_RESIZE:
                self.update_viewport()

    def draw(self) -> None:
        self._window.erase()
        render(self._state, self._surface)
        self._window.refresh()

    def tick(self) -> bool:
        """Advance the train one step; returns True once it has left the screen."""
        self._state.step()
        return self._state.complete()

    def run(self) -> int:
        """Run until the train is gone; returns the number of ticks taken."""
        self.setup()
        self.draw()
        ticks = 0
        done = False
        while not done:
            start = self._clock()
            self.handle_input()
            done = self.tick()
            ticks += 1
            # The final frame is still drawn before the loop exits.
            self.draw()
            remaining = self._frame_interval - (self._clock() - start)
            if remaining > 0:
                self._sleep(remaining)
        logger.info(f"Train left the screen after {ticks} ticks")
        return ticks


def run_animation(state: TrainState, fps: int = DEFAULT_FPS) -> int:
    """Take over the terminal with curses and run the train across it."""
    return curses.wrapper(lambda window: TerminalDriver(window, state, fps=fps).run())


__all__ = ["CursesSurface", "DEFAULT_FPS", "TerminalDriver", "run_animation"]
