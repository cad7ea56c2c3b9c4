"""Display output adapters."""

from sl.display.terminal import CursesSurface, TerminalDriver, run_animation

__all__ = ["CursesSurface", "TerminalDriver", "run_animation"]
