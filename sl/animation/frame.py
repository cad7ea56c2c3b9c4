"""Single static frame of an ASCII animation."""

from __future__ import annotations

from dataclasses import dataclass

from sl.errors import EmptyFrameError


@dataclass(frozen=True)
class Frame:
    """One multi-line image, lines ordered top to bottom."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> Frame:
        """Build a frame from text, one line per newline-separated piece."""
        # "".split("\n") yields [""], so reject empty input up front.
        if len(text) == 0:
            raise EmptyFrameError()
        return cls(lines=tuple(text.split("\n")))

    @property
    def width(self) -> int:
        """Length of the longest line."""
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)


__all__ = ["Frame"]
