"""Drawing surfaces the renderer writes text onto."""

from __future__ import annotations

from typing import Protocol


class Surface(Protocol):
    """Anything that can print a line of text at a cell coordinate.

    Implementations silently discard text that falls outside their bounds.
    """

    def print(self, x: int, y: int, text: str) -> None:
        ...


class TextSurface:
    """In-memory character grid, used for previews and tests."""

    def __init__(self, width: int, height: int, fill: str = " ") -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Surface size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self._fill = fill
        self._rows = self._blank_rows()

    def _blank_rows(self) -> list[list[str]]:
        return [[self._fill] * self.width for _ in range(self.height)]

    def clear(self) -> None:
        self._rows = self._blank_rows()

    def print(self, x: int, y: int, text: str) -> None:
        if y < 0 or y >= self.height:
            return
        row = self._rows[y]
        for offset, char in enumerate(text):
            column = x + offset
            if column >= self.width:
                break
            if column >= 0:
                row[column] = char

    def char_at(self, x: int, y: int) -> str:
        return self._rows[y][x]

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._rows]

    def render(self) -> str:
        return "\n".join(self.lines())


__all__ = ["Surface", "TextSurface"]
