"""Unvalidated train descriptions consumed by TrainState."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sl.errors import TrainLoadError


@dataclass(frozen=True)
class TrainDefinition:
    """Raw animation text and speeds for one train.

    Nothing here is validated; errors surface when the text is turned into
    animations by ``TrainState.from_definition``.
    """

    train: str
    train_animation_speed: int
    smoke: str | None = None
    smoke_offset: int | None = None
    smoke_animation_speed: int | None = None
    name: str = ""

    @classmethod
    def from_file(cls, path: str | Path) -> TrainDefinition:
        """Load a custom train from a text file; custom trains have no smoke."""
        train_path = Path(path)
        try:
            text = train_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TrainLoadError(f"Unable to read train file {train_path}: {exc}") from exc
        return cls(train=text, train_animation_speed=1, name=train_path.stem)


__all__ = ["TrainDefinition"]
