"""Train selection from the built-in catalog or a directory of .train files."""

from __future__ import annotations

from pathlib import Path
import random

from loguru import logger

from sl.errors import InvalidTrainIndexError, NoTrainsFoundError, TrainLoadError
from sl.trains.catalog import builtin_trains, c51_train, logo_train
from sl.trains.definition import TrainDefinition

TRAIN_EXTENSION = ".train"


def find_train_files(directory: str | Path) -> list[Path]:
    """Return the .train files in a directory, sorted by name."""
    path = Path(directory)
    try:
        entries = list(path.iterdir())
    except OSError as exc:
        raise TrainLoadError(f"Unable to read train directory {path}: {exc}") from exc
    return sorted(entry for entry in entries if entry.suffix == TRAIN_EXTENSION and entry.is_file())


def load_random_file(rng: random.Random, directory: str | Path) -> TrainDefinition:
    """Load a randomly chosen .train file from a directory."""
    candidates = find_train_files(directory)
    if not candidates:
        raise NoTrainsFoundError(str(directory))
    choice = candidates[rng.randrange(len(candidates))]
    logger.info(f"Loading custom train from {choice}")
    return TrainDefinition.from_file(choice)


def select_train(
    rng: random.Random,
    number: int | None = None,
    logo: bool = False,
    c51: bool = False,
    directory: str | Path | None = None,
) -> TrainDefinition:
    """Pick a train definition from the selection options.

    Named trains win over a directory, which wins over a catalog number. With
    no options a random built-in train is chosen.
    """
    if c51:
        return c51_train()
    if logo:
        return logo_train()
    if directory is not None:
        return load_random_file(rng, directory)

    builtins = builtin_trains()
    if number is None:
        number = rng.randrange(len(builtins))
    if number < 0 or number >= len(builtins):
        raise InvalidTrainIndexError(number, len(builtins))
    logger.debug(f"Selected built-in train {number} ({builtins[number].name})")
    return builtins[number]


__all__ = ["TRAIN_EXTENSION", "find_train_files", "load_random_file", "select_train"]
