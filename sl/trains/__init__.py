"""Train definitions and selection."""

from sl.trains.catalog import builtin_trains, c51_train, d51_train, logo_train
from sl.trains.definition import TrainDefinition
from sl.trains.loader import load_random_file, select_train

__all__ = [
    "TrainDefinition",
    "builtin_trains",
    "c51_train",
    "d51_train",
    "load_random_file",
    "logo_train",
    "select_train",
]
