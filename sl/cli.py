"""Command line entry point: run a train across the terminal."""

from __future__ import annotations

import argparse
from pathlib import Path
import random
import signal
import sys

from loguru import logger

from sl.config import DEFAULT_CONFIG_PATH, AppConfig, default_config, load_config
from sl.display.terminal import run_animation
from sl.errors import SLError
from sl.log import init_logger
from sl.logic.train_state import TrainState
from sl.trains.definition import TrainDefinition
from sl.trains.loader import select_train

VERSION = "6.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sl", description="A steam locomotive runs across your terminal.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    selector = parser.add_mutually_exclusive_group()
    selector.add_argument("-n", "--number", type=int, metavar="NUM", help="Select a specific animation to run")
    selector.add_argument("-l", "--logo", action="store_true", help="Show the LOGO train")
    selector.add_argument("-c", "--c51", action="store_true", help="Show the C51 train")
    selector.add_argument(
        "-d", "--directory", metavar="DIR", help="Load a random train from a directory of .train files"
    )
    parser.add_argument("-f", "--flying", action="store_true", help="The train flies up as well as left")
    parser.add_argument("--config", metavar="PATH", help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
    return parser


def _load_app_config(path: str | None) -> AppConfig:
    if path is not None:
        return load_config(path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def choose_definition(args: argparse.Namespace, config: AppConfig, rng: random.Random) -> TrainDefinition:
    """Resolve the command line and config into a single train definition."""
    directory = args.directory
    if directory is None and args.number is None:
        directory = config.trains.directory
    return select_train(
        rng,
        number=args.number,
        logo=args.logo,
        c51=args.c51,
        directory=directory,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_app_config(args.config)
    except ValueError as exc:
        print(f"sl: {exc}", file=sys.stderr)
        return 1

    init_logger(config.log.log_dir, config.log.level)

    try:
        definition = choose_definition(args, config, random.Random())
        state = TrainState.from_definition(
            definition, flying=args.flying, flying_rate=config.animation.flying_rate
        )
    except SLError as exc:
        logger.error(f"Startup failed: {exc}")
        print(f"sl: {exc}", file=sys.stderr)
        return 1

    logger.info(f"Running train '{definition.name}' (flying={args.flying})")

    # Like the real thing, Ctrl-C does not stop the train.
    previous_handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        run_animation(state, fps=config.animation.fps)
    finally:
        signal.signal(signal.SIGINT, previous_handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
