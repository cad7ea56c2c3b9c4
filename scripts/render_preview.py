"""Render a single tick of a train to a PNG preview."""

from __future__ import annotations

import argparse
import random

from sl.logic.train_state import TrainState
from sl.rendering import TextSurface, rasterize, render, save_frame
from sl.trains.loader import select_train


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("-n", "--number", type=int, default=0)
    parser.add_argument("-l", "--logo", action="store_true")
    parser.add_argument("-c", "--c51", action="store_true")
    parser.add_argument("-d", "--directory")
    parser.add_argument("-f", "--flying", action="store_true")
    parser.add_argument("--ticks", type=int, default=40, help="Steps to run before rendering")
    parser.add_argument("--width", type=int, default=100)
    parser.add_argument("--height", type=int, default=30)
    parser.add_argument("--output", default="emulator_output/frame.png")
    parser.add_argument("--text", action="store_true", help="Also print the frame as text")
    args = parser.parse_args()

    definition = select_train(
        random.Random(0),
        number=args.number,
        logo=args.logo,
        c51=args.c51,
        directory=args.directory,
    )
    state = TrainState.from_definition(definition, flying=args.flying)
    state.set_viewport(args.width, args.height)
    for _ in range(args.ticks):
        state.step()

    surface = TextSurface(args.width, args.height)
    render(state, surface)
    save_frame(rasterize(surface), args.output)
    if args.text:
        print(surface.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
