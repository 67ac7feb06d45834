"""Command line entry point that prints a generated lake map."""

from __future__ import annotations

import argparse

from fishpop.topography import TopographicMap

DEFAULT_SEED = 42
DEFAULT_WIDTH = 96
DEFAULT_HEIGHT = 64
DEFAULT_SCALE = 0.12


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fishpop", description="Print a generated lake map.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--width", type=_non_negative, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_non_negative, default=DEFAULT_HEIGHT)
    parser.add_argument("--scale", type=float, default=DEFAULT_SCALE)
    args = parser.parse_args(argv)

    topo = TopographicMap(args.seed, args.width, args.height, args.scale)
    print(topo.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())