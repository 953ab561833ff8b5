from __future__ import annotations

import argparse

from . import config
from .game import main as run_game
from .log import setup_logging


def _refresh_rate(value: str) -> int:
    try:
        return config.check_refresh_ms(int(value))
    except (ValueError, config.ConfigError) as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Classic snake on a walled grid.",
    )
    parser.add_argument(
        "--refresh-rate",
        type=_refresh_rate,
        default=config.REFRESH_MS,
        help="Milliseconds between snake moves (lower = faster game).",
    )
    parser.add_argument(
        "--renderer",
        choices=("soft", "buffer"),
        default="soft",
        help="Drawing backend (soft=pygame draw calls, buffer=numpy frame buffer).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        default="warning",
        help="Log verbosity on stderr (and in --log-file).",
    )
    parser.add_argument("--log-file", default=None, help="Also log to this file, rotated at 1MB.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    print(f"Starting gridsnake with refresh rate: {args.refresh_rate}ms")
    print("Use arrow keys to move, R to restart, ESC to exit")

    return run_game(args.refresh_rate, renderer=args.renderer, seed=args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
