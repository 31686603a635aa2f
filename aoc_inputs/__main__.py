# NOTE: installed as the `aoc-fetch` console script, keep pyproject.toml in sync
# with any changes to the CLI api

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from . import AoC
from .errors import AocError
from .fetch import current_year, today

logger = logging.getLogger(__name__)


def split_yd(data: str) -> tuple[int, int]:
    res = data.split(":")

    try:
        if len(res) == 2:
            yd = int(res[0]), int(res[1])
        elif len(res) == 1:
            yd = current_year(), int(res[0])
        else:
            raise argparse.ArgumentTypeError(f"expected DAY or YEAR:DAY, got {data!r}")
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected DAY or YEAR:DAY, got {data!r}") from None

    if not (1 <= yd[0] < 3000):
        raise argparse.ArgumentTypeError("year not within valid range (1..=2999)")

    if not (1 <= yd[1] <= 25):
        raise argparse.ArgumentTypeError("day not within valid range (1..=25)")

    return yd


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "aoc-fetch", description="Print an Advent of Code input, fetching it only once"
    )
    parser.add_argument(
        "--download",
        "-d",
        type=split_yd,
        default=None,
        help="day to fetch, defaults to the current year and day, pass day or year:day to override",
    )
    parser.add_argument(
        "--cache-dir",
        default=None,
        help="where inputs are cached, defaults to $AOC_CACHE_DIR or ~/.aoc",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="session token, defaults to $TOKEN, $AOC_TOKEN or a ./tokenfile",
    )
    parser.add_argument(
        "--path",
        action="store_true",
        help="print where the input is cached instead of its contents",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        encoding="utf-8",
        level=os.getenv("AOC_LOGLEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    parsed = build_parser().parse_args(argv)
    year, day = parsed.download or (current_year(), today())

    try:
        with AoC(year, path=parsed.cache_dir, token=parsed.token) as aoc:
            text = aoc.read_or_fetch(day)
            location = aoc.path_for(day)
    except AocError as err:
        logger.error("%s", err)
        return 1

    if parsed.path:
        print(location)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
