#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
championship.py
---------------

Line‑oriented driver for the "knight tournament" problem built on top of
:class:`red_black_tree.RedBlackTree`.

Input format
~~~~~~~~~~~~
The first line holds ``n m``.  Knights ``1..n`` take part; each of the next
``m`` lines holds ``l r winner``: every knight still in the range ``l..r``
fights and is beaten by ``winner``.  The program prints, for every knight,
the knight who beat it first (``0`` for the overall winner), space separated.

Usage:
    python championship.py [--input PATH] [--output PATH] [--log-level LEVEL]

``--log-level`` defaults to the ``CHAMPIONSHIP_LOG_LEVEL`` environment
variable when set, otherwise ``WARNING``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import IO, Iterable, List, Optional, Sequence, Tuple

from red_black_tree import RedBlackTree

logger = logging.getLogger(__name__)

Fight = Tuple[int, int, int]


def _parse_ints(line: str, count: int, what: str) -> List[int]:
    fields = line.split()
    if len(fields) != count:
        raise ValueError(f"Expected {count} integers for {what}, got {line.strip()!r}")
    try:
        return [int(field) for field in fields]
    except ValueError:
        raise ValueError(f"Non-integer field in {what}: {line.strip()!r}") from None


def solve(n: int, fights: Iterable[Fight]) -> List[int]:
    """Return the first conqueror of every knight ``1..n`` (``0`` if none)."""
    knights: RedBlackTree[int] = RedBlackTree(range(1, n + 1))
    for left, right, winner in fights:
        knights.set_payload(winner, range(left, right + 1))

    result = []
    for knight in range(1, n + 1):
        conqueror = knights.get_payload(knight)
        result.append(0 if conqueror is None else conqueror)
    return result


def read_fights(stream_in: IO[str]) -> Tuple[int, List[Fight]]:
    """Parse the header and the ``m`` fight records from *stream_in*."""
    header = stream_in.readline()
    if not header.strip():
        raise ValueError("Missing 'n m' header line")
    n, m = _parse_ints(header, 2, "header")

    fights: List[Fight] = []
    for index in range(m):
        line = stream_in.readline()
        if not line:
            raise ValueError(f"Expected {m} fight records, got {index}")
        left, right, winner = _parse_ints(line, 3, f"fight #{index + 1}")
        fights.append((left, right, winner))
    logger.debug("Read %d knights and %d fights", n, len(fights))
    return n, fights


def championship(stream_in: IO[str], stream_out: IO[str]) -> None:
    """Read a tournament from *stream_in* and write the results to *stream_out*."""
    n, fights = read_fights(stream_in)
    result = solve(n, fights)
    stream_out.write(" ".join(str(value) for value in result))
    stream_out.flush()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    env = os.environ
    parser = argparse.ArgumentParser(description="Resolve a knight tournament")
    parser.add_argument("--input", default=None, help="input file (default: stdin)")
    parser.add_argument("--output", default=None, help="output file (default: stdout)")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=env.get("CHAMPIONSHIP_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    stream_in = open(args.input, encoding="utf-8") if args.input else sys.stdin
    stream_out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    try:
        championship(stream_in, stream_out)
    except ValueError as exc:
        logger.error("Malformed input: %s", exc)
        return 1
    finally:
        if stream_in is not sys.stdin:
            stream_in.close()
        if stream_out is not sys.stdout:
            stream_out.close()
    logger.info("Tournament resolved")
    return 0


if __name__ == "__main__":
    sys.exit(main())
