"""Parse, group and plot the iris flower data set."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from dataclasses import dataclass
from itertools import combinations, cycle, groupby, islice
from typing import Iterable, List, Optional, Sequence, Tuple

PLOT_SIZE = 30
PLOT_SYMBOLS = "+ox"


class ParseError(ValueError):
    """A line of the data set could not be parsed."""


@dataclass(frozen=True)
class Iris:
    """One sample: its species name and four measurements."""

    name: str
    data: Tuple[float, float, float, float]


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_f32(text: str) -> float:
    if not text:
        raise ParseError("cannot parse float from empty string")
    if "_" in text:
        raise ParseError("invalid float literal")
    try:
        return _f32(float(text))
    except ValueError:
        raise ParseError("invalid float literal") from None


def parse_iris(line: str) -> Iris:
    """Parse ``a,b,c,d,name`` into an :class:`Iris`; raises :class:`ParseError`."""
    parts = (part.strip() for part in line.split(","))
    data = [_parse_f32(part) for part in islice(parts, 4)]
    name = next(parts, None)
    if name is None:
        raise ParseError("Missing name")
    return Iris(name, (data[0], data[1], data[2], data[3]))


def _lines(text: str) -> List[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_dataset(text: str) -> List[Iris]:
    """Parse every line of ``text``; the first bad line raises :class:`ParseError`."""
    return [parse_iris(line) for line in _lines(text)]


def _format_value(value: float) -> str:
    if math.isnan(value):
        return format("NaN", ">3")
    return format(value, ">3.1f")


def _to_grid(value: float, low: float, high: float, size: int) -> int:
    scaled = _f32(_f32(_f32(value - low) / _f32(high - low)) * (size - 1)) \
        if high != low else math.nan
    if math.isnan(scaled) or scaled <= 0:
        return 0
    return int(scaled)


def render_report(irises: Iterable[Iris]) -> str:
    """The species listing followed by a scatter plot for every pair of columns.

    Raises ``ValueError`` if there are no samples to plot.
    """
    ordered = sorted(irises, key=lambda iris: iris.name)
    out: List[str] = []

    symbols = cycle(PLOT_SYMBOLS)
    symbol_map = {}
    for species, group in groupby(ordered, key=lambda iris: iris.name):
        if species not in symbol_map:
            symbol_map[species] = next(symbols)
        out.append(f"{species} (symbol={symbol_map[species]})")
        for iris in group:
            out.append(", ".join(_format_value(v) for v in iris.data))

    n = PLOT_SIZE
    for a, b in combinations(range(4), 2):
        out.append(f"Column {a} vs {b}:")
        if not ordered:
            raise ValueError("Can't find min/max of empty iterator")
        plot = [[" "] * n for _ in range(n)]
        xs = [iris.data[a] for iris in ordered]
        ys = [iris.data[b] for iris in ordered]
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        for iris in ordered:
            ix = _to_grid(iris.data[a], min_x, max_x, n)
            iy = n - 1 - _to_grid(iris.data[b], min_y, max_y, n)
            plot[iy][ix] = symbol_map[iris.name]
        out.extend(" ".join(row) for row in plot)

    return "".join(line + "\n" for line in out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the data set from a file (or standard input) and print the report."""
    parser = argparse.ArgumentParser(description="Group and plot the iris data set.")
    parser.add_argument("path", nargs="?", help="data file; standard input if omitted")
    args = parser.parse_args(argv)

    if args.path is None:
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()

    try:
        irises = parse_dataset(text)
    except ParseError as error:
        print(f"Error parsing: {error}")
        return 1
    sys.stdout.write(render_report(irises))
    return 0


if __name__ == "__main__":
    sys.exit(main())