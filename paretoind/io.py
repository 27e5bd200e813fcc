"""Reading and writing collections of objective-vector sets.

Input files hold one point per line with whitespace-separated
coordinates.  Blank lines separate sets and lines starting with ``#``
are comments.
"""

from __future__ import annotations

import contextlib
import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import IO, Union

Point = tuple[float, ...]
PointSet = list[Point]
Source = Union[str, "os.PathLike[str]", IO[str], None]

STDIN_NAME = "<stdin>"
POINT_FORMAT = "% 17.16g"
POINT_SEP = "\t"


class InputError(ValueError):
    """Raised when an input file cannot be opened or parsed."""


@contextlib.contextmanager
def _open_source(source: Source) -> Iterator[tuple[IO[str], str]]:
    if source is None or source == "-":
        yield sys.stdin, STDIN_NAME
    elif hasattr(source, "read"):
        yield source, getattr(source, "name", STDIN_NAME)  # type: ignore[misc]
    else:
        name = os.fspath(source)  # type: ignore[arg-type]
        try:
            stream = open(name, encoding="utf-8")
        except OSError as exc:
            raise InputError(f"{name}: {exc.strerror}") from exc
        with stream:
            yield stream, name


def read_data(source: Source = None) -> list[PointSet]:
    """Read sets of points from a path, a text stream or stdin.

    ``None`` or ``"-"`` reads standard input.  Returns one list of
    points per set; an empty input gives an empty list.
    """
    sets: list[PointSet] = []
    current: PointSet = []
    ncols: int | None = None
    with _open_source(source) as (stream, name):
        for lineno, line in enumerate(stream, start=1):
            text = line.strip()
            if text.startswith("#"):
                continue
            if not text:
                if current:
                    sets.append(current)
                    current = []
                continue
            try:
                point = tuple(float(token) for token in text.split())
            except ValueError as exc:
                raise InputError(
                    f"{name}: line {lineno}: could not convert value to number"
                ) from exc
            if ncols is None:
                ncols = len(point)
            elif len(point) != ncols:
                raise InputError(
                    f"{name}: line {lineno}: found {len(point)} columns,"
                    f" expected {ncols}"
                )
            current.append(point)
    if current:
        sets.append(current)
    return sets


def read_reference_set(source: Source) -> list[Point]:
    """Read all points of a file as a single reference set."""
    points = [point for point_set in read_data(source) for point in point_set]
    if not points:
        raise InputError(f"invalid reference set '{source}'")
    return points


def parse_minmax(text: str | None, nobj: int) -> tuple[int, ...]:
    """Parse an objective specification such as ``"+-i"``.

    ``-`` minimises (-1), ``+`` maximises (1), ``0`` or ``i`` ignores (0).
    With ``text`` None every one of ``nobj`` objectives is minimised.
    """
    if text is None:
        if nobj <= 0:
            raise ValueError("number of objectives must be positive")
        return (-1,) * nobj
    codes = {"+": 1, "-": -1, "0": 0, "i": 0}
    try:
        minmax = tuple(codes[char] for char in text)
    except KeyError as exc:
        raise ValueError(f"invalid argument '{text}' for objectives") from exc
    if not any(minmax):
        raise ValueError(f"all objectives ignored because of --obj={text}")
    return minmax


def parse_bitvector(text: str | None, nobj: int) -> tuple[bool, ...]:
    """Parse a string of ``0`` and ``1`` characters into booleans.

    With ``text`` None the result is ``nobj`` times False.
    """
    if text is None:
        if nobj <= 0:
            raise ValueError("number of objectives must be positive")
        return (False,) * nobj
    codes = {"1": True, "0": False}
    try:
        return tuple(codes[char] for char in text)
    except KeyError as exc:
        raise ValueError(f"invalid bit vector '{text}'") from exc


def format_vector(vector: Iterable[float]) -> str:
    """Format coordinates with the fixed-width point format."""
    return POINT_SEP.join(POINT_FORMAT % value for value in vector)


def write_sets(stream: IO[str], sets: Iterable[Sequence[Sequence[float]]]) -> None:
    """Write each set, one point per line, each followed by a blank line."""
    for point_set in sets:
        for point in point_set:
            stream.write(format_vector(point) + "\n")
        stream.write("\n")


def write_sets_filtered(
    stream: IO[str],
    sets: Iterable[Sequence[Sequence[float]]],
    keep: Iterable[bool],
) -> None:
    """Like :func:`write_sets`, but only points whose flag in ``keep`` is true.

    ``keep`` holds one flag per point, across all sets in order.
    """
    flags = iter(keep)
    for point_set in sets:
        for point in point_set:
            if next(flags):
                stream.write(format_vector(point) + "\n")
        stream.write("\n")