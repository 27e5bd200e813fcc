"""Pairwise comparison of approximation sets by Pareto dominance.

Each input file holds several runs (sets of nondominated points).  For
every pair of files the command counts how many times a run of one file
is better, in the Pareto sense, than a run of the other.
"""

from __future__ import annotations

import getopt
import sys
from collections.abc import Sequence
from itertools import accumulate
from typing import Optional

from paretoind.epsilon import epsilon_additive_ind
from paretoind.io import InputError, read_data

PROG = "dominatedsets"
_VERSION = "1.0"

Point = Sequence[float]
Points = Sequence[Point]

_USAGE = f"""
Usage: {PROG} [OPTIONS] [FILE...]

Calculates the number of Pareto sets from one file that
dominate the Pareto sets of the other files.

Options:
 -h, --help          print this summary and exit
 -V, --version       print version number and exit
 -v, --verbose       print some information (time, number of points, etc.)
 -q, --quiet         print as little as possible
 -p, --percentages   print results also as percentages.
     --no-check      do not check nondominance of sets (faster but unsafe).
 -o, --obj [+|-]...  specify whether each objective should be
                     minimised (-) or maximised (+) (default all minimised)
"""


def dominance(a: Point, b: Point, minmax: Sequence[int]) -> int:
    """Compare two points.

    Returns 0 if they are equal in every considered objective, 1 if
    ``a`` dominates ``b`` and -1 if ``a`` does not dominate ``b``.
    """
    triples = list(zip(minmax, a, b))
    if any((s < 0 and x > y) or (s > 0 and x < y) for s, x, y in triples):
        return -1
    if any((s < 0 and x < y) or (s > 0 and x > y) for s, x, y in triples):
        return 1
    return 0


def set_dominates(minmax: Sequence[int], points_x: Points, points_y: Points) -> int:
    """Check whether set X weakly dominates set Y.

    Returns 1 if X does not weakly dominate Y, -1 if X weakly dominates
    Y and is better somewhere (or the sets differ in size), and 0 if
    the sets are equivalent.
    """
    weakly = False
    strictly = False
    for y in points_y:
        weakly = False
        for x in points_x:
            result = dominance(x, y, minmax)
            if result == 1:
                weakly = strictly = True
                break
            if result == 0:
                weakly = True
                break
        if not weakly:
            break

    if not weakly:
        return 1
    if len(points_x) != len(points_y) or strictly:
        return -1
    return 0


def pareto_better(minmax: Sequence[int], points_a: Points, points_b: Points) -> int:
    """Compare two sets: -1 if A is better, 1 if B is better, 0 otherwise.

    The answer is cross-checked with the additive epsilon indicator and
    a disagreement raises RuntimeError.
    """
    result = set_dominates(minmax, points_a, points_b)
    if result == 1:
        result = -set_dominates(minmax, points_b, points_a)
        if result != 1:
            result = 0

    check = epsilon_additive_ind(minmax, points_a, points_b)
    if result != check:
        raise RuntimeError(f"result = {result}  !=  result2 = {check}")
    return result


def compare_runs(
    minmax: Sequence[int],
    runs_a: Sequence[Points],
    runs_b: Sequence[Points],
) -> tuple[int, int]:
    """Compare every run of A with every run of B.

    Returns how many times a run of A was better and how many times a
    run of B was better.
    """
    better_a = better_b = 0
    for run_a in runs_a:
        for run_b in runs_b:
            result = pareto_better(minmax, run_a, run_b)
            if result < 0:
                better_a += 1
            elif result > 0:
                better_b += 1
    return better_a, better_b


def _table(
    names: Sequence[str], name_w: int, col_w: int, cell
) -> list[str]:
    parts = ["\n" + "".rjust(name_w)]
    parts.extend(" " + name.rjust(col_w) for name in names)
    for k, row_name in enumerate(names):
        parts.append("\n" + row_name.rjust(name_w))
        for j in range(len(names)):
            text = "--" if k == j else cell(k, j)
            parts.append(" " + text.rjust(col_w))
    return parts


def format_results(
    names: Sequence[str],
    nruns: Sequence[int],
    results: Sequence[Sequence[int]],
    percentages: bool = False,
) -> str:
    """Render the comparison matrix, optional percentages and the ranks.

    ``results[k][j]`` is the number of times a run of file ``k`` was
    better than a run of file ``j``; the diagonal is not shown.
    """
    name_w = max((len(name) for name in names), default=0)
    max_result = max([0, *(value for row in results for value in row)])
    col_w = max(name_w, len(str(max_result)))

    parts = ["\n\nNumber of times that <row> is better than <column>:\n"]
    parts += _table(names, name_w, col_w, lambda k, j: str(results[k][j]))
    parts.append("\n")

    if percentages:
        col_w = max(col_w, len("100.0"))
        parts.append("\n\nPercentage of times that <row> is better than <column>:\n")
        parts += _table(
            names,
            name_w,
            col_w,
            lambda k, j: f"{results[k][j] * 100.0 / (nruns[k] * nruns[j]):.1f}",
        )
    parts.append("\n\n")

    parts.append("Ranks:")
    for k in range(len(names)):
        rank = sum(results[j][k] for j in range(len(names)) if j != k)
        parts.append(f" {rank:3d}")
    parts.append("\n")
    return "".join(parts)


def _find_dominated_point(points: Points, minmax: Sequence[int]) -> Optional[int]:
    for index, point in enumerate(points):
        if any(
            other_index != index and dominance(other, point, minmax) == 1
            for other_index, other in enumerate(points)
        ):
            return index
    return None


def _parse_minmax(text: str) -> Optional[tuple[int, ...]]:
    codes = {"+": 1, "-": -1, "0": 0, "i": 0}
    if any(char not in codes for char in text):
        return None
    return tuple(codes[char] for char in text)


def _error(message: str) -> None:
    print(f"{PROG}: error: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options, files = getopt.gnu_getopt(
            args,
            "hVvqpo:",
            ["help", "version", "verbose", "quiet", "percentages", "no-check", "obj="],
        )
    except getopt.GetoptError as exc:
        print(f"{PROG}: {exc.msg}", file=sys.stderr)
        print(f"Try `{PROG} --help' for more information.", file=sys.stderr)
        return 1

    percentages = False
    check = True
    minmax: Optional[tuple[int, ...]] = None
    for opt, value in options:
        if opt in ("-h", "--help"):
            print(_USAGE)
            return 0
        if opt in ("-V", "--version"):
            print(f"{PROG} version {_VERSION}\n")
            return 0
        if opt in ("-p", "--percentages"):
            percentages = True
        elif opt == "--no-check":
            check = False
        elif opt in ("-o", "--obj"):
            minmax = _parse_minmax(value)
            if minmax is None:
                print(f"{PROG}: invalid argument '{value}' for -o, --obj", file=sys.stderr)
                return 1
            if not any(minmax):
                print(
                    f"{PROG}: warning: all objectives ignored because of --obj={value}",
                    file=sys.stderr,
                )
                return 0
        # --verbose and --quiet produce no extra output.

    if len(files) <= 1:
        print(f"{PROG}: error: at least two input files are required.", file=sys.stderr)
        print(_USAGE)
        return 1

    dim = len(minmax) if minmax is not None else None
    all_runs: list[list[list[tuple[float, ...]]]] = []
    for name in files:
        try:
            runs = read_data(name)
        except InputError as exc:
            _error(str(exc))
            return 1
        if not runs:
            _error(f"{name}: no input data")
            return 1
        file_dim = len(runs[0][0])
        if dim is None:
            dim = file_dim
        elif file_dim != dim:
            _error(f"{name}: found {file_dim} columns, expected {dim}")
            return 1
        all_runs.append(runs)

    assert dim is not None
    if minmax is None:
        minmax = (-1,) * dim

    aliases = [f"f{k + 1}" for k in range(len(files))]
    for alias, name in zip(aliases, files):
        print(f"# {alias}: {name}")
    print()

    for alias, runs in zip(aliases, all_runs):
        sizes = ", ".join(str(size) for size in accumulate(len(run) for run in runs))
        print(f"# {alias}: {len(runs)} ({sizes})")

    signs = "".join("-" if s < 0 else "+" if s > 0 else "i" for s in minmax)
    print(f"# objectives ({dim}): {signs}")

    if check:
        failed = False
        for alias, runs in zip(aliases, all_runs):
            for n, run in enumerate(runs):
                position = _find_dominated_point(run, minmax)
                if position is not None:
                    print(
                        f"{PROG}: {alias}: set {n}: point {position} is dominated.",
                        file=sys.stderr,
                    )
                    failed = True
        if failed:
            _error("input must be a collection of nondominated sets.")
            return 1

    count = len(files)
    results = [[-1] * count for _ in range(count)]
    for k in range(count):
        for j in range(k + 1, count):
            results[k][j], results[j][k] = compare_runs(
                minmax, all_runs[k], all_runs[j]
            )

    nruns = [len(runs) for runs in all_runs]
    sys.stdout.write(format_results(aliases, nruns, results, percentages))
    return 0


if __name__ == "__main__":
    sys.exit(main())