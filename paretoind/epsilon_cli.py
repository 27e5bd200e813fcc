"""Command line tool reporting the epsilon indicator of approximation sets.

Each input file holds one or more sets of points.  For every set the
tool prints its additive (default) or multiplicative epsilon value
with respect to a reference set given with ``--reference``.
"""

from __future__ import annotations

import getopt
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, Optional

from paretoind.epsilon import EpsilonError, epsilon_additive, epsilon_mult
from paretoind.io import STDIN_NAME, InputError, read_data, read_reference_set

PROG = "epsilon"
_VERSION = "1.0"

_MINMAX_CODES = {"+": 1, "-": -1, "0": 0, "i": 0}


class _CommandError(Exception):
    """A failure that ends the command with an error message."""


@dataclass
class _Settings:
    verbose: bool = False
    additive: bool = True
    suffix: Optional[str] = None

    def usage(self) -> str:
        def mark(flag: bool) -> str:
            return "(default)" if flag else ""

        return f"""
Usage:
       {PROG} [OPTIONS] [FILES]
       {PROG} [OPTIONS] < [INPUT] > [OUTPUT]

Calculates the epsilon measure for the Pareto sets given as input

Options:
 -h, --help           give  this summary and exit.
 -V, --version        print version number and exit.
 -v, --verbose        print some information (time, number of points, etc.)
 -q, --quiet          print as little as possible
 -a, --additive       epsilon additive value {mark(self.additive)}
 -m, --multiplicative epsilon multiplicative value {mark(not self.additive)}
 -r, --reference FILE file that contains the reference set
 -o, --obj [+|-]...   specify whether each objective should be
                      minimised (-) or maximised (+) (default all minimised)
 -s, --suffix=STRING  Create an output file for each input file by appending
                      this suffix. This is ignored when reading from stdin.
                      If missing, output is sent to stdout.
"""


def _write_values(
    out: IO[str],
    name: str,
    settings: _Settings,
    minmax: Sequence[int],
    runs: list,
    reference: list,
) -> None:
    indicator = epsilon_additive if settings.additive else epsilon_mult
    threshold = 0.0 if settings.additive else 1.0
    for run in runs:
        try:
            value = indicator(minmax, run, reference)
        except EpsilonError as exc:
            raise _CommandError(str(exc)) from exc
        out.write("%-16.15g\n" % value)
        if value < threshold:
            raise _CommandError(
                f"{name}: some points are not dominated by the reference set"
            )
        if settings.verbose:
            out.write("# Time: %f seconds\n" % 0.0)


def _do_file(
    filename: Optional[str],
    reference: list,
    minmax: Sequence[int],
    settings: _Settings,
) -> None:
    try:
        runs = read_data(filename)
    except InputError as exc:
        raise _CommandError(str(exc)) from exc
    name = STDIN_NAME if filename is None or filename == "-" else filename
    if not runs:
        raise _CommandError(f"{name}: no input data")
    file_dim = len(runs[0][0])
    if file_dim != len(minmax):
        raise _CommandError(
            f"{name}: found {file_dim} columns, expected {len(minmax)}"
        )

    if settings.verbose:
        print(f"# file: {name}")

    if name != STDIN_NAME and settings.suffix:
        outname = name + settings.suffix
        try:
            out = open(outname, "w", encoding="utf-8")
        except OSError as exc:
            raise _CommandError(f"{outname}: {exc.strerror}") from exc
        with out:
            _write_values(out, name, settings, minmax, runs, reference)
        if settings.verbose:
            print(f"# {name} -> {outname}", file=sys.stderr)
    else:
        _write_values(sys.stdout, name, settings, minmax, runs, reference)


def _error(message: str) -> None:
    print(f"{PROG}: error: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options, files = getopt.gnu_getopt(
            args,
            "hVvqamr:s:o:",
            [
                "help", "version", "verbose", "quiet", "additive",
                "multiplicative", "reference=", "suffix=", "obj=",
            ],
        )
    except getopt.GetoptError as exc:
        print(f"{PROG}: {exc.msg}", file=sys.stderr)
        print(f"Try `{PROG} --help' for more information.", file=sys.stderr)
        return 1

    settings = _Settings()
    minmax: Optional[tuple[int, ...]] = None
    reference: Optional[list] = None

    for opt, value in options:
        if opt in ("-h", "--help"):
            print(settings.usage())
            return 0
        if opt in ("-V", "--version"):
            print(f"{PROG} version {_VERSION}\n")
            return 0
        if opt in ("-a", "--additive"):
            settings.additive = True
        elif opt in ("-m", "--multiplicative"):
            settings.additive = False
        elif opt in ("-o", "--obj"):
            if any(char not in _MINMAX_CODES for char in value):
                print(
                    f"{PROG}: invalid argument '{value}' for -o, --obj",
                    file=sys.stderr,
                )
                return 1
            minmax = tuple(_MINMAX_CODES[char] for char in value)
            if not any(minmax):
                print(
                    f"{PROG}: warning: all objectives ignored because of --obj={value}",
                    file=sys.stderr,
                )
                return 0
        elif opt in ("-r", "--reference"):
            try:
                reference = read_reference_set(value)
            except InputError:
                _error(f"invalid reference set '{value}'")
                return 1
        elif opt in ("-s", "--suffix"):
            settings.suffix = value
        elif opt in ("-q", "--quiet"):
            settings.verbose = False
        elif opt in ("-v", "--verbose"):
            settings.verbose = True

    if settings.verbose:
        kind = "Additive" if settings.additive else "Multiplicative"
        print(f"# {kind} epsilon indicator", file=sys.stderr)

    if reference is None:
        _error("a reference set must be provided (--reference)")
        return 1

    ref_dim = len(reference[0])
    if minmax is None:
        minmax = (-1,) * ref_dim
    elif len(minmax) != ref_dim:
        _error(
            f"reference set has {ref_dim} objectives,"
            f" but --obj gives {len(minmax)}"
        )
        return 1

    try:
        for filename in files or [None]:
            _do_file(filename, reference, minmax, settings)
    except _CommandError as exc:
        _error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())