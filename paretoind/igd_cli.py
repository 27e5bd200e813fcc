"""Command line tool reporting generational distance indicators.

Each input file holds one or more sets of points.  For every set the
tool prints one line with the selected indicators (GD, IGD, GD_p,
IGD_p, IGD+ and the averaged Hausdorff distance), measured against a
reference set given with ``--reference``.
"""

from __future__ import annotations

import getopt
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import IO, Optional

from paretoind.igd import avg_hausdorff_dist, gd, gd_p, igd, igd_p, igd_plus
from paretoind.io import STDIN_NAME, InputError, read_data, read_reference_set

PROG = "igd"
_VERSION = "1.0"

_MINMAX_CODES = {"+": 1, "-": -1, "0": 0, "i": 0}

Metric = Callable[[Sequence[int], list, list, int], float]


class _CommandError(Exception):
    """A failure that ends the command with an error message."""


@dataclass
class _Settings:
    verbose: bool = False
    exponent_p: int = 1
    gd: bool = False
    igd: bool = False
    gdp: bool = False
    igdp: bool = True
    igdplus: bool = False
    hausdorff: bool = False
    suffix: Optional[str] = None

    def metrics(self) -> list[tuple[str, Metric]]:
        """The enabled indicators, in output order, with their labels."""
        p = self.exponent_p
        table: list[tuple[bool, str, Metric]] = [
            (self.gd, "GD", lambda m, a, r, _p: gd(m, a, r)),
            (self.igd, "IGD", lambda m, a, r, _p: igd(m, a, r)),
            (self.gdp, f"GD_{p}", gd_p),
            (self.igdp, f"IGD_{p}", igd_p),
            (self.igdplus, "IGD+", lambda m, a, r, _p: igd_plus(m, a, r)),
            (self.hausdorff, "avg_Hausdorff", avg_hausdorff_dist),
        ]
        return [(label, func) for enabled, label, func in table if enabled]

    def usage(self) -> str:
        def mark(flag: bool) -> str:
            return "(default)" if flag else ""

        return f"""
Usage:
       {PROG} [OPTIONS] [FILES]
       {PROG} [OPTIONS] < [INPUT] > [OUTPUT]

Calculates the inverted generational distance (IGD) measure for the Pareto sets given as input

Options:
 -h, --help           print this summary and exit
 -V, --version        print version number and exit
 -v, --verbose        print some information (time, number of points, etc.)
 -q, --quiet          print as little as possible
     --gd             {mark(self.gd)} report classical GD
     --igd            {mark(self.igd)} report classical IGD
     --gd-p           {mark(self.gdp)} report GD_p (p=1 by default)
     --igd-p          {mark(self.igdp)} report IGD_p (p=1 by default)
     --igd-plus       {mark(self.igdplus)} report IGD+
     --hausdorff      {mark(self.hausdorff)} report avg Hausdorff distance = max (GD_p, IGD_p)
 -a, --all            compute everything
     --exponent-p=P   exponent that averages the distances
 -r, --reference FILE file that contains the reference set
 -o, --obj [+|-]...   specify whether each objective should be
                      minimised (-) or maximised (+) (default all minimised)
 -s, --suffix=STRING  Create an output file for each input file by appending
                      this suffix. This is ignored when reading from stdin.
                      If missing, output is sent to stdout.
"""


def _write_values(
    out: IO[str],
    settings: _Settings,
    minmax: Sequence[int],
    runs: list,
    reference: list,
) -> None:
    metrics = settings.metrics()
    for run in runs:
        values = (
            "%-16.15g" % func(minmax, run, reference, settings.exponent_p)
            for _, func in metrics
        )
        out.write("\t".join(values) + "\n")


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
    nobj = len(minmax)
    file_dim = len(runs[0][0])
    if file_dim != nobj:
        raise _CommandError(f"{name}: found {file_dim} columns, expected {nobj}")

    if settings.verbose:
        print(f"# file: {name}")
        labels = "\t".join(label for label, _ in settings.metrics())
        print(f"# metrics (Euclidean distance) {labels}")

    if name != STDIN_NAME and settings.suffix:
        outname = name + settings.suffix
        try:
            out = open(outname, "w", encoding="utf-8")
        except OSError as exc:
            raise _CommandError(f"{outname}: {exc.strerror}") from exc
        with out:
            _write_values(out, settings, minmax, runs, reference)
        if settings.verbose:
            print(f"# {name} -> {outname}", file=sys.stderr)
    else:
        _write_values(sys.stdout, settings, minmax, runs, reference)


def _error(message: str) -> None:
    print(f"{PROG}: error: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options, files = getopt.gnu_getopt(
            args,
            "hVvqar:s:o:",
            [
                "gd", "igd", "gd-p", "igd-p", "igd-plus", "hausdorff", "all",
                "exponent-p=", "help", "version", "verbose", "quiet",
                "reference=", "suffix=", "obj=",
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
        if opt == "--exponent-p":
            try:
                settings.exponent_p = int(value)
            except ValueError:
                settings.exponent_p = 0
            if settings.exponent_p < 1:
                _error(f"invalid argument '{value}' for --exponent-p")
                return 1
        elif opt in ("-a", "--all"):
            settings.gd = settings.igd = settings.gdp = True
            settings.igdp = settings.igdplus = settings.hausdorff = True
        elif opt == "--gd":
            settings.gd = True
        elif opt == "--igd":
            settings.igd = True
        elif opt == "--gd-p":
            settings.gdp = True
        elif opt == "--igd-p":
            settings.igdp = True
        elif opt == "--igd-plus":
            settings.igdplus = True
        elif opt == "--hausdorff":
            settings.hausdorff = True
        elif opt in ("-o", "--obj"):
            if any(char not in _MINMAX_CODES for char in value):
                print(f"{PROG}: invalid argument '{value}' for -o, --obj", file=sys.stderr)
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