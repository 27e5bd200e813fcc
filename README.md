# paretoind

Quality indicators for comparing approximation sets produced by
multi-objective optimisers. Pure Python, no dependencies.

## What it computes

- **Hypervolume** (`paretoind.hv.hypervolume`): the volume dominated by a
  set of points and bounded by a reference point, in any number of
  objectives, all minimised. Points that do not strictly dominate the
  reference point contribute nothing.
- **Hypervolume contributions** (`paretoind.contrib.hv_contributions`): how
  much hypervolume is lost when each point is removed. Values below the
  square root of machine epsilon are reported as zero.
- **Epsilon indicators** (`paretoind.epsilon`): `epsilon_additive`,
  `epsilon_mult` (which raises `EpsilonError` for coordinates that are not
  strictly positive) and `epsilon_additive_ind`, a three-way comparison of
  two sets returning -1, 0 or 1.
- **Generational distances** (`paretoind.igd`): `gd`, `igd`, `gd_p`, `igd_p`,
  `igd_plus` and `avg_hausdorff_dist`. An empty first set gives infinity.
- **Set dominance** (`paretoind.dominance`): `dominance` of two points,
  `set_dominates`, `pareto_better` and `compare_runs`, which counts how often
  the sets of one collection are better than those of another.

Indicator functions take a direction vector `minmax` with one entry per
objective: -1 minimised, 1 maximised, 0 ignored.
`paretoind.io.parse_minmax` builds it from a string such as `"-+"`
(`-` minimised, `+` maximised, `0` or `i` ignored).

The module `paretoind.avltree` provides the balanced tree, threaded in
sorted order, that the three-objective hypervolume sweep uses.

## Input format

Data files hold one point per line, coordinates separated by whitespace.
Lines starting with `#` are comments. A blank line ends one approximation
set and starts the next. `paretoind.io.read_data` reads such a file from a
path, an open text stream, or standard input (`None` or `"-"`), returning a
list of sets; it raises `paretoind.io.InputError` when a file cannot be
opened, a value is not a number, or the number of columns changes.
`paretoind.io.read_reference_set` reads a whole file as one set, and
`paretoind.io.write_sets` and `write_sets_filtered` write sets back out.

## Library use

```python
from paretoind.hv import hypervolume
from paretoind.epsilon import epsilon_additive
from paretoind.igd import igd_plus

points = [(1.0, 3.0), (2.0, 2.0), (3.0, 1.0)]
reference_set = [(1.0, 2.0), (2.0, 1.0)]
minmax = [-1, -1]

hypervolume(points, ref=(4.0, 4.0))               # 6.0
epsilon_additive(minmax, points, reference_set)   # 1.0
igd_plus(minmax, points, reference_set)
```

## Command-line tools

Three commands are installed with the package. Each reads standard input
when no file is given, takes `--obj` to set the direction of each objective
(all minimised by default), and prints its options with `--help`.

Additive (default) or multiplicative epsilon of every set in each file
against a reference set; the command fails if a set is not dominated by the
reference set:

    epsilon --reference ref.txt run1.txt run2.txt
    epsilon --multiplicative --reference ref.txt run1.txt

Generational distances, IGD_p by default, or every indicator with `--all`;
`--exponent-p=P` sets the exponent of GD_p, IGD_p and the Hausdorff
distance:

    igd --reference ref.txt --all run1.txt
    igd --reference ref.txt --igd-plus --obj=-+ run1.txt

Pairwise dominance counts between the sets of two or more files, with ranks;
each set is first checked to hold only nondominated points unless
`--no-check` is given:

    dominatedsets --percentages alg1.txt alg2.txt alg3.txt

With `--suffix=STRING`, `epsilon` and `igd` write the results for each input
file to a file named after it with the suffix appended.

## What it does not do

There is no command for the hypervolume or for hypervolume contributions;
those are available only as library functions. The package does not compute
attainment surfaces and draws no plots. In verbose mode `epsilon` prints a
time line for each set, but it does not measure time and always reports
0 seconds.

## Tests

    pip install -e ".[test]"
    pytest