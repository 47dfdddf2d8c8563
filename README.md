# iterkit

Lazy iterator adaptors and helpers for everyday Python code. Work through an
iterable once, in order, and keep memory use low while you group, chunk, merge,
deduplicate, combine and format what passes through it. The package uses only
the standard library.

## Installation

```
pip install iterkit
```

To run the test suite:

```
pip install "iterkit[test]"
pytest
```

## What is in the box

| Module | What it offers |
| --- | --- |
| `iterkit.adaptors` | `interleave`, `interleave_shortest`, `cartesian_product`, `batching`, `step`, `merge`, `merge_by`, `cons_tuples` and the `PutBack` iterator |
| `iterkit.filters` | `take_while_ref`, `while_some`, `tuple_combinations`, `filter_ok`, `filter_map_ok`, `positions`, `update` |
| `iterkit.coalesce` | `coalesce`, `dedup`, `dedup_by`, `dedup_with_count`, `dedup_by_with_count` |
| `iterkit.combinations` | `combinations`, `combinations_with_replacement` and the `Combinations` iterator |
| `iterkit.multi_product` | `multi_cartesian_product` and the `MultiProduct` iterator |
| `iterkit.duplicates` | `duplicates`, `duplicates_by` |
| `iterkit.groupby` | `group_by` and `chunks` (`GroupBy`, `Group`, `IntoChunks`, `Chunk`): lazy grouping that buffers only when needed |
| `iterkit.formatting` | `format_items`, `format_with` (`Format`, `FormatWith`): format the elements once, lazily, with a separator |
| `iterkit.either_or_both` | `EitherOrBoth` with its `Left`, `Right` and `Both` variants |
| `iterkit.results` | `Ok` and `Err` wrappers, `map_ok`, `map_into` |
| `iterkit.flatten_ok` | `flatten_ok` |
| `iterkit.exactly_one` | `exactly_one` and `ExactlyOneError` |
| `iterkit.extrema_set` | `min_set`, `max_set` and their `_by` / `_by_key` forms |
| `iterkit.group_map` | `into_group_map`, `into_group_map_by` |
| `iterkit.diff` | `diff_with`, reporting `FirstMismatch`, `Shorter` or `Longer` |
| `iterkit.free` | `fold`, `join`, `concat`, `maximum`, `minimum` |
| `iterkit.iris` | `parse_iris`, `parse_dataset`, `render_report`, `main` and the `Iris` and `ParseError` classes |

## A few examples

Join elements into a string:

```python
from iterkit.free import join

join([1, 2, 3], ", ")   # "1, 2, 3"
```

Pick values out of an `EitherOrBoth`, with fallbacks for the missing side:

```python
from iterkit.either_or_both import Both, Left, Right

Both("tree", 1).or_("stone", 5)   # ("tree", 1)
Left("tree").or_("stone", 5)      # ("tree", 5)
Right(1).or_("stone", 5)          # ("stone", 1)
```

All `k`-length combinations as lists, pulled lazily from the source:

```python
from iterkit.combinations import combinations

list(combinations("abc", 2))   # [['a', 'b'], ['a', 'c'], ['b', 'c']]
```

Group consecutive elements that share a key:

```python
from iterkit.groupby import group_by

for key, group in group_by([1, 3, 2, 4, 5], lambda x: x % 2):
    print(key, list(group))
# 1 [1, 3]
# 0 [2, 4]
# 1 [5]
```

Merge two sorted inputs into one sorted stream:

```python
from iterkit.adaptors import merge

list(merge([1, 3, 5], [2, 4]))   # [1, 2, 3, 4, 5]
```

Collapse runs of equal elements:

```python
from iterkit.coalesce import dedup, dedup_with_count

list(dedup([1, 1, 2, 2, 2, 3, 1]))              # [1, 2, 3, 1]
list(dedup_with_count([1, 1, 2, 2, 2, 3, 1]))   # [(2, 1), (3, 2), (1, 3), (1, 1)]
```

Require exactly one element:

```python
from iterkit.exactly_one import ExactlyOneError, exactly_one

exactly_one([42])   # 42
try:
    exactly_one([1, 2, 3])
except ExactlyOneError as error:
    list(error)     # [1, 2, 3]: the error yields every element again
```

## The iris report

The package carries a small command that parses the iris flower data set
(comma-separated lines of four measurements and a species name), groups the
flowers by species, gives each species a plot symbol (`+`, `o`, `x` in turn)
and draws a 30 by 30 text scatter plot for every pair of measurement columns:

```
iterkit-iris iris.data
```

Without a path the data is read from standard input. If a line cannot be
parsed, the command prints `Error parsing: ...` and exits with status 1. The
data file itself is not shipped with the package; bring your own.

The same pieces are available from Python through `iterkit.iris`:
`parse_iris` parses one line, `parse_dataset` parses a whole text,
`render_report` returns the report as a string (it raises `ValueError` when
there are no samples), and `main` runs the command.