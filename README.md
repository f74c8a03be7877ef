# cnfcache

Building blocks for exact model counters and knowledge compilers that work
on CNF formulas held in memory.

## Modules

- `cnfcache.literals`: integer literals. `mk_lit(var, negative)`,
  `lit_var`, `lit_sign`, `negate`, and conversion to and from signed,
  1-based DIMACS integers with `from_dimacs` and `to_dimacs`. Variable `v`
  (0-based) has the positive literal `2 * v` and the negative literal
  `2 * v + 1`.
- `cnfcache.occurrence`: `CnfOccurrenceManager` holds the clauses, the
  current assignment (`values[var]` is `True`, `False` or `None`) and
  per-literal occurrence lists. `compute_connected_component(set_of_var)`
  splits the unassigned variables into connected components and returns a
  `ComponentSplit` (`components`, `free_vars`, `not_free_vars`,
  `nb_component`). It also offers clause counts per literal or variable,
  binary-clause counts, a stack of current clause sets
  (`update_current_clause_set`, `pop_previous_clause_set`,
  `current_clauses`) and the `ModeStore` enum (`ALL`, `NT`, `NB`).
- `cnfcache.dynamic_occurrence`: `DynamicOccurrenceManager` updates the
  occurrence lists, satisfied/falsified counters and watched literals as
  literals are assigned with `pre_update(lits)`. `post_update(lits)` undoes
  such a call; undo calls must be made with the same lists, in reverse order.
- `cnfcache.greedy_occurrence`: `GreedyOccurrenceManager.initialize(set_of_var, units)`
  rebuilds the occurrence lists of a set of variables from scratch under the
  unit literals `units`.
- `cnfcache.formula_manager`: `FormulaManager` counts the satisfied and
  falsified literals of each clause through `assign_value` and
  `unassign_value`. `check(current_value)` raises `ValueError` when the
  counters disagree with an assignment.
- `cnfcache.bucket_manager`: `BucketManager(occ_manager, strategy_cache=0, mode=ModeStore.NT)`
  collects the residual formula of a component without duplicate clauses
  (`collect_distrib`). `store_formula(component)` encodes that formula as a
  compact byte string inside a `CacheBucket`. `bytes_to_encode(value)` gives
  the width (1, 2 or 4 bytes) used for a value.
- `cnfcache.cache_bucket`: `CacheBucket` (encoded `data`, a `DataInfo`
  `header` and an attached `value`) with `set`, `lock`, `same_header` and a
  text dump from `describe()`. `DataInfo` packs the sizes of the encoding
  and keeps a usage counter and a saturating dirty flag.
- `cnfcache.hitting_set`: `hitting_set(clauses, score)` picks literals,
  guided by `score(var)`, so that every clause contains one of them. It then
  drops the ones that are not needed. An empty clause raises `ValueError`.
- `cnfcache.options`: `Options`, a dataclass of run-time settings, whose
  `describe()` returns a summary as comment lines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cnfcache.bucket_manager import BucketManager
from cnfcache.dynamic_occurrence import DynamicOccurrenceManager
from cnfcache.literals import from_dimacs
from cnfcache.occurrence import ModeStore

clauses = [[from_dimacs(x) for x in clause]
           for clause in ([1, 2], [-2, 3], [3, 4])]
manager = DynamicOccurrenceManager(clauses, 4)

split = manager.compute_connected_component(range(4))
print(split.components)          # [[0, 1, 2, 3]]

manager.pre_update([from_dimacs(1)])   # variable 1 becomes true
split = manager.compute_connected_component(range(4))
print(split.components)          # [[1, 2, 3]]

bucket = BucketManager(manager, mode=ModeStore.ALL).store_formula(split.components[0])
bucket.lock(42)                  # attach a value to the encoded component
print(bucket.describe())

manager.post_update([from_dimacs(1)])  # undo the assignment
```

Two buckets encode the same residual formula when `same_header` is true
and their `data` bytes are equal.

## What it does not do

- It does not read files. Clauses are passed in as lists of integer
  literals. Use `from_dimacs` to convert DIMACS numbers; reading a DIMACS or
  weight file is left to the caller.
- It keeps no cache table. `store_formula` builds the key of a component,
  but storing buckets, looking them up and evicting them is up to the
  caller.
- It has no command-line program.