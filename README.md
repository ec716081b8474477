# algokit

A library of classic algorithms and data structures in pure Python with no
runtime dependencies. It covers range queries, string matching, tree
algorithms and disjoint sets.

## Installation

```
pip install algokit
```

To run the test suite:

```
pip install "algokit[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.segment` | `Segment` and `SegmentChange`, the values and updates used by the segment trees (maximum, sum, largest gap between neighbours) |
| `algokit.basic_seg_tree` | `BasicSegTree`: point updates, range queries, binary search over prefixes |
| `algokit.seg_tree` | `SegTree`: lazy range add and range assign |
| `algokit.persistent_seg_tree` | `PersistentSegTree`: lazy range updates where every version stays readable |
| `algokit.persistent_array` | `PersistentArray`: an array where every version stays readable |
| `algokit.seg_tree_beats` | `SegTreeBeats`, `BeatsSegment`, `BeatsChange`: range chmax, range add, range assign, with min, max and sum queries |
| `algokit.fenwick` | `FenwickTree`: prefix sums, point updates, order statistics |
| `algokit.search_buckets` | `SearchBuckets`: count the values below a threshold in a range, with point updates |
| `algokit.kmp` | `compute_failure_function`, `find_matches` |
| `algokit.z_algorithm` | `z_algorithm`, `find_occurrences` |
| `algokit.aho_corasick` | `AhoCorasick`: matching many patterns at once |
| `algokit.suffix_array` | `SuffixArray`, `SparseTable`: suffix array, LCP array, O(1) comparison of suffixes |
| `algokit.edit_distance` | `edit_distance`, `edit_distance_table`, `construct_edit_sequence` |
| `algokit.trie` | `Trie`: counts how many stored words are prefixes of a string |
| `algokit.centroid` | `CentroidDecomposition`, `count_paths_by_subtraction`, `count_paths_by_prefixes` |
| `algokit.tree_coloring` | `count_colorings`: colourings of a tree with no two adjacent black nodes |
| `algokit.tree_dp` | `max_weight_subset`, `count_connected_black` |
| `algokit.union_find` | `UnionFind`, `BipartiteUnionFind`, `Kruskal` |

Indices are 0-based and ranges are half-open, `[a, b)`, unless stated
otherwise. An invalid index or range raises an exception. `UnionFind` and
`BipartiteUnionFind` created with size `n` accept elements `0..n`, both ends
included.

## Examples

### Range queries

```python
from algokit.segment import Segment, SegmentChange
from algokit.seg_tree import SegTree

tree = SegTree(5)
tree.build([Segment.of(v) for v in [3, 1, 4, 1, 5]])
tree.update(1, 4, SegmentChange(to_add=2))      # add 2 to positions 1..3
result = tree.query(0, 5)
print(result.maximum, result.sum)                # 6 20
```

### Fenwick tree

```python
from algokit.fenwick import FenwickTree

fenwick = FenwickTree(8)
fenwick.build([1, 0, 2, 0, 1, 0, 0, 3])
print(fenwick.query(4))              # sum of [0, 4) -> 3
print(fenwick.query_range(2, 8))     # 6
print(fenwick.find_last_prefix(2))   # largest p with prefix sum <= 2 -> 2
```

### Persistent structures

```python
from algokit.persistent_array import PersistentArray

array = PersistentArray([0, 0, 0])
v1 = array.update(PersistentArray.ROOT, 2, 7)
print(array.get(PersistentArray.ROOT, 2), array.get(v1, 2))   # 0 7
```

### Strings

```python
from algokit.kmp import compute_failure_function, find_matches
from algokit.aho_corasick import AhoCorasick
from algokit.suffix_array import SuffixArray
from algokit.edit_distance import edit_distance

print(find_matches("aba", "ababa", compute_failure_function("aba")))   # [0, 2]

automaton = AhoCorasick(["he", "she", "hers"])
print(automaton.count_matches("ushers"))      # [1, 1, 1]

sa = SuffixArray("banana", True)
print(sa.distinct_substrings())               # 15

print(edit_distance("kitten", "sitting"))      # 3
```

### Disjoint sets and spanning trees

```python
from algokit.union_find import Kruskal

mst = Kruskal(3)
mst.add_edge(0, 1, 5)
mst.add_edge(1, 2, 1)
mst.add_edge(0, 2, 2)
print(mst.solve())                    # 3
print(mst.in_tree)                    # [False, True, True]
```

### Trees

```python
from algokit.centroid import count_paths_by_subtraction
from algokit.tree_coloring import count_colorings
from algokit.tree_dp import count_connected_black, max_weight_subset

edges = [(0, 1, 1), (1, 2, 2), (1, 3, 3)]
print(count_paths_by_subtraction(4, edges, 3))   # paths with weight <= 3 -> 4

print(count_colorings(3, [(0, 1), (1, 2)]))      # 5

print(count_connected_black(3, [(0, 1), (1, 2)], 10**9 + 7))   # [3, 4, 3]

weights = [1, 2, 3, 4, 5]
tree_edges = [(0, 1), (1, 2), (2, 3), (2, 4)]
print(max_weight_subset(weights, tree_edges, 1))   # 11
```

## What is not included

The package is a library only: it has no command-line program. It does not
provide shortest-path searches (breadth-first or weighted) or a 2-SAT solver;
graph support is limited to disjoint sets and minimum spanning forests in
`algokit.union_find`, and the tree algorithms above.