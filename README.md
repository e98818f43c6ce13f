# cpkit

Classic algorithms and data structures in plain Python. The package
needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Data structures

- `cpkit.trie.BinaryTrie(bits=31)` is a multiset of non-negative integers stored bit by bit.
  - It offers `insert`, `len()`, `max_xor(x)` and `min_xor(x)`.
  - `count_less(x, k)` counts the stored values `v` with `v ^ x < k`.
  - `max_xor` and `min_xor` raise `ValueError` on an empty trie.
- `cpkit.xor_basis.XorBasis(modulus=1_000_000_007)` is a reduced linear basis over GF(2).
  - It offers `add`, `rank`, `clear`, `possible`, `max_xor` and `min_xor`.
  - `count_subsets(x)` gives the number of subsets that xor to `x`, modulo the modulus.
  - `sum_of_all()` gives the sum of the xors of all subsets.
  - `kth(k)` gives the k-th smallest reachable xor, counting from 1. It raises `IndexError` when `k` is out of range.
- `cpkit.persistent_segment.PersistentSegmentTree(values)` keeps range sums.
  - `update(version, pos, delta)` adds `delta` at `pos` and returns the number of the new version.
  - `query(version, left, right)` sums the inclusive range, counting positions from 0.
  - `versions()` gives the number of versions.
- `cpkit.lca.LowestCommonAncestor(n, edges, root=0)` answers lowest common ancestor queries by binary lifting.
  - It works on a tree with nodes `0..n-1` and offers `lca(u, v)` and `depth(u)`.
  - It raises `ValueError` when the edges do not form a tree.
- `cpkit.mo.mo_pair_counts(values, queries, block_size=350)` answers offline queries over inclusive ranges, counting from 0, in Mo's order.
  - Each answer is the sum of `count // 2` over the distinct values in the range.
- `cpkit.rollback_dsu.RollbackDSU(n)` is a union-find structure without path compression.
  - `find(x)` returns `(root, parity)`.
  - `unite(u, v)` returns `True` when the new edge closes an odd cycle.
  - `undo()` reverts the last recorded union, and `components()` gives the number of components.
- `cpkit.sos.subset_sums(values)` gives, for every mask, the sum of the values over all of its submasks. The length of `values` must be a power of two.
- `cpkit.hashing` holds:
  - `splitmix64(x)`;
  - `SeededHasher(seed=None)`, a salted integer hash;
  - `power(base, exponent, mod)`;
  - `DoubleHash(text)`, whose `get_hash(left, right)` and `full_hash()` hash substrings under two moduli, counting positions from 1.

### Graphs and flows

- `cpkit.dinic.Dinic(n, source, sink)` computes a maximum flow.
  - An edge from `add_edge(v, u, cap, directed=False)` is undirected unless `directed=True` is given.
  - `max_flow()` runs the algorithm.
  - `min_cut()` returns a list of booleans that marks the source side.
- `cpkit.edmonds_karp.EdmondsKarp(n, source, sink)` computes a maximum flow on directed edges.
  - Edges are added with `add_edge(u, v, cap)`.
  - `augment()` pushes flow along one shortest path.
  - It also has `max_flow()` and `min_cut()`.
- `cpkit.mcmf.min_cost_flow(n, edges, k, source, sink)` gives the minimum cost of sending `k` units through a list of `Edge(start, end, capacity, cost)` values.
  - It raises `ValueError` when fewer than `k` units can reach the sink.
  - A later edge between the same ordered pair of nodes replaces an earlier one.
- `cpkit.graphs` holds three algorithms:
  - `find_negative_cycle(n, edges, start)` uses Bellman–Ford over `WeightedEdge` values. It returns the cycle's nodes with the first node repeated at the end, or `None` if there is no negative cycle.
  - `euler_path(n, edges)` works on a directed graph and returns an `EulerPath` with `nodes` and `edges`. It raises `ValueError` when no such path exists.
  - `strongly_connected_components(n, edges)` uses Kosaraju's algorithm.

### Strings

- `cpkit.aho_corasick.AhoCorasick` is an automaton over the letters `a`–`z`.
  - It offers `add(pattern, index)`, `link(v)`, `go(v, ch)` and `count_matches(text)`.
  - `count_occurrences(text, patterns)` is the shortcut for the common case.
- `cpkit.manacher.Manacher(s)` finds palindromes around every centre.
  - It holds the `odd` and `even` radii.
  - `is_palindrome(left, right)` checks an inclusive range in constant time, counting positions from 0.
  - `palindrome_lengths()` gives the longest palindrome at each of the `2n - 1` centres.
- `cpkit.eertree.PalindromicTree` is a palindromic tree.
  - `add(ch)` returns `True` when a new distinct palindrome appears.
  - `suffix_palindrome_count()` gives the number of palindromic suffixes of the text so far.
  - `count_palindromic_substrings(text)` counts palindromic substrings by position.
- `cpkit.suffix_array.SuffixArray(s)` builds a suffix array by prefix doubling. It exposes `sa`, `rank` and `lcp`.

### Geometry

All geometry is 2D and uses floating point with a tolerance of `EPS = 1e-9`.

- `cpkit.geo_point` has `Point` together with:
  - `sign`, `dot`, `cross`, `cross2` and `orientation`;
  - `dist` and `dist2`;
  - the rotations and the angle helpers;
  - `is_point_in_angle`;
  - `polar_sort(points, origin=None)`.
- `cpkit.geo_line` has `Line`, built by `from_points`, `from_direction` or `from_coefficients`. It also has:
  - projections and reflections;
  - distances from a point to a line, segment or ray;
  - intersections of lines, segments and rays.

  The intersection functions return `None` when there is no intersection.
- `cpkit.geo_circle` has `Circle`, with the `circumcircle` and `incircle` constructors. It also has:
  - relations between a circle and a point, a line or another circle;
  - intersections of circles with lines and with each other;
  - `circles_through_points` and `circles_tangent_to_line`;
  - tangent lines;
  - `circle_circle_area`;
  - `minimum_enclosing_circle`;
  - `maximum_circle_cover(points, r)`, which returns the count and the circle.
- `cpkit.geo_polygon` works on polygons:
  - `area`, `perimeter`, `centroid` and `is_ccw`;
  - `convex_hull` and `is_convex`;
  - tests for whether a point lies in a triangle, a convex polygon or a general polygon, and `winding_number`;
  - `diameter`, `width` and `minimum_enclosing_rectangle`;
  - tangents from a point to a polygon;
  - distances between a point and a polygon and between two polygons;
  - `reorder_polygon` and `geometric_median`;
  - `polygon_circle_intersection`.

## Examples

```python
from cpkit.dinic import Dinic

net = Dinic(4, 0, 3)
net.add_edge(0, 1, 3, True)
net.add_edge(1, 3, 2, True)
net.add_edge(0, 2, 1, True)
net.add_edge(2, 3, 5, True)
print(net.max_flow())  # 3
```

```python
from cpkit.aho_corasick import count_occurrences

print(count_occurrences("ababa", ["aba", "b"]))  # [2, 2]
```

```python
from cpkit.geo_point import Point
from cpkit.geo_polygon import area, convex_hull

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1)]
print(area(convex_hull(square)))  # 4.0
```

## What it does not do

- cpkit is a library only. It has no command-line program and does not read problem input from standard input.
- The geometry modules have no half-plane intersection. For that reason they also have no largest inscribed circle of a polygon and no distance from a polygon to a line.