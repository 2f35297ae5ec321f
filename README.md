# algokit

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

The functions return their results rather than printing them: the sorting
functions return a new list and leave their input untouched, the graph
traversals return the visiting order, and so on.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `count_bubble_swaps` (sorted list and number of swaps), `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `quick_sort_hoare`, `count_sort` (non-negative integers only) |
| `algokit.searching` | `binary_search` on an ascending sequence and `linear_search`; both return a 1-based position or `None` |
| `algokit.matrix` | `determinant` of a non-empty square matrix by cofactor expansion |
| `algokit.floodfill` | `flood_fill(screen, x, y, new_color)`: a recoloured copy of the grid, four-directional |
| `algokit.bits` | `longest_subsequence(bits, k)`: length of the longest subsequence of a binary string whose value is at most `k` |
| `algokit.convert` | `feet_to_millimeters` and the `algokit-convert` command |
| `algokit.traversal` | `build_undirected`, `bfs`, `dfs`, `bfs_all`, `dfs_all` on adjacency lists, `bfs_matrix` on an adjacency matrix |
| `algokit.dijkstra` | `dijkstra(adjacency, source)`: distances to every node, `math.inf` where unreachable |
| `algokit.tarjan` | `DirectedGraph` with `add_edge` and `strongly_connected_components()` |
| `algokit.star` | `is_star` check on an adjacency matrix |
| `algokit.kruskal` | `Edge` and `kruskal(node_count, edges)`: minimum spanning forest, lightest edge first |
| `algokit.open_addressing` | `OpenAddressingTable` with `Probing.LINEAR`, `Probing.QUADRATIC` or `Probing.DOUBLE`; deleting a key rehashes the rest |
| `algokit.chaining` | `ChainedHashTable` whose buckets keep their keys sorted |
| `algokit.slide_puzzle` | sliding-tile puzzle solver: `solve`, `validate_grid`, `grid_to_state`, `is_solved`, `neighbours`, `format_state`, and the `algokit-slide-puzzle` command |

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Examples

```python
from algokit.sorting import quick_sort, count_bubble_swaps
from algokit.searching import binary_search

quick_sort([8, 3, 5, 2, 0])               # [0, 2, 3, 5, 8]
count_bubble_swaps([4, 3, 2, 1])          # ([1, 2, 3, 4], 6)
binary_search([5, 8, 10, 13, 21], 13)     # 4 (1-based)
```

```python
from algokit.matrix import determinant
from algokit.star import is_star

determinant([[1, 2], [3, 4]])          # -2

is_star([[0, 1, 1, 1],
         [1, 0, 0, 0],
         [1, 0, 0, 0],
         [1, 0, 0, 0]])                # True
```

```python
from algokit.tarjan import DirectedGraph

graph = DirectedGraph(5)
for v, w in [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]:
    graph.add_edge(v, w)

for component in graph.strongly_connected_components():
    print(component)
```

Components come out in the order they are completed; within each one the
root vertex is listed last.

```python
from algokit.open_addressing import OpenAddressingTable, Probing

table = OpenAddressingTable(Probing.LINEAR, 10, 7)
for key in (3, 10, 93, 13, 65, 6):
    table.insert(key)

93 in table              # True
table.delete(93)         # raises KeyError for a key that is not stored
print(table.slots())     # None marks an empty slot
```

`insert` raises `OverflowError` when no free slot is reachable along the
key's probe sequence.

```python
from algokit.slide_puzzle import solve

solution = solve([[1, 2, 3], [4, 5, 6], [0, 7, 8]])
solution.moves                          # 2
[step.moved for step in solution.steps] # [None, 7, 8]
```

`solve` returns `None` for a grid that cannot be solved and raises
`InvalidGridError` (a `ValueError`) for a grid that is not a valid puzzle.

## Command-line tools

Convert a whole number of feet to millimetres (asks for the number when it
is not given):

```
algokit-convert 12
```

Solve a sliding-tile puzzle of at most nine cells, holding the numbers 1 to
n-1 once each and a 0 for the empty space. Rows, columns and cells (in
row-major order) may be given on the command line; whatever is missing is
asked for. The tool prints the shortest number of moves and each grid along
the way, or "Not Possible":

```
algokit-slide-puzzle --rows 2 --columns 2 1 2 0 3
```

## Limits

- The sliding-puzzle solver handles grids of at most nine cells, since states
  are stored as strings of single digits.
- `longest_subsequence` only counts ones below bit position 31, so very large
  `k` values behave as with a 32-bit signed bound.