# algobook

Classic algorithms written as small, dependency-free Python functions:
binary trees, binary search trees, simple graph and grid searches, and a
few recursion and backtracking exercises.

## Installation

```
pip install algobook
```

To run the test suite, install the test extra and run pytest:

```
pip install "algobook[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algobook.tree` | `TreeNode` (compared and hashed by identity), plus `serialize` / `deserialize` for a level-order text form |
| `algobook.traversal` | `preorder`, `inorder`, `postorder`, `level_order`, the stack-based `preorder_iterative`, `inorder_iterative`, `postorder_two_stacks`, `postorder_one_stack`, and `pre_in_post`, which returns all three depth-first orders from one walk |
| `algobook.properties` | `max_depth`, `is_balanced`, `is_balanced_naive`, `diameter`, `max_path_sum`, `is_same_tree`, `is_symmetric` |
| `algobook.views` | `zigzag_level_order`, `boundary`, `vertical_traversal`, `top_view`, `bottom_view`, `right_view`, `left_view` |
| `algobook.construct` | `build_from_preorder_inorder`, `build_from_inorder_postorder` |
| `algobook.paths` | `path_to`, `leaf_paths`, `lowest_common_ancestor`, `distance_k`, `burn_time` |
| `algobook.metrics` | `max_width`, `has_children_sum_property`, `count_nodes`, `count_complete_nodes` |
| `algobook.bst` | `search`, `min_value`, `max_value`, `ceil`, `floor`, `insert`, `delete`, `kth_smallest`, `is_valid_bst`, `lca_bst`, `bst_from_preorder`, `find_target`, `recover`, `largest_bst_size`, and the `BSTIterator` class |
| `algobook.graph` | `dfs_order`, `bfs_order`, `count_provinces`, `count_islands`, `flood_fill`, `oranges_rotting` |
| `algobook.recursion` | `repeat_name`, `count_up`, `count_down`, `count_up_backtrack`, `count_down_backtrack`, `combination_sum`, `combination_sum2`, and the command-line entry `main` |

## Trees

Trees are built from `TreeNode` objects. The quickest way to get one is
`deserialize`. It reads values in level order, each followed by a comma, and
uses `#` for a missing child:

```python
from algobook.tree import deserialize, serialize
from algobook.traversal import preorder, inorder, level_order
from algobook.properties import max_depth

root = deserialize("1,2,3,#,#,4,5,#,#,#,#,")
#       1
#      / \
#     2   3
#        / \
#       4   5

preorder(root)      # [1, 2, 3, 4, 5]
inorder(root)       # [2, 1, 4, 3, 5]
level_order(root)   # [[1], [2, 3], [4, 5]]
max_depth(root)     # 3

serialize(root)     # "1,2,3,#,#,4,5,#,#,#,#,"
```

An empty tree serializes to the empty string, and the empty string
deserializes to `None`. `deserialize` raises `ValueError` for a truncated
encoding or a value that is not a whole number.

## Binary search trees

```python
from algobook.bst import BSTIterator, bst_from_preorder, insert, kth_smallest

root = bst_from_preorder([8, 5, 1, 7, 10, 12])
root = insert(root, 6)
kth_smallest(root, 3)                    # 6
list(BSTIterator(root))                  # [1, 5, 6, 7, 8, 10, 12]
list(BSTIterator(root, reverse=True))    # [12, 10, 8, 7, 6, 5, 1]
```

`ceil` and `floor` return `None` when no value qualifies; `min_value`,
`max_value` and `kth_smallest` raise `ValueError` when there is nothing to
return. `recover` repairs a tree in place in which two values were swapped.

## Graphs and grids

```python
from algobook.graph import bfs_order, count_islands, oranges_rotting

bfs_order([[1, 2], [0], [0]])                        # [0, 1, 2]
count_islands([["1", "0"], ["0", "1"]])              # 2
count_islands([["1", "0"], ["0", "1"]], True)        # 1
oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]])   # 4
```

`dfs_order` and `bfs_order` start at vertex 0 and raise `ValueError` for a
graph with no vertices. `flood_fill` and `oranges_rotting` leave their input
unchanged and work on a copy.

## Recursion and backtracking

```python
from algobook.recursion import combination_sum, combination_sum2, count_down

count_down(3)                                # [3, 2, 1]
combination_sum([2, 3, 6, 7], 7)             # [[2, 2, 3], [7]]
combination_sum2([10, 1, 2, 7, 6, 1, 5], 8)  # [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]
```

## Command line

The package installs one command, `algobook`, which prints simple counted
sequences, one value per line:

```
algobook name Ada 3          # prints Ada three times
algobook up 5                # 1 to 5
algobook down 5              # 5 to 1
algobook up-backtrack 5      # 1 to 5, emitted while backtracking
algobook down-backtrack 5    # 5 to 1, emitted while backtracking
```

Counts must be whole numbers that are not negative. The command covers only
these sequences; the tree, graph and combination functions are used from
Python.