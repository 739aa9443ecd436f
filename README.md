# algolab

A library of classic algorithms and data structures, a handful of small
everyday calculators, and two interactive command-line tools. It needs
nothing beyond the Python standard library.

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

| Module | Contents |
| --- | --- |
| `algolab.searching` | `linear_search`, `binary_search`, `binary_search_recursive`, `jump_search`, `search_rotated` |
| `algolab.arrays` | `max_subarray_sum`, `can_jump`, `trapped_water`, `count_subarrays_at_most_k_distinct`, `count_subarrays_with_sum_positive`, `count_subarrays_with_sum`, `count_good_pairs`, `allocate_books` |
| `algolab.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `merge_sorted`, `quick_sort`, `heapify`, `heap_sort`, `radix_sort`, `bucket_sort`, `shell_sort` |
| `algolab.graphs` | `Graph` (`add_edge`, `neighbours`, `bfs`, `dfs`), `Edge`, `INF`, `floyd_warshall`, `kruskal_mst` |
| `algolab.backtracking` | `count_queen_placements`, `solve_n_queens`, `knight_tour`, `subset_sum`, `hanoi_moves`, `gray_code`, `swap_permutations`, `expand_wildcards`, `count_with_consecutive_ones` |
| `algolab.numbers` | `primes_up_to`, `is_prime`, `factorial`, `fibonacci`, `armstrong_numbers`, `integer_to_roman`, `binary_to_decimal`, `decimal_to_binary`, `decimal_to_octal`, `count_set_bits`, `is_power_of_two`, `reverse_number`, `is_palindrome_number`, `digit_sum`, `factorial_series_sum`, `fast_inverse_sqrt`, `count_notes`, `vessel_moves`, `compare` |
| `algolab.strings` | `are_anagrams`, `reverse_string`, `is_palindrome`, `brackets_match`, `lcs_length`, `reverse_madness`, `is_valid_sudoku`, `largest_partial_union` |
| `algolab.linked_list` | `LinkedList`, `DoublyLinkedList`, `BitList` |
| `algolab.trees` | `Treap`, `TreeNode`, `flatten`, `huffman_codes` |
| `algolab.playlist` | `Playlist`, a circular playlist with a play cursor, and the `algolab-playlist` menu |
| `algolab.converters` | `convert_length`, `convert_pressure`, `calculate`, `circle_measures`, `classify_triangle`, `is_vowel`, `is_teen`, `parity`, `showroom_gift`, `clock_time`, `swap`, `min_max`, `count_before_multiple_of_ten`, `Atm` |
| `algolab.recipes` | `Recipe`, `RecipeAssistant`, and the `algolab-recipes` menu |
| `algolab.matrix` | `Matrix`, an immutable grid of at most 100 x 100 with element-wise addition |

A few conventions hold throughout:

- Searches return the index of the target, or `None` when it is absent.
- Sorts take any iterable and return a new ascending list; the input is left alone.
- Invalid arguments raise `ValueError` (or `IndexError` for positions,
  `ZeroDivisionError` for `calculate("/", x, 0)`, and
  `converters.InsufficientBalance` for an `Atm` withdrawal over the balance).

## Examples

```python
from algolab.searching import binary_search
from algolab.arrays import max_subarray_sum
from algolab.backtracking import gray_code
from algolab.numbers import integer_to_roman
from algolab.strings import are_anagrams

binary_search([2, 3, 4, 10, 40], 10)                # 3
binary_search([2, 3, 4, 10, 40], 1)                 # None
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])     # 7
gray_code(2)                                        # ['00', '01', '11', '10']
integer_to_roman(789)                               # 'DCCLXXXIX'
are_anagrams("gram", "arm")                         # False
```

Graphs are directed unless built with `directed=False`, and are traversed
from a starting vertex:

```python
from algolab.graphs import Graph

graph = Graph(4)
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    graph.add_edge(source, target)
graph.bfs(2)        # [2, 0, 3, 1]
```

The linked lists behave like ordinary Python containers:

```python
from algolab.linked_list import LinkedList

numbers = LinkedList([1, 2, 3, 4])
numbers.remove(2)   # True
3 in numbers        # True
list(numbers)       # [1, 3, 4]
```

Unit conversions are chosen by their menu number (1 to 12):

```python
from algolab.converters import convert_length, Atm

convert_length(1, 2.5)          # 2500.0  (kilometre to metre)
Atm().withdraw(2700)            # {2000: 1, 500: 1, 200: 1, 100: 0}
```

## Command-line tools

Two interactive, menu-driven programs are installed with the package. Both
read their choices from standard input and stop at their exit option or at
the end of input.

Manage a circular song playlist: add and remove songs, show the list, step
forwards and backwards through it, and play the first, last or a named song:

```
algolab-playlist
```

Keep a small collection of recipes in memory: add a recipe with its
instructions and ingredients, search for a recipe by name, or list them all:

```
algolab-recipes
```

## What it does not do

- The two tools keep everything in memory; nothing is saved between runs.
- The calculators in `algolab.converters` and `algolab.numbers` are plain
  functions; there are no prompting command-line programs for them.
- There are no games, terminal screens or clock displays.