# dpatterns

Classic dynamic-programming solutions grouped by pattern, plus small stack,
queue and deque containers. The stack and the queue each come with an
interactive numbered menu.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dpatterns.knapsack`: the 0/1 and unbounded knapsack family:
  `knapsack`, `subset_sum_exists`, `equal_partition`,
  `count_subsets_with_sum`, `perfect_sum` (counted modulo 1 000 000 007),
  `count_subsets_with_difference`, `min_subset_difference`,
  `target_sum_ways`, `coin_change_ways`, `min_coins` (returns `None` when
  the amount cannot be made), `rod_cutting`, `last_stone_weight`,
  `ones_and_zeros`. Negative values or targets raise `ValueError`.
- `dpatterns.sequences`: string and sequence problems:
  `lcs_length`, `longest_common_subsequence`, `longest_common_substring`,
  `longest_palindromic_subsequence`, `longest_repeating_subsequence`,
  `min_deletions_to_palindrome`, `min_insertions_to_palindrome`,
  `shortest_common_supersequence_length`, `shortest_common_supersequence`,
  `is_interleave`, `longest_increasing_subsequence`, `min_palindrome_cuts`.
- `dpatterns.intervals`: interval DP:
  `matrix_chain_order`, `burst_balloons`, `min_cost_to_cut_stick`,
  `super_egg_drop`.
- `dpatterns.catalan`: `catalan_numbers`, `catalan`, `binomial`.
- `dpatterns.paths`: cheapest paths towards a target:
  `min_cost_climbing_stairs`, `min_path_sum`, `min_falling_path_sum`,
  `min_cost_tickets`, `min_steps_two_keys`, `num_squares`,
  `minimum_total`, `maximal_square`.
- `dpatterns.bitmask`: subset-mask DP:
  `makesquare`, `can_partition_k_subsets`, `max_score`,
  `min_assignment_cost`, `connect_two_groups`, `minimum_xor_sum`,
  `travelling_salesman`, `count_shirt_assignments`.
- `dpatterns.decisions`: take-it-or-leave-it DP:
  `TreeNode`, `rob_houses`, `rob_circular`, `rob_tree`,
  `max_profit_single`, `max_profit_with_fee`, `max_profit_with_cooldown`,
  `max_profit_two_transactions`, `max_profit_k_transactions`.
- `dpatterns.stack`: `Stack`, with `StackOverflow` and `StackUnderflow`.
- `dpatterns.fifo`: `Queue`, with `QueueOverflow` and `QueueUnderflow`.
- `dpatterns.deque`: `Deque`, a double-ended queue. Popping or reading an
  end of an empty deque raises `IndexError`.

## Examples

```python
from dpatterns.knapsack import knapsack, min_coins
from dpatterns.sequences import longest_common_subsequence
from dpatterns.catalan import catalan_numbers

knapsack(50, [10, 20, 30], [60, 100, 120])        # 220
min_coins([2], 3)                                 # None
longest_common_subsequence("ABCDEF", "ABXYDVEYF") # "ABDEF"
catalan_numbers(5)                                # [1, 1, 2, 5, 14, 42]
```

```python
from dpatterns.stack import Stack, StackOverflow

stack = Stack(capacity=2)
stack.push(1)
stack.push(2)
list(stack)   # [2, 1], top first
stack.pop()   # 2
```

```python
from dpatterns.fifo import Queue

queue = Queue([1, 2, 3])
queue.dequeue()   # 1
queue.peek()      # 2
```

```python
from dpatterns.deque import Deque

d = Deque()
d.push_back(1)
d.push_front(0)
d.front(), d.back()   # (0, 1)
```

`Stack` and `Queue` are unbounded unless given a `capacity`; going past it
raises `StackOverflow` or `QueueOverflow`, and taking from an empty one
raises `StackUnderflow` or `QueueUnderflow`.

## Interactive menus

Two commands open a numbered menu that reads choices from standard input:

```
dpatterns-stack
dpatterns-queue
```

Choose 1 to push or insert a value, 2 to pop or delete, 3 to display the
contents and 4 to exit. Both accept `--capacity N` to limit the size.
The menus also stop when standard input runs out.

## What it does not do

The menus keep their contents in memory only; nothing is saved between
runs. The dynamic-programming functions are a library only and have no
command of their own.