# algokit

A small collection of classic algorithms in plain Python, with no
dependencies beyond the standard library: binary search, in-place list
compaction, two-pointer and sliding-window techniques, spiral matrices,
hash-table problems, singly linked lists and a dynamic-programming example.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.search`
  - `binary_search(nums, target)`: index of `target` in an ascending
    sequence, or `-1`.
  - `is_perfect_square(num)`: whether `num` is the square of an integer.
- `algokit.inplace` (these functions rewrite the given list)
  - `remove_duplicates(nums)`: collapses runs of equal values, returns the
    new length.
  - `remove_element(nums, val)`: drops every `val`, returns the new length.
  - `move_zeroes(nums)`: moves zeros to the end, keeping the order of the
    other values.
- `algokit.twopointers`
  - `apply_backspaces(text)`: the text as typed, each `#` erasing the
    character before it.
  - `backspace_compare(s, t)`: whether both give the same typed text.
  - `sorted_squares(nums)`: squares of an ascending sequence, in ascending
    order.
- `algokit.windows`
  - `min_subarray_len(target, nums)`: length of the shortest contiguous run
    whose sum is at least `target`, or `0`.
  - `min_window(s, t)`: shortest substring of `s` containing every character
    of `t` (with multiplicity), or `""`.
  - `total_fruit(fruits)`: length of the longest contiguous run with at most
    two distinct values.
- `algokit.matrix`
  - `spiral_order(matrix)`: elements in clockwise spiral order.
  - `generate_matrix(n)`: an `n` by `n` matrix filled with `1..n*n` in
    clockwise spiral order.
- `algokit.dynamic`
  - `fib(n)`: the `n`-th Fibonacci number modulo 1000000007.
- `algokit.hashing`
  - `is_happy(n)`, `is_anagram(s, t)`, `intersection(nums1, nums2)` (distinct
    common values), `intersect(nums1, nums2)` (multiset intersection),
    `can_construct(ransom_note, magazine)`, `find_anagrams(s, p)` (start
    indices of anagrams of `p` in `s`), `group_anagrams(strs)`.
  - `main(argv=None)`: the entry point of the `algokit-anagram` command.
- `algokit.linkedlist`
  - `ListNode(val=0, next=None)`: a list node; iterating over it yields the
    values to the end of the list. Nodes compare by identity.
  - `build_list(values)`, `to_values(head)`: convert between Python
    iterables and linked lists.
  - `remove_elements(head, val)`, `reverse_list(head)`, `swap_pairs(head)`,
    `remove_nth_from_end(head, n)` (raises `ValueError` if `n` is not between
    1 and the list length), `get_intersection_node(head_a, head_b)`,
    `detect_cycle(head)`.
- `algokit.designlist`
  - `MyLinkedList`: a singly linked list with `get`, `add_at_head`,
    `add_at_tail`, `add_at_index` and `delete_at_index`, plus `len()` and
    iteration. `get` returns `-1` for an index outside the list; inserting
    past the end or deleting outside the list does nothing.

## Examples

```python
from algokit.search import binary_search
from algokit.windows import min_window
from algokit.matrix import generate_matrix
from algokit.linkedlist import build_list, reverse_list, to_values

binary_search([-1, 0, 3, 5, 9, 12], 9)      # 4
min_window("ADOBECODEBANC", "ABC")          # "BANC"
generate_matrix(3)                          # [[1, 2, 3], [8, 9, 4], [7, 6, 5]]
to_values(reverse_list(build_list([1, 2, 3])))  # [3, 2, 1]
```

```python
from algokit.designlist import MyLinkedList

lst = MyLinkedList()
lst.add_at_head(1)
lst.add_at_tail(3)
lst.add_at_index(1, 2)
lst.get(1)          # 2
lst.delete_at_index(1)
list(lst)           # [1, 3]
```

## Command line

`algokit-anagram` reads two whitespace-separated words from standard input
and prints `1` if they are anagrams of each other, `0` otherwise (no
trailing newline). A missing word counts as the empty string.

```
echo "anagram nagaram" | algokit-anagram
```