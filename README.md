# dsakit

Compact solutions to a handful of classic algorithm problems: stock trading
profits, jump reachability, longest substrings, bracket matching,
subsequences, in-place de-duplication and palindromes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### Dynamic programming

```python
from dsakit.dynamic_programming import max_profit, max_profit_multiple, can_jump

max_profit([7, 1, 5, 3, 6, 4])           # 5: one buy, one later sell
max_profit_multiple([7, 1, 5, 3, 6, 4])  # 7: as many trades as you like
can_jump([2, 3, 1, 1, 4])                # True
can_jump([3, 2, 1, 0, 4])                # False
```

`max_profit` returns 0 when fewer than two prices are given or when no trade
makes a profit. In `can_jump`, each entry is the longest jump allowed from
that position.

### Sliding window

```python
from dsakit.sliding_window import length_of_longest_substring

length_of_longest_substring("abcabcbb")  # 3
length_of_longest_substring("")          # 0
```

### Stacks

```python
from dsakit.stacks import is_valid_parentheses

is_valid_parentheses("({[]})")  # True
is_valid_parentheses("([)]")    # False
```

The input is expected to hold only the brackets `()[]{}`. Any character that
is not an opening bracket is treated as a closer, so it must match the most
recent unclosed opening bracket or the string is rejected.

### Two pointers

```python
from dsakit.two_pointer import is_subsequence, remove_duplicates, is_palindrome

is_subsequence("ace", "abcde")                  # True
nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
k = remove_duplicates(nums)                     # 5, nums[:5] == [0, 1, 2, 3, 4]
is_palindrome("A man, a plan, a canal: Panama") # True
```

`remove_duplicates` expects a sorted list. It compacts the list in place and
returns how many unique values now sit at the front; entries past that count
are left as they were.

`is_palindrome` ignores case and every character that is neither a letter nor
a decimal digit.

## What it does not do

dsakit is a library of functions only. It has no command-line tool; call the
functions from your own code.