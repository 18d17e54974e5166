# pushswap

This package provides tools for the two-stack sorting puzzle. Stack `a` holds
a list of distinct integers and stack `b` starts empty. The allowed moves are
swap, push, rotate and reverse rotate. Each move that changes a stack is
written out under its usual name: `sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`,
`rr`, `rra`, `rrb` or `rrr`.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 1 2
pushswap "3 1 2" 5
```

The command joins its arguments with spaces and then splits the result on
spaces. Each token must begin with `+`, `-` or a digit. Parsing reads digits
after the optional sign and stops at the first non-digit. The command rejects
the input in three cases:

- a token starts with any other character
- a value does not fit in a signed 32-bit integer
- a value appears more than once

If the input is rejected, the command writes `Error` to standard error and
exits with status 1. If the input is accepted, it exits quietly with status 0.
If no arguments are given, it also exits with status 0.

## What it does not do

The command only validates its input and ranks the numbers. It does not work
out a sequence of moves that sorts the stack, and it prints nothing when the
input is valid. The stack operations are available through `Stacks` for
programs that want to carry out moves themselves.

## Library use

```python
from pushswap.validation import validate_args, ArgumentError
from pushswap.ranking import rank_values, is_sorted, fill_stack
from pushswap.stacks import Stacks

numbers = validate_args(["3 1", "2"])   # [3, 1, 2]
ranks = rank_values(numbers)            # [2, 0, 1]
fill_stack(["3 1", "2"])                # [2, 0, 1]
is_sorted(ranks)                        # False

stacks = Stacks(ranks, [], out=None)    # out=None writes to standard output
stacks.push("b")      # prints "pb"
stacks.rotate("a")    # prints "ra"
stacks.push("a")      # prints "pa"
stacks.a, stacks.b    # contents, top first
```

`validate_args` raises `ArgumentError`, a subclass of `ValueError`, when a
token is malformed, a value is out of range or a value is duplicated.

`Stacks` provides these methods:

- `swap(name)`, `rotate(name)` and `reverse_rotate(name)`. Each acts on stack
  `"a"` or `"b"`. If that stack has fewer than two numbers, the method does
  nothing and prints nothing.
- `push(name)`. It moves the top of the other stack onto stack `name`. If the
  other stack is empty, it does nothing.
- `swap_both()`, `rotate_both()` and `reverse_rotate_both()`. Each acts on
  both stacks and always prints `ss`, `rr` or `rrr`.

## Supporting modules

- `pushswap.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`) and case conversion (`to_upper`, `to_lower`).
- `pushswap.strings`: `atoi`, `itoa`, `find_char`, `rfind_char`,
  `compare_prefix` and `find_in_prefix`.
- `pushswap.textops`: `substr`, `join`, `trim`, `split`, `map_indexed`,
  `iter_indexed`, `bounded_copy` and `bounded_concat`.
- `pushswap.memory`: byte-buffer helpers (`fill`, `zero`, `copy`, `move`,
  `find_byte`, `compare_bytes`, `zeroed`).
- `pushswap.linkedlist`: a singly linked list. `LinkedList` supports
  `add_front`, `add_back`, `remove_front`, `clear`, `for_each`, `map`, `last`,
  `len()` and iteration. `Node` is its element type.
- `pushswap.printf`: `format_string` and `printf`. They handle
  `%c %s %d %i %p %u %x %X %%`. An unknown conversion produces nothing.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  writes to a stream, or to standard output by default.
- `pushswap.linereader`: `LineReader` reads a text or binary stream line by
  line through a fixed-size buffer. `get_next_line` returns the next line of
  a stream, or `None` at the end.

## Tests

```
pip install .[test]
pytest
```