# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
instruction set. It prints the instructions that sort stack `a` in ascending
order, one per line, and tries to keep the list short.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments or as one quoted string:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

A single argument is split on spaces, tabs and newlines. The first number is
the top of stack `a`. Each line of output is one of these instructions:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up: the top becomes the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down: the bottom becomes the top |

If the input is already sorted, nothing is printed and the exit status is 0.
With no arguments, or a single argument that is empty or holds only
whitespace, the program prints nothing and exits with status 1.

Each number may have leading whitespace and one `+` or `-` sign, followed by
digits. If anything follows the digits, if a number is outside the 32-bit
signed integer range, or if a number appears twice, the program writes
`Error` to standard error and exits with status 1. A sign with no digits reads
as zero.

Up to three numbers are sorted directly. Larger lists are sorted by moving
numbers to `b`, each time picking the one that takes the fewest rotations to
place, then moving them back into `a` in order.

## Library use

```python
from pushswap.stacks import Stacks
from pushswap.sorting import sort_ascending

stacks = Stacks([3, 1, 2])
sort_ascending(stacks)
print(stacks.moves)   # the instructions, in order
print(list(stacks.a)) # [1, 2, 3]
```

`Stacks` holds the two stacks as `a` and `b` (top at index 0) and has one
method per instruction (`sa`, `pb`, `rra`, ...). Each call applies the
instruction and appends its name to `moves`.

`pushswap.parsing.parse_arguments` turns command-line strings into a list of
integers and raises `pushswap.parsing.InputError` on bad input.
`pushswap.sorting` also offers `sort_small`, `sort_large` and `is_sorted`.

## What it does not do

The package only produces instructions. It does not read a list of
instructions back in to check whether they sort a given input.

## Running the tests

```
pip install ".[test]"
pytest
```