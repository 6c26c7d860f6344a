# minitools

A handful of small, self-contained utilities. Each is a module that can be
imported as a library and run as a command. The package needs nothing beyond
the Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Interactive commands read whitespace-separated tokens from standard input.
The others run on fixed sample data.

| Command | What it does |
| --- | --- |
| `minitools-calculator` | Reads two numbers and an operation (1–7), prints the result, shows the memory, then repeats; an unknown choice ends it |
| `minitools-converter` | Reads an integer and a choice (1 binary, 2 octal, 3 hexadecimal) and prints the digits |
| `minitools-matrixops` | Shows the product, determinant, transpose and symmetry check of two sample 3×3 matrices |
| `minitools-numberanalyser` | Reads integers until `-999` or the end of input and prints sum, average, maximum, minimum, previous maximum and primes |
| `minitools-patterns` | Reads a pattern letter (A, B or C) and a size and prints the number pattern; an unknown letter falls back to A |
| `minitools-pointergymnastics` | Shows sequence swapping, substring search, reversal and copying on sample data |
| `minitools-resistor` | Prints every combination of three sample resistors |
| `minitools-stats` | Prints the harmonic mean, geometric mean and mode of a sample |
| `minitools-strings` | Shows reversal, palindrome counting, ROT13 and an e-mail check on sample strings |
| `minitools-students` | Saves sample records to a file, reads them back, searches, sorts and prints class statistics |
| `minitools-textanalysis` | Reads lines until one that holds only `END` and prints counts, the most frequent word and a readability score |
| `minitools-tictactoe` | Two-player tic-tac-toe; moves are read as row and column (0–2) |

`minitools-students` takes `--file PATH` for the record file
(default `students.txt` in the current directory).

## Library use

### Calculator

```python
from minitools.calculator import Calculator

calc = Calculator()
calc.add(2, 3)
calc.multiply(4, 2.5)
calc.store(5.5)
calc.add_to_last(1.0)
print(calc.recall())   # tuple of every value kept, oldest first
calc.clear()
```

`Calculator` also offers `subtract`, `divide`, `modulo` (remainder with the
sign of the dividend), `power` and `square_root`. Every result is appended to
memory. Dividing or taking the modulo by zero raises `ZeroDivisionError`, the
square root of a negative number raises `ValueError`, and `add_to_last` on an
empty memory raises `IndexError`.

### Number bases

```python
from minitools.converter import to_binary, to_octal, to_hex

to_binary(10)   # '1010'
to_octal(64)    # '100'
to_hex(255)     # 'FF'
```

Zero and negative numbers give an empty string.

### Matrices

```python
from minitools.matrixops import multiply, determinant, transpose, is_symmetric, format_matrix

a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
b = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
print(format_matrix(multiply(a, b)))
determinant(a)     # 0
transpose(b)
is_symmetric(a)    # False
```

The functions accept matrices of any size. Ragged rows, mismatched
dimensions for `multiply`, and non-square input to `determinant` or
`is_symmetric` raise `ValueError`.

### Number analysis and patterns

```python
from minitools.numberanalyser import analyse, is_prime
from minitools.patterngenerator import Pattern, generate

result = analyse([3, 8, 11, 4])   # an Analysis
result.primes                     # (3, 11)
is_prime(11)                      # True
generate(Pattern.A, 3)            # [[1], [1, 2], [1, 2, 3]]
```

`Analysis` holds `total`, `average` (truncated toward zero), `maximum`,
`minimum`, `previous_maximum`, `primes`, `even` and `odd`. `analyse` of an
empty list raises `ValueError`. `generate` accepts a `Pattern` or its letter
and raises `ValueError` for any other letter.

### Sequences

```python
from minitools.pointergymnastics import swap_sequences, find_substring, reverse_text, copy_bytes

first, second = [1, 2], [3, 4]
swap_sequences(first, second)     # in place
find_substring("hello", "ll")     # 2, or None when absent
reverse_text("hello")             # 'olleh'
copy_bytes(bytearray(8), b"hello", 5)
```

### Resistors and statistics

```python
from minitools.resistor import resistor_combinations
from minitools.statslibrary import harmonic_mean, geometric_mean, remove_outliers, find_mode

combos = resistor_combinations(3.1, 3.4, 6.5)   # a Combinations, iterable
harmonic_mean([2.0, 4.0])
geometric_mean([2.0, 8.0])
remove_outliers([1.0, 2.0, 100.0], 40.0)        # [1.0, 2.0]
find_mode([1.0, 2.0, 2.0])                      # (2.0, 2)
```

`Combinations` has `series`, `parallel` and three mixed values, each one
resistor in series with the other two in parallel.

### Strings and text

```python
from minitools.stringprocessor import reverse_text, count_palindrome_words, encode_rot13, validate_email
from minitools.textanalysis import read_text, count_text, frequent_word, readability

count_palindrome_words("racecar bum")    # 1
encode_rot13("hello")                    # 'uryyb'
validate_email("someone@example.com")    # True
counts = count_text("One sentence here. And another!")   # a TextCounts
frequent_word("the cat and the hat")     # ('the', 2)
```

`readability` and `frequent_word` raise `ValueError` for text with no
sentences or no words.

### Student records

```python
from minitools.studentdatabase import (
    Date, Student, SortKey, save_records, load_records, sort_students, statistics, search,
)

alice = Student("Alice Johnson", 12345, (85.5, 92.0, 78.5, 88.0, 91.5), Date(15, 2, 2023))
save_records([alice], "students.txt")
students = load_records("students.txt")
sort_students(students, SortKey.GPA)
statistics(students).best_student
search(students, 12345)
```

Records are stored in a plain text file: the count on the first line, then
one comma-separated record per line with grades to two decimal places. A
student has exactly five grades and a name of at most 49 characters without
commas or line breaks.

### Tic-tac-toe

```python
from minitools.tictactoe import Board, next_player

board = Board()
board.make_move(1, 1, "X")
board.has_winner()    # False
print(board.render())
next_player("X")      # 'O'
```

## Limits

- The calculator command clears its memory after every calculation; memory
  is kept only by a `Calculator` object in library use.
- Tic-tac-toe is for two people at one terminal; there is no computer
  opponent.