# studynotes

A collection of small, self-contained study exercises, arranged as a Python
package with no runtime dependencies. It needs Python 3.10 or later.

## What is inside

- `studynotes.patterns`: one module per classic design pattern:
  `simple_factory`, `strategy`, `decorator`, `proxy`, `factory_method`,
  `prototype`, `template_method`, `facade`, `builder`, `observer`,
  `abstract_factory`, `adapter`, `memento`, `composite`, `bridge`, `command`,
  `responsibility` (chain of responsibility), `mediator`, `flyweight`,
  `interpreter` and `visitor`. Most methods return the text they describe
  rather than printing it; the observer classes write to a stream you pass in
  (standard output by default).
- `studynotes.leetcode`: small puzzle solutions such as `is_valid_brackets`,
  `is_palindrome`, `distribute_candies`, `distribute_candies_to_people`,
  `circular_game_losers`, `permutations`, `can_win_nim` and
  `can_make_square`.
- `studynotes.lists`: `LinkedList`, with 1-based positional insert and
  delete, and `StaticList`, a linked list kept in fixed arrays with room for
  98 elements.
- `studynotes.exercises`: `tokenize` for arithmetic expressions,
  `insert_sort`, `extract_serial` and `arithmetic_sum`.
- `studynotes.inifile`: read strings, integers (hex and octal prefixes
  honoured), floats and comma separated arrays from sectioned `key=value`
  files; rewrite a key with `update_param_key` or `put_ini_int`; load scan
  frequency tables with `get_freq_table` and `get_freq_list`. A missing file,
  section or key raises `IniError`.
- `studynotes.version_info`: the start-up `banner` and `read_version` /
  `describe_version`, which read `p_v`, `p_i` and `p_f` from the `[version]`
  section of `version.ini`.
- `studynotes.tools`: a closed interval `Range` supporting `in`, equality,
  hashing and `cast`, and the unit helpers `bhz`, `khz`, `mhz` and `ghz`.
- `studynotes.timing`: `elapsed_time` and the `RunTimer` context manager for
  timing work in a `TimeUnit`, `FuncCallTimer` for calling a function
  repeatedly on a background thread, and the `singleton` class decorator.
- `studynotes.logview`: a `Logger` writing coloured, levelled lines tagged
  with the calling file and line number.
- `studynotes.sales_item`: `SalesItem`, a book sale record with parsing,
  addition and average price, and `compare_isbn`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides one command. It prints the banner and runs
the worked examples (the grid puzzle, both list structures, expression
tokenizing, serial extraction and insertion sort), printing their results:

```
studynotes
```

It takes no options other than `--help`.

## Library use

```python
from studynotes.leetcode import is_valid_brackets, can_win_nim, can_make_square

is_valid_brackets("()[]{}")   # True
is_valid_brackets("{)}")      # False
can_win_nim(8)                # False
can_make_square([["B", "W", "B"], ["W", "B", "W"], ["B", "W", "B"]])  # False
```

```python
from studynotes.tools import Range, mhz, ghz

band = Range(2400, 2500)
2450 in band                  # True
mhz(61.44)                    # 61440000
ghz(2.47)                     # 2470000000
```

```python
from studynotes.inifile import get_ini_int, IniError

try:
    count = get_ini_int("pscan_info", "freq_num", "pscan.ini")
except IniError as exc:
    print("could not read the table:", exc)
```

```python
from studynotes.lists import StaticList

items = StaticList()
for value in range(1, 4):
    items.insert(1, value)
list(items)                   # [3, 2, 1]
len(items)                    # 3
```

```python
from studynotes.sales_item import SalesItem

item = SalesItem.parse("0-000-00000-0 3 20.00")
item.avg_price()              # 20.0
```

## What it does not do

The package is a set of exercises, not an application. It does not receive
or send data over the network, talk to radio hardware, or share data between
processes; the command only runs the examples listed above.