# tokenshell

A small interactive prompt that splits each line you type into tokens
separated by spaces or tabs, and keeps a numbered history of what you
entered. The package also provides `sortargs`, which prints its
command-line arguments in sorted order using a binary search tree.

## Installation

```
pip install .
```

## The tokenizer prompt

```
tokenshell
```

The prompt is `$ `. Each line you enter is added to the history under the
next number (starting at 1) and then printed token by token:

```
$ hello   world
token[0]: hello
token[1]: world
```

- `!N` looks up history entry `N`. If there is no such entry, the prompt
  prints `No history item found`. Otherwise the text of that entry is
  tokenized again and added to the history once more under a new number.
  If the recalled entry starts with `history`, the whole history is
  printed instead, each entry as `N: text`, run together with no
  separator between entries.
- `exit` or `quit` leaves the prompt. End of input does the same.

Input is read at most 223 characters at a time; a longer line is handled
as several lines.

## Sorting arguments

```
sortargs pear apple banana
```

This prints `the program name is <...>` followed by the arguments in
character-code order, one on each line. Duplicates are kept, and a string
sorts before any longer string that begins with it.

## Library use

```python
from tokenshell.tokenizer import tokenize, count_tokens, token_start, format_tokens
from tokenshell.history import History
from tokenshell.bst import BinarySearchTree, bst_compare
from tokenshell.sortargs import sort_args
from tokenshell.uimain import run

tokenize("  happy\tjoy ")      # ['happy', 'joy']
count_tokens("a b c")          # 3
token_start("  happy")         # 2
format_tokens(["a", "b"])      # 'token[0]: a\ntoken[1]: b\n'

history = History()
history.add(1, "first line")
history.recall(1).text         # 'first line'
len(history)                   # 1

tree = BinarySearchTree()
for word in ("b", "a", "c"):
    tree.insert(word)
list(tree)                     # ['a', 'b', 'c']
bst_compare("ab", "a")         # 1

sort_args(["pear", "apple"])   # ['apple', 'pear']
```

`run(stdin, stdout)` runs the prompt loop on any pair of text streams,
which is handy for scripting or testing.

## What it does not do

The history lives only in memory for one session; it is not saved to a
file. The prompt only tokenizes lines: it does not run them as commands.

## Running the tests

```
pip install .[test]
pytest
```