# estudos

A small collection of study material in five modules:

- `estudos.sorting`: classic sorting algorithms and `is_sorted`.
- `estudos.text`: `Text`, a mutable string type.
- `estudos.linkedlist`: `LinkedList`, a singly linked list.
- `estudos.stack`: `Stack`, a last-in, first-out stack.
- `estudos.scenes`: simple 2D drawings that are exported as SVG.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

`bubblesort`, `selectionsort`, `insertionsort`, `combsort`, `heapsort`,
`mergesort`, `quicksort`, `countingsort` and `bogosort` each take any iterable
and return a new list in non-decreasing order. The argument is not changed.

- `countingsort(items, k=None)` accepts only integers in `0..k`. If `k` is
  omitted, the largest item is used as `k`. It raises `TypeError` for an item
  that is not an integer. It raises `ValueError` for an item outside the range
  or for a negative `k`.
- `bogosort(items, rng=None)` shuffles the items with a `random.Random` until
  they are in order. Pass your own generator to make a run repeatable.
- `is_sorted(items)` tells whether the items are already in non-decreasing order.

```python
from estudos.sorting import quicksort, countingsort, is_sorted

data = [5, 3, 8, 1]
result = quicksort(data)      # [1, 3, 5, 8]; data is unchanged
assert is_sorted(result)

print(countingsort([3, 0, 2, 3], k=3))   # [0, 2, 3, 3]
```

## Text

`Text(value="")` is built from a `str` or from another `Text`.

- `+` returns a new `Text`. `+=` extends the `Text` in place. The other
  operand can be a `str` or a `Text`.
- `==`, `<`, `<=`, `>` and `>=` compare the characters, either with another
  `Text` or with a `str`.
- `len()` gives the number of characters, and an empty `Text` is false.
- `t[i]` reads one character and `t[i] = "x"` replaces one. Only indices from
  `0` to `len(t) - 1` are accepted; any other index raises `IndexError`.
  Assigning anything other than a single character raises `ValueError`.
- `Text` objects are mutable and therefore not hashable.
- `Text.read(stream)` skips leading whitespace and then reads one word of at
  most 99 characters from a text stream. It raises `EOFError` when the stream
  holds no further word.

```python
from estudos.text import Text

t = Text("abacate")
t[6] = "o"
print(t + "cereja")   # abacatocereja
```

## LinkedList

`LinkedList(items=None)` supports the following operations:

- `append` adds a value at the end and `prepend` adds one at the start.
- `clear` removes every value and `is_empty` tells whether the list is empty.
- `in`, `len()`, iteration and `lst[i]` work as usual. An index out of range
  raises `IndexError`.
- `remove(index=0)` removes the value at `index`, with these rules:
  - On an empty list it does nothing.
  - A list of one value is emptied, whatever the index.
  - An index past the end is ignored.
  - An index of zero or less removes the first value.
- `str(lst)` gives one `Indice i: value` line per value, followed by a blank line.
- `describe()` gives one `Elemento i : <tab>value` line per value.
- `to_ints()` returns the values as integers, preceded by the length plus one.

## Stack

`Stack()` supports the following operations:

- `push` puts a value on top.
- `pop` removes and returns the top value. It raises `IndexError` when the
  stack is empty.
- `discard` drops the top value and does nothing on an empty stack.
- `clear`, `is_empty` and `len()` work as their names say.
- Iteration runs from the top down.
- `describe()` lists the values top first, one per line.

## Scenes

`estudos.scenes` builds drawings from `Primitive` shapes. The kinds of shape
are `"polygon"`, `"line_strip"`, `"line_loop"` and `"lines"`.

A `TransformStack` places the points. It offers `translate`, `scale`,
`rotate` (counter-clockwise, in degrees), `push`, `pop` and `apply`.

`circle(x, y, radius, segments)` returns points spaced evenly around a circle.

Five ready-made scenes are available. Each function returns a `Scene`:

| Function | Drawing |
| --- | --- |
| `boat_scene()` | A boat |
| `house_scene()` | A house |
| `squares_scene()` | Nested squares |
| `tree_scene()` | A tree |
| `triangles_scene()` | Triangles |

`Scene.to_svg()` renders a scene as an SVG document. The y axis points up,
as in the scene's coordinates.

```python
from estudos.scenes import boat_scene

svg = boat_scene().to_svg()
```

## Commands

`estudos-text` prints a demonstration of `Text`. It then reads one word from
standard input and echoes it. If no word is given, it exits with status 1.

```
echo hello | estudos-text
```

`estudos-scenes` writes one scene as SVG. The scene is one of `boat`, `house`,
`squares`, `tree` or `triangles`. The SVG goes to standard output, or to the
file given with `-o`/`--output`.

```
estudos-scenes boat -o boat.svg
```

## What it does not do

The scenes are only written out as SVG files. Nothing opens a window or
draws on screen interactively, and there are no 3D drawings.