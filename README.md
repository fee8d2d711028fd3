# katas

Small, self-contained building blocks and exercises: linked lists and a
stack, Conway's Game of Life, Celsius/Fahrenheit tables, degree/minute/second
coordinates with a JSON form, request routing by glob or regular expression,
JSON API error helpers, threaded generator pipelines, a thread-safe word tally
and a gzip helper. Everything uses the standard library only.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library overview

### Data structures

```python
from katas.linked_list import LinkedList, DoublyLinkedList
from katas.stack import Stack, remove_adjacent_duplicates

items = LinkedList([12, 87, 9])
items.insert_at_start(24)
items.insert_at(2, 33)
items.delete_at(0)
print(items)              # "12,33,87,9"; an empty list prints "empty"
items.mth_to_last(1)      # 9, the last value

stack = Stack([1])
stack.push(2)
stack.peek()              # 2
stack.pop()               # 2

remove_adjacent_duplicates("abccde")   # "abde"
```

Out-of-range positions raise `IndexError`, as do `pop` and `peek` on an
empty `Stack`. `DoublyLinkedList` offers the same insertion and deletion
methods and can also be walked backwards with `reversed()`.
`parse_traversal_input` turns a position line and a space-separated line
of numbers into `(m, LinkedList)`.

### Game of Life

`katas.life.Universe` is a field of cells whose edges wrap around. It has
`set`, `seed` (taking an optional `random.Random`), `alive`, `neighbors`
and `next_state`; `str()` draws live cells as `*`. `step(current,
following)` writes the next generation of one universe into another of the
same size.

### Temperatures and coordinates

- `katas.temperature` has `celsius_to_fahrenheit`,
  `fahrenheit_to_celsius` and `conversion_table`, which returns the lines
  of a table from -40 to 100 in steps of 5.
- `katas.coordinates.Coordinate` converts degrees, minutes and seconds to
  decimal degrees (south and west are negative); `Location.to_json()`
  serialises a named place with both coordinates.

### Web helpers

- `katas.routing` has `Request` and `Response` values, `PathResolver`
  (glob patterns matched against `"METHOD /path"`, where `*` and `?` do not
  cross `/`) and `RegexResolver` (unanchored regular expressions). Patterns
  are tried in the order they were added; with no match the answer is
  `not_found`. Sample handlers: `hello`, `goodbye` and `home_page`.
- `katas.webapi` chooses a versioned message from an `Accept` header
  (`versioned_message`), renders an `APIError` as a JSON error body
  (`json_error`) and reads one back from a failed response
  (`parse_error_response`, which raises `APIError` or `ValueError`).

### Pipelines and files

- `katas.pipeline` has the generator stages `filter_bad`,
  `remove_consecutive_duplicates` and `split_sentences`, and
  `run_threaded(source, *stages)`, which runs each stage in its own thread
  and returns the last stage's output as a list.
- `katas.wordcount` counts words across files in parallel with
  `WordTally` and `tally_words`; `WordTally.repeated()` gives the words
  seen more than once.
- `katas.compress` writes `FILE.gz` beside each file with `compress`, or
  several at once with `compress_all`, which returns how many succeeded.

## Commands

```
katas-traversal            # reads m and a list of numbers from standard input
katas-life                 # animates the Game of Life in the terminal
katas-temperature          # prints Celsius/Fahrenheit tables
katas-wordcount FILE...    # lists words that appear more than once
katas-compress FILE...     # writes FILE.gz for each file
katas-count up --stop 16
katas-count down --start 5
katas-hello --name Gopher
```

`katas-life` accepts `--generations`, `--delay` and `--seed`.

## What it does not do

The routing and web helpers work on in-memory `Request` and `Response`
values only: the package starts no HTTP server and makes no network
requests. `parse_error_response` interprets a response that was fetched
elsewhere.