# ncutools

A small collection of utilities, with no third-party dependencies:

- `ncutools.html`: build HTML fragments as a tree of nodes and serialise them
  (`HTML`, `HTMLVoidTag`, `HTMLContainerTag`), plus `HTMLParser`, a minimal
  scanner that collects self-closing `<... />` tags.
- `ncutools.dates`: `DateCalculator`, a plain year/month/day value with day,
  month and year arithmetic and comparisons, and `string_split`.
- `ncutools.timing`: wall-clock helpers (`CurrentTime`, `UTCTimer`), a
  `CountdownTimer` towards a target moment, `string_to_timestamp`, and the
  `ReservationInfo` record.
- `ncutools.textio`: reading a file as text, inclusive substring slicing,
  membership testing, delayed and coloured printing to stdout, and parsing
  JSON from a string.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## HTML

`HTML` is a dataclass with `tag_name`, `text`, `attributes` and keyed
`children`. Attributes and children are written out in key order. An element
without a tag name renders only its text followed by its children.

```python
from ncutools.html import HTML

root = HTML("div")
root.set_attribute("id", "x")
root.set_attribute("data-k", "v")
root.text = "root-text"

para = HTML("p", "c1")
root.add_child("1", para)        # stores a copy
root["2"].tag_name = "span"      # [] creates a missing child
root["2"].text = "c2"

print(root)
# <div data-k="v" id="x">root-text<p>c1</p><span>c2</span></div>
```

`root.child(key)` looks a child up without creating it, returning a detached
empty element when the key is missing. `get_attribute` returns `""` for an
unset attribute. Attribute values and text are written verbatim, without
escaping.

`HTMLVoidTag` renders as `<name attrs>` with no closing tag;
`HTMLContainerTag` wraps a list of already-rendered strings in an opening and
closing tag.

`HTMLParser(html)` only looks for self-closing tags. For each one it records a
`HTMLVoidTag` whose attributes are the `key=value` pairs found, with values
kept exactly as written (quotes included). `get_void_tag(name)` returns a copy
of what was recorded. Ordinary opening/closing tags are not parsed, so
`get_container_tag(name)` always yields an empty `HTMLContainerTag`.

## Dates

```python
from ncutools.dates import DateCalculator

d = DateCalculator("2024-02-28")
d += 2
print(d)                 # 2024-03-01
print(d > "2024-01-01")  # True
```

- `DateCalculator()` is `1970-01-01`.
- `d + n` / `d - n` return a new date moved by `n` days; `+=` and `-=` change
  it in place. Adding days carries forward across months and years.
- `d1 - d2` returns the number of days between two dates (always
  non-negative).
- `d1 + d2` adds `d2`'s day, month and year fields to `d1` in that order.
- Comparisons accept another `DateCalculator` or a `"YYYY-MM-DD"` string.
- `set_date(text)` returns whether the new date is valid; a string without
  exactly three fields leaves the date unchanged and returns `False`.
- `is_valid_date()` checks month and day ranges, including leap years.

`string_split(text, delimiter)` splits on the delimiter and drops a single
trailing empty field.

## Timing

```python
from ncutools.timing import CountdownTimer

timer = CountdownTimer("2030-01-01", "08:00:00")
print(timer.remaining_time_string())   # H:MM:SS, hours unpadded
print(timer.is_finished())
```

`CountdownTimer` accepts epoch seconds, a local `"YYYY-MM-DD HH:MM:SS"`
string, or a date and a clock string separately; an unparseable string raises
`ValueError`. `remaining_seconds()` never goes below zero, and
`compare(date, clock)` is true only during the exact second named.

`string_to_timestamp(text)` converts a local `"YYYY-MM-DD HH:MM:SS"` to epoch
seconds, returning `0` if it does not parse.

`CurrentTime` reads the clock on every call (`seconds`, `formatted_time`,
`formatted_date`, `formatted_date_after(days)`, `hour`, `minute`, `second`,
`millisecond`), in local time. `UTCTimer` formats the current moment, or a
given timestamp, in UTC; `set_timezone_offset` only stores the offset and does
not affect the output.

## Text and JSON

- `read_string_from_file(path)` returns the file decoded as UTF-8.
- `parse_string_pos(text, start, end)` returns `text[start..end]` inclusive.
- `is_in(value, items)` tests membership.
- `delay_print(text, ms=50)` writes one character at a time to stdout.
- `colorful_print(text, attributes)` writes text using ANSI colour codes
  chosen from console attribute bits (see `ConsoleColor`), then resets.
- `read_json_from_string(text)` returns the parsed value, or `None` for
  invalid JSON.

## What this package does not do

It provides building blocks only. It does not make reservations, log in to
or talk to any booking service, and has no command-line program. The
`ReservationInfo` record is a plain data holder with no behaviour attached.