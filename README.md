# clubdesk

`clubdesk` replays one day of events at a computer club. It prints the event
log together with the club's responses. It then prints the revenue and the
occupied time for each table.

## Installation

```
pip install .
```

## Usage

```
clubdesk events.txt
```

The command takes exactly one argument, the path of the log file. It exits
with status 0 on success and with status 1 in any of these cases:

- the number of arguments is wrong;
- the file cannot be opened;
- the input is malformed.

### Input file

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
```

- Line 1: the number of tables, a positive integer.
- Line 2: the opening and closing times, written `HH:MM HH:MM`. The closing
  time must come after the opening time.
- Line 3: the price per hour, a positive integer. Every started hour is billed
  in full.
- Remaining lines: the events, written `HH:MM ID client [table]`. Their times
  must not decrease from one line to the next.
  - `1`: the client arrives.
  - `2`: the client sits at the given table. Only this event has a table number.
  - `3`: the client waits for a table.
  - `4`: the client leaves.

Client names may contain only letters, digits, `_` and `-`.

### Output

The output contains, in this order:

1. The opening time.
2. Each input event as it was read. After it comes any line the club produces
   in response:
   - `11 name`: the client leaves. This happens when the client asks to wait
     while the queue is already longer than the number of tables.
   - `12 name table`: the first client in the queue takes a table that has just
     been freed.
   - `13 error`: one of `NotOpenYet`, `YouShallNotPass`, `ClientUnknown`,
     `PlaceIsBusy` or `ICanWaitNoLonger!`.
3. An `11` line at closing time for every client still in the club, in
   alphabetical order.
4. The closing time.
5. One line per table, written `table revenue HH:MM`. It gives the money
   taken at that table and the total time the table was occupied.

If the input is malformed, the program prints the last line it had read
before it stopped, which is usually the offending line. It prints nothing if
it stopped on the very first line, and then exits with status 1.

## As a library

```python
import sys

from clubdesk.club import Club
from clubdesk.parser import parse_file

metadata, events = parse_file("events.txt")
Club(metadata, events).run(sys.stdout)
```

- `clubdesk.parser.parse_file(path)` reads a log file.
- `clubdesk.parser.parse_lines(lines)` reads any iterable of lines.

Both return a `MetaData` and a list of `Event` objects. Both raise
`ParseError` on malformed input. Its `line` attribute holds the line that
would have been printed, or `None`.

`Club.process()` is a generator that yields the report lines one at a time
without trailing newlines. `Club.run(out)` writes them to a text stream.

`clubdesk.validation` provides the checks that can be used on their own:

- `check_working_time(line)` validates the working-time line.
- `check_event(line)` validates an event line.
- `to_minutes(time)` turns an `HH:MM` string into minutes.

The two check functions raise `InputError` when a line is invalid.

## Limits

`clubdesk` processes a single day from a single file. It does not store
anything between runs, and it has no interactive or live mode.