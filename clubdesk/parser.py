"""Reading a club log: table count, working time, hourly cost and events."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike

from .validation import InputError, check_event, check_working_time, to_minutes

_DIGITS = re.compile(r"[0-9]+", re.ASCII)
_UNSIGNED_MAX = 2**64 - 1


class EventType(IntEnum):
    """Event identifiers, incoming (1-4) and outgoing (11-13)."""

    IN = 1
    SEATING = 2
    WAITING = 3
    OUT = 4
    OUTGOING_OUT = 11
    OUTGOING_SEATING = 12
    OUTGOING_ERROR = 13


@dataclass(frozen=True)
class MetaData:
    """The header of a club log."""

    table_count: int
    working_time: tuple[str, str]
    cost: int


@dataclass(frozen=True)
class Event:
    """One incoming event."""

    time: str
    type: EventType
    client: str
    table: int | None = None


class ParseError(InputError):
    """Raised when a log cannot be read.

    ``line`` holds the last line that was accepted for reading when the
    error happened, or ``None`` if there was none.
    """

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class _Reader:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = (line.removesuffix("\n") for line in lines)
        self.last: str | None = None

    def take(self, what: str) -> str:
        line = next(self._lines, None)
        if line is None:
            raise ParseError(f"missing {what} line", self.last)
        return line

    def keep(self, line: str) -> None:
        self.last = line

    def remaining(self) -> Iterator[str]:
        yield from self._lines

    def fail(self, message: str) -> ParseError:
        return ParseError(message, self.last)


def _unsigned(text: str, reader: _Reader) -> int:
    if not _DIGITS.fullmatch(text):
        raise reader.fail(f"bad numeric value: {text}")
    value = int(text)
    if value > _UNSIGNED_MAX:
        raise reader.fail(f"bad numeric value: {text}")
    return value


def _parse_metadata(reader: _Reader) -> MetaData:
    line = reader.take("table count")
    table_count = _unsigned(line, reader)
    reader.keep(line)
    if table_count == 0:
        raise reader.fail("table count must be positive")

    line = reader.take("working time")
    reader.keep(line)
    try:
        working_time = check_working_time(line)
    except InputError as err:
        raise reader.fail(f"invalid working time: {err}") from err

    line = reader.take("cost")
    cost = _unsigned(line, reader)
    reader.keep(line)
    if cost == 0:
        raise reader.fail("cost must be positive")

    return MetaData(table_count, working_time, cost)


def _parse_events(reader: _Reader) -> list[Event]:
    events: list[Event] = []
    previous = -1
    for line in reader.remaining():
        reader.keep(line)
        try:
            tokens = check_event(line)
        except InputError as err:
            raise reader.fail(f"invalid event: {err}") from err
        time = tokens[0]
        minutes = to_minutes(time)
        if minutes < previous:
            raise reader.fail("events are out of order")
        previous = minutes
        table = _unsigned(tokens[3], reader) if len(tokens) == 4 else None
        events.append(Event(time, EventType(int(tokens[1])), tokens[2], table))
    return events


def parse_lines(lines: Iterable[str]) -> tuple[MetaData, list[Event]]:
    """Parse the lines of a club log into its header and its events."""
    reader = _Reader(lines)
    metadata = _parse_metadata(reader)
    return metadata, _parse_events(reader)


def parse_file(path: str | PathLike[str]) -> tuple[MetaData, list[Event]]:
    """Parse the club log stored at ``path``.

    Lines are split on ``\\n`` only; any other character stays part of a line.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return parse_lines(lines)