"""Checks for the working-time line and event lines of a club log."""

from __future__ import annotations

import re

_HHMM = re.compile(r"(?:[01]\d|2[0-3]):[0-5]\d", re.ASCII)
_CLIENT = re.compile(r"[a-z0-9_-]+", re.ASCII | re.IGNORECASE)
_POSITIVE = re.compile(r"[1-9][0-9]*", re.ASCII)

_MINUTES_PER_DAY = 24 * 60
_SEATING_ID = 2
_EVENT_IDS = range(1, 5)


class InputError(ValueError):
    """Raised when a line of input is malformed."""


def to_minutes(time: str) -> int:
    """Return the number of minutes since midnight for an ``HH:MM`` string."""
    return int(time[:2]) * 60 + int(time[3:5])


def check_working_time(line: str) -> tuple[str, str]:
    """Validate a ``HH:MM HH:MM`` opening line and return its two times.

    Tokens after the second one are ignored.
    """
    tokens = line.split()
    if len(tokens) < 2:
        raise InputError("working time needs an opening and a closing time")
    start, finish = tokens[0], tokens[1]
    if not (_HHMM.fullmatch(start) and _HHMM.fullmatch(finish)):
        raise InputError("working time must be given as HH:MM")
    opening, closing = to_minutes(start), to_minutes(finish)
    if opening >= closing or closing > _MINUTES_PER_DAY:
        raise InputError("closing time must come after opening time")
    return start, finish


def check_event(line: str) -> list[str]:
    """Validate an event line and return its whitespace-separated tokens."""
    tokens = line.split()
    if len(tokens) < 3:
        raise InputError("event needs a time, an id and a client name")
    time, event_id, client = tokens[0], tokens[1], tokens[2]
    if not _HHMM.fullmatch(time):
        raise InputError(f"bad event time: {time}")
    if not _POSITIVE.fullmatch(event_id):
        raise InputError(f"bad event id: {event_id}")
    number = int(event_id)
    if number not in _EVENT_IDS:
        raise InputError(f"unknown event id: {event_id}")
    if not _CLIENT.fullmatch(client):
        raise InputError(f"bad client name: {client}")
    expected = 4 if number == _SEATING_ID else 3
    if len(tokens) != expected:
        raise InputError(f"event {number} takes {expected} fields")
    if number == _SEATING_ID and not _POSITIVE.fullmatch(tokens[3]):
        raise InputError(f"bad table number: {tokens[3]}")
    return tokens