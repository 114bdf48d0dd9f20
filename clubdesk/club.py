"""Running a day at the club: seating, queueing and billing of clients."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

from .parser import Event, EventType, MetaData
from .validation import to_minutes

_COST_MODULUS = 2**64


@dataclass
class _Client:
    seated: bool = False
    in_queue: bool = False
    table: int = 0
    seat_time: int = 0


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _billed_hours(minutes: int) -> int:
    """Whole hours to charge for ``minutes``, any started hour counting in full."""
    return _truncating_div(minutes + 59, 60)


def _format_duration(minutes: int) -> str:
    sign = -1 if minutes < 0 else 1
    hours = sign * (abs(minutes) // 60)
    rest = sign * (abs(minutes) % 60)
    return f"{hours:02d}:{rest:02d}"


def _echo(event: Event) -> str:
    parts = [event.time, str(int(event.type)), event.client]
    if event.table is not None:
        parts.append(str(event.table))
    return " ".join(parts)


def _error(time: str, text: str) -> str:
    return f"{time} {int(EventType.OUTGOING_ERROR)} {text}"


class Club:
    """Replays the events of one working day and reports what happened."""

    def __init__(self, metadata: MetaData, events: Iterable[Event]) -> None:
        self.metadata = metadata
        self.events = tuple(events)

    def _reset(self) -> None:
        opening, closing = self.metadata.working_time
        count = self.metadata.table_count
        self._opening = to_minutes(opening)
        self._closing = to_minutes(closing)
        self._clients: dict[str, _Client] = {}
        self._waiting: deque[str] = deque()
        self._tables: list[str | None] = [None] * count
        self._occupied: list[int] = [0] * count
        self._revenue: list[int] = [0] * count

    def _charge(self, table: int, elapsed: int) -> None:
        index = table - 1
        self._occupied[index] += elapsed
        owed = _billed_hours(elapsed) * self.metadata.cost
        self._revenue[index] = (self._revenue[index] + owed) % _COST_MODULUS

    def _release(self, client: _Client, now: int) -> int:
        table = client.table
        self._charge(table, now - client.seat_time)
        self._tables[table - 1] = None
        return table

    def _seat_next(self, table: int, time: str, now: int) -> str:
        name = self._waiting.popleft()
        client = self._clients.setdefault(name, _Client())
        client.in_queue = False
        client.seated = True
        client.table = table
        client.seat_time = now
        self._tables[table - 1] = name
        return f"{time} {int(EventType.OUTGOING_SEATING)} {name} {table}"

    def _arrive(self, event: Event, now: int) -> Iterator[str]:
        if now < self._opening or now >= self._closing:
            yield _error(event.time, "NotOpenYet")
        elif event.client in self._clients:
            yield _error(event.time, "YouShallNotPass")
        else:
            self._clients[event.client] = _Client()

    def _sit(self, event: Event, now: int) -> Iterator[str]:
        client = self._clients.get(event.client)
        if client is None:
            yield _error(event.time, "ClientUnknown")
            return
        table = event.table or 0
        if not 1 <= table <= len(self._tables) or self._tables[table - 1] is not None:
            yield _error(event.time, "PlaceIsBusy")
            return
        freed = self._release(client, now) if client.seated else 0
        client.seated = True
        client.in_queue = False
        client.table = table
        client.seat_time = now
        self._tables[table - 1] = event.client
        if freed and self._waiting:
            yield self._seat_next(freed, event.time, now)

    def _wait(self, event: Event) -> Iterator[str]:
        if event.client not in self._clients:
            yield _error(event.time, "ClientUnknown")
            return
        if any(occupant is None for occupant in self._tables):
            yield _error(event.time, "ICanWaitNoLonger!")
            return
        if len(self._waiting) > len(self._tables):
            yield f"{event.time} {int(EventType.OUTGOING_OUT)} {event.client}"
            del self._clients[event.client]
        else:
            self._waiting.append(event.client)
            self._clients[event.client].in_queue = True

    def _leave(self, event: Event, now: int) -> Iterator[str]:
        client = self._clients.get(event.client)
        if client is None:
            yield _error(event.time, "ClientUnknown")
            return
        freed = self._release(client, now) if client.seated else 0
        del self._clients[event.client]
        if freed and self._waiting:
            yield self._seat_next(freed, event.time, now)

    def _handle(self, event: Event) -> Iterator[str]:
        now = to_minutes(event.time)
        if event.type is EventType.IN:
            yield from self._arrive(event, now)
        elif event.type is EventType.SEATING:
            yield from self._sit(event, now)
        elif event.type is EventType.WAITING:
            yield from self._wait(event)
        elif event.type is EventType.OUT:
            yield from self._leave(event, now)

    def _close(self) -> Iterator[str]:
        closing_text = self.metadata.working_time[1]
        for client in self._clients.values():
            if client.seated:
                self._charge(client.table, self._closing - client.seat_time)
        for name in sorted(self._clients):
            yield f"{closing_text} {int(EventType.OUTGOING_OUT)} {name}"
        yield closing_text
        for number, (revenue, occupied) in enumerate(
            zip(self._revenue, self._occupied), start=1
        ):
            yield f"{number} {revenue} {_format_duration(occupied)}"

    def process(self) -> Iterator[str]:
        """Yield the report lines for the day, one at a time."""
        self._reset()
        yield self.metadata.working_time[0]
        for event in self.events:
            yield _echo(event)
            yield from self._handle(event)
        yield from self._close()

    def run(self, out: TextIO) -> None:
        """Write the report for the day to ``out``."""
        for line in self.process():
            out.write(line + "\n")