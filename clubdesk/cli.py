"""Command line entry point: report on the club log named by the argument."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .club import Club
from .parser import ParseError, parse_file


def main(argv: Sequence[str] | None = None) -> int:
    """Run the club report for one log file; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        metadata, events = parse_file(args[0])
    except ParseError as err:
        if err.line is not None:
            print(err.line)
        return 1
    except (OSError, ValueError):
        return 1
    Club(metadata, events).run(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())