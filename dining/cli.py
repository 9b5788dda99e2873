"""Command-line entry point: lay the table and run the dinner."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from dining.config import InvalidArguments, Settings, UsageError, parse_settings
from dining.routine import monitor, routine
from dining.table import Colour, Table


def run(settings: Settings, out: TextIO | None = None) -> Table:
    """Run one dinner to its end and return the table as it was left."""
    table = Table(settings, out)
    watcher = threading.Thread(target=monitor, args=(table,), name="monitor")
    watcher.start()
    diners = [
        threading.Thread(
            target=routine, args=(table, philosopher), name=f"philo-{philosopher.id}"
        )
        for philosopher in table.philosophers
    ]
    for diner in diners:
        diner.start()
    watcher.join()
    for diner in diners:
        diner.join()
    if table.died and table.meals != settings.philosophers:
        table.announce(table.philosophers[0], "died", Colour.WHITE)
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and run the dinner; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except UsageError as error:
        print(error)
        return 0
    except InvalidArguments as error:
        print(error)
        return 1
    run(settings, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())