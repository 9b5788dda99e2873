"""The shared table: philosophers, forks, the clock and the stop condition."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from dining.config import Settings


class Colour(str, Enum):
    """ANSI colour sequences used for the log lines."""

    BLACK = "\033[0;30m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    MAGENTA = "\033[0;35m"
    CYAN = "\033[0;36m"
    WHITE = "\033[0;37m"
    RESET = "\033[0m"


@dataclass
class Philosopher:
    """One seat at the table and the state of its occupant."""

    id: int
    left_fork: int
    right_fork: int
    last_meal: int = 0
    meals_eaten: int = 0


class Table:
    """State shared by every philosopher thread and the monitor.

    ``lock`` is reentrant, so a caller may hold it around several updates
    and announcements that must appear together.
    """

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        count = settings.philosophers
        self.lock = threading.RLock()
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(id=seat + 1, left_fork=seat, right_fork=(seat + 1) % count)
            for seat in range(count)
        ]
        self.died = False
        self.meals = 0
        self._start = time.monotonic()

    def elapsed_ms(self) -> int:
        """Milliseconds since the table was laid."""
        return int((time.monotonic() - self._start) * 1000)

    def should_stop(self) -> bool:
        """Tell whether someone died or every philosopher has eaten enough."""
        with self.lock:
            return self.died or self.meals == self.settings.philosophers

    def announce(
        self, philosopher: Philosopher, message: str, colour: Colour
    ) -> None:
        """Write one timestamped, coloured line about a philosopher."""
        with self.lock:
            self.out.write(
                f"{colour.value}{self.elapsed_ms()} {philosopher.id} {message}\n"
                f"{Colour.RESET.value}"
            )
            self.out.flush()

    def take_forks(self, philosopher: Philosopher) -> bool:
        """Pick up both forks, even seats right first and odd seats left first.

        Returns False, with no fork held, if the dinner stops on the way.
        """
        if philosopher.id % 2 == 0:
            order = (philosopher.right_fork, philosopher.left_fork)
        else:
            order = (philosopher.left_fork, philosopher.right_fork)
        held: list[threading.Lock] = []
        for index in order:
            fork = self.forks[index]
            fork.acquire()
            held.append(fork)
            if self.should_stop():
                for taken in held:
                    taken.release()
                return False
            self.announce(philosopher, "has taken a fork", Colour.GREEN)
        return True

    def release_forks(self, philosopher: Philosopher) -> None:
        """Put both of a philosopher's forks back on the table."""
        self.forks[philosopher.left_fork].release()
        self.forks[philosopher.right_fork].release()