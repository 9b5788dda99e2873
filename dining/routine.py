"""What each philosopher does at the table, and the monitor that watches them."""

from __future__ import annotations

import itertools
import time

from dining.table import Colour, Philosopher, Table

_POLL_SECONDS = 0.0001
_MONITOR_SECONDS = 0.001


def _pause(table: Table, duration_ms: int) -> None:
    """Wait for ``duration_ms`` milliseconds, or less if the dinner stops."""
    start = table.elapsed_ms()
    while table.elapsed_ms() - start < duration_ms:
        if table.should_stop():
            return
        time.sleep(_POLL_SECONDS)


def eat(table: Table, philosopher: Philosopher) -> None:
    """Take both forks, eat for the configured time and put the forks back."""
    if not table.take_forks(philosopher):
        return
    if table.should_stop():
        table.release_forks(philosopher)
        return
    with table.lock:
        table.announce(philosopher, "is eating", Colour.BLUE)
        philosopher.meals_eaten += 1
        if philosopher.meals_eaten == table.settings.meals_required:
            table.meals += 1
    philosopher.last_meal = table.elapsed_ms()
    _pause(table, table.settings.time_to_eat)
    table.release_forks(philosopher)


def sleep(table: Table, philosopher: Philosopher) -> None:
    """Announce sleeping and sleep for the configured time."""
    table.announce(philosopher, "is sleeping", Colour.CYAN)
    _pause(table, table.settings.time_to_sleep)


def think(table: Table, philosopher: Philosopher) -> None:
    """Announce thinking."""
    table.announce(philosopher, "is thinking", Colour.MAGENTA)


def handle_one_philosopher(table: Table, philosopher: Philosopher) -> None:
    """A lone philosopher takes the only fork and starves waiting for another."""
    with table.lock:
        table.announce(philosopher, "has taken a fork", Colour.GREEN)
        time.sleep(table.settings.time_to_die / 1000)
        table.died = True


def live(table: Table, philosopher: Philosopher) -> None:
    """Eat, sleep and think in turn until the dinner stops."""
    steps = (eat, sleep, think)
    while not table.should_stop():
        for step in steps:
            step(table, philosopher)
            if table.should_stop():
                return


def routine(table: Table, philosopher: Philosopher) -> None:
    """Entry point of a philosopher's thread."""
    if table.settings.philosophers == 1:
        handle_one_philosopher(table, philosopher)
        return
    if philosopher.id % 2 == 0:
        time.sleep(_POLL_SECONDS)
    live(table, philosopher)


def monitor(table: Table) -> None:
    """Watch the philosophers in turn and stop the dinner when it is over.

    The dinner ends when someone has gone longer than the time to die
    without eating, or when every philosopher has eaten enough.
    """
    count = table.settings.philosophers
    for philosopher in itertools.cycle(table.philosophers):
        with table.lock:
            if table.died or table.meals == count:
                table.died = True
                return
            starving = (
                table.elapsed_ms() - philosopher.last_meal
                > table.settings.time_to_die
            )
            if starving and table.meals != count:
                table.died = True
                return
        time.sleep(_MONITOR_SECONDS)