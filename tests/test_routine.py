import io
import threading
import time

from dining.config import Settings
from dining.routine import (
    eat,
    handle_one_philosopher,
    live,
    monitor,
    routine,
    sleep,
    think,
)
from dining.table import Colour, Table


def _table(settings):
    out = io.StringIO()
    return Table(settings, out), out


def _forks_free(table):
    results = []
    for fork in table.forks:
        acquired = fork.acquire(blocking=False)
        results.append(acquired)
        if acquired:
            fork.release()
    return all(results)


def test_think_announces_in_magenta():
    table, out = _table(Settings(2, 1000, 10, 10))
    think(table, table.philosophers[0])
    text = out.getvalue()
    assert text.startswith(Colour.MAGENTA.value)
    assert "1 is thinking\n" in text
    assert text.endswith(Colour.RESET.value)


def test_eat_counts_meal_and_releases_forks():
    table, out = _table(Settings(2, 1000, 10, 10, meals_required=1))
    philosopher = table.philosophers[0]
    eat(table, philosopher)
    text = out.getvalue()
    assert philosopher.meals_eaten == 1
    assert table.meals == 1
    assert text.count("1 has taken a fork") == 2
    assert "1 is eating" in text
    assert _forks_free(table)


def test_eat_without_meal_limit_never_counts_table_meals():
    table, _ = _table(Settings(2, 1000, 5, 5))
    philosopher = table.philosophers[1]
    eat(table, philosopher)
    eat(table, philosopher)
    assert philosopher.meals_eaten == 2
    assert table.meals == 0


def test_eat_does_nothing_once_stopped():
    table, out = _table(Settings(2, 1000, 10, 10))
    table.died = True
    philosopher = table.philosophers[0]
    eat(table, philosopher)
    assert philosopher.meals_eaten == 0
    assert out.getvalue() == ""
    assert _forks_free(table)


def test_sleep_lasts_at_least_time_to_sleep():
    table, out = _table(Settings(2, 1000, 10, 30))
    began = time.monotonic()
    sleep(table, table.philosophers[0])
    assert time.monotonic() - began >= 0.028
    assert "1 is sleeping" in out.getvalue()


def test_sleep_returns_early_when_stopped():
    table, out = _table(Settings(2, 1000, 10, 5000))
    table.died = True
    began = time.monotonic()
    sleep(table, table.philosophers[0])
    assert time.monotonic() - began < 1.0
    assert out.getvalue().startswith(Colour.CYAN.value)


def test_monitor_detects_starvation():
    table, _ = _table(Settings(3, 20, 10, 10))
    began = time.monotonic()
    monitor(table)
    assert table.died is True
    assert time.monotonic() - began >= 0.019


def test_monitor_stops_when_all_have_eaten():
    table, _ = _table(Settings(3, 10000, 10, 10, meals_required=1))
    table.meals = 3
    began = time.monotonic()
    monitor(table)
    assert table.died is True
    assert time.monotonic() - began < 1.0


def test_handle_one_philosopher_starves():
    table, out = _table(Settings(1, 20, 10, 10))
    handle_one_philosopher(table, table.philosophers[0])
    assert table.died is True
    assert "1 has taken a fork" in out.getvalue()


def test_routine_single_philosopher_takes_one_fork():
    table, out = _table(Settings(1, 10, 10, 10))
    routine(table, table.philosophers[0])
    assert table.died is True
    assert out.getvalue().count("has taken a fork") == 1


def test_live_does_nothing_when_already_stopped():
    table, out = _table(Settings(2, 1000, 10, 10))
    table.died = True
    live(table, table.philosophers[0])
    assert out.getvalue() == ""


def test_dinner_ends_when_meals_are_done():
    table, out = _table(Settings(2, 800, 10, 10, meals_required=2))
    watcher = threading.Thread(target=monitor, args=(table,))
    diners = [
        threading.Thread(target=routine, args=(table, p)) for p in table.philosophers
    ]
    watcher.start()
    for diner in diners:
        diner.start()
    watcher.join(timeout=10)
    for diner in diners:
        diner.join(timeout=10)
    assert table.meals == 2
    assert all(p.meals_eaten >= 2 for p in table.philosophers)
    assert _forks_free(table)
    assert "is eating" in out.getvalue()