# dining

A console simulation of the dining philosophers problem. Each philosopher
runs in its own thread and shares one fork with each neighbour around a
round table. A monitor thread visits the philosophers in turn and ends the
dinner when one of them has gone longer than the time to die without
starting a meal, or, when a meal count is given, once every philosopher has
eaten that many times.

## Installation

```
pip install .
```

## Usage

```
dining number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same entry point can be started with `python -m dining.cli`.

All times are in milliseconds. If there are not four or five arguments, or
any argument holds something other than digits, the usage line is printed
and the command exits with status 0. If the philosopher count, any of the
times, or the meal count is zero, `Invalid arguments` is printed and the
command exits with status 1.

Example:

```
dining 5 800 200 200 7
```

Each event is printed as one line, coloured by kind with ANSI escape
sequences:

```
<elapsed ms> <philosopher id> has taken a fork
<elapsed ms> <philosopher id> is eating
<elapsed ms> <philosopher id> is sleeping
<elapsed ms> <philosopher id> is thinking
<elapsed ms> <philosopher id> died
```

Philosophers are numbered from 1. Even-numbered philosophers pick up their
right fork first and odd-numbered ones their left. A lone philosopher takes
the only fork and dies once the time to die has passed.

When the dinner ends because the monitor found someone starving, the final
`died` line is printed after all threads have finished, and it always names
philosopher 1, whichever philosopher the monitor found starving.

## Using it from Python

```python
import sys

from dining.config import parse_settings
from dining.cli import run

settings = parse_settings(["4", "410", "200", "200", "3"])
table = run(settings, sys.stdout)
print(table.died, table.meals)
```

- `dining.config.parse_settings(args)` takes the arguments after the program
  name and returns a frozen `Settings` dataclass. It raises `UsageError` for
  the wrong number of arguments or non-digit characters, and
  `InvalidArguments` for zero values. `parse_int` reads a leading integer
  the way `atoi` does, wrapping to a signed 32-bit value, and `all_digits`
  checks that every argument is ASCII digits only.
- `dining.table.Table(settings, out)` holds the forks, the `Philosopher`
  records, the clock (`elapsed_ms`), the stop check (`should_stop`) and the
  output (`announce`), plus `take_forks` and `release_forks`.
- `dining.routine` holds the per-philosopher steps (`eat`, `sleep`,
  `think`, `live`, `routine`, `handle_one_philosopher`) and `monitor`.
- `dining.cli.run(settings, out)` runs one dinner to its end and returns the
  `Table`; `out` defaults to standard output. `dining.cli.main(argv)` parses
  an argument list (the command line by default) and returns the exit
  status.

## Tests

```
pip install .[test]
pytest
```