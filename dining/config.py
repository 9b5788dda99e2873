"""Command-line argument validation and simulation settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

USAGE = "./philo no_of_philos t_to_die t_to_eat t_to_sleep [no of meals]"

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


class UsageError(Exception):
    """Raised when the argument count or form does not match the usage line."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class InvalidArguments(ValueError):
    """Raised when an argument has a value the simulation cannot run with."""

    def __init__(self, message: str = "Invalid arguments") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Parameters of one dinner: counts and durations in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def _wrap_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, as a C ``int`` holds it."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def all_digits(args: Sequence[str]) -> bool:
    """Tell whether every argument is made only of ASCII digits."""
    return all("0" <= char <= "9" for arg in args for char in arg)


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name.

    Raises UsageError when there are not four or five arguments or one of
    them holds a non-digit, and InvalidArguments when a count or a duration
    is zero.
    """
    if len(args) not in (4, 5) or not all_digits(args):
        raise UsageError()
    philosophers, time_to_die, time_to_eat, time_to_sleep = (
        parse_int(arg) for arg in args[:4]
    )
    meals_required = parse_int(args[4]) if len(args) == 5 else None
    if (
        not philosophers
        or not time_to_die
        or not time_to_sleep
        or not time_to_eat
        or meals_required == 0
    ):
        raise InvalidArguments()
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals_required,
    )