"""
Construction-time argument checks shared by the schedules.

Each helper returns the validated value (converted to float/int) or raises
ScheduleConfigError naming the argument.
"""

import math
from numbers import Integral, Real
from typing import Iterable, List, Sequence

from .protocol import ScheduleConfigError


def _as_float(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ScheduleConfigError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ScheduleConfigError(f"{name} must be finite, got {value}")
    return value


def _as_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ScheduleConfigError(f"{name} must be an integer, got {value!r}")
    return int(value)


def non_negative_float(name: str, value) -> float:
    value = _as_float(name, value)
    if value < 0:
        raise ScheduleConfigError(f"{name} must be non-negative, got {value}")
    return value


def positive_float(name: str, value) -> float:
    value = _as_float(name, value)
    if value <= 0:
        raise ScheduleConfigError(f"{name} must be positive, got {value}")
    return value


def float_in_range(
    name: str,
    value,
    low: float,
    high: float,
    include_low: bool = True,
    include_high: bool = True,
) -> float:
    """Check ``value`` lies in the interval [low, high] with optional open ends."""
    value = _as_float(name, value)
    above = value >= low if include_low else value > low
    below = value <= high if include_high else value < high
    if not (above and below):
        left = "[" if include_low else "("
        right = "]" if include_high else ")"
        raise ScheduleConfigError(
            f"{name} must be in {left}{low}, {high}{right}, got {value}"
        )
    return value


def non_negative_int(name: str, value) -> int:
    value = _as_int(name, value)
    if value < 0:
        raise ScheduleConfigError(f"{name} must be non-negative, got {value}")
    return value


def positive_int(name: str, value) -> int:
    value = _as_int(name, value)
    if value <= 0:
        raise ScheduleConfigError(f"{name} must be positive, got {value}")
    return value


def init_step(value) -> int:
    return non_negative_int("init_step", value)


def strictly_increasing(name: str, values: Iterable) -> List[int]:
    """Validate milestones: non-negative integers in strictly increasing order."""
    if isinstance(values, (str, bytes)):
        raise ScheduleConfigError(f"{name} must be a sequence of integers")
    checked = [non_negative_int(f"{name}[{i}]", v) for i, v in enumerate(values)]
    for prev, cur in zip(checked, checked[1:]):
        if cur <= prev:
            raise ScheduleConfigError(
                f"{name} must be strictly increasing, got {checked}"
            )
    return checked


def choice(name: str, value: str, options: Sequence[str]) -> str:
    """Normalise a string option and check it against ``options``."""
    if not isinstance(value, str):
        raise ScheduleConfigError(f"{name} must be a string, got {value!r}")
    normalized = value.lower()
    if normalized not in options:
        raise ScheduleConfigError(
            f"Invalid {name}: {value}. Must be one of {list(options)}"
        )
    return normalized
