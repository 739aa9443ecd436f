"""Unit conversions and small everyday calculations."""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, NamedTuple


@dataclass(frozen=True)
class Conversion:
    """A conversion from one unit to another: multiply, then divide."""

    source: str
    target: str
    multiplier: float = 1
    divisor: float = 1

    def apply(self, value: float) -> float:
        """The amount in the target unit."""
        return value * self.multiplier / self.divisor


LENGTH_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("kilometre", "metre", multiplier=1000),
    2: Conversion("metre", "kilometre", divisor=1000),
    3: Conversion("metre", "centimetre", multiplier=100),
    4: Conversion("centimetre", "metre", divisor=100),
    5: Conversion("kilometre", "centimetre", multiplier=100000),
    6: Conversion("centimetre", "kilometre", divisor=100000),
    7: Conversion("centimetre", "millimetre", multiplier=10),
    8: Conversion("millimetre", "centimetre", divisor=10),
    9: Conversion("foot", "inch", multiplier=12),
    10: Conversion("inch", "foot", divisor=12),
    11: Conversion("inch", "centimetre", multiplier=2.54),
    12: Conversion("centimetre", "inch", multiplier=0.394),
}

PRESSURE_CONVERSIONS: dict[int, Conversion] = {
    1: Conversion("hectopascal", "megapascal", divisor=10000),
    2: Conversion("megapascal", "hectopascal", multiplier=10000),
    3: Conversion("millimetre of Hg", "millibar", multiplier=1.333),
    4: Conversion("millibar", "millimetre of Hg", multiplier=0.75),
    5: Conversion("inch of Hg", "bar", multiplier=0.034),
    6: Conversion("bar", "inch of Hg", multiplier=29.53),
    7: Conversion("kilopascal", "bar", divisor=100),
    8: Conversion("bar", "kilopascal", multiplier=100),
    9: Conversion("standard pressure (atm)", "pounds/square inch", multiplier=14.695),
    10: Conversion("pounds/square inch", "standard pressure (atm)", multiplier=0.068),
    11: Conversion("standard pressure (atm)", "bar", multiplier=1.013),
    12: Conversion("bar", "standard pressure (atm)", multiplier=0.987),
}

PI = 3.14
"""The value of pi used by :func:`circle_measures`."""

_VOWELS = frozenset("aeiou")
_GIFT_TIERS = ((2000, "Calculator", 5), (5000, "School Bag", 10), (10000, "Wall Clock", 15))
_TOP_GIFT = ("Wrist Watch", 20)
_ATM_NOTES = (2000, 500, 200, 100)
_INPUT_LIMIT = 10
_PARITY_NAMES = ("even", "odd")


def _convert(table: dict[int, Conversion], option: int, value: float) -> float:
    try:
        conversion = table[option]
    except KeyError:
        raise ValueError(f"invalid option {option!r}") from None
    return conversion.apply(value)


def convert_length(option: int, value: float) -> float:
    """Convert ``value`` with the length conversion numbered ``option`` (1 to 12)."""
    return _convert(LENGTH_CONVERSIONS, option, value)


def convert_pressure(option: int, value: float) -> float:
    """Convert ``value`` with the pressure conversion numbered ``option`` (1 to 12)."""
    return _convert(PRESSURE_CONVERSIONS, option, value)


def calculate(operator: str, first: float, second: float) -> float:
    """Apply ``+``, ``-``, ``*`` or ``/`` to two operands."""
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        if second == 0:
            raise ZeroDivisionError("division by zero")
        return first / second
    raise ValueError(f"invalid operator {operator!r}")


class CircleMeasures(NamedTuple):
    diameter: float
    circumference: float
    area: float


def circle_measures(radius: float) -> CircleMeasures:
    """Diameter, circumference and area of a circle, with pi taken as 3.14."""
    return CircleMeasures(2 * radius, 2 * PI * radius, PI * radius * radius)


def classify_triangle(a: float, b: float, c: float) -> str:
    """``"equilateral"``, ``"isosceles"`` or ``"scalene"`` by how many sides agree."""
    if a == b == c:
        return "equilateral"
    if a == b or b == c or c == a:
        return "isosceles"
    return "scalene"


def is_vowel(letter: str) -> bool:
    """Whether ``letter`` is one of the lower-case vowels a, e, i, o, u."""
    return letter in _VOWELS


def is_teen(age: int) -> bool:
    """Whether ``age`` lies strictly between 12 and 20."""
    return 12 < age < 20


def parity(number: int) -> str:
    """``"odd"`` or ``"even"``."""
    remainder = abs(number) % 2
    return _PARITY_NAMES[remainder]


class Gift(NamedTuple):
    gift: str
    total: int


def _truncated_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def showroom_gift(amount: int) -> Gift:
    """The gift and the discounted total for a purchase of ``amount``."""
    for ceiling, gift, percent in _GIFT_TIERS:
        if (amount > 0 or ceiling != _GIFT_TIERS[0][0]) and amount <= ceiling:
            if amount > 0:
                return Gift(gift, amount - _truncated_div(amount * percent, 100))
    gift, percent = _TOP_GIFT
    return Gift(gift, amount - _truncated_div(amount * percent, 100))


def clock_time(phase: int, hour_hand: int, minute_hand: int) -> str:
    """Time read from the numbers the hands have passed; phase 1 is AM, 2 is PM."""
    suffixes = {1: "AM", 2: "PM"}
    if phase not in suffixes:
        raise ValueError(f"invalid phase {phase!r}")
    if not (hour_hand < 13 and minute_hand < 13):
        raise ValueError("hand positions must be below 13")
    return f"{hour_hand}:{5 * minute_hand} {suffixes[phase]}"


def swap(first: Any, second: Any) -> tuple[Any, Any]:
    """The two values in the other order."""
    return second, first


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Smallest and largest of the values."""
    items = list(values)
    if not items:
        raise ValueError("min_max() needs at least one value")
    return min(items), max(items)


def count_before_multiple_of_ten(values: Iterable[int]) -> int:
    """How many of the first ten values come before one that ends in 0."""
    count = 0
    for value in itertools.islice(values, _INPUT_LIMIT):
        if value % 10 == 0:
            break
        count += 1
    return count


class InsufficientBalance(ValueError):
    """Raised when a withdrawal is larger than the balance."""


@dataclass
class Atm:
    """A cash machine account paying out in 2000, 500, 200 and 100 notes."""

    balance: int = 20000

    def withdraw(self, amount: int) -> dict[int, int]:
        """Take ``amount`` off the balance and return how many of each note it pays."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        if amount > self.balance:
            raise InsufficientBalance("Insufficient balance")
        self.balance -= amount
        counts = {}
        rest = amount
        for note in _ATM_NOTES:
            counts[note], rest = divmod(rest, note)
        return counts