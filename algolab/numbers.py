"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

import math
import struct

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_NOTES = (2000, 500, 200, 100, 50, 20, 10, 5, 2, 1)

_MAGIC = 0x5F3759DF


def primes_up_to(limit: int) -> list[int]:
    """All primes less than or equal to ``limit`` (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    sieve = [True] * (limit + 1)
    sieve[0] = sieve[1] = False
    p = 2
    while p * p <= limit:
        if sieve[p]:
            sieve[p * p :: p] = [False] * len(range(p * p, limit + 1, p))
        p += 1
    return [number for number, prime in enumerate(sieve) if prime]


def decimal_to_octal(number: int) -> int:
    """The octal digits of ``number`` read back as a decimal integer."""
    sign = -1 if number < 0 else 1
    return sign * int(format(abs(number), "o"))


def compare(first: float, second: float) -> str:
    """``"GREATER"``, ``"LESS"`` or ``"EQUAL"`` for ``first`` against ``second``."""
    if first > second:
        return "GREATER"
    if first < second:
        return "LESS"
    if first == second:
        return "EQUAL"
    raise ValueError("values cannot be ordered")


def _is_armstrong(number: int) -> bool:
    digits = str(number)
    power = len(digits)
    return sum(int(digit) ** power for digit in digits) == number


def armstrong_numbers(count: int) -> list[int]:
    """The first ``count`` positive Armstrong (narcissistic) numbers."""
    if count < 0:
        raise ValueError("count must not be negative")
    found = []
    candidate = 1
    while len(found) < count:
        if _is_armstrong(candidate):
            found.append(candidate)
        candidate += 1
    return found


def factorial(n: int) -> int:
    """``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting 0, 1."""
    if count < 0:
        raise ValueError("count must not be negative")
    terms = []
    first, second = 0, 1
    for _ in range(count):
        terms.append(first)
        first, second = second, first + second
    return terms


def reverse_number(number: int) -> int:
    """The decimal digits of a non-negative ``number`` in reverse order."""
    if number < 0:
        raise ValueError("number must not be negative")
    reversed_value = 0
    while number > 0:
        number, digit = divmod(number, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_number(number: int) -> bool:
    """Whether ``number`` reads the same with its digits reversed."""
    return number >= 0 and reverse_number(number) == number


def count_set_bits(number: int) -> int:
    """Number of 1 bits; negative numbers are taken as 32-bit two's complement."""
    if number < 0:
        number &= 0xFFFFFFFF
    count = 0
    while number:
        number &= number - 1
        count += 1
    return count


def is_power_of_two(number: int) -> bool:
    """Whether ``number`` is a positive power of two."""
    return number > 0 and number & (number - 1) == 0


def is_prime(number: int) -> bool:
    """Whether ``number`` is prime; numbers below 2 are neither prime nor composite."""
    if number < 2:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def integer_to_roman(number: int) -> str:
    """Roman numeral for ``number``; thousands repeat ``M`` without limit."""
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        times, number = divmod(number, value) if number > 0 else (0, number)
        parts.append(numeral * times)
    return "".join(parts)


def binary_to_decimal(digits: str | int) -> int:
    """Value of a string (or integer) of binary digits."""
    text = str(digits)
    if not text or any(char not in "01" for char in text):
        raise ValueError(f"not a binary number: {digits!r}")
    return int(text, 2)


def decimal_to_binary(number: int) -> str:
    """Binary digits of a non-negative ``number``."""
    if number < 0:
        raise ValueError("number must not be negative")
    return format(number, "b")


def fast_inverse_sqrt(number: float) -> float:
    """Approximate ``1 / sqrt(number)`` by the single-precision bit trick and one Newton step."""
    half = number * 0.5
    (bits,) = struct.unpack("<I", struct.pack("<f", number))
    bits = (_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    (guess,) = struct.unpack("<f", struct.pack("<I", bits))
    return guess * (1.5 - half * guess * guess)


def digit_sum(number: int) -> int:
    """Sum of the decimal digits; the sign of ``number`` carries over."""
    sign = -1 if number < 0 else 1
    return sign * sum(int(digit) for digit in str(abs(number)))


def factorial_series_sum(terms: int = 10) -> float:
    """Sum of ``i / i!`` for ``i`` from 1 to ``terms``."""
    if terms < 0:
        raise ValueError("terms must not be negative")
    total = 0.0
    running_factorial = 1
    for i in range(1, terms + 1):
        running_factorial *= i
        total += i / running_factorial
    return total


def count_notes(amount: int) -> dict[int, int]:
    """How many of each note pay ``amount``, taking the largest notes first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    counts = {}
    for note in _NOTES:
        counts[note], amount = divmod(amount, note)
    return counts


def vessel_moves(first: float, second: float, cup: float) -> int:
    """Fewest pourings of at most ``cup`` that make two vessels hold the same amount."""
    if cup <= 0:
        raise ValueError("cup must be positive")
    return math.ceil(abs(first - second) / (2 * cup))