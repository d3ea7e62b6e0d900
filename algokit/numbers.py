"""Fibonacci numbers, divisors and primes."""

from __future__ import annotations

import math

_fib_memo: list[int] = [0, 1, 1]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_memo(n: int) -> int:
    """Return the n-th Fibonacci number (n >= 1), remembering earlier results."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    while len(_fib_memo) <= n:
        _fib_memo.append(_fib_memo[-1] + _fib_memo[-2])
    return _fib_memo[n]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple; raises ZeroDivisionError for lcm(0, 0)."""
    return abs(a * b) // gcd(a, b)


def is_prime(x: int) -> bool:
    """Return whether x is prime, trying every divisor below x."""
    if x < 2:
        return False
    return all(x % divisor for divisor in range(2, x))


def is_prime_sqrt(x: int) -> bool:
    """Return whether x is prime, trying divisors up to its square root."""
    if x < 2:
        return False
    return all(x % divisor for divisor in range(2, math.isqrt(x) + 1))


def sieve(limit: int) -> list[int]:
    """Return all primes up to and including limit (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    candidates = [True] * (limit + 1)
    candidates[0] = candidates[1] = False
    for number in range(2, math.isqrt(limit) + 1):
        if candidates[number]:
            for multiple in range(number * number, limit + 1, number):
                candidates[multiple] = False
    return [number for number, prime in enumerate(candidates) if prime]


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of n in ascending order, with repetition."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    factors = []
    divisor = 2
    while n != 1:
        if divisor * divisor > n:
            factors.append(n)
            break
        if n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        else:
            divisor += 1
    return factors