"""Benchmark the linked list radix sort against the built-in sort."""

import random
import string
import time
from dataclasses import dataclass

from .cll import iter_values
from .sorter import RadixSorter

DIGITS = string.digits + string.ascii_lowercase


@dataclass
class BenchmarkResult:
    """Timings for sorting one generated input."""

    count: int
    radix: int
    max_width: int
    passes: int
    radix_sort_s: float  # best of the repeats
    builtin_sort_s: float  # sorted() with a numeric key, best of the repeats
    matches: bool  # both sorts produced the same sequence


def generate_values(
    count: int,
    radix: int,
    max_width: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Generate random numeric strings of 1 to max_width digits.

    Args:
        count: Number of values to generate.
        radix: Radix of the digits.
        max_width: Maximum number of digits per value.
        rng: Random generator to use, for reproducible inputs.

    Returns:
        List of values in their textual form.
    """
    rng = rng or random.Random()
    digits = DIGITS[:radix]
    return [
        "".join(rng.choice(digits) for _ in range(rng.randint(1, max_width)))
        for _ in range(count)
    ]


def benchmark_sort(values: list[str], radix: int, repeat: int = 3) -> BenchmarkResult:
    """Time the radix sort and ``sorted`` on the same values.

    Each sort is run ``repeat`` times on fresh input and the best time kept.
    The radix sort time includes building the master list from the tokens.

    Args:
        values: Values to sort.
        radix: Radix of the values.
        repeat: Number of timed runs per sort.

    Returns:
        BenchmarkResult with the best timings and whether the outputs agree.
    """
    tokens = [str(radix), *values]
    radix_times: list[float] = []
    builtin_times: list[float] = []
    sorter = RadixSorter()
    rear = None
    expected: list[str] = []

    for _ in range(max(1, repeat)):
        start = time.perf_counter()
        rear = sorter.sort(tokens)
        radix_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        expected = sorted(values, key=lambda v: int(v, radix))
        builtin_times.append(time.perf_counter() - start)

    return BenchmarkResult(
        count=len(values),
        radix=radix,
        max_width=max((len(v) for v in values), default=0),
        passes=sorter.passes,
        radix_sort_s=min(radix_times),
        builtin_sort_s=min(builtin_times),
        matches=list(iter_values(rear)) == expected,
    )
