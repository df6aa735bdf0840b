"""Tests for benchmark helpers."""

import random

from cll_radixsort.benchmark import benchmark_sort, generate_values


class TestGenerateValues:
    """Tests for generate_values function."""

    def test_shape(self):
        """Values have 1 to max_width digits of the radix."""
        values = generate_values(200, 16, 5, random.Random(1))

        assert len(values) == 200
        for value in values:
            assert 1 <= len(value) <= 5
            assert all(c in "0123456789abcdef" for c in value)

    def test_reproducible(self):
        """The same seed gives the same values."""
        first = generate_values(50, 10, 4, random.Random(7))
        second = generate_values(50, 10, 4, random.Random(7))

        assert first == second


class TestBenchmarkSort:
    """Tests for benchmark_sort function."""

    def test_results_agree(self):
        """The radix sort agrees with sorted() and reports its passes."""
        values = generate_values(500, 10, 6, random.Random(3))

        result = benchmark_sort(values, 10, repeat=2)

        assert result.matches
        assert result.count == 500
        assert result.passes == result.max_width
        assert result.radix_sort_s >= 0
        assert result.builtin_sort_s >= 0

    def test_no_values(self):
        """An empty input benchmarks without error."""
        result = benchmark_sort([], 16, repeat=1)

        assert result.matches
        assert result.count == 0
        assert result.passes == 0
