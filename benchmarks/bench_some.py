"""Benchmarks for Some2 and Some3.

Run with: pytest benchmarks/bench_some.py --benchmark-only -v
"""

from someval import Some2, Some2A, Some3, Some3ABC, Some3AC

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark variant construction."""

    def test_some2_variant(self, benchmark):
        """Benchmark direct Some2A creation."""
        benchmark(Some2A, 42)

    def test_some3_variant(self, benchmark):
        """Benchmark direct Some3ABC creation."""
        benchmark(Some3ABC, 42, 'x', True)

    def test_some2_from_tuple(self, benchmark):
        benchmark(Some2.from_tuple, (13, 'Bob'))


# =============================================================================
# Fallible construction benchmarks
# =============================================================================


class TestFromOptions:
    """Benchmark try_from_options across branches."""

    def test_some2_first_branch(self, benchmark):
        benchmark(Some2.try_from_options, 42, None)

    def test_some3_last_branch(self, benchmark):
        """The all-slots case falls through every other case."""
        benchmark(Some3.try_from_options, 42, 'x', True)

    def test_some3_all_empty(self, benchmark):
        benchmark(Some3.try_from_options, None, None, None)


# =============================================================================
# Decomposition benchmarks
# =============================================================================


class TestDecomposition:
    """Benchmark into_options and accessors."""

    def test_some3_into_options(self, benchmark):
        value = Some3AC(42, False)
        benchmark(value.into_options)

    def test_some3_accessor(self, benchmark):
        value = Some3AC(42, False)
        benchmark(value.get_c)
