"""Benchmarks for iterators.

Run with: uv run pytest benchmarks/bench_iterator.py --benchmark-only -v
"""

from oxiter import Some, from_iter, repeat, successors

ITEMS = list(range(1_000))


# =============================================================================
# Source benchmarks
# =============================================================================


class TestSources:
    """Benchmark draining sources."""

    def test_from_iter_count(self, benchmark):
        """Benchmark counting a from_iter source."""
        benchmark(lambda: from_iter(ITEMS).count())

    def test_python_iteration(self, benchmark):
        """Benchmark a for loop over an Iterator."""

        def loop():
            total = 0
            for item in from_iter(ITEMS):
                total += item
            return total

        benchmark(loop)

    def test_successors(self, benchmark):
        """Benchmark successors bounded by take."""
        benchmark(lambda: successors(Some(0), lambda x: Some(x + 1)).take(1_000).count())


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark combinator pipelines."""

    def test_map_filter(self, benchmark):
        """Benchmark map + filter + fold."""

        def pipeline():
            return (
                from_iter(ITEMS)
                .map(lambda x: x * 2)
                .filter(lambda x: x % 3 == 0)
                .fold(0, lambda a, b: a + b)
            )

        benchmark(pipeline)

    def test_zip_enumerate(self, benchmark):
        """Benchmark zip + enumerate."""
        benchmark(lambda: from_iter(ITEMS).zip(repeat('x')).enumerate().count())

    def test_peekable(self, benchmark):
        """Benchmark peek before every next."""

        def peek_all():
            it = from_iter(ITEMS).peekable()
            while it.peek().is_some():
                it.next()

        benchmark(peek_all)

    def test_flatten(self, benchmark):
        """Benchmark flatten over small inner lists."""
        nested = [ITEMS[i : i + 10] for i in range(0, len(ITEMS), 10)]
        benchmark(lambda: from_iter(nested).flatten().count())
